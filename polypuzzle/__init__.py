from polypuzzle.matcher import Config, MatchResult, best_match
from polypuzzle.reader import PolygonParseError, read_cases, read_polygons
from polypuzzle.shapes.geometry import Point, Polygon, Segment
