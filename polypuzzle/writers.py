import os

import simplejson
from svgwrite import Drawing
from svgwrite.container import Group
from svgwrite.path import Path

from polypuzzle.shapes.geometry import Point, Polygon
from polypuzzle.shapes.geometrybase import is_zero
from polypuzzle.shapes.geometryutil import get_polygon_bounds, common_boundary_segments
from polypuzzle.shapes.polylines import boundary_chains
from polypuzzle.utils import log

FACTOR = 20
MARGIN = 10
COLOR_POLYGON_1 = '#5b65b3'
COLOR_POLYGON_2 = '#a64459'
COMMON_BOUNDARY_COLOR = '#00FF00'
COMMON_BOUNDARY_STROKE_WIDTH = 3


class ResultWriter:
    def __init__(self, results_dir):
        self.results_dir = results_dir

    def write_result(self, case_number, result):
        raise NotImplementedError

    def close(self):
        pass


class DesmosWriter(ResultWriter):
    """All cases in one text file, as expressions for the Desmos calculator."""

    def __init__(self, results_dir):
        super().__init__(results_dir)
        self.file = open(os.path.join(results_dir, 'desmos.txt'), 'w')

    @staticmethod
    def polygon_expression(polygon):
        return 'polygon(%s)' % ', '.join('(%.6f, %.6f)' % point.xy for point in polygon)

    def write_result(self, case_number, result):
        if is_zero(result.boundary):
            self.file.write('(case #%s) No solution found\n' % case_number)
        else:
            self.file.write('(case #%s) Solution found (%.12f)\n%s\n\n%s\n' % (
                case_number, result.boundary,
                self.polygon_expression(result.first),
                self.polygon_expression(result.second)))
        self.file.write('\n')

    def close(self):
        self.file.close()


def path_data(points, close=False):
    d = 'M %.6f,%.6f' % points[0].xy
    for point in points[1:]:
        d += ' L %.6f,%.6f' % point.xy
    if close:
        d += ' Z'
    return d


class SvgWriter(ResultWriter):
    """One picture per case, shared boundary runs drawn over the polygons."""

    def write_result(self, case_number, result):
        first = self.to_image(result.first)
        second = self.to_image(result.second)

        if is_zero(result.boundary):
            # nothing to show together, lay the pieces side by side
            first = self.to_corner([first])[0]
            second = self.to_corner([second])[0]
            bounds = get_polygon_bounds([first])
            second = second.translate(bounds.width + MARGIN)
        else:
            first, second = self.to_corner([first, second])

        first = first.translate(MARGIN, MARGIN)
        second = second.translate(MARGIN, MARGIN)
        bounds = get_polygon_bounds([first, second])
        width = bounds.x + bounds.width + MARGIN
        height = bounds.y + bounds.height + MARGIN

        svg_file = os.path.join(self.results_dir, '%02d.svg' % case_number)
        dwg = Drawing(svg_file, profile='tiny', viewBox='0 0 %.3f %.3f' % (width, height))
        dwg.add(Path(d=path_data(first, close=True), fill=COLOR_POLYGON_1))
        dwg.add(Path(d=path_data(second, close=True), fill=COLOR_POLYGON_2))

        group = Group()
        for chain in boundary_chains(common_boundary_segments(first, second)):
            if len(chain) < 2:
                continue
            path = Path(d=path_data(chain))
            path.stroke(color=COMMON_BOUNDARY_COLOR, width=COMMON_BOUNDARY_STROKE_WIDTH, linecap='round')
            path.fill('none')
            group.add(path)
        dwg.add(group)

        log('SVG saving %s' % svg_file)
        dwg.save(pretty=True)

    # SVG y axis points down
    @staticmethod
    def to_image(polygon):
        return Polygon(*(Point(point.x * FACTOR, -point.y * FACTOR) for point in polygon))

    @staticmethod
    def to_corner(polygons):
        bounds = get_polygon_bounds(polygons)
        return [polygon.translate(-bounds.x, -bounds.y) for polygon in polygons]


class JsonWriter(ResultWriter):
    """Every case in a single results.json, written on close."""

    def __init__(self, results_dir):
        super().__init__(results_dir)
        self.cases = []

    def write_result(self, case_number, result):
        case = {'case': case_number}
        case.update(result.to_json())
        self.cases.append(case)

    def close(self):
        json_file = os.path.join(self.results_dir, 'results.json')
        with open(json_file, 'w') as out:
            simplejson.dump(self.cases, out, indent=2)
        log('JSON saved %s' % json_file)


WRITERS = {
    'desmos': DesmosWriter,
    'svg': SvgWriter,
    'json': JsonWriter,
}


def make_writers(names, results_dir):
    os.makedirs(results_dir, exist_ok=True)
    return [WRITERS[name](results_dir) for name in names]
