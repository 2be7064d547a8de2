"""
Reads polygon pairs from text.

Each polygon is a line holding its vertex count followed by one ``x y``
line per vertex. Polygons come two by two, one pair per case. Blank lines
are skipped.
"""
import math

from polypuzzle.shapes.geometry import Point, Polygon
from polypuzzle.utils import parse_int, parse_float, log


class PolygonParseError(ValueError):
    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = 'line %s: %s' % (line_number, message)
        super().__init__(message)
        self.line_number = line_number


def _numbered_lines(stream):
    for line_number, line in enumerate(stream, 1):
        line = line.strip()
        if line:
            yield line_number, line


def parse_point(line, line_number=None):
    fields = line.replace(',', ' ').split()
    if len(fields) != 2:
        raise PolygonParseError('expected "x y", got %r' % line, line_number)

    x, y = parse_float(fields[0]), parse_float(fields[1])
    if x is None or y is None or not math.isfinite(x) or not math.isfinite(y):
        raise PolygonParseError('invalid vertex %r' % line, line_number)
    return Point(x, y)


def read_polygons(stream, min_vertices=3):
    lines = _numbered_lines(stream)
    for line_number, line in lines:
        count = parse_int(line)
        if count is None:
            raise PolygonParseError('expected a vertex count, got %r' % line, line_number)
        if count < min_vertices:
            raise PolygonParseError('a polygon needs at least %s vertices, got %s' % (min_vertices, count),
                                    line_number)

        polygon = Polygon()
        for _ in range(count):
            try:
                vertex_line_number, vertex_line = next(lines)
            except StopIteration:
                raise PolygonParseError('polygon declared with %s vertices ends after %s'
                                        % (count, len(polygon)), line_number)
            polygon.append(parse_point(vertex_line, vertex_line_number))

        yield polygon


def read_cases(stream, min_vertices=3):
    polygons = list(read_polygons(stream, min_vertices))
    if len(polygons) % 2 != 0:
        raise PolygonParseError('polygons come in pairs, got %s' % len(polygons))

    log('read %s cases' % (len(polygons) // 2))
    return list(zip(polygons[::2], polygons[1::2]))


# expected boundary lengths, one per line
def read_expected(stream):
    expected = []
    for line_number, line in _numbered_lines(stream):
        value = parse_float(line)
        if value is None:
            raise PolygonParseError('expected a number, got %r' % line, line_number)
        expected.append(value)
    return expected
