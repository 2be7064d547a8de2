from io import StringIO

import pytest
from pytest import raises

from polypuzzle.reader import PolygonParseError, read_cases, read_polygons, read_expected, parse_point
from polypuzzle.shapes.geometry import Point, Polygon

TWO_TRIANGLES = """3
0 0
3 0
0 4

3
1.5 -2
2.5e1 0
-7 3.25
"""


def test_read_polygons():
    polygons = list(read_polygons(StringIO(TWO_TRIANGLES)))
    assert len(polygons) == 2
    assert isinstance(polygons[0], Polygon)
    assert polygons[0].almost_equal(Polygon.from_xy([(0, 0), (3, 0), (0, 4)]))
    assert polygons[1].almost_equal(Polygon.from_xy([(1.5, -2), (25, 0), (-7, 3.25)]))


def test_read_cases():
    cases = read_cases(StringIO(TWO_TRIANGLES))
    assert len(cases) == 1
    first, second = cases[0]
    assert first[1] == Point(3, 0)
    assert second[2] == Point(-7, 3.25)


def test_read_cases_empty():
    assert read_cases(StringIO('')) == []
    assert read_cases(StringIO('\n\n')) == []


def test_parse_point():
    assert parse_point('1 2') == Point(1, 2)
    assert parse_point('  -1.5\t2e-3 ') == Point(-1.5, 0.002)
    assert parse_point('1,2') == Point(1, 2)


@pytest.mark.parametrize('line', ['1', '1 2 3', 'a b', '1 nan', 'inf 0', ''])
def test_parse_point_invalid(line):
    with raises(PolygonParseError):
        parse_point(line)


@pytest.mark.parametrize(
    ['text', 'line_number'],
    (
            ('three\n0 0\n1 0\n0 1\n', 1),
            ('2\n0 0\n1 0\n', 1),
            ('3\n0 0\n1 0\n', 1),
            ('3\n0 0\n1 x\n0 1\n', 3),
            ('3\n0 0\n1 0\n0 1\n\n\n4\n0 0\n', 7),
            ('3\n0 0\n1 0\n0 1\n3\n0 0\n1 0\n0 1\n1.5\n', 9),
    ))
def test_read_polygons_errors(text, line_number):
    with raises(PolygonParseError) as e:
        list(read_polygons(StringIO(text)))
    assert e.value.line_number == line_number
    assert str(e.value).startswith('line %s: ' % line_number)


def test_min_vertices():
    polygons = list(read_polygons(StringIO('2\n0 0\n1 0\n'), min_vertices=2))
    assert len(polygons[0]) == 2


def test_read_cases_odd():
    with raises(PolygonParseError) as e:
        read_cases(StringIO('3\n0 0\n1 0\n0 1\n'))
    assert e.value.line_number is None


def test_parse_error_is_value_error():
    with raises(ValueError):
        read_cases(StringIO('x\n'))


def test_read_expected():
    assert read_expected(StringIO('4.000000000000\n\n2.5\n')) == [4, 2.5]
    with raises(PolygonParseError) as e:
        read_expected(StringIO('1\nfour\n'))
    assert e.value.line_number == 2
