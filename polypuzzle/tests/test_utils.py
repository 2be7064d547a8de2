from itertools import islice

from polypuzzle.utils import alternate_offsets, parse_int, parse_float


def test_alternate_offsets():
    assert list(islice(alternate_offsets(), 10)) == [0, 1, -1, 2, -2, 3, -3, 4, -4, 5]


def test_alternate_offsets_cover_all_indices():
    for n in range(1, 12):
        assert sorted(i % n for i in islice(alternate_offsets(), n)) == list(range(n))


def test_parse():
    assert parse_int('12') == 12
    assert parse_int('1.5') is None
    assert parse_int('x') is None
    assert parse_float('1.5') == 1.5
    assert parse_float('-2e3') == -2000
    assert parse_float('x') is None
