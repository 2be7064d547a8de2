import random
from collections import deque

import pytest

from polypuzzle.shapes.geometry import Point, Segment
from polypuzzle.shapes.polylines import PathGroup, boundary_chains, try_merge


def seg(rnd, x0, y0, x1, y1):
    p, q = Point(x0, y0), Point(x1, y1)
    if rnd.random() > 0.5:
        p, q = q, p
    return Segment(p, q)


def test_paths_put():
    rnd = random.Random(0)
    group = PathGroup()
    assert len(group.paths) == 0

    group.put(seg(rnd, 0, 0, 0, 1))
    assert len(group.paths) == 1

    group.put(seg(rnd, 5, 5, 7, 8))
    assert len(group.paths) == 2

    group.put(seg(rnd, 100, 54, 7, 8))
    assert len(group.paths) == 2

    assert len(group.paths[0]) == 2
    assert len(group.paths[1]) == 3


@pytest.mark.parametrize(
    ['skip', 'expected', 'step'],
    (
            ([], 1, 1),
            ([0], 1, 1),
            ([50], 2, 1),
            ([50, 70], 3, 1),
            ([50, 69, 70], 3, 1),
            ([50, 68, 70], 4, 1),
            ([0, 149], 1, 1),
            ([0, 148], 2, 1),
            ([], 75, 2),
    ))
def test_chains_from_shuffled_segments(skip, expected, step):
    rnd = random.Random(42)
    for _ in range(5):
        segments = [seg(rnd, x, 10, x + 1, 10) for x in range(0, 150, step) if x not in skip]
        rnd.shuffle(segments)
        assert len(boundary_chains(segments)) == expected


def test_chain_follows_corners():
    rnd = random.Random(1)
    segments = [seg(rnd, 0, 0, 1, 0), seg(rnd, 1, 1, 0, 1), seg(rnd, 1, 0, 1, 1)]
    chains = boundary_chains(segments)
    assert len(chains) == 1
    assert len(chains[0]) == 4
    assert {chains[0][0].xy, chains[0][-1].xy} == {(0, 0), (0, 1)}


@pytest.mark.parametrize(
    ['s', 'd', 'result', 'd2'],
    (
            ([1, 2, 3], [4, 5, 6], False, [4, 5, 6]),
            ([6, 8, 9], [4, 5, 6], True, [4, 5, 6, 8, 9]),
            ([8, 9, 10], [4, 5, 6], False, [4, 5, 6]),
            ([9, 12, 14], [4, 8, 9], True, [4, 8, 9, 12, 14]),
            ([1, 2], [2, 3, 4], True, [1, 2, 3, 4]),
            ([9, 6], [4, 5, 6], True, [4, 5, 6, 9]),
            ([4, 7, 8], [4, 5, 6], True, [8, 7, 4, 5, 6]),
    ))
def test_try_merge(s, d, result, d2):
    dest = deque(d)
    assert try_merge(dest, deque(s)) == result
    assert list(dest) == d2
