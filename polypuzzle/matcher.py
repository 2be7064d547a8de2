"""
Best edge-to-edge fit of two polygons.

The first polygon is mirrored through the origin, both polygons are laid
with one edge on the x-axis (one placement per edge) and, for every pair
of placements, the first one slides along the axis over the second one.
The fit with the longest shared boundary and no overlap wins.
"""
import multiprocessing
from collections import namedtuple

from polypuzzle.shapes.geometry import Segment
from polypuzzle.shapes.geometrybase import EPS, ccw, range_contains
from polypuzzle.shapes.geometryutil import SearchState, intersects, common_boundary, \
    common_boundary_segments, orient_ccw
from polypuzzle.shapes.polylines import boundary_chains
from polypuzzle.utils import log


class Config:
    min_shift_gap = 0.1  # shifts closer than this to the previous one are the same contact
    workers = None  # processes for the rotation pairs, None for one per CPU


class SweepResult(namedtuple('SweepResult', ['boundary', 'polygon', 'shift'])):
    pass


class MatchResult(namedtuple('MatchResult', ['first', 'second', 'boundary'])):
    def segments(self):
        return common_boundary_segments(self.first, self.second)

    def chains(self):
        return boundary_chains(self.segments())

    def to_json(self):
        return {
            'boundary': self.boundary,
            'first': self.first.x_y,
            'second': self.second.x_y,
            'chains': [[point.xy for point in chain] for chain in self.chains()],
        }


def _face_left(triple):
    a, b, c = triple
    return Segment(a, b).face_left() or Segment(b, c).face_left()


def _face_right(triple):
    a, b, c = triple
    return Segment(a, b).face_right() or Segment(b, c).face_right()


def collect_shifts(edges, vertices, right, max_shift):
    """Offsets where a vertex of ``vertices`` meets a wall of ``edges``.

    ``edges`` slides toward increasing x when ``right`` is set, otherwise
    ``vertices`` does. Only convex vertices count, and only when one of
    their edges faces the wall, so the contact is flush rather than through
    material. Offsets outside (0, max_shift) are dropped.
    """
    shifts = []
    for wall in edges.edges():
        if wall.is_horizontal():
            continue

        for triple in vertices.vertices():
            a, b, c = triple
            if not ccw(a, b, c):
                continue
            if not range_contains(wall.p.y, wall.q.y, b.y):
                continue
            if wall.face_right() and not _face_left(triple):
                continue
            if wall.face_left() and not _face_right(triple):
                continue

            x = wall.horizontal_distance(b)
            if not right:
                x = -x
            if range_contains(EPS, max_shift - EPS, x):
                shifts.append(x)

    return shifts


def shift_candidates(moving, fixed, base1, base2):
    max_shift = base1 + base2
    shifts = [base1, base2]
    shifts.extend(collect_shifts(moving, fixed, True, max_shift))
    shifts.extend(collect_shifts(fixed, moving, False, max_shift))
    shifts.sort()
    return shifts


def base_distances(rotations):
    # length of the edge pegged on the x-axis in each placement
    return [rotation[i].dist(rotation.vertex_at(i + 1)) for i, rotation in enumerate(rotations)]


def optimal_shift(moving, fixed, base1, base2, min_gap=Config.min_shift_gap):
    """Slide ``moving`` over ``fixed`` and keep the best clear position.

    Shifts are applied in increasing order to a private copy of ``moving``,
    which is what lets one SearchState follow the contact point along the
    sweep.
    """
    moving = moving.clone()
    state = SearchState()
    best = SweepResult(0.0, None, 0.0)
    prev_shift = 0.0

    for x in shift_candidates(moving, fixed, base1, base2):
        if x - prev_shift < min_gap:
            continue

        delta = x - prev_shift
        for point in moving:
            point.x += delta
        prev_shift = x

        if intersects(moving, fixed, state):
            continue

        boundary = common_boundary(moving, fixed)
        if boundary > best.boundary:
            best = SweepResult(boundary, moving.clone(), x)

    return best


def _sweep_pair(argtuple):
    moving, fixed, base1, base2, min_gap = argtuple
    return optimal_shift(moving, fixed, base1, base2, min_gap)


def _run_sweeps(tasks, workers):
    if workers == 1 or len(tasks) < 2:
        return [_sweep_pair(task) for task in tasks]

    pool = multiprocessing.Pool(workers)
    try:
        return pool.map(_sweep_pair, tasks)
    finally:
        pool.close()
        pool.join()


def best_match(polygon1, polygon2, config=None):
    """Longest shared boundary between two non-overlapping polygons.

    Returns a MatchResult with the moved copy of polygon1, the placed copy
    of polygon2 and the boundary length. Ties keep the first pair of
    placements found, in (polygon1 edge, polygon2 edge) order, and the
    smallest shift within that pair.
    """
    config = config or Config()
    polygon1 = orient_ccw(polygon1)
    polygon2 = orient_ccw(polygon2)

    rotations1 = [rotation.negate() for rotation in polygon1.rotations()]
    rotations2 = polygon2.rotations()
    if not rotations1 or not rotations2:
        return MatchResult(polygon1, polygon2, 0.0)

    base1 = base_distances(rotations1)
    base2 = base_distances(rotations2)

    pairs = [(i, j) for i in range(len(rotations1)) for j in range(len(rotations2))]
    log('matching %s x %s placements' % (len(rotations1), len(rotations2)))

    tasks = [(rotations1[i], rotations2[j], base1[i], base2[j], config.min_shift_gap) for i, j in pairs]
    sweeps = _run_sweeps(tasks, config.workers)

    result = MatchResult(rotations1[0], rotations2[0], 0.0)
    for (_, j), sweep in zip(pairs, sweeps):
        if sweep.boundary > result.boundary:
            result = MatchResult(sweep.polygon, rotations2[j], sweep.boundary)

    log('best shared boundary %.12f' % result.boundary)
    return result
