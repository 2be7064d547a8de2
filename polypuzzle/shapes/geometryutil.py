"""
Polygon against polygon predicates: overlap detection and shared boundary.
"""
from itertools import islice

from polypuzzle.shapes.geometry import Segment, PolygonBound
from polypuzzle.shapes.geometrybase import EPS, angle, ccw
from polypuzzle.utils import alternate_offsets


class SearchState:
    """Vertex indices where the last overlap between two polygons was found.

    Owned by the caller and handed back on every call to ``intersects`` so
    the next search starts around the previous hit.
    """

    def __init__(self, i=0, j=0):
        self.i = i
        self.j = j

    def __repr__(self):
        return 'SearchState<%s,%s>' % (self.i, self.j)


# True if the boundaries around vertex i of A and vertex j of B overlap
def collides(A, B, i, j):
    a0, a1, a2 = A.vertices_at(i)
    b0, b1, b2 = B.vertices_at(j)

    if Segment(a1, a2).intersects(Segment(b1, b2)):
        return True

    # a vertex resting on the other edge, with a neighbour on its inner side
    if Segment(b1, b2).contains_except_endpoints(a1) and (ccw(b1, b2, a2) or ccw(b1, b2, a0)):
        return True
    if Segment(a1, a2).contains_except_endpoints(b1) and (ccw(a1, a2, b2) or ccw(a1, a2, b0)):
        return True

    if a1 == b1:
        # interior wedge of B at the shared vertex
        wedge = angle(b2 - b1, b0 - b1)

        theta = angle(b2 - b1, a0 - b1)
        if EPS < theta < wedge - EPS:
            return True

        theta = angle(b2 - b1, a2 - b1)
        if 0 <= theta < wedge - EPS:
            return True

    return False


def intersects(A, B, state):
    """Overlap test seeded by the last hit.

    Offsets 0, 1, -1, 2, -2, ... around ``state`` are tried on each polygon,
    nearest first. The first colliding pair is stored back in ``state``.
    Callers shifting one polygon by increasing amounts get most answers
    within the first few tries.
    """
    for i in islice(alternate_offsets(), len(A)):
        for j in islice(alternate_offsets(), len(B)):
            if collides(A, B, state.i + i, state.j + j):
                state.i = (state.i + i) % len(A)
                state.j = (state.j + j) % len(B)
                return True

    return False


# all pairs, no memory. Slow, used to check the seeded search
def intersects_exhaustive(A, B):
    for i in range(len(A)):
        for j in range(len(B)):
            if collides(A, B, i, j):
                return True
    return False


def common_boundary(A, B):
    total = 0
    for e1 in A.edges():
        for e2 in B.edges():
            shared = e1.common_boundary(e2)
            if shared is not None:
                total += shared.length()
    return total


def common_boundary_segments(A, B):
    segments = []
    for e1 in A.edges():
        for e2 in B.edges():
            shared = e1.common_boundary(e2)
            if shared is not None and shared.length() > EPS:
                segments.append(shared)
    return segments


# returns the area of the polygon, assuming no self-intersections
# a positive area indicates counter-clockwise winding direction
def polygon_area(polygon):
    area = 0
    j = len(polygon) - 1
    for i in range(len(polygon)):
        area += (polygon[j].x + polygon[i].x) * (polygon[i].y - polygon[j].y)
        j = i

    return 0.5 * area


def orient_ccw(polygon):
    if polygon_area(polygon) < 0:
        return polygon.reversed_winding()
    return polygon.clone()


# returns the rectangular bounding box of the given polygons
def get_polygon_bounds(polygons):
    points = [point for polygon in polygons for point in polygon]
    if not points:
        return None

    xmin = min(point.x for point in points)
    xmax = max(point.x for point in points)
    ymin = min(point.y for point in points)
    ymax = max(point.y for point in points)

    return PolygonBound(
        x=xmin,
        y=ymin,
        width=xmax - xmin,
        height=ymax - ymin
    )
