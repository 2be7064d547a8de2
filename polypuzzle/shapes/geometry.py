import math

from polypuzzle.shapes.geometrybase import EPS, almost_equal, orientation


class Point(object):
    def __init__(self, x=0.0, y=0.0):
        self.x = x
        self.y = y

    def __repr__(self):
        return 'Point<%s,%s>' % (self.x, self.y)

    # vertices closer than EPS on both axes are the same vertex
    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.almost_equal(other)

    __hash__ = None

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return self.negate()

    def almost_equal(self, other):
        return almost_equal(self.x, other.x) and almost_equal(self.y, other.y)

    def negate(self):
        return Point(-self.x, -self.y)

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def cross(self, other):
        return self.x * other.y - self.y * other.x

    def dist(self, other):
        return math.hypot(self.x - other.x, self.y - other.y)

    # counter-clockwise rotation around the origin, theta in radians
    def rotate(self, theta):
        cos, sin = math.cos(theta), math.sin(theta)
        return Point(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def clone(self):
        return Point(self.x, self.y)

    @property
    def xy(self):
        return self.x, self.y


class Segment(object):
    def __init__(self, p, q):
        self.p = p
        self.q = q

    def __repr__(self):
        return 'Segment<%s,%s>' % (self.p, self.q)

    def is_horizontal(self):
        return almost_equal(self.p.y, self.q.y)

    def face_right(self):
        return not self.is_horizontal() and self.p.y < self.q.y

    def face_left(self):
        return not self.is_horizontal() and self.p.y > self.q.y

    # signed x distance from v to the line supporting the segment
    def horizontal_distance(self, v):
        if almost_equal(self.p.x, self.q.x):
            return v.x - self.p.x
        slope = (self.q.y - self.p.y) / (self.q.x - self.p.x)
        b = self.p.y - self.p.x * slope
        return v.x - (v.y - b) / slope

    def contains_except_endpoints(self, r):
        if orientation(self.p, self.q, r) != 0:
            return False
        return (self.q - self.p).dot(r - self.p) > EPS and (self.p - self.q).dot(r - self.q) > EPS

    def contains(self, r):
        return self.p == r or self.q == r or self.contains_except_endpoints(r)

    def length(self):
        return self.p.dist(self.q)

    def intersects(self, other):
        """Proper crossing test.

        Touching at an endpoint or overlapping along a common line is not a
        crossing: two polygons may share boundary without overlapping.
        """
        o1 = orientation(self.p, self.q, other.p)
        o2 = orientation(self.p, self.q, other.q)
        if o1 * o2 >= 0:
            return False

        o3 = orientation(other.p, other.q, self.p)
        o4 = orientation(other.p, other.q, self.q)
        return o3 * o4 < 0

    # returns the piece of boundary shared with other, or None
    def common_boundary(self, other):
        if self.contains(other.p) and self.contains(other.q):
            return other

        if other.contains(self.p) and other.contains(self.q):
            return self

        if self.contains(other.p) and other.contains(self.p):
            return Segment(self.p, other.p)
        if self.contains(other.p) and other.contains(self.q):
            return Segment(self.q, other.p)
        if self.contains(other.q) and other.contains(self.p):
            return Segment(self.p, other.q)
        if self.contains(other.q) and other.contains(self.q):
            return Segment(self.q, other.q)
        return None


class PolygonBound:
    def __init__(self, x=None, y=None, width=None, height=None):
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class Polygon(list):
    """Closed loop of vertices, the last one joined back to the first.

    Indices wrap around in both directions. Transformations return new
    polygons and never share points with their source.
    """

    def __init__(self, *input_list):
        super().__init__(list(input_list))

    @classmethod
    def from_xy(cls, pairs):
        return cls(*(Point(float(x), float(y)) for x, y in pairs))

    def almost_equal(self, other):
        if len(other) != len(self):
            return False
        for i, op in enumerate(other):
            if not self[i].almost_equal(op):
                return False
        return True

    def clone(self):
        return Polygon(*(point.clone() for point in self))

    def vertex_at(self, i):
        return self[i % len(self)]

    def vertices_at(self, i):
        return self.vertex_at(i - 1), self.vertex_at(i), self.vertex_at(i + 1)

    def edges(self):
        for i in range(len(self)):
            yield Segment(self[i], self.vertex_at(i + 1))

    def vertices(self):
        for i in range(len(self)):
            yield self.vertices_at(i)

    def negate(self):
        return Polygon(*(point.negate() for point in self))

    def translate(self, dx, dy=0.0):
        return Polygon(*(Point(point.x + dx, point.y + dy) for point in self))

    def rotate(self, theta):
        return Polygon(*(point.rotate(theta) for point in self))

    def reversed_winding(self):
        return Polygon(*(point.clone() for point in reversed(self)))

    def rotations(self):
        """One canonical placement per edge.

        Placement i has vertex i+1 at the origin and vertex i on the positive
        x-axis, at the length of the edge. A counter-clockwise polygon then
        lies below the x-axis around that edge.
        """
        placements = []
        for i in range(len(self)):
            placement = self.translate(-self[i].x, -self[i].y)
            q = placement.vertex_at(i + 1)
            placement = placement.rotate(math.atan2(q.y, -q.x))
            q = placement.vertex_at(i + 1)
            placements.append(placement.translate(-q.x, -q.y))
        return placements

    @property
    def xy(self):
        return [point.x for point in self], [point.y for point in self]

    @property
    def x_y(self):
        return [(point.x, point.y) for point in self]
