import math

EPS = pow(10, -9)  # every tolerance comparison in the package goes through this value


def is_zero(a, tolerance=EPS):
    return abs(a) < tolerance


def almost_equal(a, b, tolerance=EPS):
    if a is None and b is None: return True
    return is_zero(a - b, tolerance)


# True if x is between a and b (in either order), padded by EPS on both ends
def range_contains(a, b, x):
    if a > b:
        a, b = b, a
    return a <= x + EPS and x - EPS <= b


# -1, 0 or 1 depending on the turn o -> a -> b (clockwise, collinear, counter-clockwise)
def orientation(o, a, b):
    cross = (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)
    if is_zero(cross):
        return 0
    return 1 if cross > 0 else -1


def ccw(o, a, b):
    return orientation(o, a, b) == 1


# counter-clockwise angle from vector a to vector b, in [0, 2*pi)
def angle(a, b):
    cross = a.x * b.y - a.y * b.x
    dot = a.x * b.x + a.y * b.y
    theta = math.atan2(cross, dot)
    if theta < 0:
        theta += 2 * math.pi
    return theta
