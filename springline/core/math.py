import math

Point = tuple[float, float]
Curve = tuple[Point, Point, Point, Point]


def add(a: Point, b: Point) -> Point:
    return a[0] + b[0], a[1] + b[1]


def dist2(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def curve_point(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    """
    Evaluate the cubic Bézier polynomial at t:
        B(t) = (1-t)³p0 + 3(1-t)²t p1 + 3(1-t)t² p2 + t³p3
    Any real t is accepted; callers keep it in [0, 1].
    """
    u = 1.0 - t
    uu = u * u
    tt = t * t
    uuu = uu * u
    ttt = tt * t
    x = uuu * p0[0] + 3.0 * uu * t * p1[0] + 3.0 * u * tt * p2[0] + ttt * p3[0]
    y = uuu * p0[1] + 3.0 * uu * t * p1[1] + 3.0 * u * tt * p2[1] + ttt * p3[1]
    return (x, y)


def curve_tangent(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    """
    First derivative of the cubic at t:
        B'(t) = 3(1-t)²(p1-p0) + 6(1-t)t(p2-p1) + 3t²(p3-p2)
    """
    u = 1.0 - t
    a = 3.0 * u * u
    b = 6.0 * u * t
    c = 3.0 * t * t
    x = a * (p1[0] - p0[0]) + b * (p2[0] - p1[0]) + c * (p3[0] - p2[0])
    y = a * (p1[1] - p0[1]) + b * (p2[1] - p1[1]) + c * (p3[1] - p2[1])
    return (x, y)


def normalize(v: Point) -> Point:
    # zero-length vectors map to the zero vector
    length = math.hypot(v[0], v[1])
    if length == 0.0:
        return (0.0, 0.0)
    return (v[0] / length, v[1] / length)
