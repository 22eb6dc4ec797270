from dataclasses import dataclass
from typing import Iterator

from .math import Point, curve_point, curve_tangent, normalize

DEFAULT_RESOLUTION = 0.01
DEFAULT_TANGENT_COUNT = 15
DEFAULT_TANGENT_LENGTH = 40.0

# tolerance for snapping the last parameter onto t = 1
_T_EPS = 1e-9


@dataclass(frozen=True)
class Sample:
    point: Point
    tangent: Point
    length: float = DEFAULT_TANGENT_LENGTH

    def segment(self) -> tuple[Point, Point]:
        """Endpoints of the tangent line of `length` centred on `point`."""
        h = self.length * 0.5
        (x, y), (tx, ty) = self.point, self.tangent
        return (x - tx * h, y - ty * h), (x + tx * h, y + ty * h)


class PathSamples:
    """
    Lazy sequence of curve positions at t = 0, r, 2r, ... with both endpoints
    included. Every iteration recomputes from the four points.
    """

    def __init__(self, p0: Point, p1: Point, p2: Point, p3: Point, resolution: float = DEFAULT_RESOLUTION):
        if not (0.0 < resolution <= 1.0):
            raise ValueError(f"resolution must be in (0, 1], got {resolution}")
        self._pts = (p0, p1, p2, p3)
        self.resolution = resolution
        steps = int(1.0 / resolution + _T_EPS)
        self._steps = steps
        # a closing sample is needed when r does not divide 1
        self._tail = steps * resolution < 1.0 - _T_EPS

    def params(self) -> Iterator[float]:
        for i in range(self._steps + 1):
            t = i * self.resolution
            yield 1.0 if t > 1.0 - _T_EPS else t
        if self._tail:
            yield 1.0

    def __iter__(self) -> Iterator[Point]:
        p0, p1, p2, p3 = self._pts
        for t in self.params():
            yield curve_point(t, p0, p1, p2, p3)

    def __len__(self) -> int:
        return self._steps + 1 + int(self._tail)


def sample_path(p0: Point, p1: Point, p2: Point, p3: Point,
                resolution: float = DEFAULT_RESOLUTION) -> PathSamples:
    return PathSamples(p0, p1, p2, p3, resolution)


def sample_tangents(p0: Point, p1: Point, p2: Point, p3: Point,
                    count: int = DEFAULT_TANGENT_COUNT,
                    length: float = DEFAULT_TANGENT_LENGTH) -> list[Sample]:
    """
    Return count + 1 samples at t = i / count (i = 0..count), each holding the
    curve point and its unit tangent (zero where the derivative vanishes).
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    out: list[Sample] = []
    for i in range(count + 1):
        t = i / count
        point = curve_point(t, p0, p1, p2, p3)
        tangent = normalize(curve_tangent(t, p0, p1, p2, p3))
        out.append(Sample(point, tangent, length))
    return out
