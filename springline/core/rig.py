import logging

from .math import Point, Curve, add
from .physics import ControlPoint
from .sampler import PathSamples, Sample, sample_path, sample_tangents
from .settings import Settings

log = logging.getLogger(__name__)


class SpringCurve:
    """
    Headless model of the scene: a cubic Bézier with fixed endpoints P0/P3 on
    the horizontal centre line and two spring-driven interior points P1/P2
    chasing the pointer at fixed offsets.
    No Qt here; the host feeds the pointer and dt, and draws what comes back.
    """

    def __init__(self, width: float, height: float, settings: Settings | None = None):
        self.settings = settings or Settings()
        s = self.settings
        cx = width / 2
        cy = height / 2
        self.width = width
        self.height = height
        self.center: Point = (cx, cy)

        self._p0: Point = (s.endpoint_margin, cy)
        self._p3: Point = (width - s.endpoint_margin, cy)

        self.p1 = ControlPoint(add(self.center, s.p1_start_offset),
                               spring_constant=s.spring_constant, damping=s.damping)
        self.p2 = ControlPoint(add(self.center, s.p2_start_offset),
                               spring_constant=s.spring_constant, damping=s.damping)
        log.debug("SpringCurve %sx%s: p0=%s p3=%s", width, height, self._p0, self._p3)

    # read-only endpoints
    @property
    def p0(self) -> Point:
        return self._p0

    @property
    def p3(self) -> Point:
        return self._p3

    def update(self, pointer: Point, dt: float) -> None:
        """Retarget P1/P2 from the pointer, then advance both by dt."""
        s = self.settings
        self.p1.set_target(*add(pointer, s.p1_offset))
        self.p2.set_target(*add(pointer, s.p2_offset))
        self.p1.step(dt)
        self.p2.step(dt)

    def curve(self) -> Curve:
        return self._p0, self.p1.position, self.p2.position, self._p3

    def control_polygon(self) -> list[Point]:
        return list(self.curve())

    def path(self) -> PathSamples:
        return sample_path(*self.curve(), resolution=self.settings.curve_resolution)

    def tangents(self) -> list[Sample]:
        s = self.settings
        return sample_tangents(*self.curve(), count=s.tangent_count, length=s.tangent_length)

    def reset(self) -> None:
        self.p1.reset()
        self.p2.reset()
        log.debug("SpringCurve reset: p1=%s p2=%s", self.p1.position, self.p2.position)
