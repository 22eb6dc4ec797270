NOMINAL_FRAME_MS = 16.67


class FrameClock:
    """
    Turns monotonic timestamps (ms) into a frame-relative dt: 1.0 is one
    nominal frame, clamped to [0, max_scale] so a long pause cannot blow up
    the integrator.
    """

    def __init__(self, nominal_frame_ms: float = NOMINAL_FRAME_MS, max_scale: float = 2.0):
        if nominal_frame_ms <= 0:
            raise ValueError(f"nominal_frame_ms must be > 0, got {nominal_frame_ms}")
        self.nominal_frame_ms = nominal_frame_ms
        self.max_scale = max_scale
        self._last: float | None = None

    def start(self, now_ms: float) -> None:
        self._last = now_ms

    def tick(self, now_ms: float) -> float:
        if self._last is None:
            self._last = now_ms
            return 0.0
        dt = (now_ms - self._last) / self.nominal_frame_ms
        self._last = now_ms
        return max(0.0, min(dt, self.max_scale))


class FpsCounter:
    def __init__(self, update_interval_ms: float = 500.0):
        self.update_interval_ms = update_interval_ms
        self.fps = 60
        self._frames = 0
        self._last_report: float | None = None

    def start(self, now_ms: float) -> None:
        self._frames = 0
        self._last_report = now_ms

    def tick(self, now_ms: float) -> int | None:
        """Count one frame; return the new rate once per interval, else None."""
        if self._last_report is None:
            self._last_report = now_ms
        self._frames += 1
        elapsed = now_ms - self._last_report
        if elapsed < self.update_interval_ms:
            return None
        self.fps = round(self._frames * 1000.0 / elapsed)
        self._frames = 0
        self._last_report = now_ms
        return self.fps
