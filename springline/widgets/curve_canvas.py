import logging

from PySide6 import QtCore, QtGui, QtWidgets

from springline.core import FpsCounter, FrameClock, Point, Settings, SpringCurve
from springline.widgets.utils import point_to_qpoint, polyline_qpath, qpoint_to_point

log = logging.getLogger(__name__)

CURVE_COLOR = QtGui.QColor("#4a5568")
TANGENT_COLOR = QtGui.QColor("#f56565")
GUIDE_COLOR = QtGui.QColor("#cbd5e0")
LABEL_COLOR = QtGui.QColor("#2d3748")
ENDPOINT_COLOR = QtGui.QColor("#48bb78")
P1_COLOR = QtGui.QColor("#4299e1")
P2_COLOR = QtGui.QColor("#9f7aea")
MARKER_OUTLINE = QtGui.QColor("#ffffff")


class CurveCanvasWidget(QtWidgets.QWidget):
    """
    Frame driver for a SpringCurve.
    Owns the tick timer, the monotonic clock and the latest pointer position;
    every tick steps the rig once and schedules one repaint.
    """

    fpsChanged = QtCore.Signal(int)    # emitted when a new FPS reading is ready

    def __init__(self, settings: Settings | None = None, parent=None):
        super().__init__(parent)
        self._settings = settings or Settings()
        s = self._settings

        self.setFixedSize(s.canvas_width, s.canvas_height)
        self.setMouseTracking(True)
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_AcceptTouchEvents, True)

        # model
        self._rig = SpringCurve(s.canvas_width, s.canvas_height, s)
        self._pointer: Point = self._rig.center

        # clocks
        self._elapsed = QtCore.QElapsedTimer()
        self._clock = FrameClock(s.nominal_frame_ms, s.max_frame_scale)
        self._fps = FpsCounter(s.fps_update_interval_ms)

        self._timer = QtCore.QTimer(self)
        self._timer.setTimerType(QtCore.Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_frame)
        self.start()

    # --- public API -------------------------
    @property
    def rig(self) -> SpringCurve:
        return self._rig

    @property
    def pointer(self) -> Point:
        return self._pointer

    def start(self) -> None:
        if self._timer.isActive():
            return
        self._elapsed.start()
        now = self._now_ms()
        self._clock.start(now)
        self._fps.start(now)
        self._timer.start(max(1, round(self._settings.nominal_frame_ms)))
        log.info("Frame timer started (%d ms)", self._timer.interval())

    def stop(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
            log.info("Frame timer stopped")

    @QtCore.Slot()
    def reset(self) -> None:
        self._rig.reset()
        self._pointer = self._rig.center
        self.update()

    # --- internals --------------------------
    def _now_ms(self) -> float:
        return self._elapsed.nsecsElapsed() / 1_000_000.0

    @QtCore.Slot()
    def _on_frame(self) -> None:
        now = self._now_ms()
        dt = self._clock.tick(now)
        self._rig.update(self._pointer, dt)
        self.update()
        fps = self._fps.tick(now)
        if fps is not None:
            self.fpsChanged.emit(fps)

    # ---- pointer events -----------------------------------------------------
    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        self._pointer = qpoint_to_point(e.position())

    def event(self, e: QtCore.QEvent) -> bool:
        if e.type() in (QtCore.QEvent.Type.TouchBegin, QtCore.QEvent.Type.TouchUpdate):
            points = e.points()
            if points:
                self._pointer = qpoint_to_point(points[0].position())
            e.accept()
            return True
        return super().event(e)

    def closeEvent(self, e: QtGui.QCloseEvent):
        self.stop()
        super().closeEvent(e)

    # ---- painting -----------------------------------------------------------
    def _draw_curve(self, p: QtGui.QPainter) -> None:
        pen = QtGui.QPen(CURVE_COLOR, 3.0)
        pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(QtCore.Qt.PenJoinStyle.RoundJoin)
        p.setPen(pen)
        p.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        p.drawPath(polyline_qpath(self._rig.path()))

    def _draw_tangents(self, p: QtGui.QPainter) -> None:
        pen = QtGui.QPen(TANGENT_COLOR, 2.0)
        for sample in self._rig.tangents():
            a, b = sample.segment()
            p.setPen(pen)
            p.drawLine(point_to_qpoint(a), point_to_qpoint(b))
            p.setPen(QtCore.Qt.PenStyle.NoPen)
            p.setBrush(TANGENT_COLOR)
            p.drawEllipse(point_to_qpoint(sample.point), 3.0, 3.0)

    def _draw_control_points(self, p: QtGui.QPainter) -> None:
        p.setPen(QtGui.QPen(GUIDE_COLOR, 1.0, QtCore.Qt.PenStyle.DashLine))
        p.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        p.drawPath(polyline_qpath(self._rig.control_polygon()))

        font = QtGui.QFont("sans-serif", 9)
        font.setBold(True)
        p.setFont(font)

        r = 8.0
        markers = (
            (self._rig.p0, ENDPOINT_COLOR, "P₀"),
            (self._rig.p1.position, P1_COLOR, "P₁"),
            (self._rig.p2.position, P2_COLOR, "P₂"),
            (self._rig.p3, ENDPOINT_COLOR, "P₃"),
        )
        for pt, color, label in markers:
            center = point_to_qpoint(pt)
            p.setPen(QtGui.QPen(MARKER_OUTLINE, 2.0))
            p.setBrush(color)
            p.drawEllipse(center, r, r)

            p.setPen(LABEL_COLOR)
            box = QtCore.QRectF(pt[0] - 20.0, pt[1] - 15.0 - 14.0, 40.0, 14.0)
            p.drawText(box, QtCore.Qt.AlignmentFlag.AlignCenter, label)

    def paintEvent(self, _):
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)

        # curve, then tangents, then control points on top
        self._draw_curve(p)
        self._draw_tangents(p)
        self._draw_control_points(p)

        p.end()
