from .curve_canvas import CurveCanvasWidget

__all__ = [
    "CurveCanvasWidget",
]
