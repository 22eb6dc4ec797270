from PySide6 import QtCore, QtGui

from springline.core import Point


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return float(p.x()), float(p.y())

def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])

def polyline_qpath(points) -> QtGui.QPainterPath:
    path = QtGui.QPainterPath()
    it = iter(points)
    first = next(it, None)
    if first is None:
        return path
    path.moveTo(point_to_qpoint(first))
    for pt in it:
        path.lineTo(point_to_qpoint(pt))
    return path
