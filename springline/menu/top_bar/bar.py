from PySide6 import QtCore, QtWidgets

from springline.widgets import CurveCanvasWidget


class Bar(QtWidgets.QToolBar):
    def __init__(self, canvas: CurveCanvasWidget):
        super().__init__()

        self.canvas = canvas
        self.reset_button = QtWidgets.QPushButton("reset")
        self.fps_label = QtWidgets.QLabel()
        self.setObjectName("Bar")
        self.setMovable(False)
        self.setFloatable(False)
        self.setIconSize(QtCore.QSize(18, 18))

        spacer = QtWidgets.QWidget()
        spacer.setSizePolicy(QtWidgets.QSizePolicy.Policy.Expanding, QtWidgets.QSizePolicy.Policy.Preferred)

        self.addWidget(self.reset_button)
        self.addWidget(spacer)
        self.addWidget(self.fps_label)

        self.reset_button.clicked.connect(self._reset_canvas)
        self.canvas.fpsChanged.connect(self._on_fps_changed)
        self._on_fps_changed(60)

    @QtCore.Slot()
    def _reset_canvas(self):
        self.canvas.reset()

    @QtCore.Slot(int)
    def _on_fps_changed(self, fps: int):
        self.fps_label.setText(f"FPS: {fps}")
