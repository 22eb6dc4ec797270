import argparse
import json
import logging
import os
import sys

from PySide6 import QtCore, QtWidgets

from springline.core import Settings, load_settings
from springline.menu import Bar
from springline.widgets import CurveCanvasWidget

log = logging.getLogger(__name__)

DEFAULT_STYLE = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "style", "main.qss")


class MainWindow(QtWidgets.QWidget):
    def __init__(self, settings: Settings):
        super().__init__()
        self.setWindowTitle("springline")

        self.layout = QtWidgets.QVBoxLayout(self)

        self.canvas = CurveCanvasWidget(settings, parent=self)
        self.top_bar = Bar(self.canvas)

        self.layout.addWidget(self.top_bar, alignment=QtCore.Qt.AlignmentFlag.AlignTop)
        self.layout.addWidget(self.canvas, alignment=QtCore.Qt.AlignmentFlag.AlignCenter)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="springline", description="Spring-driven cubic Bézier curve.")
    parser.add_argument("--settings", help="JSON file overriding the default settings")
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Qt stylesheet to apply")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        settings = load_settings(args.settings) if args.settings else Settings()
    except (OSError, json.JSONDecodeError, ValueError, TypeError) as e:
        log.error("Could not load settings: %s", e)
        return 2

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])

    if args.style and os.path.exists(args.style):
        with open(args.style, "r") as f:
            app.setStyleSheet(f.read())
    else:
        log.warning("Stylesheet not found: %s", args.style)

    widget = MainWindow(settings)
    widget.show()
    log.info("springline started (%dx%d)", settings.canvas_width, settings.canvas_height)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
