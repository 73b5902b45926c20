#!/usr/bin/env python3
"""Custom Configuration Example

Demonstrates:
- Configuring dot count, sizes and spacing
- Colors as QColor objects, color names and RGBA tuples
- A half-circle angular range built from degrees
- Loading a configuration from a plain dict
"""

import sys

from PySide6 import QtWidgets
from PySide6.QtGui import QColor

from pycircularprogressqt import CircularProgressWidget, ProgressConfig


def main():
    app = QtWidgets.QApplication(sys.argv)

    full = ProgressConfig(
        dot_count=12,
        big_dot_size=10.0,
        small_dot_size=4.0,
        spacing_between_dot_and_line=6.0,
        background_color=QColor(30, 30, 40),
        main_stroke_color="lightGray",
        main_dots_color=(160, 160, 160, 255),
        user_stroke_color=QColor("orange"),
        user_dot_color="#ffaa00",
        user_stroke_width=3.0,
    )

    half = ProgressConfig.from_degrees(0, 180, dot_count=6, padding=40.0)

    from_settings = ProgressConfig.from_dict({
        "dot_count": 4,
        "touch_padding": 40.0,
        "moving_diff": 60.0,
        "user_dot_color": "cyan",
    })

    window = QtWidgets.QWidget()
    window.setWindowTitle("Custom configurations")
    layout = QtWidgets.QHBoxLayout(window)
    for cfg in (full, half, from_settings):
        ring = CircularProgressWidget(config=cfg)
        ring.setMinimumSize(280, 280)
        layout.addWidget(ring)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
