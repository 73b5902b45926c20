import sys
import math

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSlider,
    QPushButton,
)

from pycircularprogressqt import CircularProgressWidget, ProgressConfig


class DemoWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("pycircularprogressqt demo")

        self.ring = CircularProgressWidget(config=ProgressConfig())
        self.ring.setMinimumSize(360, 360)

        self.status = QLabel("Drag the ring clockwise or counter-clockwise")
        self.status.setAlignment(Qt.AlignCenter)

        # dot count slider
        self.dots_label = QLabel()
        self.dots_slider = QSlider(Qt.Horizontal)
        self.dots_slider.setRange(1, 24)
        self.dots_slider.setValue(self.ring.config().dot_count)
        self.dots_slider.valueChanged.connect(self.on_dots_changed)

        # angular range slider (degrees)
        self.range_label = QLabel()
        self.range_slider = QSlider(Qt.Horizontal)
        self.range_slider.setRange(45, 360)
        self.range_slider.setValue(360)
        self.range_slider.valueChanged.connect(self.on_range_changed)

        reset_btn = QPushButton("Reset")
        reset_btn.clicked.connect(self.ring.reset)

        controls = QHBoxLayout()
        controls.addWidget(self.dots_label)
        controls.addWidget(self.dots_slider, 1)
        controls.addWidget(self.range_label)
        controls.addWidget(self.range_slider, 1)
        controls.addWidget(reset_btn)

        root = QWidget()
        layout = QVBoxLayout(root)
        layout.addWidget(self.ring, 1)
        layout.addWidget(self.status)
        layout.addLayout(controls)
        self.setCentralWidget(root)

        self.ring.progressChanged.connect(self.on_progress)
        self.ring.completedChanged.connect(self.on_completed)
        self.ring.directionLocked.connect(self.on_direction)
        self._update_labels()

    def _update_labels(self):
        cfg = self.ring.config()
        self.dots_label.setText(f"Dots: {cfg.dot_count}")
        self.range_label.setText(f"Range: {math.degrees(cfg.angular_span):.0f}°")

    def on_dots_changed(self, value):
        self.ring.set_config(self.ring.config().replace(dot_count=int(value)))
        self._update_labels()

    def on_range_changed(self, value):
        cfg = self.ring.config()
        self.ring.set_config(cfg.replace(end_angle=cfg.start_angle + math.radians(value)))
        self._update_labels()

    def on_progress(self, fraction):
        self.status.setText(f"Progress: {fraction:.0%}")

    def on_completed(self, done):
        if done:
            self.status.setText("Completed, release to keep it")

    def on_direction(self, direction):
        self.statusBar().showMessage(f"Direction: {direction}", 1500)


if __name__ == "__main__":
    app = QApplication(sys.argv)
    w = DemoWindow()
    w.resize(520, 620)
    w.show()
    sys.exit(app.exec())
