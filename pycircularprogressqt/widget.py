"""Qt host widget for the circular progress indicator.

The widget owns the ring bounds and implements the
:class:`~pycircularprogressqt.geometry.CircleHost` protocol for its
:class:`~pycircularprogressqt.controller.ProgressController`. It forwards mouse
presses, drags and releases to the controller and paints whatever state the
controller reports.

The drawing is rotated by -90 degrees so the start angle points up; pointer
positions are rotated back into the model frame before they reach the
controller.

Typical usage:

    ring = CircularProgressWidget(config=ProgressConfig(dot_count=12))
    ring.progressChanged.connect(lambda f: print(f"{f:.0%}"))
    ring.completedChanged.connect(on_done)

Google-style docstrings + PEP8.
"""

from __future__ import annotations

import math
from typing import Dict, Optional

from PySide6.QtCore import QEasingCurve, QPointF, QRectF, Qt, QVariantAnimation, Signal
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen, QRadialGradient
from PySide6.QtWidgets import QWidget

from .controller import ProgressController
from .geometry import CircleGeometry
from .models import Color, Direction, Point, ProgressConfig, TouchUpdate, normalize_color_to_rgba
from .utils import radians_to_qt_degrees

# Rotation applied to the painting so that angle 0 points up.
VIEW_ROTATION_DEG = -90.0
PULSE_DURATION_MS = 220
PULSE_PEAK_SCALE = 1.8
ACQUIRED_MARKER_SCALE = 1.25


def _to_qcolor(color: Color) -> QColor:
    r, g, b, a = normalize_color_to_rgba(color)
    return QColor(r, g, b, a)


class CircularProgressWidget(QWidget):
    """A draggable, dot-marked circular progress ring.

    Signals:
        progressChanged(float): Stroke end fraction in [0, 1] changed.
        completedChanged(bool): The completion flag flipped.
        dotHighlighted(int): A dot became the highlighted one.
        directionLocked(str): The drag direction was inferred
            (``"clockwise"`` or ``"counter_clockwise"``).
        touchAcquired(bool): A drag started (True) or ended (False).
    """

    progressChanged = Signal(float)
    completedChanged = Signal(bool)
    dotHighlighted = Signal(int)
    directionLocked = Signal(str)
    touchAcquired = Signal(bool)

    def __init__(self, parent: Optional[QWidget] = None, *, config: Optional[ProgressConfig] = None) -> None:
        super().__init__(parent)
        self._config = config or ProgressConfig()
        self._colors = self._resolve_colors(self._config)
        self._controller = ProgressController(self._config, host=self)
        self._last_update: TouchUpdate = self._controller.snapshot()

        self._pulse_index: Optional[int] = None
        self._pulse_scale = 1.0
        self._pulse = QVariantAnimation(self)
        self._pulse.setDuration(PULSE_DURATION_MS)
        self._pulse.setStartValue(1.0)
        self._pulse.setKeyValueAt(0.5, PULSE_PEAK_SCALE)
        self._pulse.setEndValue(1.0)
        self._pulse.setEasingCurve(QEasingCurve.InOutQuad)
        self._pulse.valueChanged.connect(self._on_pulse_value)
        self._pulse.finished.connect(self._on_pulse_finished)

        self.setMinimumSize(120, 120)

    # ---------- CircleHost ----------
    def _bounds_geometry(self) -> CircleGeometry:
        return CircleGeometry.from_bounds(self.width(), self.height(), self._config.padding)

    @property
    def center_position(self) -> Point:
        return self._bounds_geometry().center

    @property
    def radius(self) -> float:
        return self._bounds_geometry().radius

    @property
    def circumference(self) -> float:
        return self._bounds_geometry().circumference

    def angle_for_arc_length(self, length: float) -> float:
        return self._bounds_geometry().angle_for_arc_length(length)

    def update_user_path(self) -> None:
        self.update()

    # ---------- public API ----------
    @property
    def controller(self) -> ProgressController:
        return self._controller

    def config(self) -> ProgressConfig:
        return self._config

    def set_config(self, config: ProgressConfig) -> None:
        """Replace the configuration, discard the current drag and repaint.

        Raises:
            TypeError, ValueError: If a configured color cannot be interpreted.
        """
        colors = self._resolve_colors(config)
        self._config = config
        self._colors = colors
        self._controller.config = config
        self._apply_update(self._controller.snapshot())
        self.update()

    def progress(self) -> float:
        return self._last_update.progress_fraction

    def is_completed(self) -> bool:
        return self._last_update.completed

    def reset(self) -> None:
        self._apply_update(self._controller.reset())

    def map_to_model(self, pos: QPointF) -> Point:
        """Undo the view rotation for a widget-space point."""
        center = self.center_position
        theta = math.radians(-VIEW_ROTATION_DEG)
        dx = pos.x() - center.x
        dy = pos.y() - center.y
        x = dx * math.cos(theta) - dy * math.sin(theta)
        y = dx * math.sin(theta) + dy * math.cos(theta)
        return Point(center.x + x, center.y + y)

    # ---------- event handling ----------
    def mousePressEvent(self, event) -> None:
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        self._apply_update(self._controller.touch_begin())
        self.touchAcquired.emit(True)
        event.accept()

    def mouseMoveEvent(self, event) -> None:
        if not self._controller.touch_acquired:
            super().mouseMoveEvent(event)
            return
        update = self._controller.touch_move(self.map_to_model(event.position()))
        self._apply_update(update)
        event.accept()

    def mouseReleaseEvent(self, event) -> None:
        if event.button() != Qt.LeftButton or not self._controller.touch_acquired:
            super().mouseReleaseEvent(event)
            return
        self._apply_update(self._controller.touch_end())
        self.touchAcquired.emit(False)
        event.accept()

    def _apply_update(self, update: TouchUpdate) -> None:
        previous = self._last_update
        self._last_update = update

        if update.direction.is_locked and update.direction != previous.direction:
            self.directionLocked.emit(update.direction.value)
        if update.progress_fraction != previous.progress_fraction:
            self.progressChanged.emit(update.progress_fraction)
        if update.completed != previous.completed:
            self.completedChanged.emit(update.completed)
        if update.highlighted_dot_index is not None and update.highlighted_dot_index != previous.highlighted_dot_index:
            self.dotHighlighted.emit(update.highlighted_dot_index)
        if update.pulse_dot_index is not None:
            self._start_pulse(update.pulse_dot_index)

        self.update()

    def _start_pulse(self, index: int) -> None:
        self._pulse.stop()
        self._pulse_index = index
        self._pulse.start()

    def _on_pulse_value(self, value) -> None:
        self._pulse_scale = float(value)
        self.update()

    def _on_pulse_finished(self) -> None:
        self._pulse_index = None
        self._pulse_scale = 1.0
        self.update()

    # ---------- painting ----------
    @staticmethod
    def _resolve_colors(config: ProgressConfig) -> Dict[str, QColor]:
        return {
            "background": _to_qcolor(config.background_color),
            "main_stroke": _to_qcolor(config.main_stroke_color),
            "main_dots": _to_qcolor(config.main_dots_color),
            "user_stroke": _to_qcolor(config.user_stroke_color),
            "user_stroke_shadow": _to_qcolor(config.user_stroke_shadow_color),
            "user_dot": _to_qcolor(config.user_dot_color),
        }

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.fillRect(self.rect(), self._colors["background"])

            geometry = self._controller.geometry
            if geometry is None or geometry.is_degenerate:
                return

            center = geometry.center
            painter.translate(center.x, center.y)
            painter.rotate(VIEW_ROTATION_DEG)
            painter.translate(-center.x, -center.y)

            self._draw_main_path(painter, geometry)
            self._draw_user_path(painter, geometry)
            self._draw_dots(painter)
            self._draw_user_dot(painter)
        finally:
            painter.end()

    def _ring_rect(self, geometry: CircleGeometry) -> QRectF:
        r = geometry.radius
        return QRectF(geometry.center.x - r, geometry.center.y - r, 2 * r, 2 * r)

    def _draw_main_path(self, painter: QPainter, geometry: CircleGeometry) -> None:
        rect = self._ring_rect(geometry)
        pen = QPen(self._colors["main_stroke"], self._config.main_stroke_width)
        pen.setCapStyle(Qt.FlatCap)
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)
        for arc in self._controller.layout.arcs:
            path = QPainterPath()
            start = radians_to_qt_degrees(arc.start_angle)
            path.arcMoveTo(rect, start)
            path.arcTo(rect, start, radians_to_qt_degrees(arc.sweep))
            painter.drawPath(path)

    def _draw_user_path(self, painter: QPainter, geometry: CircleGeometry) -> None:
        fraction = self._last_update.progress_fraction
        if fraction <= 0:
            return
        cfg = self._config
        layout = self._controller.layout
        sweep = fraction * cfg.angular_span
        counter_clockwise = self._last_update.direction is Direction.COUNTER_CLOCKWISE

        rect = self._ring_rect(geometry)
        path = QPainterPath()
        if counter_clockwise:
            start = radians_to_qt_degrees(cfg.end_angle)
            path.arcMoveTo(rect, start)
            path.arcTo(rect, start, -radians_to_qt_degrees(sweep))
            pattern = layout.dash_pattern.reversed()
        else:
            start = radians_to_qt_degrees(cfg.start_angle)
            path.arcMoveTo(rect, start)
            path.arcTo(rect, start, radians_to_qt_degrees(sweep))
            pattern = layout.dash_pattern

        width = max(cfg.user_stroke_width, 1.0)
        shadow = QPen(self._colors["user_stroke_shadow"], width + 2.0)
        shadow.setCapStyle(Qt.FlatCap)
        pen = QPen(self._colors["user_stroke"], width)
        pen.setCapStyle(Qt.FlatCap)
        dashes, offset = pattern.pen_pattern()
        if dashes and all(d > 0 for d in dashes):
            # Qt measures dash lengths in pen widths.
            pen.setDashPattern([d / width for d in dashes])
            pen.setDashOffset(offset / width)
            shadow.setDashPattern([d / (width + 2.0) for d in dashes])
            shadow.setDashOffset(offset / (width + 2.0))

        painter.setBrush(Qt.NoBrush)
        painter.setPen(shadow)
        painter.drawPath(path)
        painter.setPen(pen)
        painter.drawPath(path)

    def _draw_dots(self, painter: QPainter) -> None:
        for dot in self._controller.layout.dots:
            color = self._colors["user_dot"] if dot.highlighted else self._colors["main_dots"]
            radius = dot.size / 2.0
            if dot.index == self._pulse_index:
                radius *= self._pulse_scale
            painter.setPen(QPen(color, self._config.main_stroke_width))
            painter.setBrush(QBrush(color))
            painter.drawEllipse(QPointF(dot.position.x, dot.position.y), radius, radius)

    def _draw_user_dot(self, painter: QPainter) -> None:
        if self._controller.layout.is_empty:
            return
        cfg = self._config
        pos = self._controller.marker_position
        center = QPointF(pos.x, pos.y)
        radius = cfg.user_dot_size / 2.0
        if self._controller.touch_acquired:
            radius *= ACQUIRED_MARKER_SCALE

        glow_radius = radius + cfg.user_dot_shadow_radius
        if glow_radius > radius:
            gradient = QRadialGradient(center, glow_radius)
            glow = QColor(self._colors["user_dot"])
            gradient.setColorAt(radius / glow_radius, glow)
            glow.setAlpha(0)
            gradient.setColorAt(1.0, glow)
            painter.setPen(Qt.NoPen)
            painter.setBrush(QBrush(gradient))
            painter.drawEllipse(center, glow_radius, glow_radius)

        painter.setPen(QPen(self._colors["user_dot"], 1.0))
        painter.setBrush(QBrush(self._colors["user_dot"]))
        painter.drawEllipse(center, radius, radius)
