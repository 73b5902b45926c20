"""Tests for CircularProgressWidget on the offscreen Qt platform.

The widget is 264 x 264 px with the default 32 px padding, giving a 100 px
ring around (132, 132). The drawing is rotated by -90°, so model angle 0 is
at the top of the widget.
"""

import math

import pytest

from pycircularprogressqt import Point, ProgressConfig

SIZE = 264


@pytest.fixture
def widget(qapp):
    from pycircularprogressqt.widget import CircularProgressWidget

    w = CircularProgressWidget(config=ProgressConfig(dot_count=8))
    w.resize(SIZE, SIZE)
    yield w
    w.deleteLater()


def widget_point(degrees, radius=100.0):
    """Widget-space point for a model-frame angle."""
    from PySide6.QtCore import QPointF

    a = math.radians(degrees)
    c = SIZE / 2.0
    return QPointF(c + radius * math.sin(a), c - radius * math.cos(a))


def mouse_event(kind, pos, button=None):
    from PySide6.QtCore import QEvent, Qt
    from PySide6.QtGui import QMouseEvent

    types = {
        "press": QEvent.MouseButtonPress,
        "move": QEvent.MouseMove,
        "release": QEvent.MouseButtonRelease,
    }
    button = Qt.LeftButton if button is None else button
    held = Qt.NoButton if kind == "release" else button
    if kind == "move":
        button = Qt.NoButton
    return QMouseEvent(types[kind], pos, pos, button, held, Qt.NoModifier)


def drag(widget, *degrees):
    widget.mousePressEvent(mouse_event("press", widget_point(degrees[0])))
    for d in degrees:
        widget.mouseMoveEvent(mouse_event("move", widget_point(d)))


class TestCircleHost:
    """The widget derives the ring from its bounds."""

    def test_geometry_from_bounds(self, widget):
        """Center and radius come from the widget size."""
        assert widget.center_position == Point(132.0, 132.0)
        assert widget.radius == pytest.approx(100.0)
        assert widget.circumference == pytest.approx(200 * math.pi)
        assert widget.angle_for_arc_length(100.0) == pytest.approx(1.0)

    def test_layout_follows_resize(self, widget):
        """Resizing relayouts the ring."""
        assert len(widget.controller.layout.dots) == 8
        widget.resize(400, 300)
        assert widget.radius == pytest.approx(118.0)
        dot = widget.controller.layout.dots[0]
        assert dot.position.x == pytest.approx(200.0 + 118.0)

    def test_map_to_model_undoes_rotation(self, widget):
        """Widget points rotate back into the model frame."""
        p = widget.map_to_model(widget_point(0))
        assert p.x == pytest.approx(232.0)
        assert p.y == pytest.approx(132.0)
        p = widget.map_to_model(widget_point(90))
        assert p.x == pytest.approx(132.0)
        assert p.y == pytest.approx(232.0)


class TestDragging:
    """Mouse events drive the controller and emit signals."""

    def test_drag_to_completion(self, widget):
        """A full drag emits lock, progress, completion and touch signals."""
        progress, completed, locked, acquired = [], [], [], []
        widget.progressChanged.connect(progress.append)
        widget.completedChanged.connect(completed.append)
        widget.directionLocked.connect(locked.append)
        widget.touchAcquired.connect(acquired.append)

        drag(widget, 10, 90, 355)
        assert locked == ["clockwise"]
        assert progress[0] == pytest.approx(10 / 360)
        assert completed == [True]
        assert widget.is_completed()

        widget.mouseReleaseEvent(mouse_event("release", widget_point(355)))
        assert acquired == [True, False]
        assert widget.progress() == 1.0
        assert widget.is_completed()

    def test_incomplete_release_resets(self, widget):
        """Releasing early drops the progress."""
        drag(widget, 20, 120)
        assert widget.progress() == pytest.approx(120 / 360)
        widget.mouseReleaseEvent(mouse_event("release", widget_point(120)))
        assert widget.progress() == 0.0
        assert not widget.is_completed()

    def test_dot_highlight_signal(self, widget):
        """Each newly passed dot is signalled."""
        highlighted = []
        widget.dotHighlighted.connect(highlighted.append)
        drag(widget, 20, 50, 100)
        assert highlighted == [0, 1, 2]

    def test_move_without_press_is_ignored(self, widget):
        """Hover moves do nothing."""
        widget.mouseMoveEvent(mouse_event("move", widget_point(90)))
        assert widget.progress() == 0.0

    def test_right_button_does_not_start_drag(self, widget):
        """Only the left button starts a drag."""
        from PySide6.QtCore import Qt

        widget.mousePressEvent(mouse_event("press", widget_point(20), Qt.RightButton))
        assert not widget.controller.touch_acquired


class TestConfiguration:
    """set_config replaces the layout."""

    def test_set_config(self, widget):
        """A new config relayouts and drops the drag."""
        drag(widget, 20, 120)
        widget.set_config(ProgressConfig(dot_count=12, user_dot_color="#00ff00"))
        assert widget.config().dot_count == 12
        assert len(widget.controller.layout.dots) == 12
        assert widget.progress() == 0.0

    def test_invalid_color_rejected(self, widget):
        """A bad color raises and keeps the old config."""
        with pytest.raises(ValueError):
            widget.set_config(ProgressConfig(user_dot_color="definitely-not-a-color"))
        assert widget.config().dot_count == 8

    def test_reset(self, widget):
        """reset() clears completion."""
        drag(widget, 20, 355)
        widget.reset()
        assert not widget.is_completed()


class TestPainting:
    """Painting runs for idle, dragging and completed states."""

    def test_grab_idle(self, widget):
        """Idle ring paints."""
        assert not widget.grab().isNull()

    def test_grab_while_dragging(self, widget):
        """Clockwise drag paints."""
        drag(widget, 20, 200)
        assert not widget.grab().isNull()

    def test_grab_counter_clockwise(self, widget):
        """Counter-clockwise drag paints."""
        drag(widget, -20, 200)
        assert not widget.grab().isNull()

    def test_grab_degenerate(self, widget):
        """A too small widget paints only the background."""
        widget.resize(40, 40)
        assert not widget.grab().isNull()
