"""Touch-to-progress state machine.

The :class:`ProgressController` turns raw pointer positions into a progress
angle along the ring. A gesture goes through::

    IDLE --touch_begin--> TRACKING --|angle| > deadband--> TRACKING_LOCKED
      ^                                                         |
      +----------------------- touch_end -----------------------+

While tracking, the first move whose raw ``atan2`` angle leaves the deadband
locks the direction (clockwise iff the angle is positive). The lock holds until
the pointer is released. Once locked, every valid move updates the progress
angle, the single highlighted dot and the completion flag. Moves outside the
touch annulus, or too far from the marker, discard the drag.

No method raises: without a host or a usable geometry the controller reports
zero values and leaves its state alone.

Typical usage:

    host = StaticCircleHost(CircleGeometry(Point(0, 0), 100.0))
    controller = ProgressController(ProgressConfig(), host)
    controller.touch_begin()
    update = controller.touch_move(Point(98.5, 17.4))
    update.progress_fraction  # ~ 10 / 360
    controller.touch_end()
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .geometry import CircleGeometry, CircleHost, distance, normalize_angle, position_on_circle
from .layout import compute_layout
from .models import TWO_PI, CircleLayout, Direction, Dot, Point, ProgressConfig, TouchUpdate
from .utils import clamp

_logger = logging.getLogger(__name__)

# Raw angle magnitude a drag must exceed before its direction is inferred.
DIRECTION_DEADBAND = 0.05 * math.pi
# Distance from the terminal end, as a fraction of a full turn, that counts as done.
COMPLETION_RATIO = 0.02


class TouchState(str, Enum):
    IDLE = "idle"
    TRACKING = "tracking"
    TRACKING_LOCKED = "tracking_locked"


@dataclass
class TouchSession:
    """Mutable state of one drag gesture."""

    position: Optional[Point] = None
    direction: Direction = Direction.UNDETERMINED
    progress_angle: float = 0.0
    progress_fraction: float = 0.0
    completed: bool = False
    highlighted_index: Optional[int] = None


def dots_in_travel_order(dots: Sequence[Dot], direction: Direction) -> List[Tuple[int, float]]:
    """Return ``(index, comparison angle)`` pairs in the order a drag visits them.

    Clockwise (and undetermined) travel visits dots in placement order.
    Counter-clockwise travel rotates the sequence by one and reverses it, so
    it starts at dot 0 and continues with the last dot. In that order dot 0
    sits at the end of the ring: a comparison angle of 0 is read as 2π.
    """
    if direction is not Direction.COUNTER_CLOCKWISE:
        return [(d.index, d.angle % TWO_PI) for d in dots]

    rotated = list(dots[1:]) + list(dots[:1])
    rotated.reverse()
    ordered = []
    for d in rotated:
        angle = d.angle % TWO_PI
        ordered.append((d.index, TWO_PI if angle == 0.0 else angle))
    return ordered


class ProgressController:
    """Converts pointer events into progress, highlight and completion state.

    Args:
        config: Indicator configuration.
        host: Provider of the ring geometry and of redraw requests. May be set
            later through :attr:`host`.
    """

    def __init__(self, config: Optional[ProgressConfig] = None, host: Optional[CircleHost] = None) -> None:
        self._config = config or ProgressConfig()
        self.host = host
        self._state = TouchState.IDLE
        self._touch_acquired = False
        self._session = TouchSession(progress_angle=self._config.start_angle)

        self._layout = CircleLayout()
        self._layout_key: Optional[Tuple[ProgressConfig, CircleGeometry]] = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> ProgressConfig:
        return self._config

    @config.setter
    def config(self, config: ProgressConfig) -> None:
        self._config = config
        self._layout_key = None
        self._state = TouchState.IDLE
        self._touch_acquired = False
        self._session = TouchSession(progress_angle=config.start_angle)

    @property
    def state(self) -> TouchState:
        return self._state

    @property
    def session(self) -> TouchSession:
        return self._session

    @property
    def direction(self) -> Direction:
        return self._session.direction

    @property
    def completed(self) -> bool:
        return self._session.completed

    @property
    def touch_acquired(self) -> bool:
        """True between :meth:`touch_begin` and :meth:`touch_end`."""
        return self._touch_acquired

    @property
    def geometry(self) -> Optional[CircleGeometry]:
        return CircleGeometry.from_host(self.host)

    @property
    def layout(self) -> CircleLayout:
        """Current layout, recomputed when config or host geometry changed."""
        geometry = self.geometry
        key = (self._config, geometry) if geometry is not None else None
        if key is None:
            return CircleLayout()
        if key != self._layout_key:
            self._layout = compute_layout(self._config, geometry, self.host.angle_for_arc_length)
            self._layout_key = key
            self._apply_highlight(self._session.highlighted_index)
        return self._layout

    @property
    def progress_fraction(self) -> float:
        """Stroke end fraction of the configured range, in [0, 1]."""
        return self._session.progress_fraction

    @property
    def marker_position(self) -> Point:
        return position_on_circle(self.geometry, self._session.progress_angle)

    # ------------------------------------------------------------------
    # Touch events
    # ------------------------------------------------------------------

    def touch_begin(self) -> TouchUpdate:
        """Start a gesture; only the acquisition signal changes."""
        self._state = TouchState.TRACKING
        self._touch_acquired = True
        self._session.direction = Direction.UNDETERMINED
        self._session.position = None
        return self.snapshot()

    def touch_move(self, position: Point) -> TouchUpdate:
        """Feed one pointer position of the active gesture.

        Returns:
            The state after the move. Outside a gesture, or while no geometry
            is available, the state is returned unchanged.
        """
        if self._state is TouchState.IDLE:
            return self.snapshot()
        geometry = self.geometry
        if geometry is None or geometry.is_degenerate:
            return self.snapshot()

        self._session.position = position
        if not self._is_valid_position(geometry, position):
            self._reset_to_start()
            return self.snapshot()

        raw = geometry.raw_angle(position)

        if not self._session.direction.is_locked:
            # TODO: compare against the angle relative to config.start_angle;
            # the raw atan2 angle only matches that for a start angle of 0.
            if abs(raw) <= DIRECTION_DEADBAND:
                return self.snapshot()
            self._lock_direction(Direction.CLOCKWISE if raw > 0 else Direction.COUNTER_CLOCKWISE)

        self._session.progress_angle = normalize_angle(raw)
        pulse = self._update_highlight()
        self._update_completion()
        self._update_fraction()
        return self.snapshot(pulse_dot_index=pulse)

    def touch_end(self) -> TouchUpdate:
        """Finish the gesture; an incomplete drag snaps back to the start."""
        if not self._session.completed:
            self._reset_to_start()
        self._touch_acquired = False
        self._session.direction = Direction.UNDETERMINED
        self._session.position = None
        self._state = TouchState.IDLE
        return self.snapshot()

    def reset(self) -> TouchUpdate:
        """Discard any progress, including a completed one."""
        self._reset_to_start()
        return self.snapshot()

    def snapshot(self, pulse_dot_index: Optional[int] = None) -> TouchUpdate:
        return TouchUpdate(
            progress_fraction=self.progress_fraction,
            progress_angle=self._session.progress_angle,
            marker_position=self.marker_position,
            highlighted_dot_index=self._session.highlighted_index,
            direction=self._session.direction,
            completed=self._session.completed,
            pulse_dot_index=pulse_dot_index,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _is_valid_position(self, geometry: CircleGeometry, position: Point) -> bool:
        if not geometry.in_annulus(position, self._config.touch_padding):
            return False
        marker = geometry.position_on_circle(self._session.progress_angle)
        return distance(position, marker) <= self._config.moving_diff

    def _lock_direction(self, direction: Direction) -> None:
        self._session.direction = direction
        self._state = TouchState.TRACKING_LOCKED
        _logger.debug("Direction locked: %s", direction.value)
        if self.host is not None:
            self.host.update_user_path()

    def _start_angle_for(self, direction: Direction) -> float:
        if direction is Direction.COUNTER_CLOCKWISE:
            return self._config.end_angle
        return self._config.start_angle

    def _terminal_angle_for(self, direction: Direction) -> float:
        if direction is Direction.COUNTER_CLOCKWISE:
            return self._config.start_angle
        return self._config.end_angle

    def _update_highlight(self) -> Optional[int]:
        """Highlight the most recently passed dot; return it on a rising edge."""
        progress = self._session.progress_angle
        clockwise = self._session.direction is not Direction.COUNTER_CLOCKWISE
        passed: Optional[int] = None
        for index, angle in dots_in_travel_order(self.layout.dots, self._session.direction):
            if (angle <= progress) if clockwise else (angle >= progress):
                passed = index
        previous = self._session.highlighted_index
        self._apply_highlight(passed)
        if passed is not None and passed != previous:
            return passed
        return None

    def _apply_highlight(self, index: Optional[int]) -> None:
        self._session.highlighted_index = index
        for dot in self._layout.dots:
            dot.highlighted = dot.index == index

    def _update_completion(self) -> None:
        direction = self._session.direction
        full_turn_margin = COMPLETION_RATIO * TWO_PI
        if direction is Direction.COUNTER_CLOCKWISE:
            crossed = self._session.progress_angle <= self._config.start_angle + full_turn_margin
        else:
            crossed = self._session.progress_angle >= self._config.end_angle - full_turn_margin

        if crossed:
            self._session.progress_angle = self._terminal_angle_for(direction)
            self._update_highlight()
        if crossed != self._session.completed:
            _logger.debug("Completion changed: %s", crossed)
        self._session.completed = crossed

    def _reset_to_start(self) -> None:
        direction = self._session.direction
        self._session.progress_angle = self._start_angle_for(direction)
        self._session.progress_fraction = 0.0
        self._session.completed = False
        order = dots_in_travel_order(self.layout.dots, direction)
        self._apply_highlight(order[0][0] if order else None)
        _logger.debug("Reset to start (%s)", direction.value)

    def _update_fraction(self) -> None:
        cfg = self._config
        if self._session.direction is Direction.COUNTER_CLOCKWISE:
            raw = (cfg.end_angle - self._session.progress_angle) / cfg.angular_span
        else:
            raw = (self._session.progress_angle - cfg.start_angle) / cfg.angular_span
        self._session.progress_fraction = clamp(raw, 0.0, 1.0)
