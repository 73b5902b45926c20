"""Data models for the circular progress indicator.

Provides frozen dataclasses for the configuration record and for the layout
products (arcs, dots, dash pattern) plus the snapshot returned by every touch
update. Mutable per-gesture state lives in ``controller.py``.

Google-style docstrings + PEP8.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

# Color type: QColor objects, color names, "#RRGGBB" or RGBA tuples.
# Using Any for QColor to avoid a hard dependency on PySide6 in the core.
Color = Union[str, Tuple[int, int, int], Tuple[int, int, int, int], Any]

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class Point:
    """A point in widget (model-frame) coordinates."""

    x: float = 0.0
    y: float = 0.0


class Direction(str, Enum):
    """Traversal direction inferred from the first meaningful drag."""

    UNDETERMINED = "undetermined"
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"

    @property
    def is_locked(self) -> bool:
        return self is not Direction.UNDETERMINED


def _qcolor_to_rgba(color: Any) -> tuple[int, int, int, int]:
    """Convert a QColor object to an RGBA tuple.

    Args:
        color: QColor object from PySide6.QtGui.

    Returns:
        Tuple of (r, g, b, a) with values 0-255.

    Raises:
        TypeError: If the input is not a QColor object.
    """
    try:
        from PySide6.QtGui import QColor
        if isinstance(color, QColor):
            return (color.red(), color.green(), color.blue(), color.alpha())
    except ImportError:
        pass
    raise TypeError(f"Expected QColor object, got {type(color)}")


def _hex_to_rgba(value: str) -> Optional[tuple[int, int, int, int]]:
    """Parse ``#RRGGBB`` / ``#RRGGBBAA``; returns None for anything else."""
    if not value.startswith("#") or len(value) not in (7, 9):
        return None
    try:
        r = int(value[1:3], 16)
        g = int(value[3:5], 16)
        b = int(value[5:7], 16)
        a = int(value[7:9], 16) if len(value) == 9 else 255
    except ValueError:
        return None
    return (r, g, b, a)


def _color_name_to_rgba(color_name: str) -> tuple[int, int, int, int]:
    """Convert a color name (e.g., 'green', 'darkGray') to RGBA using QColor.

    Raises:
        ValueError: If PySide6 is not available, Qt cannot initialize, or the
            color name is invalid. Use RGBA tuples instead in that case.
    """
    try:
        from PySide6.QtGui import QColor
        qcolor = QColor(color_name)
        if qcolor.isValid():
            return (qcolor.red(), qcolor.green(), qcolor.blue(), qcolor.alpha())
        raise ValueError(
            f"Invalid color name: '{color_name}'. "
            f"Use RGBA tuples like (255, 0, 0, 255) instead."
        )
    except (ImportError, RuntimeError) as e:
        raise ValueError(
            f"Cannot convert color name '{color_name}': PySide6 is not available "
            f"or Qt cannot initialize ({type(e).__name__}: {e}). "
            f"Use RGBA tuples like (255, 0, 0, 255) instead."
        ) from e


def normalize_color_to_rgba(color: Color) -> tuple[int, int, int, int]:
    """Normalize a color to RGBA tuple format.

    Accepts:
    - RGBA tuple: (r, g, b, a) with values 0-255
    - RGB tuple: (r, g, b), alpha defaults to 255
    - ``#RRGGBB`` / ``#RRGGBBAA`` strings
    - QColor object from PySide6.QtGui
    - Color name string (e.g., 'green', 'darkGray')

    Returns:
        Tuple of (r, g, b, a) with values 0-255.
    """
    if isinstance(color, tuple):
        if len(color) == 4:
            return tuple(int(c) for c in color)  # type: ignore[return-value]
        if len(color) == 3:
            r, g, b = color
            return (int(r), int(g), int(b), 255)

    if isinstance(color, str):
        parsed = _hex_to_rgba(color)
        if parsed is not None:
            return parsed
        return _color_name_to_rgba(color)

    try:
        from PySide6.QtGui import QColor
        if isinstance(color, QColor):
            return _qcolor_to_rgba(color)
    except ImportError:
        pass

    raise TypeError(
        f"Color must be an RGBA tuple (r, g, b, a), a QColor object, "
        f"or a color name string, got {type(color)}"
    )


@dataclass(frozen=True)
class ProgressConfig:
    """
    Configuration of the circular progress indicator.

    Geometry (all lengths in pixels, angles in radians):
      dot_count: number of dot markers on the ring (0 gives an empty layout)
      main_stroke_width: width of the background ring stroke
      spacing_between_dot_and_line: gap between a dot and the ring stroke
      padding: inset of the ring from the widget bounds
      small_dot_size / big_dot_size: dot diameters (odd / even indices)
      touch_padding: half-width of the touch annulus around the ring
      moving_diff: maximum pointer-to-marker distance; ``inf`` disables it
      start_angle / end_angle: configured angular range

    Visuals (opaque to the layout and controller):
      background_color, main_stroke_color, main_dots_color,
      user_stroke_color, user_stroke_shadow_color, user_stroke_width,
      user_dot_size, user_dot_color, user_dot_shadow_radius
    """

    dot_count: int = 8
    main_stroke_width: float = 1.0
    spacing_between_dot_and_line: float = 4.0
    padding: float = 32.0
    small_dot_size: float = 2.0
    big_dot_size: float = 8.0
    touch_padding: float = 30.0
    moving_diff: float = math.inf
    start_angle: float = 0.0
    end_angle: float = TWO_PI

    background_color: Color = "darkGray"
    main_stroke_color: Color = "gray"
    main_dots_color: Color = "gray"
    user_stroke_color: Color = "green"
    user_stroke_shadow_color: Color = "red"
    user_stroke_width: float = 1.0
    user_dot_size: float = 12.0
    user_dot_color: Color = "green"
    user_dot_shadow_radius: float = 8.0

    def __post_init__(self) -> None:
        if self.dot_count < 0:
            raise ValueError("dot_count must be >= 0")
        for name in (
            "main_stroke_width",
            "spacing_between_dot_and_line",
            "padding",
            "small_dot_size",
            "big_dot_size",
            "touch_padding",
            "user_stroke_width",
            "user_dot_size",
            "user_dot_shadow_radius",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if not self.moving_diff > 0:
            raise ValueError("moving_diff must be > 0")
        # Pointer angles are normalized into [0, 2π), so the range must lie there too.
        if self.start_angle < 0:
            raise ValueError("start_angle must be >= 0")
        if self.start_angle >= self.end_angle:
            raise ValueError("start_angle must be smaller than end_angle")
        # Small tolerance so that math.radians(360) style inputs are accepted.
        if self.end_angle > TWO_PI + 1e-9:
            raise ValueError("end_angle must not exceed a full turn")

    @property
    def angular_span(self) -> float:
        return self.end_angle - self.start_angle

    def dot_size(self, index: int) -> float:
        """Diameter of the dot at ``index`` (even indices are big)."""
        return self.big_dot_size if is_big_dot(index) else self.small_dot_size

    def replace(self, **changes: Any) -> "ProgressConfig":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProgressConfig":
        """Build a config from a plain dict, ignoring unknown keys."""
        valid = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in valid})

    @classmethod
    def from_degrees(cls, start_deg: float, end_deg: float, **kwargs: Any) -> "ProgressConfig":
        """Build a config whose angular range is given in degrees."""
        from .geometry import degrees_to_radians

        return cls(
            start_angle=degrees_to_radians(start_deg),
            end_angle=degrees_to_radians(end_deg),
            **kwargs,
        )


def is_big_dot(index: int) -> bool:
    """Even dot indices render big, odd ones small."""
    return index % 2 == 0


@dataclass(frozen=True)
class Arc:
    """A visible ring stroke between two dot gaps (angles in radians)."""

    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


@dataclass
class Dot:
    """A dot marker on the ring.

    ``highlighted`` is the only mutable field; it is owned by the
    :class:`~pycircularprogressqt.controller.ProgressController`.
    """

    index: int
    position: Point
    angle: float
    size: float
    highlighted: bool = False

    @property
    def is_big(self) -> bool:
        return is_big_dot(self.index)


@dataclass(frozen=True)
class DashPattern:
    """Stroke/gap lengths (arc-length units) aligned with the dot gaps.

    ``lengths`` is laid out from the start angle as::

        [leading_gap, stroke_0, gap_1, stroke_1, ..., stroke_{N-1}, trailing_gap]

    The leading and trailing gaps are the two halves of the gap around dot 0,
    so the entries sum to the length of the configured range.
    """

    lengths: Tuple[float, ...] = ()

    @property
    def leading_gap(self) -> float:
        return self.lengths[0] if self.lengths else 0.0

    @property
    def total_length(self) -> float:
        return float(sum(self.lengths))

    def reversed(self) -> "DashPattern":
        """The same pattern walked from the end of the range backwards."""
        return DashPattern(tuple(reversed(self.lengths)))

    def strokes(self) -> Tuple[float, ...]:
        """Only the stroke lengths, in placement order."""
        return self.lengths[1::2]

    def pen_pattern(self) -> Tuple[List[float], float]:
        """Return ``(dash/space pattern, dash offset)`` for pen based renderers.

        Pens expect a pattern starting with a dash, so the trailing and
        leading gaps are merged into one closing space and the leading gap
        becomes the offset into the pattern.
        """
        if len(self.lengths) < 3:
            return ([], 0.0)
        body = list(self.lengths[1:-1])
        body.append(self.lengths[-1] + self.lengths[0])
        offset = self.total_length - self.leading_gap
        return (body, offset)


@dataclass(frozen=True)
class CircleLayout:
    """Result of :func:`~pycircularprogressqt.layout.compute_layout`."""

    arcs: Tuple[Arc, ...] = ()
    dots: Tuple[Dot, ...] = ()
    dash_pattern: DashPattern = field(default_factory=DashPattern)

    @property
    def is_empty(self) -> bool:
        return not self.dots


@dataclass(frozen=True)
class TouchUpdate:
    """Snapshot returned by every touch event.

    Attributes:
        progress_fraction: Stroke end fraction in [0, 1].
        progress_angle: Progress angle in radians, within [0, 2π].
        marker_position: Where the user marker dot should be drawn.
        highlighted_dot_index: Index of the single highlighted dot, or ``None``.
        direction: Current traversal direction.
        completed: Whether the completion threshold has been crossed.
        pulse_dot_index: Dot whose highlight just switched on, or ``None``.
    """

    progress_fraction: float
    progress_angle: float
    marker_position: Point
    highlighted_dot_index: Optional[int]
    direction: Direction
    completed: bool
    pulse_dot_index: Optional[int] = None

    @property
    def direction_locked(self) -> bool:
        return self.direction.is_locked
