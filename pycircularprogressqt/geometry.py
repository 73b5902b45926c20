"""Circle geometry helpers shared by the layout engine and the controller.

The host (usually :class:`~pycircularprogressqt.widget.CircularProgressWidget`)
owns the bounds of the ring. It is seen by the core only through the narrow
:class:`CircleHost` protocol: center, radius, circumference, the
arc-length to angle conversion and a redraw request.

Angles are radians in the model frame (y grows downwards, so a positive angle
turns clockwise on screen).

Typical usage:

    geometry = CircleGeometry.from_bounds(width=320, height=320, padding=32)
    p = geometry.position_on_circle(math.pi / 2)
    a = geometry.angle_for_arc_length(12.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence

import numpy as np

from .models import TWO_PI, Point


def degrees_to_radians(degrees: float) -> float:
    """Plain scale, no normalization."""
    return degrees * math.pi / 180.0


def radians_to_degrees_normalized(angle: float) -> float:
    """Convert radians to degrees in [0, 360).

    Non-negative values pass through; negative values get 360 added.
    """
    deg = angle * 180.0 / math.pi
    return deg if deg >= 0 else deg + 360.0


def normalize_angle(angle: float) -> float:
    """Map a raw ``atan2`` angle (-π, π] into [0, 2π) via degrees."""
    return degrees_to_radians(radians_to_degrees_normalized(angle))


def distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


class CircleHost(Protocol):
    """Capability the rendering host provides to the core."""

    @property
    def center_position(self) -> Point: ...

    @property
    def radius(self) -> float: ...

    @property
    def circumference(self) -> float: ...

    def angle_for_arc_length(self, length: float) -> float: ...

    def update_user_path(self) -> None: ...


@dataclass(frozen=True)
class CircleGeometry:
    """Center, radius and circumference of the ring.

    ``circumference`` defaults to ``2π * radius``; a host may report its own.
    """

    center: Point = Point()
    radius: float = 0.0
    circumference: Optional[float] = None

    def __post_init__(self) -> None:
        if self.circumference is None:
            object.__setattr__(self, "circumference", TWO_PI * self.radius)

    @classmethod
    def from_bounds(cls, width: float, height: float, padding: float) -> "CircleGeometry":
        """Ring centered in the bounds, inset by ``padding`` from the short side."""
        radius = max(0.0, min(width, height) / 2.0 - padding)
        return cls(center=Point(width / 2.0, height / 2.0), radius=radius)

    @classmethod
    def from_host(cls, host: Optional[CircleHost]) -> Optional["CircleGeometry"]:
        if host is None:
            return None
        return cls(
            center=host.center_position,
            radius=float(host.radius),
            circumference=float(host.circumference),
        )

    @property
    def is_degenerate(self) -> bool:
        return not (self.radius > 0 and self.circumference > 0)

    def angle_for_arc_length(self, length: float) -> float:
        """``(2π / circumference) * length``; zero for a degenerate circle."""
        if self.is_degenerate:
            return 0.0
        return (TWO_PI / self.circumference) * length

    def arc_length_for_angle(self, angle: float) -> float:
        return angle * self.circumference / TWO_PI

    def position_on_circle(self, angle: float) -> Point:
        x = self.center.x + self.radius * math.cos(angle)
        y = self.center.y + self.radius * math.sin(angle)
        return Point(x, y)

    def positions_on_circle(self, angles: Sequence[float]) -> np.ndarray:
        """Vectorized :meth:`position_on_circle`; returns an (N, 2) array."""
        a = np.asarray(angles, dtype=np.float64)
        xs = self.center.x + self.radius * np.cos(a)
        ys = self.center.y + self.radius * np.sin(a)
        return np.stack([xs, ys], axis=1) if a.size else np.empty((0, 2))

    def raw_angle(self, position: Point) -> float:
        """``atan2`` angle of ``position`` around the center, in (-π, π]."""
        return math.atan2(position.y - self.center.y, position.x - self.center.x)

    def in_annulus(self, position: Point, half_width: float) -> bool:
        """True when ``position`` lies inside the outer circle and outside the inner one."""
        d = distance(position, self.center)
        return d <= self.radius + half_width and not d < self.radius - half_width


def position_on_circle(geometry: Optional[CircleGeometry], angle: float) -> Point:
    """Position for ``angle``; the zero point while no geometry is available."""
    if geometry is None:
        return Point()
    return geometry.position_on_circle(angle)


def angle_for_arc_length(geometry: Optional[CircleGeometry], length: float) -> float:
    """Arc length to angle; zero while no geometry is available."""
    if geometry is None:
        return 0.0
    return geometry.angle_for_arc_length(length)


class StaticCircleHost:
    """A :class:`CircleHost` backed by a fixed :class:`CircleGeometry`.

    Useful for headless hosts and tests. ``on_redraw`` is called for every
    redraw request; ``redraw_requests`` counts them.
    """

    def __init__(
        self,
        geometry: CircleGeometry,
        on_redraw: Optional[Callable[[], None]] = None,
    ) -> None:
        self.geometry = geometry
        self._on_redraw = on_redraw
        self.redraw_requests = 0

    @property
    def center_position(self) -> Point:
        return self.geometry.center

    @property
    def radius(self) -> float:
        return self.geometry.radius

    @property
    def circumference(self) -> float:
        return self.geometry.circumference

    def angle_for_arc_length(self, length: float) -> float:
        return self.geometry.angle_for_arc_length(length)

    def update_user_path(self) -> None:
        self.redraw_requests += 1
        if self._on_redraw is not None:
            self._on_redraw()
