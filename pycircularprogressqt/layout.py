"""Circular layout engine.

Turns a :class:`~pycircularprogressqt.models.ProgressConfig` and a
:class:`~pycircularprogressqt.geometry.CircleGeometry` into the arcs, dots and
dash pattern the renderer draws. Pure and deterministic: calling it twice with
the same inputs yields equal layouts, and degenerate inputs (no geometry, zero
radius, zero dots) yield an empty layout instead of raising.

Placement walks the ring once, starting at ``config.start_angle``::

    dot_0 | pad | arc_0 | pad | dot_1 | pad | arc_1 | ... | arc_{N-1} | pad | dot_0

Each dot occupies its diameter converted to an angle; every dot-to-dot step is
``angular_span / dot_count`` wide, so dots sit at evenly spaced angles.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .geometry import CircleGeometry
from .models import Arc, CircleLayout, DashPattern, Dot, Point, ProgressConfig

_logger = logging.getLogger(__name__)


def compute_layout(
    config: ProgressConfig,
    geometry: Optional[CircleGeometry],
    angle_for_arc_length: Optional[Callable[[float], float]] = None,
) -> CircleLayout:
    """Compute arcs, dots and the dash pattern for ``config`` on ``geometry``.

    Args:
        config: Indicator configuration.
        geometry: Ring geometry supplied by the host, or ``None`` before the
            first layout pass.
        angle_for_arc_length: Arc-length to angle conversion, usually the
            host's. Defaults to ``geometry.angle_for_arc_length``.

    Returns:
        A :class:`CircleLayout` with exactly ``config.dot_count`` dots and arcs,
        or an empty layout for degenerate input.
    """
    n = config.dot_count
    if geometry is None or geometry.is_degenerate or n < 1:
        return CircleLayout()
    to_angle = angle_for_arc_length or geometry.angle_for_arc_length

    padding_angle = to_angle(config.spacing_between_dot_and_line)

    def half_dot_angle(index: int) -> float:
        # The dot after the last one is dot 0 again.
        return to_angle(config.dot_size(index % n) / 2.0)

    step = config.angular_span / n
    start_angle = config.start_angle

    placements: List[float] = []
    arcs: List[Arc] = []
    lengths: List[float] = [geometry.arc_length_for_angle(half_dot_angle(0) + padding_angle)]

    for i in range(n):
        placements.append(start_angle)
        entering = half_dot_angle(i) + padding_angle
        exiting = half_dot_angle(i + 1) + padding_angle

        start_angle += entering
        arc_angle = step - entering - exiting
        arcs.append(Arc(start_angle=start_angle, end_angle=start_angle + arc_angle))

        lengths.append(geometry.arc_length_for_angle(arc_angle))
        if i < n - 1:
            lengths.append(geometry.arc_length_for_angle(2.0 * exiting))
        else:
            # Trailing half of the gap around dot 0 closes the ring.
            lengths.append(geometry.arc_length_for_angle(exiting))

        start_angle += arc_angle + exiting

    positions = geometry.positions_on_circle(placements)
    dots = tuple(
        Dot(
            index=i,
            position=Point(float(positions[i, 0]), float(positions[i, 1])),
            angle=angle,
            size=config.dot_size(i),
        )
        for i, angle in enumerate(placements)
    )

    _logger.debug("Computed layout: %d dots, radius=%.2f", n, geometry.radius)
    return CircleLayout(arcs=tuple(arcs), dots=dots, dash_pattern=DashPattern(tuple(lengths)))
