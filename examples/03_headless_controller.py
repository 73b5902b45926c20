#!/usr/bin/env python3
"""Headless Controller Example

Drives the layout engine and the touch state machine without Qt:
- Computing a layout for a fixed geometry
- Feeding a scripted drag through ProgressController
- Watching direction lock, dot highlights and completion in the debug log
"""

import logging
import math

from pycircularprogressqt import (
    CircleGeometry,
    Point,
    ProgressConfig,
    ProgressController,
    StaticCircleHost,
    compute_layout,
)


def point_at(geometry, degrees):
    return geometry.position_on_circle(math.radians(degrees))


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = ProgressConfig(dot_count=8)
    geometry = CircleGeometry(center=Point(0.0, 0.0), radius=100.0)

    layout = compute_layout(config, geometry)
    for dot in layout.dots:
        print(f"dot {dot.index}: {math.degrees(dot.angle):6.1f}°  size {dot.size}")
    print(f"dash pattern length: {layout.dash_pattern.total_length:.2f} "
          f"(circumference {geometry.circumference:.2f})")

    controller = ProgressController(config, StaticCircleHost(geometry))
    controller.touch_begin()
    for degrees in (3, 15, 60, 140, 250, 356):
        update = controller.touch_move(point_at(geometry, degrees))
        print(f"{degrees:3d}° -> {update.progress_fraction:5.1%} "
              f"dot={update.highlighted_dot_index} {update.direction.value} "
              f"completed={update.completed}")
    update = controller.touch_end()
    print(f"released: completed={update.completed} progress={update.progress_fraction:.0%}")


if __name__ == "__main__":
    main()
