"""Shared fixtures: a 100 px ring centered on the origin, and a Qt application.

Widget tests run against a real PySide6 ``QApplication`` on the ``offscreen``
platform and are skipped when PySide6 cannot be imported.
"""

import math
import os

import pytest

from pycircularprogressqt import (
    CircleGeometry,
    Point,
    ProgressConfig,
    ProgressController,
    StaticCircleHost,
)

RADIUS = 100.0


def _point_at(degrees: float, radius: float = RADIUS, center: Point = Point(0.0, 0.0)) -> Point:
    """Model-frame point on a circle at ``degrees``."""
    a = math.radians(degrees)
    return Point(center.x + radius * math.cos(a), center.y + radius * math.sin(a))


@pytest.fixture
def point_at():
    return _point_at


@pytest.fixture
def geometry():
    return CircleGeometry(center=Point(0.0, 0.0), radius=RADIUS)


@pytest.fixture
def config():
    return ProgressConfig(dot_count=8)


@pytest.fixture
def host(geometry):
    return StaticCircleHost(geometry)


@pytest.fixture
def controller(config, host):
    return ProgressController(config, host)


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
