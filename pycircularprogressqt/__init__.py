from .models import (
    Arc,
    CircleLayout,
    Color,
    DashPattern,
    Direction,
    Dot,
    Point,
    ProgressConfig,
    TouchUpdate,
)
from .geometry import (
    CircleGeometry,
    CircleHost,
    StaticCircleHost,
    angle_for_arc_length,
    degrees_to_radians,
    position_on_circle,
    radians_to_degrees_normalized,
)
from .layout import compute_layout
from .controller import (
    ProgressController,
    TouchSession,
    TouchState,
    dots_in_travel_order,
)

__version__ = "0.1.0"


def __getattr__(name):
    # The widget pulls in PySide6; the layout and controller work without Qt.
    if name == "CircularProgressWidget":
        from .widget import CircularProgressWidget

        return CircularProgressWidget
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "CircularProgressWidget",
    # Models
    "Arc",
    "CircleLayout",
    "Color",
    "DashPattern",
    "Direction",
    "Dot",
    "Point",
    "ProgressConfig",
    "TouchUpdate",
    # Geometry
    "CircleGeometry",
    "CircleHost",
    "StaticCircleHost",
    "angle_for_arc_length",
    "degrees_to_radians",
    "position_on_circle",
    "radians_to_degrees_normalized",
    # Layout + touch state machine
    "compute_layout",
    "ProgressController",
    "TouchSession",
    "TouchState",
    "dots_in_travel_order",
]
