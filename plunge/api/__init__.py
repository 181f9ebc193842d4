"""Public plunge API contracts."""

from plunge.api.events import ScrollEvent, ScrollHandler, ScrollSource, Subscription, create_scroll_source
from plunge.api.logging import PlungeLoggingConfig
from plunge.api.options import PlungeOptions
from plunge.api.surface import PanelSurface
from plunge.api.transitions import (
    HIDDEN_FRAME,
    Axis,
    ContainerPosition,
    ContainerSize,
    PanelFrame,
    PanelState,
    PositionFunction,
    PositionResult,
    Projection,
    Region,
    TransitionSpec,
    as_container_position,
    default_position,
)

__all__ = [
    "Axis",
    "ContainerPosition",
    "ContainerSize",
    "HIDDEN_FRAME",
    "PanelFrame",
    "PanelState",
    "PanelSurface",
    "PlungeLoggingConfig",
    "PlungeOptions",
    "PositionFunction",
    "PositionResult",
    "Projection",
    "Region",
    "ScrollEvent",
    "ScrollHandler",
    "ScrollSource",
    "Subscription",
    "TransitionSpec",
    "as_container_position",
    "create_scroll_source",
    "default_position",
]
