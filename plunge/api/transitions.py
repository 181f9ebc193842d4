"""Immutable transition, region, and frame contracts."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import TypeAlias


class Axis(StrEnum):
    """Axis a transition breakpoint is measured along."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class PanelState(Enum):
    """Per-panel display state derived from one projection."""

    HIDDEN = auto()
    CLIPPED_TOP = auto()
    CLIPPED_BOTTOM = auto()
    CLIPPED_BOTH = auto()
    FULLY_VISIBLE = auto()


@dataclass(frozen=True, slots=True)
class TransitionSpec:
    """One transition panel as declared by the caller."""

    axis: Axis = Axis.HORIZONTAL
    breakpoint: float | None = None
    content: object = None

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> TransitionSpec:
        """Build a spec from ``{"at": ..., "vertical": ..., "style": ...}`` options."""
        at = options.get("at")
        breakpoint = float(at) if _is_number(at) else None
        axis = Axis.VERTICAL if options.get("vertical") is True else Axis.HORIZONTAL
        return cls(axis=axis, breakpoint=breakpoint, content=options.get("style"))


@dataclass(frozen=True, slots=True)
class Region:
    """Resolved activation rectangle; ``None`` edges are unbounded."""

    top: float | None = None
    bottom: float | None = None
    left: float | None = None
    right: float | None = None
    axis: Axis = Axis.HORIZONTAL


@dataclass(frozen=True, slots=True)
class ContainerSize:
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class ContainerPosition:
    top: float
    left: float


@dataclass(frozen=True, slots=True)
class PanelFrame:
    """Clip-window geometry for one panel at one scroll offset."""

    visible: bool
    frame_top: float = 0.0
    frame_left: float = 0.0
    frame_width: float = 0.0
    frame_height: float = 0.0
    content_offset_top: float = 0.0
    content_offset_left: float = 0.0
    clipping_top: bool = False
    clipping_bottom: bool = False
    clipping_left: bool = False
    clipping_right: bool = False

    @property
    def state(self) -> PanelState:
        if not self.visible:
            return PanelState.HIDDEN
        if self.clipping_top and self.clipping_bottom:
            return PanelState.CLIPPED_BOTH
        if self.clipping_top:
            return PanelState.CLIPPED_TOP
        if self.clipping_bottom:
            return PanelState.CLIPPED_BOTTOM
        return PanelState.FULLY_VISIBLE


HIDDEN_FRAME = PanelFrame(visible=False)


@dataclass(frozen=True, slots=True)
class Projection:
    """Container placement plus one frame per region, in region order."""

    container_position: ContainerPosition
    frames: tuple[PanelFrame, ...]


PositionResult: TypeAlias = ContainerPosition | Mapping[str, float]
PositionFunction: TypeAlias = Callable[[float], PositionResult]


def default_position(t: float) -> ContainerPosition:
    """Position used when the caller supplies none: pinned at the origin."""
    _ = t
    return ContainerPosition(top=0.0, left=0.0)


def as_container_position(raw: PositionResult) -> ContainerPosition:
    """Normalize a position function result into a ``ContainerPosition``."""
    if isinstance(raw, ContainerPosition):
        return raw
    return ContainerPosition(top=float(raw["top"]), left=float(raw["left"]))


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
