"""Headless panel surface that records what a renderer would draw."""

from __future__ import annotations

from collections.abc import Sequence

from plunge.api.transitions import (
    HIDDEN_FRAME,
    ContainerPosition,
    ContainerSize,
    PanelFrame,
    TransitionSpec,
)


class RecordingSurface:
    """In-memory ``PanelSurface`` keeping the latest state of every panel."""

    def __init__(self) -> None:
        self.size: ContainerSize | None = None
        self.contents: tuple[object, ...] = ()
        self.position: ContainerPosition | None = None
        self.frames: list[PanelFrame] = []
        self.applied_count = 0
        self.mounted = False

    def mount(self, size: ContainerSize, transitions: Sequence[TransitionSpec]) -> None:
        self.size = size
        self.contents = tuple(spec.content for spec in transitions)
        # Panels start hidden until the first projection lands.
        self.frames = [HIDDEN_FRAME for _ in transitions]
        self.mounted = True

    def move_container(self, position: ContainerPosition) -> None:
        self.position = position

    def apply_frame(self, index: int, frame: PanelFrame) -> None:
        self.frames[index] = frame
        self.applied_count += 1

    def unmount(self) -> None:
        self.mounted = False

    def visible_indices(self) -> tuple[int, ...]:
        return tuple(index for index, frame in enumerate(self.frames) if frame.visible)
