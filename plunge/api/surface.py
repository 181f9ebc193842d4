"""Rendering collaborator contract for plunge widgets."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from plunge.api.transitions import ContainerPosition, ContainerSize, PanelFrame, TransitionSpec


class PanelSurface(Protocol):
    """Surface that owns the container and one clip window per transition.

    The surface builds one clip window with an inner content element per
    transition on ``mount``. ``apply_frame`` hides the clip window for
    invisible frames, otherwise applies ``frame_*`` to the clip window and
    ``content_offset_*`` to the inner content.
    """

    def mount(self, size: ContainerSize, transitions: Sequence[TransitionSpec]) -> None: ...

    def move_container(self, position: ContainerPosition) -> None: ...

    def apply_frame(self, index: int, frame: PanelFrame) -> None: ...

    def unmount(self) -> None: ...
