"""Public scroll event contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


@dataclass(frozen=True, slots=True)
class ScrollEvent:
    """Scroll notification carrying the latest offset."""

    offset: float


ScrollHandler = Callable[[ScrollEvent], None]


class ScrollSource(Protocol):
    """Anything that reports a scroll offset and notifies on change."""

    def scroll_offset(self) -> float:
        """Return current scroll offset."""

    def subscribe(self, handler: ScrollHandler) -> Subscription:
        """Subscribe handler for scroll notifications."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Unsubscribe token."""


def create_scroll_source(offset: float = 0.0) -> ScrollSource:
    """Create default in-process scroll source implementation."""
    from plunge.runtime.events import ScrollEventBus

    return ScrollEventBus(offset=offset)
