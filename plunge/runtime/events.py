"""In-process scroll source for plunge widgets."""

from __future__ import annotations

from plunge.api.events import ScrollEvent, ScrollHandler, Subscription


class ScrollEventBus:
    """Holds a scroll offset and notifies subscribers when it changes."""

    def __init__(self, offset: float = 0.0) -> None:
        self._offset = float(offset)
        self._next_id = 1
        self._subscriptions: dict[int, ScrollHandler] = {}

    def scroll_offset(self) -> float:
        return self._offset

    def subscribe(self, handler: ScrollHandler) -> Subscription:
        """Subscribe handler for scroll notifications."""
        sub_id = self._next_id
        self._next_id += 1
        self._subscriptions[sub_id] = handler
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        self._subscriptions.pop(subscription.id, None)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def publish(self, event: ScrollEvent) -> int:
        """Publish one event and return number of invoked handlers."""
        invoked = 0
        for sub_id, handler in tuple(self._subscriptions.items()):
            # Skip handlers unsubscribed by an earlier handler of this event.
            if sub_id not in self._subscriptions:
                continue
            handler(event)
            invoked += 1
        return invoked

    def scroll_to(self, offset: float) -> int:
        """Store a new offset and notify subscribers in subscription order."""
        self._offset = float(offset)
        return self.publish(ScrollEvent(offset=self._offset))
