"""BaseViewModel: pure Python, no Qt dependency."""

from __future__ import annotations

from typing import Callable, Type

from ...events.bus import EventBus, Subscription


class BaseViewModel:
    """Track event-bus subscriptions so ``dispose()`` can cancel them."""

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    def subscribe_event(
        self,
        event_bus: EventBus,
        event_type: Type,
        handler: Callable,
    ) -> Subscription:
        sub = event_bus.subscribe(event_type, handler)
        self._subscriptions.append(sub)
        return sub

    def dispose(self) -> None:
        for sub in self._subscriptions:
            sub.cancel()
        self._subscriptions.clear()
