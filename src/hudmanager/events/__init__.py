from .bus import Event, EventBus, Subscription
from .hud_events import FavoritesSavedEvent, HudActivatedEvent, HudsScannedEvent

__all__ = [
    "Event",
    "EventBus",
    "FavoritesSavedEvent",
    "HudActivatedEvent",
    "HudsScannedEvent",
    "Subscription",
]
