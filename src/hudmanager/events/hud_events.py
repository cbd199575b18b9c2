from dataclasses import dataclass, field
from typing import Optional

from .bus import Event


@dataclass(kw_only=True)
class HudsScannedEvent(Event):
    root: str = ""
    hud_count: int = 0
    active: Optional[str] = None


@dataclass(kw_only=True)
class HudActivatedEvent(Event):
    name: str = ""
    previous: Optional[str] = None


@dataclass(kw_only=True)
class FavoritesSavedEvent(Event):
    names: list[str] = field(default_factory=list)
