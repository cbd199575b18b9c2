"""HUD value type and display ordering."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple


@dataclass(slots=True)
class Hud:
    """One HUD directory discovered under the content root."""

    name: str
    """Directory name; unique within a scan and used as the identity key."""

    location: Path
    """Directory currently backing the HUD. Only activation changes it."""

    favorite: bool = False

    @classmethod
    def from_descriptor(cls, descriptor: Path, *, favorite: bool = False) -> "Hud":
        """Build a HUD from the path of the descriptor file inside it."""

        location = descriptor.parent
        return cls(name=location.name, location=location, favorite=favorite)

    def sort_key(self) -> Tuple[bool, str]:
        """Favorites first, then by name in code point order."""

        return (not self.favorite, self.name)

    def exists(self) -> bool:
        return self.location.is_dir()


def sort_huds(huds: Iterable[Hud]) -> List[Hud]:
    """Return *huds* ordered favorites-first and alphabetically within each group."""

    return sorted(huds, key=Hud.sort_key)


def favorite_prefix(huds: Iterable[Hud]) -> List[Hud]:
    """Return the leading run of favorited HUDs in *huds*."""

    prefix: List[Hud] = []
    for hud in huds:
        if not hud.favorite:
            break
        prefix.append(hud)
    return prefix


__all__ = ["Hud", "favorite_prefix", "sort_huds"]
