from .hud import Hud, favorite_prefix, sort_huds

__all__ = ["Hud", "favorite_prefix", "sort_huds"]
