"""Manage the HUD folders inside a game's ``custom`` directory."""

__version__ = "0.1.0"
