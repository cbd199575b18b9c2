"""Custom exception hierarchy for hudmanager."""

from __future__ import annotations


class HudManagerError(Exception):
    """Base class for all custom errors raised by hudmanager."""


# --- Layout ---

class LayoutError(HudManagerError):
    """Raised when the content root cannot be determined."""


class LibraryUnavailableError(LayoutError):
    """Raised when an operation needs a content root but none is bound."""


# --- Filesystem ---

class HudIOError(HudManagerError):
    """Raised when reading, writing or moving files under the content root fails."""


class FavoritesEncodingError(HudManagerError):
    """Raised when ``favorites.txt`` is not valid UTF-8 text."""


# --- Collection ---

class AlreadyActiveError(HudManagerError):
    """Raised when activating the HUD that is already active."""


class HudNotFoundError(HudManagerError):
    """Raised when a HUD name is not part of the scanned collection.

    Callers only ever pass names taken from the collection itself, so this
    signals a programming error rather than a user mistake.
    """


class NoResultsError(HudManagerError):
    """Raised when a search matches no HUD names."""


# --- Settings ---

class SettingsError(HudManagerError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
