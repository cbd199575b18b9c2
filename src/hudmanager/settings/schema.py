"""Schema helpers for the application settings file."""

from __future__ import annotations

import os
from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import SEARCH_RELATIVE_THRESHOLD

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "hudmanager/settings.schema.json",
    "type": "object",
    "required": ["schema", "search", "logging"],
    "properties": {
        "schema": {"const": "hudmanager/settings@1"},
        "content_root": {"type": ["string", "null"]},
        "search": {
            "type": "object",
            "properties": {
                "threshold": {
                    "type": "number",
                    "exclusiveMinimum": 0,
                    "maximum": 1,
                },
            },
            "additionalProperties": True,
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {
                    "type": "string",
                    "enum": ["DEBUG", "INFO", "WARNING", "ERROR"],
                },
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "hudmanager/settings@1",
    "content_root": None,
    "search": {
        "threshold": SEARCH_RELATIVE_THRESHOLD,
    },
    "logging": {
        "level": "INFO",
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)

_NESTED_SECTIONS = ("search", "logging")


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in _NESTED_SECTIONS and isinstance(value, dict):
                target = merged.setdefault(key, {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            if key == "content_root":
                if value in {None, ""}:
                    merged[key] = None
                    continue
                try:
                    merged[key] = os.fspath(value)
                except TypeError:
                    continue
                continue
            merged[key] = value
    level = merged.get("logging", {}).get("level")
    if isinstance(level, str):
        merged["logging"]["level"] = level.upper()
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
