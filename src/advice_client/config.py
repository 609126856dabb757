"""Environment-variable-based configuration for the advice client."""

from __future__ import annotations

import os

DEFAULT_MODEL: str = os.environ.get("CARDIOZONE_ADVICE_MODEL", "gemini-2.5-flash")

_API_KEY_VARS = ("GEMINI_API_KEY", "API_KEY")


def resolve_api_key(explicit: str | None = None) -> str:
    """Return ``explicit`` or the first non-empty key from the environment."""
    if explicit:
        return explicit
    for var in _API_KEY_VARS:
        value = os.environ.get(var, "")
        if value:
            return value
    return ""
