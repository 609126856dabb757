"""Environment-variable-based configuration for the console runner."""

from __future__ import annotations

import os

LOCALE: str = os.environ.get("CARDIOZONE_LOCALE", "en-US")
DEFAULT_EFFORT: int = int(os.environ.get("CARDIOZONE_EFFORT", "30"))
DEFAULT_SECONDS: int = int(os.environ.get("CARDIOZONE_SECONDS", "60"))
LOG_LEVEL: str = os.environ.get("CARDIOZONE_LOG_LEVEL", "INFO")
