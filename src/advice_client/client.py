"""Coaching-advice client facade over the Gemini API.

All language-model network I/O lives here. Calls are wrapped with retry on
HTTP 429 and mapped onto the advice_client exception hierarchy.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from google import genai

from advice_client.config import DEFAULT_MODEL, resolve_api_key
from advice_client.exceptions import (
    AdviceAPIError,
    AdviceAuthError,
    AdviceEmptyResponseError,
    AdviceRateLimitError,
)
from advice_client.prompts import build_advice_prompt
from cardio_engine.models.enums import Gender

logger = logging.getLogger(__name__)

_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2


class AdviceClient:
    """Facade for generating short coaching advice from user parameters."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        client: Any | None = None,
    ) -> None:
        self.model = model
        if client is not None:
            self._client = client
            return
        key = resolve_api_key(api_key)
        if not key:
            raise AdviceAuthError(
                "No API key found; set GEMINI_API_KEY to enable coaching advice"
            )
        self._client = genai.Client(api_key=key)

    def get_fitness_advice(self, age: int, gender: Gender | str, max_hr: int) -> str:
        """Ask the model for three short tips for this user.

        Returns:
            The response text, stripped.

        Raises:
            AdviceAPIError: On API failure.
            AdviceEmptyResponseError: When the model returns no text.
            AdviceRateLimitError: When still rate limited after retries.
        """
        prompt = build_advice_prompt(age, gender, max_hr)
        response = self._safe_call(
            self._client.models.generate_content,
            model=self.model,
            contents=prompt,
        )
        text = (getattr(response, "text", None) or "").strip()
        if not text:
            raise AdviceEmptyResponseError()
        logger.info("Generated advice (%d chars) with %s", len(text), self.model)
        return text

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _safe_call(self, fn: Callable, *args: Any, **kwargs: Any) -> Any:
        """Call *fn* with retry + exponential backoff on 429."""
        last_exc: Exception | None = None
        for attempt in range(_MAX_RETRIES):
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                last_exc = exc
                status = getattr(exc, "code", None) or getattr(exc, "status_code", None)
                if status == 429:
                    wait = _BASE_BACKOFF_S * (2 ** attempt)
                    logger.warning(
                        "Rate limited (attempt %d/%d), retrying in %ds",
                        attempt + 1,
                        _MAX_RETRIES,
                        wait,
                    )
                    time.sleep(wait)
                    continue
                if status in (401, 403):
                    raise AdviceAuthError(f"Advice service rejected the API key: {exc}") from exc
                raise AdviceAPIError(str(exc), status_code=status) from exc

        raise AdviceRateLimitError(
            f"Rate limited after {_MAX_RETRIES} retries: {last_exc}"
        )
