"""Coaching-advice client: all language-model network I/O lives here."""

from advice_client.client import AdviceClient
from advice_client.exceptions import (
    AdviceAPIError,
    AdviceAuthError,
    AdviceClientError,
    AdviceEmptyResponseError,
    AdviceRateLimitError,
)
from advice_client.prompts import build_advice_prompt

__all__ = [
    "AdviceAPIError",
    "AdviceAuthError",
    "AdviceClient",
    "AdviceClientError",
    "AdviceEmptyResponseError",
    "AdviceRateLimitError",
    "build_advice_prompt",
]
