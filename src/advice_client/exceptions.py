"""Errors raised while asking the language model for coaching advice.

Callers that only want a string for the page can catch ``AdviceClientError``
and pick a fallback text by subclass.
"""

from __future__ import annotations


class AdviceClientError(Exception):
    """Coaching advice could not be produced."""


class AdviceAuthError(AdviceClientError):
    """Neither GEMINI_API_KEY nor API_KEY is set, or the model API answered
    401/403 for the configured key."""


class AdviceAPIError(AdviceClientError):
    """The generate-content call failed (network error or non-2xx answer).

    ``status_code`` is the HTTP code reported by the SDK, or None when the
    request never got an answer.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AdviceEmptyResponseError(AdviceAPIError):
    """The model answered but returned no text (blocked or empty candidate)."""

    def __init__(self, message: str = "Empty response from advice service") -> None:
        super().__init__(message)


class AdviceRateLimitError(AdviceAPIError):
    """The model API kept answering 429 after every retry."""

    def __init__(self, message: str = "Rate limited by the advice service") -> None:
        super().__init__(message, status_code=429)
