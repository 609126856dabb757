"""Speech sinks: where the announcer sends its spoken feedback.

The engine depends only on the ``SpeechSink`` protocol. Every sink must
return promptly: ``announce`` is called from inside the tick and is never
awaited.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Protocol

logger = logging.getLogger(__name__)

_QUEUE_MAXLEN = 8


class SpeechSink(Protocol):
    def announce(self, text: str, locale: str) -> None:
        ...


class NullSpeech:
    """No audio capability; every announcement is dropped."""

    def announce(self, text: str, locale: str) -> None:
        return None


class LoggingSpeech:
    """Writes each utterance to the log. Used by the console runner."""

    def announce(self, text: str, locale: str) -> None:
        logger.info("[speech %s] %s", locale, text)


class QueuedSpeech:
    """Buffers utterances for a front end that speaks them later.

    The Streamlit page drains the queue on each refresh and hands the text
    to the browser's speech synthesis. Old entries fall off when the queue
    is full. ``announce`` and ``drain`` run on different threads and rely on
    ``deque.append`` / ``deque.popleft`` being atomic.
    """

    def __init__(self, maxlen: int = _QUEUE_MAXLEN) -> None:
        self._pending: deque[tuple[str, str]] = deque(maxlen=maxlen)

    def announce(self, text: str, locale: str) -> None:
        self._pending.append((text, locale))

    def drain(self) -> list[tuple[str, str]]:
        """Return and clear all pending ``(text, locale)`` pairs.

        Safe against a concurrent ``announce`` from the tick thread: items
        are popped one by one, so nothing appended meanwhile is lost.
        """
        items = []
        while True:
            try:
                items.append(self._pending.popleft())
            except IndexError:
                return items

    def __len__(self) -> int:
        return len(self._pending)
