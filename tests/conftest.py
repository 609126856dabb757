"""Shared test fixtures: zones, seeded random sources, speech sinks and sessions."""

from __future__ import annotations

from typing import Callable

import numpy as np
import pytest

from cardio_engine.models.zone import HeartRateZone
from cardio_engine.workout.session import WorkoutSession
from cardio_engine.workout.ticker import ManualTicker


class RecordingSpeech:
    """Speech sink that remembers everything it was asked to say."""

    def __init__(self) -> None:
        self.spoken: list[tuple[str, str]] = []

    def announce(self, text: str, locale: str) -> None:
        self.spoken.append((text, locale))


class FailingSpeech:
    """Speech sink whose backend is broken."""

    def __init__(self) -> None:
        self.calls = 0

    def announce(self, text: str, locale: str) -> None:
        self.calls += 1
        raise RuntimeError("speech synthesis unavailable")


class FixedDraw:
    """Stand-in random source returning the same ``random()`` value each call."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def aerobic_zone() -> HeartRateZone:
    """Aerobic target zone for a 30-year-old man (max HR 190): 114-152 bpm."""
    return HeartRateZone(
        identifier="aerobic",
        name="Aerobic (Target)",
        min_percent=0.6,
        max_percent=0.8,
        min_bpm=114,
        max_bpm=152,
        is_target=True,
    )


@pytest.fixture
def narrow_zone() -> HeartRateZone:
    """Round-number zone used for boundary classification: 120-150 bpm."""
    return HeartRateZone(
        identifier="test",
        name="Test",
        min_percent=0.6,
        max_percent=0.75,
        min_bpm=120,
        max_bpm=150,
    )


@pytest.fixture
def degenerate_zone() -> HeartRateZone:
    """Zone whose bounds coincide."""
    return HeartRateZone(
        identifier="point",
        name="Point",
        min_percent=0.7,
        max_percent=0.7,
        min_bpm=133,
        max_bpm=133,
    )


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def speech() -> RecordingSpeech:
    return RecordingSpeech()


@pytest.fixture
def make_session(rng, speech) -> Callable[..., tuple[WorkoutSession, ManualTicker]]:
    """Factory for a session on a ManualTicker.

    Announcement time follows session seconds, so one fire() is one second.
    """

    def _make(**kwargs) -> tuple[WorkoutSession, ManualTicker]:
        ticker = ManualTicker()
        kwargs.setdefault("rng", rng)
        kwargs.setdefault("speech", speech)
        holder: list[WorkoutSession] = []
        session = WorkoutSession(
            ticker=ticker,
            time_fn=lambda: float(holder[0].state.elapsed_seconds),
            **kwargs,
        )
        holder.append(session)
        return session, ticker

    return _make
