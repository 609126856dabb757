"""Periodic tick sources for a workout session.

A session owns exactly one ticker. ``IntervalTicker`` fires once per period
on an APScheduler background thread; ``ManualTicker`` never fires on its own
and is driven explicitly (tests, fast console runs).
"""

from __future__ import annotations

import inspect
import logging
import weakref
from typing import Callable, Protocol

from apscheduler.schedulers.background import BackgroundScheduler

from cardio_engine.models.enums import TICK_PERIOD_S

logger = logging.getLogger(__name__)

_JOB_ID = "workout_tick"


class Ticker(Protocol):
    def start(self, callback: Callable[[], object]) -> None:
        ...

    def stop(self) -> None:
        ...


def _weak_job(
    callback: Callable[[], object], scheduler: BackgroundScheduler
) -> Callable[[], object]:
    """Wrap a bound method so the job does not keep its owner alive.

    Plain functions are returned unchanged.
    """
    if not inspect.ismethod(callback):
        return callback
    ref = weakref.WeakMethod(callback)

    def run() -> object:
        target = ref()
        if target is None:
            logger.info("Tick owner was garbage collected without close(); stopping ticker")
            if scheduler.running:
                scheduler.shutdown(wait=False)
            return None
        return target()

    return run


class IntervalTicker:
    """Calls ``callback`` every ``period_s`` seconds until stopped.

    ``max_instances=1`` keeps ticks strictly sequential and ``coalesce``
    collapses missed runs into one, so a slow tick never causes a burst.
    ``stop()`` waits for an in-flight tick before returning.
    """

    def __init__(self, period_s: float = TICK_PERIOD_S) -> None:
        if period_s <= 0:
            raise ValueError(f"period_s must be positive, got {period_s}")
        self.period_s = period_s
        self._scheduler: BackgroundScheduler | None = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self, callback: Callable[[], object]) -> None:
        """Schedule ``callback`` every period.

        A bound method is held weakly: once its owner is garbage collected
        (an abandoned session that was never closed), the next run shuts the
        scheduler down instead of keeping the owner alive forever.
        """
        if self._scheduler is not None:
            raise RuntimeError("ticker already started")
        scheduler = BackgroundScheduler(daemon=True)
        scheduler.add_job(
            _weak_job(callback, scheduler),
            "interval",
            seconds=self.period_s,
            id=_JOB_ID,
            max_instances=1,
            coalesce=True,
        )
        scheduler.start()
        self._scheduler = scheduler
        logger.debug("Interval ticker started (period=%.2fs)", self.period_s)

    def stop(self) -> None:
        """Shut down the scheduler; safe to call more than once."""
        scheduler = self._scheduler
        if scheduler is None or not scheduler.running:
            return
        scheduler.shutdown(wait=True)
        logger.debug("Interval ticker stopped")


class ManualTicker:
    """Ticker without a clock of its own; ``fire()`` runs ticks inline."""

    def __init__(self) -> None:
        self._callback: Callable[[], object] | None = None
        self.stopped = False

    @property
    def running(self) -> bool:
        return self._callback is not None and not self.stopped

    def start(self, callback: Callable[[], object]) -> None:
        self._callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True

    def fire(self, times: int = 1) -> int:
        """Invoke the callback up to ``times`` times; return how many ran."""
        fired = 0
        for _ in range(times):
            if not self.running:
                break
            self._callback()  # type: ignore[misc]
            fired += 1
        return fired
