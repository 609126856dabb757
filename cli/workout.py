"""Console runner: simulate a guided workout from the terminal.

Usage:
    python -m cli.workout --age 40 --gender F                # real-time, 1 tick/s
    python -m cli.workout --age 30 --gender M --effort 100 --seconds 300 --fast
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

import numpy as np

from advice_client import AdviceClient, AdviceClientError
from cardio_engine.math.zones import calculate_zones, select_target_zone
from cardio_engine.models.enums import MAX_AGE, MIN_AGE, Gender
from cardio_engine.models.simulation_state import SessionSnapshot
from cardio_engine.workout import (
    IntervalTicker,
    LoggingSpeech,
    ManualTicker,
    WorkoutSession,
)
from cardio_engine.workout.clock import format_elapsed

from cli.config import DEFAULT_EFFORT, DEFAULT_SECONDS, LOCALE, LOG_LEVEL

logger = logging.getLogger(__name__)

_POLL_INTERVAL_S = 0.2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="CardioZone guided workout simulator")
    parser.add_argument("--age", type=int, required=True, help=f"Age in years ({MIN_AGE}-{MAX_AGE})")
    parser.add_argument("--gender", choices=[g.value for g in Gender], required=True)
    parser.add_argument("--effort", type=int, default=DEFAULT_EFFORT, help="Effort level 0-100")
    parser.add_argument("--seconds", type=int, default=DEFAULT_SECONDS, help="Session length")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--fast", action="store_true", help="Run ticks back to back")
    parser.add_argument("--mute", action="store_true", help="Disable spoken feedback")
    parser.add_argument("--advice", action="store_true", help="Print coaching advice first")
    return parser.parse_args(argv)


def _print_advice(age: int, gender: str, max_hr: int) -> None:
    try:
        advice = AdviceClient().get_fitness_advice(age, gender, max_hr)
    except AdviceClientError as exc:
        logger.warning("Coaching advice unavailable: %s", exc)
        return
    print(advice)
    print()


def run_session(args: argparse.Namespace) -> tuple[SessionSnapshot, int]:
    """Run one session to completion.

    Returns:
        The final snapshot (taken just before close) and the number of
        announcements made.
    """
    max_hr, zones = calculate_zones(args.age, args.gender)
    target = select_target_zone(zones)
    logger.info("Max HR %d bpm; target %s %d-%d bpm", max_hr, target.name, target.min_bpm, target.max_bpm)

    if args.advice:
        _print_advice(args.age, args.gender, max_hr)

    ticker = ManualTicker() if args.fast else IntervalTicker()

    def simulated_time() -> float:
        # Fast mode: wall time barely moves, so throttle on session seconds.
        return float(session.state.elapsed_seconds)

    session = WorkoutSession(
        rng=np.random.default_rng(args.seed),
        speech=LoggingSpeech(),
        ticker=ticker,
        time_fn=simulated_time if args.fast else time.monotonic,
        locale=LOCALE,
        initial_effort=args.effort,
    )
    session.set_muted(args.mute)

    if not session.start(target, max_hr):
        raise RuntimeError("workout session refused to start")

    try:
        if isinstance(ticker, ManualTicker):
            for _ in range(args.seconds):
                ticker.fire()
                _log_tick(session.snapshot())
        else:
            last_logged = 0
            while session.snapshot().elapsed_seconds < args.seconds:
                time.sleep(_POLL_INTERVAL_S)
                snap = session.snapshot()
                if snap.elapsed_seconds != last_logged:
                    last_logged = snap.elapsed_seconds
                    _log_tick(snap)
        final = session.snapshot()
    finally:
        session.close()

    return final, len(session.announcement_times)


def _log_tick(snap: SessionSnapshot) -> None:
    status = snap.feedback.kind.name if snap.feedback else "WARMING_UP"
    logger.info(
        "%s  %3d bpm  effort %3d%%  %s",
        format_elapsed(snap.elapsed_seconds),
        snap.current_bpm,
        snap.effort_level,
        status,
    )


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = parse_args(argv)
    try:
        final, announcements = run_session(args)
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return 2
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    feedback = final.feedback.message if final.feedback else "-"
    print(
        f"Session {format_elapsed(final.elapsed_seconds)} | final {final.current_bpm} bpm "
        f"({final.gauge_percent:.0f}% of max) | {feedback} | announcements: {announcements}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
