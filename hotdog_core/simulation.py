"""Per-competitor simulation of a timed eating contest.

Each competitor is simulated independently on a virtual clock:
- The rate function f(n) gives the elapsed time at which the (n+1)-th whole
  unit is finished, given n whole units already eaten.
- Every whole unit finished strictly before `duration` produces an Event.
- Finishing exactly at `duration` counts as "not finished yet"; that unit is
  reported through the terminal event instead, so the boundary never yields
  two events for the same unit.
- The terminal event is always stamped exactly at `duration` and carries the
  whole units plus a linear estimate of the unit in progress.
"""
from __future__ import annotations

import logging
from typing import List

from .types import Event, RateFunction

logger = logging.getLogger(__name__)


def _partial_unit(elapsed: float, last_time: float, duration: float) -> float:
    """Fraction of the in-progress unit eaten by `duration`.

    `elapsed` is when the unit would have been finished (>= duration) and
    `last_time` is f(n) for that unit, measured from a zero baseline.
    A zero `last_time` raises ZeroDivisionError (degenerate rate function).
    """
    short_time = elapsed - duration
    return 1.0 - short_time / last_time


def simulate_competitor(name: str, rate_function: RateFunction, duration: float) -> List[Event]:
    """
    Simulate one competitor up to `duration`.

    Args:
      name: competitor name, copied verbatim onto every event.
      rate_function: pure callable, f(n) -> elapsed time of the (n+1)-th unit.
      duration: competition length in simulated time units (>= 0).

    Returns:
      Events in chronological order: one per whole unit finished before
      `duration`, then exactly one terminal event at `duration`.
    """
    events: List[Event] = []
    eaten = 0
    elapsed = float(rate_function(eaten))
    while elapsed < duration:
        eaten += 1
        events.append(Event(elapsed, name, eaten))
        elapsed = float(rate_function(eaten))

    # The last loop check already evaluated f(eaten); reuse it rather than
    # calling the rate function a second time for the same unit.
    last_time = elapsed
    total = eaten + _partial_unit(elapsed, last_time, duration)
    events.append(Event(duration, name, total))

    logger.debug(
        f"Simulated {name!r}: {eaten} whole units, total {total:.6f} at {duration}"
    )
    return events
