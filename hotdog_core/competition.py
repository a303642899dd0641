"""Timed eating competition (pure core, no I/O).

A Competition holds a read-only mapping of competitor name -> rate function
and a duration in simulated time units. Running it produces:
- unrounded_events: the full-precision merged timeline, used for ranking
- events: the same timeline with numeric fields rounded for display

Lifecycle:
- Construction validates the duration (InvalidDurationError if negative).
- run() recomputes both timelines from scratch on every call.
- winner()/standings() read the unrounded timeline of the last run().
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .ranking import compute_standings, select_winner
from .simulation import simulate_competitor
from .timeline import merge_timeline, round_timeline
from .types import Event, RateFunction, StandingRow
from .validation import InputSanitizer

logger = logging.getLogger(__name__)


class Competition:
    def __init__(self, competitors: Mapping[str, RateFunction] | None, duration: float) -> None:
        """
        Args:
          competitors: competitor name -> rate function (copied; not re-read later).
          duration: competition length, must be >= 0.

        Raises:
          InvalidDurationError: if duration is negative or not numeric.
        """
        settings = InputSanitizer.validate_settings(competitors, duration)
        self.competitors: Mapping[str, RateFunction] = MappingProxyType(
            dict(settings.competitors)
        )
        self.duration: float = settings.duration
        self.unrounded_events: Optional[List[Event]] = None
        self.events: Optional[List[Event]] = None

    def run(self) -> List[Event]:
        """Simulate every competitor and return the rounded, sorted timeline."""
        streams = [
            simulate_competitor(name, rate_function, self.duration)
            for name, rate_function in self.competitors.items()
        ]
        self.unrounded_events = merge_timeline(streams)
        self.events = round_timeline(self.unrounded_events)
        logger.debug(
            f"Competition run: {len(self.competitors)} competitors, "
            f"{len(self.events)} events, duration {self.duration}"
        )
        return self.events

    def _require_run(self) -> List[Event]:
        if self.unrounded_events is None:
            raise RuntimeError("Competition.run() must be called before ranking.")
        return self.unrounded_events

    def winner(self) -> Optional[str]:
        """Most units consumed; ties go to the name first in case-insensitive order."""
        return select_winner(self._require_run())

    def standings(self) -> Tuple[StandingRow, ...]:
        return compute_standings(self._require_run())
