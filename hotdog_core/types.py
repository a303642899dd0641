"""Value types shared by the simulator, timeline merger and ranking."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict

# Display precision of the emitted timeline.
ROUND_DIGITS = 3

# Given whole units already consumed, the elapsed time at which the next one completes.
RateFunction = Callable[[int], float]


@dataclass(frozen=True)
class Event:
    """
    A state observation for one competitor.

    Emitted whenever a competitor finishes a whole unit, and once per
    competitor at the end of the competition (possibly fractional total).
    Equality is exact on all three fields.
    """

    elapsed_time: float
    name: str
    total_units_consumed: float

    def __post_init__(self) -> None:
        # Accept numeric strings (fixtures) and ints; store floats.
        object.__setattr__(self, "elapsed_time", float(self.elapsed_time))
        object.__setattr__(self, "total_units_consumed", float(self.total_units_consumed))

    def rounded(self) -> Event:
        """Return a copy with numeric fields rounded to ROUND_DIGITS places."""
        return Event(
            elapsed_time=round(self.elapsed_time, ROUND_DIGITS),
            name=self.name,
            total_units_consumed=round(self.total_units_consumed, ROUND_DIGITS),
        )

    def sort_key(self) -> tuple[float, str]:
        return (self.elapsed_time, self.name.lower())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "elapsedTime": self.elapsed_time,
            "name": self.name,
            "totalHotDogsEaten": self.total_units_consumed,
        }


@dataclass(frozen=True)
class StandingRow:
    rank: int
    name: str
    total_units_consumed: float
