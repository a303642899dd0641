from .competition import Competition
from .ranking import compute_standings, select_winner
from .simulation import simulate_competitor
from .timeline import events_for, merge_timeline, round_timeline
from .types import ROUND_DIGITS, Event, RateFunction, StandingRow
from .validation import (
    CompetitionSettings,
    ExpectedEvent,
    InputSanitizer,
    InvalidDurationError,
)

__all__ = [
    "Competition",
    "CompetitionSettings",
    "Event",
    "ExpectedEvent",
    "InputSanitizer",
    "InvalidDurationError",
    "ROUND_DIGITS",
    "RateFunction",
    "StandingRow",
    "compute_standings",
    "events_for",
    "merge_timeline",
    "round_timeline",
    "select_winner",
    "simulate_competitor",
]
