"""Merge per-competitor event streams into one ordered timeline."""
from __future__ import annotations

from typing import Iterable, List

from .types import Event


def merge_timeline(streams: Iterable[Iterable[Event]]) -> List[Event]:
    """Concatenate event streams and sort by elapsed time, then case-insensitive name.

    The sort is stable: names equal ignoring case ("Bob"/"bob") at the same
    elapsed time keep the order in which their streams were supplied.
    """
    merged: List[Event] = [event for stream in streams for event in stream]
    merged.sort(key=Event.sort_key)
    return merged


def round_timeline(events: Iterable[Event]) -> List[Event]:
    """Display view of a timeline: same order, numeric fields rounded."""
    return [event.rounded() for event in events]


def events_for(events: Iterable[Event], name: str) -> List[Event]:
    return [event for event in events if event.name == name]
