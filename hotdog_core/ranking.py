"""Winner selection and final standings.

Ranking always runs on the unrounded timeline:
- Comparator: more units consumed first; then name, compared case-insensitively.
- A competitor's standing is its best total on the timeline (the terminal event).
"""
from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from .types import Event, StandingRow


def _standing_sort_key(name: str, total: float) -> tuple[float, str]:
    return (-total, name.lower())


def select_winner(events: Iterable[Event]) -> Optional[str]:
    """
    Name of the competitor with the most units consumed, or None if no events.

    Single linear pass; equivalent to sorting by (total desc, name asc
    ignoring case) and taking the first. Ties on the lowered name keep the
    earliest event in the scan.
    """
    best_name: Optional[str] = None
    best_total = 0.0
    for event in events:
        total = event.total_units_consumed
        if (
            best_name is None
            or total > best_total
            or (total == best_total and event.name.lower() < best_name.lower())
        ):
            best_name = event.name
            best_total = total
    return best_name


def compute_standings(events: Iterable[Event]) -> Tuple[StandingRow, ...]:
    """
    Final standings, one row per competitor.

    Competitors with identical totals share a rank (1, 1, 3) but stay in
    case-insensitive name order within the tie.
    """
    best: Dict[str, float] = {}
    for event in events:
        current = best.get(event.name)
        if current is None or event.total_units_consumed > current:
            best[event.name] = event.total_units_consumed

    ordered = sorted(best.items(), key=lambda item: _standing_sort_key(*item))
    rows: list[StandingRow] = []
    for pos, (name, total) in enumerate(ordered, start=1):
        if rows and rows[-1].total_units_consumed == total:
            rank = rows[-1].rank
        else:
            rank = pos
        rows.append(StandingRow(rank=rank, name=name, total_units_consumed=total))
    return tuple(rows)
