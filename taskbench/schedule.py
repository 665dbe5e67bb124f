"""Merge schedules, keeping the highest-priority event per time slot."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Iterable


@dataclass(frozen=True)
class Event:
    """An event at a day and hour with a priority."""

    day: int
    hour: int
    priority: int


SAMPLE_SCHEDULES = (
    (Event(1, 9, 10), Event(1, 10, 7), Event(2, 14, 9)),
    (Event(1, 9, 12), Event(2, 14, 11), Event(2, 16, 5)),
)


def merge_schedules(schedules: Iterable[Iterable[Event]]) -> list[Event]:
    """Merge schedules into one list ordered by day and hour.

    For each (day, hour) only the event with the highest priority is kept.
    """
    ordered = sorted(
        chain.from_iterable(schedules), key=lambda e: (e.day, e.hour, -e.priority)
    )
    merged: list[Event] = []
    for event in ordered:
        if not merged or (merged[-1].day, merged[-1].hour) != (event.day, event.hour):
            merged.append(event)
    return merged


def demo() -> None:
    """Print the merged sample schedule."""
    print("Слитое расписание (день, час, приоритет):")
    for event in merge_schedules(SAMPLE_SCHEDULES):
        print(f"({event.day}, {event.hour}, {event.priority})")