"""Per-team, per-day statistics on acknowledged requests."""

from __future__ import annotations

import sys
from collections import defaultdict
from dataclasses import dataclass
from statistics import fmean, median
from typing import Iterable, Mapping


@dataclass(frozen=True)
class Response:
    """One request handled by a team on a day of the week."""

    team: str
    delay_minutes: int
    acknowledged: bool
    day_of_week: str


@dataclass(frozen=True)
class ReportStats:
    """Acknowledgement statistics for one team on one day.

    The average and median delays are None when nothing was acknowledged.
    """

    avg_ack_delay: float | None
    median_ack_delay: float | None
    ack_percent: float
    total_requests: int


SAMPLE_RESPONSES = (
    Response("A", 10, True, "Mon"), Response("A", 15, True, "Mon"),
    Response("A", 20, False, "Mon"), Response("A", 12, True, "Tue"),
    Response("A", 14, True, "Tue"), Response("A", 13, True, "Tue"),
    Response("B", 30, True, "Mon"), Response("B", 40, False, "Mon"),
    Response("B", 35, True, "Mon"), Response("B", 50, True, "Tue"),
    Response("B", 44, True, "Tue"), Response("B", 39, False, "Tue"),
    Response("C", 25, True, "Mon"), Response("C", 28, True, "Mon"),
    Response("C", 27, True, "Mon"), Response("C", 22, False, "Mon"),
    Response("C", 21, True, "Tue"), Response("C", 22, False, "Tue"),
)

DEFAULT_MIN_GROUP_SIZE = 3

Report = dict[str, dict[str, ReportStats]]


def _stats(group: list[Response]) -> ReportStats:
    delays = [r.delay_minutes for r in group if r.acknowledged]
    return ReportStats(
        avg_ack_delay=fmean(delays) if delays else None,
        median_ack_delay=median(delays) if delays else None,
        ack_percent=100.0 * len(delays) / len(group),
        total_requests=len(group),
    )


def analyze_responses(
    responses: Iterable[Response], min_group_size: int = DEFAULT_MIN_GROUP_SIZE
) -> Report:
    """Compute statistics per team and day, ordered by team then day.

    Groups with fewer than min_group_size responses are left out, and a team
    with no group left does not appear at all.
    """
    grouped: dict[str, dict[str, list[Response]]] = defaultdict(lambda: defaultdict(list))
    for response in responses:
        grouped[response.team][response.day_of_week].append(response)

    report: Report = {}
    for team in sorted(grouped):
        days = grouped[team]
        kept = {
            day: _stats(days[day])
            for day in sorted(days)
            if len(days[day]) >= min_group_size
        }
        if kept:
            report[team] = kept
    return report


def _number(value: float | None) -> str:
    return "n/a" if value is None else f"{value:g}"


def format_report(report: Mapping[str, Mapping[str, ReportStats]]) -> str:
    """Render a report as text, one block per team."""
    lines = []
    for team, days in report.items():
        lines.append(f"Команда: {team}")
        for day, stat in days.items():
            lines.append(
                f"  День: {day}, Всего: {stat.total_requests}, "
                f"% подтвержд: {stat.ack_percent:g}, "
                f"Среднее: {_number(stat.avg_ack_delay)}, "
                f"Медиана: {_number(stat.median_ack_delay)}"
            )
    return "".join(f"{line}\n" for line in lines)


def demo() -> str:
    """Write the report for the built-in sample responses and return it."""
    report = analyze_responses(SAMPLE_RESPONSES)
    text = format_report(report)
    sys.stdout.write(text)
    return text