"""Greedy delivery routing weighted by point priority."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Sequence

_COST_LIMIT = 1e9


@dataclass(frozen=True)
class DeliveryPoint:
    """A named delivery location with a priority weight."""

    name: str
    x: float
    y: float
    priority: float


SAMPLE_POINTS = (
    DeliveryPoint("A", 1, 2, 2),
    DeliveryPoint("B", 3, 4, 1.5),
    DeliveryPoint("C", -2, 1, 3),
    DeliveryPoint("D", 5, 0, 2.5),
)


def _cost(point: DeliveryPoint, x: float, y: float) -> float:
    if point.priority == 0:
        return math.inf
    dx = point.x - x
    dy = point.y - y
    return math.sqrt(dx * dx + dy * dy) / point.priority


def greedy_route(
    points: Sequence[DeliveryPoint], start: tuple[float, float] = (0.0, 0.0)
) -> list[str]:
    """Visit points greedily, always going to the lowest distance/priority cost.

    Ties go to the point listed first. Points whose cost is not below 1e9
    (for instance a zero priority) are never visited.
    """
    pending = list(points)
    x, y = start
    route: list[str] = []
    while pending:
        index, chosen = min(enumerate(pending), key=lambda item: _cost(item[1], x, y))
        if not _cost(chosen, x, y) < _COST_LIMIT:
            break
        del pending[index]
        route.append(chosen.name)
        x, y = chosen.x, chosen.y
    return route


def demo() -> str:
    """Write the route through the built-in sample points and return the text."""
    route = greedy_route(SAMPLE_POINTS)
    text = "Маршрут: " + "".join(f"{name} " for name in route) + "\n"
    sys.stdout.write(text)
    return text