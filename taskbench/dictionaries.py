"""Merge dictionaries, resolving conflicting values by their median."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Mapping


SAMPLE_DICTS = (
    {"a": 2, "b": 3, "c": 5},
    {"a": 2, "b": 8, "d": 1},
    {"a": 7, "c": 5, "d": 1},
)


def _upper_median(values: set[int]) -> int:
    ordered = sorted(values)
    return ordered[len(ordered) // 2]


def merge_dicts(dicts: Iterable[Mapping[str, int]]) -> tuple[dict[str, int], list[str]]:
    """Merge dictionaries into one, with keys in sorted order.

    Each key gets the upper median of its distinct values. Also returns the
    sorted keys that had more than one distinct value.
    """
    values: dict[str, set[int]] = defaultdict(set)
    for mapping in dicts:
        for key, value in mapping.items():
            values[key].add(value)

    merged = {key: _upper_median(values[key]) for key in sorted(values)}
    conflicts = [key for key in merged if len(values[key]) > 1]
    return merged, conflicts


def demo() -> None:
    """Print the merge of the built-in sample dictionaries."""
    merged, conflicts = merge_dicts(SAMPLE_DICTS)
    print("Итоговый словарь:")
    for key, value in merged.items():
        print(f"{key}: {value}")
    print("Конфликтные ключи: " + "".join(f"{key} " for key in conflicts))