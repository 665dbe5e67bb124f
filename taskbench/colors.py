"""Find the most frequent colours among pixels."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, order=True)
class RGB:
    """An 8-bit-per-channel colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range 0..255: {channel}")

    def __str__(self) -> str:
        return f"RGB({self.r},{self.g},{self.b})"


SAMPLE_PIXELS = (
    RGB(255, 0, 0), RGB(255, 0, 0), RGB(0, 255, 0), RGB(0, 0, 255),
    RGB(255, 0, 0), RGB(0, 255, 0), RGB(0, 255, 0), RGB(0, 0, 255),
    RGB(0, 0, 255), RGB(0, 0, 255),
)


def top_colors(pixels: Iterable[RGB], count: int = 3) -> list[tuple[RGB, int]]:
    """Return up to count colours with their frequencies, most frequent first.

    Colours with equal frequency are ordered by their channel values.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    counts = Counter(pixels)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:count]


def demo() -> None:
    """Print the three most frequent colours of the sample pixels."""
    print("Топ-3 цвета:")
    for color, frequency in top_colors(SAMPLE_PIXELS):
        print(f"{color}: {frequency}")