"""
Deterministic pseudo-randomness keyed by the input text.

A fresh `SeededRandom` is created for every shuffle or pick, so no state is
ever shared between requests and the same text always yields the same
sequence of choices.
"""

from typing import Sequence, TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = 0x7FFFFFFF


def text_seed(text: str) -> int:
    """Polynomial rolling hash (h * 31 + c) over UTF-16 code units, wrapped to int32, absolute value."""
    h = 0
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        h = (h * 31 + code) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


class SeededRandom:
    """32-bit linear congruential generator."""

    def __init__(self, seed: int):
        self.state = seed

    def next(self) -> int:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK
        return self.state

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Fisher-Yates shuffle of a copy of `items`."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.next() % (i + 1)
            result[i], result[j] = result[j], result[i]
        return result

    def pick(self, items: Sequence[T]) -> T:
        return items[self.next() % len(items)]


def seeded_shuffle(items: Sequence[T], seed: int) -> list[T]:
    return SeededRandom(seed).shuffle(items)


def seeded_pick(items: Sequence[T], seed: int) -> T:
    return SeededRandom(seed).pick(items)
