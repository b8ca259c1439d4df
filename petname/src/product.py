"""Non-repeating petnames from the product of shuffled word lists.

Each position holds its own shuffled copy of a word list followed by a wrap
marker, and positions advance like an odometer: the leftmost position
cycles fastest, and each time a position passes its wrap marker it carries
into the position to its right. When the rightmost position wraps, every
combination has been produced exactly once.
"""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field

from .cardinality import saturating_product

# End-of-cycle marker; never equal to any word.
WRAP = object()


@dataclass
class Position:
    """One word slot: its shuffled cycle, where we are in it, current word."""
    cycle: list = field(default_factory=list)
    offset: int = 0
    current: str | None = None

    def draw(self):
        """Next element of the cycle, wrapping back to the start."""
        item = self.cycle[self.offset]
        self.offset = (self.offset + 1) % len(self.cycle)
        return item


def advance(positions: list[Position]) -> bool:
    """Step the odometer by one combination.

    Returns True when there are no more combinations: either the last
    position has wrapped or some position has no words at all. Otherwise
    every position's `current` holds the next combination.
    """
    carry = True
    for position in positions:
        if not carry and position.current is not None:
            continue
        item = position.draw()
        if item is WRAP:
            # Back at the start: take the first word again and make the
            # next position advance too.
            item = position.draw()
            if item is WRAP:
                return True
            position.current = item
            carry = True
        else:
            position.current = item
            carry = False
    return carry


def capacity(lists: list[list[str]], separator: str) -> int:
    """Longest possible name length, rounded up to a power of two."""
    longest = sum(max(len(word) for word in words) for words in lists if words)
    total = longest + len(separator) * max(len(lists) - 1, 0)
    return 1 << max(total - 1, 0).bit_length()


class NamesProduct:
    """Iterator over every combination of the given word lists, once each."""

    def __init__(self, positions: list[Position], separator: str, size: int, capacity: int = 0):
        self.positions = positions
        self.separator = separator
        self.size = size
        self.capacity = capacity
        self._done = False

    @classmethod
    def shuffled(
        cls, lists: list[list[str]], rng: random.Random, separator: str
    ) -> NamesProduct:
        """Shuffle each list with `rng`, then cycle through their product.

        The leftmost list cycles most rapidly.
        """
        positions = []
        for words in lists:
            cycle = list(words)
            rng.shuffle(cycle)
            cycle.append(WRAP)
            positions.append(Position(cycle=cycle))
        size = saturating_product(len(words) for words in lists)
        return cls(positions, separator, size, capacity(lists, separator))

    def __iter__(self) -> NamesProduct:
        return self

    def __next__(self) -> str:
        if self._done:
            raise StopIteration
        if not self.positions:
            # Zero words still makes one (empty) name.
            self._done = True
            return ""
        if advance(self.positions):
            self._done = True
            raise StopIteration
        self.size = max(self.size - 1, 0)
        return self.separator.join(position.current for position in self.positions)

    def __length_hint__(self) -> int:
        return 0 if self._done else min(self.size, sys.maxsize)
