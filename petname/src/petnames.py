"""Word lists and the logic to combine them into petnames.

A petname with `n` words contains, in order:

  * `n - 2` adverbs when `n >= 2`, otherwise 0 adverbs.
  * 1 adjective when `n >= 2`, otherwise 0 adjectives.
  * 1 name (noun) when `n >= 1`, otherwise 0 names.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .cardinality import saturating_product
from .product import NamesProduct
from .words import load_builtin, load_directory

logger = logging.getLogger(__name__)


def split_words(text: str) -> list[str]:
    """Split a blob of text into words on any run of whitespace."""
    return text.split()


@dataclass
class Petnames:
    """Three word lists: adjectives, adverbs and names."""
    adjectives: list[str] = field(default_factory=list)
    adverbs: list[str] = field(default_factory=list)
    names: list[str] = field(default_factory=list)

    @classmethod
    def from_text(cls, adjectives: str, adverbs: str, names: str) -> Petnames:
        """Build word lists from whitespace-delimited text blobs."""
        return cls(
            adjectives=split_words(adjectives),
            adverbs=split_words(adverbs),
            names=split_words(names),
        )

    @classmethod
    def small(cls) -> Petnames:
        return cls.from_text(*load_builtin(0))

    @classmethod
    def medium(cls) -> Petnames:
        return cls.from_text(*load_builtin(1))

    @classmethod
    def large(cls) -> Petnames:
        return cls.from_text(*load_builtin(2))

    @classmethod
    def default(cls) -> Petnames:
        """The small word lists."""
        return cls.small()

    @classmethod
    def load(cls, directory: Path) -> Petnames:
        """Read adjectives.txt, adverbs.txt and names.txt from `directory`."""
        return cls.from_text(*load_directory(directory))

    def retain(self, predicate: Callable[[str], bool]) -> None:
        """Keep only words matching `predicate`, in all three lists."""
        self.adjectives = [word for word in self.adjectives if predicate(word)]
        self.adverbs = [word for word in self.adverbs if predicate(word)]
        self.names = [word for word in self.names if predicate(word)]

    def lists(self, words: int) -> Iterator[list[str]]:
        """Yield the word list to draw from for each of `words` positions.

        Adverbs come first, then the adjective, then the name. For 3 words
        this yields adverbs, adjectives, names.
        """
        remaining = words
        while remaining > 0:
            if remaining == 1:
                yield self.names
            elif remaining == 2:
                yield self.adjectives
            else:
                yield self.adverbs
            remaining -= 1

    def cardinality(self, words: int) -> int:
        """Number of distinct petnames of `words` words.

        Zero when `words` is 0 or any list needed is empty. Saturates at
        CARDINALITY_MAX.
        """
        return saturating_product(len(words_list) for words_list in self.lists(words))

    def generate(self, rng: random.Random, words: int, separator: str) -> str:
        """Generate a single petname.

        May return fewer words than requested if one or more of the word
        lists are empty, e.g. with no adverbs, asking for 3 words may still
        give "doubtful-salmon".
        """
        return separator.join(
            rng.choice(words_list) for words_list in self.lists(words) if words_list
        )

    def generate_one(self, words: int, separator: str) -> str:
        """Like `generate`, with a fresh system-seeded random source."""
        return self.generate(random.Random(), words, separator)

    def iter(self, rng: random.Random, words: int, separator: str) -> Iterator[str]:
        """Endless petnames; any name may come up more than once."""
        while True:
            yield self.generate(rng, words, separator)

    def iter_non_repeating(
        self, rng: random.Random, words: int, separator: str
    ) -> NamesProduct:
        """Petnames that never repeat, ending once every combination is used."""
        lists = list(self.lists(words))
        logger.debug(
            "Non-repeating iterator over %d lists (sizes %s)",
            len(lists), [len(words_list) for words_list in lists],
        )
        return NamesProduct.shuffled(lists, rng, separator)


def petname(words: int, separator: str) -> str:
    """Generate a petname from the default word lists."""
    return Petnames.default().generate_one(words, separator)
