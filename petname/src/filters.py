"""Word predicates and alliteration helpers for narrowing word lists."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable

from .errors import AlliterationError
from .petnames import Petnames

logger = logging.getLogger(__name__)


def max_letters(limit: int) -> Callable[[str], bool]:
    """Predicate keeping words of at most `limit` characters."""
    return lambda word: len(word) <= limit


def starts_with(letter: str) -> Callable[[str], bool]:
    return lambda word: word.startswith(letter)


def first_letters(words: Iterable[str]) -> set[str]:
    return {word[0] for word in words if word}


def common_first_letters(first: Iterable[str], *others: Iterable[str]) -> set[str]:
    """First letters found in `first` and in every one of `others`."""
    letters = first_letters(first)
    for words in others:
        letters &= first_letters(words)
    return letters


def choose_alliteration(
    petnames: Petnames, rng: random.Random, letter: str | None = None
) -> str:
    """Pick the letter every word of an alliterative name will start with.

    If `letter` is given it must begin at least one word in each list;
    otherwise a letter is chosen at random from those the lists share.
    """
    letters = common_first_letters(petnames.adjectives, petnames.adverbs, petnames.names)
    if letter is not None:
        if letter not in letters:
            raise AlliterationError(
                "no petnames begin with the chosen alliteration character"
            )
        return letter
    if not letters:
        raise AlliterationError("word lists have no initial letters in common")
    # Sorted so that a seeded rng always picks the same letter
    chosen = rng.choice(sorted(letters))
    logger.info("Alliterating on %r (from %d candidates)", chosen, len(letters))
    return chosen
