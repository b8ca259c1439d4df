"""Shared test fixtures for petname tests."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from petname.src.petnames import Petnames


# ── Word list fixtures ──────────────────────────────────────────


@pytest.fixture
def tiny_petnames():
    """Two adjectives, one adverb, two names: four 2-word combinations."""
    return Petnames.from_text("big red", "fast", "cat dog")


@pytest.fixture
def mixed_petnames():
    """Lists of different sizes so each position is distinguishable."""
    return Petnames.from_text(
        "amber bold calm",
        "barely gently oddly openly",
        "ant bee",
    )


@pytest.fixture
def rng():
    """A seeded random source."""
    return random.Random(42)


# ── Word file fixtures ──────────────────────────────────────────


def write_word_dir(directory: Path, adjectives: str, adverbs: str, names: str) -> Path:
    """Write adjectives.txt, adverbs.txt and names.txt into `directory`."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "adjectives.txt").write_text(adjectives, encoding="utf-8")
    (directory / "adverbs.txt").write_text(adverbs, encoding="utf-8")
    (directory / "names.txt").write_text(names, encoding="utf-8")
    return directory


@pytest.fixture
def word_dir(tmp_path):
    """A custom word list directory matching tiny_petnames."""
    return write_word_dir(tmp_path / "words", "big\nred\n", "fast\n", "cat\ndog\n")


@pytest.fixture
def make_word_dir(tmp_path):
    """Factory writing custom word list directories under tmp_path."""
    def _make(name: str, adjectives: str, adverbs: str, names: str) -> Path:
        return write_word_dir(tmp_path / name, adjectives, adverbs, names)
    return _make
