"""Errors reported by the petname command line."""

from __future__ import annotations

from pathlib import Path


class PetnameError(Exception):
    """Base for errors that end a run with a non-zero exit status."""


class WordListError(PetnameError):
    """A word list file could not be read."""

    def __init__(self, path: Path, cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{cause}: {self.path}")


class CardinalityError(PetnameError):
    """No combinations are possible with the chosen word lists."""

    def __init__(self, message: str):
        super().__init__(f"cardinality is zero: {message}")


class AlliterationError(PetnameError):
    """No letter is shared by the word lists."""

    def __init__(self, message: str):
        super().__init__(f"cannot alliterate: {message}")


class ConfigError(PetnameError):
    """A config file is not shaped the way the command line expects."""

    def __init__(self, message: str):
        super().__init__(f"bad config: {message}")
