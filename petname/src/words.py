"""Word list loading: built-in lists and custom directories."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import WordListError

logger = logging.getLogger(__name__)

WORDS_DIR = Path(__file__).parent.parent / "words"

# Complexity level → built-in list directory
COMPLEXITIES = {
    0: "small",
    1: "medium",
    2: "large",
}

# Files expected in every word list directory, in constructor order
WORD_FILES = ("adjectives.txt", "adverbs.txt", "names.txt")


def load_builtin(complexity: int = 0) -> tuple[str, str, str]:
    """Return the (adjectives, adverbs, names) text of a built-in list."""
    if complexity not in COMPLEXITIES:
        raise ValueError(
            f"Unknown complexity {complexity!r}; expected one of {sorted(COMPLEXITIES)}"
        )
    return load_directory(WORDS_DIR / COMPLEXITIES[complexity])


def load_directory(directory: Path) -> tuple[str, str, str]:
    """Read adjectives.txt, adverbs.txt and names.txt from `directory`.

    Each file should be UTF-8 text with words separated by whitespace.
    """
    directory = Path(directory)
    adjectives, adverbs, names = (
        _read_file(directory / filename) for filename in WORD_FILES
    )
    return adjectives, adverbs, names


def _read_file(path: Path) -> str:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(path, e) from e
    logger.debug("Loaded %s (%d bytes)", path, len(text))
    return text
