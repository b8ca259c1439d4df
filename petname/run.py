"""CLI entrypoint for petname: generate human readable random names."""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from collections.abc import Iterable, Iterator
from itertools import islice
from pathlib import Path
from typing import TextIO

import yaml

from petname.src.errors import CardinalityError, ConfigError, PetnameError
from petname.src.filters import choose_alliteration, max_letters, starts_with
from petname.src.petnames import Petnames
from petname.src.words import COMPLEXITIES, load_builtin

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path(__file__).parent / "config" / "default.yaml"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Disconnected(Exception):
    """The reader of our output went away while we were streaming."""


def load_config(config_path: Path) -> dict:
    """Load a YAML config mapping, resolving `inherits: <name>` first.

    The base named by `inherits` lives one directory up from the config
    (presets/docker.yaml inherits from default.yaml).
    """
    config_path = Path(config_path)
    with open(config_path) as f:
        config = yaml.safe_load(f)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"{config_path} must hold a mapping, not {type(config).__name__}"
        )

    base_name = config.pop("inherits", None)
    if base_name is None:
        return config
    if not isinstance(base_name, str):
        raise ConfigError(f"{config_path}: inherits must name a config, got {base_name!r}")
    base = load_config(config_path.parent.parent / f"{base_name}.yaml")
    return _deep_merge(base, config)


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _single_char(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative number, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="petname",
        description="Generate human readable random names.",
        epilog=(
            "Based on Dustin Kirkland's petname project "
            "<https://github.com/dustinkirkland/petname>."
        ),
    )
    # Everything defaults to None so the config file can fill it in
    parser.add_argument("-w", "--words", type=_non_negative, help="Number of words in name")
    parser.add_argument("-s", "--separator", help="Separator between words")

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-c", "--complexity", type=int, choices=[0, 1, 2], metavar="COM",
        help="Use small words (0), medium words (1), or large words (2)",
    )
    source.add_argument(
        "-d", "--dir", dest="directory", type=Path, metavar="DIR",
        help="Directory containing adjectives.txt, adverbs.txt, names.txt",
    )

    amount = parser.add_mutually_exclusive_group()
    amount.add_argument(
        "--count", type=_non_negative,
        help=(
            "Generate multiple names; pass 0 to produce infinite "
            "names (--count=0 is deprecated; use --stream instead)"
        ),
    )
    amount.add_argument(
        "--stream", action="store_true", default=None, help="Stream names continuously",
    )

    parser.add_argument(
        "--non-repeating", action="store_true", default=None,
        help="Do not generate the same name more than once",
    )
    parser.add_argument(
        "-l", "--letters", type=_non_negative,
        help="Maximum number of letters in each word; 0 for unlimited",
    )
    parser.add_argument(
        "-a", "--alliterate", action="store_true", default=None,
        help="Generate names where each word begins with the same letter",
    )
    parser.add_argument(
        "-A", "--alliterate-with", type=_single_char, metavar="LETTER",
        help="Generate names where each word begins with the given letter",
    )
    # For compatibility with upstream.
    parser.add_argument(
        "-u", "--ubuntu", action="store_true", default=None, help="Alias; see --alliterate",
    )
    parser.add_argument("--seed", type=int, help="Seed for the random source")
    parser.add_argument(
        "--config", type=Path, default=None, help="Path to a config YAML",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress to stderr",
    )
    return parser


def resolve_options(args: argparse.Namespace) -> dict:
    """Merge command line flags over the config file's petname section.

    A config given with --config is layered over the default config, so it
    only needs the keys it changes.
    """
    config = load_config(DEFAULT_CONFIG)
    if args.config:
        config = _deep_merge(config, load_config(args.config))
    section = config.get("petname") or {}
    if not isinstance(section, dict):
        raise ConfigError(f"petname section must be a mapping, got {section!r}")
    options = dict(section)
    for key, value in vars(args).items():
        if value is not None and key not in ("config", "verbose", "ubuntu"):
            options[key] = value
    # An explicit --complexity beats a directory from the config
    if args.complexity is not None:
        options["directory"] = None
    options["alliterate"] = bool(
        options.get("alliterate") or args.ubuntu or options.get("alliterate_with")
    )
    validate_options(options)
    return options


def _is_count(value) -> bool:
    # bool is an int subclass; `words: true` is still a mistake
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_options(options: dict) -> None:
    """Check config-supplied values the way argparse checks the flags."""
    for key in ("words", "count", "letters"):
        if not _is_count(options.get(key)):
            raise ConfigError(f"{key} must be a non-negative integer, got {options.get(key)!r}")
    if not isinstance(options.get("separator"), str):
        raise ConfigError(f"separator must be a string, got {options.get('separator')!r}")
    complexity = options.get("complexity")
    if isinstance(complexity, bool) or complexity not in COMPLEXITIES:
        raise ConfigError(
            f"complexity must be one of {sorted(COMPLEXITIES)}, got {complexity!r}"
        )
    letter = options.get("alliterate_with")
    if letter is not None and not (isinstance(letter, str) and len(letter) == 1):
        raise ConfigError(f"alliterate_with must be a single character, got {letter!r}")
    directory = options.get("directory")
    if directory is not None and not isinstance(directory, (str, Path)):
        raise ConfigError(f"directory must be a path, got {directory!r}")
    seed = options.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigError(f"seed must be an integer, got {seed!r}")
    for key in ("stream", "non_repeating", "alliterate"):
        if not isinstance(options.get(key, False), bool):
            raise ConfigError(f"{key} must be true or false, got {options[key]!r}")


def load_petnames(options: dict) -> Petnames:
    """Built-in word lists by complexity, or custom ones from a directory."""
    if options.get("directory"):
        return Petnames.load(Path(options["directory"]))
    return Petnames.from_text(*load_builtin(options["complexity"]))


def printer(out: TextIO, names: Iterable[str], count: int | None) -> None:
    """Write names one per line; all of them when `count` is None."""
    if count is None:
        try:
            for name in names:
                out.write(name + "\n")
            out.flush()
        except BrokenPipeError as e:
            raise Disconnected() from e
    else:
        for name in islice(names, count):
            out.write(name + "\n")
        out.flush()


def run(options: dict, out: TextIO) -> None:
    words = options["words"]
    separator = options["separator"]

    petnames = load_petnames(options)

    # If requested, limit the number of letters.
    if options.get("letters"):
        petnames.retain(max_letters(options["letters"]))

    cardinality = petnames.cardinality(words)
    logger.info(
        "Word lists: %d adjectives, %d adverbs, %d names; cardinality %d for %d words",
        len(petnames.adjectives), len(petnames.adverbs), len(petnames.names),
        cardinality, words,
    )
    if cardinality == 0:
        raise CardinalityError("no petnames to choose from; try relaxing constraints")

    rng = random.Random(options.get("seed"))

    if options.get("alliterate"):
        letter = choose_alliteration(petnames, rng, options.get("alliterate_with"))
        petnames.retain(starts_with(letter))

    count = options.get("count", 1)
    if count == 0:
        logger.warning(
            "Specifying --count=0 to continuously produce petnames is "
            "deprecated and its behaviour will change in a future version; "
            "specify --stream instead."
        )
    if options.get("stream") or count == 0:
        count = None

    names: Iterator[str]
    if options.get("non_repeating"):
        names = petnames.iter_non_repeating(rng, words, separator)
    else:
        names = petnames.iter(rng, words, separator)
    printer(out, names, count)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        options = resolve_options(args)
        run(options, sys.stdout)
    except Disconnected:
        # Python flushes stdout at exit; point it somewhere that won't fail.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0
    except (PetnameError, OSError, yaml.YAMLError) as e:
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
