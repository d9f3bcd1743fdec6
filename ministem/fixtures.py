"""
Readers for snowball style vocabulary fixtures: voc.txt holds one word per
line and output.txt the expected stem on the same line.
"""

import logging
from pathlib import Path
from typing import Generator, Iterable

from .base import Stemmer
from .errors import FixtureError

logger = logging.getLogger(__name__)


def _lines(path: Path) -> list[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise FixtureError(f"Can't read fixture {path}: {e}") from e


def read_pairs(voc_path, output_path) -> list[tuple[str, str]]:
    """
    Read (word, expected stem) pairs, stopping at the end of the shorter file.

    Raises:
        FixtureError: a file is missing or isn't valid UTF-8
    """
    voc, output = _lines(Path(voc_path)), _lines(Path(output_path))
    if len(voc) != len(output):
        logger.warning(
            "Fixture length mismatch: %s has %d lines, %s has %d",
            voc_path,
            len(voc),
            output_path,
            len(output),
        )

    pairs = list(zip(voc, output))
    logger.debug("Loaded %d pairs from %s", len(pairs), voc_path)
    return pairs


def compare(
    stemmer: Stemmer, pairs: Iterable[tuple[str, str]]
) -> Generator[tuple[str, str, str], None, None]:
    """Yield (word, expected, got) for every pair the stemmer gets wrong"""
    for word, expected in pairs:
        got = stemmer.stem(word)
        if got != expected:
            yield word, expected, got
