import argparse
import logging
import sys

from . import config
from .errors import FixtureError, UnknownLanguageError
from .fixtures import compare, read_pairs
from .logging_config import setup_logging
from .main import LANGUAGES, get_stemmer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ministem",
        description="Print the stem of each word, one per line.",
    )
    parser.add_argument(
        "words", nargs="*", help="words to stem, read from stdin when omitted"
    )
    parser.add_argument(
        "-l",
        "--language",
        default=config.DEFAULT_LANGUAGE,
        help=f"one of {', '.join(sorted(LANGUAGES))} (default: %(default)s)",
    )
    parser.add_argument(
        "--check",
        nargs=2,
        metavar=("VOC", "OUTPUT"),
        help="compare against a vocabulary/output fixture pair",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        stemmer = get_stemmer(args.language)
    except UnknownLanguageError:
        logger.error("Unknown language: %s", args.language)
        return 2

    if args.check:
        try:
            pairs = read_pairs(*args.check)
        except FixtureError as e:
            logger.error("%s", e)
            return 2

        failures = 0
        for word, expected, got in compare(stemmer, pairs):
            failures += 1
            print(f"{word!r} expected {expected!r} got {got!r}")

        logger.info("%d/%d words stemmed as expected", len(pairs) - failures, len(pairs))
        return 1 if failures else 0

    words = args.words or (line.strip() for line in sys.stdin)
    for word in words:
        print(stemmer.stem(word))

    return 0
