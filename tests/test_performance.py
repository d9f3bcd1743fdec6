import statistics
import timeit
from pathlib import Path

import pytest

from ministem import EnglishStemmer

Stemmer = pytest.importorskip("Stemmer")

ASSETS = Path(__file__).parent / "assets"

# words on which the 2011 Porter2 rules and current snowball agree
REFERENCE_WORDS = [
    "caresses",
    "ponies",
    "ties",
    "cries",
    "feed",
    "agreed",
    "running",
    "hopping",
    "hoping",
    "falling",
    "generously",
    "communication",
    "happiness",
    "relational",
    "national",
    "connection",
    "hopeful",
    "cats",
    "kiwis",
    "quickly",
    "install",
    "generate",
]


@pytest.fixture
def words():
    with open(ASSETS / "english" / "voc.txt", "r", encoding="utf-8") as f:
        return [line.strip() for line in f]


def test_matches_pystemmer():
    reference = Stemmer.Stemmer("english")
    stemmer = EnglishStemmer()

    for word in REFERENCE_WORDS:
        assert stemmer.stem(word) == reference.stemWord(word), word


def test_performance(words):
    reference = Stemmer.Stemmer("english")
    stemmer = EnglishStemmer()

    def run_ministem():
        # bypass the memo, time the rules themselves
        for word in words:
            stemmer._stem(word)

    def run_pystemmer():
        for word in words:
            reference.stemWord(word)

    ministem_times = timeit.repeat(run_ministem, number=20, repeat=5)
    pystemmer_times = timeit.repeat(run_pystemmer, number=20, repeat=5)

    print(
        f"\nministem:  {statistics.mean(ministem_times):.5f}s "
        f"(stdev {statistics.stdev(ministem_times):.5f})"
    )
    print(
        f"PyStemmer: {statistics.mean(pystemmer_times):.5f}s "
        f"(stdev {statistics.stdev(pystemmer_times):.5f})"
    )

    assert all(t > 0 for t in ministem_times)
