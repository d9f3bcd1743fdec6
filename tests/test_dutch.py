from pathlib import Path

import pytest

from ministem import DutchStemmer
from ministem.fixtures import read_pairs

ASSETS = Path(__file__).parent / "assets" / "dutch"


@pytest.fixture
def stemmer():
    return DutchStemmer()


@pytest.fixture
def pairs():
    return read_pairs(ASSETS / "voc.txt", ASSETS / "output.txt")


def test_vocabulary(stemmer, pairs):
    for word, expected in pairs:
        assert stemmer.stem(word) == expected, f"{word!r} expected {expected!r}"


def test_lowercases_and_folds_accents(stemmer):
    assert stemmer.stem("Vliegtuigen") == "vliegtuig"
    assert stemmer.stem("BEËINDIGING") == "beeindig"
    assert stemmer.stem("Café") == "caf"


@pytest.mark.parametrize("word", ["", "a", "ja", "'", "..."])
def test_degenerate_input(stemmer, word):
    assert stemmer.stem(word) == word


def test_set_marks(stemmer):
    assert stemmer.set_marks("yoghurt") == "Yoghurt"
    assert stemmer.set_marks("mooie") == "mooIe"
    assert stemmer.set_marks("haaien") == "haaIen"
    assert stemmer.set_marks("ayi") == "aYi"
    assert stemmer.unset_marks("mooIe") == "mooie"


def test_step_1(stemmer):
    assert stemmer.step_1("mogelijkheden") == "mogelijkheid"
    assert stemmer.step_1("heden") == "heden"
    assert stemmer.step_1("katten") == "kat"
    assert stemmer.step_1("gemen") == "gemen"
    assert stemmer.step_1("lemen") == "lem"
    assert stemmer.step_1("appels") == "appel"
    assert stemmer.step_1("prijs") == "prijs"


def test_step_2(stemmer):
    assert stemmer.step_2("lichamelijke") == ("lichamelijk", True)
    assert stemmer.step_2("mooIe") == ("mooI", True)
    assert stemmer.step_2("heden") == ("heden", False)


def test_step_3a(stemmer):
    assert stemmer.step_3a("mogelijkheid") == "mogelijk"


def test_step_3b(stemmer):
    assert stemmer.step_3b("wandelend", False) == "wandel"
    assert stemmer.step_3b("beeindiging", False) == "beeindig"
    assert stemmer.step_3b("lichamelijk", False) == "licham"
    assert stemmer.step_3b("betaalbaar", False) == "betaal"
    # bar only goes when step 2 removed an e
    assert stemmer.step_3b("betaalbar", True) == "betaal"
    assert stemmer.step_3b("betaalbar", False) == "betaalbar"


def test_step_4(stemmer):
    assert stemmer.step_4("maan") == "man"
    assert stemmer.step_4("brood") == "brod"
    assert stemmer.step_4("boek") == "boek"
    assert stemmer.step_4("baaI") == "baaI"


@pytest.mark.parametrize("word,expected", [("katten", "kat"), ("bedden", "bed"), ("bakken", "bak")])
def test_undoubles_after_en(stemmer, word, expected):
    assert stemmer.stem(word) == expected


@pytest.mark.parametrize(
    "stem", ["kat", "boek", "appel", "licham", "vliegtuig", "man", "kinder", "wandel"]
)
def test_stems_are_stable(stemmer, stem):
    assert stemmer.stem(stem) == stem
