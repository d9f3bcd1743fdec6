from .base import Stemmer
from .dutch import DutchStemmer
from .english import EnglishStemmer
from .errors import FixtureError, UnknownLanguageError
from .main import LANGUAGES, MiniStem, get_stemmer

__all__ = [
    "Stemmer",
    "EnglishStemmer",
    "DutchStemmer",
    "MiniStem",
    "LANGUAGES",
    "get_stemmer",
    "UnknownLanguageError",
    "FixtureError",
]
