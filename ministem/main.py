import logging

from .base import Stemmer
from .dutch import DutchStemmer
from .english import EnglishStemmer
from .errors import UnknownLanguageError

logger = logging.getLogger(__name__)


LANGUAGES: dict[str, type[Stemmer]] = {
    "english": EnglishStemmer,
    "en": EnglishStemmer,
    "porter2": EnglishStemmer,
    "dutch": DutchStemmer,
    "nl": DutchStemmer,
}


def stemmer_class(language: str) -> type[Stemmer]:
    try:
        return LANGUAGES[language.strip().lower()]
    except KeyError:
        raise UnknownLanguageError(language) from None


class MiniStem:

    def __init__(self):
        """Create an in-memory registry of stemmers"""
        self._stemmers: dict[str, Stemmer] = {}

    def add(self, language: str) -> tuple[bool, Stemmer]:
        """
        Get or create a stemmer for the language

        Raises:
            UnknownLanguageError: no stemmer for the language
        """
        cls = stemmer_class(language)
        if cls.language not in self._stemmers:
            logger.debug("Creating %s for %r", cls.__name__, language)
            self._stemmers[cls.language] = cls()
            return (True, self._stemmers[cls.language])

        return (False, self._stemmers[cls.language])

    def delete(self, language: str) -> None:
        """Remove a stemmer from the registry"""
        cls = stemmer_class(language)
        if cls.language in self._stemmers:
            del self._stemmers[cls.language]

    def has_stemmer(self, language: str) -> bool:
        """Return True if a stemmer for the language was added"""
        try:
            return stemmer_class(language).language in self._stemmers
        except UnknownLanguageError:
            return False

    def stemmer(self, language: str) -> Stemmer:
        """
        Fetch an existing stemmer

        Raises:
            UnknownLanguageError: no stemmer for the language
            KeyError: stemmer wasn't added
        """
        return self._stemmers[stemmer_class(language).language]

    def stem(self, language: str, word: str) -> str:
        """Stem the word, adding the stemmer first if needed"""
        _, stemmer = self.add(language)
        return stemmer.stem(word)


_registry = MiniStem()


def get_stemmer(language: str) -> Stemmer:
    """Shared stemmer instance for the language"""
    _, stemmer = _registry.add(language)
    return stemmer
