from functools import lru_cache

from .config import CACHE_SIZE


class Stemmer:
    """
    Common interface of all stemmers.

    Rule tables live on the class and are never mutated, every call works
    on its own copy of the word, so one instance can be shared freely.
    """

    language = None

    @lru_cache(maxsize=CACHE_SIZE)
    def stem(self, word: str) -> str:
        """Return the stem of the word, lowercased."""
        return self._stem(word)

    def __call__(self, word: str) -> str:
        return self.stem(word)

    def _stem(self, word: str) -> str:
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"
