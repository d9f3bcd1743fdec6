import re
from functools import lru_cache


@lru_cache(maxsize=None)
def _transition(vowels):
    return re.compile(f"[{vowels}][^{vowels}]")


def find_r(word, vowels):
    """
    Return the index just past the first vowel followed by a non-vowel,
    or the length of the word if there is no such pair.
    """

    if match := _transition(vowels).search(word):
        return match.end()

    return len(word)


def find_r1r2(word, vowels, prefixes=()):
    """
    Compute R1 and R2 as described on the snowball website
    https://snowballstem.org/texts/r1r2.html

    If the word starts with one of the prefixes, R1 is the prefix length.
    """

    for prefix in prefixes:
        if word.startswith(prefix):
            r1 = len(prefix)
            break
    else:
        r1 = find_r(word, vowels)

    return r1, r1 + find_r(word[r1:], vowels)
