import re

from .base import Stemmer
from .regions import find_r1r2


class DutchStemmer(Stemmer):
    """
    Dutch stemmer based on rules described on official snowball website
    http://snowball.tartarus.org/algorithms/dutch/stemmer.html
    """

    language = "dutch"

    VOWELS = "aeiouyè"
    DOUBLES = ("kk", "dd", "tt")
    ACCENTS = str.maketrans("äëïöüáéíóú", "aeiouaeiou")

    STEP_1B_SUFFIX_REGEX = re.compile(r"(ene|en)\Z")
    STEP_1C_SUFFIX_REGEX = re.compile(r"(se|s)\Z")
    STEP_3B_SUFFIX_REGEX = re.compile(r"(end|ing)\Z")

    def _stem(self, word):
        word = self.set_marks(word.lower().translate(self.__class__.ACCENTS))

        word = self.step_1(word)
        word, e_removed = self.step_2(word)
        word = self.step_3a(word)
        word = self.step_3b(word, e_removed)
        word = self.step_4(word)

        return self.unset_marks(word)

    def find_r1r2(self, word):
        r1, r2 = find_r1r2(word, self.__class__.VOWELS)

        # R2 is computed from the unadjusted R1
        if r1 < 3:
            r1 = len(word) if len(word) < 4 else 3

        return r1, r2

    def is_vowel(self, word, index):
        return 0 <= index < len(word) and word[index] in self.__class__.VOWELS

    def set_marks(self, word):
        """
        Put y's after a vowel (or at the start) and i's between vowels
        into upper case, so they count as consonants.
        """

        chars = list(word)
        if chars and chars[0] == "y":
            chars[0] = "Y"

        for i in range(1, len(chars)):
            if chars[i] == "y" and self.is_vowel(chars, i - 1):
                chars[i] = "Y"

        for i in range(1, len(chars) - 1):
            if chars[i] == "i" and self.is_vowel(chars, i - 1) and self.is_vowel(chars, i + 1):
                chars[i] = "I"

        return "".join(chars)

    def unset_marks(self, word):
        return word.replace("Y", "y").replace("I", "i")

    def undouble(self, word):
        if word.endswith(self.__class__.DOUBLES):
            return word[:-1]

        return word

    def has_valid_s_ending(self, word):
        return bool(word) and word[-1] != "j" and not self.is_vowel(word, len(word) - 1)

    def has_valid_en_ending(self, word):
        return bool(word) and not self.is_vowel(word, len(word) - 1) and not word.endswith("gem")

    def delete_e(self, word):
        """
        Delete a final e in R1 preceded by a non-vowel.
        Returns the word and whether the e was removed.
        """

        r1, _ = self.find_r1r2(word)
        i = len(word) - 1

        if i >= r1 and word.endswith("e") and not self.is_vowel(word, i - 1):
            return word[:i], True

        return word, False

    def step_1(self, word):
        r1, _ = self.find_r1r2(word)

        if word.endswith("heden"):
            if len(word) - 5 >= r1:
                return word[:-5] + "heid"

            return word

        if match := self.__class__.STEP_1B_SUFFIX_REGEX.search(word):
            stem = word[: match.start()]
            if match.start() >= r1 and self.has_valid_en_ending(stem):
                return self.undouble(stem)

            return word

        if match := self.__class__.STEP_1C_SUFFIX_REGEX.search(word):
            stem = word[: match.start()]
            if match.start() >= r1 and self.has_valid_s_ending(stem):
                return stem

        return word

    def step_2(self, word):
        word, e_removed = self.delete_e(word)
        if e_removed:
            word = self.undouble(word)

        return word, e_removed

    def step_3a(self, word):
        r1, r2 = self.find_r1r2(word)
        i = len(word) - 4

        if word.endswith("heid") and i >= r2 and i > 0 and word[i - 1] != "c":
            word = word[:i]
            # a preceding en is treated as in step 1
            if (
                word.endswith("en")
                and len(word) - 2 >= r1
                and self.has_valid_en_ending(word[:-2])
            ):
                word = self.undouble(word[:-2])

        return word

    def step_3b(self, word, e_removed):
        _, r2 = self.find_r1r2(word)

        if match := self.__class__.STEP_3B_SUFFIX_REGEX.search(word):
            if match.start() < r2:
                return word

            word = word[: match.start()]
            if (
                word.endswith("ig")
                and len(word) - 2 >= r2
                and not word[:-2].endswith("e")
            ):
                return word[:-2]

            return self.undouble(word)

        if word.endswith("ig"):
            if len(word) - 2 >= r2 and not word[:-2].endswith("e"):
                return word[:-2]

            return word

        if word.endswith("lijk"):
            if len(word) - 4 >= r2:
                word, _ = self.delete_e(word[:-4])
                return self.undouble(word)

            return word

        if word.endswith("baar"):
            if len(word) - 4 >= r2:
                return word[:-4]

            return word

        # only when step 2 removed an e
        if word.endswith("bar") and e_removed and len(word) - 3 >= r2:
            return word[:-3]

        return word

    def step_4(self, word):
        """maan -> man, brood -> brod"""

        if len(word) < 4:
            return word

        c, v1, v2, d = word[-4:]
        if (
            v1 == v2
            and v1 in ("a", "e", "o", "u")
            and c not in self.__class__.VOWELS
            and d not in self.__class__.VOWELS
            and d != "I"
        ):
            return word[:-2] + d

        return word
