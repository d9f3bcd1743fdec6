import re

from .base import Stemmer
from .regions import find_r1r2


class EnglishStemmer(Stemmer):
    """
    Porter2 stemmer based on rules described on official snowball website
    http://snowball.tartarus.org/algorithms/english/stemmer.html

    Follows the 2011 revision of the algorithm: three R1 prefixes
    (gener, commun, arsen) and no special handling of "ogist".
    """

    language = "english"

    VOWELS = "aeiouy"
    DOUBLES = ("bb", "dd", "ff", "gg", "mm", "nn", "pp", "rr", "tt")
    LI_ENDINGS = ("c", "d", "e", "g", "h", "k", "m", "n", "r", "t")
    R1_PREFIXES = ("gener", "commun", "arsen")

    EXCEPTIONS = {
        # special changes
        "skis": "ski",
        "skies": "sky",
        "dying": "die",
        "lying": "lie",
        "tying": "tie",
        # special -ly cases
        "idly": "idl",
        "gently": "gentl",
        "ugly": "ugli",
        "early": "earli",
        "only": "onli",
        "singly": "singl",
        # invariant forms
        "sky": "sky",
        "news": "news",
        "howe": "howe",
        # not plural forms
        "atlas": "atlas",
        "cosmos": "cosmos",
        "bias": "bias",
        "andes": "andes",
    }

    # left untouched once step 1a is done
    POST_STEP_1A_EXCEPTIONS = frozenset(
        (
            "inning",
            "outing",
            "canning",
            "herring",
            "earring",
            "proceed",
            "exceed",
            "succeed",
        )
    )

    STEP_1B_EED_REGEX = re.compile(r"(eedly|eed)\Z")
    STEP_1B_SUFFIX_REGEX = re.compile(r"(ingly|edly|ing|ed)\Z")

    STEP_2_SUFFIX_MAP = {
        "fulness": "ful",
        "ousness": "ous",
        "iveness": "ive",
        "ational": "ate",
        "ization": "ize",
        "tional": "tion",
        "biliti": "ble",
        "lessli": "less",
        "fulli": "ful",
        "ousli": "ous",
        "iviti": "ive",
        "alism": "al",
        "ation": "ate",
        "entli": "ent",
        "aliti": "al",
        "enci": "ence",
        "anci": "ance",
        "abli": "able",
        "izer": "ize",
        "ator": "ate",
        "alli": "al",
        "bli": "ble",
    }

    STEP_2_SUFFIX_REGEX = re.compile(rf"({'|'.join(STEP_2_SUFFIX_MAP)})\Z")

    STEP_3_SUFFIX_MAP = {
        "ational": "ate",
        "tional": "tion",
        "alize": "al",
        "icate": "ic",
        "iciti": "ic",
        "ical": "ic",
        "ful": "",
        "ness": "",
    }

    STEP_3_SUFFIX_REGEX = re.compile(rf"({'|'.join(STEP_3_SUFFIX_MAP)})\Z")

    STEP_4_SUFFIX_REGEX = re.compile(
        r"(ement|able|ible|ance|ence|ment|ant|ent|ism|ate|iti|ous|ive|ize|al|er|ic)\Z"
    )

    def _stem(self, word):
        """
        Stem the word if it has more than two characters,
        otherwise return it as is.
        """

        word = word.lower()
        if word in self.__class__.EXCEPTIONS:
            return self.__class__.EXCEPTIONS[word]

        if len(word) <= 2:
            return word

        word = self.set_ys(self.remove_initial_apostrophe(word))

        word = self.step_0(word)
        word = self.step_1a(word)
        if word in self.__class__.POST_STEP_1A_EXCEPTIONS:
            return self.unset_ys(word)

        for step in (
            self.step_1b,
            self.step_1c,
            self.step_2,
            self.step_3,
            self.step_4,
            self.step_5,
        ):
            word = step(word)

        return self.unset_ys(word)

    def find_r1r2(self, word):
        return find_r1r2(word, self.__class__.VOWELS, self.__class__.R1_PREFIXES)

    def is_vowel(self, word, index):
        return 0 <= index < len(word) and word[index] in self.__class__.VOWELS

    def has_vowel(self, word):
        return any(char in self.__class__.VOWELS for char in word)

    def remove_initial_apostrophe(self, word):
        if word.startswith("'"):
            word = word[1:]

        return word

    def set_ys(self, word):
        """Mark y's used as consonants, so they are never taken for vowels."""

        chars = list(word)
        if chars and chars[0] == "y":
            chars[0] = "Y"

        for i in range(1, len(chars)):
            if chars[i] == "y" and self.is_vowel(chars, i - 1):
                chars[i] = "Y"

        return "".join(chars)

    def unset_ys(self, word):
        return word.replace("Y", "y")

    def ends_with_short_syllable(self, word):
        """
        Non-vowel, vowel, non-vowel other than w, x or Y at the end of the word.
        """

        if len(word) < 3:
            return False

        return (
            not self.is_vowel(word, len(word) - 3)
            and self.is_vowel(word, len(word) - 2)
            and not self.is_vowel(word, len(word) - 1)
            and word[-1] not in ("w", "x", "Y")
        )

    def is_short(self, word):
        r1, _ = self.find_r1r2(word)
        if r1 != len(word):
            return False

        if len(word) == 2:
            return self.is_vowel(word, 0) and not self.is_vowel(word, 1)

        return self.ends_with_short_syllable(word)

    def step_0(self, word):
        for suffix in ("'s'", "'s", "'"):
            if word.endswith(suffix):
                word = word[: -len(suffix)]

        return word

    def step_1a(self, word):
        if word.endswith("sses"):
            return word[:-2]

        if word.endswith(("ied", "ies")):
            word = word[:-3]
            # ties -> tie, cries -> cri
            return word + "i" if len(word) > 1 else word + "ie"

        if word.endswith(("us", "ss")):
            return word

        # gas -> gas, gaps -> gap, kiwis -> kiwi
        if word.endswith("s") and self.has_vowel(word[:-2]):
            return word[:-1]

        return word

    def step_1b(self, word):
        if match := self.__class__.STEP_1B_EED_REGEX.search(word):
            r1, _ = self.find_r1r2(word)
            if match.start() >= r1:
                word = word[: match.start()] + "ee"

            return word

        if match := self.__class__.STEP_1B_SUFFIX_REGEX.search(word):
            stem = word[: match.start()]
            if not self.has_vowel(stem):
                return word

            if stem.endswith(("at", "bl", "iz")):
                return stem + "e"
            elif stem.endswith(self.__class__.DOUBLES):
                return stem[:-1]
            elif self.is_short(stem):
                return stem + "e"

            return stem

        return word

    def step_1c(self, word):
        if len(word) > 2 and word[-1] in "yY" and not self.is_vowel(word, len(word) - 2):
            return word[:-1] + "i"

        return word

    def step_2(self, word):
        r1, _ = self.find_r1r2(word)

        if match := self.__class__.STEP_2_SUFFIX_REGEX.search(word):
            if match.start() >= r1:
                return word[: match.start()] + self.__class__.STEP_2_SUFFIX_MAP[match.group(1)]

            return word

        if word.endswith("ogi"):
            i = len(word) - 3
            if i >= r1 and i > 0 and word[i - 1] == "l":
                return word[:i] + "og"

            return word

        if word.endswith("li"):
            i = len(word) - 2
            if i >= r1 and i > 0 and word[i - 1] in self.__class__.LI_ENDINGS:
                return word[:i]

        return word

    def step_3(self, word):
        r1, r2 = self.find_r1r2(word)

        if match := self.__class__.STEP_3_SUFFIX_REGEX.search(word):
            if match.start() >= r1:
                return word[: match.start()] + self.__class__.STEP_3_SUFFIX_MAP[match.group(1)]

            return word

        if word.endswith("ative") and len(word) - 5 >= r2:
            return word[:-5]

        return word

    def step_4(self, word):
        _, r2 = self.find_r1r2(word)

        if match := self.__class__.STEP_4_SUFFIX_REGEX.search(word):
            if match.start() >= r2:
                return word[: match.start()]

            return word

        if word.endswith("ion"):
            i = len(word) - 3
            if i >= r2 and i > 0 and word[i - 1] in ("s", "t"):
                return word[:i]

        return word

    def step_5(self, word):
        r1, r2 = self.find_r1r2(word)
        i = len(word) - 1

        if i > 0 and word[i] == "e":
            if i >= r2:
                return word[:i]
            # keep the e after a short syllable
            if i >= r1 and i >= 3 and not self.ends_with_short_syllable(word[:i]):
                return word[:i]

            return word

        if i > 1 and i >= r2 and word.endswith("ll"):
            return word[:i]

        return word
