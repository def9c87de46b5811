"""Random kana words and their transliteration."""

import random
from typing import Iterable, List, Optional

from .base import EmptyCharacterSet, Family
from .charset import DEFAULT_CHARSET, CharacterSet

MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 5


class WordGenerator:
    """Draws quiz words from a CharacterSet.

    The random source is anything with ``randint`` and ``choice``
    (``random.Random`` in practice). Pass a seeded one for repeatable words.
    """

    def __init__(self, charset: CharacterSet = DEFAULT_CHARSET, rng: Optional[random.Random] = None):
        self.charset = charset
        self.rng = rng if rng is not None else random.Random()

    def new_word(self, family: Family, rng: Optional[random.Random] = None) -> List[str]:
        """Return 1 to 5 characters drawn uniformly, with replacement, from *family*.

        Raises:
            EmptyCharacterSet: If the family has no members
        """
        family = Family.parse(family)
        rng = rng if rng is not None else self.rng
        pool = self.charset.members(family)
        if not pool:
            raise EmptyCharacterSet(family)

        length = rng.randint(MIN_WORD_LENGTH, MAX_WORD_LENGTH)
        return [rng.choice(pool) for _ in range(length)]

    def to_romaji(self, word: Iterable[str]) -> str:
        """Concatenate the romanization of each character of *word*.

        Raises:
            UnknownCharacter: If a character is not in the table
        """
        return "".join(self.charset.romanize(character) for character in word)


_default_generator = WordGenerator()


def new_word(family: Family, rng: Optional[random.Random] = None) -> List[str]:
    """Draw a word from the default table."""
    return _default_generator.new_word(family, rng)


def to_romaji(word: Iterable[str]) -> str:
    """Transliterate *word* with the default table."""
    return _default_generator.to_romaji(word)
