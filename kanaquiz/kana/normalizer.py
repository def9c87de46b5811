"""Answer normalization for romaji comparisons."""

from typing import Iterable, Optional

import jaconv

from .generator import WordGenerator, to_romaji


def normalize_answer(text: str) -> str:
    """
    Normalize a typed romaji answer for comparison.

    This function:
    - Converts full-width letters and digits (typed with a Japanese IME
      still active, e.g. "ｓｈｉ") to their ASCII forms
    - Strips surrounding whitespace
    - Converts to lowercase for case-insensitive matching

    Args:
        text: The answer as typed by the user

    Returns:
        Normalized answer string
    """
    if not text:
        return ""
    text = jaconv.z2h(text, kana=False, ascii=True, digit=True)
    return text.strip().lower()


def is_correct(answer: str, word: Iterable[str], generator: Optional[WordGenerator] = None) -> bool:
    """Check whether *answer* is the romaji of *word*.

    *generator* supplies the table to transliterate with; the default
    table is used when omitted.
    """
    expected = generator.to_romaji(word) if generator is not None else to_romaji(word)
    return normalize_answer(answer) == expected
