"""Kana tables, word generation and romanization."""

from .base import Family, KanaError, UnknownCharacter, EmptyCharacterSet
from .charset import CharacterSet, DEFAULT_CHARSET, HIRAGANA_ROMAJI, KATAKANA_ROMAJI, members, romanize
from .generator import WordGenerator, MIN_WORD_LENGTH, MAX_WORD_LENGTH, new_word, to_romaji
from .normalizer import normalize_answer, is_correct

__all__ = [
    'Family',
    'KanaError',
    'UnknownCharacter',
    'EmptyCharacterSet',
    'CharacterSet',
    'DEFAULT_CHARSET',
    'HIRAGANA_ROMAJI',
    'KATAKANA_ROMAJI',
    'members',
    'romanize',
    'WordGenerator',
    'MIN_WORD_LENGTH',
    'MAX_WORD_LENGTH',
    'new_word',
    'to_romaji',
    'normalize_answer',
    'is_correct',
]
