"""Kana character tables and their canonical romanization."""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .base import Family, UnknownCharacter

# Modified Hepburn, one entry per character. Dict order is the table order.
HIRAGANA_ROMAJI = {
    'あ': "a", 'い': "i", 'う': "u", 'え': "e", 'お': "o",
    'か': "ka", 'き': "ki", 'く': "ku", 'け': "ke", 'こ': "ko",
    'さ': "sa", 'し': "shi", 'す': "su", 'せ': "se", 'そ': "so",
    'た': "ta", 'ち': "chi", 'つ': "tsu", 'て': "te", 'と': "to",
    'な': "na", 'に': "ni", 'ぬ': "nu", 'ね': "ne", 'の': "no",
    'は': "ha", 'ひ': "hi", 'ふ': "fu", 'へ': "he", 'ほ': "ho",
    'ま': "ma", 'み': "mi", 'む': "mu", 'め': "me", 'も': "mo",
    'や': "ya", 'ゆ': "yu", 'よ': "yo",
    'ら': "ra", 'り': "ri", 'る': "ru", 'れ': "re", 'ろ': "ro",
    'わ': "wa", 'を': "o", 'ん': "n",
    'が': "ga", 'ぎ': "gi", 'ぐ': "gu", 'げ': "ge", 'ご': "go",
    'ざ': "za", 'じ': "ji", 'ず': "zu", 'ぜ': "ze", 'ぞ': "zo",
    'だ': "da", 'ぢ': "ji", 'づ': "zu", 'で': "de", 'ど': "do",
    'ば': "ba", 'び': "bi", 'ぶ': "bu", 'べ': "be", 'ぼ': "bo",
    'ぱ': "pa", 'ぴ': "pi", 'ぷ': "pu", 'ぺ': "pe", 'ぽ': "po",
    # small kana read like their full-size forms
    'ぁ': "a", 'ぃ': "i", 'ぅ': "u", 'ぇ': "e", 'ぉ': "o",
    'ゃ': "ya", 'ゅ': "yu", 'ょ': "yo",
    'っ': "tsu",
}

KATAKANA_ROMAJI = {
    'ア': "a", 'イ': "i", 'ウ': "u", 'エ': "e", 'オ': "o",
    'カ': "ka", 'キ': "ki", 'ク': "ku", 'ケ': "ke", 'コ': "ko",
    'サ': "sa", 'シ': "shi", 'ス': "su", 'セ': "se", 'ソ': "so",
    'タ': "ta", 'チ': "chi", 'ツ': "tsu", 'テ': "te", 'ト': "to",
    'ナ': "na", 'ニ': "ni", 'ヌ': "nu", 'ネ': "ne", 'ノ': "no",
    'ハ': "ha", 'ヒ': "hi", 'フ': "fu", 'ヘ': "he", 'ホ': "ho",
    'マ': "ma", 'ミ': "mi", 'ム': "mu", 'メ': "me", 'モ': "mo",
    'ヤ': "ya", 'ユ': "yu", 'ヨ': "yo",
    'ラ': "ra", 'リ': "ri", 'ル': "ru", 'レ': "re", 'ロ': "ro",
    'ワ': "wa", 'ヰ': "i", 'ヱ': "e", 'ヲ': "o", 'ン': "n",
    'ガ': "ga", 'ギ': "gi", 'グ': "gu", 'ゲ': "ge", 'ゴ': "go",
    'ザ': "za", 'ジ': "ji", 'ズ': "zu", 'ゼ': "ze", 'ゾ': "zo",
    'ダ': "da", 'ヂ': "ji", 'ヅ': "zu", 'デ': "de", 'ド': "do",
    'バ': "ba", 'ビ': "bi", 'ブ': "bu", 'ベ': "be", 'ボ': "bo",
    'パ': "pa", 'ピ': "pi", 'プ': "pu", 'ペ': "pe", 'ポ': "po",
    'ァ': "a", 'ィ': "i", 'ゥ': "u", 'ェ': "e", 'ォ': "o",
    'ャ': "ya", 'ュ': "yu", 'ョ': "yo",
    'ッ': "tsu",
}


class CharacterSet:
    """Immutable registry of quiz kana and their romanization.

    Each family keeps its table order, so ``members`` is deterministic.
    ``Family.BOTH`` is the Hiragana list followed by the Katakana list.
    """

    def __init__(self, hiragana: Dict[str, str], katakana: Dict[str, str]):
        self._members: Dict[Family, Tuple[str, ...]] = {
            Family.HIRAGANA: tuple(hiragana),
            Family.KATAKANA: tuple(katakana),
        }
        self._members[Family.BOTH] = self._members[Family.HIRAGANA] + self._members[Family.KATAKANA]
        self._romaji: Mapping[str, str] = MappingProxyType({**hiragana, **katakana})

    @property
    def romaji_map(self) -> Mapping[str, str]:
        """Read-only view of the full character → romaji table."""
        return self._romaji

    def members(self, family: Family) -> Tuple[str, ...]:
        """Return the characters eligible for *family*, in table order."""
        return self._members[Family.parse(family)]

    def romanize(self, character: str) -> str:
        """Return the canonical romanization of a single kana.

        Raises:
            UnknownCharacter: If *character* is not in the table
        """
        try:
            return self._romaji[character]
        except (KeyError, TypeError):
            raise UnknownCharacter(str(character)) from None

    def validate(self) -> None:
        """Check that every member of every family has a lowercase ASCII romanization."""
        for family in Family:
            for character in self.members(family):
                romaji = self.romanize(character)
                if not romaji or not romaji.isascii() or not romaji.isalpha() or romaji != romaji.lower():
                    raise UnknownCharacter(character)

    def __contains__(self, character: object) -> bool:
        return character in self._romaji

    def __len__(self) -> int:
        return len(self._romaji)


DEFAULT_CHARSET = CharacterSet(HIRAGANA_ROMAJI, KATAKANA_ROMAJI)
DEFAULT_CHARSET.validate()


def members(family: Family) -> Tuple[str, ...]:
    """Characters of *family* from the default table."""
    return DEFAULT_CHARSET.members(family)


def romanize(character: str) -> str:
    """Romanize one character with the default table."""
    return DEFAULT_CHARSET.romanize(character)
