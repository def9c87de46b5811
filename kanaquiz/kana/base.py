from enum import Enum


class Family(Enum):
    """Which kana script(s) a quiz round draws from."""
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    BOTH = "both"

    @classmethod
    def parse(cls, value: str) -> "Family":
        """Resolve a family from its name, case-insensitively.

        Args:
            value: 'hiragana', 'katakana' or 'both'

        Returns:
            The matching Family member

        Raises:
            ValueError: If value names no family
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown kana family '{value}' (expected one of: {choices})") from None


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class KanaError(Exception):
    """Base class for kana table errors."""


class UnknownCharacter(KanaError):
    """Raised when a character has no entry in the romanization table."""
    def __init__(self, character: str):
        code_points = " ".join(f"U+{ord(c):04X}" for c in character) or "empty"
        super().__init__(f"No romanization for character '{character}' ({code_points})")
        self.character = character


class EmptyCharacterSet(KanaError):
    """Raised when a family has no characters to draw from."""
    def __init__(self, family: Family):
        super().__init__(f"Kana family '{family.value}' has no characters")
        self.family = family
