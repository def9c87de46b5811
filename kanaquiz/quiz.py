"""Quiz round state shared by the terminal and web front ends."""

from typing import List, Optional

from kanaquiz.kana import Family, WordGenerator, is_correct
from kanaquiz.logger import logger

CORRECT_STATUS = "🎉 Correct!"
INCORRECT_STATUS = "😭 Incorrect. The answer is {expected}"


class QuizSession:
    """One quiz run: the selected family, the word on screen and the score."""

    def __init__(self, family: Family = Family.BOTH, generator: Optional[WordGenerator] = None):
        self.generator = generator if generator is not None else WordGenerator()
        self.family = Family.parse(family)
        self.points = 0
        self.status = ""
        self.current_word: List[str] = self.generator.new_word(self.family)

    @property
    def expected(self) -> str:
        """Romaji of the word currently shown."""
        return self.generator.to_romaji(self.current_word)

    @property
    def word_text(self) -> str:
        return "".join(self.current_word)

    def next_word(self) -> List[str]:
        self.current_word = self.generator.new_word(self.family)
        return self.current_word

    def submit(self, answer: str) -> bool:
        """Score *answer* against the current word and move on to a new one."""
        expected = self.expected
        correct = is_correct(answer, self.current_word, self.generator)
        if correct:
            self.points += 1
            self.status = CORRECT_STATUS
        else:
            self.status = INCORRECT_STATUS.format(expected=expected)
        logger.debug(f"Answer '{answer}' for {self.word_text} ({expected}): {'correct' if correct else 'incorrect'}")
        self.next_word()
        return correct

    def switch_family(self, family: Family) -> bool:
        """Select *family* and redraw the word; no-op if already selected."""
        family = Family.parse(family)
        if family == self.family:
            return False
        self.family = family
        self.next_word()
        return True
