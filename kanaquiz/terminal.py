"""Interactive terminal quiz."""

from typing import Callable

from kanaquiz.kana import Family
from kanaquiz.logger import logger
from kanaquiz.quiz import QuizSession

PROMPT = "Type the Romaji representation and press Enter 👆 > "

# command → family it selects
FAMILY_COMMANDS = {
    ":h": Family.HIRAGANA,
    ":k": Family.KATAKANA,
    ":b": Family.BOTH,
}
QUIT_COMMANDS = {":q", ":quit", ":exit"}

_MODE_LABELS = {
    Family.HIRAGANA: ":(h)iragana",
    Family.KATAKANA: ":(k)atakana",
    Family.BOTH: ":(b)oth",
}


def render(session: QuizSession) -> str:
    """Build the screen shown before each prompt."""
    status = f"{session.status} (Points: {session.points})".strip()
    modes = " ".join(
        f"[{family.value}]" if family == session.family else label
        for family, label in _MODE_LABELS.items()
    )
    return (
        f"\nKana Word: {session.word_text}\n\n"
        f"{status}\n\n"
        f"Kana mode: {modes}\n"
        f"(:q, Ctrl-C or Ctrl-D to quit)\n"
    )


def run(session: QuizSession,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print) -> int:
    """Run the quiz until the user quits; return the points scored."""
    while True:
        output_fn(render(session))
        try:
            line = input_fn(PROMPT)
        except (EOFError, KeyboardInterrupt):
            output_fn("")
            break

        command = line.strip().lower()
        if command in QUIT_COMMANDS:
            break
        if command in FAMILY_COMMANDS:
            if session.switch_family(FAMILY_COMMANDS[command]):
                logger.debug(f"Switched kana mode to {session.family.value}")
            continue
        session.submit(line)

    output_fn(f"Final score: {session.points}")
    return session.points
