#!/usr/bin/env python3
import argparse
from typing import List, Optional

from kanaquiz.config import Settings
from kanaquiz.kana import Family
from kanaquiz.logger import logger

DESCRIPTION = "Kana flashcard quiz: type the Romaji for a random Hiragana/Katakana word."
EPILOG = """\
commands:
  (none)    run the quiz in the terminal
  serve     run the web quiz

in-quiz commands:
  :h  hiragana   :k  katakana   :b  both   :q  quit
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kanaquiz",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('command', nargs='?', choices=['serve'], help='Start the web quiz instead of the terminal quiz')
    family = parser.add_mutually_exclusive_group()
    family.add_argument('--hira', dest='family', action='store_const', const=Family.HIRAGANA, help='Quiz Hiragana only')
    family.add_argument('--kata', dest='family', action='store_const', const=Family.KATAKANA, help='Quiz Katakana only')
    parser.add_argument('--host', type=str, default=None, help='Host to bind the web quiz to (serve only)')
    parser.add_argument('--port', type=int, default=None, help='Port to bind the web quiz to (serve only)')
    return parser


def resolve_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command line overrides on top of environment settings."""
    if args.family is not None:
        settings.family = args.family
    if args.host is not None:
        settings.host = args.host
    if args.port is not None:
        settings.port = args.port
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command != 'serve' and (args.host is not None or args.port is not None):
        parser.error("--host and --port only apply to 'serve'")
    try:
        settings = resolve_settings(args, Settings.from_env())
    except ValueError as e:
        parser.error(str(e))
    logger.setLevel(settings.log_level)

    if args.command == 'serve':
        from kanaquiz.server import serve
        serve(settings)
        return 0

    from kanaquiz.quiz import QuizSession
    from kanaquiz.terminal import run
    run(QuizSession(settings.family))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
