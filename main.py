#!/usr/bin/env python3
"""Run the kana quiz from a source checkout: ``python main.py [--hira|--kata] [serve]``."""
from kanaquiz.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
