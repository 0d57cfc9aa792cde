"""Interactive prompt for the Pokedex."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Iterable

from .commands import CommandError, Config, get_commands
from .pokeapi import CacheClient

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Split a line on spaces into lower-case words, dropping empty ones."""
    return [word.strip().lower() for word in text.split(" ") if word.strip()]


def run_repl(config: Config, lines: Iterable[str]) -> None:
    """Run commands read from ``lines`` until the input ends; CommandError propagates."""
    commands = get_commands()
    print(PROMPT, end="", flush=True)
    for line in lines:
        words = clean_input(line.rstrip("\r\n"))
        if words:
            command = commands.get(words[0])
            if command is None:
                print("Unknown command")
            else:
                command.callback(config, *words[1:])
        print(PROMPT, end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive Pokedex on standard input."""
    with CacheClient(5.0, 3.0) as client:
        try:
            run_repl(Config(client=client), sys.stdin)
        except CommandError as exc:
            print(f"{datetime.now():%Y/%m/%d %H:%M:%S} {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())