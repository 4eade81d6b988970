"""Interactive console for the Game of Life board."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from enum import Enum
from typing import TextIO

from labworks.life.field import ALPHABET, FIELD_H, Field

SLEEP_TIME = 0.1

_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"


class Message(Enum):
    """Outcome of a command, shown on the status line."""

    GREETING = "Waiting for your command"
    SUCCESS = "Success!"
    INVALID_COMMAND = "Invalid command. Please, try again"
    INVALID_ARGS_NUMBER = "Invalid args number. Please, try again"
    INVALID_ARGUMENT = "Invalid argument. Please, try again"
    INVALID_FILE = "Invalid file. Please, try again"
    QUIT = ""


def _split(text: str) -> list[str]:
    words = text.split(" ")
    if len(words) > 1 and words[-1] == "":
        words.pop()
    return words


def _leading_int(text: str) -> int:
    stripped = text.lstrip()
    sign = ""
    if stripped[:1] in ("+", "-"):
        sign, stripped = stripped[0], stripped[1:]
    digits = ""
    for ch in stripped:
        if not ch.isdigit():
            break
        digits += ch
    if not digits:
        raise ValueError(f"no number in {text!r}")
    return int(sign + digits)


def _read_coords(text: str, field: Field) -> tuple[int, int]:
    split_at = len(text)
    for position, ch in enumerate(text):
        if ch not in ALPHABET:
            split_at = position
            break
    row, col = text[:split_at], text[split_at:]
    if not row or not col:
        raise ValueError(f"bad coordinates {text!r}")
    row_index = ALPHABET.find(row)
    col_index = _leading_int(col)
    if not field.is_cell(row_index, col_index):
        raise ValueError(f"coordinates {text!r} are outside the field")
    return row_index, col_index


class Console:
    """Reads commands and applies them to a field."""

    def __init__(self, out: TextIO | None = None, sleep_time: float = SLEEP_TIME) -> None:
        self.out = out if out is not None else sys.stdout
        self.sleep_time = sleep_time
        self.status = Message.GREETING

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _cls(self) -> None:
        self._write(_CLEAR_SCREEN)

    def _set_cursor(self, x: int, y: int) -> None:
        self._write(f"\x1b[{y + 1};{x + 1}H")

    def _show(self, field: Field) -> None:
        self._set_cursor(0, 0)
        self._write(field.render())

    def _clear_command(self) -> None:
        self._set_cursor(2, FIELD_H + 2)
        self._write(" " * 500)
        self._set_cursor(2, FIELD_H + 3)

    def status_text(self) -> str:
        """Return the text shown for the current status."""
        return self.status.value

    def read_command(self, field: Field, command: str | None = None) -> Message:
        """Apply one command to ``field``; read it from stdin when not given."""
        self._write(" " + self.status_text() + "\n")
        while not command:
            self._write(" $ ")
            line = sys.stdin.readline()
            if not line:
                return Message.QUIT
            command = line.rstrip("\r\n")

        name, *args = _split(command)
        handler = {
            "reset": self._reset,
            "back": self._back,
            "set": self._set,
            "clear": self._clear,
            "step": self._step,
            "save": self._save,
            "load": self._load,
            "quit": self._quit,
        }.get(name)
        if handler is None:
            return Message.INVALID_COMMAND
        return handler(field, args)

    def _reset(self, field: Field, args: list[str]) -> Message:
        if args:
            return Message.INVALID_ARGS_NUMBER
        field.reset()
        return Message.SUCCESS

    def _back(self, field: Field, args: list[str]) -> Message:
        if args:
            return Message.INVALID_ARGS_NUMBER
        field.back()
        return Message.SUCCESS

    def _set(self, field: Field, args: list[str]) -> Message:
        if len(args) != 1:
            return Message.INVALID_ARGS_NUMBER
        try:
            field.set(*_read_coords(args[0], field))
        except ValueError:
            return Message.INVALID_ARGUMENT
        return Message.SUCCESS

    def _clear(self, field: Field, args: list[str]) -> Message:
        if len(args) != 1:
            return Message.INVALID_ARGS_NUMBER
        try:
            field.clear(*_read_coords(args[0], field))
        except ValueError:
            return Message.INVALID_ARGUMENT
        return Message.SUCCESS

    def _step(self, field: Field, args: list[str]) -> Message:
        if len(args) > 1:
            return Message.INVALID_ARGS_NUMBER
        try:
            count = _leading_int(args[0]) if args else 1
        except ValueError:
            return Message.INVALID_ARGUMENT
        if count < 0:
            return Message.INVALID_ARGUMENT
        for _ in range(count - 1):
            field.step()
            time.sleep(self.sleep_time)
            self._show(field)
        field.step()
        time.sleep(self.sleep_time)
        return Message.SUCCESS

    def _save(self, field: Field, args: list[str]) -> Message:
        if len(args) != 1:
            return Message.INVALID_ARGS_NUMBER
        try:
            field.save(args[0])
        except OSError:
            return Message.INVALID_FILE
        return Message.SUCCESS

    def _load(self, field: Field, args: list[str]) -> Message:
        if len(args) != 1:
            return Message.INVALID_ARGS_NUMBER
        try:
            field.load(args[0])
        except (OSError, ValueError):
            return Message.INVALID_FILE
        return Message.SUCCESS

    def _quit(self, field: Field, args: list[str]) -> Message:
        if args:
            return Message.INVALID_ARGS_NUMBER
        self._cls()
        return Message.QUIT

    def start_app(self) -> None:
        """Run the command loop until ``quit``, end of input or Ctrl+C."""
        field = Field()
        self._cls()
        self._write(_HIDE_CURSOR)
        try:
            while True:
                self._show(field)
                self.status = self.read_command(field)
                self._clear_command()
                if self.status is Message.QUIT:
                    break
        except KeyboardInterrupt:
            self._cls()
        finally:
            self._write(_SHOW_CURSOR)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive Game of Life."""
    parser = argparse.ArgumentParser(
        description=(
            "Game of Life. Commands: reset, set XY, clear XY, step [N], back, "
            "save FILE, load FILE, quit."
        )
    )
    parser.parse_args(argv)
    Console().start_app()
    return 0