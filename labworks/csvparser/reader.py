"""Typed reader for delimiter-separated text files."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterator, Sequence
from typing import Any, Callable, TextIO

DEFAULT_PATH = "../data/file3.csv"
_TYPE_NAMES: dict[str, type] = {"int": int, "float": float, "str": str}

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class CsvError(Exception):
    """Raised when the input cannot be read as typed rows."""


def convert_field(text: str, field_type: Callable[[str], Any]) -> Any:
    """Convert one field to ``field_type``.

    Numbers are read from the start of the field, as a stream extraction
    would; anything after a valid leading number is ignored.
    """
    if field_type is str:
        return text
    if field_type is int:
        match = _INT_PREFIX.match(text)
        if match:
            return int(match.group(1))
    elif field_type is float:
        match = _FLOAT_PREFIX.match(text)
        if match:
            return float(match.group(1))
    else:
        try:
            return field_type(text.strip())
        except (ValueError, TypeError):
            pass
    raise CsvError("Wrong field type.")


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def format_row(row: Sequence[Any]) -> str:
    """Render a parsed row as ``[a, b, c]``."""
    return "[" + ", ".join(_format_value(value) for value in row) + "]"


def _single_char(name: str, value: str) -> str:
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    return value


class CsvParser:
    """Iterate over the rows of a text stream as typed tuples."""

    def __init__(
        self,
        stream: TextIO | None,
        types: Sequence[Callable[[str], Any]],
        col_sep: str = ",",
        row_sep: str = "\n",
        exit_char: str = '"',
    ) -> None:
        if stream is None or getattr(stream, "closed", False):
            raise CsvError("Can't find specified file.")
        self._types = tuple(types)
        self._col_sep = _single_char("col_sep", col_sep)
        self._row_sep = _single_char("row_sep", row_sep)
        self._exit_char = _single_char("exit_char", exit_char)
        self._text = stream.read()
        self._lines = self._text.count("\n") + (
            1 if self._text and not self._text.endswith("\n") else 0
        )

    def __len__(self) -> int:
        return self._lines

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        position = 0
        for index in range(self._lines):
            line, position = self._read_row(position, index)
            yield self._to_tuple(line, index)

    def _read_row(self, position: int, index: int) -> tuple[str, int]:
        row_end = self._text.find(self._row_sep, position)
        if row_end == -1:
            row_end = len(self._text)
        if self._text.find(self._exit_char, position, row_end) != -1:
            raise CsvError(f"Line {index + 1}: Unexpected exit symbol.")
        return self._text[position:row_end], row_end + 1

    def _split_row(self, line: str) -> list[str]:
        fields = line.split(self._col_sep)
        if fields[-1] == "":
            fields.pop()
        return fields

    def _to_tuple(self, line: str, index: int) -> tuple[Any, ...]:
        if not line:
            raise CsvError(f"Line {index + 1}: Empty line.")
        fields = self._split_row(line)
        if len(fields) != len(self._types):
            raise CsvError(f"Line {index + 1}: Wrong fields number.")
        try:
            return tuple(
                convert_field(text, field_type)
                for text, field_type in zip(fields, self._types)
            )
        except CsvError as exc:
            raise CsvError(f"Line {index + 1}: {exc}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Print every row of a file; return 1 on the first error."""
    parser = argparse.ArgumentParser(description="Print the typed rows of a CSV file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument(
        "--types",
        default="int,int,str,float",
        help="comma separated field types: int, float, str",
    )
    args = parser.parse_args(argv)
    try:
        types = [_TYPE_NAMES[name.strip()] for name in args.types.split(",")]
    except KeyError as exc:
        parser.error(f"unknown field type {exc.args[0]!r}")

    try:
        with open(args.path, encoding="utf-8", newline="") as stream:
            for row in CsvParser(stream, types):
                print(format_row(row))
    except OSError:
        print("Can't find specified file.")
        return 1
    except CsvError as exc:
        print(exc)
        return 1
    return 0