"""Game of Life board with a one-step history."""

from __future__ import annotations

from os import PathLike

ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

FIELD_W = 40
FIELD_H = 40

ALIVE_CELL = "@"
DEAD_CELL = "."

MAX_NUM_LEN = 2
X_SEP = 1

Grid = list[list[bool]]


def _blank() -> Grid:
    return [[False] * FIELD_H for _ in range(FIELD_W)]


class Field:
    """A fixed-size board; ``row`` indexes the lettered columns, ``col`` the numbered lines."""

    def __init__(self) -> None:
        self._cells: Grid = _blank()
        self._previous: Grid = _blank()

    def is_cell(self, row: int, col: int) -> bool:
        """Tell whether the coordinates lie on the board."""
        return 0 <= row < FIELD_W and 0 <= col < FIELD_H

    def _check(self, row: int, col: int) -> None:
        if not self.is_cell(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the field")

    def is_alive(self, row: int, col: int) -> bool:
        """Return whether the cell holds an organism."""
        self._check(row, col)
        return self._cells[row][col]

    def alive_neighbours(self, x: int, y: int) -> int:
        """Count the living cells among the eight around ``(x, y)``."""
        return sum(
            self._cells[i][j]
            for i in range(x - 1, x + 2)
            for j in range(y - 1, y + 2)
            if (i, j) != (x, y) and self.is_cell(i, j)
        )

    def reset(self) -> None:
        """Clear the board, keeping the current state as the previous one."""
        self._previous = self._cells
        self._cells = _blank()

    def set(self, row: int, col: int) -> None:
        """Put an organism into a cell."""
        self._check(row, col)
        self._cells[row][col] = True

    def clear(self, row: int, col: int) -> None:
        """Empty a cell."""
        self._check(row, col)
        self._cells[row][col] = False

    def _next_state(self, row: int, col: int) -> bool:
        neighbours = self.alive_neighbours(row, col)
        if neighbours == 3:
            return True
        if neighbours != 2:
            return False
        return self._cells[row][col]

    def step(self) -> None:
        """Advance one generation."""
        following = [
            [self._next_state(i, j) for j in range(FIELD_H)] for i in range(FIELD_W)
        ]
        self._previous, self._cells = self._cells, following

    def back(self) -> None:
        """Swap the current and previous states."""
        self._previous, self._cells = self._cells, self._previous

    def save(self, filename: str | PathLike[str]) -> None:
        """Write the board as a run of '0' and '1' characters."""
        with open(filename, "w", encoding="ascii") as stream:
            stream.write(
                "".join("1" if alive else "0" for column in self._cells for alive in column)
            )

    def load(self, filename: str | PathLike[str]) -> None:
        """Read a board written by :meth:`save`; whitespace is ignored.

        Raises ValueError when the file is short or holds other symbols.
        """
        with open(filename, encoding="ascii", errors="replace") as stream:
            symbols = [ch for ch in stream.read() if not ch.isspace()]
        needed = FIELD_W * FIELD_H
        if len(symbols) < needed:
            raise ValueError("field file is too short")
        symbols = symbols[:needed]
        if any(symbol not in "01" for symbol in symbols):
            raise ValueError("field file holds symbols other than '0' and '1'")
        self._cells = [
            [symbols[i * FIELD_H + j] == "1" for j in range(FIELD_H)]
            for i in range(FIELD_W)
        ]

    def render(self) -> str:
        """Return the board as text with lettered columns and numbered lines."""
        sep = " " * X_SEP
        lines = [
            " " + " " * MAX_NUM_LEN + "".join(sep + ALPHABET[j] for j in range(FIELD_W))
        ]
        for i in range(FIELD_H):
            cells = "".join(
                sep + (ALIVE_CELL if self._cells[j][i] else DEAD_CELL)
                for j in range(FIELD_W)
            )
            lines.append(f" {i:<{MAX_NUM_LEN}}" + cells)
        lines.append(" " * (MAX_NUM_LEN + 1 + FIELD_W * (X_SEP + 1)))
        return "\n".join(lines) + "\n"