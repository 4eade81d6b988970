"""Rectangular maps of cells, either anchored at a corner or centred on zero."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import product
from os import PathLike

from labworks.robots.constants import EXP_K, GOOD_CELLS, Cell
from labworks.robots.convert import to_cell_type
from labworks.robots.errors import GameError

Coords = tuple[int, int]


class GameMap:
    """A grid of cells.

    An unsigned map spans ``0..width-1`` by ``0..height-1``; a signed map is
    centred on the origin and grows on every side when a cell outside it is set.
    """

    def __init__(self, signed: bool = False) -> None:
        self._data: list[Cell] = []
        self._size: Coords = (0, 0)
        self._signed = signed
        self._researched = 0
        self._szudzik_max_idx = 0

    def copy(self) -> GameMap:
        """Return an independent copy."""
        other = GameMap(self._signed)
        other._data = list(self._data)
        other._size = self._size
        other._researched = self._researched
        other._szudzik_max_idx = self._szudzik_max_idx
        return other

    def set_data(
        self, data: Iterable[Cell], width: int, height: int, researched: int = 1
    ) -> None:
        """Replace the contents with ``width * height`` cells in row order."""
        cells = list(data)
        if len(cells) != width * height:
            raise ValueError(
                f"{len(cells)} cells do not fill a {width}x{height} map"
            )
        self._data = cells
        self._size = (width, height)
        self._researched = researched
        self._szudzik_max_idx = width * height * 4

    @property
    def signed(self) -> bool:
        return self._signed

    @property
    def size(self) -> Coords:
        """Width and height."""
        return self._size

    @property
    def researched(self) -> int:
        """Number of cells that have been discovered."""
        return self._researched

    @property
    def szudzik_max_idx(self) -> int:
        """Upper bound of Szudzik indices worth searching on this map."""
        return self._szudzik_max_idx

    def get_cell(self, coords: Coords) -> Cell:
        """Return the cell, or ``Cell.NONE`` when outside the map."""
        if not self.is_on_map(coords):
            return Cell.NONE
        return self._data[self._index(coords)]

    def set_cell(self, coords: Coords, value: Cell) -> None:
        """Store a cell, expanding the map once when ``coords`` is outside it."""
        if not self.is_on_map(coords):
            self._expand()
            if not self.is_on_map(coords):
                raise IndexError(f"cell {coords} is outside the map")
        index = self._index(coords)
        if self._data[index] is Cell.UNKNOWN and value not in (Cell.UNKNOWN, Cell.NONE):
            self._researched += 1
        self._data[index] = value

    def is_on_map(self, coords: Coords) -> bool:
        """Tell whether ``coords`` lie within the map."""
        if not self._data:
            return False
        x, y = coords
        width, height = self._size
        if self._signed:
            return abs(x) <= width // 2 and abs(y) <= height // 2
        return 0 <= x < width and 0 <= y < height

    @staticmethod
    def cell_neighbours(coords: Coords) -> list[Coords]:
        """The four orthogonal neighbours: up, down, right, left."""
        x, y = coords
        return [(x, y - 1), (x, y + 1), (x + 1, y), (x - 1, y)]

    def good_neighbours(
        self, coords: Coords, ignore: Coords | None = None
    ) -> list[Coords]:
        """Neighbours holding a walkable cell, plus ``ignore`` if it is one."""
        return [
            neighbour
            for neighbour in self.cell_neighbours(coords)
            if self.get_cell(neighbour) in GOOD_CELLS or neighbour == ignore
        ]

    def has_good_neighbours(self, coords: Coords) -> bool:
        """Tell whether any neighbour holds a walkable cell."""
        return any(
            self.get_cell(neighbour) in GOOD_CELLS
            for neighbour in self.cell_neighbours(coords)
        )

    def read_from_file(
        self, path: str | PathLike[str], width: int, height: int
    ) -> tuple[list[Coords], list[Coords]]:
        """Load a ``width`` by ``height`` map; whitespace is ignored.

        Returns the coordinates of the apples and of the bombs, in reading order.
        """
        try:
            with open(path, encoding="utf-8", errors="replace") as stream:
                text = stream.read()
        except OSError:
            raise GameError("Can't find map file.") from None

        symbols = (ch for ch in text if not ch.isspace())
        cells: list[Cell] = []
        apples: list[Coords] = []
        bombs: list[Coords] = []
        for j, i in product(range(height), range(width)):
            symbol = next(symbols, None)
            if symbol is None:
                raise GameError("Map file is too short.")
            cell = to_cell_type(symbol)
            if cell is Cell.NONE:
                raise GameError("Unknown symbol.")
            if cell in (Cell.ROBOT_SELF, Cell.SAPPER_SELF):
                raise GameError("You can't set robots position.")
            if cell is Cell.APPLE:
                apples.append((i, j))
            elif cell is Cell.BOMB:
                bombs.append((i, j))
            cells.append(cell)

        self._data = cells
        self._size = (width, height)
        return apples, bombs

    def _index(self, coords: Coords) -> int:
        x, y = coords
        width, height = self._size
        if self._signed:
            return (y + height // 2) * width + (x + width // 2)
        return y * width + x

    def _expand(self) -> None:
        width, height = self._size
        new_width = width + EXP_K * 2
        border = [Cell.UNKNOWN] * EXP_K
        data = [Cell.UNKNOWN] * (new_width * EXP_K)
        for start in range(0, len(self._data), width) if width else ():
            data.extend(border + self._data[start:start + width] + border)
        data.extend([Cell.UNKNOWN] * (new_width * EXP_K))
        self._data = data
        self._size = (new_width, height + EXP_K * 2)
        self._szudzik_max_idx = self._size[0] * self._size[1] * 4