"""Conversions between game enums, symbols and names."""

from __future__ import annotations

from labworks.robots.constants import Cell, CommandType, Direction, ModeType

Coords = tuple[int, int]

_CELL_BY_SYMBOL = {
    ".": Cell.EMPTY,
    "#": Cell.ROCK,
    "B": Cell.BOMB,
    "A": Cell.APPLE,
    "R": Cell.ROBOT_SELF,
    "S": Cell.SAPPER_SELF,
    "?": Cell.UNKNOWN,
}

_SYMBOL_BY_CELL = {
    Cell.EMPTY: ".",
    Cell.ROCK: "#",
    Cell.BOMB: "B",
    Cell.APPLE: "A",
    Cell.ROBOT_SELF: "R",
    Cell.ROBOT_OTHER: "R",
    Cell.SAPPER_SELF: "S",
    Cell.SAPPER_OTHER: "S",
    Cell.UNKNOWN: "?",
}

_COMMANDS = {
    "move": CommandType.MOVE,
    "grab": CommandType.GRAB,
    "scan": CommandType.SCAN,
    "set_mode": CommandType.SET_MODE,
    "robot": CommandType.SET_ROBOT,
    "sapper": CommandType.TOGGLE_SAPPER,
    "quit": CommandType.QUIT,
}

_MODE_NAMES = {
    ModeType.MANUAL: "manual",
    ModeType.SCAN: "scan",
    ModeType.AUTO: "auto",
}
_MODES = {name: mode for mode, name in _MODE_NAMES.items()}

_DIRECTIONS = {"u": Direction.U, "d": Direction.D, "r": Direction.R, "l": Direction.L}

_DIFFS = {
    Direction.U: (0, -1),
    Direction.D: (0, 1),
    Direction.R: (1, 0),
    Direction.L: (-1, 0),
}


def to_cell_type(symbol: str) -> Cell:
    """Map a map-file symbol to a cell; unknown symbols give ``Cell.NONE``."""
    return _CELL_BY_SYMBOL.get(symbol, Cell.NONE)


def to_cell_symbol(cell: Cell) -> str:
    """Map a cell to its display symbol; ``Cell.NONE`` shows as a space."""
    return _SYMBOL_BY_CELL.get(cell, " ")


def to_command_type(name: str) -> CommandType:
    """Map a command word to its type; unknown words give ``CommandType.NONE``."""
    return _COMMANDS.get(name, CommandType.NONE)


def to_mode_name(mode: ModeType) -> str:
    """Return the name a mode is typed and shown as."""
    return _MODE_NAMES.get(mode, "unknown")


def to_mode_type(name: str) -> ModeType:
    """Map a mode name to its type; unknown names give ``ModeType.NONE``."""
    return _MODES.get(name, ModeType.NONE)


def to_direction(diff: Coords) -> Direction:
    """Return the direction of a unit step; the vertical part wins."""
    dx, dy = diff
    if dy == -1:
        return Direction.U
    if dy == 1:
        return Direction.D
    if dx == 1:
        return Direction.R
    if dx == -1:
        return Direction.L
    return Direction.NONE


def direction_from_string(text: str) -> Direction:
    """Map ``u``, ``d``, ``r`` or ``l`` to a direction."""
    return _DIRECTIONS.get(text, Direction.NONE)


def diff_coords(direction: Direction) -> Coords:
    """Return the coordinate change for one step in ``direction``."""
    return _DIFFS.get(direction, (0, 0))


def opposite_diff_coords(direction: Direction) -> Coords:
    """Return the coordinate change for one step against ``direction``."""
    dx, dy = diff_coords(direction)
    return -dx, -dy