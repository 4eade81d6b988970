"""Enumerations and tunables shared by the robots game."""

from __future__ import annotations

from enum import Enum, auto


class State(Enum):
    """State of the game loop, shown on the status line."""

    START = auto()
    RUNNING = auto()
    INFO = auto()
    SUCCESS = auto()
    EXCEPTION = auto()
    END = auto()


class Cell(Enum):
    """Contents of a map cell."""

    EMPTY = auto()
    ROCK = auto()
    BOMB = auto()
    APPLE = auto()
    ROBOT_SELF = auto()
    ROBOT_OTHER = auto()
    SAPPER_SELF = auto()
    SAPPER_OTHER = auto()
    UNKNOWN = auto()
    NONE = auto()


class CommandType(Enum):
    """Commands a player can type."""

    MOVE = auto()
    GRAB = auto()
    SCAN = auto()
    SET_MODE = auto()
    SET_ROBOT = auto()
    TOGGLE_SAPPER = auto()
    QUIT = auto()
    NONE = auto()


class ModeType(Enum):
    """Modes that drive the active robot."""

    MANUAL = auto()
    SCAN = auto()
    AUTO = auto()
    NONE = auto()


class Direction(Enum):
    """Movement directions; ``NONE`` stands for no movement."""

    U = auto()
    D = auto()
    R = auto()
    L = auto()
    NONE = auto()


# The four real moves, in the order scans visit them.
MOVES = (Direction.U, Direction.D, Direction.R, Direction.L)

# Pause between animation frames, in milliseconds.
SLEEP_TIME = 0
# Number of cells a local map grows by on every side when it expands.
EXP_K = 2

GOOD_CELLS = frozenset({Cell.EMPTY, Cell.APPLE, Cell.ROBOT_SELF})
MODE_COMMANDS = frozenset({CommandType.MOVE, CommandType.SCAN, CommandType.GRAB})

DEFAULT_SCAN_ALGORITHM = "a_star"