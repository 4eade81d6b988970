"""Terminal rendering of the robots game."""

from __future__ import annotations

import math
import shutil
import sys
from typing import Any, TextIO

from labworks.robots.constants import Cell, State
from labworks.robots.convert import to_cell_symbol
from labworks.robots.utils import split_by_length, sub_coords

Coords = tuple[int, int]
Color = tuple[int, int, int]
Game = Any

CLASSIC_COLOR: Color = (0xFF, 0xFF, 0xFF)
ERROR_COLOR: Color = (0xDC, 0x14, 0x3C)
SUCCESS_COLOR: Color = (0x3C, 0xB3, 0x71)
ACCENT_COLOR: Color = (0xE9, 0x96, 0x7A)
INFO_COLOR: Color = (0xAF, 0xEE, 0xEE)
NONE_COLOR: Color = (0x69, 0x69, 0x69)

ROCK_COLOR: Color = (0xFF, 0xFF, 0x00)
BOMB_COLOR: Color = (0xFF, 0x00, 0x00)
APPLE_COLOR: Color = (0x90, 0xEE, 0x90)
SELF_ROBOT_COLOR: Color = (0x64, 0x95, 0xED)
OTHER_ROBOT_COLOR: Color = (0xFF, 0xB6, 0xC1)
SAPPER_COLOR: Color = (0xF4, 0xA4, 0x60)

_CELL_COLORS = {
    Cell.ROCK: ROCK_COLOR,
    Cell.BOMB: BOMB_COLOR,
    Cell.APPLE: APPLE_COLOR,
    Cell.ROBOT_SELF: SELF_ROBOT_COLOR,
    Cell.ROBOT_OTHER: OTHER_ROBOT_COLOR,
    Cell.SAPPER_SELF: SAPPER_COLOR,
    Cell.SAPPER_OTHER: SAPPER_COLOR,
}

_STATE_COLORS = {
    State.RUNNING: ACCENT_COLOR,
    State.EXCEPTION: ERROR_COLOR,
    State.SUCCESS: SUCCESS_COLOR,
    State.INFO: INFO_COLOR,
}


def _paint(text: str, color: Color) -> str:
    red, green, blue = color
    return f"\x1b[38;2;{red};{green};{blue}m{text}\x1b[0m"


class View:
    """Draws the active robot's view of the map and the status lines."""

    def __init__(self, game: Game, out: TextIO | None = None) -> None:
        self.game = game
        self.out = out if out is not None else sys.stdout
        self.view_w = 0
        self.view_h = 0
        self.view_map_w = 0
        self.view_map_h = 0
        self.robot_line_h = 0
        self.game_info_line_h = 0
        self.show_cursor(False)
        self.update_console_info()

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def update_console_info(self) -> None:
        """Read the terminal size and derive the map window from it."""
        columns, lines = shutil.get_terminal_size()
        self.view_w = max(columns - 1, 0)
        self.view_h = max(lines - 1, 0)
        self.view_map_w = math.ceil(self.view_w / 2)
        self.view_map_h = 23 if self.game.sapper_on else 25

    def cls(self) -> None:
        """Clear the screen."""
        self._write("\x1b[2J\x1b[H")

    def set_cursor_position(self, x: int, y: int) -> None:
        """Move the cursor to column ``x`` and line ``y``, both from zero."""
        self._write(f"\x1b[{y + 1};{x + 1}H")

    def show_cursor(self, flag: bool) -> None:
        """Show or hide the cursor."""
        self._write("\x1b[?25h" if flag else "\x1b[?25l")

    def clear_data(self) -> None:
        """Blank the command area and put the cursor back at the prompt."""
        self._write(" " * (self.view_w * 6))
        self.set_cursor_position(
            2, self.robot_line_h + self.view_map_h + self.game_info_line_h + 1
        )

    def cell_color(self, cell: Cell) -> Color:
        """Return the colour a cell is drawn in."""
        return _CELL_COLORS.get(cell, NONE_COLOR)

    def draw_map(self) -> None:
        """Draw the part of the map around the active robot."""
        self.update_console_info()
        game = self.game
        robot, global_coords = game.active_robot()
        local_map = robot.local_map
        center = sub_coords(global_coords, robot.position)
        local_w, local_h = local_map.size
        global_w, global_h = game.global_map.size

        start_i = global_coords[0] - self.view_map_w // 2
        start_j = global_coords[1] - self.view_map_h // 2

        lines = [" " * self.view_w]
        for j in range(start_j, start_j + self.view_map_h):
            row = []
            for i in range(start_i, start_i + self.view_map_w):
                outside = i < 0 or j < 0 or i >= global_w or j >= global_h
                in_local = (
                    center[0] - local_w // 2 <= i <= center[0] + local_w // 2
                    and center[1] - local_h // 2 <= j <= center[1] + local_h // 2
                )
                if outside:
                    symbol = to_cell_symbol(Cell.NONE)
                elif in_local:
                    cell = local_map.get_cell(sub_coords((i, j), center))
                    symbol = _paint(to_cell_symbol(cell), self.cell_color(cell))
                else:
                    symbol = "-"
                row.append(symbol + " ")
            lines.append("".join(row))
        lines.append(" " * self.view_w)
        self._write("\n".join(lines) + "\n")

    def show_robot_info(
        self, coords: Coords, robot_id: int, items_count: int, research: float
    ) -> None:
        """Show the active collector's position, apples and exploration."""
        width = self.view_w // 3
        self._write("-" * self.view_w + "\n")
        self._write(_paint(f"{f'Robot {robot_id}: {coords}':^{width}}", CLASSIC_COLOR))
        self._write(_paint(f"{f'Apples: {items_count}':^{width}}", CLASSIC_COLOR))
        self._write(_paint(f"{f'Researched: {research:.1f}%':^{width}}", CLASSIC_COLOR))
        self._write("\n" + "-" * self.view_w + "\n")
        self.robot_line_h = 5 if self.game.sapper_on else 3

    def show_sapper_info(self, coords: Coords, items_count: int, research: float) -> None:
        """Show the sapper's position, bombs and exploration."""
        width = self.view_w // 3
        self._write(_paint(f"{f'Sapper: {coords}':^{width}}", CLASSIC_COLOR))
        self._write(_paint(f"{f'Bombs: {items_count}':^{width}}", CLASSIC_COLOR))
        self._write(_paint(f"{f'Researched: {research:.1f}%':^{width}}", CLASSIC_COLOR))
        self._write("\n" + "-" * self.view_w + "\n")

    def show_game_status_line(self, state: tuple[State, str], mode_name: str) -> None:
        """Show the state message, the current mode and the prompt."""
        status, message = state
        color = _STATE_COLORS.get(status, CLASSIC_COLOR)
        half = self.view_w // 2
        pieces = split_by_length(message, half)
        for index, piece in enumerate(pieces):
            self._write(_paint(f"{piece:<{half}}", color))
            if index == 0:
                self._write(_paint(f"{'Current mode: ' + mode_name:>{half}}", CLASSIC_COLOR))
            self._write("\n")
        self._write("$ ")
        self.game_info_line_h = len(pieces) + 1

    def show_goodbye_message(self, message: str) -> None:
        """Print the closing message."""
        self._write(_paint("\n" + message + "\n\n", CLASSIC_COLOR))