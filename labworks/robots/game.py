"""The robots game: a collector and a sapper exploring a map."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from typing import TextIO

from labworks.robots.commands import make_command
from labworks.robots.constants import (
    DEFAULT_SCAN_ALGORITHM,
    MODE_COMMANDS,
    Cell,
    CommandType,
    ModeType,
    State,
)
from labworks.robots.convert import to_command_type, to_mode_name
from labworks.robots.errors import GameError, GameOver, InfoMessage
from labworks.robots.gamemap import GameMap
from labworks.robots.modes import Mode, make_mode
from labworks.robots.robots import Collector, Robot, Sapper
from labworks.robots.utils import rand_int, split_str, to_int
from labworks.robots.view import View

Coords = tuple[int, int]
RobotEntry = tuple[Robot, Coords]

DEFAULT_MAP_PATH = "../data/map_test.txt"
_NO_COORDS: Coords = (-1, -1)


class Game:
    """Holds the global map, the robots and the current mode."""

    def __init__(
        self,
        map_path: str,
        width: int = 100,
        height: int = 100,
        collectors: int = 1,
        scan_algorithm: str = DEFAULT_SCAN_ALGORITHM,
        out: TextIO | None = None,
    ) -> None:
        self.global_map = GameMap()
        try:
            apples, bombs = self.global_map.read_from_file(map_path, width, height)
        except GameError as exc:
            raise GameError(f"Map reading error - {exc}") from None
        self._apples: list[Coords] = apples
        self._bombs: list[Coords] = bombs

        self.scan_algorithm = scan_algorithm
        self.state: tuple[State, str] = (State.START, "")
        self.robots: list[RobotEntry] = []
        self.active_robot_id = 0
        self.sapper_on = False

        self.view = View(self, out)

        self.mode: Mode
        self.mode_type = ModeType.MANUAL
        self.set_mode(ModeType.MANUAL)

        self._generate_robots(collectors, width, height)

    @property
    def robots_n(self) -> int:
        """Number of robots, the sapper included."""
        return len(self.robots)

    def _generate_robots(self, collectors: int, width: int, height: int) -> None:
        empty = sum(
            self.global_map.get_cell((i, j)) is Cell.EMPTY
            for i in range(width)
            for j in range(height)
        )
        if empty < collectors:
            raise GameError("Not enough empty cells for collectors.")
        for robot_id in range(collectors):
            while True:
                coords = (rand_int(0, width), rand_int(0, height))
                if self.global_map.get_cell(coords) is not Cell.EMPTY:
                    continue
                if any(taken == coords for _, taken in self.robots):
                    continue
                break
            self.robots.append((Collector(robot_id), coords))
        self.robots.append((Sapper(collectors), _NO_COORDS))

    def set_mode(self, mode_type: ModeType, args: Sequence[str] | None = None) -> None:
        """Switch to another mode."""
        self.mode = make_mode(mode_type, self, list(args) if args else [])
        self.mode_type = mode_type

    def item_list(self, item: Cell) -> list[Coords]:
        """Coordinates of the bombs, or of the apples for any other item."""
        if item is Cell.BOMB:
            return list(self._bombs)
        return list(self._apples)

    def remove_item(self, coords: Coords, item: Cell) -> None:
        """Forget an apple or bomb that has been picked up."""
        if item is Cell.APPLE:
            self._apples = [c for c in self._apples if c != coords]
        elif item is Cell.BOMB:
            self._bombs = [c for c in self._bombs if c != coords]

    def active_robot(self) -> RobotEntry:
        """The active collector and its global coordinates."""
        return self.robots[self.active_robot_id]

    def sapper(self) -> RobotEntry:
        """The sapper and its global coordinates, ``(-1, -1)`` when off."""
        return self.robots[-1]

    def start(self) -> None:
        """Run the game loop on standard input until the game ends."""
        self.state = (State.START, "Hello, my dear friend!")
        self.view.cls()
        try:
            while self.state[0] is not State.END:
                self.refresh()
                line = sys.stdin.readline()
                if not line:
                    self.state = (State.END, "")
                    break
                self.handle_command(line.rstrip("\r\n"))
        except KeyboardInterrupt:
            self.view.cls()
        finally:
            self.view.show_cursor(True)

    def refresh(self, delay: int = 0, clearing: bool = True) -> None:
        """Redraw the screen, then wait ``delay`` milliseconds."""
        if self.state[0] is not State.START:
            self.view.set_cursor_position(0, 0)

        robot, coords = self.active_robot()
        self.view.show_robot_info(
            coords,
            self.active_robot_id,
            robot.items_count,
            self.robot_research(self.active_robot_id),
        )
        if self.sapper_on:
            sapper, sapper_coords = self.sapper()
            self.view.show_sapper_info(
                sapper_coords, sapper.items_count, self.robot_research(self.robots_n - 1)
            )

        self.view.draw_map()
        self.view.show_game_status_line(self.state, to_mode_name(self.mode_type))

        if delay:
            time.sleep(delay / 1000)
        if clearing:
            self.view.clear_data()

    def handle_command(self, line: str) -> tuple[State, str]:
        """Parse and run one command line; return the resulting state."""
        try:
            args = split_str(line.strip().lower())
            if not args:
                raise GameError("Command line is empty.")
            command_type = to_command_type(args[0])
            if command_type is CommandType.QUIT:
                raise GameOver("Bye bye !")
            if command_type is CommandType.NONE:
                raise GameError("Invalid command name.")
            command = make_command(command_type)
            command.validate(args)
            if command_type is CommandType.SET_MODE:
                command.execute(self)
                self.mode.send_command(command)
            elif command_type in MODE_COMMANDS:
                self.mode.send_command(command)
            else:
                command.execute(self)
            self.state = (State.SUCCESS, "Success!")
        except InfoMessage as exc:
            self.state = (State.INFO, str(exc))
        except GameError as exc:
            self.state = (State.EXCEPTION, str(exc))
        except GameOver as exc:
            self.state = (State.END, self.state[1])
            self.view.show_goodbye_message(str(exc))
        return self.state

    def robot_research(self, robot_id: int) -> float:
        """Percentage of the global map a robot has discovered."""
        width, height = self.global_map.size
        robot = self.robots[robot_id][0]
        return robot.local_map.researched / (width * height) * 100.0

    def is_other_robot_on_cell(self, coords: Coords, ignore: int | None = None) -> bool:
        """Tell whether a robot other than the active one and ``ignore`` stands on a cell."""
        if ignore is None:
            ignore = self.active_robot_id
        return any(
            robot_coords == coords
            and robot.robot_id != self.active_robot_id
            and robot.robot_id != ignore
            for robot, robot_coords in self.robots
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Start the robots game."""
    parser = argparse.ArgumentParser(
        description="Collect apples and defuse bombs with robots.", add_help=False
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-m", "--map", default=DEFAULT_MAP_PATH)
    parser.add_argument("-w", "--width", default="100")
    parser.add_argument("-h", "--height", default="100")
    parser.add_argument("-c", "--collector", default="1")
    parser.add_argument("-a", "--algorithm", default=DEFAULT_SCAN_ALGORITHM)
    args = parser.parse_args(argv)

    try:
        width = to_int(args.width, 5, 1000)
        height = to_int(args.height, 5, 1000)
        collectors = to_int(args.collector, 1, 5)
    except GameError as exc:
        print(f"Parse cmd line error ({exc}).")
        return 1

    try:
        game = Game(args.map, width, height, collectors, args.algorithm)
    except GameError as exc:
        print(exc)
        return 1

    game.start()
    return 0