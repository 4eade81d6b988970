"""Commands a player can give to the robots game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from labworks.robots.constants import GOOD_CELLS, MOVES, Cell, CommandType, Direction, ModeType
from labworks.robots.convert import (
    diff_coords,
    direction_from_string,
    to_direction,
    to_mode_type,
)
from labworks.robots.errors import CollisionError, GameError, GameOver
from labworks.robots.gamemap import GameMap
from labworks.robots.robots import Robot
from labworks.robots.utils import add_coords, sub_coords, to_int

if TYPE_CHECKING:
    Game = Any

Coords = tuple[int, int]
RobotEntry = tuple[Robot, Coords]
RemoveItem = Callable[[Coords, Cell], None]

_NO_COORDS: Coords = (-1, -1)


def _check_count(argv: Sequence[str], expected: int) -> None:
    if len(argv) != expected:
        raise GameError("Invalid arguments number.")


class Command(ABC):
    """A parsed command line."""

    @abstractmethod
    def validate(self, argv: Sequence[str]) -> None:
        """Check and store the arguments; raise GameError when they are wrong."""

    def execute(self, game: Game) -> None:
        """Apply the command to the game."""


class SetModeCommand(Command):
    """Switch the game to another mode."""

    def __init__(self) -> None:
        self.mode_type = ModeType.NONE
        self.args: list[str] = []

    def validate(self, argv: Sequence[str]) -> None:
        if len(argv) < 2:
            raise GameError("Invalid arguments number.")
        args = [argv[0], argv[1].lower(), *argv[2:]]
        mode_type = to_mode_type(args[1])
        if mode_type is ModeType.NONE:
            raise GameError("Invalid mode name.")
        if mode_type in (ModeType.MANUAL, ModeType.AUTO) and len(args) != 2:
            raise GameError("Invalid arguments number.")
        if mode_type is ModeType.SCAN:
            try:
                to_int(args[2])
            except (IndexError, GameError):
                raise GameError("Invalid steps number.") from None
        self.mode_type = mode_type
        self.args = args

    def execute(self, game: Game) -> None:
        game.set_mode(self.mode_type, self.args)


class SetRobotCommand(Command):
    """Choose which collector is active."""

    def __init__(self) -> None:
        self.new_id = 0

    def validate(self, argv: Sequence[str]) -> None:
        _check_count(argv, 2)
        self.new_id = to_int(argv[1])

    def execute(self, game: Game) -> None:
        if not 0 <= self.new_id < len(game.robots) - 1:
            raise GameError("There is no collector with this id.")
        game.active_robot_id = self.new_id


class ToggleSapperCommand(Command):
    """Put the sapper next to the active collector or take it away."""

    def __init__(self) -> None:
        self.action = False

    def validate(self, argv: Sequence[str]) -> None:
        _check_count(argv, 2)
        word = argv[1].lower()
        if word == "on":
            self.action = True
        elif word == "off":
            self.action = False
        else:
            raise GameError("Incorrect argument. Try ON/OFF.")

    def execute(self, game: Game) -> None:
        if game.sapper_on == self.action:
            return
        if self.action:
            self._turn_on(game)
        else:
            self._turn_off(game)
        game.sapper_on = self.action

    @staticmethod
    def _sapper_on_local_map(robot: Robot, coords: Coords, sapper_coords: Coords) -> Coords:
        return add_coords(sub_coords(sapper_coords, coords), robot.position)

    def _turn_on(self, game: Game) -> None:
        robots: list[RobotEntry] = list(game.robots)
        collector, collector_coords = game.active_robot()
        neighbours = collector.local_map.good_neighbours(collector.position)
        if not neighbours:
            raise GameError("No place on local map for Sapper.")

        sapper_coords = add_coords(
            sub_coords(collector_coords, collector.position), neighbours[-1]
        )
        sapper = robots[-1][0]
        robots[-1] = (sapper, sapper_coords)

        for robot, coords in robots[:-1]:
            local = self._sapper_on_local_map(robot, coords, sapper_coords)
            if robot.local_map.get_cell(local) in GOOD_CELLS:
                robot.local_map.set_cell(local, Cell.SAPPER_OTHER)

        game.robots = robots

    def _turn_off(self, game: Game) -> None:
        robots: list[RobotEntry] = list(game.robots)
        sapper, sapper_coords = robots[-1]
        sapper.local_map.set_data([Cell.SAPPER_SELF], 1, 1)
        sapper.position = (0, 0)

        for robot, coords in robots[:-1]:
            local = self._sapper_on_local_map(robot, coords, sapper_coords)
            if robot.local_map.get_cell(local) is Cell.SAPPER_OTHER:
                robot.local_map.set_cell(local, game.global_map.get_cell(sapper_coords))

        robots[-1] = (sapper, _NO_COORDS)
        game.robots = robots


class ManualModeCommand(Command):
    """A command that acts on one robot and is carried out by a mode."""

    @abstractmethod
    def apply(
        self,
        robots: list[RobotEntry],
        robot_id: int,
        global_map: GameMap,
        remove_item: RemoveItem | None = None,
    ) -> None:
        """Act with robot ``robot_id``; ``robots`` is updated in place."""


class MoveCommand(ManualModeCommand):
    """Move a robot one cell."""

    def __init__(self, direction: Direction = Direction.NONE) -> None:
        self.direction = direction

    def validate(self, argv: Sequence[str]) -> None:
        _check_count(argv, 2)
        self.direction = direction_from_string(argv[1])
        if self.direction is Direction.NONE:
            raise GameError("Invalid argument(s).")

    def apply(
        self,
        robots: list[RobotEntry],
        robot_id: int,
        global_map: GameMap,
        remove_item: RemoveItem | None = None,
    ) -> None:
        robot, coords = robots[robot_id]
        new_coords = add_coords(coords, diff_coords(self.direction))
        new_cell = global_map.get_cell(new_coords)

        if new_cell not in robot.good_cells():
            if new_cell is Cell.ROCK:
                raise GameError("There is a rock on this cell!")
            if new_cell is Cell.NONE:
                raise GameError("You can't move there - map end.")
            if new_cell is Cell.BOMB:
                raise GameOver("You exploded on the bomb...")

        blocker = next(
            ((other, other_coords) for other, other_coords in robots
             if other_coords == new_coords),
            None,
        )
        if blocker is not None:
            self._collide(robots, robot, coords, new_coords, blocker, global_map)

        self.update_position_on_all_local_maps(robots, robot, global_map, coords, new_coords)
        robots[robot_id] = (robot, new_coords)

    def _collide(
        self,
        robots: list[RobotEntry],
        robot: Robot,
        coords: Coords,
        new_coords: Coords,
        blocker: RobotEntry,
        global_map: GameMap,
    ) -> None:
        other, other_coords = blocker
        if robot.own_types()[0] is Cell.SAPPER_SELF:
            pushed_to = self.good_neighbour_if_exists(robots, global_map, other_coords)
            if pushed_to is None:
                raise CollisionError("No place to move collector to..", Direction.NONE)
            self.update_position_on_all_local_maps(
                robots, other, global_map, other_coords, pushed_to
            )
            robots[other.robot_id] = (other, pushed_to)
            self.update_position_on_all_local_maps(
                robots, robot, global_map, coords, new_coords
            )
            robots[robot.robot_id] = (robot, new_coords)
            raise CollisionError(
                "Sapper pushed collector :c",
                to_direction(sub_coords(other_coords, pushed_to)),
            )
        if other.own_types()[0] is Cell.SAPPER_SELF:
            raise CollisionError("Collector can't push Sapper c:", Direction.NONE)
        raise CollisionError("There is other collector on this cell!", Direction.NONE)

    def good_neighbour_if_exists(
        self, robots: Sequence[RobotEntry], global_map: GameMap, coords: Coords
    ) -> Coords | None:
        """Return a free walkable neighbour of ``coords``, or None."""
        occupied = {robot_coords for _, robot_coords in robots}
        return next(
            (n for n in global_map.good_neighbours(coords) if n not in occupied),
            None,
        )

    def update_position_on_all_local_maps(
        self,
        robots: Sequence[RobotEntry],
        robot: Robot,
        global_map: GameMap,
        old_coords: Coords,
        new_coords: Coords,
    ) -> None:
        """Redraw ``robot`` at its new place on every local map that shows it."""
        own, seen_by_others = robot.own_types()
        for other, other_coords in robots:
            local_map = other.local_map
            center = sub_coords(other_coords, other.position)
            old_local = sub_coords(old_coords, center)
            new_local = sub_coords(new_coords, center)
            marker = own if other is robot else seen_by_others

            if other is robot:
                other.move_to(new_local)

            if local_map.get_cell(old_local) is marker:
                local_map.set_cell(old_local, global_map.get_cell(old_coords))
            if local_map.get_cell(new_local) not in (Cell.UNKNOWN, Cell.NONE):
                local_map.set_cell(new_local, marker)


class GrabCommand(ManualModeCommand):
    """Pick up the item under a robot."""

    def validate(self, argv: Sequence[str]) -> None:
        _check_count(argv, 1)

    def apply(
        self,
        robots: list[RobotEntry],
        robot_id: int,
        global_map: GameMap,
        remove_item: RemoveItem | None = None,
    ) -> None:
        robot, coords = robots[robot_id]
        cell = global_map.get_cell(coords)
        if cell is Cell.EMPTY:
            raise GameError("The cell is empty - nothing to grab. ")
        if cell is not robot.item_type():
            raise GameError("You can't grab this item.")
        global_map.set_cell(coords, Cell.EMPTY)
        robot.on_grab()
        if remove_item is not None:
            remove_item(coords, robot.item_type())


class ScanCommand(ManualModeCommand):
    """Reveal the four cells around a robot on its local map."""

    def validate(self, argv: Sequence[str]) -> None:
        _check_count(argv, 1)

    def apply(
        self,
        robots: list[RobotEntry],
        robot_id: int,
        global_map: GameMap,
        remove_item: RemoveItem | None = None,
    ) -> None:
        robot, coords = robots[robot_id]
        for direction in MOVES:
            diff = diff_coords(direction)
            target = add_coords(coords, diff)
            cell = global_map.get_cell(target)
            for other, other_coords in robots:
                if other_coords == target:
                    cell = other.own_types()[1]
            robot.local_map.set_cell(add_coords(robot.position, diff), cell)


_COMMANDS: dict[CommandType, type[Command]] = {
    CommandType.MOVE: MoveCommand,
    CommandType.GRAB: GrabCommand,
    CommandType.SCAN: ScanCommand,
    CommandType.SET_MODE: SetModeCommand,
    CommandType.SET_ROBOT: SetRobotCommand,
    CommandType.TOGGLE_SAPPER: ToggleSapperCommand,
}


def make_command(command_type: CommandType) -> Command:
    """Create an empty command of the given type."""
    try:
        return _COMMANDS[command_type]()
    except KeyError:
        raise ValueError(f"no command class for {command_type}") from None