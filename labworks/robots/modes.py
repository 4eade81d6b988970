"""Modes that decide how the active robot carries out commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any

from labworks.robots.constants import (
    GOOD_CELLS,
    SLEEP_TIME,
    Cell,
    Direction,
    ModeType,
    State,
)
from labworks.robots.commands import (
    Command,
    GrabCommand,
    ManualModeCommand,
    MoveCommand,
    ScanCommand,
)
from labworks.robots.errors import (
    CollisionError,
    GameError,
    InfoMessage,
    WayNotFoundError,
)
from labworks.robots.gamemap import GameMap
from labworks.robots.pathfinding import a_star_search, dijkstra_search
from labworks.robots.robots import Robot
from labworks.robots.utils import add_coords, sub_coords, szudzik_pair, to_int

Coords = tuple[int, int]
RobotEntry = tuple[Robot, Coords]
Game = Any

_UNEXPLORED = (Cell.UNKNOWN, Cell.NONE)


class Mode(ABC):
    """Receives the robot commands typed while it is active."""

    def __init__(self, game: Game, args: Sequence[str] | None = None) -> None:
        self.game = game

    @abstractmethod
    def send_command(self, command: Command | None) -> None:
        """Carry out a command."""

    def _refresh(self, delay: int = 0, clearing: bool = True) -> None:
        self.game.refresh(delay, clearing)

    def _announce(self, message: str) -> None:
        self.game.state = (State.RUNNING, message)
        self._refresh()


class ManualMode(Mode):
    """Executes each move, grab or scan command directly."""

    def send_command(self, command: Command | None) -> None:
        if not isinstance(command, ManualModeCommand):
            return
        robots: list[RobotEntry] = list(self.game.robots)
        try:
            command.apply(
                robots,
                self.game.active_robot_id,
                self.game.global_map,
                self.game.remove_item,
            )
        except CollisionError:
            self.game.robots = robots
            raise
        self.game.robots = robots


class AutoMode(Mode):
    """Collects every reachable apple, and every bomb when the sapper is on."""

    def __init__(self, game: Game, args: Sequence[str] | None = None) -> None:
        super().__init__(game, args)
        self.robot_on_item = False
        self.item_surrounded = False

    @staticmethod
    def sort_points(points: Iterable[Coords], start: Coords) -> deque[Coords]:
        """Order points greedily, each the nearest (Manhattan) to the one before."""
        remaining = list(points)
        ordered: deque[Coords] = deque()
        target = start
        while remaining:
            nearest = min(
                remaining,
                key=lambda p: abs(p[0] - target[0]) + abs(p[1] - target[1]),
            )
            remaining.remove(nearest)
            ordered.append(nearest)
            target = nearest
        return ordered

    def generate_way(
        self, items: deque[Coords], start: Coords, other_robot_id: int
    ) -> list[Direction] | None:
        """Plan a walk to the next reachable item, dropping unreachable ones.

        Returns None when no items are left. Steps come last-first.
        """
        game = self.game
        while items:
            item = items.popleft()
            if game.is_other_robot_on_cell(item):
                self.robot_on_item = True
                continue
            try:
                return a_star_search(
                    game.global_map,
                    start,
                    item,
                    lambda coords: game.is_other_robot_on_cell(coords, other_robot_id),
                )
            except WayNotFoundError:
                self.item_surrounded = True
        return None

    def _do_move(
        self,
        way: list[Direction],
        robots: list[RobotEntry],
        robot_id: int,
        move: MoveCommand,
    ) -> None:
        move.direction = way[-1]
        move.apply(robots, robot_id, self.game.global_map)
        way.pop()
        self.game.robots = robots
        self._refresh(SLEEP_TIME, False)

    def _do_grab(
        self, robots: list[RobotEntry], robot_id: int, grab: GrabCommand
    ) -> None:
        grab.apply(robots, robot_id, self.game.global_map, self.game.remove_item)

    def send_command(self, command: Command | None) -> None:
        game = self.game
        robots: list[RobotEntry] = list(game.robots)
        sapper_on = game.sapper_on
        collector_id = game.active_robot_id
        sapper_id = len(robots) - 1

        self._announce("Sorting apples array...")
        apples = self.sort_points(game.item_list(Cell.APPLE), game.active_robot()[1])

        bombs: deque[Coords] = deque()
        if sapper_on:
            self._announce("Sorting bombs array...")
            bombs = self.sort_points(game.item_list(Cell.BOMB), game.sapper()[1])

        self._announce("Running")

        move = MoveCommand()
        grab = GrabCommand()
        self.robot_on_item = False
        self.item_surrounded = False

        collector_done = False
        sapper_done = not sapper_on
        collector_way: list[Direction] = []
        sapper_way: list[Direction] = []

        while True:
            if not collector_way:
                way = self.generate_way(apples, robots[collector_id][1], sapper_id)
                if way is None:
                    collector_done = True
                else:
                    collector_way = way

            if sapper_on and not sapper_way:
                way = self.generate_way(bombs, robots[sapper_id][1], collector_id)
                if way is None:
                    sapper_done = True
                else:
                    sapper_way = way

            if collector_done and sapper_done:
                break

            if not collector_done:
                if collector_way:
                    try:
                        self._do_move(collector_way, robots, collector_id, move)
                    except CollisionError:
                        pass
                if not collector_way:
                    self._do_grab(robots, collector_id, grab)

            if sapper_on and not sapper_done:
                if sapper_way:
                    try:
                        self._do_move(sapper_way, robots, sapper_id, move)
                    except CollisionError as exc:
                        if exc.where is Direction.NONE:
                            raise GameError("Can't find way to cross.") from None
                        collector_way.append(exc.where)
                        sapper_way.pop()
                        game.robots = robots
                        self._refresh(SLEEP_TIME, False)
                if not sapper_way:
                    self._do_grab(robots, sapper_id, grab)

        game.set_mode(ModeType.MANUAL, [])

        if self.item_surrounded and self.robot_on_item:
            raise InfoMessage(
                "There were some surrounded items & items with other "
                "robots on their cells, "
                "so they were ignored, BUT all other have been collected!"
            )
        if self.item_surrounded:
            raise InfoMessage(
                "There were some surrounded items, "
                "so they were ignored, BUT all other have been collected!"
            )
        if self.robot_on_item:
            raise InfoMessage(
                "There were items with other robots on their cells, "
                "so they were ignored, BUT all other have been collected!"
            )


class ScanMode(Mode):
    """Explores the map step by step, scanning around the active robot."""

    def __init__(self, game: Game, args: Sequence[str] | None = None) -> None:
        super().__init__(game, args)
        if args is None or len(args) < 3:
            raise GameError("Invalid steps number.")
        self.steps = to_int(args[2])

    def is_traversable(
        self,
        global_map: GameMap,
        local_map: GameMap,
        global_coords: Coords,
        local_coords: Coords,
    ) -> bool:
        """Tell whether a cell may be walked through while exploring."""
        cell = local_map.get_cell(local_coords)
        return (cell in GOOD_CELLS or cell in _UNEXPLORED) and global_map.is_on_map(
            global_coords
        )

    def find_nearest_unknown_cell(self) -> Coords:
        """Return the nearest unexplored local cell next to a walkable one.

        Returns the robot's own position when there is none.
        """
        robot, global_coords = self.game.active_robot()
        local_coords = robot.position
        global_map = self.game.global_map
        local_map = robot.local_map

        for index in range(1, local_map.szudzik_max_idx):
            offset = szudzik_pair(index)
            candidate = add_coords(local_coords, offset)
            if local_map.get_cell(candidate) not in _UNEXPLORED:
                continue
            if not global_map.is_on_map(add_coords(global_coords, offset)):
                continue
            if local_map.has_good_neighbours(candidate):
                return candidate
        return local_coords

    def _plan(self, robot: Robot, global_coords: Coords) -> list[Direction] | None:
        local_map = robot.local_map
        if self.game.scan_algorithm == "dijkstra":
            global_map = self.game.global_map
            center = sub_coords(global_coords, robot.position)

            def traversable(local_coords: Coords) -> bool:
                return self.is_traversable(
                    global_map, local_map, add_coords(center, local_coords), local_coords
                )

            try:
                return dijkstra_search(local_map, robot.position, traversable)
            except WayNotFoundError:
                return None

        nearest = self.find_nearest_unknown_cell()
        if nearest == robot.position:
            return None
        return a_star_search(local_map, robot.position, nearest)

    def send_command(self, command: Command | None) -> None:
        game = self.game
        robots: list[RobotEntry] = list(game.robots)
        robot_id = game.active_robot_id
        global_map = game.global_map

        self._announce("Running")

        move = MoveCommand()
        scan = ScanCommand()

        for _ in range(self.steps):
            robot, global_coords = game.active_robot()
            way = self._plan(robot, global_coords)
            if way is None:
                break
            # The last step leads into the unknown cell itself; scanning reveals it.
            for direction in reversed(way[1:]):
                move.direction = direction
                move.apply(robots, robot_id, global_map)
                game.robots = robots
                self._refresh(SLEEP_TIME, False)
            scan.apply(robots, robot_id, global_map)
            self._refresh(SLEEP_TIME, False)

        game.set_mode(ModeType.MANUAL, [])


_MODES: dict[ModeType, type[Mode]] = {
    ModeType.MANUAL: ManualMode,
    ModeType.SCAN: ScanMode,
    ModeType.AUTO: AutoMode,
}


def make_mode(
    mode_type: ModeType, game: Game, args: Sequence[str] | None = None
) -> Mode:
    """Create the mode of the given type for ``game``."""
    try:
        mode_class = _MODES[mode_type]
    except KeyError:
        raise ValueError(f"no mode class for {mode_type}") from None
    return mode_class(game, args)