"""Robots that explore the map: collectors gather apples, sappers defuse bombs."""

from __future__ import annotations

from abc import ABC, abstractmethod

from labworks.robots.constants import Cell
from labworks.robots.gamemap import GameMap

Coords = tuple[int, int]


class Robot(ABC):
    """A robot with its own signed local map and a position on it."""

    def __init__(self, robot_id: int) -> None:
        self.local_map = GameMap(signed=True)
        self.robot_id = robot_id
        self.position: Coords = (0, 0)
        self.items_count = 0

    def move_to(self, new_position: Coords) -> None:
        """Step to an adjacent cell of the local map; other targets are ignored."""
        dx = abs(self.position[0] - new_position[0])
        dy = abs(self.position[1] - new_position[1])
        if dx + dy == 1:
            self.position = new_position
            self.local_map.set_cell(new_position, self.own_types()[0])

    @abstractmethod
    def own_types(self) -> tuple[Cell, Cell]:
        """Cell kinds marking this robot on its own map and on others'."""

    @abstractmethod
    def item_type(self) -> Cell:
        """The kind of item this robot picks up."""

    @abstractmethod
    def good_cells(self) -> tuple[Cell, ...]:
        """Cell kinds this robot may step on."""

    @abstractmethod
    def on_grab(self) -> None:
        """Record one picked-up item."""


class Collector(Robot):
    """Collects apples."""

    def __init__(self, robot_id: int) -> None:
        super().__init__(robot_id)
        self.local_map.set_data([Cell.ROBOT_SELF], 1, 1)

    def own_types(self) -> tuple[Cell, Cell]:
        return Cell.ROBOT_SELF, Cell.ROBOT_OTHER

    def item_type(self) -> Cell:
        return Cell.APPLE

    def good_cells(self) -> tuple[Cell, ...]:
        return Cell.EMPTY, Cell.APPLE, Cell.UNKNOWN

    def on_grab(self) -> None:
        self.items_count += 1


class Sapper(Robot):
    """Defuses bombs and may push collectors out of its way."""

    def __init__(self, robot_id: int) -> None:
        super().__init__(robot_id)
        self.local_map.set_data([Cell.SAPPER_SELF], 1, 1)

    def own_types(self) -> tuple[Cell, Cell]:
        return Cell.SAPPER_SELF, Cell.SAPPER_OTHER

    def item_type(self) -> Cell:
        return Cell.BOMB

    def good_cells(self) -> tuple[Cell, ...]:
        return Cell.EMPTY, Cell.APPLE, Cell.BOMB, Cell.UNKNOWN

    def on_grab(self) -> None:
        self.items_count += 1