"""Exceptions raised by the robots game."""

from __future__ import annotations

from labworks.robots.constants import Direction


class RobotsError(Exception):
    """Base of every game exception; ``str()`` gives its message."""


class GameError(RobotsError):
    """A command or action failed."""


class InfoMessage(RobotsError):
    """An action finished with something worth telling the player."""


class CollisionError(GameError):
    """A robot ran into another one."""

    def __init__(self, message: str, where: Direction) -> None:
        super().__init__(message)
        self.where = where


class WayNotFoundError(GameError):
    """No path leads to the requested cell."""


class GameOver(RobotsError):
    """The game has ended."""