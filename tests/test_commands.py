import pytest

from labworks.robots.commands import (
    GrabCommand,
    MoveCommand,
    ScanCommand,
    SetModeCommand,
    SetRobotCommand,
    ToggleSapperCommand,
    make_command,
)
from labworks.robots.constants import Cell, CommandType, Direction, ModeType
from labworks.robots.convert import diff_coords, to_cell_type
from labworks.robots.errors import CollisionError, GameError, GameOver
from labworks.robots.gamemap import GameMap
from labworks.robots.robots import Collector, Sapper
from labworks.robots.utils import add_coords, sub_coords


def make_map(*rows):
    game_map = GameMap()
    cells = [to_cell_type(ch) for row in rows for ch in row]
    game_map.set_data(cells, len(rows[0]), len(rows))
    return game_map


class FakeGame:
    def __init__(self, global_map, robots):
        self.global_map = global_map
        self.robots = robots
        self.active_robot_id = 0
        self.sapper_on = False
        self.mode_calls = []

    def active_robot(self):
        return self.robots[self.active_robot_id]

    def set_mode(self, mode_type, args=()):
        self.mode_calls.append((mode_type, list(args)))


def test_make_command_builds_working_move():
    cmd = make_command(CommandType.MOVE)
    cmd.validate(["move", "l"])
    assert cmd.direction is Direction.L


def test_make_command_rejects_quit():
    with pytest.raises(ValueError):
        make_command(CommandType.QUIT)


@pytest.mark.parametrize(
    "cmd, argv",
    [
        (MoveCommand(), ["move"]),
        (GrabCommand(), ["grab", "x"]),
        (ScanCommand(), ["scan", "x"]),
        (SetRobotCommand(), ["robot"]),
        (ToggleSapperCommand(), ["sapper"]),
        (SetModeCommand(), ["set_mode"]),
        (SetModeCommand(), ["set_mode", "manual", "3"]),
    ],
)
def test_wrong_argument_count(cmd, argv):
    with pytest.raises(GameError, match="Invalid arguments number."):
        cmd.validate(argv)


def test_move_rejects_bad_direction():
    with pytest.raises(GameError, match=r"Invalid argument\(s\)."):
        MoveCommand().validate(["move", "x"])


def test_set_mode_validation():
    cmd = SetModeCommand()
    with pytest.raises(GameError, match="Invalid mode name."):
        cmd.validate(["set_mode", "fly"])
    with pytest.raises(GameError, match="Invalid steps number."):
        cmd.validate(["set_mode", "scan", "many"])
    with pytest.raises(GameError, match="Invalid steps number."):
        cmd.validate(["set_mode", "scan"])


def test_set_mode_execute_calls_game():
    game = FakeGame(make_map("..."), [])
    cmd = SetModeCommand()
    cmd.validate(["set_mode", "Scan", "5"])
    cmd.execute(game)
    assert game.mode_calls == [(ModeType.SCAN, ["set_mode", "scan", "5"])]


def test_set_robot_selects_collector():
    robots = [(Collector(0), (0, 0)), (Collector(1), (2, 0)), (Sapper(2), (-1, -1))]
    game = FakeGame(make_map("..."), robots)
    cmd = SetRobotCommand()
    cmd.validate(["robot", "1"])
    cmd.execute(game)
    assert game.active_robot_id == 1
    cmd.validate(["robot", "2"])
    with pytest.raises(GameError, match="There is no collector with this id."):
        cmd.execute(game)
    with pytest.raises(GameError):
        cmd.validate(["robot", "x"])


def test_toggle_sapper_validation():
    cmd = ToggleSapperCommand()
    cmd.validate(["sapper", "ON"])
    assert cmd.action is True
    cmd.validate(["sapper", "off"])
    assert cmd.action is False
    with pytest.raises(GameError):
        cmd.validate(["sapper", "maybe"])


def test_toggle_sapper_on_and_off():
    global_map = make_map("...", "...", "...")
    collector = Collector(0)
    sapper = Sapper(1)
    robots = [(collector, (1, 1)), (sapper, (-1, -1))]
    ScanCommand().apply(robots, 0, global_map)
    game = FakeGame(global_map, robots)

    on = ToggleSapperCommand()
    on.validate(["sapper", "on"])
    on.execute(game)
    sapper_coords = game.robots[-1][1]
    assert game.sapper_on is True
    assert sapper_coords in GameMap.cell_neighbours((1, 1))
    local = sub_coords(sapper_coords, (1, 1))
    assert collector.local_map.get_cell(local) is Cell.SAPPER_OTHER

    off = ToggleSapperCommand()
    off.validate(["sapper", "off"])
    off.execute(game)
    assert game.sapper_on is False
    assert game.robots[-1][1] == (-1, -1)
    assert collector.local_map.get_cell(local) is Cell.EMPTY


def test_toggle_same_state_changes_nothing():
    robots = [(Collector(0), (0, 0)), (Sapper(1), (-1, -1))]
    game = FakeGame(make_map("..."), robots)
    cmd = ToggleSapperCommand()
    cmd.validate(["sapper", "off"])
    cmd.execute(game)
    assert game.robots[-1][1] == (-1, -1)
    assert game.sapper_on is False


def test_move_updates_coords_and_local_map():
    global_map = make_map("...")
    collector = Collector(0)
    robots = [(collector, (0, 0))]
    cmd = MoveCommand()
    cmd.validate(["move", "r"])
    cmd.apply(robots, 0, global_map)
    assert robots[0][1] == add_coords((0, 0), diff_coords(Direction.R))
    assert collector.position == diff_coords(Direction.R)
    assert collector.local_map.get_cell(collector.position) is Cell.ROBOT_SELF
    assert collector.local_map.get_cell((0, 0)) is Cell.EMPTY


@pytest.mark.parametrize(
    "row, error, message",
    [
        (".#", GameError, "There is a rock on this cell!"),
        (".B", GameOver, "You exploded on the bomb..."),
    ],
)
def test_move_blocked_cells(row, error, message):
    robots = [(Collector(0), (0, 0))]
    with pytest.raises(error, match=message):
        MoveCommand(Direction.R).apply(robots, 0, make_map(row))
    assert robots[0][1] == (0, 0)


def test_move_off_map():
    robots = [(Collector(0), (0, 0))]
    with pytest.raises(GameError, match="You can't move there - map end."):
        MoveCommand(Direction.L).apply(robots, 0, make_map("..."))


def test_two_collectors_collide():
    robots = [(Collector(0), (0, 0)), (Collector(1), (1, 0))]
    with pytest.raises(CollisionError) as info:
        MoveCommand(Direction.R).apply(robots, 0, make_map("..."))
    assert info.value.where is Direction.NONE
    assert str(info.value) == "There is other collector on this cell!"


def test_collector_cannot_push_sapper():
    robots = [(Collector(0), (0, 0)), (Sapper(1), (1, 0))]
    with pytest.raises(CollisionError) as info:
        MoveCommand(Direction.R).apply(robots, 0, make_map("..."))
    assert info.value.where is Direction.NONE
    assert str(info.value) == "Collector can't push Sapper c:"


def test_sapper_pushes_collector():
    global_map = make_map("...", "...", "...")
    collector = Collector(0)
    sapper = Sapper(1)
    robots = [(collector, (1, 1)), (sapper, (0, 1))]
    with pytest.raises(CollisionError) as info:
        MoveCommand(Direction.R).apply(robots, 1, global_map)
    pushed_to = robots[0][1]
    assert robots[1][1] == (1, 1)
    assert pushed_to in GameMap.cell_neighbours((1, 1))
    assert pushed_to != (0, 1)
    assert add_coords(pushed_to, diff_coords(info.value.where)) == (1, 1)
    assert collector.local_map.get_cell((0, 0)) is Cell.SAPPER_OTHER


def test_sapper_push_without_room():
    robots = [(Collector(0), (1, 0)), (Sapper(1), (0, 0))]
    with pytest.raises(CollisionError) as info:
        MoveCommand(Direction.R).apply(robots, 1, make_map("..#"))
    assert info.value.where is Direction.NONE
    assert robots[0][1] == (1, 0)


def test_grab_apple():
    global_map = make_map("A.")
    collector = Collector(0)
    removed = []
    GrabCommand().apply(
        [(collector, (0, 0))], 0, global_map, lambda c, t: removed.append((c, t))
    )
    assert collector.items_count == 1
    assert global_map.get_cell((0, 0)) is Cell.EMPTY
    assert removed == [((0, 0), Cell.APPLE)]


def test_grab_errors():
    with pytest.raises(GameError, match="nothing to grab"):
        GrabCommand().apply([(Collector(0), (1, 0))], 0, make_map("A."))
    with pytest.raises(GameError, match="You can't grab this item."):
        GrabCommand().apply([(Collector(0), (0, 0))], 0, make_map("B."))


def test_scan_reveals_neighbours():
    global_map = make_map(".#.", "...", "...")
    collector = Collector(0)
    robots = [(collector, (1, 1)), (Collector(1), (2, 1))]
    before = collector.local_map.researched
    ScanCommand().apply(robots, 0, global_map)
    local = collector.local_map
    assert local.get_cell(diff_coords(Direction.U)) is Cell.ROCK
    assert local.get_cell(diff_coords(Direction.R)) is Cell.ROBOT_OTHER
    assert local.get_cell(diff_coords(Direction.D)) is Cell.EMPTY
    assert local.get_cell(diff_coords(Direction.L)) is Cell.EMPTY
    assert local.researched > before