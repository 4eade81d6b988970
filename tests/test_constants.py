from labworks.robots.constants import (
    GOOD_CELLS,
    MODE_COMMANDS,
    MOVES,
    Cell,
    CommandType,
    Direction,
)


def test_moves_round_trip_by_value_and_exclude_none():
    rebuilt = tuple(Direction(direction.value) for direction in MOVES)
    assert rebuilt == (Direction.U, Direction.D, Direction.R, Direction.L)
    assert Direction(Direction.NONE.value) not in MOVES


def test_good_cells_are_walkable_kinds_only():
    rebuilt = {Cell(cell.value) for cell in GOOD_CELLS}
    assert rebuilt == {Cell.EMPTY, Cell.APPLE, Cell.ROBOT_SELF}
    assert Cell(Cell.ROCK.value) not in GOOD_CELLS
    assert Cell(Cell.BOMB.value) not in GOOD_CELLS


def test_mode_commands_are_robot_actions():
    rebuilt = {CommandType(command.value) for command in MODE_COMMANDS}
    assert rebuilt == {CommandType.MOVE, CommandType.SCAN, CommandType.GRAB}
    assert CommandType(CommandType.SET_MODE.value) not in MODE_COMMANDS


def test_cell_lookup_by_value_is_unique():
    for cell in Cell:
        assert Cell(cell.value) is cell
    assert Cell(Cell.APPLE.value) is Cell.APPLE