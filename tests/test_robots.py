import pytest

from labworks.robots.constants import Cell
from labworks.robots.robots import Collector, Robot, Sapper


def test_robot_is_abstract():
    with pytest.raises(TypeError):
        Robot(0)


def test_collector_starts_on_own_cell():
    collector = Collector(3)
    assert collector.robot_id == 3
    assert collector.position == (0, 0)
    assert collector.local_map.size == (1, 1)
    assert collector.local_map.get_cell((0, 0)) is Cell.ROBOT_SELF
    assert collector.items_count == 0


def test_collector_kinds():
    collector = Collector(0)
    assert collector.own_types() == (Cell.ROBOT_SELF, Cell.ROBOT_OTHER)
    assert collector.item_type() is Cell.APPLE
    assert Cell.BOMB not in collector.good_cells()
    assert Cell.APPLE in collector.good_cells()


def test_sapper_kinds():
    sapper = Sapper(1)
    assert sapper.own_types() == (Cell.SAPPER_SELF, Cell.SAPPER_OTHER)
    assert sapper.item_type() is Cell.BOMB
    assert Cell.BOMB in sapper.good_cells()
    assert sapper.local_map.get_cell((0, 0)) is Cell.SAPPER_SELF


def test_move_to_adjacent_cell_marks_local_map():
    collector = Collector(0)
    collector.move_to((1, 0))
    assert collector.position == (1, 0)
    assert collector.local_map.get_cell((1, 0)) is Cell.ROBOT_SELF
    assert collector.local_map.researched == 2


@pytest.mark.parametrize("target", [(2, 0), (1, 1), (0, 0), (-3, 5)])
def test_move_to_non_adjacent_is_ignored(target):
    sapper = Sapper(0)
    sapper.move_to(target)
    assert sapper.position == (0, 0)
    assert sapper.local_map.size == (1, 1)


def test_on_grab_counts_items():
    collector = Collector(0)
    sapper = Sapper(1)
    collector.on_grab()
    collector.on_grab()
    sapper.on_grab()
    assert collector.items_count == 2
    assert sapper.items_count == 1


def test_robots_have_separate_maps():
    first, second = Collector(0), Collector(1)
    first.move_to((0, 1))
    assert second.local_map.get_cell((0, 1)) is Cell.NONE
    assert first.local_map.get_cell((0, 1)) is Cell.ROBOT_SELF