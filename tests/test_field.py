import pytest

from labworks.life.field import ALPHABET, FIELD_H, FIELD_W, Field


def alive_cells(field):
    return {
        (i, j) for i in range(FIELD_W) for j in range(FIELD_H) if field.is_alive(i, j)
    }


def test_new_field_is_empty():
    assert alive_cells(Field()) == set()


def test_set_and_clear():
    field = Field()
    field.set(0, 8)
    assert field.is_alive(0, 8)
    field.clear(0, 8)
    assert not field.is_alive(0, 8)


@pytest.mark.parametrize(
    "row, col, expected",
    [(0, 0, True), (FIELD_W - 1, FIELD_H - 1, True), (FIELD_W, 0, False),
     (0, FIELD_H, False), (-1, 0, False), (0, -1, False)],
)
def test_is_cell(row, col, expected):
    assert Field().is_cell(row, col) is expected


def test_set_outside_raises():
    with pytest.raises(IndexError):
        Field().set(FIELD_W, 0)


def test_blinker_oscillates():
    field = Field()
    start = {(5, 4), (5, 5), (5, 6)}
    for cell in start:
        field.set(*cell)
    field.step()
    assert alive_cells(field) == {(4, 5), (5, 5), (6, 5)}
    field.step()
    assert alive_cells(field) == start


def test_block_is_still_life():
    field = Field()
    block = {(10, 10), (10, 11), (11, 10), (11, 11)}
    for cell in block:
        field.set(*cell)
    assert field.alive_neighbours(10, 10) == 3
    field.step()
    assert alive_cells(field) == block


def test_lonely_corner_cell_dies():
    field = Field()
    field.set(0, 0)
    field.step()
    assert alive_cells(field) == set()


def test_back_restores_previous_generation():
    field = Field()
    for cell in [(5, 4), (5, 5), (5, 6)]:
        field.set(*cell)
    field.step()
    stepped = alive_cells(field)
    field.back()
    assert alive_cells(field) == {(5, 4), (5, 5), (5, 6)}
    field.back()
    assert alive_cells(field) == stepped


def test_reset_then_back():
    field = Field()
    field.set(3, 3)
    field.reset()
    assert alive_cells(field) == set()
    field.back()
    assert alive_cells(field) == {(3, 3)}


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "field.txt"
    field = Field()
    for cell in [(1, 4), (39, 0), (20, 39)]:
        field.set(*cell)
    field.save(path)
    text = path.read_text()
    assert len(text) == FIELD_W * FIELD_H
    assert set(text) == {"0", "1"}
    other = Field()
    other.load(path)
    assert alive_cells(other) == alive_cells(field)


def test_load_ignores_whitespace(tmp_path):
    path = tmp_path / "field.txt"
    field = Field()
    field.set(2, 2)
    field.save(path)
    content = path.read_text()
    path.write_text("\n".join(content[i:i + FIELD_H] for i in range(0, len(content), FIELD_H)))
    other = Field()
    other.load(path)
    assert alive_cells(other) == {(2, 2)}


def test_load_invalid_symbol(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("2" * (FIELD_W * FIELD_H))
    with pytest.raises(ValueError):
        Field().load(path)


def test_load_short_file(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("0101")
    with pytest.raises(ValueError):
        Field().load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        Field().load(tmp_path / "missing.txt")


def test_render_layout():
    field = Field()
    field.set(0, 0)
    field.set(1, 4)
    lines = field.render().splitlines()
    assert lines[0] == "   " + "".join(" " + letter for letter in ALPHABET[:FIELD_W])
    assert len(lines) == FIELD_H + 2
    assert lines[1].startswith(" 0  @ .")
    assert lines[5].startswith(" 4  . @")
    assert field.render().count("@") == 2