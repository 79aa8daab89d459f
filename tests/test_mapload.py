import pytest

from brushwalk.mapload import TwoPoints, find_any, load_map, make_wall_set, split
from brushwalk.plane import make_plane

WALL_TEX = object()


def _brush(front: str, top: str) -> list[str]:
    return [
        "// brush 0",
        "{",
        "( 0 0 0 ) ( 0 1 0 ) ( 0 0 1 ) skipped 0 0 0 1 1",
        front,
        "( 0 0 0 ) ( 0 1 0 ) ( 0 0 1 ) skipped 0 0 0 1 1",
        top,
        "}",
    ]


FRONT = "( 2 4 10 ) ( 6 8 12 ) ( 1 3 6 ) wall 0 0 0 2 3"
TOP = "( 2 4 10 ) ( 6 8 12 ) ( 1 3 6 ) wall 0 0 0 0.5 0.25"


def _write(tmp_path, lines):
    path = tmp_path / "test.map"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_find_any_returns_earliest_position():
    assert find_any("ab c\td", [" ", "\t"]) == 2
    assert find_any("ab\tc d", [" ", "\t"]) == 2


def test_find_any_returns_none_when_absent():
    assert find_any("abc", [" ", "\n"]) is None


def test_split_on_each_delimiter():
    assert split("a b\tc\nd\be") == ["a", "b", "c", "d", "e"]


def test_split_keeps_empty_fields_between_repeated_delimiters():
    assert split("a  b") == ["a", "", "b"]


def test_split_empty_string():
    assert split("") == [""]


def test_two_points_unpacks_in_order():
    assert tuple(TwoPoints(1.0, 2.0, 3.0, 4.0)) == (1.0, 2.0, 3.0, 4.0)


def test_load_map_missing_file_gives_no_planes(tmp_path):
    assert load_map(tmp_path / "absent.map", WALL_TEX) == []


def test_load_map_ignores_lines_without_brushes(tmp_path):
    path = _write(tmp_path, ["// entity 0", "{", '"classname" "worldspawn"', "}"])
    assert load_map(path, WALL_TEX) == []


def test_load_map_front_face_becomes_wall(tmp_path):
    path = _write(tmp_path, ["// entity 0", "{", *_brush(FRONT, TOP), "}"])
    planes = load_map(path, WALL_TEX)
    assert planes[0] == make_plane(-1.0, 2.0, -3.0, 4.0, WALL_TEX, 3.0, 7.0, 2, 3)
    assert not planes[0].is_floor()


def test_load_map_top_face_becomes_floor(tmp_path):
    path = _write(tmp_path, _brush(FRONT, TOP))
    planes = load_map(path, WALL_TEX)
    floor = planes[1]
    assert floor.is_floor()
    assert floor.texture is WALL_TEX
    heights = {floor.vertex(i)[1] for i in range(6)}
    assert len(heights) == 1


def test_load_map_two_planes_per_brush(tmp_path):
    path = _write(tmp_path, _brush(FRONT, TOP) + _brush(FRONT, TOP))
    planes = load_map(path, WALL_TEX)
    assert len(planes) == 4
    assert [plane.is_floor() for plane in planes] == [False, True, False, True]


def test_load_map_truncated_brush_raises(tmp_path):
    path = _write(tmp_path, ["// brush 0", "{", "( 0 0 0 )"])
    with pytest.raises(ValueError):
        load_map(path, WALL_TEX)


def test_load_map_non_numeric_field_raises(tmp_path):
    bad = FRONT.replace("( 2 4 10 )", "( x 4 10 )")
    path = _write(tmp_path, _brush(bad, TOP))
    with pytest.raises(ValueError):
        load_map(path, WALL_TEX)


def test_make_wall_set_missing_file_gives_no_walls(tmp_path):
    assert make_wall_set(tmp_path / "absent.txt") == []


def test_make_wall_set_swaps_ends(tmp_path):
    path = tmp_path / "walls.txt"
    path.write_text("WALL 1 Pos 5 10 15 20\n", encoding="utf-8")
    (wall,) = make_wall_set(path)
    assert wall.x1 == pytest.approx(3.0)
    assert wall.z1 == pytest.approx(4.0)
    assert wall.x2 == pytest.approx(1.0)
    assert wall.z2 == pytest.approx(2.0)


def test_make_wall_set_skips_incomplete_lines_and_counts_all(tmp_path, capsys):
    path = tmp_path / "walls.txt"
    path.write_text(
        "SECTOR 1\n"
        "WALL 1 Pos 5 10 15 20\n"
        "WALL 2 no position here\n"
        "WALL 3 Pos 5 10\n",
        encoding="utf-8",
    )
    walls = make_wall_set(path)
    assert len(walls) == 1
    out = capsys.readouterr().out
    assert "Wall Count: 3" in out
    assert "SECTOR 1" in out