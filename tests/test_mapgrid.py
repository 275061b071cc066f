import re

import pytest

from cubed.errors import CubError, map_error
from cubed.mapgrid import (
    EMPTY,
    check_exposure,
    create_int_map,
    find_player,
    flood_check,
    is_zero_exposed,
    load_map,
    warn_tabs,
)
from cubed.model import GameInfo

ROWS = ["111111", "100101", "1010N1", "111111"]


def test_is_zero_exposed_codes():
    rows = ["111", "1 1", "111"]
    assert is_zero_exposed(rows, 0, 0, 3, 3) == 0
    assert is_zero_exposed(rows, 1, 1, 3, 3) == 1
    assert is_zero_exposed(rows, -1, 0, 3, 3) == 2
    assert is_zero_exposed(["10"], 2, 0, 3, 1) == 3


def test_check_exposure_open_floor():
    rows = ["11111", "10 01", "11111"]
    with pytest.raises(CubError, match="not closed"):
        check_exposure(rows, 1, 1, 5, 3)


def test_check_exposure_invalid_identifier():
    with pytest.raises(CubError, match="non-valid identifier"):
        check_exposure(["1X1"], 1, 0, 3, 1)


def test_flood_check_prints_location(capsys):
    lines = ["11111", "10 01", "11111"]
    info = GameInfo(map_width=5, map_height=3)
    with pytest.raises(CubError, match="not closed"):
        flood_check(lines, info)
    assert "Error at: map[1][2]" in capsys.readouterr().out


def test_flood_check_rejects_unknown_char_away_from_floor():
    lines = ["1111", "1001", "1111", "11X1"]
    info = GameInfo(map_width=4, map_height=4)
    with pytest.raises(CubError, match="non-valid identifier"):
        flood_check(lines, info)


def test_create_int_map_grid():
    lines = ["1111", "1001", "1111"]
    info = GameInfo()
    create_int_map(lines, info)
    assert info.map_width == len(lines[0])
    assert info.map_height == len(lines)
    assert info.map == [[1, 1, 1, 1], [1, 0, 0, 1], [1, 1, 1, 1]]


def test_create_int_map_pads_short_rows():
    lines = ["1111", "1001", "111"]
    info = GameInfo()
    create_int_map(lines, info)
    assert all(len(row) == info.map_width for row in info.map)
    assert info.map[2][-1] == EMPTY


def test_create_int_map_rejects_content_after_map():
    info = GameInfo()
    with pytest.raises(CubError, match="let the rest"):
        create_int_map(["111", "111", "", "111"], info)


def test_find_player_replaces_marker():
    lines = ["NO ./n.png", ""] + ROWS
    info = GameInfo(map_start=2)
    find_player(lines, info)
    assert info.player_direction == "N"
    assert info.player_x == ROWS[2].index("N")
    assert info.player_y == 2
    assert "N" not in lines[4]


@pytest.mark.parametrize("rows", [["1111", "1001"], ["1N1", "1S1"]])
def test_find_player_wrong_count(rows):
    with pytest.raises(CubError, match=re.escape(str(map_error(2)))):
        find_player(list(rows), GameInfo())


def test_warn_tabs(capsys):
    assert warn_tabs(["x", "1\t1"], 1) is True
    assert "Warning" in capsys.readouterr().out
    assert warn_tabs(["a\t", "111"], 1) is False
    assert capsys.readouterr().out == ""


def test_load_map_builds_grid():
    lines = list(ROWS)
    info = GameInfo()
    load_map(lines, info)
    assert info.player_direction == "N"
    assert info.map_width == len(ROWS[0])
    assert info.map_height == len(ROWS)
    assert info.map[2] == [1, 0, 1, 0, 0, 1]
    assert lines[2] == ROWS[2].replace("N", "0")