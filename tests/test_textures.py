import pytest

from cubed.colors import pixel
from cubed.errors import CubError, map_error, texture_error
from cubed.model import GameInfo
from cubed.textures import (
    check_textures,
    find_map_position,
    get_texture_value,
    has_duplicate,
    load_textures,
    validate_header,
)

HEADER = [
    "NO ./n.png",
    "SO ./s.png",
    "WE ./w.png",
    "EA ./e.png",
    "",
    "F 220,100,0",
    "C 225,30,0",
    "",
]
MAP = ["1111", "1N01", "1111"]


def test_find_map_position_after_header():
    assert find_map_position(HEADER + MAP) == len(HEADER)


def test_find_map_position_requires_only_ones_and_blanks():
    assert find_map_position(["", "10", "\t 11"]) == 2


def test_find_map_position_missing():
    assert find_map_position(HEADER) is None


def test_get_texture_value_returns_path():
    assert get_texture_value(["NO ./a.b.png"], "NO ") == "./a.b.png"


def test_get_texture_value_missing_identifier():
    with pytest.raises(CubError) as excinfo:
        get_texture_value(["SO ./s.png"], "NO ")
    assert str(texture_error(1)) in str(excinfo.value)


def test_get_texture_value_without_extension():
    with pytest.raises(CubError) as excinfo:
        get_texture_value(["NO ./north"], "NO ")
    assert str(texture_error(2)) in str(excinfo.value)


def test_get_texture_value_wrong_extension():
    with pytest.raises(CubError) as excinfo:
        get_texture_value(["NO ./north.jpg"], "NO ")
    assert str(texture_error(3)) in str(excinfo.value)


def test_validate_header_rejects_unknown_identifier():
    lines = ["XX foo"] + HEADER + MAP
    with pytest.raises(CubError) as excinfo:
        validate_header(lines, len(HEADER) + 1)
    assert str(texture_error(5)) in str(excinfo.value)


def test_has_duplicate():
    assert has_duplicate(["F 1,2,3", "F 4,5,6"], "F ") is True
    assert has_duplicate(["F 1,2,3", "C 4,5,6"], "F ") is False


def test_has_duplicate_missing():
    with pytest.raises(CubError) as excinfo:
        has_duplicate(["C 4,5,6"], "F ")
    assert str(texture_error(1)) in str(excinfo.value)


def test_check_textures_returns_map_start():
    assert check_textures(HEADER + MAP) == len(HEADER)


def test_check_textures_without_map():
    with pytest.raises(CubError) as excinfo:
        check_textures(HEADER)
    assert str(map_error(1)) in str(excinfo.value)


def test_check_textures_duplicate():
    lines = ["NO ./other.png"] + HEADER + MAP
    with pytest.raises(CubError) as excinfo:
        check_textures(lines)
    assert str(texture_error(4)) in str(excinfo.value)


def test_check_textures_missing_identifier():
    lines = [line for line in HEADER if not line.startswith("EA ")] + MAP
    with pytest.raises(CubError) as excinfo:
        check_textures(lines)
    assert str(texture_error(1)) in str(excinfo.value)


def test_load_textures_fills_info():
    info = GameInfo()
    load_textures(HEADER + MAP, info)
    assert info.map_start == len(HEADER)
    assert info.north_texture == "./n.png"
    assert info.south_texture == "./s.png"
    assert info.west_texture == "./w.png"
    assert info.east_texture == "./e.png"
    assert info.ceiling_color == pixel(225, 30, 0, 255)
    assert info.floor_color == pixel(220, 100, 0, 255)