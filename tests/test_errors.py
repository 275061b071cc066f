import pytest

from cubed.errors import CubError, color_error, file_error, map_error, texture_error


@pytest.mark.parametrize(
    "factory, code, message",
    [
        (file_error, 1, "Please, put a .cub file..."),
        (file_error, 2, "Unable to open the provided file..."),
        (file_error, 3, "The .cub file is empty..."),
        (map_error, 1, "No map found in file. Make sure to put a map at the end."),
        (map_error, 2, "The map has an invalid number of players..."),
        (color_error, 2, "Invalid rgb value. Pick a number from 0 to 255..."),
        (color_error, 3, "Invalid floor and/or ceiling identifier..."),
        (texture_error, 1, "Identifiers missing from .cub file on texture(s)."),
        (texture_error, 2, "No file extension on texture(s)."),
        (texture_error, 3, "Incorrect file extension on texture(s)."),
        (texture_error, 4, "Some texture(s) and/or color(s) have the same value."),
    ],
)
def test_messages(factory, code, message):
    error = factory(code)
    assert isinstance(error, CubError)
    assert str(error) == message


def test_color_setup_message_mentions_format():
    assert "[F or C] R,G,B" in str(color_error(1))


def test_errors_can_be_raised_and_caught():
    error = map_error(2)
    assert error.exit_status == 1
    assert str(error) == "The map has an invalid number of players..."
    with pytest.raises(CubError, match="invalid number of players"):
        raise error


def test_exit_status_is_one():
    assert texture_error(5).exit_status == 1


@pytest.mark.parametrize("factory", [color_error, file_error, map_error, texture_error])
def test_unknown_code_rejected(factory):
    with pytest.raises(ValueError):
        factory(99)