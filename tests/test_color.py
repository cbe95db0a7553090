import pytest

from cubmap.color import parse_color


def _channels(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def test_parses_components():
    assert _channels(parse_color("220,100,0")) == (220, 100, 0)


def test_leading_and_trailing_spaces():
    assert _channels(parse_color("   225,30,7   ")) == (225, 30, 7)


def test_extremes():
    assert parse_color("0,0,0") == 0
    assert parse_color("255,255,255") == 0xFFFFFF


@pytest.mark.parametrize(
    "text",
    [
        "256,0,0",
        "0,0,300",
        "-1,0,0",
        "1,2",
        "1,2,",
        ",1,2",
        "1 ,2,3",
        "1,2,3x",
        "1,2,3\t",
        "a,b,c",
        "",
    ],
)
def test_invalid_colours(text):
    with pytest.raises(ValueError):
        parse_color(text)