import pytest

from cubmap.config import Textures, parse_file, parse_lines, parse_text, parse_texture
from cubmap.errors import ParseError
from cubmap.gamemap import Player

SCENE = """NO ./north.xpm
SO ./south.xpm
WE ./west.xpm
EA ./east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
"""


def _channels(color):
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def test_parse_texture():
    assert parse_texture(" ./path/n.xpm") == "./path/n.xpm"
    assert parse_texture("X   ./p") == "./p"
    assert parse_texture("") == ""


def test_parse_full_scene():
    config = parse_text(SCENE)
    assert config.textures == Textures("./north.xpm", "./south.xpm", "./west.xpm", "./east.xpm")
    assert _channels(config.floor_color) == (220, 100, 0)
    assert _channels(config.ceiling_color) == (225, 30, 0)
    assert config.game_map.width == 6
    assert config.game_map.height == 5
    assert config.player == Player(4, 3, "N")


def test_missing_settings_keep_defaults():
    config = parse_lines(["F1,2,3", "111", "1S1", "111"])
    assert config.textures == Textures()
    assert _channels(config.floor_color) == (1, 2, 3)
    assert config.ceiling_color == 0


def test_later_colour_wins():
    config = parse_lines(["C 1,1,1", "C 0,0,0", "111", "1E1", "111"])
    assert config.ceiling_color == 0


def test_no_map():
    with pytest.raises(ParseError) as info:
        parse_text("NO ./a\nF 1,2,3\n")
    assert info.value.message == "No map"


def test_map_errors_propagate():
    with pytest.raises(ParseError) as info:
        parse_text("F 1,2,3\n111\n1N0\n111\n")
    assert info.value.message == "Map not closed"


def test_parse_file(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text(SCENE)
    config = parse_file(path)
    assert config == parse_text(SCENE)


def test_parse_missing_file(tmp_path):
    with pytest.raises(ParseError) as info:
        parse_file(tmp_path / "absent.cub")
    assert info.value.message == "File read error"