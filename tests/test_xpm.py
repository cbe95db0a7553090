import pytest

from cubmap.xpm import (
    TRANSPARENT,
    XpmImage,
    parse_xpm_lines,
    parse_xpm_text,
    read_xpm,
    strip_comments,
    text_to_rgb,
)

XPM_FILE = """/* XPM */
static char *img[] = {
/* columns rows colors chars-per-pixel */
"2 1 2 1",
"x c red",
"y c blue",
"xy"
};
"""


def test_text_to_rgb_hex_value():
    assert text_to_rgb("#ff8000", None) == 0xFF8000


def test_text_to_rgb_named_colors():
    assert text_to_rgb("red", None) == 0xFF0000
    assert text_to_rgb("ghost", "white") == 0xF8F8FF


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_text_to_rgb_hex_without_digits():
    assert text_to_rgb("#", None) == 0


def test_parse_lines_basic_image():
    image = parse_xpm_lines(["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == TRANSPARENT
    assert image.pixel(0, 1) == TRANSPARENT
    assert image.pixel(1, 1) == 0xFF0000


def test_parse_lines_multiword_colour_name():
    image = parse_xpm_lines(["1 1 1 1", ". c ghost white", "."])
    assert image.pixel(0, 0) == 0xF8F8FF


def test_parse_lines_short_codes_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c #00FF00", "a c #0000FF", "a"])
    assert image.pixel(0, 0) == 0x0000FF


def test_parse_lines_long_codes_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c #00FF00", "abc c #0000FF", "abc"])
    assert image.pixel(0, 0) == 0x00FF00


def test_parse_lines_unknown_code_is_black():
    image = parse_xpm_lines(["1 1 1 1", "a c #00FF00", "z"])
    assert image.pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_parse_lines_errors(lines):
    with pytest.raises(ValueError):
        parse_xpm_lines(lines)


def test_pixel_out_of_range():
    image = parse_xpm_lines(["1 1 1 1", "a c red", "a"])
    with pytest.raises(IndexError):
        image.pixel(1, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_strip_comments_keeps_quoted_text_and_length():
    text = '"a/*b" /* x */'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.strip() == '"a/*b"'


def test_strip_comments_line_comment():
    text = "x // c\ny"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.split() == ["x", "y"]


def test_parse_text_with_comments():
    image = parse_xpm_text(XPM_FILE)
    assert image == XpmImage(2, 1, ((0xFF0000, 0x0000FF),))


def test_read_xpm_from_file(tmp_path):
    path = tmp_path / "image.xpm"
    path.write_text(XPM_FILE)
    assert read_xpm(path) == parse_xpm_text(XPM_FILE)


def test_read_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_xpm(tmp_path / "missing.xpm")