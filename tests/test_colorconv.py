import pytest

from cubmap.colorconv import VisualFormat, good_color

RGB565 = (0xF800, 0x07E0, 0x001F)
RGB888 = (0xFF0000, 0x00FF00, 0x0000FF)

WIN1_SX = 242
WIN1_SY = 242
IM1_SX = 42
IM1_SY = 42


def _color_map(w, h):
    for x in range(w):
        for y in range(h):
            yield (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_from_masks_rgb565():
    fmt = VisualFormat.from_masks(*RGB565)
    assert (fmt.red_shift, fmt.red_bits) == (11, 5)
    assert (fmt.green_shift, fmt.green_bits) == (5, 6)
    assert (fmt.blue_shift, fmt.blue_bits) == (0, 5)


def test_from_masks_rgb888():
    fmt = VisualFormat.from_masks(*RGB888)
    assert fmt == VisualFormat(16, 8, 8, 8, 0, 8)


@pytest.mark.parametrize("bad", [0, -1])
def test_from_masks_rejects_empty_mask(bad):
    with pytest.raises(ValueError):
        VisualFormat.from_masks(bad, 0x00FF00, 0x0000FF)


def test_from_masks_rejects_too_wide_channel():
    with pytest.raises(ValueError):
        VisualFormat.from_masks(0x1FFFF, 0x0, 0x0)


def test_convert_rgb888_is_identity_on_color_map():
    fmt = VisualFormat.from_masks(*RGB888)
    for color in _color_map(IM1_SX, IM1_SY):
        assert fmt.convert(color) == color


def test_convert_rgb565_pure_channels():
    fmt = VisualFormat.from_masks(*RGB565)
    assert fmt.convert(0xFF0000) == 0xF800
    assert fmt.convert(0x00FF00) == 0x07E0
    assert fmt.convert(0x0000FF) == 0x001F
    assert fmt.convert(0xFFFFFF) == 0xFFFF
    assert fmt.convert(0x000000) == 0


def test_convert_rgb565_stays_within_masks():
    fmt = VisualFormat.from_masks(*RGB565)
    for color in _color_map(IM1_SX, IM1_SY):
        assert fmt.convert(color) & ~0xFFFF == 0


def test_good_color_deep_display_unchanged():
    fmt = VisualFormat.from_masks(*RGB565)
    for color in _color_map(WIN1_SX // 11, WIN1_SY // 11):
        assert good_color(color, 24, fmt) == color
        assert good_color(color, 32, fmt) == color


def test_good_color_shallow_display_converts():
    fmt = VisualFormat.from_masks(*RGB565)
    assert good_color(0xFF99FF, 16, fmt) == fmt.convert(0xFF99FF)
    assert good_color(0x00FFFF, 16, fmt) == 0x07FF