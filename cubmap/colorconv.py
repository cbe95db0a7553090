"""Conversion of 0xRRGGBB colours to pixel values of a TrueColor visual."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_CHANNEL_BITS = 16


def _shift_and_bits(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    if bits > _MAX_CHANNEL_BITS:
        raise ValueError(f"colour channel wider than {_MAX_CHANNEL_BITS} bits")
    return shift, bits


@dataclass(frozen=True)
class VisualFormat:
    """Position and width of each colour channel inside a pixel value."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    @classmethod
    def from_masks(cls, red_mask: int, green_mask: int, blue_mask: int) -> "VisualFormat":
        """Build a format from the channel masks of a visual."""
        red_shift, red_bits = _shift_and_bits(red_mask)
        green_shift, green_bits = _shift_and_bits(green_mask)
        blue_shift, blue_bits = _shift_and_bits(blue_mask)
        return cls(red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits)

    def convert(self, color: int) -> int:
        """Pack a 0xRRGGBB colour into this format's pixel layout."""
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - self.red_bits)) << self.red_shift)
            + ((green >> (16 - self.green_bits)) << self.green_shift)
            + ((blue >> (16 - self.blue_bits)) << self.blue_shift)
        )


def good_color(color: int, depth: int, fmt: VisualFormat) -> int:
    """Return the pixel value for ``color`` on a display of ``depth`` bits.

    Displays of 24 bits or more take the colour unchanged.
    """
    if depth >= 24:
        return color
    return fmt.convert(color)