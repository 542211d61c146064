"""In-memory pixel images and colour conversion for a display visual."""

from __future__ import annotations

from typing import Tuple

_SUPPORTED_BPP = (8, 16, 24, 32)


def _mask_shift(mask: int) -> Tuple[int, int]:
    if mask <= 0:
        raise ValueError("colour mask must be a positive integer")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = (~mask & (mask + 1)).bit_length() - 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Tuple[int, ...]:
    """Return (shift, bits) for red, green and blue, flattened into six numbers."""
    return tuple(
        value
        for mask in (red_mask, green_mask, blue_mask)
        for value in _mask_shift(mask)
    )


class Visual:
    """A true-colour visual: a depth and the bit masks of its channels."""

    def __init__(
        self,
        depth: int = 24,
        red_mask: int = 0xFF0000,
        green_mask: int = 0x00FF00,
        blue_mask: int = 0x0000FF,
    ) -> None:
        self.depth = depth
        self.red_mask = red_mask
        self.green_mask = green_mask
        self.blue_mask = blue_mask
        self.shifts = rgb_shifts(red_mask, green_mask, blue_mask)

    def color_value(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to a pixel value for this visual."""
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        r_shift, r_bits, g_shift, g_bits, b_shift, b_bits = self.shifts
        return (
            ((red >> (16 - r_bits)) << r_shift)
            + ((green >> (16 - g_bits)) << g_shift)
            + ((blue >> (16 - b_bits)) << b_shift)
        )


class Image:
    """A pixel buffer laid out in rows of size_line bytes."""

    def __init__(
        self,
        width: int,
        height: int,
        bpp: int = 32,
        big_endian: bool = False,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        if bpp not in _SUPPORTED_BPP:
            raise ValueError(f"unsupported bits per pixel: {bpp}")
        self.width = width
        self.height = height
        self.bpp = bpp
        self.big_endian = big_endian
        self.data = bytearray(self.size_line * height)

    @property
    def size_line(self) -> int:
        """Bytes per row, padded to a multiple of 32 bits."""
        return (self.width * self.bpp + 31) // 32 * 4

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return y * self.size_line + x * (self.bpp // 8)

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store color at (x, y), keeping as many low bytes as a pixel holds."""
        opp = self.bpp // 8
        offset = self._offset(x, y)
        value = color & ((1 << self.bpp) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        opp = self.bpp // 8
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + opp], self._byteorder)


def new_image(width: int, height: int) -> Image:
    """Return a zeroed 32-bit little-endian image."""
    return Image(width, height)