"""Colour features for LPD6803 and LPD8806 driven strips.

The LPD6803 packs a pixel into two bytes: a set start bit followed by three
5-bit channels. The LPD8806 uses one byte per channel, each with its high
bit set and holding the upper seven bits of the channel value.
"""

from __future__ import annotations

from typing import Any

from .colorfeatures import ColorFeature, RgbPixel

_START_BIT_555 = 0x8000
_CHANNEL_MASK_555 = 0xF8
_LPD8806_HIGH_BIT = 0x80


def encode_555(c1: int, c2: int, c3: int) -> int:
    """Pack three 8-bit channels into a 16-bit 1-5-5-5 word, start bit set."""
    return (
        _START_BIT_555
        | ((c1 & _CHANNEL_MASK_555) << 7)
        | ((c2 & _CHANNEL_MASK_555) << 2)
        | ((c3 & _CHANNEL_MASK_555) >> 3)
    )


def decode_555(value: int) -> tuple[int, int, int]:
    """Unpack a 16-bit 1-5-5-5 word into three 8-bit channels."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"555 value out of range 0..0xFFFF: {value}")
    return (
        (value >> 7) & _CHANNEL_MASK_555,
        (value >> 2) & _CHANNEL_MASK_555,
        (value << 3) & _CHANNEL_MASK_555,
    )


class _Lpd68033Elements(ColorFeature):
    """Two bytes per pixel, big-endian 1-5-5-5 encoding."""

    pixel_size = 2
    color_type = RgbPixel

    @classmethod
    def encode(cls, color: Any) -> bytes:
        c1, c2, c3 = super().encode(color)
        return encode_555(c1, c2, c3).to_bytes(2, "big")

    @classmethod
    def _decode(cls, raw: bytes) -> Any:
        return super()._decode(bytes(decode_555(int.from_bytes(raw, "big"))))


class _Lpd88063Elements(ColorFeature):
    """Three bytes per pixel, seven bits per channel with the high bit set."""

    pixel_size = 3
    color_type = RgbPixel

    @classmethod
    def encode(cls, color: Any) -> bytes:
        return bytes((c >> 1) | _LPD8806_HIGH_BIT for c in super().encode(color))

    @classmethod
    def _decode(cls, raw: bytes) -> Any:
        return super()._decode(bytes((b << 1) & 0xFF for b in raw))


class Lpd6803BrgFeature(_Lpd68033Elements):
    """LPD6803 with channels blue, red, green."""

    channel_order = "brg"


class Lpd6803GrbFeature(_Lpd68033Elements):
    """LPD6803 with channels green, red, blue."""

    channel_order = "grb"


class Lpd6803GbrFeature(_Lpd68033Elements):
    """LPD6803 with channels green, blue, red."""

    channel_order = "gbr"


class Lpd6803RgbFeature(_Lpd68033Elements):
    """LPD6803 with channels red, green, blue."""

    channel_order = "rgb"


class Lpd8806BrgFeature(_Lpd88063Elements):
    """LPD8806 with channels blue, red, green."""

    channel_order = "brg"


class Lpd8806GrbFeature(_Lpd88063Elements):
    """LPD8806 with channels green, red, blue."""

    channel_order = "grb"