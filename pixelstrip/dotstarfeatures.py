"""Colour features for APA102-style ("DotStar") strips.

Every pixel takes four bytes on the wire. The first byte starts with the
bits ``111`` and holds a 5-bit global brightness; the other three hold the
colour channels in the order the chip expects.
"""

from __future__ import annotations

from typing import Any

from .colorfeatures import ColorFeature, RgbPixel, RgbwPixel

_HEADER_BITS = 0xE0
_BRIGHTNESS_MASK = 0x1F
_MAX_BRIGHTNESS = 31
_FULL_BRIGHTNESS_HEADER = 0xFF


class _DotStar3Elements(ColorFeature):
    """RGB colour; the header byte is always full brightness."""

    pixel_size = 4
    color_type = RgbPixel

    @classmethod
    def encode(cls, color: Any) -> bytes:
        return bytes([_FULL_BRIGHTNESS_HEADER]) + super().encode(color)

    @classmethod
    def _decode(cls, raw: bytes) -> Any:
        # The header byte carries no colour information.
        return super()._decode(raw[1:])


class _DotStar4Elements(ColorFeature):
    """RGBW colour; the white channel is the 5-bit brightness in the header."""

    pixel_size = 4
    color_type = RgbwPixel

    @classmethod
    def encode(cls, color: Any) -> bytes:
        channels = super().encode(color)
        header = _HEADER_BITS | min(color.w, _MAX_BRIGHTNESS)
        return bytes([header]) + channels

    @classmethod
    def _decode(cls, raw: bytes) -> Any:
        values = dict(zip(cls.channel_order, raw[1:]))
        return cls.color_type(w=raw[0] & _BRIGHTNESS_MASK, **values)


class DotStarBgrFeature(_DotStar3Elements):
    """Header, then blue, green, red."""

    channel_order = "bgr"


class DotStarLbgrFeature(_DotStar4Elements):
    """Brightness header, then blue, green, red."""

    channel_order = "bgr"


class DotStarGrbFeature(_DotStar3Elements):
    """Header, then green, red, blue."""

    channel_order = "grb"


class DotStarLgrbFeature(_DotStar4Elements):
    """Brightness header, then green, red, blue."""

    channel_order = "grb"


class DotStarRgbFeature(_DotStar3Elements):
    """Header, then red, green, blue."""

    channel_order = "rgb"


class DotStarLrgbFeature(_DotStar4Elements):
    """Brightness header, then red, green, blue."""

    channel_order = "rgb"


class DotStarRbgFeature(_DotStar3Elements):
    """Header, then red, blue, green."""

    channel_order = "rbg"


class DotStarLrbgFeature(_DotStar4Elements):
    """Brightness header, then red, blue, green."""

    channel_order = "rbg"


class DotStarGbrFeature(_DotStar3Elements):
    """Header, then green, blue, red."""

    channel_order = "gbr"


class DotStarLgbrFeature(_DotStar4Elements):
    """Brightness header, then green, blue, red."""

    channel_order = "gbr"


class DotStarBrgFeature(_DotStar3Elements):
    """Header, then blue, red, green."""

    channel_order = "brg"


class DotStarLbrgFeature(_DotStar4Elements):
    """Brightness header, then blue, red, green."""

    channel_order = "brg"