"""Pixel colour types and the features that lay them out as wire bytes."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar


def _check_channels(color: Any) -> None:
    for field in fields(color):
        value = getattr(color, field.name)
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"channel {field.name} must be an int, got {value!r}")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"channel {field.name} out of range 0..255: {value}")


@dataclass(frozen=True)
class RgbPixel:
    """An 8-bit-per-channel red, green, blue colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        _check_channels(self)


@dataclass(frozen=True)
class RgbwPixel:
    """An 8-bit-per-channel red, green, blue, white colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    w: int = 0

    def __post_init__(self) -> None:
        _check_channels(self)


class ColorFeature:
    """Describes how one pixel's colour is stored in a byte buffer.

    Subclasses set the pixel size, the colour type and the order in which
    the channels are written.
    """

    pixel_size: ClassVar[int] = 3
    settings_size: ClassVar[int] = 0
    color_type: ClassVar[type] = RgbPixel
    channel_order: ClassVar[str] = "rgb"

    @classmethod
    def pixel_offset(cls, index: int) -> int:
        """Byte offset of the pixel at ``index``."""
        if index < 0:
            raise IndexError(f"negative pixel index: {index}")
        return index * cls.pixel_size

    @classmethod
    def _check_span(cls, buffer: Any, offset: int, length: int) -> None:
        if offset < 0 or offset + length > len(buffer):
            raise IndexError(
                f"span {offset}..{offset + length} outside buffer of {len(buffer)} bytes"
            )

    @classmethod
    def replicate_pixel(cls, buffer: Any, offset: int, pixel: bytes, count: int) -> None:
        """Write the encoded ``pixel`` ``count`` times starting at ``offset``."""
        pixel = bytes(pixel)
        if len(pixel) != cls.pixel_size:
            raise ValueError(f"pixel must be {cls.pixel_size} bytes, got {len(pixel)}")
        length = count * cls.pixel_size
        cls._check_span(buffer, offset, length)
        buffer[offset:offset + length] = pixel * count

    @classmethod
    def move_pixels(
        cls, dest: Any, dest_offset: int, src: Any, src_offset: int, count: int
    ) -> None:
        """Copy ``count`` pixels; overlapping regions of one buffer are safe."""
        length = count * cls.pixel_size
        cls._check_span(src, src_offset, length)
        cls._check_span(dest, dest_offset, length)
        dest[dest_offset:dest_offset + length] = bytes(src[src_offset:src_offset + length])

    @classmethod
    def pixels(cls, data: Any) -> Any:
        """The part of the data stream that holds pixel bytes."""
        if cls.settings_size == 0:
            return data
        return memoryview(data)[cls.settings_size:]

    @classmethod
    def apply_settings(cls, data: Any, settings: Any) -> None:
        """Write the raw settings bytes at the head of the data stream.

        Features without settings accept ``None`` (or empty bytes) and leave
        the data untouched.
        """
        if settings is None:
            if cls.settings_size:
                raise ValueError(f"{cls.__name__} needs {cls.settings_size} settings bytes")
            return
        raw = bytes(settings)
        if len(raw) != cls.settings_size:
            raise ValueError(
                f"{cls.__name__} settings must be {cls.settings_size} bytes, got {len(raw)}"
            )
        cls._check_span(data, 0, cls.settings_size)
        data[0:cls.settings_size] = raw

    @classmethod
    def encode(cls, color: Any) -> bytes:
        """Wire bytes for one colour."""
        if not isinstance(color, cls.color_type):
            raise TypeError(
                f"{cls.__name__} expects {cls.color_type.__name__}, got {type(color).__name__}"
            )
        return bytes(getattr(color, channel) for channel in cls.channel_order)

    @classmethod
    def _decode(cls, raw: bytes) -> Any:
        return cls.color_type(**dict(zip(cls.channel_order, raw)))

    @classmethod
    def apply_pixel_color(cls, buffer: Any, index: int, color: Any) -> None:
        """Store ``color`` as the pixel at ``index``."""
        offset = cls.pixel_offset(index)
        encoded = cls.encode(color)
        cls._check_span(buffer, offset, cls.pixel_size)
        buffer[offset:offset + cls.pixel_size] = encoded

    @classmethod
    def retrieve_pixel_color(cls, buffer: Any, index: int) -> Any:
        """Read back the colour of the pixel at ``index``."""
        offset = cls.pixel_offset(index)
        cls._check_span(buffer, offset, cls.pixel_size)
        return cls._decode(bytes(buffer[offset:offset + cls.pixel_size]))


class _Neo3Elements(ColorFeature):
    pixel_size = 3
    color_type = RgbPixel


class _Neo4Elements(ColorFeature):
    pixel_size = 4
    color_type = RgbwPixel


class NeoGrbFeature(_Neo3Elements):
    """Three bytes per pixel: green, red, blue."""

    channel_order = "grb"


class NeoGrbwFeature(_Neo4Elements):
    """Four bytes per pixel: green, red, blue, white."""

    channel_order = "grbw"


class NeoRgbwFeature(_Neo4Elements):
    """Four bytes per pixel: red, green, blue, white."""

    channel_order = "rgbw"


class NeoRgbFeature(_Neo3Elements):
    """Three bytes per pixel: red, green, blue."""

    channel_order = "rgb"


class NeoBrgFeature(_Neo3Elements):
    """Three bytes per pixel: blue, red, green."""

    channel_order = "brg"


class NeoRbgFeature(_Neo3Elements):
    """Three bytes per pixel: red, blue, green."""

    channel_order = "rbg"