"""Clocked two-wire output methods for DotStar and LPD strips.

A method owns the byte stream for a strip: the pixel data plus any feature
settings. On ``update`` it wraps that data in the start and end frames the
chip family requires and hands the whole frame to a sink. The sink is any
callable taking ``bytes``, such as an SPI write or a recorder in tests.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Optional

Sink = Callable[[bytes], Any]

_MAX_PIXEL_COUNT = 0xFFFF


class BusChannel(IntEnum):
    """Output channels for platforms that select one at run time."""

    CHANNEL_0 = 0
    CHANNEL_1 = 1
    CHANNEL_2 = 2
    CHANNEL_3 = 3
    CHANNEL_4 = 4
    CHANNEL_5 = 5
    CHANNEL_6 = 6
    CHANNEL_7 = 7


class WireMethod:
    """Holds a strip's data stream and sends it, framed, to a sink."""

    def __init__(
        self,
        pixel_count: int,
        element_size: int,
        settings_size: int,
        sink: Sink,
    ) -> None:
        if not 0 <= pixel_count <= _MAX_PIXEL_COUNT:
            raise ValueError(f"pixel count out of range 0..{_MAX_PIXEL_COUNT}: {pixel_count}")
        if element_size <= 0:
            raise ValueError(f"element size must be positive: {element_size}")
        if settings_size < 0:
            raise ValueError(f"settings size must not be negative: {settings_size}")
        if not callable(sink):
            raise TypeError("sink must be callable")
        self.pixel_count = pixel_count
        self.data = bytearray(pixel_count * element_size + settings_size)
        self.settings: Optional[Any] = None
        self.initialized = False
        self._sink = sink

    @property
    def data_size(self) -> int:
        """Size of the data stream, pixels and settings together."""
        return len(self.data)

    def initialize(self) -> None:
        """Prepare the wire for sending."""
        self.initialized = True

    def is_ready_to_update(self) -> bool:
        """Clocked strips need no latch delay, so this is always true."""
        return True

    def _start_frame(self) -> bytes:
        return b""

    def _end_frame(self) -> bytes:
        return b""

    def frame(self) -> bytes:
        """The full byte sequence one update puts on the wire."""
        return self._start_frame() + bytes(self.data) + self._end_frame()

    def update(self, maintain_buffer_consistency: bool = True) -> None:
        """Send the current data, framed, to the sink."""
        self._sink(self.frame())

    def apply_settings(self, settings: Any) -> None:
        """Keep wire settings, such as a clock speed, for the sink's owner."""
        self.settings = settings


class DotStarMethod(WireMethod):
    """APA102 framing: four zero bytes, data, four zero reset bytes, end frame.

    The end frame has one bit for every two pixels, at least one byte.
    """

    def _start_frame(self) -> bytes:
        return bytes(4)

    def _end_frame(self) -> bytes:
        return bytes(4) + bytes((self.pixel_count + 15) // 16)


class Lpd6803Method(WireMethod):
    """LPD6803 framing: four zero bytes, data, one zero bit per pixel."""

    def _start_frame(self) -> bytes:
        return bytes(4)

    def _end_frame(self) -> bytes:
        return bytes((self.pixel_count + 7) // 8)


class Lpd8806Method(WireMethod):
    """LPD8806 framing: zero bytes before and 0xFF bytes after the data."""

    def _frame_size(self) -> int:
        return (self.pixel_count + 31) // 32

    def _start_frame(self) -> bytes:
        return bytes(self._frame_size())

    def _end_frame(self) -> bytes:
        return b"\xff" * self._frame_size()