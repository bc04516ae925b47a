"""A strip of pixels held in a method's data stream and shown on demand."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .colorfeatures import ColorFeature

_MAX_PIXEL_COUNT = 0xFFFF

MethodFactory = Callable[[int, int, int], Any]


class PixelBus:
    """Pixel colours for one strip, encoded by a feature and sent by a method.

    ``method_factory`` is called with the pixel count, the feature's pixel
    size and its settings size, and returns the output method. The method
    must provide ``data``, ``data_size``, ``initialize``,
    ``is_ready_to_update``, ``update`` and ``apply_settings``.
    """

    def __init__(
        self,
        pixel_count: int,
        feature: type[ColorFeature],
        method_factory: MethodFactory,
    ) -> None:
        if not 0 <= pixel_count <= _MAX_PIXEL_COUNT:
            raise ValueError(f"pixel count out of range 0..{_MAX_PIXEL_COUNT}: {pixel_count}")
        self._count = pixel_count
        self.feature = feature
        self.method = method_factory(pixel_count, feature.pixel_size, feature.settings_size)
        self._dirty = False

    @property
    def pixel_count(self) -> int:
        """Number of pixels on the strip."""
        return self._count

    @property
    def pixel_size(self) -> int:
        """Bytes taken by one pixel."""
        return self.feature.pixel_size

    @property
    def pixels_size(self) -> int:
        """Bytes taken by all pixels, settings excluded."""
        return self.method.data_size - self.feature.settings_size

    @property
    def pixels(self) -> Any:
        """The writable pixel bytes within the data stream."""
        return self.feature.pixels(self.method.data)

    @property
    def is_dirty(self) -> bool:
        """True when pixel data changed since the last show."""
        return self._dirty

    def begin(self) -> None:
        """Initialise the output method and clear every pixel to black."""
        self.method.initialize()
        self.clear_to(self.feature.color_type())

    def show(self, maintain_buffer_consistency: bool = True) -> None:
        """Send the data if anything changed since the last show."""
        if not self._dirty:
            return
        self.method.update(maintain_buffer_consistency)
        self.reset_dirty()

    def can_show(self) -> bool:
        """Whether the method is ready to send another update."""
        return self.method.is_ready_to_update()

    def dirty(self) -> None:
        """Mark the pixel data as changed."""
        self._dirty = True

    def reset_dirty(self) -> None:
        """Mark the pixel data as shown."""
        self._dirty = False

    def _in_range(self, index: int) -> bool:
        return 0 <= index < self._count

    def set_pixel_color(self, index: int, color: Any) -> None:
        """Set one pixel; indices outside the strip are ignored."""
        if self._in_range(index):
            self.feature.apply_pixel_color(self.pixels, index, color)
            self.dirty()

    def get_pixel_color(self, index: int) -> Any:
        """Colour of one pixel; black for indices outside the strip."""
        if self._in_range(index):
            return self.feature.retrieve_pixel_color(self.pixels, index)
        return self.feature.color_type()

    def clear_to(self, color: Any, first: Optional[int] = None, last: Optional[int] = None) -> None:
        """Set every pixel, or those from ``first`` to ``last`` inclusive, to ``color``.

        An invalid range is ignored.
        """
        encoded = self.feature.encode(color)
        if first is None and last is None:
            self.feature.replicate_pixel(self.pixels, 0, encoded, self._count)
            self.dirty()
            return
        if first is None or last is None:
            raise TypeError("first and last must be given together")
        if self._in_range(first) and self._in_range(last) and first <= last:
            offset = self.feature.pixel_offset(first)
            self.feature.replicate_pixel(self.pixels, offset, encoded, last - first + 1)
            self.dirty()

    def _span(self, count: int, first: Optional[int], last: Optional[int]) -> Optional[tuple[int, int]]:
        if count < 0:
            raise ValueError(f"count must not be negative: {count}")
        if first is None and last is None:
            if self._count - 1 >= count:
                return 0, self._count - 1
            return None
        if first is None or last is None:
            raise TypeError("first and last must be given together")
        if (
            self._in_range(first)
            and self._in_range(last)
            and first < last
            and last - first >= count
        ):
            return first, last
        return None

    def _move(self, dest_index: int, src: Any, src_offset: int, count: int) -> None:
        feature = self.feature
        feature.move_pixels(self.pixels, feature.pixel_offset(dest_index), src, src_offset, count)

    def _shift_left(self, count: int, first: int, last: int) -> None:
        front = first + count
        self._move(first, self.pixels, self.feature.pixel_offset(front), last - front + 1)

    def _shift_right(self, count: int, first: int, last: int) -> None:
        front = first + count
        self._move(front, self.pixels, self.feature.pixel_offset(first), last - front + 1)

    def _saved(self, index: int, count: int) -> bytes:
        offset = self.feature.pixel_offset(index)
        return bytes(self.pixels[offset:offset + count * self.feature.pixel_size])

    def rotate_left(self, count: int, first: Optional[int] = None, last: Optional[int] = None) -> None:
        """Rotate pixels toward the start; those leaving reappear at the end."""
        span = self._span(count, first, last)
        if span is None:
            return
        first, last = span
        saved = self._saved(first, count)
        self._shift_left(count, first, last)
        self._move(last - count + 1, saved, 0, count)
        self.dirty()

    def shift_left(self, count: int, first: Optional[int] = None, last: Optional[int] = None) -> None:
        """Move pixels toward the start; the tail keeps its old contents."""
        span = self._span(count, first, last)
        if span is None:
            return
        self._shift_left(count, *span)
        self.dirty()

    def rotate_right(self, count: int, first: Optional[int] = None, last: Optional[int] = None) -> None:
        """Rotate pixels toward the end; those leaving reappear at the start."""
        span = self._span(count, first, last)
        if span is None:
            return
        first, last = span
        saved = self._saved(last - count + 1, count)
        self._shift_right(count, first, last)
        self._move(first, saved, 0, count)
        self.dirty()

    def shift_right(self, count: int, first: Optional[int] = None, last: Optional[int] = None) -> None:
        """Move pixels toward the end; the head keeps its old contents."""
        span = self._span(count, first, last)
        if span is None:
            return
        self._shift_right(count, *span)
        self.dirty()

    def swap_pixel_color(self, index_one: int, index_two: int) -> None:
        """Exchange the colours of two pixels."""
        color_one = self.get_pixel_color(index_one)
        color_two = self.get_pixel_color(index_two)
        self.set_pixel_color(index_one, color_two)
        self.set_pixel_color(index_two, color_one)

    def set_pixel_settings(self, settings: Any) -> None:
        """Write feature settings into the data stream."""
        self.feature.apply_settings(self.method.data, settings)
        self.dirty()

    def set_method_settings(self, settings: Any) -> None:
        """Pass settings on to the output method."""
        self.method.apply_settings(settings)
        self.dirty()