"""An off-screen 2-D pixel buffer that can be copied onto a strip."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .colorfeatures import ColorFeature

_MAX_DIMENSION = 0xFFFF

LayoutMap = Callable[[int, int], int]
Shader = Callable[[int, Any], Any]


class PixelBuffer:
    """A width-by-height grid of pixels encoded with a colour feature."""

    def __init__(
        self,
        width: int,
        height: int,
        feature: type[ColorFeature],
        pixels: Optional[bytes] = None,
    ) -> None:
        for name, value in (("width", width), ("height", height)):
            if not 0 <= value <= _MAX_DIMENSION:
                raise ValueError(f"{name} out of range 0..{_MAX_DIMENSION}: {value}")
        self._width = width
        self._height = height
        self.feature = feature
        size = width * height * feature.pixel_size
        if pixels is None:
            self._pixels = bytearray(size)
        else:
            if len(pixels) != size:
                raise ValueError(f"pixels must be {size} bytes, got {len(pixels)}")
            self._pixels = bytearray(pixels)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixel_count(self) -> int:
        return self._width * self._height

    @property
    def pixels(self) -> bytearray:
        """The encoded pixel bytes, row by row."""
        return self._pixels

    def _index(self, x: int, y: int) -> Optional[int]:
        if 0 <= x < self._width and 0 <= y < self._height:
            return x + y * self._width
        return None

    def set_pixel_color(self, x: int, y: int, color: Any) -> None:
        """Set the pixel at (x, y); coordinates outside the grid are ignored."""
        index = self._index(x, y)
        if index is not None:
            self.feature.apply_pixel_color(self._pixels, index, color)

    def get_pixel_color(self, x: int, y: int) -> Any:
        """Colour at (x, y); black outside the grid."""
        index = self._index(x, y)
        if index is None:
            return self.feature.color_type()
        return self.feature.retrieve_pixel_color(self._pixels, index)

    def clear_to(self, color: Any) -> None:
        """Set every pixel to ``color``."""
        self.feature.replicate_pixel(self._pixels, 0, self.feature.encode(color), self.pixel_count)

    def _destination(self, dest: Any) -> tuple[Any, int]:
        dest_feature = getattr(dest, "feature", self.feature)
        if dest_feature is not self.feature:
            raise ValueError(
                f"destination uses {dest_feature.__name__}, buffer uses {self.feature.__name__}"
            )
        mark_dirty = getattr(dest, "dirty", None)
        if callable(mark_dirty):
            mark_dirty()
        return dest.pixels, dest.pixel_count

    def _copy_pixel(self, dest_pixels: Any, dest_index: int, src_index: int, count: int = 1) -> None:
        feature = self.feature
        feature.move_pixels(
            dest_pixels,
            feature.pixel_offset(dest_index),
            self._pixels,
            feature.pixel_offset(src_index),
            count,
        )

    def blt(self, dest: Any, index_pixel: int) -> None:
        """Copy the buffer, as a run of pixels, into ``dest`` from ``index_pixel``."""
        dest_pixels, dest_count = self._destination(dest)
        if not 0 <= index_pixel < dest_count:
            return
        count = min(dest_count - index_pixel, self.pixel_count)
        self._copy_pixel(dest_pixels, index_pixel, 0, count)

    def blt_region(
        self,
        dest: Any,
        x_dest: int,
        y_dest: int,
        layout_map: LayoutMap,
        x_src: int = 0,
        y_src: int = 0,
        w_src: Optional[int] = None,
        h_src: Optional[int] = None,
    ) -> None:
        """Copy a rectangle of the buffer into ``dest`` at (x_dest, y_dest).

        ``layout_map`` turns destination coordinates into strip indices;
        indices outside the destination are skipped.
        """
        width = self._width if w_src is None else w_src
        height = self._height if h_src is None else h_src
        dest_pixels, dest_count = self._destination(dest)
        for y in range(height):
            for x in range(width):
                dest_index = layout_map(x_dest + x, y_dest + y)
                if not 0 <= dest_index < dest_count:
                    continue
                src_index = self._index(x_src + x, y_src + y)
                if src_index is not None:
                    self._copy_pixel(dest_pixels, dest_index, src_index)

    def render(self, dest: Any, shader: Shader) -> None:
        """Write ``shader(index, color)`` for each buffer pixel into ``dest``."""
        dest_pixels, dest_count = self._destination(dest)
        for index in range(min(dest_count, self.pixel_count)):
            color = self.feature.retrieve_pixel_color(self._pixels, index)
            self.feature.apply_pixel_color(dest_pixels, index, shader(index, color))