"""Layouts that map 2-D panel coordinates to 1-D pixel indices."""

from __future__ import annotations

PIXEL_INDEX_OUT_OF_BOUNDS = 0xFFFF


def _u16(value: int) -> int:
    return value & 0xFFFF


class Layout:
    """Base for layouts; ``map`` turns (x, y) into a strip index."""

    # Layouts to use for tiles at (even row, even col), (even, odd),
    # (odd, even), (odd, odd); filled in once all layouts exist.
    _tiles: tuple = ()

    @staticmethod
    def map(width: int, height: int, x: int, y: int) -> int:
        raise NotImplementedError("a concrete layout defines map")


class RowMajorLayout(Layout):
    @staticmethod
    def map(width, height, x, y):
        return _u16(x + y * width)


class RowMajor90Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        return _u16((width - 1 - x) * height + y)


class RowMajor180Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        return _u16((width - 1 - x) + (height - 1 - y) * width)


class RowMajor270Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        return _u16(x * height + (height - 1 - y))


class ColumnMajorLayout(Layout):
    @staticmethod
    def map(width, height, x, y):
        return _u16(x * height + y)


class ColumnMajor90Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        return _u16((width - 1 - x) + y * width)


class ColumnMajor180Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        return _u16((width - 1 - x) * height + (height - 1 - y))


class ColumnMajor270Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        return _u16(x + (height - 1 - y) * width)


class RowMajorAlternatingLayout(Layout):
    @staticmethod
    def map(width, height, x, y):
        offset = (width - 1) - x if y & 1 else x
        return _u16(y * width + offset)


class RowMajorAlternating90Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        mx = _u16((width - 1) - x)
        offset = (height - 1) - y if mx & 1 else y
        return _u16(mx * height + offset)


class RowMajorAlternating180Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        my = _u16((height - 1) - y)
        offset = x if my & 1 else (width - 1) - x
        return _u16(my * width + offset)


class RowMajorAlternating270Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        offset = y if x & 1 else (height - 1) - y
        return _u16(x * height + offset)


class ColumnMajorAlternatingLayout(Layout):
    @staticmethod
    def map(width, height, x, y):
        offset = (height - 1) - y if x & 1 else y
        return _u16(x * height + offset)


class ColumnMajorAlternating90Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        offset = x if y & 1 else (width - 1) - x
        return _u16(y * width + offset)


class ColumnMajorAlternating180Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        mx = _u16((width - 1) - x)
        offset = y if mx & 1 else (height - 1) - y
        return _u16(mx * height + offset)


class ColumnMajorAlternating270Layout(Layout):
    @staticmethod
    def map(width, height, x, y):
        my = _u16((height - 1) - y)
        offset = (width - 1) - x if my & 1 else x
        return _u16(my * width + offset)


_ROW_MAJOR_TILES = (RowMajorLayout, RowMajor270Layout, RowMajor90Layout, RowMajor180Layout)
_COLUMN_MAJOR_TILES = (
    ColumnMajorLayout,
    ColumnMajor270Layout,
    ColumnMajor90Layout,
    ColumnMajor180Layout,
)
_ROW_ALTERNATING_TILES = (
    RowMajorAlternating270Layout,
    RowMajorAlternating270Layout,
    RowMajorAlternating90Layout,
    RowMajorAlternating90Layout,
)
_COLUMN_ALTERNATING_TILES = (
    ColumnMajorAlternatingLayout,
    ColumnMajorAlternatingLayout,
    ColumnMajorAlternating180Layout,
    ColumnMajorAlternating180Layout,
)

for _tiles, _family in (
    (_ROW_MAJOR_TILES, (RowMajorLayout, RowMajor90Layout, RowMajor180Layout, RowMajor270Layout)),
    (
        _COLUMN_MAJOR_TILES,
        (ColumnMajorLayout, ColumnMajor90Layout, ColumnMajor180Layout, ColumnMajor270Layout),
    ),
    (
        _ROW_ALTERNATING_TILES,
        (
            RowMajorAlternatingLayout,
            RowMajorAlternating90Layout,
            RowMajorAlternating180Layout,
            RowMajorAlternating270Layout,
        ),
    ),
    (
        _COLUMN_ALTERNATING_TILES,
        (
            ColumnMajorAlternatingLayout,
            ColumnMajorAlternating90Layout,
            ColumnMajorAlternating180Layout,
            ColumnMajorAlternating270Layout,
        ),
    ),
):
    for _layout in _family:
        _layout._tiles = _tiles


def tile_layout(layout: type[Layout], row: int, column: int) -> type[Layout]:
    """The layout a tile at (``row``, ``column``) uses under ``layout``'s preference."""
    if not layout._tiles:
        raise ValueError(f"{layout.__name__} has no tile preference")
    return layout._tiles[(row & 1) * 2 + (column & 1)]