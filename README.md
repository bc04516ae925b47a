# pixelstrip

pixelstrip holds pixel buffers and wire framing for addressable LED strips,
entirely in memory. It does three things:

- It encodes colours into the byte order a chip expects.
- It maps 2-D coordinates onto strip indices.
- It builds the full frame a clocked chip needs: start frame, pixel data and
  end frame.

The frame goes to a callable that you supply, so any transport can carry it:
SPI, serial, a file or a list in a test.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Contents

- `pixelstrip.colorfeatures`
  - The colour values `RgbPixel` and `RgbwPixel`. These are frozen dataclasses
    with 8-bit channels. Out-of-range values raise `ValueError` and non-integers
    raise `TypeError`.
  - The base class `ColorFeature`.
  - The orderings `NeoGrbFeature`, `NeoRgbFeature`, `NeoBrgFeature` and
    `NeoRbgFeature` (three bytes per pixel), and `NeoGrbwFeature` and
    `NeoRgbwFeature` (four bytes per pixel).
  - Each feature provides `encode`, `apply_pixel_color`,
    `retrieve_pixel_color`, `replicate_pixel`, `move_pixels`, `pixel_offset`,
    `pixels` and `apply_settings`.
- `pixelstrip.dotstarfeatures`
  - The APA102 orderings, for example `DotStarBgrFeature` and
    `DotStarRgbFeature`. They write a full-brightness header byte, `0xFF`, ahead
    of the three colour bytes.
  - The `L...` variants, for example `DotStarLbgrFeature`, take `RgbwPixel`. The
    white channel becomes the 5-bit brightness in the header, capped at 31.
- `pixelstrip.lpdfeatures`
  - `Lpd8806GrbFeature` and `Lpd8806BrgFeature` write seven bits per channel,
    with the high bit set.
  - The LPD6803 orderings `Lpd6803RgbFeature`, `Lpd6803GrbFeature`,
    `Lpd6803GbrFeature` and `Lpd6803BrgFeature` pack each pixel as a 1-5-5-5
    word.
  - The 5-5-5 packing is also available on its own as `encode_555` and
    `decode_555`.
- `pixelstrip.layouts`
  - The matrix layouts: `RowMajorLayout`, `ColumnMajorLayout`,
    `RowMajorAlternatingLayout` and `ColumnMajorAlternatingLayout`, each with
    90, 180 and 270 degree variants, for example
    `ColumnMajorAlternating180Layout`.
  - Every layout has a static `map(width, height, x, y)`.
  - `tile_layout(layout, row, column)` returns the layout a tile at that
    position in a mosaic should use.
- `pixelstrip.methods`
  - `DotStarMethod`, `Lpd6803Method` and `Lpd8806Method`. Each one keeps the
    strip's data stream in `data` and returns the framed bytes from `frame()`.
    `update()` passes that frame to the sink.
  - `BusChannel` lists the channel numbers 0 to 7.
- `pixelstrip.bus`
  - `PixelBus`, the strip itself. It has these operations:
    - `begin`, `show` and `can_show`
    - `set_pixel_color`, `get_pixel_color` and `swap_pixel_color`
    - `clear_to`, which takes an optional inclusive `first`/`last` range
    - `rotate_left`, `rotate_right`, `shift_left` and `shift_right`
    - dirty tracking through `dirty`, `reset_dirty` and `is_dirty`
    - `set_pixel_settings` and `set_method_settings`
- `pixelstrip.buffer`
  - `PixelBuffer`, an off-screen 2-D image. `blt` copies it into a bus as a run
    of pixels, and `blt_region` copies a rectangle through a layout map.
    `render` writes `shader(index, color)` for each pixel.
  - The destination must use the same feature.

## Example

```python
from pixelstrip.bus import PixelBus
from pixelstrip.colorfeatures import RgbPixel
from pixelstrip.dotstarfeatures import DotStarBgrFeature
from pixelstrip.methods import DotStarMethod

frames = []

def make_method(pixel_count, element_size, settings_size):
    return DotStarMethod(pixel_count, element_size, settings_size, frames.append)

strip = PixelBus(8, DotStarBgrFeature, make_method)
strip.begin()
strip.set_pixel_color(0, RgbPixel(255, 0, 0))
strip.rotate_right(1)
strip.show()

print(frames[-1].hex())
```

`show` only sends when something changed since the last show.

## Out-of-range operations

`PixelBus` ignores operations that fall outside the strip. This covers
out-of-range indices, invalid `first`/`last` ranges, and rotations or shifts
longer than the range. A pixel read from outside the strip comes back black.
`PixelBuffer` treats coordinates outside its grid the same way.

Some arguments raise errors instead:

- A negative rotate or shift count raises `ValueError`.
- Passing only one of `first` and `last` raises `TypeError`.

## What it does not do

The package does not drive any hardware. It produces bytes and hands them to
your sink, and putting them on a wire is up to that sink.

The output methods cover only clocked two-wire chips: APA102, LPD6803 and
LPD8806. The `Neo...` features encode pixel bytes, but the package has no
method that produces the timed single-wire signal those strips need. Those
bytes have to be sent by a transport of your own.

There are no colour-space conversions, gamma correction or animation helpers.