import pytest

from pixelstrip.colorfeatures import RgbPixel, RgbwPixel
from pixelstrip.dotstarfeatures import (
    DotStarBgrFeature,
    DotStarBrgFeature,
    DotStarGbrFeature,
    DotStarGrbFeature,
    DotStarLbgrFeature,
    DotStarLbrgFeature,
    DotStarLgbrFeature,
    DotStarLgrbFeature,
    DotStarLrbgFeature,
    DotStarLrgbFeature,
    DotStarRbgFeature,
    DotStarRgbFeature,
)

THREE = [
    DotStarBgrFeature,
    DotStarGrbFeature,
    DotStarRgbFeature,
    DotStarRbgFeature,
    DotStarGbrFeature,
    DotStarBrgFeature,
]
FOUR = [
    DotStarLbgrFeature,
    DotStarLgrbFeature,
    DotStarLrgbFeature,
    DotStarLrbgFeature,
    DotStarLgbrFeature,
    DotStarLbrgFeature,
]


def test_bgr_wire_bytes():
    buf = bytearray(4)
    DotStarBgrFeature.apply_pixel_color(buf, 0, RgbPixel(1, 2, 3))
    assert bytes(buf) == bytes([0xFF, 3, 2, 1])


def test_rgb_wire_bytes():
    assert DotStarRgbFeature.encode(RgbPixel(1, 2, 3)) == bytes([0xFF, 1, 2, 3])


def test_lbgr_brightness_header_clamped():
    encoded = DotStarLbgrFeature.encode(RgbwPixel(1, 2, 3, 200))
    assert encoded == bytes([0xFF, 3, 2, 1])


def test_lgrb_zero_brightness_header():
    encoded = DotStarLgrbFeature.encode(RgbwPixel(1, 2, 3, 0))
    assert encoded == bytes([0xE0, 2, 1, 3])


@pytest.mark.parametrize("feature", THREE + FOUR)
def test_pixel_size_is_four(feature):
    color = RgbPixel(5, 6, 7) if feature in THREE else RgbwPixel(5, 6, 7, 8)
    buf = bytearray(16)
    feature.apply_pixel_color(buf, 3, color)
    assert feature.pixel_offset(3) == 3 * 4
    assert len(feature.encode(color)) == 4
    assert bytes(buf[:12]) == bytes(12)
    assert feature.retrieve_pixel_color(buf, 3) == color


@pytest.mark.parametrize("feature", THREE)
def test_three_element_round_trip(feature):
    buf = bytearray(12)
    colors = [RgbPixel(10, 20, 30), RgbPixel(255, 0, 7), RgbPixel(0, 128, 64)]
    for i, c in enumerate(colors):
        feature.apply_pixel_color(buf, i, c)
    assert [feature.retrieve_pixel_color(buf, i) for i in range(3)] == colors
    assert buf[0] == buf[4] == buf[8] == 0xFF


@pytest.mark.parametrize("feature", THREE)
def test_three_element_ignores_header(feature):
    buf = bytearray(feature.encode(RgbPixel(4, 5, 6)))
    buf[0] = 0x00
    assert feature.retrieve_pixel_color(buf, 0) == RgbPixel(4, 5, 6)


@pytest.mark.parametrize("feature", FOUR)
def test_four_element_round_trip(feature):
    buf = bytearray(8)
    colors = [RgbwPixel(10, 20, 30, 17), RgbwPixel(1, 2, 3, 31)]
    for i, c in enumerate(colors):
        feature.apply_pixel_color(buf, i, c)
    assert [feature.retrieve_pixel_color(buf, i) for i in range(2)] == colors
    assert all(buf[i] & 0xE0 == 0xE0 for i in (0, 4))


@pytest.mark.parametrize("feature", FOUR)
def test_four_element_brightness_clamps_to_31(feature):
    buf = bytearray(4)
    feature.apply_pixel_color(buf, 0, RgbwPixel(9, 8, 7, 255))
    assert feature.retrieve_pixel_color(buf, 0) == RgbwPixel(9, 8, 7, 31)


@pytest.mark.parametrize("feature", THREE)
def test_three_element_rejects_rgbw(feature):
    with pytest.raises(TypeError):
        feature.encode(RgbwPixel(1, 2, 3, 4))


@pytest.mark.parametrize("feature", FOUR)
def test_four_element_rejects_rgb(feature):
    with pytest.raises(TypeError):
        feature.apply_pixel_color(bytearray(4), 0, RgbPixel(1, 2, 3))


def test_out_of_range_index_raises():
    with pytest.raises(IndexError):
        DotStarGbrFeature.apply_pixel_color(bytearray(8), 2, RgbPixel(1, 2, 3))


def test_replicate_encoded_pixel():
    buf = bytearray(12)
    pixel = DotStarBrgFeature.encode(RgbPixel(11, 22, 33))
    DotStarBrgFeature.replicate_pixel(buf, 0, pixel, 3)
    assert [DotStarBrgFeature.retrieve_pixel_color(buf, i) for i in range(3)] == [
        RgbPixel(11, 22, 33)
    ] * 3


def test_channel_orders_differ_in_wire_bytes():
    color = RgbPixel(1, 2, 3)
    encodings = {feature.encode(color) for feature in THREE}
    assert len(encodings) == len(THREE)


def test_move_pixels_overlapping():
    buf = bytearray(12)
    colors = [RgbwPixel(1, 1, 1, 1), RgbwPixel(2, 2, 2, 2), RgbwPixel(3, 3, 3, 3)]
    for i, c in enumerate(colors):
        DotStarLrbgFeature.apply_pixel_color(buf, i, c)
    DotStarLrbgFeature.move_pixels(buf, 4, buf, 0, 2)
    assert [DotStarLrbgFeature.retrieve_pixel_color(buf, i) for i in range(3)] == [
        colors[0],
        colors[0],
        colors[1],
    ]