import pytest

from pixelstrip.methods import (
    BusChannel,
    DotStarMethod,
    Lpd6803Method,
    Lpd8806Method,
    WireMethod,
)


class Recorder:
    def __init__(self):
        self.frames = []

    def __call__(self, frame):
        self.frames.append(frame)


def test_data_size_includes_settings():
    method = WireMethod(10, 3, 2, Recorder())
    assert method.data_size == 10 * 3 + 2
    assert len(method.data) == method.data_size


def test_pixel_count_out_of_range():
    with pytest.raises(ValueError):
        WireMethod(0x10000, 3, 0, Recorder())
    with pytest.raises(ValueError):
        WireMethod(-1, 3, 0, Recorder())


def test_sink_must_be_callable():
    with pytest.raises(TypeError):
        WireMethod(1, 3, 0, object())


def test_always_ready():
    method = DotStarMethod(5, 4, 0, Recorder())
    assert method.is_ready_to_update() is True


def test_initialize_marks_initialized():
    method = Lpd8806Method(5, 3, 0, Recorder())
    assert method.initialized is False
    method.initialize()
    assert method.initialized is True


def test_apply_settings_kept():
    method = Lpd6803Method(5, 2, 0, Recorder())
    method.apply_settings("speed")
    assert method.settings == "speed"


def test_dotstar_frame_layout():
    method = DotStarMethod(1, 4, 0, Recorder())
    method.data[:] = b"\xff\x01\x02\x03"
    frame = method.frame()
    assert frame[:4] == bytes(4)
    assert frame[4:8] == b"\xff\x01\x02\x03"
    assert frame[8:] == bytes(5)


@pytest.mark.parametrize("count", [1, 16, 17, 40])
def test_dotstar_end_frame_length(count):
    method = DotStarMethod(count, 4, 0, Recorder())
    extra = len(method.frame()) - method.data_size - 8
    assert extra == (count + 15) // 16
    assert extra >= 1


def test_lpd6803_frame_layout():
    method = Lpd6803Method(9, 2, 0, Recorder())
    method.data[:] = bytes(range(1, 19))
    frame = method.frame()
    assert frame[:4] == bytes(4)
    assert frame[4:22] == bytes(range(1, 19))
    assert frame[22:] == bytes((9 + 7) // 8)


def test_lpd8806_frame_layout():
    method = Lpd8806Method(33, 3, 0, Recorder())
    method.data[:] = b"\x81" * method.data_size
    frame = method.frame()
    size = (33 + 31) // 32
    assert frame[:size] == bytes(size)
    assert frame[size:size + method.data_size] == b"\x81" * method.data_size
    assert frame[size + method.data_size:] == b"\xff" * size


def test_update_sends_frame_to_sink():
    sink = Recorder()
    method = DotStarMethod(3, 4, 0, sink)
    method.initialize()
    method.data[0] = 0xE5
    method.update(True)
    method.update(False)
    assert sink.frames == [method.frame(), method.frame()]
    assert sink.frames[0][4] == 0xE5


def test_base_frame_is_data_only():
    method = WireMethod(2, 3, 0, Recorder())
    method.data[:] = b"abcdef"
    assert method.frame() == b"abcdef"


def test_bus_channels():
    assert len(BusChannel) == 8
    assert BusChannel.CHANNEL_0 == 0
    assert BusChannel(3) is BusChannel.CHANNEL_3