import io

import pytest

from handheld_thumbnailer.exceptions import IOFailureException
from handheld_thumbnailer.streams import Stream


def test_bytes_stream_read_exact():
    stream = Stream(b'\x01\x02\x03\x04\x05')

    assert stream.read_exact(1) == b'\x01'
    assert stream.read_exact(2) == b'\x02\x03'
    assert stream.tell() == 3

    with pytest.raises(IOFailureException):
        stream.read_exact(3)


def test_seek_absolute_and_relative():
    stream = Stream(bytes(range(0x10)))

    stream.seek(4)
    assert stream.read_exact(1) == b'\x04'

    stream.skip(3)
    assert stream.tell() == 8
    assert stream.read_exact(1) == b'\x08'

    stream.skip(-9)
    assert stream.tell() == 0


def test_seek_before_start_fails():
    stream = Stream(b'\x00' * 4)
    stream.seek(2)

    with pytest.raises(IOFailureException):
        stream.skip(-3)

    with pytest.raises(IOFailureException):
        stream.seek(-1)


def test_seek_past_end_then_read_fails():
    stream = Stream(b'\x00' * 4)

    stream.seek(0x100)

    with pytest.raises(IOFailureException):
        stream.read_exact(1)


def test_file_stream_owns_the_file(tmp_path):
    path = tmp_path / 'data.bin'
    path.write_bytes(b'\x01\x02\x03')

    with Stream(str(path)) as stream:
        assert stream.read_exact(3) == b'\x01\x02\x03'

    assert stream.obj.closed

    with Stream(path) as stream:
        assert stream.read_exact(1) == b'\x01'

    assert stream.obj.closed


def test_caller_file_is_not_closed():
    f = io.BytesIO(b'\x01\x02')

    with Stream(f) as stream:
        stream.read_exact(2)

    assert not f.closed
    assert Stream(stream).obj is f


def test_missing_path():
    with pytest.raises(IOFailureException):
        Stream('/this/path/does/not/exist')


def test_unreadable_object():
    with pytest.raises(ValueError):
        Stream(42)
