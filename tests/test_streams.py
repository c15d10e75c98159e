import pytest

from elfstruct.streams import Stream
from elfstruct.exceptions import IncompleteException, UnpackException


def test_bytes_stream_read():
    stream = Stream(b'\x01\x02\x03\x04\x05')

    assert stream.read(1) == b'\x01'
    assert stream.read(2) == b'\x02\x03'
    assert stream.tell() == 3
    assert stream.read_all() == b'\x04\x05'
    assert stream.tell() == 5


@pytest.mark.parametrize('data', [
    bytearray(b'\x01\x02\x03'),
    memoryview(b'\x01\x02\x03'),
])
def test_other_buffers(data):
    stream = Stream(data)

    assert stream.read(3) == b'\x01\x02\x03'


def test_context_manager():
    with Stream(b'kebab') as stream:
        assert stream.read(2) == b'ke'
        assert stream.read_all() == b'bab'


@pytest.mark.parametrize('obj', [42, 'kebab', None])
def test_wrong_object(obj):
    with pytest.raises(ValueError):
        Stream(obj)


def test_path_is_not_opened(tmp_path):
    path = tmp_path / 'data'
    path.write_bytes(b'kebab')

    with pytest.raises(ValueError):
        Stream(str(path))


def test_read_incomplete():
    stream = Stream(b'\x01\x02')

    with pytest.raises(IncompleteException) as e:
        stream.read(4)

    assert e.value.needed == 2
    assert e.value.chain == []
    assert not isinstance(e.value, UnpackException)


def test_read_partial():
    stream = Stream(b'\x01\x02')

    assert stream.read_partial(4) == b'\x01\x02'
    assert stream.read_partial(4) == b''


def test_seek():
    stream = Stream(b'\x01\x02\x03')
    stream.seek(2)

    assert stream.read(1) == b'\x03'

    with pytest.raises(ValueError):
        stream.seek('2')
