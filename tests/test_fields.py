from enum import Enum, auto

import pytest

from elfstruct.meta import Endianess
from elfstruct.properties import Dependency
from elfstruct.streams import Stream
from elfstruct.exceptions import (
    IncompleteException,
    MagicException,
    UnknownCodeException,
)
from elfstruct.fields import StructField, MagicField, PaddingField


class DummyEnum(Enum):
    NONE = 0
    FIRST = auto()
    SECOND = auto()


def test_structfield_unpack():
    field = StructField('I')

    assert field.size == 4
    assert field.unpack(Stream(b'\xfe\xca\x00\x00'), endianess=Endianess.LITTLE_ENDIAN) == 0xcafe
    assert field.unpack(Stream(b'\x00\x00\xca\xfe'), endianess=Endianess.BIG_ENDIAN) == 0xcafe


def test_structfield_needs_endianess():
    field = StructField('H')
    stream = Stream(b'\x01\x02')

    with pytest.raises(ValueError):
        field.unpack(stream)

    # nothing has been consumed
    assert stream.tell() == 0


def test_structfield_single_byte():
    field = StructField('B')

    assert field.unpack(Stream(b'\x2a')) == 0x2a


def test_structfield_enum():
    field = StructField('B', enum=DummyEnum)

    assert field.unpack(Stream(b'\x02')) == DummyEnum.SECOND

    with pytest.raises(UnknownCodeException) as e:
        field.unpack(Stream(b'\x04'))

    assert e.value.enum_name == 'DummyEnum'
    assert e.value.raw_value == 4
    assert str(e.value) == 'unknown DummyEnum code 0x4'


def test_structfield_incomplete():
    field = StructField('I')

    with pytest.raises(IncompleteException) as e:
        field.unpack(Stream(b'\x01'), endianess=Endianess.LITTLE_ENDIAN)

    assert e.value.needed == 3


def test_magicfield():
    field = MagicField(b'\x89PNG')

    assert field.size == 4
    assert field.unpack(Stream(b'\x89PNG\x0d\x0a')) == b'\x89PNG'


@pytest.mark.parametrize('data', [
    b'\x89PNX',
    b'MZ\x90\x00',
    b'\x00',  # already wrong after the first byte
])
def test_magicfield_mismatch(data):
    with pytest.raises(MagicException) as e:
        MagicField(b'\x89PNG').unpack(Stream(data))

    assert e.value.expected == b'\x89PNG'
    assert e.value.found == data


@pytest.mark.parametrize('data,needed', [
    (b'', 4),
    (b'\x89', 3),
    (b'\x89PN', 1),
])
def test_magicfield_incomplete(data, needed):
    with pytest.raises(IncompleteException) as e:
        MagicField(b'\x89PNG').unpack(Stream(data))

    assert e.value.needed == needed


def test_paddingfield():
    field = PaddingField(8)

    assert field.get_dependencies() == {'consumed': Dependency('.size')}

    stream = Stream(b'\x00' * 10)
    assert field.unpack(stream, consumed=5) == b'\x00' * 3
    assert stream.tell() == 3

    with pytest.raises(ValueError):
        field.unpack(stream, consumed=9)


def test_field_arguments():
    field = StructField('H', endianess=Endianess.BIG_ENDIAN)

    assert field.get_dependencies() == {}
    assert field.resolve_arguments(None) == {'endianess': Endianess.BIG_ENDIAN}


def test_dependency_must_be_relative():
    with pytest.raises(ValueError):
        Dependency('header.e_ident.EI_CLASS')

    assert Dependency('.e_ident.EI_CLASS').path == ['e_ident', 'EI_CLASS']
