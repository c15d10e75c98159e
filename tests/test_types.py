import pytest
from bitstring import Bits

from elfstruct.types import Address, Offset, Size, Flags


def test_display():
    assert str(Address(0x401040)) == '0x401040'
    assert str(Offset(64)) == '0x40'
    assert str(Size(64)) == '64'
    assert repr(Address(0x401040)) == 'Address(0x401040)'
    assert repr(Size(3)) == 'Size(3)'


def test_type_disambiguates():
    assert Address(0x40) == Address(0x40)
    assert Address(0x40) != Offset(0x40)
    assert Offset(0x40) != Size(0x40)
    assert Address(0x40) != 0x40
    assert Address(1) < Address(2)

    with pytest.raises(TypeError):
        Address(1) < Offset(2)


def test_as_integer():
    assert int(Offset(0x40)) == 0x40
    assert b'abcdef'[Offset(2)] == ord('c')
    assert hex(Address(0x1000)) == '0x1000'


def test_range():
    assert Address(0xffffffffffffffff).value == (1 << 64) - 1

    with pytest.raises(ValueError):
        Address(1 << 64)

    with pytest.raises(ValueError):
        Size(-1)

    with pytest.raises(ValueError):
        Flags(1 << 32)


def test_immutable():
    address = Address(0x1000)

    with pytest.raises(AttributeError):
        address.value = 0x2000


def test_hashable():
    assert len({Address(1), Address(1), Offset(1)}) == 2


def test_flags():
    flags = Flags(0x70001007)

    assert str(flags) == '0b01110000000000000001000000000111'
    assert flags.bits == Bits(uint=0x70001007, length=32)
    assert flags[0] is True
    assert flags[3] is False
    assert flags[31] is False
    assert flags[30] is True

    with pytest.raises(IndexError):
        flags[32]
