'''
Typed integers for the values unpacked from a file: the type tells what the
number means (a virtual address, a position into the file, a quantity) and
how it's displayed, never the number itself.
'''
from bitstring import Bits


class ElfNumber(object):
    '''Wrapper around an unsigned integer of WIDTH bits'''

    WIDTH = 64
    FORMAT = '{:d}'

    __slots__ = ('value',)

    def __init__(self, value: int):
        value = int(value)
        if not 0 <= value < (1 << self.WIDTH):
            raise ValueError(f'{value} does not fit into {self.WIDTH} bits unsigned')

        object.__setattr__(self, 'value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"'{self.__class__.__name__}' is immutable")

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self)

    def __str__(self):
        return self.FORMAT.format(self.value)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented

        return other.value == self.value

    def __lt__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented

        return self.value < other.value

    def __hash__(self):
        return hash((self.__class__.__name__, self.value))


class Address(ElfNumber):
    '''Unsigned program address'''
    FORMAT = '{:#x}'


class Offset(ElfNumber):
    '''Unsigned file offset'''
    FORMAT = '{:#x}'


class Size(ElfNumber):
    FORMAT = '{:d}'


class Flags(ElfNumber):
    '''Processor specific flags: they are not interpreted, only shown bit by bit.'''
    WIDTH = 32

    @property
    def bits(self) -> Bits:
        return Bits(uint=self.value, length=self.WIDTH)

    def __getitem__(self, index: int) -> bool:
        '''Returns the bit at index, where zero is the least significant one.'''
        if not 0 <= index < self.WIDTH:
            raise IndexError(f'bit index {index} out of range')

        return self.bits[self.WIDTH - 1 - index]

    def __str__(self):
        return '0b' + self.bits.bin
