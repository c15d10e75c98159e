'''
Fields specific to the ELF format: apart from the identification block,
every multi-byte value is stored with the byte order indicated by EI_DATA
and addresses and offsets have the width indicated by EI_CLASS.

Both are passed explicitly to unpack(), usually via Dependency.
'''
import logging
import struct
from typing import Dict

from ... import fields
from ...meta import Endianess
from ...streams import Stream
from ...types import Address, Offset, Size, Flags
from ...exceptions import (
    UnsupportedClassException,
    UnsupportedEncodingException,
)
from .enum import ElfClass, ElfEncoding


logger = logging.getLogger(__name__)


MAP_ENCODING_ENDIANESS = {
    ElfEncoding.ELFDATA2LSB: Endianess.LITTLE_ENDIAN,
    ElfEncoding.ELFDATA2MSB: Endianess.BIG_ENDIAN,
}


def endianess_from_encoding(encoding: ElfEncoding) -> Endianess:
    '''Returns the byte order to use for the multi-byte values given the EI_DATA value.'''
    try:
        return MAP_ENCODING_ENDIANESS[encoding]
    except KeyError:
        logger.debug(f'EI_DATA has not a value useful: {encoding}')
        raise UnsupportedEncodingException(encoding=encoding)


class ElfEnumField(fields.StructField):
    '''Enumerated value: one byte ones don't care about the encoding, the others
    need it to be indicated.'''

    def __init__(self, format, enum, encoding=None, **arguments):
        if encoding is not None:
            arguments['encoding'] = encoding
        super().__init__(format, enum=enum, **arguments)

    def get_enum_name(self) -> str:
        # ElfMachine -> Machine
        return self.enum.__name__[len('Elf'):]

    def unpack(self, stream: Stream, encoding=None):
        endianess = None
        if self.size > 1:
            if encoding is None:
                raise ValueError(f"field '{self.name}' of {self.size} bytes needs an encoding")
            endianess = endianess_from_encoding(encoding)

        return super().unpack(stream, endianess=endianess)


class Elf_FixedType(fields.Field):
    '''Wrapper for the datatypes with the same width in both classes'''

    FORMAT = 'I'
    WRAPPER = int

    def __init__(self, encoding, **arguments):
        super().__init__(encoding=encoding, **arguments)

    @property
    def size(self) -> int:
        return struct.calcsize('<%s' % self.FORMAT)

    def unpack(self, stream: Stream, encoding: ElfEncoding):
        endianess = endianess_from_encoding(encoding)
        fmt = '%s%s' % ('<' if endianess == Endianess.LITTLE_ENDIAN else '>', self.FORMAT)

        value = struct.unpack(fmt, stream.read(self.size))[0]

        return self.WRAPPER(value)


class Elf_Half(Elf_FixedType):
    FORMAT = 'H'


class Elf_Word(Elf_FixedType):
    FORMAT = 'I'


class Elf_Flags(Elf_Word):
    WRAPPER = Flags


class Elf_DataType(fields.Field):
    '''Wrapper for all the datatype that resolves internally to the EI_CLASS:
    whatever the width in the file, the value is widened to 64 bits.'''

    MAP_CLASS_TYPE: Dict[ElfClass, str] = {}
    WRAPPER = int

    def __init__(self, elf_class, encoding, **arguments):
        super().__init__(elf_class=elf_class, encoding=encoding, **arguments)

    def get_format(self, elf_class: ElfClass, encoding: ElfEncoding) -> str:
        endianess = endianess_from_encoding(encoding)

        if elf_class not in self.MAP_CLASS_TYPE:
            self.logger.debug(f'EI_CLASS has not a value useful: {elf_class}')
            raise UnsupportedClassException(elf_class=elf_class)

        fmt = '%s%s' % (
            '<' if endianess == Endianess.LITTLE_ENDIAN else '>',
            self.MAP_CLASS_TYPE[elf_class],
        )
        self.logger.debug(f'format: \'{fmt}\'')

        return fmt

    def unpack(self, stream: Stream, elf_class: ElfClass, encoding: ElfEncoding):
        fmt = self.get_format(elf_class, encoding)

        value = struct.unpack(fmt, stream.read(struct.calcsize(fmt)))[0]

        return self.WRAPPER(value)


class Elf_Addr(Elf_DataType):
    '''Unsigned program address'''

    MAP_CLASS_TYPE = {
        ElfClass.ELFCLASS32: 'I',
        ElfClass.ELFCLASS64: 'Q',
    }
    WRAPPER = Address


class Elf_Off(Elf_DataType):
    '''Unsigned file offset'''

    MAP_CLASS_TYPE = {
        ElfClass.ELFCLASS32: 'I',
        ElfClass.ELFCLASS64: 'Q',
    }
    WRAPPER = Offset


class Elf_Xword(Elf_DataType):

    MAP_CLASS_TYPE = {
        ElfClass.ELFCLASS32: 'I',
        ElfClass.ELFCLASS64: 'Q',
    }
    WRAPPER = Size
