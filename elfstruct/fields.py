"""
A Field is "fundamental" datatype from the format point of view, something directly
unpackable from a stream.

The arguments a field needs to be unpacked (like the endianess) are passed to its
constructor either as constants or as Dependency instances: a chunk resolves the
latter against the values already unpacked and calls unpack() with them.
"""
import logging
import struct
from enum import Enum
from typing import Any, Dict

from .meta import FieldBase, Endianess
from .properties import Dependency
from .streams import Stream
from .exceptions import (
    IncompleteException,
    MagicException,
    UnknownCodeException,
)


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, **arguments):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = None
        self.arguments = arguments

    def __repr__(self):
        return '<%s(%s)>' % (
            self.__class__.__name__,
            ','.join('%s=%r' % _ for _ in self.arguments.items()),
        )

    def get_dependencies(self) -> Dict[str, Dependency]:
        """Return the dictionary containing as key the argument's name"""
        return {_k: _v for _k, _v in self.arguments.items() if isinstance(_v, Dependency)}

    def resolve_arguments(self, chunk) -> Dict[str, Any]:
        '''Build the keyword arguments for unpack() with respect to the chunk
        that is unpacking this field.'''
        return {
            _k: _v.resolve(chunk) if isinstance(_v, Dependency) else _v
            for _k, _v in self.arguments.items()
        }

    def unpack(self, stream: Stream, **kwargs):
        raise NotImplementedError(f"method {self.__class__.__name__}.unpack() not implemented")


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module unpacking
    integers from bytes.

    The main advantage is the possibility to indicate via the "enum" argument some subclass
    of enum.Enum so to have directly a representation of the integer value of the field itself;
    values not present in the enum are refused.
    """

    def __init__(self, format, enum=None, **arguments):
        self.format = format
        self.enum = enum
        super().__init__(**arguments)

    def __repr__(self):
        if not self.enum:
            return '<%s(%s)>' % (self.__class__.__name__, self.format)

        return f'<{self.__class__.__name__}({self.format},{self.enum.__name__})>'

    @property
    def size(self) -> int:
        return struct.calcsize('<%s' % self.format)

    def get_format(self, endianess=None) -> str:
        if endianess is None:
            if self.size > 1:
                raise ValueError(f"field '{self.name}' of {self.size} bytes needs an endianess")
            return '<%s' % self.format

        return '%s%s' % ('<' if endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def get_enum_name(self) -> str:
        return self.enum.__name__

    def _unpack_enum(self, value: int) -> Enum:
        try:
            return self.enum(value)
        except ValueError:
            self.logger.debug(f'enum {self.enum!r} doesn\'t have element with value 0x{value:x} in it')
            raise UnknownCodeException(enum_name=self.get_enum_name(), raw_value=value)

    def _unpack(self, raw: bytes, endianess=None):
        value = struct.unpack(self.get_format(endianess), raw)[0]
        if self.enum:
            value = self._unpack_enum(value)

        return value

    def unpack(self, stream: Stream, endianess=None):
        fmt = self.get_format(endianess)  # fail before consuming the stream
        self.logger.debug('unpacking %d bytes with format \'%s\'' % (self.size, fmt))
        return self._unpack(stream.read(self.size), endianess)


class MagicField(Field):
    """A literal sequence of bytes that must be at the start of the field."""

    def __init__(self, magic: bytes, **arguments):
        self.magic = magic
        super().__init__(**arguments)

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self.magic)

    @property
    def size(self) -> int:
        return len(self.magic)

    def unpack(self, stream: Stream):
        raw = stream.read_partial(self.size)

        # a prefix of the magic is not wrong, only short
        if raw != self.magic[:len(raw)]:
            self.logger.debug(f'the magic doesn\'t correspond: {raw!r}')
            raise MagicException(expected=self.magic, found=raw)

        if len(raw) < self.size:
            raise IncompleteException(needed=self.size - len(raw))

        return raw


class PaddingField(Field):
    '''Takes as many bytes as needed so that the enclosing chunk is "size" bytes long.

    The bytes already used must be indicated via the "consumed" argument,
    usually as Dependency('.size').'''

    def __init__(self, size: int, consumed=Dependency('.size'), **arguments):
        self.size = size
        super().__init__(consumed=consumed, **arguments)

    def unpack(self, stream: Stream, consumed: int):
        if consumed > self.size:
            raise ValueError(f'{consumed} bytes already consumed, more than the {self.size} available')

        return stream.read(self.size - consumed)
