"""
Core module for the abstraction of a binary record

"""
import logging
from typing import Any, Dict, List, Tuple

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import ElfStructException
from .properties import ChunkPhase


class Chunk(metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: a Chunk is
    an ordered sequence of fields, unpacked one after the other.

    A field can depend on the values of the fields that precede it (see
    Dependency), and a Chunk can contain sub-chunks via ChunkField.

    Once unpacked a Chunk is read-only.
    """

    def __init__(self, offset=0):
        self.logger = logging.getLogger(__name__)
        self._phase = ChunkPhase.INIT
        self.offset = offset
        self._layout: Dict[str, Tuple[int, int]] = {}

    def __setattr__(self, name, value):
        if getattr(self, '_phase', None) == ChunkPhase.DONE:
            raise AttributeError(f"'{self.__class__.__name__}' is read-only once unpacked")

        super().__setattr__(name, value)

    @classmethod
    def get_ordered_fields_name(cls) -> List[str]:
        return cls._meta.fields

    @classmethod
    def get_fields(cls) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(cls, _)) for _ in cls.get_ordered_fields_name()]

    def get_values(self) -> List[Tuple[str, Any]]:
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, value in self.get_values():
            msg.append('%s=%r' % (field_name, value))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented

        return self.get_values() == other.get_values()

    def __hash__(self):
        return hash((self.__class__, tuple(self.get_values())))

    @property
    def size(self) -> int:
        '''the size is not set but derived from the unpacked fields'''
        return sum(size for _, size in self._layout.values())

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        return dict(self._layout)

    def as_dict(self) -> Dict[str, Any]:
        result = {}
        for field_name, value in self.get_values():
            result[field_name] = value.as_dict() if isinstance(value, Chunk) else value

        return result

    @classmethod
    def unpack(cls, stream: Stream) -> "Chunk":
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class this method
        is implemented.

        The fields are unpacked in the order of declaration, each one from where
        the previous one ended; the arguments of each field are resolved against
        the fields already unpacked.

        If a field fails, its name is appended to the chain of the exception
        that is re-raised as it is.
        '''
        chunk = cls(offset=stream.tell())
        chunk._phase = ChunkPhase.UNPACKING

        for field_name, field in cls.get_fields():
            chunk.logger.debug('unpacking %s.%s' % (cls.__name__, field_name))

            offset = stream.tell()
            chunk.logger.debug('offset at %d' % offset)

            try:
                value = field.unpack(stream, **field.resolve_arguments(chunk))
            except ElfStructException as e:
                e.chain.append(field_name)
                raise

            chunk.__dict__[field_name] = value
            chunk._layout[field_name] = (offset, stream.tell() - offset)

        chunk._phase = ChunkPhase.DONE

        return chunk


class ChunkField(Field):
    '''Use a Chunk as a field of another Chunk'''

    def __init__(self, chunk_cls, **arguments):
        self.chunk_cls = chunk_cls
        super().__init__(**arguments)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.chunk_cls.__name__)

    def unpack(self, stream: Stream) -> Chunk:
        return self.chunk_cls.unpack(stream)
