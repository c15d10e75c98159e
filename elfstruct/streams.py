import io
import logging

from .exceptions import IncompleteException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around an in-memory buffer to
    uniform its properties: mainly we need a read() method that
    signals when the data runs out.

    It never does I/O: reading a file is up to the caller.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        try:
            init_method = getattr(self, init_method_name)
        except AttributeError:
            raise ValueError('\'%s\' is the wrong kind of object to stream from' % self._type.__name__)

        init_method()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self._type.__name__)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    def close(self):
        self.obj.close()

    def tell(self) -> int:
        return self.obj.tell()

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset)

    def read(self, n: int) -> bytes:
        '''Read exactly n bytes, if the stream has not enough of them
        an IncompleteException is raised.'''
        data = self.obj.read(n)

        if len(data) < n:
            logger.debug('wanted %d bytes at offset %d, got %d' % (n, self.tell() - len(data), len(data)))
            raise IncompleteException(needed=n - len(data))

        return data

    def read_partial(self, n: int) -> bytes:
        '''Read at most n bytes.'''
        return self.obj.read(n)

    def read_all(self) -> bytes:
        '''Returns all the data from the actual offset up to the end.'''
        return self.obj.read()
