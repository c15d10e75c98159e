class ElfStructException(Exception):
    '''Base class to extend in order to throw exception in elfstruct.

    It takes a single argument that represents the chain of the layers that
    caused the exception: the innermost label comes first and every record
    the exception passes through appends the name of the field it was
    unpacking.
    '''

    def __init__(self, chain=None):
        self.chain = [] if chain is None else chain
        super().__init__()

    @property
    def cause(self) -> str:
        return 'parsing failed'

    def __str__(self):
        if not self.chain:
            return self.cause

        return '%s: %s' % (' -> '.join(self.chain), self.cause)


class UnpackException(ElfStructException):
    '''The data is malformed: feeding more bytes is not going to help.'''
    pass


class MagicException(UnpackException):

    def __init__(self, expected: bytes, found: bytes, chain=None):
        self.expected = expected
        self.found = found
        super().__init__(chain=chain)

    @property
    def cause(self) -> str:
        return 'expected %r, found %r' % (self.expected, self.found)


class UnknownCodeException(UnpackException):
    '''The value read is not in the table of the enumeration.'''

    def __init__(self, enum_name: str, raw_value: int, chain=None):
        self.enum_name = enum_name
        self.raw_value = raw_value
        super().__init__(chain=chain)

    @property
    def cause(self) -> str:
        return 'unknown %s code 0x%x' % (self.enum_name, self.raw_value)


class UnsupportedEncodingException(UnpackException):

    def __init__(self, encoding, chain=None):
        self.encoding = encoding
        super().__init__(chain=chain)

    @property
    def cause(self) -> str:
        return 'unsupported encoding %s' % self.encoding


class UnsupportedClassException(UnpackException):

    def __init__(self, elf_class, chain=None):
        self.elf_class = elf_class
        super().__init__(chain=chain)

    @property
    def cause(self) -> str:
        return 'unsupported class %s' % self.elf_class


class IncompleteException(ElfStructException):
    '''The stream ended before the field did: retry with more data.

    Note: it's not a subclass of UnpackException.'''

    def __init__(self, needed: int, chain=None):
        self.needed = needed
        super().__init__(chain=chain)

    @property
    def cause(self) -> str:
        return 'incomplete input, %d more byte(s) needed' % self.needed
