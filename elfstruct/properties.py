import logging
from enum import Enum, auto
from typing import List


class ChunkPhase(Enum):
    '''Enum to state the actual phase of a chunk'''
    INIT      = 0
    UNPACKING = auto()
    DONE      = auto()


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        class Simple(Chunk):
            endianess = fields.StructField('B', enum=Endianess)
            data = fields.StructField('I', endianess=Dependency('.endianess'))

    and have the byte order used to read the field named 'data' taken from
    the value already unpacked for the field named 'endianess'.

    The expression is inspired from module resolution: the leading '.'
    indicates we refer to a field at the same level, i.e. a sibling inside
    the chunk being unpacked; further components walk into sub-chunks

        Dependency('.e_ident.EI_CLASS')

    The resolved value is passed by value to the unpack() of the field
    that declared the dependency, so the field itself never looks around.
    '''
    def __init__(self, expression: str):
        if not expression.startswith('.'):
            raise ValueError(f"only relative dependencies are supported, '{expression}' is not")

        self.expression = expression
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    def __eq__(self, other):
        return isinstance(other, Dependency) and other.expression == self.expression

    def __hash__(self):
        return hash(self.expression)

    @property
    def path(self) -> List[str]:
        # '.e_ident.EI_CLASS'.split('.') -> ['', 'e_ident', 'EI_CLASS']
        return self.expression.split('.')[1:]

    def resolve(self, chunk):
        '''With this method we resolve the expression with respect to the chunk
        passed as argument.'''
        self.logger.debug('trying to resolve \'%s\' from \'%s\'' % (self.expression, chunk.__class__.__name__))

        value = chunk
        for component_name in self.path:
            value = getattr(value, component_name)

        self.logger.debug(' resolved with value %s' % (value,))

        return value
