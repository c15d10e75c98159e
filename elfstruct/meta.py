import logging
from enum import Enum, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class FieldDescriptor(object):
    """Wrapper around field access of a Field related class.

    From the class it returns the Field declaration, from an instance
    the value unpacked for it."""

    def __init__(self, field_instance: "FieldBase", field_name: str):
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, type=None):
        if instance is None:
            return self.field

        data = instance.__dict__

        if self.field.name not in data:
            # it happens when a Dependency refers to a field not unpacked yet
            raise AttributeError(f"field '{self.field.name}' of '{instance.__class__.__name__}' is not unpacked")

        return data[self.field.name]

    def __set__(self, instance, value):
        raise AttributeError(f"field '{self.field.name}' of '{instance.__class__.__name__}' is read-only")


class FieldBase(object):

    def contribute_to_chunk(self, cls, name):
        if not getattr(cls, name, None):
            setattr(cls, name, FieldDescriptor(self, name))
        else:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')


class Meta(object):
    """Class containing metadata about the abstraction"""

    def __init__(self):
        self.fields = []


class MetaChunk(type):

    def __new__(cls, names, bases, attrs):
        '''All of this is a big hack, maybe too inspired by how Django does a similar thing!'''
        module = attrs.pop('__module__')
        classcell = attrs.pop('__classcell__', None)

        new_attrs = {
            '__module__': module,
        }
        if classcell is not None:
            new_attrs['__classcell__'] = classcell
        new_cls = super(MetaChunk, cls).__new__(cls, names, bases, new_attrs)

        cls.logger = logging.getLogger(__name__)

        new_cls._meta = Meta()

        # handle inheritance
        parents = [_ for _ in bases if isinstance(_, MetaChunk)]
        for parent in parents:
            for obj_name in parent._meta.fields:
                new_cls._meta.fields.append(obj_name)

        for obj_name, obj in attrs.items():
            new_cls.add_to_class(obj_name, obj)

        new_cls.check_dependencies()

        return new_cls

    def add_to_class(cls, name, value):
        if isinstance(value, FieldBase):
            cls.logger.debug('contribute_to_chunk() found for field \'%s\'' % name)
            cls._meta.fields.append(name)
            value.contribute_to_chunk(cls, name)
        else:
            setattr(cls, name, value)

    def check_dependencies(cls):
        '''The fields are unpacked in order, so a field can depend only on
        the ones that precede it (or on the size unpacked so far).'''
        available = {'size'}
        for name in cls._meta.fields:
            field = getattr(cls, name)
            for argument, dependency in field.get_dependencies().items():
                head = dependency.path[0]
                if head not in available:
                    raise TypeError(
                        f"'{cls.__name__}.{name}' has argument '{argument}' depending on "
                        f"'{head}' that is not unpacked before it")
            available.add(name)
