import copy
import logging
from enum import Enum, auto


logger = logging.getLogger(__name__)


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class FieldDescriptor(object):
    """Wrapper around field access of a Field related class.

    The field declared in the class body is only a prototype: every
    instance gets its own copy the first time the attribute is accessed."""

    def __init__(self, field_instance: "FieldBase", field_name: str):
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, type=None):
        if instance is None:
            return self.field

        data = instance.__dict__

        if self.field.name not in data:
            logger.debug("create new field for field named '%s'", self.field.name)
            data[self.field.name] = self.field.create(father=instance)

        return data[self.field.name]


# attributes every field already has, a sub field can't be named like them
RESERVED_NAMES = ('name', 'father', 'default', 'offset', 'endianess', 'is_magic', 'value', 'raw', 'size')


class FieldBase(object):

    def contribute_to_chunk(self, cls, name):
        if name in RESERVED_NAMES:
            raise AttributeError(f'field name {name} of class {cls.__name__} clashes with an attribute of Field')

        if name in cls.__dict__:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

        setattr(cls, name, FieldDescriptor(self, name))

    def create(self, father):
        instance = copy.deepcopy(self)
        instance.father = father
        return instance


class Meta(object):
    """Class containing metadata about the abstraction"""

    def __init__(self):
        self.fields = []


class MetaChunk(type):

    def __new__(cls, names, bases, attrs):
        '''Collect the fields in declaration order, a little inspired by how Django does a similar thing'''
        fields = {name: value for name, value in attrs.items() if isinstance(value, FieldBase)}
        new_attrs = {name: value for name, value in attrs.items() if name not in fields}

        new_cls = super(MetaChunk, cls).__new__(cls, names, bases, new_attrs)

        new_cls._meta = Meta()

        # handle inheritance
        parents = [_ for _ in bases if isinstance(_, MetaChunk)]
        for parent in parents:
            new_cls._meta.fields.extend(parent._meta.fields)

        for obj_name, obj in fields.items():
            new_cls.add_to_class(obj_name, obj)

        return new_cls

    def add_to_class(cls, name, value):
        logger.debug('contribute_to_chunk() for field \'%s\' of %s' % (name, cls.__name__))
        cls._meta.fields.append(name)
        value.contribute_to_chunk(cls, name)
