"""
A Field is "fundamental" datatype from the format point of view, something directly
unpackable from a stream without need of sub components.
"""
import logging
import struct
from enum import Enum

from .meta import FieldBase, Endianess
from .exceptions import InvalidFieldException, MagicException


logger = logging.getLogger(__name__)

# size in bytes of the addressing unit used by the NCSD/NCCH containers
MEDIA_UNIT_SIZE = 0x200


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, father=None, default=None, endianess=Endianess.LITTLE_ENDIAN, is_magic=False):
        super().__init__()
        self.name = name
        self.father = father
        self.default = default
        self.offset = None
        self.endianess = endianess
        self.is_magic = is_magic

        self.init()

    def init(self):
        self.value = self.value_from_default()
        self.raw = b''

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def check_magic(self, value):
        if self.is_magic and value != self.default:
            logger.debug('the magic doesn\'t correspond: %r != %r', value, self.default)
            raise MagicException(expected=self.default, found=value)

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module unpacking
    integers from bytes.

    The main advantage is the possibility to indicate via the "enum" argument some subclass
    of enum.Enum so to have directly a representation of the integer value of the field itself;
    a value not present in the enum is an InvalidFieldException.
    """

    def __init__(self, format, default=0, enum=None, **kw):
        self.format = format
        self.enum = enum
        super().__init__(default=default, **kw)

    def __repr__(self):
        if self.enum and isinstance(self.value, Enum):
            return f'<{self.__class__.__name__}({self.value!r})>'

        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def _unpack_enum(self, value: int) -> Enum:
        try:
            return self.enum(value)
        except ValueError:
            logger.debug(f'enum {self.enum!r} doesn\'t have element with value 0x{value:x} in it')
            raise InvalidFieldException(self.name, value)

    def unpack(self, stream):
        self.offset = stream.tell()
        self.raw = stream.read_exact(self.size)

        value = struct.unpack(self.get_format(), self.raw)[0]
        self.check_magic(value)

        if self.enum:
            value = self._unpack_enum(value)

        self.value = value


class MediaUnitField(StructField):
    """Unsigned 32 bits integer counting media units: the value is converted to bytes,
    the original count remains available as "units"."""

    def __init__(self, **kw):
        self.units = 0
        super().__init__('I', **kw)

    def unpack(self, stream):
        super().unpack(stream)
        self.units = self.value
        self.value = self.units * MEDIA_UNIT_SIZE


class StringField(Field):
    """Represent a contiguous chunk of bytes."""

    def __init__(self, n=None, **kw):
        if n is None and 'default' not in kw:
            raise ValueError(f"StringField must have 'n' or 'default' indicated!")

        self.length = n or len(kw['default'])

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def __len__(self):
        return self.length

    def value_from_default(self):
        return b'\x00' * self.length if not self.default else self.default

    def _get_size(self):
        return self.length

    def unpack(self, stream):
        self.offset = stream.tell()
        self.raw = stream.read_exact(self.length)
        self.check_magic(self.raw)
        self.value = self.raw


class ArrayField(Field):
    '''Unpack a fixed number of elements, all shaped like the field passed as prototype.

    This class must behave like a list in python, at least for what concerns
    indexing, iteration and length.
    '''

    def __init__(self, field, n, **kw):
        if not isinstance(n, int) or n < 0:
            raise ValueError('n is \'%s\' must be a non negative integer' % n)

        self.field = field
        self.n = n

        super().__init__(**kw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value!r})>'

    def __getitem__(self, item):
        return self.value[item]

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    def value_from_default(self):
        return []

    def _get_size(self):
        return self.field.size * self.n

    def instance_element(self):
        return self.field.create(father=self)  # pass the father so that we don't lose the hierarchy

    def unpack(self, stream):
        self.offset = stream.tell()
        self.value = []
        for index in range(self.n):
            element = self.instance_element()
            element.name = '%s[%d]' % (self.name, index)
            element.unpack(stream)
            self.value.append(element)

        self.raw = b''.join(_.raw for _ in self.value)
