"""
Core module for the abstraction of a file format

"""
import logging
from typing import Tuple, List, Dict

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import ThumbnailerException, MagicException


logger = logging.getLogger(__name__)


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: the fields
    declared as class attributes are unpacked one after the other, in the
    order of declaration, starting from the current position of the stream.

    A Chunk can contain sub-chunks.

    The attribute "pretty_name" is used to name the format when one of
    its magic fields doesn't correspond.
    """
    pretty_name = None

    def __init__(self, stream=None, **kwargs):
        super().__init__(**kwargs)

        if stream is not None:
            self.unpack(stream if isinstance(stream, Stream) else Stream(stream))

    def init(self):
        pass

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, field in self.get_fields():
            msg += '%s: %s\n' % (field_name, repr(field))
        return msg

    def _get_size(self):
        '''the size is derived from the subchunks'''
        size = 0
        for _, field in self.get_fields():
            size += field.size

        return size

    @property
    def value(self) -> Dict[str, object]:
        return {name: field.value for name, field in self.get_fields()}

    @property
    def raw(self) -> bytes:
        return b''.join(field.raw for _, field in self.get_fields())

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        result = {}
        for name, field in self.get_fields():
            result[name] = (field.offset, field.size)

        return result

    def unpack(self, stream):
        '''Transform the binary data at the actual offset of the stream in the
        representation given by the class this method is implemented.

        The first field that fails stops the unpacking: the exception goes up
        with the name of the field appended to its chain.
        '''
        self.offset = stream.tell()
        for field_name, field in self.get_fields():
            logger.debug('unpacking %s.%s at 0x%x' % (self.__class__.__name__, field_name, stream.tell()))

            try:
                field.unpack(stream)
            except ThumbnailerException as e:
                e.chain.append(field_name)
                if isinstance(e, MagicException) and e.format_name is None:
                    e.format_name = self.pretty_name
                raise
