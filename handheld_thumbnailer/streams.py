import io
import logging
import os

from .exceptions import IOFailureException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file objects to
    uniform their properties: mainly we need reads that return exactly
    the number of bytes requested and seeks that fail loudly, reporting
    both as IOFailureException.

    A Stream closes only the file objects it opened itself.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self.obj = obj
        self._owned = False

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_file)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self.obj)

    def close(self):
        if self._owned:
            self.obj.close()

    def init_str(self):
        '''We think this is a path'''
        self._open_path()

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_bytes
    init_memoryview = init_bytes

    def init_Stream(self):
        # don't wrap twice, the original owner keeps the ownership
        self.obj = self.obj.obj

    def init_file(self):
        if isinstance(self.obj, os.PathLike):
            self._open_path()
            return

        if not (hasattr(self.obj, 'read') and hasattr(self.obj, 'seek')):
            raise ValueError('\'%s\' is not something we can read from' % self.obj.__class__.__name__)

    def _open_path(self):
        logger.debug('opening path \'%s\'' % self.obj)
        try:
            self.obj = open(self.obj, 'rb')
        except OSError as e:
            raise IOFailureException('cannot open \'%s\': %s' % (self.obj, e.strerror)) from e
        self._owned = True

    def tell(self):
        return self.obj.tell()

    def seek(self, offset, whence=io.SEEK_SET):
        '''Seek absolutely (SEEK_SET) or relatively to the current position (SEEK_CUR).

        Positions before the start of the stream are refused, some file objects
        would silently clamp them to zero.'''
        if whence == io.SEEK_CUR:
            offset += self.obj.tell()
        elif whence != io.SEEK_SET:
            raise ValueError('only SEEK_SET and SEEK_CUR are supported')

        if offset < 0:
            raise IOFailureException('seek to negative offset %d' % offset)

        try:
            return self.obj.seek(offset)
        except (OSError, ValueError, OverflowError) as e:
            raise IOFailureException('seek to offset 0x%x failed: %s' % (offset, e)) from e

    def skip(self, n):
        '''Move forward (or backward for negative n) from the current position'''
        logger.debug('skipping %d bytes from 0x%x' % (n, self.obj.tell()))
        return self.seek(n, io.SEEK_CUR)

    def read_exact(self, n):
        offset = self.obj.tell()
        try:
            data = self.obj.read(n)
        except OSError as e:
            raise IOFailureException('read of %d bytes at 0x%x failed: %s' % (n, offset, e)) from e

        if len(data) != n:
            raise IOFailureException('short read at 0x%x: wanted %d bytes, got %d' % (offset, n, len(data)))

        return data
