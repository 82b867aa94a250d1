import logging

from bitstring import Bits, BitStream, ReadError

from .exceptions import UnpackException, PackException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around an in-memory buffer to
    uniform its properties: mainly we need a byte-oriented cursor
    that can be moved around and that never grows the buffer.

    The cursor is kept here and not in the BitStream since a seek
    at the very end of the data must be allowed (the next sequential
    field will fail when reading, not when seeking).'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a bit stream'''
        self._type = type(obj)
        self.obj = obj
        self._cursor = 0

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise TypeError('\'%s\' is not a bytes-like object' % self._type.__name__)

        init_method()

    def __len__(self):
        return len(self.obj) // 8

    def __repr__(self):
        return f'<{self.__class__.__name__}(size=0x{len(self):x}, cursor=0x{self._cursor:x})>'

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = BitStream(bytes=self.obj)

    def init_bytearray(self):
        self.obj = BitStream(bytes=bytes(self.obj))

    def init_memoryview(self):
        self.obj = BitStream(bytes=self.obj.tobytes())

    def seek(self, offset):
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        if offset < 0:
            raise ValueError(f'negative offset {offset}')

        self._cursor = offset

        return self

    def tell(self):
        return self._cursor

    def _check_available(self, size, exc):
        if self._cursor + size > len(self):
            raise exc(chain=[], reason=(
                f'{size} bytes needed at offset 0x{self._cursor:x} '
                f'but the data is only 0x{len(self):x} bytes long'))

    def read(self, fmt, size):
        '''Read a single value with the bitstring format indicated, "size" is the
        number of bytes the format is going to consume.'''
        self._check_available(size, UnpackException)

        self.obj.bytepos = self._cursor
        try:
            value = self.obj.read(fmt)
        except ReadError as e:
            raise UnpackException(chain=[], reason=str(e)) from e

        self._cursor += size

        return value

    def read_bytes(self, size):
        return self.read(f'bytes:{size}', size)

    def write(self, data):
        '''Overwrite the data at the cursor; the buffer never changes its size.'''
        bits = data if isinstance(data, Bits) else Bits(bytes=data)
        size = len(bits) // 8

        self._check_available(size, PackException)

        logger.debug('writing %d bytes at offset 0x%x', size, self._cursor)

        self.obj.overwrite(bits, self._cursor * 8)
        self._cursor += size

    def getvalue(self):
        return self.obj.tobytes()
