"""
A Field is the encoding of an attribute: it knows how many bytes it occupies
and how to move a value from/to a Stream.

Fields don't store values, so the same instance can be shared by many
attributes of a table.
"""
import logging

from bitstring import pack as bitpack, CreationError

from .enum import Endianess, Terminator
from .exceptions import (
    UnpackException,
    PackException,
    UnknownTypeException,
)


def parse_int(text):
    '''Accept the usual python prefixes (0x, 0o, 0b) but also plain numbers
    with leading zeros like "00001".'''
    try:
        return int(text, 0)
    except ValueError:
        return int(text, 10)


class Field(object):
    """Base class to subclass from"""

    def __init__(self, endianess=Endianess.LITTLE_ENDIAN):
        self.logger = logging.getLogger(__name__)
        self.endianess = endianess

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def unpack(self, stream):
        raise NotImplementedError(f"method {self.__class__.__name__}.unpack() not implemented")

    def pack(self, stream, value):
        raise NotImplementedError(f"method {self.__class__.__name__}.pack() not implemented")

    def parse(self, text):
        '''Convert the text typed by a user into a value for this field'''
        return text


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes, using the same format characters.
    """
    FORMATS = {
        'B': ('uint', 8),
        'b': ('int', 8),
        'H': ('uint', 16),
        'h': ('int', 16),
        'I': ('uint', 32),
        'i': ('int', 32),
        'Q': ('uint', 64),
        'q': ('int', 64),
    }

    def __init__(self, format, **kw):
        if format not in self.FORMATS:
            raise UnknownTypeException(chain=[], reason=f'unknown integer format \'{format}\'')

        self.format = format
        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.get_format())

    def get_format(self):
        kind, bits = self.FORMATS[self.format]
        if bits > 8:
            kind += 'le' if self.endianess == Endianess.LITTLE_ENDIAN else 'be'

        return f'{kind}:{bits}'

    def _get_size(self):
        return self.FORMATS[self.format][1] // 8

    def unpack(self, stream):
        return stream.read(self.get_format(), self.size)

    def pack(self, stream, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise PackException(chain=[], reason=f'expected an integer, got {value!r}')

        try:
            raw = bitpack(self.get_format(), value)
        except (CreationError, ValueError) as e:
            raise PackException(chain=[], reason=f'{value} doesn\'t fit in {self.get_format()}') from e

        stream.write(raw)

    def parse(self, text):
        return parse_int(text)


class StringField(Field):
    """Represent a text stored in exactly "n" bytes, padded with NULs.

    With Terminator.REQUIRED at least one NUL must be inside the field, so the
    text can be at most n - 1 characters long."""

    def __init__(self, n, terminator=Terminator.REQUIRED, encoding='cp437', **kw):
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise UnknownTypeException(chain=[], reason=f'invalid string length {n!r}')
        if terminator == Terminator.REQUIRED and n < 2:
            raise UnknownTypeException(chain=[], reason='a terminated string needs at least two bytes')

        self.length = n
        self.terminator = terminator
        self.encoding = encoding

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%d, %s)>' % (self.__class__.__name__, self.length, self.terminator.name)

    def _get_size(self):
        return self.length

    @property
    def capacity(self):
        '''Maximum number of encoded characters'''
        return self.length - 1 if self.terminator == Terminator.REQUIRED else self.length

    def decode(self, raw):
        end = raw.find(b'\x00')

        if end < 0:
            if self.terminator == Terminator.REQUIRED:
                raise UnpackException(chain=[], reason=f'missing terminator in {self.length} bytes ({raw!r})')
            end = len(raw)

        try:
            return raw[:end].decode(self.encoding)
        except UnicodeDecodeError as e:
            raise UnpackException(chain=[], reason=str(e)) from e

    def encode(self, value):
        if not isinstance(value, str):
            raise PackException(chain=[], reason=f'expected a string, got {value!r}')

        try:
            encoded = value.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise PackException(chain=[], reason=str(e)) from e

        if b'\x00' in encoded:
            raise PackException(chain=[], reason='the text can\'t contain NUL characters')

        if len(encoded) > self.capacity:
            raise PackException(chain=[], reason=(
                f'the text is {len(encoded)} characters long but at most {self.capacity} fit'))

        return encoded.ljust(self.length, b'\x00')

    def unpack(self, stream):
        return self.decode(stream.read_bytes(self.length))

    def pack(self, stream, value):
        encoded = self.encode(value)

        # keep what follows the terminator when the text is the same
        position = stream.tell()
        try:
            unchanged = self.decode(stream.read_bytes(self.length)) == value
        except UnpackException:
            unchanged = False

        if unchanged:
            return

        stream.seek(position)
        stream.write(encoded)


def u8():
    return StructField('B')


def s8():
    return StructField('b')


def u16le():
    return StructField('H')


def s16le():
    return StructField('h')


def u16be():
    return StructField('H', endianess=Endianess.BIG_ENDIAN)


def u32le():
    return StructField('I')


def s32le():
    return StructField('i')


def stringz(n):
    '''Fixed length string with a required terminator'''
    return StringField(n, terminator=Terminator.REQUIRED)


def fixed_string(n):
    '''Fixed length string, NUL padded but without a required terminator'''
    return StringField(n, terminator=Terminator.OPTIONAL)
