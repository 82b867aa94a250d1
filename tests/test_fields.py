import pytest

from exestruct.enum import Terminator
from exestruct.exceptions import UnpackException, PackException, UnknownTypeException
from exestruct.fields import (
    StructField,
    StringField,
    parse_int,
    u8,
    s8,
    u16le,
    s16le,
    u16be,
    u32le,
    s32le,
    stringz,
    fixed_string,
)
from exestruct.streams import Stream


def test_structfield_sizes():
    assert u8().size == 1
    assert s8().size == 1
    assert u16le().size == 2
    assert s16le().size == 2
    assert u16be().size == 2
    assert u32le().size == 4
    assert s32le().size == 4
    assert StructField('q').size == 8

    with pytest.raises(UnknownTypeException):
        StructField('x')


def test_structfield_unpack():
    data = b'\xfe\xff\x01\x02\x03\x04'

    assert u8().unpack(Stream(data)) == 0xfe
    assert s8().unpack(Stream(data)) == -2
    assert u16le().unpack(Stream(data)) == 0xfffe
    assert s16le().unpack(Stream(data)) == -2
    assert u16be().unpack(Stream(data)) == 0xfeff
    assert u32le().unpack(Stream(data).seek(2)) == 0x04030201

    stream = Stream(data)
    u16le().unpack(stream)
    assert stream.tell() == 2


def test_structfield_pack():
    stream = Stream(b'\x00' * 4)

    s16le().pack(stream, -2)
    u16be().pack(stream, 0x1234)

    assert stream.getvalue() == b'\xfe\xff\x12\x34'


def test_structfield_pack_out_of_range():
    """A value that doesn't fit leaves the data untouched."""
    stream = Stream(b'\x00' * 2)

    with pytest.raises(PackException):
        u8().pack(stream, 0x100)

    with pytest.raises(PackException):
        u16le().pack(stream, -1)

    with pytest.raises(PackException):
        s8().pack(stream, 128)

    with pytest.raises(PackException):
        u8().pack(stream, '1')

    with pytest.raises(PackException):
        u8().pack(stream, True)

    assert stream.getvalue() == b'\x00\x00'


def test_parse_int():
    assert parse_int('10') == 10
    assert parse_int('0x10') == 16
    assert parse_int('-3') == -3
    assert parse_int('007') == 7

    with pytest.raises(ValueError):
        parse_int('ten')

    assert u16le().parse('0x1f') == 0x1f
    assert stringz(4).parse('0x1f') == '0x1f'


def test_stringz():
    field = stringz(6)

    assert field.size == 6
    assert field.capacity == 5
    assert field.unpack(Stream(b'abc\x00zz')) == 'abc'

    with pytest.raises(UnpackException):
        field.unpack(Stream(b'abcdef'))

    stream = Stream(b'\xff' * 6)
    field.pack(stream, 'hello')
    assert stream.getvalue() == b'hello\x00'
    assert stream.tell() == 6

    with pytest.raises(PackException):
        field.pack(Stream(b'\x00' * 6), 'hello!')


def test_fixed_string():
    field = fixed_string(3)

    assert field.capacity == 3
    assert field.unpack(Stream(b'ABC')) == 'ABC'
    assert field.unpack(Stream(b'A\x00\x00')) == 'A'

    stream = Stream(b'ABC')
    field.pack(stream, 'Z')
    assert stream.getvalue() == b'Z\x00\x00'


def test_string_invalid_values():
    field = stringz(8)
    stream = Stream(b'\x00' * 8)

    with pytest.raises(PackException):
        field.pack(stream, 'a\x00b')

    with pytest.raises(PackException):
        field.pack(stream, 42)

    with pytest.raises(UnknownTypeException):
        StringField(1, terminator=Terminator.REQUIRED)

    with pytest.raises(UnknownTypeException):
        StringField(0, terminator=Terminator.OPTIONAL)


def test_string_unchanged_keeps_padding():
    """The bytes after the terminator often contain garbage: writing the same
    text must not replace them with NULs."""
    data = b'abc\x00\x12\x34'
    stream = Stream(data)

    stringz(6).pack(stream, 'abc')

    assert stream.tell() == 6
    assert stream.getvalue() == data

    stream.seek(0)
    stringz(6).pack(stream, 'ab')

    assert stream.getvalue() == b'ab\x00\x00\x00\x00'


def test_string_encoding():
    """The texts are in the DOS codepage."""
    stream = Stream(b'\x82\x00\x00')

    assert stringz(3).unpack(stream) == 'é'

    stream.seek(0)
    stringz(3).pack(stream, 'à')
    assert stream.getvalue() == b'\x85\x00\x00'

    with pytest.raises(PackException):
        stringz(3).pack(stream.seek(0), '€')
