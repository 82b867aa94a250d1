import pytest

from exestruct.attributes import Attribute, AttributeValue
from exestruct.core import Handler, Identification, Metadata, SimpleHandler
from exestruct.enum import Confidence
from exestruct.exceptions import (
    AttributePackException,
    AttributeUnpackException,
    DuplicateAttributeException,
    SchemaException,
    UnknownTypeException,
)
from exestruct.fields import u8, u16le, stringz
from exestruct.properties import DecimalDigits


class Dummy(SimpleHandler):
    attributes = [
        Attribute('a', u16le(), offset=2, desc='first'),
        Attribute('b', stringz(4)),
        Attribute('c', u8()),
        Attribute('d', u8(), offset=9, value_offset=1, min=1, max=10),
    ]

    def metadata(self):
        return Metadata('dummy', 'Dummy format')

    def identify(self, content):
        return self.identify_by_signature(content, 0, b'DU')


CONTENT = b'DU' + b'\x34\x12' + b'ab\x00\x00' + b'\x07' + b'\x02' + b'\x00' * 6


def test_extract():
    """Attributes without offset continue after the previous one."""
    attributes = Dummy().extract({'main': CONTENT})

    assert sorted(attributes) == ['a', 'b', 'c', 'd']
    assert attributes['a'].value == 0x1234
    assert attributes['a'].desc == 'first'
    assert attributes['a'].offset == 2
    assert attributes['b'].value == 'ab'
    assert attributes['c'].value == 7
    # value_offset is added to what is stored
    assert attributes['d'].value == 3


def test_round_trip():
    handler = Dummy()
    content = {'main': CONTENT}

    patched = handler.patch(content, handler.extract(content))

    assert patched['main'] == CONTENT


def test_patch_partial_map():
    """An attribute missing from the map is left alone and the following ones
    still land at the right offset."""
    handler = Dummy()
    attributes = handler.extract({'main': CONTENT})

    attributes['c'].value = 9
    del attributes['b']

    patched = handler.patch({'main': CONTENT}, attributes)

    assert patched['main'][4:8] == b'ab\x00\x00'
    assert patched['main'][8] == 9


def test_patch_value_offset():
    handler = Dummy()
    attributes = handler.extract({'main': CONTENT})

    attributes['d'].value = 5

    patched = handler.patch({'main': CONTENT}, attributes)

    assert patched['main'][9] == 4
    assert handler.extract(patched)['d'].value == 5


def test_patch_doesnt_mutate_input():
    handler = Dummy()
    content = {'main': CONTENT, 'extra': b'\x01'}
    attributes = handler.extract(content)
    attributes['a'].value = 0xcafe

    patched = handler.patch(content, attributes)

    assert content['main'] == CONTENT
    assert patched['main'][2:4] == b'\xfe\xca'
    assert patched['extra'] == b'\x01'
    assert len(patched['main']) == len(CONTENT)


def test_patch_unknown_attribute_is_ignored():
    handler = Dummy()

    patched = handler.patch({'main': CONTENT}, {'nonexistent': AttributeValue('nonexistent', 1)})

    assert patched['main'] == CONTENT


def test_patch_errors():
    handler = Dummy()
    attributes = handler.extract({'main': CONTENT})
    attributes['b'].value = 'toolong'

    with pytest.raises(AttributePackException) as excinfo:
        handler.patch({'main': CONTENT}, attributes)

    assert excinfo.value.chain == ['dummy', 'b']
    assert str(excinfo.value).startswith('dummy.b: at offset 0x4')


def test_extract_errors():
    """The content is too short for the last attribute."""
    with pytest.raises(AttributeUnpackException) as excinfo:
        Dummy().extract({'main': CONTENT[:9]})

    assert excinfo.value.chain == ['dummy', 'd']


def test_identify_by_signature():
    handler = Dummy()

    assert handler.identify(CONTENT) == Identification(Confidence.MATCH)

    result = handler.identify(b'DX' + CONTENT[2:])
    assert result.valid == Confidence.NO_MATCH
    assert 'index 1' in result.reason

    result = handler.identify(b'D')
    assert result.valid == Confidence.NO_MATCH
    assert 'too short' in result.reason


def test_table_defects():
    """A broken table is detected when the class is created."""
    with pytest.raises(DuplicateAttributeException):
        class Duplicated(SimpleHandler):
            attributes = [
                Attribute('a', u8(), offset=0),
                Attribute('a', u8()),
            ]

    with pytest.raises(UnknownTypeException):
        class Unknown(SimpleHandler):
            attributes = [
                Attribute('a', 'uint8', offset=0),
            ]

    with pytest.raises(SchemaException):
        class MissingSource(SimpleHandler):
            attributes = [
                Attribute('a', u8(), offset=0),
            ]
            derived = [
                DecimalDigits('ab', ['a', 'b']),
            ]


def test_table_inheritance():
    class Child(Dummy):
        pass

    assert [_.id for _ in Child().get_attributes()] == ['a', 'b', 'c', 'd']


def test_handler_contract():
    """The base class must be subclassed."""
    handler = Handler()

    for method, args in (
        (handler.metadata, ()),
        (handler.identify, (b'',)),
        (handler.extract, ({'main': b''},)),
        (handler.patch, ({'main': b''}, {})),
    ):
        with pytest.raises(NotImplementedError):
            method(*args)

    # by default no other file is needed
    assert handler.supps('GAME.EXE', b'') is None


class Scores(SimpleHandler):
    attributes = [
        Attribute('hsc.digit.1', u8(), offset=1),
        Attribute('hsc.digit.2', u8()),
        Attribute('hsc.digit.3', u8()),
        Attribute('hsc.name', stringz(4)),
    ]
    derived = [
        DecimalDigits('hsc.score', ['hsc.digit.1', 'hsc.digit.2', 'hsc.digit.3'], desc='score'),
    ]

    def metadata(self):
        return Metadata('scores', 'Scores')


def test_derived_extract():
    attributes = Scores().extract({'main': b'\xff\x01\x00\x05ABC\x00'})

    assert sorted(attributes) == ['hsc.name', 'hsc.score']
    assert attributes['hsc.score'].value == 105
    assert attributes['hsc.score'].desc == 'score'


def test_derived_patch():
    handler = Scores()
    content = {'main': b'\xff\x01\x00\x05ABC\x00'}
    attributes = handler.extract(content)

    attributes['hsc.score'].value = 987
    patched = handler.patch(content, attributes)

    assert patched['main'] == b'\xff\x09\x08\x07ABC\x00'
    # the composite is still there for the caller
    assert 'hsc.score' in attributes
    assert 'hsc.digit.1' not in attributes

    attributes['hsc.score'].value = 1000
    with pytest.raises(AttributePackException) as excinfo:
        handler.patch(content, attributes)

    assert excinfo.value.chain == ['scores', 'hsc.score']


def test_decimal_digits():
    digits = DecimalDigits('score', ['d1', 'd2', 'd3', 'd4', 'd5'])

    assert digits.merge([1, 0, 0, 0, 0]) == 10000
    assert digits.split(12345) == [1, 2, 3, 4, 5]
    assert digits.split(7) == [0, 0, 0, 0, 7]
    assert digits.parse('0x10') == 16
