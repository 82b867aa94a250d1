import pytest

import exestruct
from exestruct.core import Handler, Identification, Metadata
from exestruct.enum import Confidence
from exestruct.exceptions import DuplicateHandlerException
from exestruct.registry import Registry


class Fixed(Handler):
    '''Handler always giving the same answer'''

    def __init__(self, id, valid):
        super().__init__()
        self._id = id
        self.valid = valid

    def metadata(self):
        return Metadata(self._id, self._id.upper())

    def identify(self, content):
        return Identification(self.valid, f'always {self.valid.name}')


def test_find_handler_match_wins():
    """The first handler sure about the content is returned alone,
    also when some ambiguous ones come before it."""
    ambiguous = Fixed('maybe', Confidence.AMBIGUOUS)
    match = Fixed('sure', Confidence.MATCH)
    nope = Fixed('nope', Confidence.NO_MATCH)

    assert Registry([ambiguous, match]).find_handler(b'') == [match]
    assert Registry([match, ambiguous]).find_handler(b'') == [match]
    assert Registry([nope, match]).find_handler(b'') == [match]


def test_find_handler_ambiguous():
    first = Fixed('first', Confidence.AMBIGUOUS)
    second = Fixed('second', Confidence.AMBIGUOUS)
    nope = Fixed('nope', Confidence.NO_MATCH)

    assert Registry([first, nope, second]).find_handler(b'') == [first, second]
    assert Registry([nope]).find_handler(b'') == []
    assert Registry([]).find_handler(b'') == []


def test_find_handler_wrong_content():
    with pytest.raises(TypeError):
        Registry([]).find_handler('text')


def test_get_handler():
    first = Fixed('first', Confidence.AMBIGUOUS)
    registry = Registry([first])

    assert registry.get_handler('first') is first
    assert registry.get_handler('second') is None
    assert len(registry) == 1
    assert registry.list_handlers() == [first]


def test_duplicated_handler():
    with pytest.raises(DuplicateHandlerException):
        Registry([
            Fixed('same', Confidence.MATCH),
            Fixed('same', Confidence.NO_MATCH),
        ])


def test_default_registry():
    ids = [_.metadata().id for _ in exestruct.list_handlers()]

    assert ids == ['exe-ddave', 'exe-nomad']
    assert exestruct.get_handler('exe-ddave').metadata().title == 'Dangerous Dave'
    assert exestruct.find_handler(b'\x00' * 0x100) == []


class Counting(Fixed):

    def __init__(self, id, valid):
        super().__init__(id, valid)
        self.calls = 0

    def identify(self, content):
        self.calls += 1
        return super().identify(content)


def test_find_handler_stops_at_match():
    """The handlers after the one sure about the content are not asked."""
    nope = Counting('nope', Confidence.NO_MATCH)
    match = Counting('sure', Confidence.MATCH)
    ambiguous = Counting('maybe', Confidence.AMBIGUOUS)

    assert Registry([nope, match, ambiguous]).find_handler(b'') == [match]

    assert nope.calls == 1
    assert match.calls == 1
    assert ambiguous.calls == 0
