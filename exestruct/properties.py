import logging
from typing import List, Sequence

from .fields import parse_int
from .exceptions import PackException


class Derived:
    '''This makes a relation between some raw attributes and a composite one.

    After the table is unpacked the raw attributes named by "sources" are
    merged into a single attribute named "id" and removed from the result;
    before packing the composite value is split back into the raw ones.

    In practice this class allows to write something like

        class Game(SimpleHandler):
            attributes = [
                Attribute('score.digit.1', u8(), offset=0x100),
                Attribute('score.digit.2', u8()),
            ]
            derived = [
                DecimalDigits('score', ['score.digit.1', 'score.digit.2']),
            ]

    and have the user deal only with "score".

    The subclasses define the arithmetic via merge() and split().
    '''
    def __init__(self, id: str, sources: Sequence[str], desc=None, value_type=None, min=None, max=None):
        self.id = id
        self.sources = list(sources)
        self.desc = desc
        self.value_type = value_type
        self.min = min
        self.max = max
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.id} <- {",".join(self.sources)})>'

    def merge(self, values: List):
        raise NotImplementedError(f"method {self.__class__.__name__}.merge() not implemented")

    def split(self, value) -> List:
        raise NotImplementedError(f"method {self.__class__.__name__}.split() not implemented")

    def parse(self, text):
        return parse_int(text)


class DecimalDigits(Derived):
    '''Each source stores a single decimal digit, the first one is the most significant.'''

    def merge(self, values):
        value = 0
        for digit in values:
            value = value * 10 + digit

        self.logger.debug('merged digits %r into %d for \'%s\'', values, value, self.id)

        return value

    def split(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise PackException(chain=[self.id], reason=f'expected an integer, got {value!r}')

        if value < 0 or value >= 10 ** len(self.sources):
            raise PackException(
                chain=[self.id],
                reason=f'{value} doesn\'t fit in {len(self.sources)} decimal digits')

        digits = []
        for _ in self.sources:
            digits.append(value % 10)
            value //= 10

        return list(reversed(digits))
