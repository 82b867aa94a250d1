'''
The unit of a handler table is the Attribute: where a value lives inside
the executable and how it's encoded. Extracting a table produces an
AttributeValue for each Attribute, keyed by id.
'''
from typing import Any, Dict, NamedTuple, Optional

from .fields import Field


class Attribute(NamedTuple):
    '''Immutable entry of a handler table.

    When "offset" is None the attribute starts where the previous one ended,
    so the order of the table matters.

    "value_offset" is added to the stored value to obtain the value shown
    to the user (and subtracted when writing it back). The remaining
    fields are descriptive only.
    '''
    id: str
    type: Field
    offset: Optional[int] = None
    value_offset: Optional[int] = None
    desc: Optional[str] = None
    value_type: Optional[str] = None
    min: Optional[int] = None
    max: Optional[int] = None


class AttributeValue(object):
    '''An attribute together with the value read from (or to write into) the data'''

    def __init__(self, id, value, type=None, offset=None, desc=None, value_type=None, min=None, max=None):
        self.id = id
        self.value = value
        self.type = type
        self.offset = offset
        self.desc = desc
        self.value_type = value_type
        self.min = min
        self.max = max

    @classmethod
    def from_attribute(cls, attribute: Attribute, value: Any) -> "AttributeValue":
        return cls(
            attribute.id,
            value,
            type=attribute.type,
            offset=attribute.offset,
            desc=attribute.desc,
            value_type=attribute.value_type,
            min=attribute.min,
            max=attribute.max,
        )

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.id}={self.value!r})>'

    def __eq__(self, other):
        if not isinstance(other, AttributeValue):
            return NotImplemented

        return self.id == other.id and self.value == other.value

    def parse(self, text: str) -> Any:
        '''Convert the text typed by a user into a value of the right kind.'''
        if self.type is None:
            return text

        return self.type.parse(text)

    def in_range(self, value) -> bool:
        '''min and max are advisory: this only tells if they are respected.'''
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False

        return True


AttributeMap = Dict[str, AttributeValue]
ContentBundle = Dict[str, bytes]


def sorted_attributes(attributes: AttributeMap):
    '''Deterministic order for displaying a map'''
    return [attributes[_] for _ in sorted(attributes)]
