"""
Core module for the abstraction of an executable format

"""
import logging
from typing import Dict, List, NamedTuple, Optional

from .attributes import (
    Attribute,
    AttributeMap,
    AttributeValue,
    ContentBundle,
)
from .enum import Confidence
from .fields import Field
from .meta import MetaHandler
from .properties import Derived
from .streams import Stream
from .exceptions import (
    UnpackException,
    PackException,
    AttributeUnpackException,
    AttributePackException,
    DuplicateAttributeException,
    UnknownTypeException,
)


class Metadata(NamedTuple):
    id: str
    title: str
    params: Optional[Dict[str, str]] = None


class Identification(NamedTuple):
    valid: Confidence
    reason: Optional[str] = None


class Handler(metaclass=MetaHandler):
    """
    Base class for the executable formats: to implement a new format subclass
    this and replace its methods with the ones doing the work.

    The content passed to extract() and patch() is a dictionary where the key
    'main' holds the executable itself and any other key holds one of the
    supplementary files returned by supps().
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}>'

    @property
    def id(self) -> str:
        return self.metadata().id

    def metadata(self) -> Metadata:
        raise NotImplementedError(f"method {self.__class__.__name__}.metadata() not implemented")

    def identify(self, content: bytes) -> Identification:
        '''Tell if the content is definitely (MATCH), definitely not (NO_MATCH)
        or possibly (AMBIGUOUS) in this format. A mismatch is not an error.'''
        raise NotImplementedError(f"method {self.__class__.__name__}.identify() not implemented")

    def supps(self, name: str, content: bytes) -> Optional[Dict[str, str]]:
        '''Return None if the format doesn't need other files, otherwise a mapping
        between an identifier and the expected (case-insensitive) filename.

        The names passed in are not converted to lowercase, but any part built by
        the handler (e.g. an extension) must be lowercase.'''
        return None

    def extract(self, content: ContentBundle) -> AttributeMap:
        raise NotImplementedError(f"method {self.__class__.__name__}.extract() not implemented")

    def patch(self, content: ContentBundle, attributes: AttributeMap) -> ContentBundle:
        raise NotImplementedError(f"method {self.__class__.__name__}.patch() not implemented")


class SimpleHandler(Handler):
    """
    Handler for formats that are just a list of typed attributes at byte offsets.

    The subclasses declare the class attribute "attributes" with the table and
    optionally "derived" with the composite attributes built on top of it.

    An attribute without offset starts where the previous one ended: this is
    true both when unpacking and when packing, also when the value of the
    previous attribute is not going to be written.
    """

    def get_attributes(self) -> List[Attribute]:
        return self._meta.attributes

    def get_derived(self) -> List[Derived]:
        return self._meta.derived

    @staticmethod
    def identify_by_signature(content: bytes, offset: int, expected) -> Identification:
        signature = bytes(content[offset:offset + len(expected)])

        if len(signature) < len(expected):
            return Identification(
                Confidence.NO_MATCH,
                f'Content too short to hold the signature at offset 0x{offset:x} '
                f'({len(content)} bytes).')

        for idx, (wanted, got) in enumerate(zip(expected, signature)):
            if wanted != got:
                return Identification(
                    Confidence.NO_MATCH,
                    f'Signature mismatch at offset 0x{offset:x}, index {idx} '
                    f'(expected 0x{wanted:02x}, got 0x{got:02x}).')

        return Identification(Confidence.MATCH)

    def _get_field(self, attribute: Attribute) -> Field:
        if not isinstance(attribute.type, Field):
            raise UnknownTypeException(
                chain=[self.id, attribute.id],
                reason=f'unknown attribute data type {attribute.type!r}')

        return attribute.type

    def _seek(self, stream: Stream, attribute: Attribute) -> int:
        if attribute.offset is not None:
            stream.seek(attribute.offset)

        self.logger.debug('attribute %s.%s at offset 0x%x', self.id, attribute.id, stream.tell())

        return stream.tell()

    def extract(self, content: ContentBundle) -> AttributeMap:
        stream = Stream(content['main'])

        attributes: AttributeMap = {}
        for attribute in self.get_attributes():
            field = self._get_field(attribute)
            offset = self._seek(stream, attribute)

            try:
                value = field.unpack(stream)
            except UnpackException as e:
                raise AttributeUnpackException(
                    chain=[self.id, attribute.id],
                    reason=f'at offset 0x{offset:x}: {e.reason}') from e

            stream.seek(offset + field.size)

            if attribute.value_offset:
                value += attribute.value_offset

            if attribute.id in attributes:
                raise DuplicateAttributeException(
                    chain=[self.id, attribute.id], reason='attribute id is declared more than once')

            attributes[attribute.id] = AttributeValue.from_attribute(attribute, value)

        return self.post_extract(attributes)

    def post_extract(self, attributes: AttributeMap) -> AttributeMap:
        '''Replace the raw sources of each derived attribute with the composite one'''
        for derived in self.get_derived():
            values = [attributes.pop(_).value for _ in derived.sources]
            attributes[derived.id] = AttributeValue(
                derived.id,
                derived.merge(values),
                type=derived,
                desc=derived.desc,
                value_type=derived.value_type,
                min=derived.min,
                max=derived.max,
            )

        return attributes

    def pre_patch(self, attributes: AttributeMap) -> AttributeMap:
        '''Return a new map where each composite value is split back into its sources,
        the map passed in is not modified.'''
        updated = dict(attributes)

        for derived in self.get_derived():
            composite = updated.pop(derived.id, None)
            if composite is None:
                continue

            try:
                values = derived.split(composite.value)
            except PackException as e:
                raise AttributePackException(chain=[self.id, derived.id], reason=e.reason) from e

            for source, value in zip(derived.sources, values):
                updated[source] = AttributeValue(source, value)

        return updated

    @staticmethod
    def _to_stored(attribute: Attribute, value):
        if not attribute.value_offset:
            return value

        if isinstance(value, bool) or not isinstance(value, int):
            raise PackException(chain=[], reason=f'expected an integer, got {value!r}')

        return value - attribute.value_offset

    def patch(self, content: ContentBundle, attributes: AttributeMap) -> ContentBundle:
        attributes = self.pre_patch(attributes)
        stream = Stream(content['main'])

        known = set()
        for attribute in self.get_attributes():
            field = self._get_field(attribute)
            offset = self._seek(stream, attribute)
            known.add(attribute.id)

            entry = attributes.get(attribute.id)
            if entry is not None:
                try:
                    field.pack(stream, self._to_stored(attribute, entry.value))
                except PackException as e:
                    raise AttributePackException(
                        chain=[self.id, attribute.id],
                        reason=f'at offset 0x{offset:x}: {e.reason}') from e

            # also when nothing was written, otherwise the attributes that
            # follow without an offset would land in the wrong place
            stream.seek(offset + field.size)

        for name in attributes:
            if name not in known:
                self.logger.debug('ignoring attribute \'%s\' unknown to %s', name, self.id)

        result = dict(content)
        result['main'] = stream.getvalue()

        return result
