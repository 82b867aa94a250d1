import logging

from .fields import Field
from .properties import Derived
from .exceptions import (
    DuplicateAttributeException,
    UnknownTypeException,
    SchemaException,
)


class Meta(object):
    """Class containing metadata about the table of a handler"""

    def __init__(self, name, attributes=(), derived=()):
        self.name = name
        self.attributes = list(attributes)
        self.derived = list(derived)

        self.validate()

    def validate(self):
        '''Here we catch the defects of a table: since tables are constants the check
        happens once, when the class is created, and never while unpacking.'''
        seen = set()
        for attribute in self.attributes:
            if attribute.id in seen:
                raise DuplicateAttributeException(
                    chain=[self.name, attribute.id], reason='attribute id is declared more than once')
            if not isinstance(attribute.type, Field):
                raise UnknownTypeException(
                    chain=[self.name, attribute.id],
                    reason=f'unknown attribute data type {attribute.type!r}')
            seen.add(attribute.id)

        for derived in self.derived:
            if not isinstance(derived, Derived):
                raise SchemaException(chain=[self.name], reason=f'{derived!r} is not a derived field')
            if derived.id in seen:
                raise DuplicateAttributeException(
                    chain=[self.name, derived.id], reason='derived id clashes with another attribute')
            missing = [_ for _ in derived.sources if _ not in seen]
            if missing:
                raise SchemaException(
                    chain=[self.name, derived.id],
                    reason='source attributes not in the table: %s' % ', '.join(missing))
            seen.add(derived.id)


class MetaHandler(type):

    def __new__(cls, names, bases, attrs):
        '''The tables are declared as class attributes named "attributes" and "derived":
        a class that doesn't declare them inherits the ones of its parent.'''
        new_cls = super(MetaHandler, cls).__new__(cls, names, bases, attrs)

        parents = [_ for _ in bases if isinstance(_, MetaHandler)]
        parent_meta = parents[0]._meta if parents else None

        attributes = attrs.get('attributes', parent_meta.attributes if parent_meta else ())
        derived = attrs.get('derived', parent_meta.derived if parent_meta else ())

        cls.logger = logging.getLogger(__name__)
        cls.logger.debug('collecting %d attributes for \'%s\'', len(attributes), names)

        new_cls._meta = Meta(names, attributes=attributes, derived=derived)

        return new_cls
