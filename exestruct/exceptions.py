class ExestructException(Exception):
    '''Base class to extend in order to throw exception in exestruct.

    It takes as first argument the chain of the layers that caused the
    exception (usually the handler id followed by the attribute id) and
    optionally a human readable reason.
    '''

    def __init__(self, chain, reason=None):
        self.chain = chain
        self.reason = reason
        super().__init__(reason)

    def __str__(self):
        path = '.'.join(str(_) for _ in self.chain) if self.chain else '<unknown>'
        if self.reason:
            return f'{path}: {self.reason}'

        return path


class UnpackException(ExestructException):
    pass


class PackException(ExestructException):
    pass


class AttributeUnpackException(UnpackException):
    '''An attribute of a handler table could not be decoded.'''
    pass


class AttributePackException(PackException):
    '''A value could not be encoded back into the attribute it belongs to.'''
    pass


class SchemaException(ExestructException):
    '''This indicates a defect in a handler table: it's not something that
    depends on the data passed in, so it must never be caught and masked.'''
    pass


class DuplicateAttributeException(SchemaException):
    pass


class UnknownTypeException(SchemaException):
    pass


class DuplicateHandlerException(SchemaException):
    pass
