from enum import Enum, auto


class Confidence(Enum):
    '''It indicates how sure a handler is that some data is in its format'''
    NO_MATCH  = 0
    MATCH     = auto()
    AMBIGUOUS = auto()  # plausible but not conclusive, keep it as a candidate


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class Terminator(Enum):
    '''How the end of a fixed length string is marked'''
    REQUIRED = auto()  # a NUL must be present inside the field
    OPTIONAL = auto()  # the text can fill the whole field
