'''
The registry holds the known handlers, in order: the order matters for the
autodetection since the first handler sure about the content wins.
'''
import logging
from typing import List, Optional, Sequence

from .core import Handler
from .enum import Confidence
from .exceptions import DuplicateHandlerException


logger = logging.getLogger(__name__)


class Registry(object):

    def __init__(self, handlers: Sequence[Handler]):
        self._handlers = list(handlers)

        seen = set()
        for handler in self._handlers:
            handler_id = handler.metadata().id
            if handler_id in seen:
                raise DuplicateHandlerException(chain=[handler_id], reason='handler id registered more than once')
            seen.add(handler_id)

    def __len__(self):
        return len(self._handlers)

    def get_handler(self, handler_id: str) -> Optional[Handler]:
        '''Get a handler by its id, None if there isn't one'''
        for handler in self._handlers:
            if handler.metadata().id == handler_id:
                return handler

        return None

    def find_handler(self, content: bytes) -> List[Handler]:
        '''Get the handlers that can deal with the content.

        A handler sure about the content is returned alone, otherwise the list
        contains all the handlers that consider the content possibly theirs (it
        can be empty). The content must be already decompressed.'''
        if not isinstance(content, (bytes, bytearray, memoryview)):
            raise TypeError('content must be a bytes-like object, not \'%s\'' % content.__class__.__name__)

        candidates = []
        for handler in self._handlers:
            metadata = handler.metadata()
            logger.debug('trying format handler %s (%s)', metadata.id, metadata.title)

            confidence = handler.identify(content)

            if confidence.valid == Confidence.MATCH:
                return [handler]

            if confidence.valid == Confidence.AMBIGUOUS:
                candidates.append(handler)

            logger.debug(' - handler reported: %s', confidence.reason)

        return candidates

    def list_handlers(self) -> List[Handler]:
        return list(self._handlers)
