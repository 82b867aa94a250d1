"""
# Exestruct: attributes of game executables for humans.

Games of a certain era keep a lot of interesting values (filenames,
messages, starting lives, scores) hardcoded inside the executable. Each
supported title is described by a handler: a table of attributes, each
one with an id, an encoding and the offset where it lives.

Four operations are defined for a handler:

 1. identify(): tell if some data is in the format of the handler; the
    answer can be yes, no or maybe.

 2. supps(): list the other files needed together with the executable.

 3. extract(): read the attributes from the data.

 4. patch(): write the (modified) attributes back into the data.

Attributes without an offset start where the previous one ended, so
contiguous blocks (strings mostly) are declared in order and only the
first one carries an offset.

The data must be already decompressed: exestruct doesn't know anything
about packed executables.
"""
from .executables import HANDLERS
from .registry import Registry


default_registry = Registry(HANDLERS)

get_handler = default_registry.get_handler
find_handler = default_registry.find_handler
list_handlers = default_registry.list_handlers
