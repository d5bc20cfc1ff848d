"""Scope tracking over an event sequence.

Scope is the nesting depth relative to a start index: a collection start
adds one, a collection end removes one. Every scan applies the update
before looking at the new value, so the end event that brings the scope
back to 0 is the last event of the node that began at the start index.
No state is kept between calls; each scan threads its own counter.
"""

from .error import MalformedDocumentError
from .events import EventKind

_SCOPE_DELTA = {
    EventKind.STREAM_START: 0,
    EventKind.STREAM_END: 0,
    EventKind.DOCUMENT_START: 0,
    EventKind.DOCUMENT_END: 0,
    EventKind.ALIAS: 0,
    EventKind.SCALAR: 0,
    EventKind.SEQUENCE_START: 1,
    EventKind.SEQUENCE_END: -1,
    EventKind.MAPPING_START: 1,
    EventKind.MAPPING_END: -1,
}

NODE_START_KINDS = frozenset([
    EventKind.ALIAS,
    EventKind.SCALAR,
    EventKind.SEQUENCE_START,
    EventKind.MAPPING_START,
])


def scope_delta(event):
    """Return the scope change caused by event (+1, -1 or 0)."""
    return _SCOPE_DELTA[event.kind]


def is_node_start(event):
    """True if event is the first event of a node."""
    return event.kind in NODE_START_KINDS


def walk(events, start):
    """Yield (index, event, scope) for the node beginning at start.

    The scope is the value after applying the event. Iteration stops after
    the event that returns the scope to 0, which for a scalar or an alias
    is the start event itself.
    """
    if not 0 <= start < len(events) or not is_node_start(events[start]):
        raise MalformedDocumentError("no node starts at event %d" % start)
    scope = 0
    for index in range(start, len(events)):
        event = events[index]
        scope += scope_delta(event)
        yield index, event, scope
        if scope == 0:
            return
    raise MalformedDocumentError("node at event %d is not closed" % start)


def node_end(events, start):
    """Return the index of the last event of the node beginning at start."""
    for index, _event, _scope in walk(events, start):
        pass
    return index


def children(events, start):
    """Yield the start index of each direct child of the node at start.

    A child starts with a node event seen while the scope is 1, i.e. inside
    the collection at start but not inside any nested collection. Scalars
    and aliases have no children.
    """
    scope = 0
    for index, event, scope_after in walk(events, start):
        if scope == 1 and is_node_start(event):
            yield index
        scope = scope_after
