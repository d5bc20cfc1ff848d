"""Read-only scans over an EventSequence.

Classify a node, find the value of a mapping key, count or address the
elements of a sequence, and follow a path of keys and positions. Every
scan takes the index of the node it works on (the document root by
default) and returns event indices, so results can be passed on to the
extractor or to another scan without parsing again.

A missing key or element is reported as None, never raised.
"""

import enum
import itertools

from .error import MalformedDocumentError, NotASequenceError
from .events import EventKind, ROOT_INDEX
from .scope import children

__all__ = [
    'NodeType',
    'classify',
    'find_key',
    'find_element',
    'count_top_level',
    'resolve_path',
    'mapping_pairs',
    'object_keys',
]


class NodeType(enum.Enum):
    SCALAR = 'scalar'
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'
    # an alias cannot be typed without resolving its anchor
    UNKNOWN = 'unknown'


_NODE_TYPES = {
    EventKind.SCALAR: NodeType.SCALAR,
    EventKind.SEQUENCE_START: NodeType.SEQUENCE,
    EventKind.MAPPING_START: NodeType.MAPPING,
    EventKind.ALIAS: NodeType.UNKNOWN,
}


def classify(events, start=ROOT_INDEX):
    """Return the NodeType of the node beginning at `start`.

    Only the event at `start` is read.

    Raises:
        MalformedDocumentError: If no node starts at `start`
    """
    if not 0 <= start < len(events):
        raise MalformedDocumentError("no event at index %d" % start)
    event = events[start]
    try:
        return _NODE_TYPES[event.kind]
    except KeyError:
        raise MalformedDocumentError(
            "expected a node at event %d, but found %s" % (start, event.kind.value)) from None


def mapping_pairs(events, start=ROOT_INDEX):
    """Yield (key_index, value_index) for each entry of the mapping at start.

    Keys and values alternate among the direct children of the mapping.
    """
    if classify(events, start) is not NodeType.MAPPING:
        return
    nodes = children(events, start)
    for key_index in nodes:
        value_index = next(nodes, None)
        if value_index is None:
            raise MalformedDocumentError(
                "mapping key at event %d has no value" % key_index)
        yield key_index, value_index


def find_key(events, key, start=ROOT_INDEX):
    """Return the index of the value stored under `key`, or None.

    Only direct keys of the mapping at `start` are examined, and only
    scalar keys whose value equals `key` exactly match. Returns None when
    the node is not a mapping.
    """
    for key_index, value_index in mapping_pairs(events, start):
        event = events[key_index]
        if event.kind is EventKind.SCALAR and event.value == key:
            return value_index
    return None


def count_top_level(events, start=ROOT_INDEX):
    """Return the number of direct elements of the sequence at `start`.

    Raises:
        NotASequenceError: If the node is not a sequence
    """
    node_type = classify(events, start)
    if node_type is not NodeType.SEQUENCE:
        raise NotASequenceError(
            "cannot get the length of a %s" % node_type.value)
    count = 0
    for _index in children(events, start):
        count += 1
    return count


def find_element(events, position, start=ROOT_INDEX):
    """Return the index of element `position` of the sequence at start.

    Negative positions count from the end. Returns None when the position
    is out of range or the node is not a sequence.
    """
    if classify(events, start) is not NodeType.SEQUENCE:
        return None
    if position < 0:
        elements = list(children(events, start))
        if -position > len(elements):
            return None
        return elements[position]
    return next(itertools.islice(children(events, start), position, None), None)


def _as_position(element):
    if isinstance(element, bool):
        return None
    if isinstance(element, int):
        return element
    try:
        return int(str(element).strip())
    except ValueError:
        return None


def resolve_path(events, path, start=ROOT_INDEX):
    """Follow `path` from the node at start; return the index reached or None.

    At a mapping a path element is looked up as a key (as a string), at a
    sequence it must be an integer or a string holding one. A scalar or an
    alias cannot be descended into.
    """
    index = start
    for element in path:
        node_type = classify(events, index)
        if node_type is NodeType.MAPPING:
            index = find_key(events, str(element), index)
        elif node_type is NodeType.SEQUENCE:
            position = _as_position(element)
            if position is None:
                return None
            index = find_element(events, position, index)
        else:
            return None
        if index is None:
            return None
    return index


def object_keys(events, start=ROOT_INDEX):
    """Yield the key index of each entry of the mapping at start."""
    for key_index, _value_index in mapping_pairs(events, start):
        yield key_index
