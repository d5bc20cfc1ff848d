"""Element iteration over a sequence or mapping node.

Each element is extracted on its own as the generator advances; nothing
but the generator's position is shared between elements.
"""

from .emitter import extract
from .error import NotASequenceError
from .events import EventKind, ROOT_INDEX
from .locator import NodeType, classify, mapping_pairs
from .scope import children


def key_text(events, key_index, **options):
    """Text of a mapping key: a scalar's value, otherwise its YAML text."""
    event = events[key_index]
    if event.kind is EventKind.SCALAR:
        return event.value
    return extract(events, key_index, **options)


def iter_elements(events, start=ROOT_INDEX, **options):
    """Yield the direct elements of the node at start, in document order.

    A sequence yields the extracted text of each element. A mapping yields
    (key, value_text) pairs, the key as given by key_text(). Extracted text
    is None for elements the emitter writes nothing for (empty plain
    scalars).

    Raises:
        NotASequenceError: If the node is a scalar or an alias
    """
    node_type = classify(events, start)
    if node_type is NodeType.SEQUENCE:
        for index in children(events, start):
            yield extract(events, index, **options)
    elif node_type is NodeType.MAPPING:
        for key_index, value_index in mapping_pairs(events, start):
            yield (key_text(events, key_index, **options),
                   extract(events, value_index, **options))
    else:
        raise NotASequenceError(
            "cannot extract elements from a %s" % node_type.value)
