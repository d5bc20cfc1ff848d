"""
yamlindex - path-style accessors over a YAML event stream

This module answers questions such as "what is the value at key X", "how
many elements does this sequence have" or "what is the root's shape" for a
YAML document stored as text, without building a tree of Python objects.
The document is parsed into a flat sequence of events, scanned for the
node of interest, and that node alone is re-emitted as a standalone,
minimal YAML document.

Example:
    >>> import yamlindex
    >>> yamlindex.yaml_typeof("a: 1\\nb: 2\\n")
    'mapping'
    >>> yamlindex.yaml_field("a: 1\\nb: [2, 3]\\n", "b")
    '[2, 3]\\n'
    >>> yamlindex.yaml_length("- 1\\n- 2\\n- 3\\n")
    3
    >>> yamlindex.yaml_extract_path_text("a:\\n  - x\\n  - y\\n", "a", 1)
    'y'

Supported API:
    - yaml_typeof(text)                     -> 'scalar' | 'sequence' | 'mapping' | 'unknown'
    - yaml_length(text)                     -> number of sequence elements
    - yaml_field(text, key)                 -> YAML text of a top-level value, or None
    - yaml_field_text(text, key)            -> same, scalars as plain values
    - yaml_element(text, position)          -> YAML text of a sequence element, or None
    - yaml_element_text(text, position)     -> same, scalars as plain values
    - yaml_extract_path(text, *path)        -> YAML text at a key/position path, or None
    - yaml_extract_path_text(text, *path)   -> same, scalars as plain values
    - yaml_elements(text)                   -> element texts, or (key, value) pairs
    - yaml_object_keys(text)                -> top-level keys of a mapping

Every function parses its input from scratch; nothing is cached between
calls. Lower-level building blocks (parse, classify, find_key, extract,
...) are exported for callers that want to run several scans on a single
parse.
"""

from yamlindex.buffer import DEFAULT_CAPACITY, LOW_WATER_MARK, OutputBuffer
from yamlindex.emitter import extract, extract_text
from yamlindex.error import (
    EmitError,
    EmitErrorKind,
    MalformedDocumentError,
    Mark,
    NotASequenceError,
    YAMLIndexError,
    YAMLSyntaxError,
)
from yamlindex.events import EventKind, EventSequence, ROOT_INDEX
from yamlindex.iterator import iter_elements, key_text
from yamlindex.locator import (
    NodeType,
    classify,
    count_top_level,
    find_element,
    find_key,
    object_keys,
    resolve_path,
)
from yamlindex.parser import parse

__version__ = "0.1.0"


def yaml_typeof(text, encoding='utf-8'):
    """Return the type of the document's root node as a string.

    Args:
        text: YAML document (str, bytes or file-like object)
        encoding: Encoding of bytes input

    Returns:
        'scalar', 'sequence', 'mapping', or 'unknown' for a bare alias

    Example:
        >>> yaml_typeof("[1, 2]")
        'sequence'
    """
    return classify(parse(text, encoding)).value


def yaml_length(text, encoding='utf-8'):
    """Return the number of direct elements of a sequence document.

    Raises:
        NotASequenceError: If the root is not a sequence
    """
    return count_top_level(parse(text, encoding))


def yaml_field(text, key, encoding='utf-8', **options):
    """Return the YAML text of the value stored under a top-level key.

    Returns None when the key is absent, the root is not a mapping, or the
    value is an empty plain scalar. Emitter options (indent, width,
    allow_unicode, line_break, canonical) are passed to extract().

    Example:
        >>> yaml_field("a: 1\\nb: 2\\n", "b")
        '2\\n'
    """
    events = parse(text, encoding)
    return _extract(events, find_key(events, key), options)


def yaml_field_text(text, key, encoding='utf-8', **options):
    """Like yaml_field(), but a scalar value is returned as its plain value.

    Example:
        >>> yaml_field_text("name: 'Alice'\\n", "name")
        'Alice'
    """
    events = parse(text, encoding)
    return _extract(events, find_key(events, key), options, as_text=True)


def yaml_element(text, position, encoding='utf-8', **options):
    """Return the YAML text of a sequence element (negative counts from the end)."""
    events = parse(text, encoding)
    return _extract(events, find_element(events, position), options)


def yaml_element_text(text, position, encoding='utf-8', **options):
    """Like yaml_element(), but a scalar element is returned as its value."""
    events = parse(text, encoding)
    return _extract(events, find_element(events, position), options, as_text=True)


def yaml_extract_path(text, *path, encoding='utf-8', **options):
    """Return the YAML text of the node at a path of keys and positions.

    Example:
        >>> yaml_extract_path("a:\\n  b: [1, 2]\\n", "a", "b")
        '[1, 2]\\n'
    """
    events = parse(text, encoding)
    return _extract(events, resolve_path(events, path), options)


def yaml_extract_path_text(text, *path, encoding='utf-8', **options):
    """Like yaml_extract_path(), but a scalar is returned as its value."""
    events = parse(text, encoding)
    return _extract(events, resolve_path(events, path), options, as_text=True)


def yaml_elements(text, encoding='utf-8', **options):
    """Iterate over the direct elements of a sequence or mapping document.

    Yields the YAML text of each sequence element, or (key, value_text)
    pairs for a mapping. The input is parsed when iteration starts.

    Raises:
        NotASequenceError: If the root is a scalar or an alias
    """
    events = parse(text, encoding)
    yield from iter_elements(events, **options)


def yaml_object_keys(text, encoding='utf-8'):
    """Iterate over the top-level keys of a mapping document, in order.

    Yields nothing when the root is not a mapping.
    """
    events = parse(text, encoding)
    for index in object_keys(events):
        yield key_text(events, index)


def _extract(events, index, options, as_text=False):
    if index is None:
        return None
    if as_text:
        return extract_text(events, index, **options)
    return extract(events, index, **options)


__all__ = [
    "yaml_typeof",
    "yaml_length",
    "yaml_field",
    "yaml_field_text",
    "yaml_element",
    "yaml_element_text",
    "yaml_extract_path",
    "yaml_extract_path_text",
    "yaml_elements",
    "yaml_object_keys",
    "parse",
    "classify",
    "find_key",
    "find_element",
    "count_top_level",
    "resolve_path",
    "object_keys",
    "extract",
    "extract_text",
    "iter_elements",
    "key_text",
    "EventKind",
    "EventSequence",
    "NodeType",
    "OutputBuffer",
    "Mark",
    "YAMLIndexError",
    "YAMLSyntaxError",
    "MalformedDocumentError",
    "NotASequenceError",
    "EmitError",
    "EmitErrorKind",
    "ROOT_INDEX",
    "DEFAULT_CAPACITY",
    "LOW_WATER_MARK",
]
