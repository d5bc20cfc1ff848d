"""Parser adapter: YAML text to an EventSequence.

Wraps PyYAML's event parser (the libyaml binding when it is compiled in)
and converts its events into the package's own event model. Errors raised
by PyYAML are translated to YAMLSyntaxError with the problem text and mark
reported by the lowest layer that failed.
"""

import codecs
import logging

import yaml
from yaml import events as yaml_events
from yaml.reader import ReaderError

from .error import Mark, MalformedDocumentError, YAMLSyntaxError
from .events import (
    AliasEvent,
    DocumentEndEvent,
    DocumentStartEvent,
    EventKind,
    EventSequence,
    MappingEndEvent,
    MappingStartEvent,
    ScalarEvent,
    SequenceEndEvent,
    SequenceStartEvent,
    StreamEndEvent,
    StreamStartEvent,
)

logger = logging.getLogger(__name__)

# libyaml-backed loader when available, same events either way
Loader = getattr(yaml, 'CSafeLoader', yaml.SafeLoader)

DEFAULT_NAME = '<string>'

_BOMS = (
    (codecs.BOM_UTF8, 'utf-8'),
    (codecs.BOM_UTF16_BE, 'utf-16-be'),
    (codecs.BOM_UTF16_LE, 'utf-16-le'),
)


def _mark_at(data, index, name):
    """Build a Mark for a character (or byte) offset into data."""
    newline = b'\n' if isinstance(data, (bytes, bytearray)) else '\n'
    line = data.count(newline, 0, index)
    column = index - (data.rfind(newline, 0, index) + 1)
    return Mark(name, index, line, column)


def _decode(data, encoding, name):
    """Decode a bytes input, honouring a byte order mark.

    Returns:
        Decoded string

    Raises:
        YAMLSyntaxError: If the bytes are not valid in the encoding
    """
    data = bytes(data)
    for bom, bom_encoding in _BOMS:
        if data.startswith(bom):
            data = data[len(bom):]
            encoding = bom_encoding
            break
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        logger.debug("cannot decode %s as %s: %s", name, encoding, exc)
        raise YAMLSyntaxError(exc.reason, _mark_at(data, exc.start, name),
                              context="while decoding %s input" % encoding) from exc
    except LookupError as exc:
        raise YAMLSyntaxError(str(exc), None) from exc


def _from_yaml_event(event, name):
    """Convert a PyYAML Event object to an event of our model."""
    sm = Mark.from_yaml(event.start_mark, name)
    em = Mark.from_yaml(event.end_mark, name)
    if isinstance(event, yaml_events.ScalarEvent):
        return ScalarEvent(anchor=event.anchor, tag=event.tag,
                           implicit=tuple(event.implicit), value=event.value,
                           start_mark=sm, end_mark=em, style=event.style or None)
    elif isinstance(event, yaml_events.SequenceStartEvent):
        return SequenceStartEvent(anchor=event.anchor, tag=event.tag,
                                  implicit=event.implicit, start_mark=sm,
                                  end_mark=em, flow_style=event.flow_style)
    elif isinstance(event, yaml_events.SequenceEndEvent):
        return SequenceEndEvent(start_mark=sm, end_mark=em)
    elif isinstance(event, yaml_events.MappingStartEvent):
        return MappingStartEvent(anchor=event.anchor, tag=event.tag,
                                 implicit=event.implicit, start_mark=sm,
                                 end_mark=em, flow_style=event.flow_style)
    elif isinstance(event, yaml_events.MappingEndEvent):
        return MappingEndEvent(start_mark=sm, end_mark=em)
    elif isinstance(event, yaml_events.AliasEvent):
        return AliasEvent(anchor=event.anchor, start_mark=sm, end_mark=em)
    elif isinstance(event, yaml_events.DocumentStartEvent):
        return DocumentStartEvent(start_mark=sm, end_mark=em,
                                  explicit=event.explicit,
                                  version=event.version, tags=event.tags)
    elif isinstance(event, yaml_events.DocumentEndEvent):
        return DocumentEndEvent(start_mark=sm, end_mark=em,
                                explicit=event.explicit)
    elif isinstance(event, yaml_events.StreamStartEvent):
        return StreamStartEvent(start_mark=sm, end_mark=em,
                                encoding=getattr(event, 'encoding', None))
    elif isinstance(event, yaml_events.StreamEndEvent):
        return StreamEndEvent(start_mark=sm, end_mark=em)
    raise MalformedDocumentError("unknown event type: %s" % type(event).__name__)


def _check_single_document(events, name):
    """Reject streams that do not hold exactly one document."""
    documents = [event for event in events
                 if event.kind is EventKind.DOCUMENT_START]
    if not documents:
        raise YAMLSyntaxError("but found end of stream", events[-1].start_mark,
                              context="expected a single document in the stream")
    if len(documents) > 1:
        raise YAMLSyntaxError("but found another document", documents[1].start_mark,
                              context="expected a single document in the stream")
    if events[0].kind is not EventKind.STREAM_START \
            or events[1].kind is not EventKind.DOCUMENT_START \
            or events[-2].kind is not EventKind.DOCUMENT_END:
        raise MalformedDocumentError(
            "%s: event stream does not frame a single document" % name)


def parse(data, encoding='utf-8', name=None):
    """Parse a single YAML document into an EventSequence.

    Args:
        data: YAML text as str, bytes, or a file-like object with read()
        encoding: Encoding of bytes input (a byte order mark overrides it)
        name: Stream name used in error positions

    Returns:
        EventSequence holding every event, StreamStart to StreamEnd

    Raises:
        YAMLSyntaxError: If the input is not a well-formed single document
        MalformedDocumentError: If the parser produced an inconsistent stream
    """
    if hasattr(data, 'read'):
        if name is None:
            name = getattr(data, 'name', None)
        data = data.read()
    if name is None:
        name = DEFAULT_NAME
    if isinstance(data, (bytes, bytearray, memoryview)):
        data = _decode(data, encoding, name)

    try:
        events = [_from_yaml_event(event, name)
                  for event in yaml.parse(data, Loader=Loader)]
    except yaml.MarkedYAMLError as exc:
        logger.debug("YAML syntax error in %s: %s", name, exc)
        position = Mark.from_yaml(exc.problem_mark or exc.context_mark, name)
        raise YAMLSyntaxError(exc.problem or str(exc), position,
                              context=exc.context) from exc
    except ReaderError as exc:
        logger.debug("YAML reader error in %s: %s", name, exc)
        raise YAMLSyntaxError(exc.reason, _mark_at(data, exc.position, name)) from exc
    except yaml.YAMLError as exc:
        logger.debug("YAML error in %s: %s", name, exc)
        raise YAMLSyntaxError(str(exc)) from exc

    if not events or events[-1].kind is not EventKind.STREAM_END:
        raise MalformedDocumentError("%s: event stream is not terminated" % name)
    _check_single_document(events, name)
    logger.debug("parsed %d events from %s", len(events), name)
    return EventSequence(events)
