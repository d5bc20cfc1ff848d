"""Subtree extraction: re-emit one node as a standalone YAML document.

The node's events are copied verbatim between a synthetic document start
(explicit, with a %YAML 1.1 directive) and an implicit document end, and
fed one by one to PyYAML's emitter writing into an OutputBuffer. The
emitter records the buffer offset at which it starts the root node, so
the prologue it wrote before (directives and the '---' marker) is cut
off by measurement, whatever the emitter options produced.
"""

import logging

import yaml
from yaml import events as yaml_events
from yaml.emitter import Emitter, EmitterError
from yaml.resolver import Resolver

from .buffer import OutputBuffer
from .error import EmitError, EmitErrorKind, MalformedDocumentError
from .events import (
    DocumentEndEvent,
    DocumentStartEvent,
    EventKind,
    StreamEndEvent,
    StreamStartEvent,
)
from .scope import is_node_start, node_end

logger = logging.getLogger(__name__)

YAML_VERSION = (1, 1)
NULL_TAG = 'tag:yaml.org,2002:null'

_resolver = Resolver()


class _NodeEmitter(Emitter):
    """Emitter that records where the root node of the document begins."""

    node_start = None

    def expect_document_root(self):
        self.node_start = len(self.stream)
        super().expect_document_root()

    def choose_scalar_style(self):
        # PyYAML quotes every tagged scalar; keep a tagged plain one plain
        event = self.event
        if event.tag is not None and not event.style and not self.canonical:
            if self.analysis is None:
                self.analysis = self.analyze_scalar(event.value)
            analysis = self.analysis
            if (not (self.simple_key_context and (analysis.empty or analysis.multiline))
                    and (self.flow_level and analysis.allow_flow_plain
                         or (not self.flow_level and analysis.allow_block_plain))):
                return ''
        return super().choose_scalar_style()


def _to_yaml_event(event):
    """Convert one of our events to a PyYAML Event object."""
    kind = event.kind
    if kind is EventKind.SCALAR:
        return yaml_events.ScalarEvent(event.anchor, event.tag, event.implicit,
                                       event.value, style=event.style)
    elif kind is EventKind.SEQUENCE_START:
        return yaml_events.SequenceStartEvent(event.anchor, event.tag,
                                              event.implicit,
                                              flow_style=event.flow_style)
    elif kind is EventKind.SEQUENCE_END:
        return yaml_events.SequenceEndEvent()
    elif kind is EventKind.MAPPING_START:
        return yaml_events.MappingStartEvent(event.anchor, event.tag,
                                             event.implicit,
                                             flow_style=event.flow_style)
    elif kind is EventKind.MAPPING_END:
        return yaml_events.MappingEndEvent()
    elif kind is EventKind.ALIAS:
        return yaml_events.AliasEvent(event.anchor)
    elif kind is EventKind.DOCUMENT_START:
        return yaml_events.DocumentStartEvent(explicit=event.explicit,
                                              version=event.version,
                                              tags=event.tags)
    elif kind is EventKind.DOCUMENT_END:
        return yaml_events.DocumentEndEvent(explicit=event.explicit)
    elif kind is EventKind.STREAM_START:
        return yaml_events.StreamStartEvent(encoding=event.encoding)
    elif kind is EventKind.STREAM_END:
        return yaml_events.StreamEndEvent()
    raise MalformedDocumentError("unknown event kind: %r" % (kind,))


def _framed(events, start, end):
    """Yield the events of a standalone document holding events[start:end+1]."""
    yield StreamStartEvent()
    yield DocumentStartEvent(explicit=True, version=YAML_VERSION)
    for index in range(start, end + 1):
        yield events[index]
    yield DocumentEndEvent(explicit=False)
    yield StreamEndEvent()


def extract(events, start, buffer=None, canonical=None, indent=None,
            width=None, allow_unicode=True, line_break=None):
    """Re-emit the node beginning at `start` as canonical YAML text.

    Args:
        events: EventSequence (or any indexable sequence of events)
        start: Index of the node's first event
        buffer: Optional OutputBuffer to emit into (a default one otherwise)
        canonical, indent, width, allow_unicode, line_break: Emitter options

    Returns:
        The node's text followed by a line break, or None when no node
        starts at `start` or the emitter wrote nothing for it

    Raises:
        EmitError: If the buffer cannot grow or be written, or the emitter
            rejects the events
    """
    if not 0 <= start < len(events) or not is_node_start(events[start]):
        return None
    end = node_end(events, start)
    if buffer is None:
        buffer = OutputBuffer()

    emitter = _NodeEmitter(buffer, canonical=canonical, indent=indent,
                           width=width, allow_unicode=allow_unicode,
                           line_break=line_break)
    node_stop = None
    try:
        for event in _framed(events, start, end):
            buffer.reserve()
            emitter.emit(_to_yaml_event(event))
            if event.kind is EventKind.DOCUMENT_END:
                node_stop = len(buffer)
    except EmitterError as exc:
        raise EmitError(EmitErrorKind.EMITTER, str(exc)) from exc
    except MemoryError as exc:
        raise EmitError(EmitErrorKind.MEMORY, "out of memory while emitting") from exc
    finally:
        emitter.dispose()

    text = buffer.getvalue(emitter.node_start, node_stop)
    separator = emitter.best_line_break.encode(buffer.encoding)
    if text.startswith(separator):
        text = text[len(separator):]
    elif text.startswith(b' '):
        text = text[1:]
    logger.debug("extracted events %d..%d into %d bytes (buffer capacity %d, "
                 "%d growths)", start, end, len(text), buffer.capacity,
                 buffer.growths)
    if not text.strip():
        return None
    return text.decode(buffer.encoding)


def is_null(event):
    """True if event is an untagged plain scalar that resolves to null."""
    if event.kind is not EventKind.SCALAR or event.tag is not None:
        return False
    if event.style is not None:
        return False
    return _resolver.resolve(yaml.ScalarNode, event.value, event.implicit) == NULL_TAG


def extract_text(events, start, **options):
    """Return the node at `start` in its text form.

    A scalar gives its value, unquoted and unescaped, or None when it is
    null; any other node gives the same text as extract().
    """
    if not 0 <= start < len(events) or not is_node_start(events[start]):
        return None
    event = events[start]
    if event.kind is EventKind.SCALAR:
        if is_null(event):
            return None
        return event.value
    return extract(events, start, **options)
