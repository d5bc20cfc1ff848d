"""Event model for an indexed YAML document.

A parsed document is kept as a flat, ordered sequence of events rather than
a node tree. Every event class has a class-level `kind` drawn from the
closed EventKind enumeration, so scans dispatch on `event.kind` and tables
keyed by EventKind can be checked for completeness.
"""

import enum

from .error import MalformedDocumentError


class EventKind(enum.Enum):
    STREAM_START = 'stream-start'
    STREAM_END = 'stream-end'
    DOCUMENT_START = 'document-start'
    DOCUMENT_END = 'document-end'
    ALIAS = 'alias'
    SCALAR = 'scalar'
    SEQUENCE_START = 'sequence-start'
    SEQUENCE_END = 'sequence-end'
    MAPPING_START = 'mapping-start'
    MAPPING_END = 'mapping-end'


class Event:
    """Base class for all events."""
    kind = None

    def __init__(self, start_mark=None, end_mark=None):
        self.start_mark = start_mark
        self.end_mark = end_mark

    def _attributes(self):
        return ()

    def __repr__(self):
        args = ', '.join('%s=%r' % (name, getattr(self, name))
                         for name in self._attributes())
        return '%s(%s)' % (self.__class__.__name__, args)


class NodeEvent(Event):
    """Base class for events that carry node properties."""

    def __init__(self, anchor=None, tag=None, start_mark=None, end_mark=None):
        super().__init__(start_mark, end_mark)
        self.anchor = anchor
        self.tag = tag

    def _attributes(self):
        return ('anchor', 'tag')


class CollectionStartEvent(NodeEvent):

    def __init__(self, anchor=None, tag=None, implicit=True,
                 start_mark=None, end_mark=None, flow_style=None):
        super().__init__(anchor, tag, start_mark, end_mark)
        self.implicit = implicit
        self.flow_style = flow_style

    def _attributes(self):
        return ('anchor', 'tag', 'implicit', 'flow_style')


class CollectionEndEvent(Event):
    pass


class StreamStartEvent(Event):
    kind = EventKind.STREAM_START

    def __init__(self, start_mark=None, end_mark=None, encoding=None):
        super().__init__(start_mark, end_mark)
        self.encoding = encoding


class StreamEndEvent(Event):
    kind = EventKind.STREAM_END


class DocumentStartEvent(Event):
    kind = EventKind.DOCUMENT_START

    def __init__(self, start_mark=None, end_mark=None,
                 explicit=None, version=None, tags=None):
        super().__init__(start_mark, end_mark)
        self.explicit = explicit
        self.version = version
        self.tags = tags

    def _attributes(self):
        return ('explicit', 'version', 'tags')


class DocumentEndEvent(Event):
    kind = EventKind.DOCUMENT_END

    def __init__(self, start_mark=None, end_mark=None, explicit=None):
        super().__init__(start_mark, end_mark)
        self.explicit = explicit

    def _attributes(self):
        return ('explicit',)


class AliasEvent(NodeEvent):
    kind = EventKind.ALIAS

    def _attributes(self):
        return ('anchor',)


class ScalarEvent(NodeEvent):
    """Scalar node.

    `implicit` is a pair (plain_implicit, quoted_implicit) telling whether
    the tag may be omitted when the scalar is written plain or quoted.
    `style` is None for plain scalars, otherwise one of "'", '"', '|', '>'.
    """
    kind = EventKind.SCALAR

    def __init__(self, anchor=None, tag=None, implicit=(True, False), value='',
                 start_mark=None, end_mark=None, style=None):
        super().__init__(anchor, tag, start_mark, end_mark)
        self.implicit = implicit
        self.value = value
        self.style = style

    def _attributes(self):
        return ('anchor', 'tag', 'implicit', 'value', 'style')


class SequenceStartEvent(CollectionStartEvent):
    kind = EventKind.SEQUENCE_START


class SequenceEndEvent(CollectionEndEvent):
    kind = EventKind.SEQUENCE_END


class MappingStartEvent(CollectionStartEvent):
    kind = EventKind.MAPPING_START


class MappingEndEvent(CollectionEndEvent):
    kind = EventKind.MAPPING_END


class EventSequence:
    """Immutable, randomly indexable sequence of events for one document.

    The canonical shape is StreamStart, DocumentStart, the events of the
    root node, DocumentEnd, StreamEnd; the root node starts at ROOT_INDEX.
    """

    ROOT_INDEX = 2

    __slots__ = ('_events',)

    def __init__(self, events):
        self._events = tuple(events)

    def __len__(self):
        return len(self._events)

    def __getitem__(self, index):
        return self._events[index]

    def __iter__(self):
        return iter(self._events)

    def __repr__(self):
        return 'EventSequence(%d events)' % len(self._events)

    @property
    def root(self):
        """The first event of the root node."""
        if len(self._events) <= self.ROOT_INDEX:
            raise MalformedDocumentError(
                "event sequence of length %d has no root node" % len(self._events))
        return self._events[self.ROOT_INDEX]


ROOT_INDEX = EventSequence.ROOT_INDEX
