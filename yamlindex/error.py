"""Error taxonomy for yamlindex.

Provides the Mark position class and the exceptions raised while indexing
and re-emitting a YAML event stream. A missing key or element is not an
error: the locators return None for it.
"""

import enum


class Mark:
    """Position of a character in a YAML stream.

    `line` and `column` are 0-based; str() shows them 1-based, the way
    editors and PyYAML messages count.
    """

    __slots__ = ('name', 'index', 'line', 'column')

    def __init__(self, name, index, line, column):
        self.name = name
        self.index = index
        self.line = line
        self.column = column

    @classmethod
    def from_yaml(cls, mark, name=None):
        """Copy the position of a PyYAML mark, or return None when there is none."""
        if mark is None:
            return None
        return cls(name or mark.name, mark.index, mark.line, mark.column)

    def __eq__(self, other):
        if not isinstance(other, Mark):
            return NotImplemented
        return (self.name, self.index, self.line, self.column) == \
               (other.name, other.index, other.line, other.column)

    def __repr__(self):
        return 'Mark(%r, index=%d, line=%d, column=%d)' % (
            self.name, self.index, self.line, self.column)

    def __str__(self):
        return '  in "%s", line %d, column %d' % (self.name, self.line + 1, self.column + 1)


class YAMLIndexError(Exception):
    """Base exception for yamlindex errors."""
    pass


class YAMLSyntaxError(YAMLIndexError):
    """The input is not a well-formed single YAML document.

    Attributes:
        message: Problem description, as reported by the YAML parser
        position: Mark of the problem, or None when the parser gave none
        context: Optional description of what was being parsed
    """

    def __init__(self, message, position=None, context=None):
        super().__init__(message)
        self.message = message
        self.position = position
        self.context = context

    def __str__(self):
        lines = []
        if self.context is not None:
            lines.append(self.context)
        lines.append(self.message)
        if self.position is not None:
            lines.append(str(self.position))
        return '\n'.join(lines)


class MalformedDocumentError(YAMLIndexError):
    """The event sequence does not have the shape of a single document.

    Raised when the parser and the indexer disagree about document shape,
    e.g. an unexpected event at the root offset.
    """
    pass


class NotASequenceError(YAMLIndexError):
    """A sequence-only operation was applied to a non-sequence node."""
    pass


class EmitErrorKind(enum.Enum):
    MEMORY = 'memory'
    WRITER = 'writer'
    EMITTER = 'emitter'


class EmitError(YAMLIndexError):
    """Re-serialization of a node failed.

    Attributes:
        kind: EmitErrorKind naming the failing layer
        message: Description of the failure
    """

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self):
        return '%s error: %s' % (self.kind.value, self.message)
