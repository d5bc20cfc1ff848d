"""Growable output buffer used by the subtree extractor.

The buffer owns a byte array with spare capacity. Before each event is
handed to the emitter the extractor calls reserve(), which doubles the
capacity while less than the low-water mark is free, so one event's output
never lands in a full buffer. write() still checks every chunk: a single
scalar may be longer than the low-water mark.
"""

import logging

from .error import EmitError, EmitErrorKind

logger = logging.getLogger(__name__)

# libyaml's emitter output buffer size
DEFAULT_CAPACITY = 16384
LOW_WATER_MARK = 16 * 1024


class OutputBuffer:
    """Byte buffer with amortized doubling growth.

    Acts as the `stream` of a PyYAML emitter: text chunks passed to write()
    are encoded with `encoding`.
    """

    def __init__(self, initial_capacity=DEFAULT_CAPACITY,
                 low_water_mark=LOW_WATER_MARK, encoding='utf-8'):
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be positive")
        if low_water_mark < 0:
            raise ValueError("low_water_mark must not be negative")
        self.low_water_mark = low_water_mark
        self.encoding = encoding
        self.growths = 0
        self._length = 0
        self._data = self._allocate(initial_capacity)

    def __len__(self):
        return self._length

    def __repr__(self):
        return 'OutputBuffer(length=%d, capacity=%d)' % (self._length, self.capacity)

    @property
    def capacity(self):
        return len(self._data)

    @property
    def free(self):
        return len(self._data) - self._length

    def _allocate(self, size):
        return bytearray(size)

    def ensure_capacity(self, additional):
        """Make room for `additional` more bytes, doubling as needed.

        Raises:
            EmitError: MEMORY kind if the larger buffer cannot be allocated
        """
        if self.free >= additional:
            return
        new_capacity = self.capacity
        while new_capacity - self._length < additional:
            new_capacity *= 2
        logger.debug("growing output buffer from %d to %d bytes",
                     self.capacity, new_capacity)
        try:
            data = self._allocate(new_capacity)
        except MemoryError as exc:
            raise EmitError(EmitErrorKind.MEMORY,
                            "cannot grow output buffer to %d bytes" % new_capacity) from exc
        data[:self._length] = self._data[:self._length]
        self._data = data
        self.growths += 1

    def reserve(self):
        """Ensure at least the low-water mark is free."""
        self.ensure_capacity(self.low_water_mark)

    def write(self, data):
        if isinstance(data, str):
            try:
                data = data.encode(self.encoding)
            except UnicodeEncodeError as exc:
                raise EmitError(EmitErrorKind.WRITER, str(exc)) from exc
        elif not isinstance(data, (bytes, bytearray, memoryview)):
            raise EmitError(EmitErrorKind.WRITER,
                            "cannot write %s to output buffer" % type(data).__name__)
        size = len(data)
        self.ensure_capacity(size)
        self._data[self._length:self._length + size] = data
        self._length += size

    def flush(self):
        pass

    def getvalue(self, start=0, end=None):
        """Return the bytes written so far (or a slice of them)."""
        if end is None or end > self._length:
            end = self._length
        return bytes(self._data[start:end])
