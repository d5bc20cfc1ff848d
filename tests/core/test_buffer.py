"""Tests for the growable output buffer."""

import pytest

from yamlindex.buffer import DEFAULT_CAPACITY, LOW_WATER_MARK, OutputBuffer
from yamlindex.error import EmitError, EmitErrorKind


class NoGrowthBuffer(OutputBuffer):
    """Buffer whose allocator fails past its initial size."""

    def _allocate(self, size):
        if size > 64:
            raise MemoryError
        return bytearray(size)


class TestOutputBuffer:

    def test_defaults(self):
        """A default buffer starts at the default capacity."""
        buffer = OutputBuffer()
        assert buffer.capacity == DEFAULT_CAPACITY
        assert buffer.low_water_mark == LOW_WATER_MARK
        assert len(buffer) == 0
        assert buffer.getvalue() == b''

    def test_invalid_sizes(self):
        """Capacity must be positive, the low-water mark non-negative."""
        with pytest.raises(ValueError):
            OutputBuffer(initial_capacity=0)
        with pytest.raises(ValueError):
            OutputBuffer(low_water_mark=-1)

    def test_write_str_and_bytes(self):
        """Text is encoded, bytes are copied."""
        buffer = OutputBuffer(initial_capacity=8)
        buffer.write('né')
        buffer.write(b'!')
        assert buffer.getvalue() == 'né!'.encode('utf-8')
        assert len(buffer) == 4

    def test_doubling(self):
        """Capacity doubles until the write fits."""
        buffer = OutputBuffer(initial_capacity=4, low_water_mark=0)
        buffer.write(b'abc')
        assert buffer.capacity == 4
        buffer.write(b'0123456789')
        assert buffer.capacity == 16
        assert buffer.growths == 1
        assert buffer.getvalue() == b'abc0123456789'

    def test_reserve(self):
        """reserve() keeps at least the low-water mark free."""
        buffer = OutputBuffer(initial_capacity=4, low_water_mark=10)
        buffer.reserve()
        assert buffer.free >= 10
        capacity = buffer.capacity
        buffer.reserve()
        assert buffer.capacity == capacity

    def test_growth_keeps_content(self):
        """Many small writes through many growths lose nothing."""
        buffer = OutputBuffer(initial_capacity=1, low_water_mark=0)
        for i in range(1000):
            buffer.write('%d,' % i)
        expected = ''.join('%d,' % i for i in range(1000)).encode('ascii')
        assert buffer.getvalue() == expected
        assert buffer.growths > 0

    def test_slice(self):
        """getvalue() can return a slice of the written bytes."""
        buffer = OutputBuffer()
        buffer.write('hello world')
        assert buffer.getvalue(6) == b'world'
        assert buffer.getvalue(0, 5) == b'hello'
        assert buffer.getvalue(6, 100) == b'world'

    def test_memory_error(self):
        """A failed allocation is reported as a MEMORY emit error."""
        buffer = NoGrowthBuffer(initial_capacity=64, low_water_mark=0)
        buffer.write(b'x' * 64)
        with pytest.raises(EmitError) as excinfo:
            buffer.write(b'y')
        assert excinfo.value.kind is EmitErrorKind.MEMORY
        assert buffer.getvalue() == b'x' * 64

    def test_unencodable_text(self):
        """Text the encoding cannot represent is a WRITER emit error."""
        buffer = OutputBuffer(encoding='ascii')
        with pytest.raises(EmitError) as excinfo:
            buffer.write('é')
        assert excinfo.value.kind is EmitErrorKind.WRITER
        assert str(excinfo.value).startswith('writer error: ')

    def test_wrong_type(self):
        """Only text and bytes can be written."""
        buffer = OutputBuffer()
        with pytest.raises(EmitError) as excinfo:
            buffer.write(42)
        assert excinfo.value.kind is EmitErrorKind.WRITER

    def test_flush_is_noop(self):
        """flush() exists for stream compatibility and changes nothing."""
        buffer = OutputBuffer()
        buffer.write('x')
        buffer.flush()
        assert buffer.getvalue() == b'x'
