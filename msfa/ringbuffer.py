"""Single-producer, single-consumer byte ring buffer for passing MIDI data."""

import threading


class RingBuffer:
    """Fixed-size byte FIFO; writers block while the buffer is full."""

    CAPACITY = 65536

    def __init__(self) -> None:
        self._buf = bytearray(self.CAPACITY)
        self._mask = self.CAPACITY - 1
        self._rd = 0
        self._wr = 0
        self._cond = threading.Condition()

    def bytes_available(self) -> int:
        """Number of bytes that can be read."""
        with self._cond:
            return (self._wr - self._rd) & self._mask

    def write_bytes_available(self) -> int:
        """Number of bytes that can be written without blocking."""
        with self._cond:
            return (self._rd - self._wr - 1) & self._mask

    def read(self, size: int) -> bytes:
        """Remove and return ``size`` bytes; they must already be available."""
        if size < 0:
            raise ValueError("size must not be negative")
        with self._cond:
            available = (self._wr - self._rd) & self._mask
            if size > available:
                raise ValueError(f"only {available} bytes available, asked for {size}")
            rd = self._rd
            first = min(size, self.CAPACITY - rd)
            data = bytes(self._buf[rd:rd + first]) + bytes(self._buf[:size - first])
            self._rd = (rd + size) & self._mask
            self._cond.notify_all()
        return data

    def write(self, data: bytes) -> None:
        """Append ``data``, blocking until there is room for all of it."""
        view = memoryview(bytes(data))
        while view:
            with self._cond:
                while (self._rd - self._wr - 1) & self._mask == 0:
                    self._cond.wait()
                space = (self._rd - self._wr - 1) & self._mask
                size = min(len(view), space)
                wr = self._wr
                first = min(size, self.CAPACITY - wr)
                self._buf[wr:wr + first] = view[:first]
                if size > first:
                    self._buf[:size - first] = view[first:size]
                self._wr = (wr + size) & self._mask
                self._cond.notify_all()
            view = view[size:]