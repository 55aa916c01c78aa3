import threading
import time

import pytest

from msfa.ringbuffer import RingBuffer

NUM_ITER = 100000
BLOCK = 256
PATTERN = bytes(range(256)) * 2


def _block(i):
    start = i & 0xFF
    return PATTERN[start:start + BLOCK]


def test_fresh_buffer_is_empty():
    rb = RingBuffer()
    assert rb.bytes_available() == 0
    assert rb.write_bytes_available() == RingBuffer.CAPACITY - 1


def test_write_then_read_round_trip():
    rb = RingBuffer()
    rb.write(b"\x90\x40\x7f")
    assert rb.bytes_available() == 3
    assert rb.write_bytes_available() == RingBuffer.CAPACITY - 4
    assert rb.read(3) == b"\x90\x40\x7f"
    assert rb.bytes_available() == 0


def test_partial_reads_preserve_order():
    rb = RingBuffer()
    rb.write(bytes(range(10)))
    assert rb.read(4) == bytes(range(4))
    assert rb.read(6) == bytes(range(4, 10))


def test_wraparound():
    rb = RingBuffer()
    rb.write(bytes(60000))
    assert rb.read(60000) == bytes(60000)
    data = bytes(i & 0xFF for i in range(10000))
    rb.write(data)
    assert rb.bytes_available() == 10000
    assert rb.read(10000) == data


def test_read_more_than_available_raises():
    rb = RingBuffer()
    rb.write(b"ab")
    with pytest.raises(ValueError):
        rb.read(3)


def test_negative_read_raises():
    rb = RingBuffer()
    with pytest.raises(ValueError):
        rb.read(-1)


def test_write_blocks_until_space_is_freed():
    rb = RingBuffer()
    rb.write(bytes(RingBuffer.CAPACITY - 1))
    assert rb.write_bytes_available() == 0
    done = threading.Event()

    def writer():
        rb.write(b"xyz")
        done.set()

    thread = threading.Thread(target=writer)
    thread.start()
    time.sleep(0.05)
    assert not done.is_set()
    rb.read(10)
    thread.join(timeout=5)
    assert done.is_set()
    rb.read(RingBuffer.CAPACITY - 11)
    assert rb.read(3) == b"xyz"


def test_producer_consumer_threads():
    rb = RingBuffer()
    errors = []
    blocks_read = []

    def consumer():
        for i in range(NUM_ITER):
            while rb.bytes_available() < BLOCK:
                time.sleep(0.001)
            data = rb.read(BLOCK)
            if data != _block(i):
                errors.append(i)
            blocks_read.append(i)

    thread = threading.Thread(target=consumer)
    thread.start()
    for i in range(NUM_ITER):
        rb.write(_block(i))
    thread.join()
    assert errors == []
    assert len(blocks_read) == NUM_ITER
    assert rb.bytes_available() == 0