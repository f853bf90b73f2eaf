import threading

import pytest

from xv6kit.pipe import PIPESIZE, Pipe, PipeError


def test_write_then_read():
    pipe = Pipe()
    assert pipe.write(b"hello") == len(b"hello")
    assert pipe.read(5) == b"hello"


def test_partial_reads_keep_order():
    pipe = Pipe()
    pipe.write(b"abcdef")
    assert pipe.read(2) == b"ab"
    assert pipe.read(100) == b"cdef"


def test_eof_after_write_end_closed():
    pipe = Pipe()
    pipe.write(b"x")
    pipe.close_write()
    assert pipe.read(10) == b"x"
    assert pipe.read(10) == b""


def test_write_fails_when_full_and_reader_gone():
    pipe = Pipe()
    pipe.close_read()
    with pytest.raises(PipeError):
        pipe.write(b"a" * (PIPESIZE + 88))


def test_operations_on_closed_ends():
    pipe = Pipe()
    pipe.close_write()
    with pytest.raises(PipeError):
        pipe.write(b"a")
    pipe.close_read()
    with pytest.raises(PipeError):
        pipe.read(1)
    assert not pipe.read_open and not pipe.write_open


def test_reader_blocks_until_data_arrives():
    pipe = Pipe()
    result = {}

    def reader():
        result["data"] = pipe.read(10)

    thread = threading.Thread(target=reader)
    thread.start()
    written = pipe.write(b"late")
    thread.join(timeout=5)
    assert written == 4
    assert not thread.is_alive()
    assert result["data"] == b"late"


def test_blocked_writer_fails_when_reader_closes():
    pipe = Pipe()
    errors = []

    def writer():
        try:
            pipe.write(b"z" * (PIPESIZE * 2))
        except PipeError as exc:
            errors.append(exc)

    thread = threading.Thread(target=writer)
    thread.start()
    assert pipe.read(PIPESIZE // 2) == b"z" * (PIPESIZE // 2)
    pipe.close_read()
    thread.join(timeout=5)
    assert len(errors) == 1


def test_streaming_sequence_through_small_buffer():
    pipe = Pipe()
    chunk_len, chunks = 1033, 5

    def writer():
        seq = 0
        for _ in range(chunks):
            block = bytes((seq + i) & 0xFF for i in range(chunk_len))
            seq += chunk_len
            pipe.write(block)
        pipe.close_write()

    thread = threading.Thread(target=writer)
    thread.start()
    received = bytearray()
    cc = 1
    while True:
        data = pipe.read(cc)
        if not data:
            break
        assert len(data) <= cc
        received += data
        cc = min(cc * 2, 8192)
    thread.join(timeout=5)
    total = chunk_len * chunks
    assert len(received) == total
    assert bytes(received) == bytes(i & 0xFF for i in range(total))