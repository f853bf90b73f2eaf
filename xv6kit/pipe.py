"""A bounded, blocking byte pipe with separate read and write ends."""

from __future__ import annotations

import threading

PIPESIZE = 512


class PipeError(OSError):
    """An operation on a pipe end that cannot succeed."""


class Pipe:
    """A 512-byte buffer shared by one reading and one writing end.

    Writers block while the buffer is full; readers block while it is empty
    and the write end is still open.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._data = bytearray()
        self._read_open = True
        self._write_open = True

    @property
    def read_open(self) -> bool:
        return self._read_open

    @property
    def write_open(self) -> bool:
        return self._write_open

    def write(self, data: bytes) -> int:
        """Write all of ``data``, waiting for room as needed; return its length.

        Raises PipeError if the buffer is full and the read end is closed.
        """
        payload = bytes(data)
        with self._cond:
            if not self._write_open:
                raise PipeError("write end of pipe is closed")
            written = 0
            while written < len(payload):
                while len(self._data) == PIPESIZE:
                    if not self._read_open:
                        raise PipeError("read end of pipe is closed")
                    self._cond.notify_all()
                    self._cond.wait()
                room = PIPESIZE - len(self._data)
                chunk = payload[written:written + room]
                self._data += chunk
                written += len(chunk)
            self._cond.notify_all()
        return len(payload)

    def read(self, n: int) -> bytes:
        """Read up to ``n`` bytes, waiting while empty; b"" means end of data."""
        with self._cond:
            if not self._read_open:
                raise PipeError("read end of pipe is closed")
            while not self._data and self._write_open:
                self._cond.wait()
            chunk = bytes(self._data[:max(n, 0)])
            del self._data[:len(chunk)]
            self._cond.notify_all()
            return chunk

    def close_read(self) -> None:
        """Close the read end and wake any waiting writer."""
        with self._cond:
            self._read_open = False
            self._cond.notify_all()

    def close_write(self) -> None:
        """Close the write end and wake any waiting reader."""
        with self._cond:
            self._write_open = False
            self._cond.notify_all()