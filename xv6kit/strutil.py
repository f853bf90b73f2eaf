"""Byte-string helpers with C string semantics.

Strings end at their first NUL byte, if any. Text arguments are taken as
Latin-1 so that every character maps to exactly one byte.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import IO, AnyStr, Union

BytesLike = Union[bytes, bytearray, memoryview, str]


def _raw(value: BytesLike) -> bytes:
    if isinstance(value, str):
        return value.encode("latin-1")
    return bytes(value)


def _cstr(value: BytesLike) -> bytes:
    data = _raw(value)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _byte(c: Union[int, str, bytes]) -> int:
    if isinstance(c, int):
        return c & 0xFF
    data = _raw(c)
    if len(data) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return data[0]


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch."""
    left, right = _raw(a), _raw(b)
    if n < 0 or n > len(left) or n > len(right):
        raise ValueError(f"cannot compare {n} bytes")
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from ``src`` to ``dst``; overlap is safe."""
    if n < 0 or dst < 0 or src < 0 or dst + n > len(buf) or src + n > len(buf):
        raise ValueError("memmove range outside the buffer")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def strcmp(p: BytesLike, q: BytesLike) -> int:
    """Compare two strings; negative, zero or positive like the C function."""
    for x, y in zip_longest(_cstr(p), _cstr(q), fillvalue=0):
        if x != y:
            return x - y
    return 0


def strncmp(p: BytesLike, q: BytesLike, n: int) -> int:
    """Compare at most ``n`` leading bytes of two strings."""
    pairs = zip_longest(_cstr(p), _cstr(q), fillvalue=0)
    for x, y in islice(pairs, max(n, 0)):
        if x != y:
            return x - y
    return 0


def strncpy(src: BytesLike, n: int) -> bytes:
    """Return the ``n`` bytes strncpy leaves in its destination.

    The copy is padded with NULs and is not terminated when ``src`` is
    ``n`` bytes or longer.
    """
    if n <= 0:
        return b""
    return _cstr(src)[:n].ljust(n, b"\0")


def safestrcpy(src: BytesLike, n: int) -> bytes:
    """Return at most ``n - 1`` bytes of ``src`` followed by a NUL."""
    if n <= 0:
        return b""
    return _cstr(src)[:n - 1] + b"\0"


def strlen(s: BytesLike) -> int:
    """Return the number of bytes before the first NUL."""
    return len(_cstr(s))


def strchr(s: BytesLike, c: Union[int, str, bytes]) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None."""
    target = _byte(c)
    if target == 0:
        return None
    index = _cstr(s).find(target)
    return None if index < 0 else index


def atoi(s: BytesLike) -> int:
    """Convert the leading decimal digits of ``s``; no sign or blanks allowed."""
    value = 0
    for byte in _cstr(s):
        if not 0x30 <= byte <= 0x39:
            break
        value = value * 10 + byte - 0x30
    return value


def gets(stream: IO[AnyStr], limit: int) -> AnyStr:
    """Read one line of at most ``limit - 1`` characters, one at a time.

    The line keeps its ending newline or carriage return. At end of input
    the result is empty.
    """
    empty = stream.read(0)
    chunks = []
    while len(chunks) + 1 < limit:
        c = stream.read(1)
        if not c:
            break
        chunks.append(c)
        if c in ("\n", "\r", b"\n", b"\r"):
            break
    return empty.join(chunks)