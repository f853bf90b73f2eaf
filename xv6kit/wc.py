"""Count lines, words and bytes."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, Sequence

_CHUNK = 512
_SPACE = frozenset(b" \r\t\n\v")


@dataclass(frozen=True)
class Counts:
    """Line, word and byte totals of one input."""

    lines: int
    words: int
    chars: int


def count(stream: IO) -> Counts:
    """Count the lines, words and bytes of a stream read to its end."""
    lines = words = chars = 0
    in_word = False
    while True:
        chunk = stream.read(_CHUNK)
        if not chunk:
            break
        if isinstance(chunk, str):
            chunk = chunk.encode()
        for byte in chunk:
            chars += 1
            if byte == 0x0A:
                lines += 1
            if byte in _SPACE:
                in_word = False
            elif not in_word:
                words += 1
                in_word = True
    return Counts(lines, words, chars)


def _report(counts: Counts, name: str) -> None:
    print(f"{counts.lines} {counts.words} {counts.chars} {name}")


def main(argv: Sequence[str] | None = None) -> int:
    """Print counts for each named file, or for standard input if none."""
    names = sys.argv[1:] if argv is None else list(argv)
    if not names:
        try:
            counts = count(sys.stdin.buffer)
        except OSError:
            print("wc: read error")
            return 1
        _report(counts, "")
        return 0
    for name in names:
        try:
            handle = open(name, "rb")
        except OSError:
            print(f"wc: cannot open {name}")
            return 1
        with handle:
            try:
                counts = count(handle)
            except OSError:
                print("wc: read error")
                return 1
        _report(counts, name)
    return 0