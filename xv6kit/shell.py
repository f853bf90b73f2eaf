"""Command-line parser for the shell grammar.

Grammar: lists separated by ``;``, background jobs marked with ``&``,
pipelines joined by ``|``, parenthesised blocks and ``<``, ``>`` and
``>>`` redirections.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union

MAXARGS = 10
_WHITESPACE = " \t\r\n\v"
_SYMBOLS = "<|>&;()"
_SINGLE = "|();&<"


class OpenMode(enum.IntFlag):
    """Flags for opening a file."""

    RDONLY = 0x000
    WRONLY = 0x001
    RDWR = 0x002
    CREATE = 0x200


class ShellSyntaxError(ValueError):
    """A command line that does not follow the grammar."""

    def __init__(self, message: str, leftovers: str = "") -> None:
        super().__init__(message)
        self.leftovers = leftovers


@dataclass
class ExecCmd:
    """Run a program with its arguments."""

    argv: list[str] = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run ``cmd`` with descriptor ``fd`` reopened on ``file``."""

    cmd: "Command"
    file: str
    mode: OpenMode
    fd: int


@dataclass
class PipeCmd:
    """Connect the output of ``left`` to the input of ``right``."""

    left: "Command"
    right: "Command"


@dataclass
class ListCmd:
    """Run ``left`` to completion, then ``right``."""

    left: "Command"
    right: "Command"


@dataclass
class BackCmd:
    """Run ``cmd`` without waiting for it."""

    cmd: "Command"


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]


class _Scanner:
    def __init__(self, line: str) -> None:
        self.text = line.split("\0", 1)[0]
        self.pos = 0

    def _skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def at_end(self) -> bool:
        self._skip_space()
        return self.pos >= len(self.text)

    def rest(self) -> str:
        return self.text[self.pos:]

    def peek(self, toks: str) -> bool:
        self._skip_space()
        return self.pos < len(self.text) and self.text[self.pos] in toks

    def next(self) -> tuple[str, str]:
        """Return (kind, text); kind is "" at the end of the line."""
        self._skip_space()
        text, start = self.text, self.pos
        if start >= len(text):
            return "", ""
        ch = text[start]
        end = start + 1
        if ch in _SINGLE:
            kind = ch
        elif ch == ">":
            if end < len(text) and text[end] == ">":
                kind = "+"
                end += 1
            else:
                kind = ">"
        else:
            kind = "a"
            while end < len(text) and text[end] not in _WHITESPACE and text[end] not in _SYMBOLS:
                end += 1
        self.pos = end
        self._skip_space()
        return kind, text[start:end]


def tokenize(line: str) -> list[tuple[str, str]]:
    """Split a line into (kind, text) tokens.

    Kind is the symbol itself for ``| ( ) ; & < >``, ``+`` for ``>>`` and
    ``a`` for a word.
    """
    scanner = _Scanner(line)
    tokens = []
    while True:
        kind, text = scanner.next()
        if not kind:
            return tokens
        tokens.append((kind, text))


def _parse_line(s: _Scanner) -> Command:
    cmd = _parse_pipe(s)
    while s.peek("&"):
        s.next()
        cmd = BackCmd(cmd)
    if s.peek(";"):
        s.next()
        cmd = ListCmd(cmd, _parse_line(s))
    return cmd


def _parse_pipe(s: _Scanner) -> Command:
    cmd = _parse_exec(s)
    if s.peek("|"):
        s.next()
        cmd = PipeCmd(cmd, _parse_pipe(s))
    return cmd


def _parse_redirs(cmd: Command, s: _Scanner) -> Command:
    while s.peek("<>"):
        kind, _ = s.next()
        file_kind, name = s.next()
        if file_kind != "a":
            raise ShellSyntaxError("missing file for redirection")
        if kind == "<":
            cmd = RedirCmd(cmd, name, OpenMode.RDONLY, 0)
        else:
            cmd = RedirCmd(cmd, name, OpenMode.WRONLY | OpenMode.CREATE, 1)
    return cmd


def _parse_block(s: _Scanner) -> Command:
    if not s.peek("("):
        raise ShellSyntaxError("parseblock")
    s.next()
    cmd = _parse_line(s)
    if not s.peek(")"):
        raise ShellSyntaxError("syntax - missing )")
    s.next()
    return _parse_redirs(cmd, s)


def _parse_exec(s: _Scanner) -> Command:
    if s.peek("("):
        return _parse_block(s)
    exec_cmd = ExecCmd()
    ret = _parse_redirs(exec_cmd, s)
    while not s.peek("|)&;"):
        kind, word = s.next()
        if not kind:
            break
        if kind != "a":
            raise ShellSyntaxError("syntax")
        exec_cmd.argv.append(word)
        if len(exec_cmd.argv) >= MAXARGS:
            raise ShellSyntaxError("too many args")
        ret = _parse_redirs(ret, s)
    return ret


def parse(line: str) -> Command:
    """Parse a whole command line into a command tree."""
    scanner = _Scanner(line)
    cmd = _parse_line(scanner)
    if not scanner.at_end():
        raise ShellSyntaxError("syntax", leftovers=scanner.rest())
    return cmd