"""Parsing of 32-bit little-endian ELF executable headers."""

from __future__ import annotations

import enum
import struct
from dataclasses import astuple, dataclass
from typing import ClassVar

ELF_MAGIC = 0x464C457F  # "\x7FELF" in little endian
ELF_PROG_LOAD = 1

_EHDR = struct.Struct("<I12sHHIIIIIHHHHHH")
_PHDR = struct.Struct("<8I")


class ProgFlags(enum.IntFlag):
    """Flag bits of a program header."""

    EXEC = 1
    WRITE = 2
    READ = 4


class ElfFormatError(ValueError):
    """Data that is not a well-formed ELF executable."""


@dataclass(frozen=True)
class ElfHeader:
    """The ELF file header."""

    magic: int = ELF_MAGIC
    ident: bytes = bytes(12)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    SIZE: ClassVar[int] = _EHDR.size

    @classmethod
    def parse(cls, data: bytes) -> ElfHeader:
        """Read the header at the start of ``data``."""
        if len(data) < cls.SIZE:
            raise ElfFormatError("data too short for an ELF header")
        fields = _EHDR.unpack_from(data)
        if fields[0] != ELF_MAGIC:
            raise ElfFormatError("bad ELF magic")
        return cls(*fields)

    def pack(self) -> bytes:
        """Return the header as it is laid out in a file."""
        return _EHDR.pack(*astuple(self))


@dataclass(frozen=True)
class ProgramHeader:
    """One program section header."""

    type: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    flags: int = 0
    align: int = 0

    SIZE: ClassVar[int] = _PHDR.size

    @classmethod
    def parse(cls, data: bytes, offset: int = 0) -> ProgramHeader:
        """Read a program header at ``offset`` in ``data``."""
        if offset < 0 or offset + cls.SIZE > len(data):
            raise ElfFormatError(f"program header at {offset} lies outside the data")
        return cls(*_PHDR.unpack_from(data, offset))

    def pack(self) -> bytes:
        """Return the program header as it is laid out in a file."""
        return _PHDR.pack(*astuple(self))

    @property
    def loadable(self) -> bool:
        """Whether the segment is to be loaded into memory."""
        return self.type == ELF_PROG_LOAD

    @property
    def prog_flags(self) -> ProgFlags:
        return ProgFlags(self.flags & 0x7)


def program_headers(data: bytes) -> list[ProgramHeader]:
    """Return every program header of the executable in ``data``."""
    header = ElfHeader.parse(data)
    return [
        ProgramHeader.parse(data, header.phoff + i * ProgramHeader.SIZE)
        for i in range(header.phnum)
    ]