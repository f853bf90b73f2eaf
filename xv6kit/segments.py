"""Encoding of x86 segment descriptors as laid out in a GDT."""

from __future__ import annotations

import enum
import struct


class SegmentType(enum.IntFlag):
    """Type bits of a code or data segment descriptor."""

    A = 0x1  # accessed
    W = 0x2  # writeable (data segments)
    R = 0x2  # readable (code segments)
    E = 0x4  # expand down (data segments)
    C = 0x4  # conforming (code segments)
    X = 0x8  # executable


_U32 = 0xFFFFFFFF
_DESCRIPTOR = struct.Struct("<HHBBBB")


def null_segment() -> bytes:
    """Return the all-zero null descriptor."""
    return bytes(_DESCRIPTOR.size)


def encode_segment(seg_type: int, base: int, limit: int) -> bytes:
    """Return the 8-byte descriptor for a segment.

    The limit is stored in 4096-byte units and the segment is marked as
    32-bit, present and of privilege level 0.
    """
    seg_type = int(seg_type)
    if not 0 <= seg_type <= 0xF:
        raise ValueError(f"segment type out of range: {seg_type:#x}")
    if not 0 <= base <= _U32:
        raise ValueError(f"segment base out of range: {base:#x}")
    if not 0 <= limit <= _U32:
        raise ValueError(f"segment limit out of range: {limit:#x}")
    return _DESCRIPTOR.pack(
        (limit >> 12) & 0xFFFF,
        base & 0xFFFF,
        (base >> 16) & 0xFF,
        0x90 | seg_type,
        0xC0 | ((limit >> 28) & 0xF),
        (base >> 24) & 0xFF,
    )