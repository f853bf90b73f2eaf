"""A small printf that understands %d, %x, %p, %s, %c and %%."""

from __future__ import annotations

from typing import Any, TextIO

_DIGITS = "0123456789ABCDEF"
_U32 = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def format_int(value: int, base: int = 10, signed: bool = True) -> str:
    """Format ``value`` as a 32-bit integer in ``base`` with upper-case digits.

    Unsigned formatting shows negative numbers in two's complement.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"unsupported base {base}")
    raw = int(value) & _U32
    negative = signed and bool(raw & _SIGN_BIT)
    x = (1 << 32) - raw if negative else raw
    digits = []
    while True:
        x, remainder = divmod(x, base)
        digits.append(_DIGITS[remainder])
        if x == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _as_text(value: Any) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return str(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``.

    An unknown conversion is copied out with its percent sign.
    """
    pending = iter(args)

    def take() -> Any:
        try:
            return next(pending)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out: list[str] = []
    in_spec = False
    for ch in fmt:
        if not in_spec:
            if ch == "%":
                in_spec = True
            else:
                out.append(ch)
            continue
        in_spec = False
        if ch == "d":
            out.append(format_int(take(), 10, True))
        elif ch in ("x", "p"):
            out.append(format_int(take(), 16, False))
        elif ch == "s":
            out.append(_as_text(take()))
        elif ch == "c":
            out.append(_as_char(take()))
        elif ch == "%":
            out.append("%")
        else:
            out.append("%" + ch)
    return "".join(out)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the formatted text to ``stream`` and return its length."""
    text = sprintf(fmt, *args)
    stream.write(text)
    return len(text)