"""Writers for each conversion; each returns the number of characters written."""

from __future__ import annotations

from typing import TextIO

from .conversions import DECIMAL, HEX_LOWER, HEX_UPPER, itoa, to_base

_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


def _emit(out: TextIO, text: str) -> int:
    out.write(text)
    return len(text)


def _as_int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def write_char(out: TextIO, c: int | str) -> int:
    """Write one character; an integer is taken as its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return _emit(out, c)
    return _emit(out, chr(c & 0xFF))


def write_str(out: TextIO, s: str | None) -> int:
    """Write a string, or ``(null)`` for None."""
    if s is None:
        return _emit(out, "(null)")
    return _emit(out, s)


def write_ptr(out: TextIO, ptr: object) -> int:
    """Write an address as ``0x`` followed by lowercase hex.

    An int is used as the address itself; any other object uses its id().
    None and 0 print as ``0x0``.
    """
    if ptr is None:
        return _emit(out, "0x0")
    address = ptr if isinstance(ptr, int) else id(ptr)
    address &= _PTR_MASK
    if address == 0:
        return _emit(out, "0x0")
    return _emit(out, "0x" + to_base(address, HEX_LOWER))


def write_nbr(out: TextIO, n: int) -> int:
    """Write a signed 32-bit decimal integer."""
    return _emit(out, itoa(_as_int32(n)))


def write_hex(out: TextIO, n: int, uppercase: bool) -> int:
    """Write an unsigned 32-bit integer in hex."""
    digits = HEX_UPPER if uppercase else HEX_LOWER
    return _emit(out, to_base(n & _UINT_MASK, digits))


def write_unsigned(out: TextIO, n: int) -> int:
    """Write an unsigned 32-bit decimal integer."""
    return _emit(out, to_base(n & _UINT_MASK, DECIMAL))