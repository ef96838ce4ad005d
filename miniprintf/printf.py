"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from .handlers import (
    write_char,
    write_hex,
    write_nbr,
    write_ptr,
    write_str,
    write_unsigned,
)


class _UnknownSpecifier(ValueError):
    """Raised for a conversion character the formatter does not know."""


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for '%{spec}'") from None


def handle_specifier(out: TextIO, spec: str, args: Iterator[Any]) -> int:
    """Write one conversion, consuming its argument from ``args``.

    Returns the number of characters written. Raises ValueError for an
    unknown conversion and TypeError when ``args`` is exhausted.
    """
    if spec == "%":
        out.write("%")
        return 1
    if spec == "c":
        return write_char(out, _next_arg(args, spec))
    if spec == "s":
        return write_str(out, _next_arg(args, spec))
    if spec == "p":
        return write_ptr(out, _next_arg(args, spec))
    if spec in ("d", "i"):
        return write_nbr(out, _next_arg(args, spec))
    if spec == "u":
        return write_unsigned(out, _next_arg(args, spec))
    if spec in ("x", "X"):
        return write_hex(out, _next_arg(args, spec), spec == "X")
    raise _UnknownSpecifier(f"unknown conversion '%{spec}'")


def printf(format: str, *args: Any, file: TextIO | None = None) -> int:
    """Format ``args`` according to ``format`` and write to ``file`` (stdout by default).

    Returns the total character count. An unknown conversion writes nothing
    and lowers the count by one; a lone trailing '%' is written as is.
    """
    out = sys.stdout if file is None else file
    arg_iter = iter(args)
    chars = iter(format)
    count = 0
    for ch in chars:
        if ch == "%":
            spec = next(chars, None)
            if spec is not None:
                try:
                    count += handle_specifier(out, spec, arg_iter)
                except _UnknownSpecifier:
                    count -= 1
                continue
        out.write(ch)
        count += 1
    return count