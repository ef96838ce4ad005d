"""Number-to-text conversions used by the formatter."""

from __future__ import annotations

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"


def _check_digits(digits: str) -> None:
    if not digits or len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if len(set(digits)) != len(digits):
        raise ValueError(f"base digits must be distinct: {digits!r}")


def to_base(n: int, digits: str) -> str:
    """Render the non-negative integer ``n`` using ``digits`` as the base alphabet.

    The base is the number of digits. Raises ValueError for an invalid
    alphabet (fewer than two digits or repeated digits) or a negative ``n``.
    """
    _check_digits(digits)
    if n < 0:
        raise ValueError(f"cannot convert a negative number: {n}")
    if n == 0:
        return digits[0]
    base = len(digits)
    out: list[str] = []
    while n:
        n, rem = divmod(n, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def itoa(n: int) -> str:
    """Render a signed integer in decimal, with a leading '-' when negative."""
    if n < 0:
        return "-" + to_base(-n, DECIMAL)
    return to_base(n, DECIMAL)