"""Conversions between decimal and binary, octal and hexadecimal."""

from __future__ import annotations

__all__ = [
    "decimal_to_binary",
    "binary_to_decimal",
    "decimal_to_hexadecimal",
    "decimal_to_octal",
    "hexadecimal_to_decimal",
    "octal_to_decimal",
]

_HEX_DIGITS = "0123456789ABCDEF"


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("value must be non-negative")


def _reinterpret_digits(n: int, base: int) -> int:
    """Read the decimal digits of ``n`` as digits in ``base``."""
    _require_non_negative(n)
    total = 0
    weight = 1
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * weight
        weight *= base
    return total


def decimal_to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer."""
    _require_non_negative(n)
    return format(n, "b")


def binary_to_decimal(n: int) -> int:
    """Interpret the decimal digits of ``n`` as a binary number."""
    return _reinterpret_digits(n, 2)


def decimal_to_hexadecimal(n: int) -> str:
    """Return the upper-case hexadecimal digits of a non-negative integer."""
    _require_non_negative(n)
    return format(n, "X")


def decimal_to_octal(n: int) -> str:
    """Return the octal digits of a non-negative integer."""
    _require_non_negative(n)
    return format(n, "o")


def hexadecimal_to_decimal(text: str) -> int:
    """Convert upper-case hexadecimal text to an integer.

    Characters outside 0-9 and A-F count as a zero digit.
    """
    total = 0
    for ch in text:
        digit = _HEX_DIGITS.find(ch)
        total = total * 16 + max(digit, 0)
    return total


def octal_to_decimal(n: int) -> int:
    """Interpret the decimal digits of ``n`` as an octal number."""
    return _reinterpret_digits(n, 8)