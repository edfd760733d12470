"""Conversions between decimal, binary, octal and hexadecimal notations.

Binary and octal numbers are written as ordinary integers whose decimal
digits are the digits of the number, e.g. ``101`` for five in binary.
"""

_HEX_DIGITS = {char: value for value, char in enumerate("0123456789ABCDEF")}


def reverse_digits(n: int) -> int:
    """Return ``n`` with its decimal digits reversed; 0 for ``n <= 0``."""
    result = 0
    while n > 0:
        n, digit = divmod(n, 10)
        result = result * 10 + digit
    return result


def add_binary(a: int, b: int) -> int:
    """Add two binary-digit numbers.

    The digits of the result come out least significant first, so a sum
    whose lowest bit is zero loses that leading zero.
    """
    result = 0
    carry = 0
    while a > 0 or b > 0:
        a, digit_a = divmod(a, 10)
        b, digit_b = divmod(b, 10)
        total = digit_a % 2 + digit_b % 2 + carry
        result = result * 10 + total % 2
        carry = total // 2
    if carry:
        result = result * 10 + 1
    return result


def decimal_to_binary(n: int) -> int:
    """Return ``n`` written in binary digits as an integer; 0 for ``n <= 0``."""
    if n <= 0:
        return 0
    return int(format(n, "b"))


def hex_to_decimal(text: str) -> int:
    """Return the value of an upper-case hexadecimal string.

    Characters other than ``0-9`` and ``A-F`` count as zero but still
    occupy a digit position.
    """
    return sum(
        _HEX_DIGITS.get(char, 0) * 16**position
        for position, char in enumerate(reversed(text))
    )


def octal_to_decimal(n: int) -> int:
    """Return the value of ``n`` read as octal digits."""
    result = 0
    weight = 1
    while n > 0:
        n, digit = divmod(n, 10)
        result += weight * digit
        weight *= 8
    return result


def to_binary(n: int) -> str:
    """Return the binary digits of ``n`` as a string; empty for ``n <= 0``."""
    return format(n, "b") if n > 0 else ""


def next_without_adjacent_ones(n: int) -> int:
    """Return the smallest number ``>= n`` with no two adjacent 1 bits."""
    while "11" in to_binary(n):
        n += 1
    return n