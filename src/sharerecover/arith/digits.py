"""
Arbitrary-base numeral parsing.

Values are read most-significant digit first using Horner's method:
    result = result * base + digit

Python integers are arbitrary precision, so no value overflows regardless
of the length of the numeral or the size of the base.
"""

from typing import Union

from ..errors import DigitOutOfRange, InvalidBase, InvalidDigit


MIN_BASE = 2
MAX_BASE = 36

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def parse_base(base: Union[str, int]) -> int:
    """
    Parse a base given as a decimal string (or int) and check its range.

    Raises:
        InvalidBase: If base is not a decimal integer in [2, 36]
    """
    if isinstance(base, bool):
        raise InvalidBase(base)
    if isinstance(base, str):
        text = base.strip()
        if not (text.isascii() and text.isdigit()) or len(text) > 2:
            raise InvalidBase(base)
        value = int(text)
    elif isinstance(base, int):
        value = base
    else:
        raise InvalidBase(base)

    if not MIN_BASE <= value <= MAX_BASE:
        raise InvalidBase(base)
    return value


def _digit_value(char: str) -> int:
    """Map '0'-'9' to 0-9 and 'A'-'Z' (either case) to 10-35, else -1."""
    code = ord(char)
    if ord("a") <= code <= ord("z"):
        code -= ord("a") - ord("A")
    if ord("0") <= code <= ord("9"):
        return code - ord("0")
    if ord("A") <= code <= ord("Z"):
        return 10 + code - ord("A")
    return -1


def parse_digits(text: str, base: int) -> int:
    """
    Read text as a base-b numeral.

    Surrounding whitespace is ignored. An empty string reads as 0.

    Args:
        text: Digits, most significant first
        base: Radix in [2, 36]

    Returns:
        Non-negative integer value

    Raises:
        InvalidBase: If base is out of range
        InvalidDigit: If a character is not in the alphabet
        DigitOutOfRange: If a digit is not below base

    Example:
        >>> parse_digits("213", 4)
        39
    """
    base = parse_base(base)
    result = 0

    for position, char in enumerate(text.strip()):
        digit = _digit_value(char)
        if digit < 0:
            raise InvalidDigit(char, position)
        if digit >= base:
            raise DigitOutOfRange(char, digit, base)
        result = result * base + digit

    return result


def to_digits(value: int, base: int) -> str:
    """
    Render a non-negative integer as a base-b numeral (uppercase letters).

    Raises:
        ValueError: If value is negative
        InvalidBase: If base is out of range
    """
    base = parse_base(base)
    if value < 0:
        raise ValueError(f"Cannot render negative value {value}")
    if value == 0:
        return "0"

    digits = []
    while value:
        value, digit = divmod(value, base)
        digits.append(ALPHABET[digit])

    return "".join(reversed(digits))
