"""
Error taxonomy for share recovery.

Every error derives from RecoveryError, which is itself a ValueError, so
callers may catch either. All errors are terminal: nothing is retried and
no partial result is returned.
"""

from typing import Optional


# Values above this many bits are summarized instead of printed in full
DISPLAY_BITS = 4000


def format_int(value: int) -> str:
    """
    Render an integer for a message, summarizing very large values.

    str() refuses ints beyond the interpreter's digit limit, and such a
    value would not be readable anyway.
    """
    bits = abs(value).bit_length()
    if bits <= DISPLAY_BITS:
        return str(value)
    sign = "-" if value < 0 else ""
    return f"{sign}<{bits * 30103 // 100000 + 1}-digit integer>"


class RecoveryError(ValueError):
    """Base class for all share recovery failures."""


class InvalidDigit(RecoveryError):
    """A character is outside the 0-9, A-Z alphabet."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid digit {char!r} at position {position}")


class DigitOutOfRange(RecoveryError):
    """A digit's value is not below the declared base."""

    def __init__(self, char: str, value: int, base: int):
        self.char = char
        self.value = value
        self.base = base
        super().__init__(
            f"Digit {char!r} (value {value}) not valid for base {base}"
        )


class InvalidBase(RecoveryError):
    """A base is not an integer in [2, 36]."""

    def __init__(self, base: object):
        self.base = base
        super().__init__(f"Base must be an integer in [2, 36], got {base!r}")


class InsufficientShares(RecoveryError):
    """Fewer shares are available than the threshold requires."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"Need at least k={format_int(required)} shares, got {available}"
        )


class DuplicateXCoordinate(RecoveryError):
    """Two shares have the same x-coordinate."""

    def __init__(self, x: int):
        self.x = x
        super().__init__(f"Duplicate x value in shares: {format_int(x)}")


class NonIntegerResult(RecoveryError):
    """
    The interpolated constant term is not an integer.

    This means the shares are not points of one integer polynomial of the
    declared degree: wrong k, a corrupted share, or mismatched x values.
    """

    def __init__(self, numerator: int, denominator: int):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(
            f"Non-integer result: {format_int(numerator)}/{format_int(denominator)}"
        )


class MalformedShareSet(RecoveryError):
    """The external share collection does not have the expected shape."""


class InconsistentShares(RecoveryError):
    """Two k-subsets of the available shares interpolate to different values."""

    def __init__(
        self,
        first: tuple[tuple[int, ...], int],
        second: tuple[tuple[int, ...], int],
        checked: Optional[int] = None,
    ):
        self.first = first
        self.second = second
        self.checked = checked
        (xs_a, value_a), (xs_b, value_b) = first, second
        super().__init__(
            f"Shares disagree: x={list(xs_a)} gives {format_int(value_a)}, "
            f"x={list(xs_b)} gives {format_int(value_b)}"
        )
