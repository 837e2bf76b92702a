"""
Exact rational arithmetic over arbitrary-precision integers.

Fractions are immutable values kept in canonical form:
    - gcd(|numerator|, denominator) == 1
    - denominator > 0
    - zero is 0/1

No floating point value is ever produced, so arbitrarily large secrets
survive interpolation bit-exact.
"""

from dataclasses import dataclass

from ..errors import NonIntegerResult


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the Euclidean algorithm.

    Works on absolute values and always returns a non-negative integer.
    gcd(0, 0) is 0; callers reducing a fraction never hit that case because
    denominators are never zero.
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


@dataclass(frozen=True)
class Fraction:
    """
    A reduced fraction numerator/denominator.

    Use Fraction.of() to build one from an arbitrary pair; the constructor
    only accepts pairs that are already canonical.

    Attributes:
        numerator: Signed integer
        denominator: Positive integer, coprime with numerator
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self):
        if self.denominator <= 0:
            raise ValueError("Denominator must be positive")
        if gcd(self.numerator, self.denominator) != 1 and self.numerator != 0:
            raise ValueError(
                f"Fraction {self.numerator}/{self.denominator} is not reduced"
            )
        if self.numerator == 0 and self.denominator != 1:
            raise ValueError("Zero must be written as 0/1")

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> "Fraction":
        """
        Reduce numerator/denominator and move the sign onto the numerator.

        Raises:
            ZeroDivisionError: If denominator is zero
        """
        if denominator == 0:
            raise ZeroDivisionError(f"Zero denominator in {numerator}/0")
        if numerator == 0:
            return cls(0, 1)

        g = gcd(numerator, denominator)
        numerator //= g
        denominator //= g

        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        return cls(numerator, denominator)

    @property
    def is_integer(self) -> bool:
        return self.denominator == 1

    def to_int(self) -> int:
        """
        Return the integer value of this fraction.

        Raises:
            NonIntegerResult: If the denominator is not 1
        """
        if not self.is_integer:
            raise NonIntegerResult(self.numerator, self.denominator)
        return self.numerator

    def __add__(self, other: "Fraction") -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return add_fraction(self, other)

    def __mul__(self, other: "Fraction") -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return mul_fraction(self, other)

    def __neg__(self) -> "Fraction":
        return Fraction(-self.numerator, self.denominator)

    def __str__(self) -> str:
        if self.is_integer:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


ZERO = Fraction(0, 1)
ONE = Fraction(1, 1)


def add_fraction(a: Fraction, b: Fraction) -> Fraction:
    """(n1/d1) + (n2/d2) = (n1*d2 + n2*d1) / (d1*d2), reduced."""
    return Fraction.of(
        a.numerator * b.denominator + b.numerator * a.denominator,
        a.denominator * b.denominator,
    )


def mul_fraction(a: Fraction, b: Fraction) -> Fraction:
    """(n1/d1) * (n2/d2) = (n1*n2) / (d1*d2), reduced."""
    return Fraction.of(
        a.numerator * b.numerator,
        a.denominator * b.denominator,
    )
