"""
Rational numbers as a pair of integers, always stored in lowest terms with a non-negative denominator.
"""
from __future__ import annotations

from typing import Union

from numtower.exceptions import DivisionByZeroError, NegativeOperandError
from numtower.integer import Integer, Negative, Zero, gcd, one, zero
from numtower.logging import get_logger
from numtower.operations import Number, absolute, add, compare, divide, multiply, negate, register_promotion, \
    remainder, subtract
from numtower.util import Ordering

logger = get_logger(__name__)

IntegerLike = Union[int, Integer]


def _integer(value: IntegerLike) -> Integer:
    if isinstance(value, Integer):
        return value
    if isinstance(value, int):
        return Integer.from_integer(value)
    raise TypeError(f'expected an integer, got {type(value).__name__}')


class Fraction(Number):
    """
    A normalized rational number.

    Normalization moves the sign to the numerator and divides both parts by their greatest common divisor. The
    degenerate fraction 0/0 is accepted and left as is, a non-zero numerator over 0 is reduced to 1/0 or -1/0.
    """
    __slots__ = ('numerator', 'denominator')

    def __init__(self, numerator: IntegerLike = zero, denominator: IntegerLike = one):
        numerator = _integer(numerator)
        denominator = _integer(denominator)

        if isinstance(denominator, Negative):
            numerator, denominator = -numerator, -denominator
        if isinstance(numerator, Zero) and not isinstance(denominator, Zero):
            denominator = one

        divisor = gcd(abs(numerator), abs(denominator))
        self.numerator: Integer = numerator / divisor
        self.denominator: Integer = denominator / divisor
        if self.is_degenerate():
            logger.debug('constructed degenerate fraction %s', self)

    @classmethod
    def _raw(cls, numerator: Integer, denominator: Integer) -> Fraction:
        # bypasses normalization, the caller guarantees the parts are already normalized
        ret = cls.__new__(cls)
        ret.numerator = numerator
        ret.denominator = denominator
        return ret

    def is_degenerate(self) -> bool:
        """whether the denominator is zero"""
        return isinstance(self.denominator, Zero)

    def __eq__(self, other):
        if isinstance(other, (int, Integer)):
            other = Fraction(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.numerator == other.numerator and self.denominator == other.denominator

    def __hash__(self):
        if self.denominator == one:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __str__(self):
        if self.denominator == one:
            return str(self.numerator)
        return f'{self.numerator}/{self.denominator}'

    def __repr__(self):
        return f'Fraction({self.numerator!r}, {self.denominator!r})'

    @add.implementor()
    def add(self, other):
        a, b = self.numerator, self.denominator
        c, d = other.numerator, other.denominator
        return Fraction(a * d + b * c, b * d)

    @subtract.implementor()
    def subtract(self, other):
        a, b = self.numerator, self.denominator
        c, d = other.numerator, other.denominator
        return Fraction(a * d - b * c, b * d)

    @multiply.implementor()
    def multiply(self, other):
        return Fraction(self.numerator * other.numerator, self.denominator * other.denominator)

    @divide.implementor()
    def divide(self, other):
        if isinstance(other.numerator, Zero):
            raise DivisionByZeroError(f'fraction division by zero ({other})')
        return Fraction(self.numerator * other.denominator, self.denominator * other.numerator)

    @compare.implementor()
    def compare(self, other):
        return compare((self - other).numerator, zero)

    @negate.implementor()
    def negate(self):
        return self._raw(-self.numerator, self.denominator)

    @absolute.implementor()
    def absolute(self):
        return self._raw(abs(self.numerator), abs(self.denominator))

    @remainder.implementor()
    def modulo(self, other):
        """
        repeatedly subtract other from self while self is at least other. Self must not be negative, and other must
         be positive. A degenerate self is returned unchanged.
        """
        if self.is_degenerate():
            return self
        if compare(self.numerator, zero) is Ordering.LESS:
            raise NegativeOperandError(f'modulo requires a non-negative dividend, got {self}')
        order = compare(other.numerator, zero)
        if order is Ordering.EQUAL:
            raise DivisionByZeroError(f'modulo by zero ({other})')
        if order is Ordering.LESS:
            raise NegativeOperandError(f'modulo requires a positive divisor, got {other}')

        ret = self
        while ret >= other:
            ret = ret - other
        return ret


ZERO = Fraction(zero)
ONE = Fraction(one)

register_promotion(Integer, Fraction, Fraction)
register_promotion(int, Fraction, Fraction)
