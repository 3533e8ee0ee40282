"""
Signed integers: zero, or a sign tag over a natural magnitude.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Union

from numtower.exceptions import DivisionByZeroError, NegativeOperandError
from numtower.natural import Natural, base
from numtower.operations import Number, absolute, add, compare, divide, multiply, negate, register_promotion, \
    remainder, subtract
from numtower.util import Ordering


class Integer(Number):
    __slots__ = ()

    @staticmethod
    def from_integer(value: int) -> Integer:
        if value > 0:
            return Positive(Natural.from_integer(value))
        if value < 0:
            return Negative(Natural.from_integer(-value))
        return zero

    @abstractmethod
    def to_integer(self) -> int:
        pass

    def __int__(self):
        return self.to_integer()

    def __hash__(self):
        return hash(self.to_integer())

    def __str__(self):
        return str(self.to_integer())

    @subtract.implementor()
    def subtract(self, other):
        return self + (-other)


class Zero(Integer):
    __slots__ = ()

    def to_integer(self) -> int:
        return 0

    def __repr__(self):
        return 'Zero()'

    @negate.implementor()
    def negate(self):
        return self

    @absolute.implementor()
    def absolute(self):
        return self

    @add.implementor()
    def add(self, other):
        return self

    @add.implementor(symmetric=True)
    def add(self, other: Integer):
        return other

    @multiply.implementor()
    def multiply(self, other):
        return self

    @multiply.implementor(symmetric=True)
    def multiply(self, other: Integer):
        return self

    @divide.implementor()
    def divide(self, other: Integer):
        return self

    @remainder.implementor()
    def remainder(self, other: Integer):
        # not a true remainder, kept for compatibility
        return other

    @compare.implementor()
    def compare(self, other):
        return Ordering.EQUAL

    @compare.implementor()
    def compare(self, other: Positive):
        return Ordering.LESS

    @compare.implementor()
    def compare(self, other: Negative):
        return Ordering.GREATER


zero = Zero()


class NonZero(Integer):
    """An integer with a sign, the magnitude of which is a natural number and so never zero"""
    __slots__ = ('magnitude',)

    def __init__(self, magnitude: Natural):
        if not isinstance(magnitude, Natural):
            raise TypeError(f'the magnitude of a signed integer must be natural, got {type(magnitude).__name__}')
        self.magnitude = magnitude

    def __repr__(self):
        return f'{type(self).__name__}({self.magnitude!r})'

    @staticmethod
    def _signed(magnitude: Natural, same_sign: bool) -> NonZero:
        return Positive(magnitude) if same_sign else Negative(magnitude)

    @multiply.implementor()
    def multiply(self, other):
        return self._signed(self.magnitude * other.magnitude, type(self) is type(other))

    @divide.implementor()
    def divide(self, other):
        return self._signed(self.magnitude / other.magnitude, type(self) is type(other))

    @divide.implementor()
    def divide(self, other: Zero):
        raise DivisionByZeroError('integer division by zero')

    @remainder.implementor()
    def remainder(self, other: Zero):
        # not a true remainder, kept for compatibility
        return self

    @remainder.implementor()
    def remainder(self, other):
        if isinstance(other, Negative) and self >= other:
            # subtracting a negative divisor only grows the dividend
            raise NegativeOperandError(f'remainder of {self} by a negative divisor ({other}) never terminates')
        ret = self
        while ret >= other:
            ret = ret - other
        return ret


class Positive(NonZero):
    __slots__ = ()

    def to_integer(self) -> int:
        return self.magnitude.to_integer()

    @negate.implementor()
    def negate(self):
        return Negative(self.magnitude)

    @absolute.implementor()
    def absolute(self):
        return self

    @add.implementor()
    def add(self, other):
        return Positive(self.magnitude + other.magnitude)

    @add.implementor(symmetric=True)
    def add(self, other: Negative):
        order = compare(self.magnitude, other.magnitude)
        if order is Ordering.GREATER:
            return Positive(self.magnitude - other.magnitude)
        if order is Ordering.LESS:
            return Negative(other.magnitude - self.magnitude)
        return zero

    @compare.implementor()
    def compare(self, other):
        return compare(self.magnitude, other.magnitude)

    @compare.implementor()
    def compare(self, other: Union[Zero, Negative]):
        return Ordering.GREATER


class Negative(NonZero):
    __slots__ = ()

    def to_integer(self) -> int:
        return -self.magnitude.to_integer()

    @negate.implementor()
    def negate(self):
        return Positive(self.magnitude)

    @absolute.implementor()
    def absolute(self):
        return Positive(self.magnitude)

    @add.implementor()
    def add(self, other):
        return Negative(self.magnitude + other.magnitude)

    @compare.implementor()
    def compare(self, other):
        return compare(other.magnitude, self.magnitude)

    @compare.implementor()
    def compare(self, other: Union[Zero, Positive]):
        return Ordering.LESS


one = Positive(base)


def gcd(x: Integer, y: Integer) -> Integer:
    """
    the greatest common divisor of two integers, by Euclid's algorithm over the remainder operation.
     gcd(0, 0) is 0.
    """
    while not isinstance(y, Zero):
        x, y = y, x % y
    return x


register_promotion(int, Integer, Integer.from_integer)
