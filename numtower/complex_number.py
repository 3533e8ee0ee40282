from __future__ import annotations

from typing import Union

from numtower.exceptions import DivisionByZeroError
from numtower.fraction import Fraction, ZERO
from numtower.integer import Integer, Zero
from numtower.operations import Number, add, divide, multiply, negate, register_promotion, subtract

FractionLike = Union[int, Integer, Fraction]


def _fraction(value: FractionLike) -> Fraction:
    if isinstance(value, Fraction):
        return value
    return Fraction(value)


class Complex(Number):
    """
    A complex number over exact fractions
    """
    __slots__ = ('real', 'imaginary')

    def __init__(self, real: FractionLike = ZERO, imaginary: FractionLike = ZERO):
        self.real = _fraction(real)
        self.imaginary = _fraction(imaginary)

    @classmethod
    def from_integers(cls, real: int, imaginary: int) -> Complex:
        return cls(Fraction(real), Fraction(imaginary))

    def conjugate(self) -> Complex:
        return Complex(self.real, -self.imaginary)

    def modulus_squared(self) -> Fraction:
        return self.real * self.real + self.imaginary * self.imaginary

    def as_polar(self):
        # the angle needs an inverse tangent, which the tower does not have
        raise NotImplementedError('polar form is not supported')

    def __eq__(self, other):
        if isinstance(other, (int, Integer, Fraction)):
            other = Complex(other)
        if not isinstance(other, Complex):
            return NotImplemented
        return self.real == other.real and self.imaginary == other.imaginary

    def __hash__(self):
        if isinstance(self.imaginary.numerator, Zero):
            return hash(self.real)
        return hash((self.real, self.imaginary))

    def __str__(self):
        sign = '-' if self.imaginary < ZERO else '+'
        return f'{self.real} {sign} {abs(self.imaginary)}i'

    def __repr__(self):
        return f'Complex({self.real!r}, {self.imaginary!r})'

    @add.implementor()
    def add(self, other):
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    @subtract.implementor()
    def subtract(self, other):
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    @multiply.implementor()
    def multiply(self, other):
        first = self.real * other.real
        outer = self.real * other.imaginary
        inner = self.imaginary * other.real
        last = self.imaginary * other.imaginary
        return Complex(first - last, outer + inner)

    @divide.implementor()
    def divide(self, other):
        bottom = other.modulus_squared()
        if isinstance(bottom.numerator, Zero):
            raise DivisionByZeroError(f'complex division by zero ({other})')
        top = self * other.conjugate()
        return Complex(top.real / bottom, top.imaginary / bottom)

    @negate.implementor()
    def negate(self):
        return Complex(-self.real, -self.imaginary)


register_promotion(Fraction, Complex, Complex)
register_promotion(Integer, Complex, Complex)
register_promotion(int, Complex, Complex)
