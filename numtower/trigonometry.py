"""
Trigonometric approximations over fractions, by truncated Taylor polynomials.

The tower has no irrational numbers, so pi is the rational 355/113 and every argument is reduced modulo the matching
tau before the polynomial is evaluated. No error bound is computed.
"""
from __future__ import annotations

from threading import Lock
from typing import Optional, Tuple, Union

from numtower.exceptions import DivisionByZeroError
from numtower.fraction import Fraction, ONE
from numtower.integer import Integer, Zero
from numtower.logging import get_logger

logger = get_logger(__name__)

FractionLike = Union[int, Integer, Fraction]

_constants: Optional[Tuple[Fraction, Fraction]] = None
_constants_lock = Lock()


def _pi_tau() -> Tuple[Fraction, Fraction]:
    global _constants
    if _constants is None:
        with _constants_lock:
            if _constants is None:
                pi_ = Fraction(355, 113)
                _constants = pi_, pi_ * 2
                logger.debug('initialized pi=%s, tau=%s', *_constants)
    return _constants


def pi() -> Fraction:
    return _pi_tau()[0]


def tau() -> Fraction:
    return _pi_tau()[1]


def _power(x: Fraction, exponent: int) -> Fraction:
    ret = x
    for _ in range(exponent - 1):
        ret = ret * x
    return ret


def _reduce(x: FractionLike) -> Fraction:
    if not isinstance(x, Fraction):
        x = Fraction(x)
    return x % tau()


def sine(x: FractionLike) -> Fraction:
    """
    x - x^3/3! + x^5/5! - x^7/7!, after reducing x modulo tau. x must not be negative.
    """
    x = _reduce(x)
    return (x
            - _power(x, 3) / Fraction(6)
            + _power(x, 5) / Fraction(120)
            - _power(x, 7) / Fraction(5040))


def cosine(x: FractionLike) -> Fraction:
    """
    1 - x^2/2! + x^4/4! - x^6/6!, after reducing x modulo tau. x must not be negative.
    """
    x = _reduce(x)
    return (ONE
            - _power(x, 2) / Fraction(2)
            + _power(x, 4) / Fraction(24)
            - _power(x, 6) / Fraction(720))


def tangent(x: FractionLike) -> Fraction:
    cos = cosine(x)
    if isinstance(cos.numerator, Zero):
        raise DivisionByZeroError(f'tangent is undefined where the cosine is zero ({x})')
    return sine(x) / cos
