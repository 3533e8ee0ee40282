"""
The operations shared by every layer of the tower. Each layer contributes candidates for its own types, and the
Number base class exposes them as python operators.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import partial
from typing import Callable

from numtower.candidate import Candidate
from numtower.multidispatch import MultiDispatch
from numtower.util import Ordering

add = MultiDispatch('add', 'the sum of two numbers')
subtract = MultiDispatch('subtract', 'the difference of two numbers')
multiply = MultiDispatch('multiply', 'the product of two numbers')
divide = MultiDispatch('divide', 'the quotient of two numbers')
remainder = MultiDispatch('remainder', 'what is left of the first number after repeatedly subtracting the second')
compare = MultiDispatch('compare', 'the Ordering of the first number relative to the second')
negate = MultiDispatch('negate', 'the additive inverse of a number')
absolute = MultiDispatch('absolute', 'the magnitude of a number, with a non-negative sign')

BINARY_OPERATIONS = (add, subtract, multiply, divide, remainder, compare)


class Number(ABC):
    """
    The base of all the values in the tower. Values are immutable, every operation returns a new value.
    """
    __slots__ = ()

    __add__ = add.op()
    __radd__ = add.rop()
    __sub__ = subtract.op()
    __rsub__ = subtract.rop()
    __mul__ = multiply.op()
    __rmul__ = multiply.rop()
    __truediv__ = divide.op()
    __rtruediv__ = divide.rop()
    __mod__ = remainder.op()
    __rmod__ = remainder.rop()
    __neg__ = negate.op()
    __abs__ = absolute.op()

    def _ordering(self, other):
        return compare.get((self, other), {}, default=NotImplemented)

    def __lt__(self, other):
        o = self._ordering(other)
        return o if o is NotImplemented else o is Ordering.LESS

    def __le__(self, other):
        o = self._ordering(other)
        return o if o is NotImplemented else o is not Ordering.GREATER

    def __gt__(self, other):
        o = self._ordering(other)
        return o if o is NotImplemented else o is Ordering.GREATER

    def __ge__(self, other):
        o = self._ordering(other)
        return o if o is NotImplemented else o is not Ordering.LESS

    def __eq__(self, other):
        o = self._ordering(other)
        return o if o is NotImplemented else o is Ordering.EQUAL

    @abstractmethod
    def __hash__(self):
        pass

    @abstractmethod
    def __str__(self):
        pass

    @abstractmethod
    def __repr__(self):
        """the structural layout of the value, with every variant spelled out"""
        pass


def _promote_left(md: MultiDispatch, promote: Callable, a, b):
    return md.get((promote(a), b), {}, default=NotImplemented)


def _promote_right(md: MultiDispatch, promote: Callable, a, b):
    return md.get((a, promote(b)), {}, default=NotImplemented)


def register_promotion(source: type, target: type, promote: Callable, priority=-1):
    """
    let every binary operation accept a source operand next to a target operand, by promoting the source operand
     first. Promotions run with a lower priority than any candidate the target defines for itself.

    :param source: the type of the operand to be promoted
    :param target: the type that the other operand must have
    :param promote: a callable converting a source instance to an instance the target's candidates accept
    :param priority: the priority of the promoting candidates
    """
    for md in BINARY_OPERATIONS:
        md.add_candidates([
            Candidate((source, target), partial(_promote_left, md, promote), priority),
            Candidate((target, source), partial(_promote_right, md, promote), priority),
        ])
