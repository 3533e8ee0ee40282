"""
Positive integers, built from a base unit and a chain of successors. There is no zero.

The chain of a natural number n holds exactly n nodes, so every operation here is linear in the magnitude of its
operands. Chains are walked in loops rather than recursively, so magnitudes are not bounded by the interpreter's
recursion limit.
"""
from __future__ import annotations

from numtower.exceptions import NaturalRangeError, PredecessorError
from numtower.operations import Number, add, compare, divide, multiply, subtract
from numtower.util import Ordering


class Natural(Number):
    __slots__ = ()

    @staticmethod
    def from_integer(value: int) -> Natural:
        if value < 1:
            raise NaturalRangeError(value)
        ret = base
        for _ in range(value - 1):
            ret = Successor(ret)
        return ret

    def to_integer(self) -> int:
        ret = 1
        node = self
        while isinstance(node, Successor):
            ret += 1
            node = node.predecessor
        return ret

    def __int__(self):
        return self.to_integer()

    def __hash__(self):
        return hash(self.to_integer())

    def __str__(self):
        return str(self.to_integer())

    def __repr__(self):
        depth = self.to_integer() - 1
        return 'Successor(' * depth + 'Base()' + ')' * depth

    @divide.implementor()
    def divide(self, other):
        # counts from 1, so a quotient below 1 is rounded up to the base
        a = self
        times = base
        while a > other:
            a = a - other
            times = Successor(times)
        return times


class Base(Natural):
    """The natural number 1"""
    __slots__ = ()

    @add.implementor()
    def add(self, other: Natural):
        return Successor(other)

    @subtract.implementor()
    def subtract(self, other: Natural):
        raise PredecessorError()

    @multiply.implementor()
    def multiply(self, other: Natural):
        return other

    @compare.implementor()
    def compare(self, other):
        return Ordering.EQUAL

    @compare.implementor()
    def compare(self, other: Successor):
        return Ordering.LESS


class Successor(Natural):
    __slots__ = ('predecessor',)

    def __init__(self, predecessor: Natural):
        if not isinstance(predecessor, Natural):
            raise TypeError(f'the predecessor of a natural number must be natural, got {type(predecessor).__name__}')
        self.predecessor = predecessor

    @add.implementor()
    def add(self, other: Natural):
        # every successor of self is stacked on top of other, then the base
        ret = other
        node = self
        while isinstance(node, Successor):
            ret = Successor(ret)
            node = node.predecessor
        return Successor(ret)

    @subtract.implementor()
    def subtract(self, other: Natural):
        a, b = self, other
        while isinstance(b, Successor):
            if not isinstance(a, Successor):
                raise PredecessorError()
            a, b = a.predecessor, b.predecessor
        if not isinstance(a, Successor):
            raise PredecessorError()
        return a.predecessor

    @multiply.implementor()
    def multiply(self, other: Natural):
        ret = other
        node = self
        while isinstance(node, Successor):
            ret = other + ret
            node = node.predecessor
        return ret

    @compare.implementor()
    def compare(self, other: Base):
        return Ordering.GREATER

    @compare.implementor()
    def compare(self, other):
        a, b = self, other
        while isinstance(a, Successor) and isinstance(b, Successor):
            a, b = a.predecessor, b.predecessor
        if isinstance(a, Successor):
            return Ordering.GREATER
        if isinstance(b, Successor):
            return Ordering.LESS
        return Ordering.EQUAL


base = Base()
