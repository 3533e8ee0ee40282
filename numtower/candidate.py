from __future__ import annotations

import inspect
from functools import wraps
from itertools import permutations, product
from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union, get_args, \
    get_origin, get_type_hints

from numtower.util import owner_class

# a special Type Variable to designate the owner class
Self = TypeVar('Self')


def annotation_types(annotation, owner: Optional[type]) -> Tuple[type, ...]:
    """
    split a parameter annotation into the classes it accepts

    can handle:
    * types
    * typing.Union
    * typing.Any (as object)
    * the Self type variable (as the owner class)
    """
    if annotation is Self or annotation is inspect.Parameter.empty:
        return (owner or object,)
    if annotation is Any:
        return (object,)
    if get_origin(annotation) is Union:
        return tuple(t for arg in get_args(annotation) for t in annotation_types(arg, owner))
    if isinstance(annotation, type):
        return (annotation,)
    raise TypeError(f'type annotation {annotation} is not a type, give it a default to ignore it from the candidate list')


def cmp_key(lhs: Sequence[type], rhs: Sequence[type]) -> Optional[int]:
    """
    can return 4 values:
    0 if they are identical
    -1 if lhs is more specific than rhs (every member of lhs is a subclass of its counterpart in rhs)
    1 if rhs is more specific than lhs
    None if they cannot be compared
    """
    if len(lhs) != len(rhs):
        return None
    if tuple(lhs) == tuple(rhs):
        return 0
    if all(issubclass(l, r) for l, r in zip(lhs, rhs)):
        return -1
    if all(issubclass(r, l) for l, r in zip(lhs, rhs)):
        return 1
    return None


class Candidate:
    """
    A single implementation of a multidispatch, applicable to a specific tuple of parameter types
    """

    def __init__(self, types: Tuple[type, ...], func: Callable, priority=0):
        """
        :param types: the types of the positional parameters, in order
        :param func: the implementation, called with the dispatched arguments
        :param priority: candidates of higher priority are attempted first among equally-specific candidates
        """
        self.types = tuple(types)
        self.func = func
        self.priority = priority
        self.__name__ = getattr(func, '__name__', None) or getattr(getattr(func, 'func', None), '__name__', None)
        self.__doc__ = getattr(func, '__doc__', None)

    @classmethod
    def from_func(cls, priority, func, owner: Optional[type] = None) -> List[Candidate]:
        """
        create candidates from a function's annotations, one for each combination of the annotated types.
         Parameters with default values are ignored. Unannotated parameters of a function defined inside a class
         accept that class.

        :param priority: the priority of the candidates
        :param func: the function to read
        :param owner: the class the function was defined in, discovered from the function if omitted
        """
        if owner is None:
            owner = owner_class(func)
        localns = {owner.__name__: owner} if owner else None
        hints = get_type_hints(func, localns=localns)

        params = [
            p for p in inspect.signature(func).parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
        ]
        type_options = [annotation_types(hints.get(p.name, p.empty), owner) for p in params]
        return [cls(types, func, priority) for types in product(*type_options)]

    def permutations(self):
        """
        yield the candidate along with candidates for every distinct reordering of its parameters,
         each of which restores the original order before calling the implementation
        """
        yield self
        seen = {self.types}
        func = self.func
        for perm in permutations(range(len(self.types))):
            types = tuple(self.types[i] for i in perm)
            if types in seen:
                continue
            seen.add(types)
            inverse = [perm.index(i) for i in range(len(perm))]

            @wraps(func)
            def permuted(*args, _inverse=inverse, **kwargs):
                return func(*(args[i] for i in _inverse), **kwargs)

            yield type(self)(types, permuted, self.priority)

    def match(self, query: Tuple[type, ...]) -> bool:
        return len(query) == len(self.types) and all(issubclass(q, t) for q, t in zip(query, self.types))

    def __str__(self):
        return f'{self.__name__}(' + ", ".join(t.__name__ for t in self.types) + ')'

    def __repr__(self):
        return f'<Candidate {self} priority={self.priority}>'


def specificity_layers(candidates: Iterable[Candidate]) -> Iterator[List[Candidate]]:
    """
    split candidates into layers of equal precedence. A candidate is placed in the layer after the last candidate
     that is more specific than it, candidates of identical or unrelated types may share a layer.
    """
    remaining = list(candidates)
    while remaining:
        layer = []
        rest = []
        for cand in remaining:
            if any(cmp_key(other.types, cand.types) == -1 for other in remaining):
                rest.append(cand)
            else:
                layer.append(cand)
        yield layer
        remaining = rest
