from __future__ import annotations

from functools import partial
from itertools import chain, groupby
from threading import Lock
from typing import Callable, Dict, Iterable, Iterator, List, Tuple

from sortedcontainers import SortedKeyList

from numtower.candidate import Candidate, specificity_layers
from numtower.descriptors import ImplementorSlot, OperatorAdapter
from numtower.exceptions import AmbiguityError, NoCandidateError
from numtower.logging import get_logger

logger = get_logger(__name__)


def _by_priority(candidates=()):
    return SortedKeyList(candidates, key=lambda c: -c.priority)


class _PendingFunc:
    """
    A function waiting to be turned into candidates, its annotations may refer to classes that do not exist yet
    """

    def __init__(self, func, priority, symmetric):
        self.func = func
        self.priority = priority
        self.symmetric = symmetric

    def candidates(self) -> Iterable[Candidate]:
        cands = Candidate.from_func(self.priority, self.func)
        if self.symmetric:
            cands = chain.from_iterable(c.permutations() for c in cands)
        return cands


EMPTY = object()


class MultiDispatch:
    """
    The central class, a callable that can delegate to multiple candidates depending on the types of parameters
    """

    def __init__(self, name: str = None, doc: str = None):
        """
        :param name: an optional name for the callable
        :param doc: an optional doc for the callable
        """
        self.__name__ = name
        self.__doc__ = doc

        self.candidate_lists: Dict[int, SortedKeyList] = {}
        self.cache: Dict[Tuple[type, ...], List[List[Candidate]]] = {}
        self._pending: List[_PendingFunc] = []
        # guards the pending functions, the candidate lists and the cache while they are filled
        self._lock = Lock()

    def _add_candidate(self, candidate: Candidate):
        """
        Add a single candidate to the multidispatch. If the multidispatch has no set name or doc, the name or doc of
        the candidate will be used (if available)

        :param candidate: the candidate to add
        """
        sc = self.candidate_lists.get(len(candidate.types))
        if sc is None:
            sc = self.candidate_lists[len(candidate.types)] = _by_priority()
        if any(c.types == candidate.types and c.priority == candidate.priority for c in sc):
            raise ValueError(f'A candidate of equal types ({candidate.types})'
                             f' and priority ({candidate.priority}) exists')
        sc.add(candidate)

        if not self.__name__:
            self.__name__ = candidate.__name__
        if not self.__doc__:
            self.__doc__ = candidate.__doc__

    def _add_candidates(self, candidates: Iterable[Candidate]):
        for cand in candidates:
            self._add_candidate(cand)
        self.cache.clear()

    def add_candidates(self, candidates: Iterable[Candidate]):
        """
        Add a collection of candidates to the multidispatch.

        :param candidates: an iterable of candidates to be added.
        """
        with self._lock:
            self._add_candidates(candidates)
        return self

    def register(self, priority=0, symmetric=False, func=None):
        """
        Adds candidates to a multidispatch generated from a function, usable as a decorator. The function's
        annotations are only read on the next call of the multidispatch, so they may name classes that are defined
        later in the module.

        :param priority: the priority of the candidates.
        :param symmetric: if set to true, the permutations of all the candidates are added as well
        :param func: the function to used
        """
        if not func:
            if callable(priority):
                func = priority
                priority = 0
            else:
                return partial(self.register, priority, symmetric)
        with self._lock:
            self._pending.append(_PendingFunc(func, priority, symmetric))
        return func

    def implementor(self, priority=0, symmetric=False) -> Callable[[Callable], ImplementorSlot]:
        """
        a decorator for functions defined inside a class body, the unannotated parameters of which will accept
         instances of that class. The decorated name is replaced with a slot through which more implementors
         can be declared.

        :param priority: the priority of the candidates.
        :param symmetric: if set to true, the permutations of all the candidates are added as well
        """

        def decorator(func):
            self.register(priority, symmetric, func)
            return ImplementorSlot(self)

        return decorator

    def _flush_pending(self):
        # must be called with the lock held
        while self._pending:
            pending = self._pending
            self._pending = []
            self._add_candidates(chain.from_iterable(p.candidates() for p in pending))
            logger.debug('%s: registered %d pending implementations', self, len(pending))

    def _yield_layers(self, types: Tuple[type, ...]) -> List[List[Candidate]]:
        """
        get all the relevant candidates for a type tuple, grouped first by specificity (most specific first),
        and second by priority (descending)

        :param types: the type tuple to get candidates for
        """
        if not self._pending:
            ret = self.cache.get(types)
            if ret is not None:
                return ret
        with self._lock:
            self._flush_pending()
            ret = self.cache.get(types)
            if ret is None:
                matching = [c for c in self.candidate_lists.get(len(types), ()) if c.match(types)]
                ret = []
                for layer in specificity_layers(matching):
                    for _, group in groupby(_by_priority(layer), key=lambda c: c.priority):
                        ret.append(list(group))
                self.cache[types] = ret
                logger.debug('%s: resolved %d candidate groups for <%s>', self, len(ret),
                             ", ".join(t.__name__ for t in types))
        return ret

    def get(self, args, kwargs, default=None):
        """
        call the multidispatch with args as arguments, attempts all the appropriate candidate until one returns a
        non-NotImplemted value. If all the candidates are exhausted, returns default.

        :param args: the arguments for the multidispatch
        :param kwargs: keyword arguments forwarded directly to any attempted candidate
        :param default: the value to return if all candidates are exhausted
        """
        types = tuple(type(a) for a in args)
        for group in self._yield_layers(types):
            if len(group) != 1:
                raise AmbiguityError(group, types)
            ret = group[0].func(*args, **kwargs)
            if ret is not NotImplemented:
                return ret
        return default

    def __call__(self, *args, **kwargs):
        """
        call the multidispatch and raise an error if no candidates are found
        """
        ret = self.get(args, kwargs, default=EMPTY)
        if ret is EMPTY:
            raise NoCandidateError(args)
        return ret

    def op(self):
        """
        :return: an adapter for the multidispatch to be used as an operator, returning NotImplemented if no
         candidates match
        """
        return OperatorAdapter(self)

    def rop(self):
        """
        :return: an adapter for the multidispatch to be used as a reflected operator (such as __radd__)
        """
        return OperatorAdapter(self, reflected=True)

    def candidates_for_types(self, *arg_types) -> Iterator[List[Candidate]]:
        """
        get candidate groups in the order a call with arguments of these types attempts them
        """
        return iter(self._yield_layers(arg_types))

    def __str__(self):
        if self.__name__:
            return f'<MultiDispatch {self.__name__}>'
        return super().__str__()
