from typing import Union

from numtower.candidate import Candidate, Self, annotation_types, cmp_key, specificity_layers


class A:
    pass


class B(A):
    pass


class D(B):
    pass


class C(A):
    pass


class E(D, C):
    pass


class G:
    pass


r"""
 A  G
/ \
B C
| |
D |
\ /
 E
"""


def test_cmp_key():
    assert cmp_key((B,), (D,)) > 0
    assert cmp_key((D,), (B,)) < 0
    assert cmp_key((D,), (C,)) is None
    assert cmp_key((D,), (D,)) == 0
    assert cmp_key((E, A), (D, A)) < 0
    assert cmp_key((E, G), (D, A)) is None
    assert cmp_key((A,), (A, A)) is None


def test_annotation_types():
    assert annotation_types(Union[B, C], None) == (B, C)
    assert annotation_types(Self, G) == (G,)
    assert annotation_types(A, G) == (A,)
    assert annotation_types(Union[int, Union[str, bytes]], None) == (int, str, bytes)


def cand(*types):
    return Candidate(types, lambda *args: types)


def test_layers():
    a, b, c, d, e = cand(A), cand(B), cand(C), cand(D), cand(E)
    layers = list(specificity_layers([a, b, c, d, e]))
    assert layers[0] == [e]
    assert set(layers[1]) == {d, c}
    assert layers[2] == [b]
    assert layers[3] == [a]


def test_layers_unrelated():
    a, g = cand(A), cand(G)
    layers = list(specificity_layers([a, g]))
    assert len(layers) == 1
    assert set(layers[0]) == {a, g}


def test_from_func_product():
    def func(x: Union[B, C], y: Union[D, G]):
        pass

    cands = Candidate.from_func(0, func)
    assert {c.types for c in cands} == {(B, D), (B, G), (C, D), (C, G)}


def test_from_func_defaults_ignored():
    def func(x: A, y: int = 0):
        pass

    assert [c.types for c in Candidate.from_func(0, func)] == [(A,)]


def test_permutations():
    def func(x: A, y: G):
        return x, y

    original, = Candidate.from_func(0, func)
    perms = list(original.permutations())
    assert [p.types for p in perms] == [(A, G), (G, A)]
    a, g = A(), G()
    assert perms[1].func(g, a) == (a, g)


def test_layers_equal_types():
    low, high, b = Candidate((A,), None, -1), Candidate((A,), None, 1), cand(B)
    layers = list(specificity_layers([low, b, high]))
    assert layers == [[b], [low, high]]


def test_layers_empty():
    assert list(specificity_layers([])) == []
