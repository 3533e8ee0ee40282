from pytest import mark, raises

from numtower import Fraction, Integer, Negative, Ordering, Positive, Zero, compare, gcd
from numtower.exceptions import DivisionByZeroError, NegativeOperandError


def f(n, d=1):
    return Fraction(n, d)


def parts(fraction):
    return fraction.numerator.to_integer(), fraction.denominator.to_integer()


@mark.parametrize('n, d, expected', [
    (6, 4, (3, 2)),
    (-6, 4, (-3, 2)),
    (6, -4, (-3, 2)),
    (-6, -4, (3, 2)),
    (0, 5, (0, 1)),
    (0, -5, (0, 1)),
    (7, 1, (7, 1)),
    (12, 12, (1, 1)),
])
def test_normalization(n, d, expected):
    assert parts(f(n, d)) == expected


def test_degenerate():
    zz = f(0, 0)
    assert parts(zz) == (0, 0)
    assert zz.is_degenerate()
    assert parts(f(5, 0)) == (1, 0)
    assert parts(f(-5, 0)) == (-1, 0)
    assert not f(0).is_degenerate()


@mark.parametrize('n, d', [(6, 4), (-10, 15), (9, 3), (1, 7), (-8, -12)])
def test_lowest_terms(n, d):
    x = f(n, d)
    assert gcd(abs(x.numerator), abs(x.denominator)) == Integer.from_integer(1)
    assert not isinstance(x.denominator, Negative)
    renormalized = Fraction(x.numerator, x.denominator)
    assert parts(renormalized) == parts(x)


def test_integer_operands():
    x = Fraction(Integer.from_integer(3), Integer.from_integer(9))
    assert parts(x) == (1, 3)
    assert parts(Fraction(5)) == (5, 1)
    assert isinstance(Fraction().numerator, Zero)
    with raises(TypeError):
        Fraction(1.5)


def test_arithmetic():
    assert f(1, 2) + f(1, 3) == f(5, 6)
    assert f(1, 2) - f(1, 3) == f(1, 6)
    assert f(1, 3) - f(1, 2) == f(-1, 6)
    assert f(2, 3) * f(9, 4) == f(3, 2)
    assert f(2, 3) / f(4, 9) == f(3, 2)
    assert f(-2, 3) / f(4, -9) == f(3, 2)
    assert -f(2, 3) == f(-2, 3)
    assert abs(f(-2, 3)) == f(2, 3)


def test_peano_arithmetic():
    one_and_a_half = f(3) / f(2)
    one_third = f(1) / f(3)
    one_sixth = f(1) / (f(12) / f(2))
    assert -(one_and_a_half - one_third - one_sixth) == f(-1)


def test_divide_by_zero():
    with raises(DivisionByZeroError):
        f(1, 2) / f(0)
    with raises(ZeroDivisionError):
        f(1, 2) / f(0, 0)


def test_compare():
    assert compare(f(1, 3), f(1, 2)) is Ordering.LESS
    assert compare(f(2, 4), f(1, 2)) is Ordering.EQUAL
    assert compare(f(-1, 2), f(-2, 3)) is Ordering.GREATER
    assert f(1, 3) < f(1, 2)
    assert f(7, 2) >= f(3)


def test_mixed_operands():
    assert f(1, 2) + 1 == f(3, 2)
    assert 1 - f(1, 4) == f(3, 4)
    assert f(3, 4) * Integer.from_integer(4) == f(3)
    assert Integer.from_integer(1) / f(2) == f(1, 2)
    assert f(4, 2) == 2
    assert f(4, 2) == Integer.from_integer(2)
    assert f(1, 2) < 1


def test_modulo():
    assert f(7, 2) % f(1) == f(1, 2)
    assert f(7, 2).modulo(f(3, 2)) == f(1, 2)
    assert f(1, 3) % f(1, 2) == f(1, 3)
    assert f(0) % f(1, 2) == f(0)
    assert (f(0, 0) % f(1, 2)).is_degenerate()


def test_modulo_preconditions():
    with raises(NegativeOperandError):
        f(-1, 2) % f(1)
    with raises(NegativeOperandError):
        f(1, 2) % f(-1)
    with raises(DivisionByZeroError):
        f(1, 2) % f(0)


@mark.parametrize('n, d, rendered', [
    (3, 1, '3'),
    (-3, 1, '-3'),
    (6, 4, '3/2'),
    (-1, 2, '-1/2'),
    (0, 7, '0'),
    (0, 0, '0/0'),
])
def test_render(n, d, rendered):
    text = str(f(n, d))
    assert text == rendered
    assert text.count('/') == (0 if f(n, d).denominator == Integer.from_integer(1) else 1)


def test_repr():
    assert repr(f(-1, 2)) == 'Fraction(Negative(Base()), Positive(Successor(Base())))'
    assert repr(f(0)) == 'Fraction(Zero(), Positive(Base()))'


def test_hash():
    assert hash(f(2, 4)) == hash(f(1, 2))
    assert len({f(2, 4), f(1, 2), f(1, 3)}) == 2
    assert isinstance(f(5).numerator, Positive)
