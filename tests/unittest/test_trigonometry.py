from threading import Thread

from pytest import raises

from numtower import Fraction, cosine, pi, sine, tangent, tau, trigonometry
from numtower.exceptions import DivisionByZeroError, NegativeOperandError


def test_constants():
    assert pi() == Fraction(355, 113)
    assert tau() == Fraction(710, 113)
    assert pi() is pi()
    assert tau() is tau()


def test_constants_initialized_once():
    seen = []
    threads = [Thread(target=lambda: seen.append(tau())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert all(s is seen[0] for s in seen)


def test_zero():
    assert sine(Fraction(0)) == Fraction(0)
    assert cosine(Fraction(0)) == Fraction(1)
    assert tangent(0) == Fraction(0)


def test_one():
    assert sine(1) == Fraction(4241, 5040)
    assert cosine(1) == Fraction(389, 720)


def test_reduction():
    # a whole turn is reduced back to zero
    assert sine(tau()) == Fraction(0)
    assert cosine(tau()) == Fraction(1)


def test_negative_argument():
    with raises(NegativeOperandError):
        sine(Fraction(-1, 2))
    with raises(NegativeOperandError):
        cosine(-1)


def test_tangent_at_cosine_zero(monkeypatch):
    monkeypatch.setattr(trigonometry, 'cosine', lambda x: Fraction(0))
    with raises(DivisionByZeroError):
        trigonometry.tangent(Fraction(1, 2))
