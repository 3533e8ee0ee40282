from numtower.multidispatch import MultiDispatch
from numtower.candidate import Self
from numtower.util import Ordering
from numtower.operations import Number, add, subtract, multiply, divide, remainder, compare, negate, absolute
from numtower.natural import Natural, Base, Successor
from numtower.integer import Integer, Zero, NonZero, Positive, Negative, gcd
from numtower.fraction import Fraction
from numtower.complex_number import Complex
from numtower.trigonometry import pi, tau, sine, cosine, tangent
from numtower._version import __version__, __author__

__all__ = ['MultiDispatch', 'Self', 'Ordering', 'Number', 'add', 'subtract', 'multiply', 'divide', 'remainder',
           'compare', 'negate', 'absolute', 'Natural', 'Base', 'Successor', 'Integer', 'Zero', 'NonZero', 'Positive',
           'Negative', 'gcd', 'Fraction', 'Complex', 'pi', 'tau', 'sine', 'cosine', 'tangent', '__version__',
           '__author__']
