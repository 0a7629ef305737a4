'''
Numeric approximation for Approximate display.

Approximating never touches the stored expression: it builds a new tree in
which every sub-expression free of variables has been folded into a single
rational. Exact arithmetic is used wherever the simplifier can fold;
irrational operations go through floating point.
'''

from fractions import Fraction
import math

from . import constant
from .config import ANGLE_MEASURES
from .expr import Expr, NUM, CONST, VAR, POWER, num
from .simplify import simplify


def _full_turn(measure):
    factor, has_pi = ANGLE_MEASURES[measure]
    return float(factor) * (math.pi if has_pi else 1.0)


def _radians(x, measure):
    return float(x) / _full_turn(measure) * math.tau


def _from_radians(x, measure):
    return x / math.tau * _full_turn(measure)


def _ln(x):
    # Through numerator and denominator, so huge rationals don't overflow.
    return math.log(x.numerator) - math.log(x.denominator)


def _pow(b, e):
    if b < 0 and e.denominator % 2 == 1:
        magnitude = math.pow(-b, e)
        return -magnitude if e.numerator % 2 else magnitude
    return math.pow(b, e)


def _log(x, b):
    return _ln(x) / _ln(b)


_FLOAT = {
    'power': _pow,
    'log': _log,
    'sin': lambda x, m: math.sin(_radians(x, m)),
    'cos': lambda x, m: math.cos(_radians(x, m)),
    'tan': lambda x, m: math.tan(_radians(x, m)),
    'asin': lambda x, m: _from_radians(math.asin(x), m),
    'acos': lambda x, m: _from_radians(math.acos(x), m),
    'atan': lambda x, m: _from_radians(math.atan(x), m),
}


def approximate(e):
    '''
    Return e with every variable-free sub-expression folded to a number.

    Sub-expressions that cannot be evaluated (overflow, domain errors) are
    kept symbolic.
    '''
    tag = e.tag
    if tag == CONST:
        return num(constant.approximation(e.args[0]))
    if tag in (NUM, VAR):
        return e
    args = [approximate(arg) if isinstance(arg, Expr) else arg
            for arg in e.args]
    numeric = all(arg.tag == NUM for arg in args if isinstance(arg, Expr))
    if tag == POWER and numeric and args[1].value.denominator != 1:
        # Fractional powers of numbers go through floating point.
        try:
            return num(Fraction(_pow(args[0].value, args[1].value)))
        except (ArithmeticError, ValueError):
            return Expr(tag, args)
    exact = simplify(Expr(tag, args))
    if exact.tag == NUM or not numeric or tag not in _FLOAT:
        return exact
    try:
        value = _FLOAT[tag](*[arg.value if isinstance(arg, Expr) else arg
                              for arg in args])
        return num(Fraction(value))
    except (ArithmeticError, ValueError):
        return exact
