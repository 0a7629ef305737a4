'''
Exact values of trigonometric functions at special angles.

Angles are handled in turns (1 turn = 360°). Values come back as plain,
unsimplified expressions; the simplifier canonicalizes them.
'''

from fractions import Fraction

from .config import ANGLE_MEASURES
from .expr import HALF, const, num, power, product_of, sum_of
from .util import Undefined


QUARTER = Fraction(1, 4)
HALF_TURN = Fraction(1, 2)


def _sqrt(n):
    return power(n, HALF)


# sin over the first quadrant, in turns.
SIN = {
    Fraction(0): num(0),
    Fraction(1, 12): HALF,
    Fraction(1, 8): product_of(HALF, _sqrt(2)),
    Fraction(1, 6): product_of(HALF, _sqrt(3)),
    QUARTER: num(1),
}

# tan over the first quadrant, quarter turn excluded.
TAN = {
    Fraction(0): num(0),
    Fraction(1, 24): sum_of(2, product_of(-1, _sqrt(3))),
    Fraction(1, 12): product_of(Fraction(1, 3), _sqrt(3)),
    Fraction(1, 8): num(1),
    Fraction(1, 6): _sqrt(3),
    Fraction(5, 24): sum_of(2, _sqrt(3)),
}


def full_turn(measure):
    '''
    One full turn expressed in the angle measure, e.g. 2π for radians.
    '''
    factor, has_pi = ANGLE_MEASURES[measure]
    if has_pi:
        return product_of(factor, const('pi'))
    return num(factor)


def _negated(e):
    return None if e is None else product_of(-1, e)


def sin_turns(t):
    '''
    sin of t turns, or None if t is not a special angle.
    '''
    t = Fraction(t) % 1
    if t >= HALF_TURN:
        return _negated(sin_turns(t - HALF_TURN))
    if t > QUARTER:
        return sin_turns(HALF_TURN - t)
    return SIN.get(t)


def cos_turns(t):
    return sin_turns(Fraction(t) + QUARTER)


def tan_turns(t):
    '''
    tan of t turns, or None if t is not a special angle.

    Raises Undefined at odd multiples of a quarter turn.
    '''
    t = Fraction(t) % HALF_TURN
    if t == QUARTER:
        raise Undefined('tangent of \N{GREEK SMALL LETTER PI}/2')
    if t > QUARTER:
        return _negated(tan_turns(HALF_TURN - t))
    return TAN.get(t)
