from fractions import Fraction

from .radix import DECIMAL, check_radix
from .util import ParseError


# Size of a full turn in each angle measure: (rational factor, times π?).
ANGLE_MEASURES = {
    'rad': (Fraction(2), True),
    'turn': (Fraction(1), False),
    'grad': (Fraction(400), False),
    'deg': (Fraction(360), False),
    'min': (Fraction(21600), False),
    'sec': (Fraction(1296000), False),
    'mul\N{GREEK SMALL LETTER PI}': (Fraction(2), False),
    'quad': (Fraction(4), False),
    'sext': (Fraction(6), False),
    'hexacontade': (Fraction(60), False),
    'bdeg': (Fraction(256), False),
    'hour': (Fraction(24), False),
    'point': (Fraction(32), False),
    'mil': (Fraction(6400), False),
}


def check_angle_measure(measure):
    if measure not in ANGLE_MEASURES:
        raise ParseError('no such angle measure {!r}'.format(measure))
    return measure


def check_precision(precision):
    precision = int(precision)
    if precision < 0:
        raise ParseError('bad precision {!r}'.format(precision))
    return precision


class Config:
    '''
    Display and evaluation settings shared by a whole machine.

    Never persisted; the command line is the only source of overrides.
    '''

    DEFAULT_RADIX = DECIMAL
    DEFAULT_PRECISION = 3
    DEFAULT_ANGLE_MEASURE = 'rad'

    def __init__(self, radix=None, precision=None, angle_measure=None):
        cls = type(self)
        self.radix = check_radix(cls.DEFAULT_RADIX if radix is None
                                 else radix)
        self.precision = check_precision(cls.DEFAULT_PRECISION
                                         if precision is None
                                         else precision)
        self.angle_measure = check_angle_measure(cls.DEFAULT_ANGLE_MEASURE
                                                 if angle_measure is None
                                                 else angle_measure)

    def __repr__(self):
        return 'Config(radix={}, precision={}, angle_measure={!r})'.format(
            self.radix, self.precision, self.angle_measure)
