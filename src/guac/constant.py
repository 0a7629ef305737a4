'''
Mathematical and physical constants.

Constants are opaque atoms to the simplifier. Their values below are only
ever used to render an entry in Approximate mode.
'''

from collections import namedtuple
from fractions import Fraction


Constant = namedtuple('Constant', 'name symbol value doc')


CONSTANTS = {constant.name: constant for constant in [
    Constant('pi', '\N{GREEK SMALL LETTER PI}',
             Fraction('3.14159265358979323846264338327950288419716939937510'),
             "Ratio of a circle's circumference to its diameter."),
    Constant('tau', '\N{GREEK SMALL LETTER TAU}',
             Fraction('6.28318530717958647692528676655900576839433879875021'),
             "Ratio of a circle's circumference to its radius."),
    Constant('e', 'e',
             Fraction('2.71828182845904523536028747135266249775724709369995'),
             'The limit of (1 + 1/n)**n as n grows without bound.'),
    Constant('gamma', '\N{GREEK SMALL LETTER GAMMA}',
             Fraction('0.57721566490153286060651209008240243104215933593992'),
             'Euler-Mascheroni constant.'),
    Constant('c', 'c', Fraction(299792458),
             'Speed of light in vacuum, m/s.'),
    Constant('G', 'G', Fraction('6.67430e-11'),
             'Newtonian constant of gravitation, m^3/(kg s^2).'),
    Constant('h', 'h', Fraction('6.62607015e-34'),
             'Planck constant, J/Hz.'),
    Constant('hbar', '\N{LATIN SMALL LETTER H WITH STROKE}',
             Fraction('1.054571817646156391262428003302280744e-34'),
             'Reduced Planck constant, J s.'),
    Constant('k', 'k', Fraction('1.380649e-23'),
             'Boltzmann constant, J/K.'),
    Constant('qe', 'q\N{LATIN SUBSCRIPT SMALL LETTER E}',
             Fraction('1.602176634e-19'),
             'Elementary charge, C.'),
    Constant('me', 'm\N{LATIN SUBSCRIPT SMALL LETTER E}',
             Fraction('9.1093837015e-31'),
             'Electron mass, kg.'),
    Constant('mp', 'm\N{LATIN SUBSCRIPT SMALL LETTER P}',
             Fraction('1.67262192369e-27'),
             'Proton mass, kg.'),
    Constant('na', 'N\N{LATIN SUBSCRIPT SMALL LETTER A}',
             Fraction('6.02214076e23'),
             'Avogadro constant, 1/mol.'),
    Constant('vcs', '\N{GREEK CAPITAL LETTER DELTA}\N{GREEK SMALL LETTER NU}cs',
             Fraction(9192631770),
             'Hyperfine transition frequency of caesium-133, Hz.'),
    Constant('kcd', 'Kcd', Fraction(683),
             'Luminous efficacy of 540 THz radiation, lm/W.'),
]}

# Symbol to name, so constants can be typed either way.
SYMBOLS = {constant.symbol: constant.name
           for constant in CONSTANTS.values()}


def lookup(text):
    '''
    Return the name of the constant spelled ``text``, or None.
    '''
    if text in CONSTANTS:
        return text
    return SYMBOLS.get(text)


def symbol(name):
    return CONSTANTS[name].symbol


def approximation(name):
    return CONSTANTS[name].value
