'''
Exact rational arithmetic and the radix codec.

Rationals are plain ``fractions.Fraction`` values: always reduced, with a
positive denominator and unbounded precision. The radix only matters when a
number is turned into text or read back from it.
'''

from fractions import Fraction
from math import gcd

import regex

from .util import DivisionByZero, EmptyInput, InvalidDigit, NonTerminating, \
                  ParseError


# The full octoctal digit alphabet. Digit ``d`` of any radix is DIGITS[d].
DIGITS = '0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ!@'

# Three letter radix abbreviations; ABBVS[b - 2] names base b.
ABBVS = (
    'bin', 'tri', 'qua', 'qui', 'sex', 'sep', 'oct', 'non', 'dec', 'ele',
    'doz', 'bak', 'bis', 'trq', 'hex', 'sub', 'trs', 'unt', 'vig', 'tis',
    'bie', 'unb', 'tet', 'pen', 'bik', 'trn', 'ter', 'utt', 'pet', 'unp',
    'ttr', 'trl', 'bib', 'pnt', 'nif', 'unn', 'bit', 'trk', 'pec', 'upn',
    'hes', 'unh', 'tel', 'pnn', 'bnb', 'ubn', 'hec', 'hep', 'peg', 'trb',
    'tek', 'unr', 'hen', 'pel', 'het', 'tin', 'bnt', 'ubt', 'heg', 'unx',
    'bip', 'hpt', 'occ',
)

MIN_RADIX = 2
MAX_RADIX = 64
DECIMAL = 10

# Always marks an exponent. A plain 'e' does too, where it is not a digit.
EXPONENT_MARK = '\N{LATIN LETTER SMALL CAPITAL E}'

# Approximate renders switch to e-notation at or beyond radix**SCIENTIFIC.
SCIENTIFIC = 6

# Optional radix prefix, as in hex#ff or g#ff.
PREFIX = regex.compile(r'''
                       ^
                       (?:
                           (?<radix>[^\W\d_]{3}|.)
                           \#
                       )?
                       (?<body>.*)
                       $
                       ''', flags=regex.VERBOSE | regex.DOTALL)


def add(x, y):
    return Fraction(x) + Fraction(y)


def sub(x, y):
    return Fraction(x) - Fraction(y)


def mul(x, y):
    return Fraction(x) * Fraction(y)


def div(x, y):
    '''
    Divide exactly. Raises DivisionByZero on a zero divisor.
    '''
    if y == 0:
        raise DivisionByZero()
    return Fraction(x) / Fraction(y)


def iroot(n, k):
    '''
    Floor of the k-th root of the non-negative integer n.
    '''
    if n < 0:
        raise ValueError('iroot of negative number')
    if n < 2:
        return n
    if k >= n.bit_length():
        return 1
    # Newton's method from above, on integers only.
    x = 1 << -(-n.bit_length() // k)
    while True:
        y = ((k - 1) * x + n // x ** (k - 1)) // k
        if y >= x:
            return x
        x = y


def exact_root(r, k):
    '''
    Return the exact k-th root of the rational r >= 0, or None.
    '''
    r = Fraction(r)
    n = iroot(r.numerator, k)
    d = iroot(r.denominator, k)
    if n ** k == r.numerator and d ** k == r.denominator:
        return Fraction(n, d)
    return None


def check_radix(radix):
    '''
    Return radix as an int, raising ParseError when outside [2, 64].
    '''
    if not isinstance(radix, int) or not MIN_RADIX <= radix <= MAX_RADIX:
        raise ParseError('bad radix {!r}'.format(radix))
    return radix


def radix_name(radix):
    return ABBVS[check_radix(radix) - MIN_RADIX]


def parse_radix(text):
    '''
    Read a radix written as its abbreviation, its digit, or in decimal.

    ``hex``, ``g`` and ``16`` all give 16.
    '''
    text = text.strip()
    if text in ABBVS:
        return ABBVS.index(text) + MIN_RADIX
    if len(text) == 1 and text in DIGITS[MIN_RADIX:]:
        return DIGITS.index(text)
    if text.isdigit():
        return check_radix(int(text))
    raise ParseError('bad radix {!r}'.format(text))


def has_exponent_e(radix):
    '''
    True if a plain 'e' marks an exponent in this radix.
    '''
    return 'e' not in DIGITS[:radix]


def digit_class(radix):
    '''
    Regex character class matching one digit of the radix.
    '''
    return '[' + regex.escape(DIGITS[:radix]) + ']'


def is_terminating(r, radix):
    '''
    Whether r has a finite digit expansion in the radix.
    '''
    d = Fraction(r).denominator
    while d != 1:
        g = gcd(d, radix)
        if g == 1:
            return False
        d //= g
    return True


def int_to_radix(n, radix=DECIMAL):
    '''
    Render an integer's digits, most significant first.
    '''
    if n < 0:
        return '-' + int_to_radix(-n, radix)
    if n == 0:
        return DIGITS[0]
    digits = []
    while n:
        n, d = divmod(n, radix)
        digits.append(DIGITS[d])
    return ''.join(reversed(digits))


def _fraction_digits(remainder, denominator, radix, limit=None):
    digits = []
    while remainder and (limit is None or len(digits) < limit):
        d, remainder = divmod(remainder * radix, denominator)
        digits.append(DIGITS[d])
    return ''.join(digits)


def _magnitude(r, radix):
    '''
    The k such that radix**k <= r < radix**(k + 1), for r > 0.
    '''
    k = len(int_to_radix(r.numerator, radix)) \
        - len(int_to_radix(r.denominator, radix))
    while Fraction(radix) ** k > r:
        k -= 1
    while Fraction(radix) ** (k + 1) <= r:
        k += 1
    return k


def _truncated(r, radix, precision):
    whole, remainder = divmod(r.numerator, r.denominator)
    s = int_to_radix(whole, radix)
    if precision > 0:
        digits = _fraction_digits(remainder, r.denominator, radix, precision)
        s += '.' + digits.ljust(precision, DIGITS[0])
    return s


def to_radix(r, radix=DECIMAL, is_approx=False, precision=3):
    '''
    Render a rational as a digit string in the radix.

    Exact renders are complete and raise NonTerminating when no finite
    expansion exists. Approximate renders are truncated to ``precision``
    fractional digits, switching to e-notation for very large or very small
    magnitudes.
    '''
    r = Fraction(r)
    check_radix(radix)
    if r < 0:
        return '-' + to_radix(-r, radix, is_approx, precision)
    if not is_approx:
        if not is_terminating(r, radix):
            raise NonTerminating(
                '{} does not terminate in {}'.format(r, radix_name(radix)))
        whole, remainder = divmod(r.numerator, r.denominator)
        s = int_to_radix(whole, radix)
        if remainder:
            s += '.' + _fraction_digits(remainder, r.denominator, radix)
        return s
    if r == 0:
        return _truncated(r, radix, precision)
    big = r >= Fraction(radix) ** SCIENTIFIC
    tiny = r < Fraction(radix) ** -precision
    if not (big or tiny):
        return _truncated(r, radix, precision)
    k = _magnitude(r, radix)
    mantissa = r / Fraction(radix) ** k
    return _truncated(mantissa, radix, precision) + EXPONENT_MARK \
        + int_to_radix(k, radix)


def _parse_digits(text, radix):
    '''
    Read an unsigned integer written in the radix.
    '''
    value = 0
    for c in text:
        d = DIGITS.find(c)
        if d < 0 or d >= radix:
            raise InvalidDigit('invalid digit {!r} in {}'.format(
                c, radix_name(radix)))
        value = value * radix + d
    return value


def _parse_point(text, radix):
    '''
    Read an unsigned number with an optional radix point.
    '''
    if text.count('.') > 1:
        raise InvalidDigit('invalid digit {!r} in {}'.format(
            '.', radix_name(radix)))
    whole, _, fractional = text.partition('.')
    if not whole and not fractional:
        raise EmptyInput()
    value = Fraction(_parse_digits(whole, radix))
    if fractional:
        value += Fraction(_parse_digits(fractional, radix),
                          radix ** len(fractional))
    return value


def _split_exponent(text, radix):
    if EXPONENT_MARK in text:
        return text.split(EXPONENT_MARK, 1)
    if has_exponent_e(radix) and 'e' in text:
        return text.split('e', 1)
    return text, None


def from_radix(text, radix=DECIMAL):
    '''
    Parse a number written in the radix into an exact rational.

    Accepts an optional ``abbv#`` radix prefix, a leading ``-``, a radix
    point, an ``n/d`` fraction and an exponent suffix whose digits are also
    read in the radix: ``1.2ᴇ3`` is ``1.2 * radix**3``.
    '''
    check_radix(radix)
    text = text.strip()
    negative = text.startswith('-')
    if negative:
        text = text[1:]
    if not text:
        raise EmptyInput()
    match = PREFIX.match(text)
    if match.group('radix') is not None:
        radix = parse_radix(match.group('radix'))
        text = match.group('body')
        if text.startswith('-'):
            negative = not negative
            text = text[1:]
        if not text:
            raise EmptyInput()
    mantissa, exponent = _split_exponent(text, radix)
    numerator, slash, denominator = mantissa.partition('/')
    value = _parse_point(numerator, radix)
    if slash:
        value = div(value, _parse_point(denominator, radix))
    if exponent is not None:
        sign = -1 if exponent.startswith('-') else 1
        digits = exponent.lstrip('-')
        if not digits:
            raise EmptyInput('empty exponent')
        value *= Fraction(radix) ** (sign * _parse_digits(digits, radix))
    return -value if negative else value
