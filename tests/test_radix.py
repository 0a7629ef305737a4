'''
Radix codec and rational helper tests
'''

from fractions import Fraction

from guac.radix import EXPONENT_MARK, add, div, exact_root, from_radix, iroot, \
                       mul, parse_radix, radix_name, sub, to_radix
from guac.util import DivisionByZero, EmptyInput, InvalidDigit, \
                      NonTerminating, ParseError

from pytest import raises


def test_integers():
    assert to_radix(Fraction(255), 16) == 'ff'
    assert to_radix(Fraction(5), 2) == '101'
    assert to_radix(Fraction(63), 64) == '@'
    assert to_radix(Fraction(0)) == '0'


def test_terminating_fractions():
    assert to_radix(Fraction(1, 2), 2) == '0.1'
    assert to_radix(Fraction(-5, 4)) == '-1.25'
    assert to_radix(Fraction(1, 3), 3) == '0.1'


def test_non_terminating():
    with raises(NonTerminating):
        to_radix(Fraction(1, 3))
    with raises(NonTerminating):
        to_radix(Fraction(1, 10), 2)


def test_approximate_truncates():
    assert to_radix(Fraction(1, 3), is_approx=True) == '0.333'
    assert to_radix(Fraction(2, 3), is_approx=True) == '0.666'
    assert to_radix(Fraction(2), is_approx=True) == '2.000'
    assert to_radix(Fraction(-1, 3), is_approx=True, precision=5) \
        == '-0.33333'
    assert to_radix(Fraction(7, 2), is_approx=True, precision=0) == '3'


def test_approximate_scientific():
    assert to_radix(Fraction(1234567), is_approx=True) \
        == '1.234' + EXPONENT_MARK + '6'
    assert to_radix(Fraction(1, 10000), is_approx=True) \
        == '1.000' + EXPONENT_MARK + '-4'


def test_parse():
    assert from_radix('ff', 16) == 255
    assert from_radix('-1.25') == Fraction(-5, 4)
    assert from_radix('1/3') == Fraction(1, 3)
    assert from_radix('.5') == Fraction(1, 2)
    assert from_radix('1.5' + EXPONENT_MARK + '2') == 150
    assert from_radix('1e3') == 1000
    assert from_radix('1e-1') == Fraction(1, 10)
    # 'e' is a hex digit.
    assert from_radix('1e3', 16) == 0x1e3


def test_parse_prefix():
    assert from_radix('hex#ff') == 255
    assert from_radix('g#10') == 16
    assert from_radix('bin#-101') == -5
    assert from_radix('-hex#ff') == -255


def test_parse_errors():
    with raises(InvalidDigit):
        from_radix('12a')
    with raises(InvalidDigit):
        from_radix('2', 2)
    with raises(InvalidDigit):
        from_radix('1.2.3')
    with raises(EmptyInput):
        from_radix('')
    with raises(EmptyInput):
        from_radix('hex#')
    with raises(DivisionByZero):
        from_radix('1/0')


def test_round_trip():
    for radix in range(2, 65):
        for r in [Fraction(0),
                  Fraction(1),
                  Fraction(-7, radix),
                  Fraction(12345, radix ** 3)]:
            assert from_radix(to_radix(r, radix), radix) == r


def test_radix_names():
    assert parse_radix('hex') == 16
    assert parse_radix('16') == 16
    assert parse_radix('g') == 16
    assert radix_name(10) == 'dec'
    assert radix_name(64) == 'occ'
    for bad in 'zzz', '65', '1':
        with raises(ParseError):
            parse_radix(bad)


def test_roots():
    assert iroot(27, 3) == 3
    assert iroot(28, 3) == 3
    assert iroot(10 ** 20, 2) == 10 ** 10
    assert exact_root(Fraction(4, 9), 2) == Fraction(2, 3)
    assert exact_root(2, 2) is None
    assert iroot(2, 10 ** 50) == 1
    assert iroot(255, 8) == 1
    assert iroot(256, 8) == 2
    assert exact_root(Fraction(2), 10 ** 50) is None


def test_arithmetic():
    assert add(Fraction(1, 2), Fraction(1, 3)) == Fraction(5, 6)
    assert sub(1, Fraction(1, 3)) == Fraction(2, 3)
    assert mul(Fraction(2, 3), 3) == 2
    assert div(Fraction(1, 2), Fraction(2, 4)) == 1
    with raises(DivisionByZero):
        div(1, 0)
