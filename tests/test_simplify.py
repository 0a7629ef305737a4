'''
Canonicalizer tests
'''

from fractions import Fraction

from guac.expr import HALF, ONE, ZERO, const, func, num, power, \
                      product_of, sum_of, var
from guac.simplify import simplify
from guac.util import DivisionByZero, Undefined

from pytest import raises


x = var('x')
y = var('y')
pi = const('pi')
e = const('e')

SAMPLES = [
    sum_of(x, 1, x, 2),
    product_of(5, pi, 2, power(pi, 2)),
    product_of(2, sum_of(x, 1)),
    power(product_of(x, y), 2),
    power(2, Fraction(3, 2)),
    power(2, Fraction(-1, 2)),
    sum_of(product_of(x, y), product_of(-1, y, x), pi),
    func('sin', product_of(Fraction(1, 6), pi), 'rad'),
    func('log', power(x, 3), x),
    func('abs', product_of(-3, x)),
    func('mod', sum_of(x, 1), 3),
]


def test_idempotent():
    for sample in SAMPLES:
        once = simplify(sample)
        assert simplify(once) == once
        assert repr(simplify(once)) == repr(once)


def test_commutative():
    assert repr(simplify(sum_of(x, y, 1))) == repr(simplify(sum_of(1, y, x)))
    assert repr(simplify(product_of(x, pi, 2))) \
        == repr(simplify(product_of(2, x, pi)))


def test_coefficient_folding():
    assert simplify(product_of(5, pi, 2, power(pi, 2))) \
        == product_of(10, power(pi, 3))


def test_flatten():
    assert simplify(sum_of(sum_of(x, 1), 2)) == sum_of(x, 3)
    assert simplify(product_of(product_of(x, 2), 3)) == product_of(6, x)


def test_like_terms():
    assert simplify(sum_of(x, product_of(2, x))) == product_of(3, x)
    assert simplify(sum_of(x, product_of(-1, x))) == ZERO
    assert simplify(sum_of(product_of(x, y), product_of(y, x))) \
        == product_of(2, x, y)


def test_like_factors():
    assert simplify(product_of(x, x)) == power(x, 2)
    assert simplify(product_of(x, power(x, -1))) == ONE
    assert simplify(product_of(power(x, 2), power(x, 3))) == power(x, 5)


def test_trivial_collapse():
    assert simplify(sum_of(x)) == x
    assert simplify(product_of(x)) == x
    assert simplify(product_of(0, x)) == ZERO
    assert simplify(power(x, 1)) == x
    assert simplify(power(x, 0)) == ONE
    assert simplify(power(1, x)) == ONE


def test_powers():
    assert simplify(power(power(x, 2), 3)) == power(x, 6)
    assert simplify(power(product_of(x, y), 2)) \
        == product_of(power(x, 2), power(y, 2))
    assert simplify(power(2, 10)) == num(1024)
    assert simplify(power(2, -2)) == num(Fraction(1, 4))
    assert simplify(power(Fraction(4, 9), HALF)) == num(Fraction(2, 3))
    assert simplify(power(-8, Fraction(1, 3))) == num(-2)


def test_irrational_powers():
    assert simplify(power(2, HALF)) == power(2, HALF)
    assert simplify(power(2, Fraction(3, 2))) \
        == product_of(2, power(2, HALF))
    assert simplify(power(2, Fraction(-1, 2))) \
        == product_of(HALF, power(2, HALF))
    assert simplify(product_of(power(2, HALF), power(2, HALF))) == num(2)


def test_power_errors():
    with raises(Undefined):
        simplify(power(0, 0))
    with raises(DivisionByZero):
        simplify(power(0, -1))
    with raises(Undefined):
        simplify(power(-4, HALF))


def test_distribution():
    assert simplify(product_of(2, sum_of(x, 1))) \
        == sum_of(product_of(2, x), 2)


def test_logarithms():
    assert simplify(func('log', 8, 2)) == num(3)
    assert simplify(func('log', Fraction(1, 8), 2)) == num(-3)
    assert simplify(func('log', x, x)) == ONE
    assert simplify(func('log', power(x, 3), x)) == num(3)
    assert simplify(func('ln', 1)) == ZERO
    assert simplify(func('ln', e)) == ONE
    assert simplify(func('log', 10, 2)).tag == 'log'
    with raises(Undefined):
        simplify(func('log', 0, 2))
    with raises(Undefined):
        simplify(func('log', 5, 0))
    with raises(DivisionByZero):
        simplify(func('log', 5, 1))


def test_modulo():
    assert simplify(func('mod', 7, 3)) == ONE
    assert simplify(func('mod', -7, 3)) == num(2)
    assert simplify(func('mod', x, x)) == ZERO
    assert simplify(func('mod', x, 3)).tag == 'mod'
    with raises(DivisionByZero):
        simplify(func('mod', x, 0))


def test_absolute_value():
    assert simplify(func('abs', -3)) == num(3)
    assert simplify(func('abs', power(x, 2))) == power(x, 2)
    assert simplify(func('abs', product_of(-3, x))) \
        == product_of(3, func('abs', x))


def test_unary_rewrites():
    assert simplify(func('neg', x)) == product_of(-1, x)
    assert simplify(func('recip', x)) == power(x, -1)
    assert simplify(func('sqrt', 9)) == num(3)
    assert simplify(func('square', x)) == power(x, 2)
    assert simplify(func('ln', x)) == func('log', x, e)


def test_trigonometry():
    assert simplify(func('sin', product_of(Fraction(1, 6), pi), 'rad')) \
        == HALF
    assert simplify(func('sin', pi, 'rad')) == ZERO
    assert simplify(func('cos', 60, 'deg')) == HALF
    assert simplify(func('sin', 45, 'deg')) \
        == product_of(HALF, power(2, HALF))
    assert simplify(func('tan', 45, 'deg')) == ONE
    assert simplify(func('sin', 270, 'deg')) == num(-1)
    assert simplify(func('cos', Fraction(1, 2), 'turn')) == num(-1)
    assert simplify(func('sin', 1, 'rad')).tag == 'sin'
    assert simplify(func('sin', x, 'rad')) == func('sin', x, 'rad')
    with raises(Undefined):
        simplify(func('tan', 90, 'deg'))


def test_inverse_trigonometry():
    assert simplify(func('asin', HALF, 'rad')) \
        == product_of(Fraction(1, 6), pi)
    assert simplify(func('asin', Fraction(-1, 2), 'deg')) == num(-30)
    assert simplify(func('acos', HALF, 'deg')) == num(60)
    assert simplify(func('atan', 1, 'deg')) == num(45)
    assert simplify(func('asin', Fraction(1, 3), 'rad')).tag == 'asin'
    with raises(Undefined):
        simplify(func('acos', 2, 'rad'))
