'''
Operator library tests
'''

from fractions import Fraction
from functools import partial

from guac import ops
from guac.expr import ONE, ZERO, const, num, power, product_of, var
from guac.util import DivisionByZero, Undefined

from pytest import raises


x = var('x')
pi = const('pi')


def test_arithmetic():
    assert ops.add(num(1), num(2)) == num(3)
    assert ops.sub(num(5), num(3)) == num(2)
    assert ops.sub(x, x) == ZERO
    assert ops.mul(num(5), pi) == product_of(5, pi)
    assert ops.div(num(1), num(3)) == num(Fraction(1, 3))
    assert ops.div(x, x) == ONE
    assert ops.pow_(num(2), num(10)) == num(1024)


def test_results_are_canonical():
    assert ops.mul(ops.mul(num(5), pi), ops.mul(num(2), ops.square(pi))) \
        == product_of(10, power(pi, 3))


def test_division_by_zero():
    with raises(DivisionByZero):
        ops.div(x, ZERO)
    with raises(DivisionByZero):
        ops.div(ZERO, ZERO)
    with raises(DivisionByZero):
        ops.mod(num(3), ZERO)
    with raises(DivisionByZero):
        ops.recip(ZERO)


def test_logarithms():
    assert ops.log(num(2), num(8)) == num(3)
    assert ops.ln(num(1)) == ZERO
    with raises(Undefined):
        ops.log(ZERO, num(8))
    with raises(Undefined):
        ops.ln(num(-1))


def test_unary():
    assert ops.neg(num(3)) == num(-3)
    assert ops.recip(num(4)) == num(Fraction(1, 4))
    assert ops.abs_(num(-3)) == num(3)
    assert ops.sqrt(num(16)) == num(4)
    assert ops.square(num(-3)) == num(9)


def test_angles():
    assert ops.sin(num(90), measure='deg') == ONE
    assert ops.cos(pi) == num(-1)
    assert ops.asin(ONE, measure='grad') == num(100)
    assert ops.sin(x).args == (x, 'rad')


def test_arity():
    assert ops.arity(ops.add) == 2
    assert ops.arity(ops.log) == 2
    assert ops.arity(ops.sqrt) == 1
    assert ops.arity(ops.sin) == 1
    assert ops.arity(partial(ops.sin, measure='deg')) == 1


def test_measure():
    assert ops.takes_measure(ops.tan)
    assert not ops.takes_measure(ops.mod)


def test_registry():
    assert ops.OPERATORS['+'] is ops.add
    assert ops.OPERATORS['-'] is ops.sub
    assert ops.OPERATORS['\N{MIDDLE DOT}'] is ops.mul
    assert ops.OPERATORS['sq'] is ops.square
    assert ops.OPERATORS['log'] is ops.log
    assert ops.OPERATORS['asin'] is ops.asin
