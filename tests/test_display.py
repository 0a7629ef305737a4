'''
Rendering tests
'''

from fractions import Fraction

from guac import ops
from guac.display import render
from guac.expr import const, num, var
from guac.radix import EXPONENT_MARK


x = var('x')
y = var('y')
pi = const('pi')


def test_numbers():
    assert render(num(Fraction(1, 4))) == '0.25'
    assert render(num(Fraction(1, 3))) == '1/3'
    assert render(num(Fraction(-2, 3))) == '-2/3'
    assert render(num(255), 16) == 'ff'
    assert render(num(Fraction(1, 3)), 3) == '0.1'


def test_products():
    assert render(ops.mul(ops.mul(num(5), pi),
                          ops.mul(num(2), ops.square(pi)))) \
        == '10\N{MIDDLE DOT}\N{GREEK SMALL LETTER PI}^3'
    assert render(ops.mul(x, y)) == 'x\N{MIDDLE DOT}y'
    assert render(ops.neg(x)) == '-x'
    assert render(ops.mul(num(-2), x)) == '-2\N{MIDDLE DOT}x'


def test_quotients():
    assert render(ops.div(num(1), x)) == '1/x'
    assert render(ops.div(x, num(2))) == 'x/2'
    assert render(ops.div(num(1), ops.square(x))) == '1/x^2'
    assert render(ops.div(pi, ops.mul(num(2), x))) \
        == '\N{GREEK SMALL LETTER PI}/(2\N{MIDDLE DOT}x)'


def test_sums():
    assert render(ops.add(x, num(1))) == 'x+1'
    assert render(ops.add(num(1), x)) == 'x+1'
    assert render(ops.sub(x, num(1))) == 'x-1'
    assert render(ops.sub(x, ops.mul(num(2), y))) == 'x-2\N{MIDDLE DOT}y'


def test_powers():
    assert render(ops.square(x)) == 'x^2'
    assert render(ops.square(ops.add(x, num(1)))) == '(x+1)^2'
    assert render(ops.sqrt(num(2))) == 'sqrt(2)'
    assert render(ops.recip(ops.sqrt(num(2)))) == 'sqrt(2)/2'
    assert render(ops.pow_(num(2), num(Fraction(3, 2)))) \
        == '2\N{MIDDLE DOT}sqrt(2)'


def test_functions():
    assert render(ops.abs_(x)) == '|x|'
    assert render(ops.mod(x, num(3))) == 'x mod 3'
    assert render(ops.ln(x)) == 'ln(x)'
    assert render(ops.log(num(2), x)) == 'log(2)(x)'
    assert render(ops.sin(x)) == 'sin(x)'
    assert render(ops.sin(x, measure='deg')) == 'sin(x deg)'
    assert render(ops.atan(x, measure='deg')) == '(atan(x) deg)'


def test_approximate():
    assert render(pi, approx=True) == '3.141'
    assert render(pi, approx=True, precision=5) == '3.14159'
    assert render(ops.sqrt(num(2)), approx=True) == '1.414'
    assert render(num(Fraction(1, 3)), approx=True) == '0.333'
    assert render(num(10 ** 7), approx=True) \
        == '1.000' + EXPONENT_MARK + '7'
    assert render(ops.sin(num(1)), approx=True) == '0.841'


def test_approximate_irrational_exponent():
    assert render(ops.pow_(num(2), pi), approx=True) == '8.824'
    assert render(ops.pow_(pi, num(Fraction(1, 2))), approx=True) == '1.772'


def test_approximate_keeps_variables():
    assert render(ops.mul(pi, x), approx=True) \
        == '3.141\N{MIDDLE DOT}x'
