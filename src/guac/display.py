'''
Rendering expressions as text.

Numbers render in the requested radix. Exact renders never lose precision:
rationals with no finite expansion are written as fractions. Approximate
renders first fold the expression numerically (see ``approx``) and then
truncate every number to a fixed number of digits.
'''

from fractions import Fraction

from . import constant
from .approx import approximate
from .expr import Expr, NUM, CONST, VAR, SUM, PRODUCT, POWER, \
                  INVERSE_TRIG, num, split_coefficient
from .radix import DECIMAL, int_to_radix, to_radix
from .util import NonTerminating


DOT = '\N{MIDDLE DOT}'

# Position in the order of operations; children with a higher priority than
# their parent get parenthesized.
PRIORITY = {
    POWER: 1,
    PRODUCT: 2,
    SUM: 3,
}
NEGATIVE_PRIORITY = 4

ROOTS = {
    Fraction(1, 2): 'sqrt',
    Fraction(1, 3): 'cbrt',
}


def _is_negative(e):
    coefficient, _ = split_coefficient(e)
    return coefficient < 0


def _negated(e):
    '''
    e with its coefficient's sign flipped, without simplifying.
    '''
    coefficient, rest = split_coefficient(e)
    if rest is None:
        return num(-coefficient)
    if coefficient == -1:
        return rest
    return Expr(PRODUCT, (num(-coefficient),) +
                (rest.args if rest.tag == PRODUCT else (rest,)))


def _has_negative_exponent(e):
    return e.tag == POWER and e.args[1].tag == NUM and e.args[1].value < 0


def _inverted(e):
    '''
    1/e for a power with a negative rational exponent.
    '''
    base, exponent = e.args
    if exponent.value == -1:
        return base
    return Expr(POWER, (base, num(-exponent.value)))


class Renderer:
    '''
    Renders expressions for one radix and display mode.
    '''

    def __init__(self, radix=DECIMAL, approx=False, precision=3):
        self.radix = radix
        self.approx = approx
        self.precision = precision

    def render(self, e):
        if self.approx:
            e = approximate(e)
        return self.display(e)

    def number(self, r):
        if self.approx:
            return to_radix(r, self.radix, True, self.precision)
        try:
            return to_radix(r, self.radix)
        except NonTerminating:
            return '{}/{}'.format(int_to_radix(r.numerator, self.radix),
                                  int_to_radix(r.denominator, self.radix))

    def priority(self, e):
        if e.tag == NUM:
            if e.value < 0:
                return NEGATIVE_PRIORITY
            if not self.approx and e.value.denominator != 1:
                return PRIORITY[PRODUCT]
            return 0
        if _has_negative_exponent(e):
            return PRIORITY[PRODUCT]
        return PRIORITY.get(e.tag, 0)

    def child(self, parent_priority, e):
        '''
        Render a child, in parentheses if it binds looser than its parent.
        '''
        s = self.display(e)
        if self.priority(e) > parent_priority or e.tag == 'mod':
            return '(' + s + ')'
        return s

    def display(self, e):
        tag = e.tag
        if tag == NUM:
            return self.number(e.value)
        elif tag == CONST:
            return constant.symbol(e.args[0])
        elif tag == VAR:
            return e.args[0]
        elif tag == SUM:
            return self.sum(e.args)
        elif tag == PRODUCT:
            return self.product(e.args)
        elif tag == POWER:
            if _has_negative_exponent(e):
                return self.product((e,))
            return self.power(*e.args)
        elif tag == 'abs':
            return '|' + self.display(e.args[0]) + '|'
        elif tag == 'mod':
            return '{} mod {}'.format(self.child(0, e.args[0]),
                                      self.child(0, e.args[1]))
        elif tag == 'log':
            operand, base = e.args
            if base.tag == CONST and base.args[0] == 'e':
                return 'ln({})'.format(self.display(operand))
            return 'log({})({})'.format(self.display(base),
                                        self.display(operand))
        elif tag in INVERSE_TRIG:
            operand, measure = e.args
            if measure == 'rad':
                return '{}({})'.format(tag, self.display(operand))
            return '({}({}) {})'.format(tag, self.display(operand), measure)
        elif len(e.args) == 2 and not isinstance(e.args[1], Expr):
            operand, measure = e.args
            if measure == 'rad':
                return '{}({})'.format(tag, self.display(operand))
            return '{}({} {})'.format(tag, self.display(operand), measure)
        return '{}({})'.format(tag, ', '.join(map(self.display, e.args)))

    def sum(self, terms):
        # Rational constant last: x+1 rather than 1+x.
        terms = sorted(terms, key=lambda t: t.tag == NUM)
        s = ''
        for i, t in enumerate(terms):
            if _is_negative(t):
                s += '-' + self.child(PRIORITY[SUM], _negated(t))
            else:
                s += ('+' if i else '') + self.child(PRIORITY[SUM], t)
        return s

    def product(self, factors):
        coefficient = Fraction(1)
        numerator = []
        denominator = []
        for f in factors:
            if f.tag == NUM:
                coefficient *= f.value
            elif _has_negative_exponent(f):
                denominator.append(_inverted(f))
            else:
                numerator.append(f)
        sign = '-' if coefficient < 0 else ''
        coefficient = abs(coefficient)
        top = [self.child(PRIORITY[PRODUCT], f) for f in numerator]
        bottom = [self.child(PRIORITY[PRODUCT], f) for f in denominator]
        if self.approx:
            if coefficient != 1 or not top:
                top.insert(0, self.number(coefficient))
        else:
            if coefficient.numerator != 1 or not top:
                top.insert(0, self.number(Fraction(coefficient.numerator)))
            if coefficient.denominator != 1:
                bottom.insert(0, self.number(
                    Fraction(coefficient.denominator)))
        s = sign + DOT.join(top)
        if len(bottom) == 1:
            s += '/' + bottom[0]
        elif bottom:
            s += '/(' + DOT.join(bottom) + ')'
        return s

    def power(self, base, exponent):
        if exponent.tag == NUM and exponent.value in ROOTS:
            return '{}({})'.format(ROOTS[exponent.value], self.display(base))
        return '{}^{}'.format(self.child(PRIORITY[POWER], base),
                              self.child(PRIORITY[POWER], exponent))


def render(e, radix=DECIMAL, approx=False, precision=3):
    '''
    Render e in the radix, exactly or approximately.
    '''
    return Renderer(radix, approx, precision).render(e)
