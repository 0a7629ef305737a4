'''
Canonicalizer.

``simplify`` rewrites an expression bottom-up into a normal form, so that
equal values built in different orders compare (and render) the same:

- nested sums and products are flattened,
- rational children fold into one rational,
- like terms merge by coefficient, like factors by exponent,
- trivial sums, products and powers collapse,
- children are sorted by the canonical order of ``expr``.

Constants and variables are opaque: only structural matching applies, never
transcendental identities. Failures (0^0, division by zero, complex results)
raise before anything is returned.
'''

from fractions import Fraction
import math

from . import trig
from .expr import Expr, NUM, CONST, SUM, PRODUCT, POWER, \
                  ZERO, ONE, MINUS_ONE, HALF, \
                  num, is_zero, is_one, is_integer, \
                  split_coefficient, split_power
from .radix import exact_root
from .util import DivisionByZero, Undefined


E = Expr(CONST, ('e',))


def simplify(e):
    '''
    Return the canonical form of e. Children are simplified first.
    '''
    tag = e.tag
    if tag == SUM:
        return _sum([simplify(t) for t in e.args])
    elif tag == PRODUCT:
        return _product([simplify(f) for f in e.args])
    elif tag == POWER:
        return _power(simplify(e.args[0]), simplify(e.args[1]))
    elif tag in _FUNCTIONS:
        args = [simplify(arg) if isinstance(arg, Expr) else arg
                for arg in e.args]
        return _FUNCTIONS[tag](*args)
    return e


def _term(coefficient, rest):
    if coefficient == 1:
        return rest
    return Expr(PRODUCT, sorted((num(coefficient),) + _factors(rest)))


def _factors(e):
    return e.args if e.tag == PRODUCT else (e,)


def _sum(children):
    constant = Fraction(0)
    # Non-coefficient part of a term -> summed coefficient.
    like = {}
    pending = list(children)
    while pending:
        t = pending.pop()
        if t.tag == SUM:
            pending.extend(t.args)
            continue
        coefficient, rest = split_coefficient(t)
        if rest is None:
            constant += coefficient
        else:
            like[rest] = like.get(rest, 0) + coefficient
    out = [_term(coefficient, rest)
           for rest, coefficient
           in like.items()
           if coefficient != 0]
    if constant != 0:
        out.append(num(constant))
    if not out:
        return ZERO
    if len(out) == 1:
        return out[0]
    return Expr(SUM, sorted(out))


def _product(children):
    coefficient = Fraction(1)
    # Base -> exponents seen for it.
    bases = {}
    pending = list(children)
    while pending:
        f = pending.pop()
        if f.tag == PRODUCT:
            pending.extend(f.args)
        elif f.tag == NUM:
            coefficient *= f.value
        else:
            base, exponent = split_power(f)
            bases.setdefault(base, []).append(exponent)
    if coefficient == 0:
        return ZERO

    out = []
    regroup = False
    for base, exponents in bases.items():
        if len(exponents) == 1:
            merged = base if is_one(exponents[0]) \
                else Expr(POWER, (base, exponents[0]))
        else:
            merged = _power(base, _sum(exponents))
        if merged.tag == NUM:
            coefficient *= merged.value
        else:
            regroup = regroup or merged.tag == PRODUCT
            out.append(merged)
    if regroup:
        # A merged power expanded into a product; its factors may merge
        # with the others.
        return _product(out + [num(coefficient)])
    if coefficient == 0:
        return ZERO

    if coefficient != 1:
        if len(out) == 1 and out[0].tag == SUM:
            return _sum([_product([num(coefficient), t])
                         for t in out[0].args])
        out.append(num(coefficient))
    if not out:
        return ONE
    if len(out) == 1:
        return out[0]
    return Expr(PRODUCT, sorted(out))


def _rational_power(b, e):
    '''
    b**e for rationals b != 0, e != 0, exactly where possible.

    Exact roots fold; other fractional powers keep an exponent in (0, 1)
    and move the whole part into a rational coefficient.
    '''
    if e.denominator == 1:
        return num(b ** e.numerator)
    q = e.denominator
    if b < 0 and q % 2 == 0:
        raise Undefined('complex result')
    root = exact_root(abs(b), q)
    if root is not None:
        return num((root if b > 0 else -root) ** e.numerator)
    whole = e.numerator // q
    part = Expr(POWER, (num(b), num(e - whole)))
    if whole == 0:
        return part
    return Expr(PRODUCT, sorted((num(b ** whole), part)))


def _power(b, e):
    if is_zero(e):
        if is_zero(b):
            raise Undefined('0^0')
        return ONE
    if is_one(e):
        return b
    if is_one(b):
        return ONE
    if is_zero(b):
        if e.tag != NUM:
            return Expr(POWER, (b, e))
        if e.value < 0:
            raise DivisionByZero()
        return ZERO
    if b.tag == NUM and e.tag == NUM:
        return _rational_power(b.value, e.value)
    if b.tag == POWER:
        return _power(b.args[0], _product([b.args[1], e]))
    if b.tag == PRODUCT and is_integer(e):
        return _product([_power(f, e) for f in b.args])
    return Expr(POWER, (b, e))


def _neg(x):
    return _product([MINUS_ONE, x])


def _recip(x):
    return _power(x, MINUS_ONE)


def _sqrt(x):
    return _power(x, HALF)


def _square(x):
    return _power(x, num(2))


def _nonnegative(x):
    '''
    Structural check that x can never be negative.
    '''
    if x.tag == NUM:
        return x.value >= 0
    if x.tag in (CONST, 'abs'):
        return True
    if x.tag == POWER:
        base, exponent = x.args
        return _nonnegative(base) or (
            is_integer(exponent) and exponent.value % 2 == 0)
    if x.tag in (SUM, PRODUCT):
        return all(_nonnegative(child) for child in x.args)
    return False


def _abs(x):
    if x.tag == NUM:
        return num(abs(x.value))
    if _nonnegative(x):
        return x
    coefficient, rest = split_coefficient(x)
    if coefficient != 1:
        return _product([num(abs(coefficient)), _abs(rest)])
    return Expr('abs', (x,))


def _ln(x):
    return _log(x, E)


def _bits(r):
    return max(r.numerator.bit_length(), r.denominator.bit_length())


def _exact_log(x, b):
    '''
    The integer k with b**k == x, for positive rationals, or None.
    '''
    lx = math.log(x.numerator) - math.log(x.denominator)
    lb = math.log(b.numerator) - math.log(b.denominator)
    k = round(lx / lb)
    # b**k has at least this many bits; skip hopeless candidates.
    if abs(k) * (_bits(b) - 1) > _bits(x):
        return None
    if b ** k == x:
        return k
    return None


def _log(x, b):
    '''
    Logarithm of x in base b.
    '''
    if b.tag == NUM:
        if b.value <= 0:
            raise Undefined('log base {}'.format(b.value))
        if b.value == 1:
            raise DivisionByZero('log base 1')
    if x.tag == NUM and x.value <= 0:
        raise Undefined('log of n \N{LESS-THAN OR EQUAL TO} 0')
    if is_one(x):
        return ZERO
    if x == b:
        return ONE
    if x.tag == POWER and x.args[0] == b:
        return x.args[1]
    if x.tag == NUM and b.tag == NUM:
        k = _exact_log(x.value, b.value)
        if k is not None:
            return num(k)
    return Expr('log', (x, b))


def _mod(x, d):
    if is_zero(d):
        raise DivisionByZero()
    if x.tag == NUM and d.tag == NUM:
        return num(x.value % d.value)
    if is_zero(x) or x == d:
        return ZERO
    return Expr('mod', (x, d))


def _turns(x, measure):
    '''
    x, an angle in the measure, as a fraction of a full turn.
    '''
    return _product([x, _power(simplify(trig.full_turn(measure)),
                               MINUS_ONE)])


def _from_turns(t, measure):
    return _product([num(t), simplify(trig.full_turn(measure))])


def _trig(kind, table):
    def fold(x, measure):
        turns = _turns(x, measure)
        if turns.tag == NUM:
            value = table(turns.value)
            if value is not None:
                return simplify(value)
        return Expr(kind, (x, measure))
    fold.__name__ = '_' + kind
    return fold


def _inverse_turns(x, table):
    '''
    The special angle t (in turns) with table[t] == x, or -t for -x.
    '''
    for t, value in table.items():
        value = simplify(value)
        if value == x:
            return t
        if _neg(value) == x:
            return -t
    return None


def _asin(x, measure):
    if x.tag == NUM and abs(x.value) > 1:
        raise Undefined('complex result')
    t = _inverse_turns(x, trig.SIN)
    if t is None:
        return Expr('asin', (x, measure))
    return _from_turns(t, measure)


def _acos(x, measure):
    if x.tag == NUM and abs(x.value) > 1:
        raise Undefined('complex result')
    t = _inverse_turns(x, trig.SIN)
    if t is None:
        return Expr('acos', (x, measure))
    return _from_turns(trig.QUARTER - t, measure)


def _atan(x, measure):
    t = _inverse_turns(x, trig.TAN)
    if t is None:
        return Expr('atan', (x, measure))
    return _from_turns(t, measure)


_FUNCTIONS = {
    'neg': _neg,
    'recip': _recip,
    'abs': _abs,
    'sqrt': _sqrt,
    'square': _square,
    'ln': _ln,
    'log': _log,
    'mod': _mod,
    'sin': _trig('sin', trig.sin_turns),
    'cos': _trig('cos', trig.cos_turns),
    'tan': _trig('tan', trig.tan_turns),
    'asin': _asin,
    'acos': _acos,
    'atan': _atan,
}
