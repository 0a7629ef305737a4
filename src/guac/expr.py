'''
Algebraic expression trees.

An expression is a tagged variant: one ``Expr`` class holding a tag and a
tuple of arguments, never a class hierarchy. Trees are immutable; anything
that "changes" an expression builds new nodes.

Tags and their arguments:

- ``num``: (Fraction,)
- ``const``: (constant name,)
- ``var``: (variable name,)
- ``sum``, ``product``: (child, ...)
- ``power``: (base, exponent)
- one of FUNCTIONS: (operand,), (operand, expression) for log and mod,
  (operand, angle measure) for trigonometric functions.

Every expression has a canonical ``key``. Keys are totally ordered:
rationals < constants < variables < compounds, with Sum and Product children
compared as sorted multisets. Equality and hashing go through the key, so
equality is structural and blind to the order of Sum and Product children.
'''

from fractions import Fraction

from . import constant
from .util import ParseError


NUM = 'num'
CONST = 'const'
VAR = 'var'
SUM = 'sum'
PRODUCT = 'product'
POWER = 'power'

# Unary functions, some with a second parameter.
FUNCTIONS = (
    'neg', 'recip', 'abs', 'sqrt', 'square', 'ln', 'log', 'mod',
    'sin', 'cos', 'tan', 'asin', 'acos', 'atan',
)
TRIG = ('sin', 'cos', 'tan')
INVERSE_TRIG = ('asin', 'acos', 'atan')

_ATOM_RANK = {NUM: 0, CONST: 1, VAR: 2}
_COMPOUND = 3
_COMPOUND_RANK = {tag: rank
                  for rank, tag
                  in enumerate((POWER, PRODUCT, SUM) + FUNCTIONS)}


class Expr:
    '''
    Immutable expression node.

    Use the module-level constructors (``num``, ``var``, ``sum_of``, ...)
    rather than calling this directly.
    '''

    __slots__ = ('tag', 'args', '_key')

    def __init__(self, tag, args):
        if tag not in _ATOM_RANK and tag not in _COMPOUND_RANK:
            raise ValueError('unknown expression tag {!r}'.format(tag))
        object.__setattr__(self, 'tag', tag)
        object.__setattr__(self, 'args', tuple(args))
        object.__setattr__(self, '_key', None)

    def __setattr__(self, name, value):
        raise AttributeError('expressions are immutable')

    def __delattr__(self, name):
        raise AttributeError('expressions are immutable')

    @property
    def key(self):
        '''
        Canonical sort key; equal keys mean structurally equal trees.
        '''
        if self._key is None:
            object.__setattr__(self, '_key', _order_key(self))
        return self._key

    def __eq__(self, other):
        if not isinstance(other, Expr):
            return NotImplemented
        return self.key == other.key

    def __ne__(self, other):
        if not isinstance(other, Expr):
            return NotImplemented
        return self.key != other.key

    def __lt__(self, other):
        if not isinstance(other, Expr):
            return NotImplemented
        return self.key < other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        if self.tag == NUM:
            value = self.args[0]
            if value.denominator == 1:
                return 'num({})'.format(value.numerator)
            return 'num(Fraction({}, {}))'.format(value.numerator,
                                                   value.denominator)
        elif self.tag in (CONST, VAR):
            return '{}({!r})'.format(self.tag, self.args[0])
        elif self.tag == SUM:
            return 'sum_of({})'.format(', '.join(map(repr, self.args)))
        elif self.tag == PRODUCT:
            return 'product_of({})'.format(', '.join(map(repr, self.args)))
        elif self.tag == POWER:
            return 'power({!r}, {!r})'.format(*self.args)
        return 'func({!r}, {})'.format(self.tag,
                                       ', '.join(map(repr, self.args)))

    @property
    def value(self):
        '''
        The Fraction held by a ``num`` node.
        '''
        if self.tag != NUM:
            raise TypeError('{} is not a number'.format(self.tag))
        return self.args[0]


def _arg_key(arg):
    if isinstance(arg, Expr):
        return arg.key
    # Angle measures of trigonometric nodes.
    return (-1, arg)


def _order_key(e):
    if e.tag in _ATOM_RANK:
        return (_ATOM_RANK[e.tag], e.args[0])
    children = tuple(_arg_key(arg) for arg in e.args)
    if e.tag in (SUM, PRODUCT):
        children = tuple(sorted(children))
    return (_COMPOUND, _COMPOUND_RANK[e.tag], children)


def _coerce(x):
    if isinstance(x, Expr):
        return x
    if isinstance(x, (int, Fraction)):
        return num(x)
    raise TypeError('cannot make an expression of {!r}'.format(x))


def num(value):
    return Expr(NUM, (Fraction(value),))


def const(name):
    '''
    A named constant, by name ('pi') or symbol ('π').
    '''
    found = constant.lookup(name)
    if found is None:
        raise ParseError('no such constant {!r}'.format(name))
    return Expr(CONST, (found,))


def var(name):
    if not name:
        raise ParseError('empty variable name')
    return Expr(VAR, (name,))


def sum_of(*terms):
    return Expr(SUM, map(_coerce, terms))


def product_of(*factors):
    return Expr(PRODUCT, map(_coerce, factors))


def power(base, exponent):
    return Expr(POWER, (_coerce(base), _coerce(exponent)))


def func(kind, operand, param=None):
    '''
    Function application. ``param`` is the base of a log, the divisor of a
    mod, or the angle measure of a trigonometric function.
    '''
    if kind not in FUNCTIONS:
        raise ValueError('unknown function {!r}'.format(kind))
    args = [_coerce(operand)]
    if kind in ('log', 'mod'):
        args.append(_coerce(param))
    elif kind in TRIG + INVERSE_TRIG:
        args.append(param)
    return Expr(kind, args)


ZERO = num(0)
ONE = num(1)
MINUS_ONE = num(-1)
HALF = num(Fraction(1, 2))


def is_zero(e):
    return e.tag == NUM and e.args[0] == 0


def is_one(e):
    return e.tag == NUM and e.args[0] == 1


def is_integer(e):
    return e.tag == NUM and e.args[0].denominator == 1


def split_coefficient(e):
    '''
    Split a term into its rational coefficient and the rest.

    The rest is None for a plain number: ``3`` splits into (3, None),
    ``3·x·y`` into (3, x·y) and ``x`` into (1, x).
    '''
    if e.tag == NUM:
        return e.args[0], None
    if e.tag != PRODUCT:
        return Fraction(1), e
    coefficient = Fraction(1)
    rest = []
    for f in e.args:
        if f.tag == NUM:
            coefficient *= f.args[0]
        else:
            rest.append(f)
    if not rest:
        return coefficient, None
    if len(rest) == 1:
        return coefficient, rest[0]
    return coefficient, Expr(PRODUCT, rest)


def split_power(e):
    '''
    Split a factor into base and exponent; ``x`` is ``x^1``.
    '''
    if e.tag == POWER:
        return e.args
    return e, ONE
