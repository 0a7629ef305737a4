'''
Operator library.

One function per user-facing operator. Each takes already-canonical
operands, builds the raw composite and returns it canonicalized. An
operator's arity is the number of its positional parameters; trigonometric
operators also take the angle measure as a keyword.
'''

from inspect import signature as getsignature, Parameter

from .expr import func, is_zero, power, product_of, sum_of
from .simplify import simplify
from .util import DivisionByZero


def add(x, y):
    '''x + y'''
    return simplify(sum_of(x, y))


def sub(x, y):
    '''x - y'''
    return simplify(sum_of(x, product_of(-1, y)))


def mul(x, y):
    '''x · y'''
    return simplify(product_of(x, y))


def div(x, y):
    '''x / y'''
    if is_zero(y):
        raise DivisionByZero()
    return simplify(product_of(x, power(y, -1)))


def pow_(x, y):
    '''x ^ y'''
    return simplify(power(x, y))


def mod(x, y):
    '''x mod y, with the sign of y'''
    return simplify(func('mod', x, y))


def log(base, x):
    '''Logarithm of x in the given base.'''
    return simplify(func('log', x, base))


def neg(x):
    '''-x'''
    return simplify(func('neg', x))


def recip(x):
    '''1 / x'''
    return simplify(func('recip', x))


def abs_(x):
    '''|x|'''
    return simplify(func('abs', x))


def sqrt(x):
    '''Square root of x.'''
    return simplify(func('sqrt', x))


def square(x):
    '''x ^ 2'''
    return simplify(func('square', x))


def ln(x):
    '''Natural logarithm of x.'''
    return simplify(func('ln', x))


def _angular(kind, doc):
    def operator(x, *, measure='rad'):
        return simplify(func(kind, x, measure))
    operator.__name__ = kind
    operator.__doc__ = doc
    return operator


sin = _angular('sin', 'Sine of x, an angle in the given measure.')
cos = _angular('cos', 'Cosine of x, an angle in the given measure.')
tan = _angular('tan', 'Tangent of x, an angle in the given measure.')
asin = _angular('asin', 'Inverse sine of x, as an angle in the measure.')
acos = _angular('acos', 'Inverse cosine of x, as an angle in the measure.')
atan = _angular('atan', 'Inverse tangent of x, as an angle in the measure.')


# Operators spelled as single symbols.
SYMBOLS = {
    '+': add,
    '-': sub,
    '*': mul,
    '\N{MIDDLE DOT}': mul,
    '/': div,
    '^': pow_,
    '%': mod,
    '~': neg,
    '`': recip,
    '|': abs_,
}

# Operators spelled as words.
NAMES = {
    'add': add,
    'sub': sub,
    'mul': mul,
    'div': div,
    'pow': pow_,
    'mod': mod,
    'log': log,
    'neg': neg,
    'recip': recip,
    'inv': recip,
    'abs': abs_,
    'sqrt': sqrt,
    'sq': square,
    'square': square,
    'ln': ln,
    'sin': sin,
    'cos': cos,
    'tan': tan,
    'asin': asin,
    'acos': acos,
    'atan': atan,
}

OPERATORS = dict()
for namespace in SYMBOLS, NAMES:
    OPERATORS.update(namespace)


def arity(f):
    '''
    Number of positional parameters without defaults.
    '''
    parameters = getsignature(f).parameters.values()
    return len([parameter
                for parameter
                in parameters
                if parameter.kind == Parameter.POSITIONAL_OR_KEYWORD and
                parameter.default == Parameter.empty])


def takes_measure(f):
    return 'measure' in getsignature(f).parameters
