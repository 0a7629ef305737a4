from functools import wraps


class GuacError(Exception):
    '''
    Base of every error the calculator reports to its user.

    Subclasses carry a stable numeric code; ``str()`` gives ``E00: message``.
    '''
    code = None
    message = 'error'

    def __init__(self, *args):
        super().__init__(*(args or (self.message,)))

    def __str__(self):
        text = self.args[0] if self.args else self.message
        if self.code is None:
            return str(text)
        return 'E{:0>2}: {}'.format(self.code, text)


class EngineError(GuacError):
    '''
    Reportable engine error. Raising one leaves the machine untouched.
    '''


class DivisionByZero(EngineError):
    code = 0
    message = 'divide by zero'


class Undefined(EngineError):
    code = 1
    message = 'undefined result'


class ParseError(EngineError):
    code = 2
    message = 'bad input'


class InvalidDigit(ParseError):
    code = 3
    message = 'invalid digit'


class EmptyInput(ParseError):
    code = 4
    message = 'empty input'


class StackUnderflow(EngineError):
    code = 5
    message = 'not enough entries on stack'


class NonTerminating(GuacError):
    '''
    A rational has no finite digit expansion in the requested radix.

    Recoverable: switch to Approximate display or to fraction notation.
    '''
    message = 'non-terminating expansion'


def wrap_user_errors(fmt):
    '''
    Decorator that converts unexpected exceptions to GuacErrors.

    Passes through GuacErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except GuacError:
                raise
            except Exception as e:
                raise GuacError(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
