from functools import wraps
from inspect import signature as getsignature


class ParseOrEvalError(Exception):
    '''
    Anything that can go wrong turning text into a number.

    Catch this to handle both families; check against ParseError or EvalError
    to tell them apart.
    '''
    message = 'Cannot evaluate expression'

    def __str__(self):
        return self.message


class ParseError(ParseOrEvalError):
    message = 'Cannot parse expression'


class InvalidInput(ParseError):
    '''
    Token is neither an operator nor a number of the domain.
    '''

    def __init__(self, token):
        super().__init__(token)
        self.token = token

    def __str__(self):
        return 'Invalid input: {}'.format(self.token)


class WrongArgumentsCount(ParseError):
    '''
    Operator found with fewer operands on the stack than its arity.
    '''

    def __init__(self, operator=None):
        super().__init__(operator)
        self.operator = operator

    def __str__(self):
        if self.operator is None:
            return 'Wrong arguments count'
        return 'Wrong arguments count for {}'.format(self.operator)


class EmptyInput(ParseError):
    message = 'Empty input'


class LeftArguments(ParseError):
    '''
    More than one expression left over once all tokens are consumed.
    '''

    def __init__(self, count=None):
        super().__init__(count)
        self.count = count

    def __str__(self):
        if self.count is None:
            return 'Arguments left on stack'
        return '{} arguments left on stack'.format(self.count)


class EvalError(ParseOrEvalError):
    message = 'Cannot evaluate expression'


class DivisionByZero(EvalError):
    message = 'Division by zero'


class SqrtOfNegativeNumber(EvalError):
    message = 'Square root of negative number'


def wrap_user_errors(error, fmt, catch=(ValueError,)):
    '''
    Decorator that converts low-level exceptions to our own.

    Passes through ParseOrEvalErrors. The replacement is error(fmt.format(...))
    with the wrapped call's arguments by parameter name, however they were
    passed, chained to the original exception.
    '''
    def decorator(f):
        signature = getsignature(f)

        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except ParseOrEvalError:
                raise
            except catch as e:
                arguments = signature.bind(*args, **kwargs).arguments
                raise error(fmt.format(**arguments)) from e
        return wrapper
    return decorator
