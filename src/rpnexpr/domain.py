'''
Numeric domains: what a number literal looks like, which operators exist, and
how arithmetic behaves.

Pick one per parse/evaluate; never mix the values of two domains in a tree.
'''

from functools import reduce
import operator
import math

import regex

from .util import InvalidInput, wrap_user_errors
from .expression import Add, Sub, Mul, Div, Square, Sqrt


class Domain:
    '''
    Base numeric domain. Abstract: subclasses provide the NUMBER grammar.

    Holds no state beyond its configuration, so may be shared freely.
    '''
    # Literal grammar, matched against whole tokens.
    NUMBER = None
    # Token to node type. Operators take precedence over number literals.
    OPERATORS = {
        node.SYMBOL: node
        for node
        in (Add, Sub, Mul, Div, Square)
    }
    # Default regex flags for matching literals
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)
    ZERO = 0

    def __init__(self):
        if type(self).NUMBER is None:
            raise TypeError('{} has no number grammar'.format(
                type(self).__name__))
        self.number = regex.compile(type(self).NUMBER, flags=type(self).FLAGS)

    def isnumber(self, token):
        '''
        Return True if token is spelled like a literal of this domain.
        '''
        return self.number.fullmatch(token) is not None

    @wrap_user_errors(InvalidInput, '{token}')
    def convert(self, token):
        '''
        Convert literal token to a value of this domain.
        '''
        if not self.isnumber(token):
            raise ValueError(token)
        return self._convert(token)

    def supports(self, node):
        '''
        Return True if node type is one of this domain's operators.
        '''
        return node in type(self).OPERATORS.values()

    def iszero(self, value):
        return value == type(self).ZERO

    def add(self, left, right):
        return left + right

    def subtract(self, left, right):
        return left - right

    def multiply(self, left, right):
        return left * right

    def divide(self, left, right):
        return left / right

    def sqrt(self, value):
        raise TypeError('sqrt not in {!r}'.format(self))


class IntegerDomain(Domain):
    '''
    Fixed-width signed integers, two's complement.

    Every result wraps around on overflow; division truncates toward zero.
    Literals out of range are invalid rather than wrapped.
    '''
    NUMBER = r'''
              # Optional sign, then plain ASCII digits. No separators.
              [+-]?
              [0-9]+
              '''

    def __init__(self, bits=64):
        super().__init__()
        if bits < 1:
            raise ValueError('Bad integer width {}'.format(bits))
        self.bits = bits
        self.min = -(1 << (bits - 1))
        self.max = (1 << (bits - 1)) - 1

    def __repr__(self):
        return '{}(bits={})'.format(type(self).__name__, self.bits)

    def _convert(self, token):
        value = int(token)
        if not self.min <= value <= self.max:
            raise ValueError('{} out of range'.format(token))
        return value

    def _wrap(self, value):
        return (value - self.min) % (1 << self.bits) + self.min

    def add(self, left, right):
        return self._wrap(left + right)

    def subtract(self, left, right):
        return self._wrap(left - right)

    def multiply(self, left, right):
        return self._wrap(left * right)

    def divide(self, left, right):
        # Python floors, machine integers truncate.
        quotient = abs(left) // abs(right)
        if (left < 0) != (right < 0):
            quotient = -quotient
        return self._wrap(quotient)


class RealDomain(Domain):
    '''
    IEEE 754 doubles with native semantics: overflow to infinity, NaN
    propagates. Adds the sqrt operator.
    '''
    NUMBER = r'''
              [+-]?
              (?:
                  inf(?:inity)?
                  |
                  nan
                  |
                  (?:
                      # 1, 1., 1.5 or .5
                      [0-9]+
                      (?:
                          \.
                          [0-9]*
                      )?
                      |
                      \.
                      [0-9]+
                  )
                  (?:
                      # 1e5, 1E-5
                      e
                      [+-]?
                      [0-9]+
                  )?
              )
              '''
    OPERATORS = dict(Domain.OPERATORS)
    OPERATORS[Sqrt.SYMBOL] = Sqrt
    FLAGS = Domain.FLAGS | regex.IGNORECASE
    ZERO = 0.0

    def __repr__(self):
        return '{}()'.format(type(self).__name__)

    def _convert(self, token):
        return float(token)

    def sqrt(self, value):
        return math.sqrt(value)


DOMAINS = {
    'i': IntegerDomain(),
    'f': RealDomain(),
}
DEFAULT_DOMAIN = 'i'


def getdomain(domain=None):
    '''
    Return domain object, given one, its key in DOMAINS, or None for default.
    '''
    if domain is None:
        domain = DEFAULT_DOMAIN
    if isinstance(domain, Domain):
        return domain
    try:
        return DOMAINS[domain]
    except KeyError:
        raise ValueError('No such domain {}'.format(repr(domain))) from None
