from collections import deque

from .util import DivisionByZero, SqrtOfNegativeNumber
from .expression import Number, Add, Sub, Mul, Div, Square, Sqrt
from .domain import getdomain
from .parser import Parser


class Evaluator:
    '''
    Reduce expression trees to a number.

    Walks the tree with explicit stacks rather than recursion, so nesting
    depth is only limited by memory. Operands are computed left first, except
    for division, whose divisor is computed and checked before the dividend.

    Fails fast: the first error raised anywhere in the tree aborts the lot.
    '''

    # Binary nodes evaluated left operand first, then combined by the domain.
    ARITHMETIC = {
        Add: 'add',
        Sub: 'subtract',
        Mul: 'multiply',
    }

    # Steps on the evaluation stack.
    EVALUATE = 'evaluate'
    CHECK = 'check'
    REDUCE = 'reduce'

    def __init__(self, domain=None):
        self.domain = getdomain(domain)

    def evaluate(self, expression):
        '''
        Return value of expression.

        :raises EvalError: on invalid arithmetic.
        '''
        values = deque()
        steps = deque([(self.EVALUATE, expression)])
        while steps:
            step, node = steps.pop()
            if step == self.EVALUATE:
                self._expand(node, steps, values)
            elif step == self.CHECK:
                if self.domain.iszero(values[-1]):
                    raise DivisionByZero()
            else:
                values.append(self._reduce(node, values))
        return values.pop()

    def _expand(self, node, steps, values):
        '''
        Push value of a leaf, or the steps computing an operator node.

        Steps are pushed last first.
        '''
        kind = type(node)
        if kind is Number:
            values.append(node.value)
        elif kind in type(self).ARITHMETIC:
            steps.extend([(self.REDUCE, node),
                          (self.EVALUATE, node.right),
                          (self.EVALUATE, node.left)])
        elif kind is Div:
            steps.extend([(self.REDUCE, node),
                          (self.EVALUATE, node.left),
                          (self.CHECK, node),
                          (self.EVALUATE, node.right)])
        elif kind is Square or kind is Sqrt:
            if not self.domain.supports(kind):
                raise TypeError('{} not in {!r}'.format(kind.SYMBOL,
                                                        self.domain))
            steps.extend([(self.REDUCE, node),
                          (self.EVALUATE, node.operand)])
        else:
            raise TypeError('Not an expression: {}'.format(repr(node)))

    def _reduce(self, node, values):
        '''
        Pop operand values of node and return its own value.
        '''
        kind = type(node)
        if kind is Square:
            operand = values.pop()
            return self.domain.multiply(operand, operand)
        elif kind is Sqrt:
            operand = values.pop()
            if operand < 0:
                raise SqrtOfNegativeNumber()
            return self.domain.sqrt(operand)
        elif kind is Div:
            # Divisor went on first.
            left = values.pop()
            right = values.pop()
            return self.domain.divide(left, right)
        right = values.pop()
        left = values.pop()
        operation = getattr(self.domain, type(self).ARITHMETIC[kind])
        return operation(left, right)


def evaluate(expression, domain=None):
    '''
    Evaluate expression tree.

    :raises EvalError: on invalid arithmetic.
    '''
    return Evaluator(domain).evaluate(expression)


def evaluate_text(text, domain=None):
    '''
    Parse then evaluate RPN text, in the same domain.

    :raises ParseOrEvalError: the ParseError or EvalError, as raised.
    '''
    domain = getdomain(domain)
    return Evaluator(domain).evaluate(Parser(domain).parse(text))
