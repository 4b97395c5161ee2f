'''
Expression trees.

Built once, bottom-up, by the parser and consumed by the evaluator. Nodes are
frozen: compare equal when they have the same type and children.
'''

from dataclasses import dataclass


@dataclass(frozen=True)
class Expression:
    # Token that builds the node, if an operator.
    SYMBOL = None


@dataclass(frozen=True)
class Number(Expression):
    value: object


@dataclass(frozen=True)
class UnaryExpression(Expression):
    operand: Expression


@dataclass(frozen=True)
class BinaryExpression(Expression):
    left: Expression
    right: Expression


class Add(BinaryExpression):
    SYMBOL = '+'


class Sub(BinaryExpression):
    SYMBOL = '-'


class Mul(BinaryExpression):
    SYMBOL = '*'


class Div(BinaryExpression):
    SYMBOL = '/'


class Square(UnaryExpression):
    SYMBOL = 'sqr'


class Sqrt(UnaryExpression):
    SYMBOL = 'sqrt'
