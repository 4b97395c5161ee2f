'''
RPN expression parser and evaluator.

Turns whitespace separated reverse Polish notation, like "4 2 + 6 *", into an
expression tree and reduces it to a number. Supports the four arithmetic
operators and squaring (sqr) over 64-bit wrapping integers by default, or
doubles with an additional square root (sqrt).

Every failure is a ParseOrEvalError, either a ParseError (bad text) or an
EvalError (bad arithmetic), raised at the first problem found.

Not intended to be a calculator language! No stack operators, registers, or
functions; see the CLI for evaluating lines of input.
'''

from .util import (ParseOrEvalError,
                   ParseError, InvalidInput, WrongArgumentsCount, EmptyInput,
                   LeftArguments,
                   EvalError, DivisionByZero, SqrtOfNegativeNumber)
from .expression import (Expression, Number, Add, Sub, Mul, Div, Square,
                         Sqrt)
from .domain import Domain, IntegerDomain, RealDomain, DOMAINS
from .lexer import Lexer
from .parser import Parser, parse
from .evaluator import Evaluator, evaluate, evaluate_text


__all__ = (
    'parse', 'evaluate', 'evaluate_text',
    'Lexer', 'Parser', 'Evaluator',
    'Domain', 'IntegerDomain', 'RealDomain', 'DOMAINS',
    'Expression', 'Number', 'Add', 'Sub', 'Mul', 'Div', 'Square', 'Sqrt',
    'ParseOrEvalError',
    'ParseError', 'InvalidInput', 'WrongArgumentsCount', 'EmptyInput',
    'LeftArguments',
    'EvalError', 'DivisionByZero', 'SqrtOfNegativeNumber',
)
