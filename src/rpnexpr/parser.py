from collections import deque
from inspect import signature as getsignature, Parameter

from .util import WrongArgumentsCount, EmptyInput, LeftArguments
from .expression import Number
from .domain import getdomain
from .lexer import Lexer


class Parser:
    '''
    RPN parser: a stack machine that stacks expressions instead of numbers.

    Numbers are pushed as leaves, operators pop their operands and push the
    node built from them. Exactly one expression must be left at the end.
    '''

    def __init__(self, domain=None, lexer=None):
        '''
        Create parser for domain (a Domain, its key, or None for default).
        '''
        self.domain = getdomain(domain)
        self.lexer = lexer or Lexer()

    def parse(self, line):
        '''
        Parse line into a single expression tree.
        '''
        stack = deque()
        for token in self.lexer.lex(line):
            stack.append(self.build(stack, token))
        if len(stack) > 1:
            raise LeftArguments(len(stack))
        if not stack:
            raise EmptyInput()
        return stack.pop()

    def classify(self, token):
        '''
        Return node type for token: an operator node type or Number.

        Does not validate numbers.
        '''
        return self.domain.OPERATORS.get(token, Number)

    def build(self, stack, token):
        '''
        Build node for token, popping its operands off stack.
        '''
        node = self.classify(token)
        if node is Number:
            return Number(self.domain.convert(token))
        # If you don't reverse, you'll do 1 - 2 when you say 2 1 - instead of
        # 2 - 1.
        return node(*reversed(self._popstack(stack, token, self._arity(node))))

    def _arity(self, node):
        '''
        Return number of non-default positional arguments of node type.
        '''
        parameters = getsignature(node).parameters.values()
        positionals = [parameter
                       for parameter
                       in parameters
                       if parameter.kind == Parameter.POSITIONAL_OR_KEYWORD and
                          parameter.default == Parameter.empty]
        return len(positionals)

    def _popstack(self, stack, token, n=1):
        '''
        Pop specified number of expressions from stack, topmost first.
        '''
        if len(stack) < n:
            raise WrongArgumentsCount(token)
        return [stack.pop() for _ in range(n)]


def parse(text, domain=None):
    '''
    Parse RPN text into an expression tree.

    :raises ParseError: on the first problem found.
    '''
    return Parser(domain).parse(text)
