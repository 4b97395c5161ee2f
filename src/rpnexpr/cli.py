from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER
from traceback import print_exc

from .util import ParseOrEvalError
from .expression import Number
from .domain import DOMAINS, DEFAULT_DOMAIN, getdomain
from .parser import Parser
from .evaluator import Evaluator


class CLI:
    '''
    Command line interface to the RPN evaluator.

    Evaluates one expression per line, or per argument; no prompting.
    '''

    RESULT = 'Result: {}'
    ERROR = 'Error occurred: {}'

    def dumper(self):
        '''
        Dump all tokens, their node type, and arity.
        '''
        parser = Parser(self.args.domain)
        print('<token>\t<node>\t<arity>', file=self.out)
        for line in self.args.expressions:
            for token in parser.lexer.lex(line):
                node = parser.classify(token)
                if node is not Number:
                    arity = parser._arity(node)
                elif parser.domain.isnumber(token):
                    arity = 0
                else:
                    node, arity = None, None
                print(repr(token),
                      getattr(node, '__name__', '-'),
                      '-' if arity is None else arity,
                      sep='\t',
                      file=self.out)

    def executor(self):
        '''
        Evaluate every expression, printing its result or error.
        '''
        domain = getdomain(self.args.domain)
        parser = Parser(domain)
        evaluator = Evaluator(domain)
        for line in self.args.expressions:
            try:
                result = evaluator.evaluate(parser.parse(line))
            except ParseOrEvalError as e:
                if self.args.verbose:
                    print_exc()
                print(self.ERROR.format(e), file=self.out)
            else:
                print(self.RESULT.format(result), file=self.out)

    def raw_grammar(self):
        '''
        Print number literal grammar of the current domain.
        '''
        print(getdomain(self.args.domain).NUMBER, file=self.out)

    def __init__(self, out=None):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.out = out or stdout
        self.argument_parser = ArgumentParser(description='RPN evaluator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-d', '--domain',
                                          choices=sorted(DOMAINS),
                                          default=DEFAULT_DOMAIN)
        self.argument_parser.add_argument('-e', '--expression',
                                          nargs=REMAINDER,
                                          dest='expressions')
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
