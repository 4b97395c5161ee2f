from functools import reduce
import operator

import regex


class Lexer:
    '''
    Lexer for the RPN token grammar: anything between ASCII whitespace.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # ASCII only; no-break spaces and friends are part of a token.
    TOKEN = r'[^\ \t\n\v\f\r]+'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and lazily yield all tokens, as strings.

        Yields nothing for an empty or blank line. Call again to start over.
        '''
        for match in regex.finditer(type(self).TOKEN, line,
                                    flags=type(self).FLAGS):
            yield match.group(0)
