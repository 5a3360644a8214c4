"""
Exceptions for error handling.
"""

import traceback as _traceback


class ClauseFileError(Exception):

    def print_error(self, tb=None):
        _traceback.print_exception(type(self), self, tb)


class SyntaxErrorWloc(ClauseFileError, SyntaxError):

    def __init__(self, message, loc):
        super(SyntaxErrorWloc, self).__init__(message, loc.syntax_error_tuple)
        self.loc = loc


class IllegalCharacter(SyntaxErrorWloc):

    def __init__(self, char, loc):
        super(IllegalCharacter, self).__init__(
            'Illegal character %r' % char, loc)
        self.char = char


class InvalidLiteral(SyntaxErrorWloc):

    def __init__(self, literal, loc):
        super(InvalidLiteral, self).__init__(
            'Invalid literal %r, must be a non-zero integer' % literal, loc)
        self.literal = literal
