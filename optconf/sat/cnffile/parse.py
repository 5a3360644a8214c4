"""
PLY-based parser for clause files.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-08"


import ply.yacc

from optconf import util
from optconf.sat.clause import Clause
from optconf.sat.cnffile import lex
from optconf.sat.cnffile.errors import ClauseFileError
from optconf.sat.cnffile.errors import SyntaxErrorWloc
from optconf.sat.cnffile.location import Fileinfo

logger = util.get_extended_logger(__name__)


# Grammar definitions for PLY.

tokens = lex.tokens
start = 'clause_file'


def p_clause_file(p):
    """clause_file : clause_file clause"""
    p[0] = p[1]
    p[0].append(p[2])

def p_clause_file_empty(p):
    """clause_file : empty"""
    p[0] = []


def p_clause(p):
    """clause : literals NEWLINE"""
    p[0] = Clause(p[1])


def p_literals(p):
    """literals : literals LITERAL"""
    p[0] = p[1]
    p[0].append(p[2])

def p_literals_empty(p):
    """literals : empty"""
    p[0] = []


def p_empty(p):
    """empty : """
    pass

def p_error(t):
    if t is None:
        raise ClauseFileError('Unexpected end of input')
    raise SyntaxErrorWloc('Unexpected %r' % (t.value,), lex.loc(t))


parser = ply.yacc.yacc(method='LALR', write_tables=False, debug=False)

# The main entry point.

def parse(source, filename=None, **kwargs):
    """
    Parses the given source and returns a list of clauses.

    Args:
        source (str) - data to parse, one clause per line
        filename (str) - file name to report in case of errors
        **kwargs are passed directly to the underlying PLY parser

    Returns:
        a list of Clause objects, one for each line (a line without any
        literals results in an empty clause)

    Note:
        This function is NOT reentrant.
    """
    if source and not source.endswith('\n'):
        source += '\n'

    fileinfo = Fileinfo(source, filename)

    lexer = lex.lexer.clone()
    lexer.lineno = 1
    lexer.fileinfo = fileinfo

    parser.fileinfo = fileinfo

    clauses = parser.parse(source, lexer=lexer, **kwargs)

    logger.debug('parsed %d clause(s) from %s', len(clauses),
                 filename or '<string>')
    return clauses
