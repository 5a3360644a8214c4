"""
Lexer definitions for clause files.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-08"


import ply.lex

from optconf.sat.cnffile.errors import IllegalCharacter
from optconf.sat.cnffile.errors import InvalidLiteral
from optconf.sat.cnffile.location import Location


def loc(t):
    try:
        fileinfo = t.lexer.fileinfo
    except AttributeError:
        pass
    else:
        return Location(fileinfo, t.lineno, t.lexpos)


tokens = (
    'LITERAL',
    'NEWLINE',
)

# Completely ignored characters
t_ignore           = ' \t\x0c\r'

# Each line holds exactly one clause, so newlines are significant
def t_NEWLINE(t):
    r'\n'
    t.lexer.lineno += 1
    return t

def t_LITERAL(t):
    r'[-+]?\d+'
    t.value = int(t.value)
    # Not in the grammar: yacc recovers from SyntaxErrors raised by actions
    if not t.value:
        raise InvalidLiteral(t.value, loc(t))
    return t

def t_error(t):
    raise IllegalCharacter(t.value[0], loc(t))


lexer = ply.lex.lex()

if __name__ == "__main__":
    ply.lex.runmain(lexer)
