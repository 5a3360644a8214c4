"""
Clauses of a CNF formula.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-02"

__all__ = [
    "Clause",
    "variable_of",
    "literal_value",
    "variables_of",
]


def variable_of(literal):
    return abs(literal)


def literal_value(literal, value):
    """Truth of the literal given a value of its variable."""
    return value == (literal > 0)


def variables_of(clauses):
    """Distinct variables in order of their first occurrence."""
    seen = set()
    for clause in clauses:
        for literal in clause:
            variable = abs(literal)
            if variable not in seen:
                seen.add(variable)
                yield variable


class Clause(tuple):
    """A disjunction of signed integer literals.

    A positive literal is satisfied by its variable being True, a negative one
    by False. The order of literals is preserved, since the solver picks
    branching variables by scanning clauses from left to right.

    >>> Clause([-1, 2])
    Clause(-1, 2)
    >>> Clause.of(3).variables
    (3,)
    """
    __slots__ = ()

    def __new__(cls, literals=()):
        literals = tuple(literals)

        for literal in literals:
            if isinstance(literal, bool) or not isinstance(literal, int):
                raise TypeError('Literal must be an int, got %s object '
                                'instead: %r' % (type(literal).__name__,
                                                 literal))
            if not literal:
                raise ValueError('Literal must be non-zero')

        return super(Clause, cls).__new__(cls, literals)

    @classmethod
    def of(cls, *literals):
        return cls(literals)

    @property
    def literals(self):
        return tuple(self)

    @property
    def variables(self):
        return tuple(map(abs, self))

    def is_unit(self):
        return len(self) == 1

    def __repr__(self):
        return '{cls.__name__}({literals})'.format(
            cls=type(self), literals=', '.join(map(str, self)))
