"""
Backtracking SAT solver.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-02"

__all__ = [
    "SatSolver",
    "solve",
]


import logging

from optconf import util
from optconf.sat.clause import literal_value
from optconf.sat.clause import variables_of

logger = util.get_extended_logger(__name__)


def log_debug_enabled(logger=logger):
    return logger.isEnabledFor(logging.DEBUG)


def is_certified(clause, assignment):
    """Some assigned literal of the clause is already true."""
    for literal in clause:
        value = assignment.get(abs(literal))
        if value is not None and literal_value(literal, value):
            return True
    return False


def is_falsified(clause, assignment):
    """Every literal of the clause is assigned and false.

    An empty clause is always falsified."""
    for literal in clause:
        value = assignment.get(abs(literal))
        if value is None or literal_value(literal, value):
            return False
    return True


def first_unassigned(clauses, assignment):
    for variable in variables_of(clauses):
        if variable not in assignment:
            return variable


class SatSolver(object):
    """Decides whether a CNF formula is satisfiable.

    This is a plain depth-first search over variable values: no unit
    propagation, no pure literal elimination and no clause learning. A branch
    is accepted as soon as every clause has a true literal among the assigned
    ones, and rejected as soon as some clause has all its literals assigned
    and false. Branching variables are taken in order of their first
    occurrence in the clauses, True being tried before False.

    Each branch works on its own copy of the assignment, so the caller's
    mapping is never modified.
    """

    @logger.wrap
    def solve(self, clauses, assignment=None):
        """
        Args:
            clauses - a sequence of Clause objects (or any iterables of
                non-zero ints)
            assignment (dict) - partial assignment {variable: bool} to extend

        Returns:
            True if there is an extension of the assignment satisfying every
            clause, False otherwise.
        """
        clauses = list(clauses)
        assignment = dict(assignment or {})

        logger.debug('solving %d clause(s) with %d initial value(s)',
                     len(clauses), len(assignment))

        ret = self._search(clauses, assignment, 0)

        logger.debug('formula is %s', 'SAT' if ret else 'UNSAT')
        return ret

    def _search(self, clauses, assignment, depth):
        if all(is_certified(clause, assignment) for clause in clauses):
            return True

        if any(is_falsified(clause, assignment) for clause in clauses):
            return False

        variable = first_unassigned(clauses, assignment)
        if variable is None:
            return False

        for value in (True, False):
            if log_debug_enabled():
                logger.debug('\t%s%d := %s', ' ' * depth, variable, value)

            branch = dict(assignment)
            branch[variable] = value

            if self._search(clauses, branch, depth + 1):
                return True

        return False


_default_solver = SatSolver()

def solve(clauses, assignment=None):
    return _default_solver.solve(clauses, assignment)
