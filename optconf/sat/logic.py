"""
Evaluation of a CNF formula under a complete assignment.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-04"

__all__ = ["BooleanFormulaChecker"]


def _literal_holds(literal, true_literals):
    if literal > 0:
        return literal in true_literals
    return -literal not in true_literals


class BooleanFormulaChecker(object):
    """Checks a given assignment against clauses, without any search.

    The assignment is complete: variables listed in `true_literals` are True,
    any other variable is False.
    """

    def is_satisfied(self, clauses, true_literals):
        true_literals = frozenset(true_literals)
        return all(self.is_clause_satisfied(clause, true_literals)
                   for clause in clauses)

    def is_clause_satisfied(self, clause, true_literals):
        return any(_literal_holds(literal, true_literals)
                   for literal in clause)

    def unsatisfied_clauses(self, clauses, true_literals):
        true_literals = frozenset(true_literals)
        return [clause for clause in clauses
                if not self.is_clause_satisfied(clause, true_literals)]

    def needed_literals(self, clauses, true_literals):
        """For each violated clause, lists its literals.

        Making any of them true (that is, picking an option for a positive
        literal, or dropping it for a negative one) would satisfy the clause.
        Satisfied clauses are left out.
        """
        return [list(clause)
                for clause in self.unsatisfied_clauses(clauses, true_literals)]
