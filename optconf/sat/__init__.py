"""Boolean satisfiability toolkit.

A formula is given in conjunctive normal form as a list of clauses. A clause
is a disjunction of literals, each literal being a non-zero int: its absolute
value names a variable, and the sign tells whether the clause is satisfied by
that variable being True (positive) or False (negative).

For example, the following three clauses

    -1  2
    -2 -3
     1

... read as `(~x1 | x2) & (~x2 | ~x3) & x1` and are satisfied only by
`x1=True, x2=True, x3=False`.

Sub-modules of the `optconf.sat` package:

    * `optconf.sat.clause`: Defines the Clause type and literal helpers.

    * `optconf.sat.solver`: Given clauses and a partial assignment, decides
      whether the assignment can be extended to satisfy all the clauses.

    * `optconf.sat.logic`: Evaluates clauses under a complete assignment.

    * `optconf.sat.cnffile`: Reads clauses from plain text, one clause per
      line.
"""

from optconf.sat.clause import Clause
from optconf.sat.logic import BooleanFormulaChecker
from optconf.sat.solver import SatSolver
from optconf.sat.solver import solve
