"""
Tells whether clause files are satisfiable:

    python -m optconf.sat [-v] FILE...
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-09"


import argparse
import sys

from optconf import util
from optconf.sat.cnffile import load
from optconf.sat.cnffile.errors import ClauseFileError
from optconf.sat.solver import SatSolver


def main(argv=None, out=sys.stdout):
    argparser = argparse.ArgumentParser('optconf.sat')
    argparser.add_argument('-v', '--verbose', action='store_true',
            help='Log the search to stderr')
    argparser.add_argument('FILE', nargs='+',
            help='File with a clause per line')
    args = argparser.parse_args(argv)

    if args.verbose:
        util.init_logging(sys.stderr)

    solver = SatSolver()
    ret = 0

    for path in args.FILE:
        try:
            clauses = load(path)
        except ClauseFileError as e:
            e.print_error()
            ret = 1
            continue

        verdict = 'SAT' if solver.solve(clauses, {}) else 'UNSAT'
        out.write('{path}: {verdict}\n'.format(**locals()))

    return ret


if __name__ == '__main__':
    sys.exit(main())
