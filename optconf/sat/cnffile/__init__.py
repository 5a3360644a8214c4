"""Plain-text clause files.

Each line of a file is a single clause: signed decimal integers separated by
blanks, e.g.

    1 -2 3
    -1
    2 3

Empty tokens are ignored, but an empty line still stands for a clause (an
empty one, which can never be satisfied).
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-08"

__all__ = [
    "parse",
    "load",
]


import io

from optconf.sat.cnffile.parse import parse


def load(path, encoding='ascii'):
    with io.open(path, encoding=encoding) as f:
        source = f.read()
    return parse(source, filename=path)
