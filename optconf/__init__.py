"""Rule-based product configurator backed by a boolean satisfiability check.

An administrator declares selectable options of a product and compatibility
rules between them: options that can't be taken together, options that must
be taken together, options included or excluded conditionally by some other
option, and options (or groups of options) that must be present. Each rule is
lowered into a CNF formula, and every change of a rule set is verified to keep
the whole set satisfiable before it gets stored. End users then pick options
either in a one-shot validation call or in an interactive configuration
process, and their picks are checked against the stored rules the same way.

Here is a high-level overview of sub-packages and modules of the `optconf`
package:

  * `optconf.sat`: Clauses, a backtracking solver deciding satisfiability of
    a CNF formula under a partial assignment, and a checker evaluating a
    complete assignment. Also a loader of plain-text clause files.

  * `optconf.model` and `optconf.rules`: Options, identifiers and the closed
    set of rule types along with their lowering into clauses.

  * `optconf.store`: Storage interfaces for options, rules and running
    configuration processes, plus in-memory implementations.

  * `optconf.definition`, `optconf.validation`, `optconf.configuring`:
    Facades for defining a configuration, validating a pick of options and
    driving an interactive configuration process respectively.
"""

__author__ = "Eldar Abusalimov"
__copyright__ = "Copyright 2015, Eldar Abusalimov"
__license__ = "MIT"
__version__ = "0.1"
