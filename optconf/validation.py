"""
End-user facade checking a pick of options against the stored rules.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-16"

__all__ = ["ConfigurationValidationService"]


from itertools import chain

from optconf import util
from optconf.model import PickedOption
from optconf.rules import clauses_of
from optconf.sat.clause import Clause
from optconf.sat.clause import variables_of
from optconf.sat.solver import SatSolver

logger = util.get_extended_logger(__name__)


def picked_clauses(picked_options):
    """A unit clause asserting each picked option."""
    return [Clause.of(picked.option.id) for picked in picked_options]


class ConfigurationValidationService(object):

    def __init__(self, option_store, solver=None):
        super(ConfigurationValidationService, self).__init__()

        if solver is None:
            solver = SatSolver()

        self.option_store = option_store
        self.solver = solver

    def is_proper(self, config_id, *picked_options):
        """Tells whether the picked options make a proper configuration.

        Args:
            config_id (ConfigId) - configuration to check against
            *picked_options - PickedOption objects (Options or plain ids are
                accepted as well)

        Returns:
            True if rules of the configuration hold when the picked options
            are owned and any other option, either declared for the
            configuration or referred by its rules, is not. Each pick is a
            unit clause; options left out form the initial assignment of
            the solver.
        """
        picked_options = [picked if isinstance(picked, PickedOption)
                          else PickedOption(picked)
                          for picked in picked_options]
        picked_ids = set(picked.option.id for picked in picked_options)

        rules = self.option_store.load_rules(config_id)
        clauses = clauses_of(rules) + picked_clauses(picked_options)

        # Options referred by rules only, e.g. removed ones, are not owned.
        declared = [option.id for option in self.option_store.load(config_id)]
        left_out = dict((variable, False)
                        for variable in chain(declared, variables_of(clauses))
                        if variable not in picked_ids)

        ret = self.solver.solve(clauses, left_out)

        logger.info('%s: %r is %s', config_id,
                    [picked.option for picked in picked_options],
                    'proper' if ret else 'improper')
        return ret
