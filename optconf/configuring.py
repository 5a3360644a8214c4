"""
End-user facade driving interactive configuration processes.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-19"

__all__ = ["ConfigurationProcessService"]


import threading

from optconf import util
from optconf.errors import UnknownProcess
from optconf.errors import UnsatisfiablePick
from optconf.model import PickedOption
from optconf.process import ConfigurationProcess
from optconf.rules import clauses_of
from optconf.sat.clause import Clause
from optconf.sat.logic import BooleanFormulaChecker
from optconf.sat.solver import SatSolver
from optconf.store import InMemoryProcessStore
from optconf.util.locks import KeyedLocks

logger = util.get_extended_logger(__name__)


class ConfigurationProcessService(object):
    """Starts processes and checks each pick against the rules in duty.

    A pick is accepted if the picks made so far together with the new one
    can still be extended to satisfy the rules. Whether the picks alone make
    a complete configuration is told by `is_complete`, while `missing_options`
    and `unsatisfied_rules` explain what's lacking.
    """

    def __init__(self, option_store, process_store=None, checker=None,
                 solver=None, lock_factory=threading.RLock):
        super(ConfigurationProcessService, self).__init__()

        if process_store is None:
            process_store = InMemoryProcessStore()
        if checker is None:
            checker = BooleanFormulaChecker()
        if solver is None:
            solver = SatSolver()

        self.option_store = option_store
        self.process_store = process_store
        self.checker = checker
        self.solver = solver

        self._locks = KeyedLocks(lock_factory)

    def start(self, process_id, config_id):
        rules = self.option_store.load_rules(config_id)
        options = self.option_store.load(config_id)

        process = ConfigurationProcess.start(rules, options)
        self.process_store.add(process_id, process)

        logger.info('%s: started for %s with %d option(s), %d rule(s)',
                    process_id, config_id, len(options), len(rules))
        return process

    def pick_option(self, process_id, picked_option):
        if not isinstance(picked_option, PickedOption):
            picked_option = PickedOption(picked_option)

        with self._locks[process_id]:
            try:
                process = self.process_store.load(process_id)
            except UnknownProcess:
                self._locks.discard(process_id)
                raise
            process.check_pick(picked_option)

            clauses = (process.picked_options_clauses() +
                       [Clause.of(picked_option.option.id)] +
                       clauses_of(process.rules()))

            if not self.solver.solve(clauses, {}):
                logger.info('%s: rejected %r', process_id,
                            picked_option.option)
                raise UnsatisfiablePick(process_id, picked_option.option)

            process.pick(picked_option)

        logger.info('%s: picked %r', process_id, picked_option.option)
        logger.dump(process)

    def available_options(self, process_id):
        return self.process_store.load(process_id).get_non_picked_options()

    def missing_options(self, process_id):
        """Options to pick to satisfy rules which the picks violate.

        Only options appearing in violated rules are considered, for example
        a mandatory option which is not picked yet."""
        process = self.process_store.load(process_id)

        needed = self.checker.needed_literals(clauses_of(process.rules()),
                                              self._picked_ids(process))
        needed_ids = set(literal for literals in needed
                         for literal in literals if literal > 0)

        return set(option for option in process.possible_options
                   if option.id in needed_ids)

    def unsatisfied_rules(self, process_id):
        process = self.process_store.load(process_id)
        picked_ids = self._picked_ids(process)

        return [rule for rule in process.rules()
                if not self.checker.is_satisfied(rule.to_clauses(),
                                                 picked_ids)]

    def is_complete(self, process_id):
        """Whether the picks, with nothing else owned, satisfy the rules."""
        process = self.process_store.load(process_id)

        clauses = (clauses_of(process.rules()) +
                   process.picked_options_clauses())
        return self.checker.is_satisfied(clauses, self._picked_ids(process))

    def finish(self, process_id):
        """Forgets the process."""
        try:
            with self._locks[process_id]:
                self.process_store.remove(process_id)
        finally:
            self._locks.discard(process_id)
        logger.info('%s: finished', process_id)

    @staticmethod
    def _picked_ids(process):
        return set(picked.option.id for picked in process.picked_options)
