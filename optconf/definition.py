"""
Administrative facade for declaring options and rules of a configuration.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-15"

__all__ = ["ConfigurationDefinitionService"]


import threading

from optconf import util
from optconf.errors import UnsatisfiableRuleSet
from optconf.model import ConfigId
from optconf.model import to_option
from optconf.model import to_options
from optconf.rules import Exclude
from optconf.rules import Include
from optconf.rules import IncludeOneOf
from optconf.rules import OneOfPresence
from optconf.rules import clauses_of
from optconf.sat.solver import SatSolver
from optconf.store import InMemoryOptionStore
from optconf.util.locks import KeyedLocks

logger = util.get_extended_logger(__name__)


def _unique(iterable, seen=()):
    """Items not in 'seen', without repetitions, in order."""
    seen = set(seen)
    ret = []
    for item in iterable:
        if item not in seen:
            seen.add(item)
            ret.append(item)
    return ret


def _pairs(options):
    """Each ordered pair of distinct options."""
    return [(a, b) for a in options for b in options if a != b]


class ConfigurationDefinitionService(object):
    """Declares options and rules, keeping each rule set satisfiable.

    Each rule declaring method translates its arguments into rules, solves
    clauses of these rules together with the clauses of rules already stored
    for the configuration, and only if the result is satisfiable, stores the
    involved options and the new rules. Otherwise UnsatisfiableRuleSet is
    raised and the store is left untouched.

    The check and the following update are done while holding a lock of the
    configuration, so concurrent definitions of the same configuration going
    through the same service are serialized. Options and rules already stored
    are not stored again.
    """

    def __init__(self, option_store=None, solver=None,
                 lock_factory=threading.RLock):
        super(ConfigurationDefinitionService, self).__init__()

        if option_store is None:
            option_store = InMemoryOptionStore()
        if solver is None:
            solver = SatSolver()

        self.option_store = option_store
        self.solver = solver

        self._locks = KeyedLocks(lock_factory)

    def new_configuration(self):
        config_id = ConfigId.random()
        logger.info('new configuration %s', config_id)
        return config_id

    def add_option(self, config_id, option):
        self.add_options(config_id, [option])

    def add_options(self, config_id, options):
        options = to_options(options)
        with self._locks[config_id]:
            self._store_options(config_id, options)

    def remove_option(self, config_id, option):
        """Removes the option, leaving the rules referring it as is."""
        option = to_option(option)
        with self._locks[config_id]:
            self.option_store.remove_option(config_id, option)
        logger.info('%s: removed %r', config_id, option)

    def delete_configuration(self, config_id):
        with self._locks[config_id]:
            self.option_store.delete(config_id)
        self._locks.discard(config_id)
        logger.info('%s: deleted', config_id)

    # Rules.

    def cant_be_taken_together(self, config_id, options):
        """No two of the options may be owned at the same time."""
        options = _unique(to_options(options))
        self._define(config_id, options,
                     [Exclude(a, b) for a, b in _pairs(options)])

    def must_be_taken(self, config_id, option):
        option = to_option(option)
        self._define(config_id, [option], [OneOfPresence([option])])

    def one_of_must_be_taken(self, config_id, options):
        """At least one of the options must be owned.

        An empty list of options can't be satisfied and gets rejected."""
        options = _unique(to_options(options))
        self._define(config_id, options, [OneOfPresence(options)])

    def must_be_taken_together(self, config_id, options):
        """Either all of the options are owned, or none of them."""
        options = _unique(to_options(options))
        self._define(config_id, options,
                     [Include(a, b) for a, b in _pairs(options)])

    def included_conditionally(self, config_id, if_taken, options):
        """Owning 'if_taken' requires owning at least one of the options."""
        if_taken = to_option(if_taken)
        options = _unique(to_options(options))
        self._define(config_id, options + [if_taken],
                     [IncludeOneOf(if_taken, options)])

    def excluded_conditionally(self, config_id, if_taken, options):
        """Owning 'if_taken' forbids owning any of the options."""
        if_taken = to_option(if_taken)
        options = _unique(to_options(options))
        self._define(config_id, options + [if_taken],
                     [Exclude(if_taken, option) for option in options])

    def _define(self, config_id, options, rules):
        with self._locks[config_id]:
            stored_rules = self.option_store.load_rules(config_id)
            new_rules = _unique(rules, seen=stored_rules)

            clauses = clauses_of(stored_rules) + clauses_of(new_rules)
            if not self.solver.solve(clauses, {}):
                logger.info('%s: rejected %r', config_id, rules)
                raise UnsatisfiableRuleSet(config_id, rules)

            self._store_options(config_id, options)
            if new_rules:
                self.option_store.add_rules(config_id, new_rules)

        logger.info('%s: accepted %d new rule(s)', config_id, len(new_rules))
        for rule in new_rules:
            logger.debug('\t%r', rule)

    def _store_options(self, config_id, options):
        new_options = _unique(options, seen=self.option_store.load(config_id))
        if new_options:
            self.option_store.add_options(config_id, new_options)
