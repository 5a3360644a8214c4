"""
Domain errors reported to callers of the configuration facades.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-12"

__all__ = [
    "ConfigurationError",
    "UnsatisfiableRuleSet",
    "UnsatisfiablePick",
    "BlockedOptionPick",
    "UnknownOptionPick",
    "UnknownProcess",
]


import traceback as _traceback


class ConfigurationError(Exception):

    def print_error(self, tb=None):
        _traceback.print_exception(type(self), self, tb)


class UnsatisfiableRuleSet(ConfigurationError):
    """Rules being added contradict each other or the stored ones."""

    def __init__(self, config_id, rules):
        super(UnsatisfiableRuleSet, self).__init__(
            'Configuration %s is not satisfiable with %d new rule(s)' %
            (config_id, len(rules)))
        self.config_id = config_id
        self.rules = tuple(rules)


class UnsatisfiablePick(ConfigurationError):
    """Picking an option makes the process configuration unsatisfiable."""

    def __init__(self, process_id, option):
        super(UnsatisfiablePick, self).__init__(
            'Configuration is not satisfiable after picking %r in process %s' %
            (option, process_id))
        self.process_id = process_id
        self.option = option


class BlockedOptionPick(ConfigurationError):

    def __init__(self, option):
        super(BlockedOptionPick, self).__init__(
            'Cannot pick blocked option %r' % (option,))
        self.option = option


class UnknownOptionPick(ConfigurationError):
    """The option is not among the options the process was started with."""

    def __init__(self, option):
        super(UnknownOptionPick, self).__init__(
            'Cannot pick %r, it is not an option of the process' % (option,))
        self.option = option


class UnknownProcess(ConfigurationError, KeyError):

    def __init__(self, process_id):
        super(UnknownProcess, self).__init__(
            'Cannot find process with id %s' % (process_id,))
        self.process_id = process_id

    def __str__(self):
        return self.args[0]
