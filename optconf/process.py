"""
State of an interactive configuration process.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-18"

__all__ = ["ConfigurationProcess"]


from optconf.errors import BlockedOptionPick
from optconf.errors import UnknownOptionPick
from optconf.validation import picked_clauses


class ConfigurationProcess(object):
    """Tracks options picked by a user among the options of a configuration.

    A process captures options and rules of the configuration at the moment
    it is started, so later changes of the definition do not affect it.

    A pick must be one of the possible options and must not be blocked;
    blocked options are never populated by the process itself. Checking a
    pick against the rules is done by ConfigurationProcessService.
    """

    _dump_attrs = 'possible_options picked_options blocked_options'.split()

    def __init__(self, blocked_options, picked_options, possible_options,
                 rules_in_duty):
        super(ConfigurationProcess, self).__init__()

        self.blocked_options = blocked_options    # {Option}
        self.picked_options = picked_options      # {PickedOption}
        self.possible_options = possible_options  # {Option}
        self.rules_in_duty = rules_in_duty        # {Rule}

    @classmethod
    def start(cls, rules, options):
        return cls(set(), set(), set(options), set(rules))

    def check_pick(self, picked_option):
        option = picked_option.option
        if option not in self.possible_options:
            raise UnknownOptionPick(option)
        if option in self.blocked_options:
            raise BlockedOptionPick(option)

    def pick(self, picked_option):
        self.check_pick(picked_option)
        self.picked_options.add(picked_option)

    def get_non_picked_options(self):
        picked = set(picked.option for picked in self.picked_options)
        return self.possible_options - picked

    def picked_options_clauses(self):
        return picked_clauses(self.picked_options)

    def rules(self):
        return list(self.rules_in_duty)

    def __repr__(self):
        return '<{cls.__name__} ({picked}/{possible})>'.format(
            cls=type(self), picked=len(self.picked_options),
            possible=len(self.possible_options))
