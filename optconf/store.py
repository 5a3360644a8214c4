"""
Storage of configuration definitions and of running configuration processes.

Both stores are abstract so that the facades can work against any key-value
backend; in-memory implementations are provided for tests and for embedding.
Neither store is thread-safe, nor does it enforce uniqueness of what it
holds: serializing writes and avoiding duplicates is up to the facades.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-12"

__all__ = [
    "OptionStore",
    "InMemoryOptionStore",
    "ProcessStore",
    "InMemoryProcessStore",
]


import abc

from optconf.errors import UnknownProcess


class OptionStore(object, metaclass=abc.ABCMeta):
    """Options and rules declared for each configuration.

    Lists returned by `load` and `load_rules` are owned by the caller, so
    modifying them does not affect the store."""

    @abc.abstractmethod
    def load(self, config_id):
        """Options of the configuration, an empty list if there is none."""

    @abc.abstractmethod
    def add_option(self, config_id, option):
        pass

    def add_options(self, config_id, options):
        for option in options:
            self.add_option(config_id, option)

    @abc.abstractmethod
    def remove_option(self, config_id, option):
        """Removes the option if it is stored, otherwise does nothing."""

    @abc.abstractmethod
    def load_rules(self, config_id):
        """Rules of the configuration, an empty list if there is none."""

    @abc.abstractmethod
    def add_rule(self, config_id, rule):
        pass

    def add_rules(self, config_id, rules):
        for rule in rules:
            self.add_rule(config_id, rule)

    @abc.abstractmethod
    def delete(self, config_id):
        """Forgets both options and rules of the configuration."""


class InMemoryOptionStore(OptionStore):

    def __init__(self):
        super(InMemoryOptionStore, self).__init__()
        self._options = {}  # {config_id: [option]}
        self._rules = {}    # {config_id: [rule]}

    def load(self, config_id):
        return list(self._options.get(config_id, ()))

    def add_option(self, config_id, option):
        self._options.setdefault(config_id, []).append(option)

    def add_options(self, config_id, options):
        self._options.setdefault(config_id, []).extend(options)

    def remove_option(self, config_id, option):
        options = self._options.get(config_id, ())
        if option in options:
            options.remove(option)

    def load_rules(self, config_id):
        return list(self._rules.get(config_id, ()))

    def add_rule(self, config_id, rule):
        self._rules.setdefault(config_id, []).append(rule)

    def add_rules(self, config_id, rules):
        self._rules.setdefault(config_id, []).extend(rules)

    def delete(self, config_id):
        self._options.pop(config_id, None)
        self._rules.pop(config_id, None)


class ProcessStore(object, metaclass=abc.ABCMeta):
    """Running configuration processes by their ids."""

    @abc.abstractmethod
    def load(self, process_id):
        """Raises UnknownProcess if there is no such process."""

    @abc.abstractmethod
    def add(self, process_id, process):
        pass

    @abc.abstractmethod
    def remove(self, process_id):
        """Raises UnknownProcess if there is no such process."""


class InMemoryProcessStore(ProcessStore):

    def __init__(self):
        super(InMemoryProcessStore, self).__init__()
        self._processes = {}

    def load(self, process_id):
        try:
            return self._processes[process_id]
        except KeyError:
            raise UnknownProcess(process_id)

    def add(self, process_id, process):
        self._processes[process_id] = process

    def remove(self, process_id):
        try:
            del self._processes[process_id]
        except KeyError:
            raise UnknownProcess(process_id)

    def __contains__(self, process_id):
        return process_id in self._processes
