"""
Basic value types: options and identifiers.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-10"

__all__ = [
    "Option",
    "PickedOption",
    "ConfigId",
    "ConfigProcessId",

    "to_option",
    "to_options",
]


from collections import namedtuple
import uuid


class Option(namedtuple('_Option', 'id')):
    """A selectable feature within a configuration, named by an int id.

    The id doubles as a variable of the formulas built from rules, so it must
    be a positive integer."""
    __slots__ = ()

    def __new__(cls, id):
        if isinstance(id, bool) or not isinstance(id, int):
            raise TypeError('Option id must be an int, got %s object '
                            'instead: %r' % (type(id).__name__, id))
        if id <= 0:
            raise ValueError('Option id must be positive, got %d' % id)
        return super(Option, cls).__new__(cls, id)

    def __repr__(self):
        return 'Option(%d)' % self.id


def to_option(option):
    """Accepts either an Option or its id."""
    if not isinstance(option, Option):
        option = Option(option)
    return option

def to_options(options):
    return tuple(map(to_option, options))


class PickedOption(namedtuple('_PickedOption', 'option')):
    """An option chosen by an end user."""
    __slots__ = ()

    def __new__(cls, option):
        return super(PickedOption, cls).__new__(cls, to_option(option))


class _RandomId(object):
    __slots__ = ()

    @classmethod
    def random(cls):
        return cls(uuid.uuid4())

    def __str__(self):
        return str(self.id)


class ConfigId(_RandomId, namedtuple('_ConfigId', 'id')):
    """Names options and rules of a single product."""
    __slots__ = ()


class ConfigProcessId(_RandomId, namedtuple('_ConfigProcessId', 'id')):
    """Names an interactive configuration process."""
    __slots__ = ()
