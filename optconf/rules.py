"""
Rules constraining which options may be owned together.

There is a fixed set of rule types, each one knowing how to be lowered into
clauses over option ids:

    Exclude(a, b)                  owning a forbids owning b     ~a | ~b
    Include(a, b)                  owning a requires b           ~a |  b
    IncludeOneOf(a, [b1, ..., bn]) owning a requires some bi     ~a | b1 | ... | bn
    OneOfPresence([o1, ..., on])   some oi must be owned          o1 | ... | on
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-10"

__all__ = [
    "Rule",
    "Exclude",
    "Include",
    "IncludeOneOf",
    "OneOfPresence",

    "RULE_TYPES",
    "lower",
    "clauses_of",
]


from collections import namedtuple
from itertools import chain

from optconf.model import to_option as _to_option
from optconf.model import to_options as _to_options
from optconf.sat.clause import Clause


class Rule(object):
    """Base class for rule types, see RULE_TYPES."""
    __slots__ = ()

    def to_clauses(self):
        return lower(self)

    # Rules of different types, or plain tuples, may hold equal fields.
    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        return super(Rule, self).__eq__(other)

    def __ne__(self, other):
        if type(self) is not type(other):
            return True
        return super(Rule, self).__ne__(other)

    def __hash__(self):
        return hash((type(self).__name__, super(Rule, self).__hash__()))


class Exclude(Rule, namedtuple('_Exclude', 'if_taken cant_be_taken')):
    __slots__ = ()

    def __new__(cls, if_taken, cant_be_taken):
        return super(Exclude, cls).__new__(cls, _to_option(if_taken),
                                           _to_option(cant_be_taken))


class Include(Rule, namedtuple('_Include', 'if_taken must_be_taken_too')):
    __slots__ = ()

    def __new__(cls, if_taken, must_be_taken_too):
        return super(Include, cls).__new__(cls, _to_option(if_taken),
                                           _to_option(must_be_taken_too))


class IncludeOneOf(Rule, namedtuple('_IncludeOneOf', 'if_taken one_of')):
    __slots__ = ()

    def __new__(cls, if_taken, one_of):
        return super(IncludeOneOf, cls).__new__(cls, _to_option(if_taken),
                                                _to_options(one_of))


class OneOfPresence(Rule, namedtuple('_OneOfPresence', 'options')):
    """At least one of the options must be owned.

    With a single option this makes the option mandatory."""
    __slots__ = ()

    def __new__(cls, options):
        return super(OneOfPresence, cls).__new__(cls, _to_options(options))


RULE_TYPES = (Exclude, Include, IncludeOneOf, OneOfPresence)


_lowerings = {}

def lowering(rule_type):
    """Registers a function lowering rules of the given type into clauses."""
    if rule_type not in RULE_TYPES:
        raise TypeError('%s is not a rule type' % rule_type.__name__)

    def deco(func):
        if rule_type in _lowerings:
            raise ValueError('Lowering for %s has been already registered' %
                             rule_type.__name__)
        _lowerings[rule_type] = func
        return func

    return deco


@lowering(Exclude)
def _lower_exclude(rule):
    return [Clause.of(-rule.if_taken.id, -rule.cant_be_taken.id)]

@lowering(Include)
def _lower_include(rule):
    return [Clause.of(-rule.if_taken.id, rule.must_be_taken_too.id)]

@lowering(IncludeOneOf)
def _lower_include_one_of(rule):
    return [Clause(chain([-rule.if_taken.id],
                         (option.id for option in rule.one_of)))]

@lowering(OneOfPresence)
def _lower_one_of_presence(rule):
    return [Clause(option.id for option in rule.options)]


def lower(rule):
    try:
        func = _lowerings[type(rule)]
    except KeyError:
        raise TypeError('Unknown rule type: %s' % type(rule).__name__)

    return func(rule)


def clauses_of(rules):
    """Lowers each rule, concatenating the resulting clauses in order."""
    return [clause for rule in rules for clause in lower(rule)]
