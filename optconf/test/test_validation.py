"""
Tests for validating a pick of options.
"""

import unittest
from unittest import TestCase

from optconf.definition import ConfigurationDefinitionService
from optconf.model import ConfigId
from optconf.model import Option
from optconf.model import PickedOption
from optconf.store import InMemoryOptionStore
from optconf.validation import ConfigurationValidationService


A, B, C = map(Option, (1, 2, 3))


class IsProperTestCase(TestCase):

    def setUp(self):
        store = InMemoryOptionStore()
        self.store = store
        self.definition = ConfigurationDefinitionService(store)
        self.validation = ConfigurationValidationService(store)
        self.config = ConfigId.random()

    def is_proper(self, *options):
        return self.validation.is_proper(self.config,
                                         *map(PickedOption, options))

    def test_cant_be_taken_together(self):
        self.definition.cant_be_taken_together(self.config, [A, B])

        self.assertIs(False, self.is_proper(A, B))
        self.assertIs(True, self.is_proper(A))
        self.assertIs(True, self.is_proper(B))

    def test_must_be_taken(self):
        self.definition.must_be_taken(self.config, A)

        self.assertIs(False, self.is_proper())
        self.assertIs(True, self.is_proper(A))

    def test_one_of_must_be_taken(self):
        self.definition.one_of_must_be_taken(self.config, [A, B])

        self.assertIs(False, self.is_proper())
        self.assertIs(True, self.is_proper(B))

    def test_included_conditionally(self):
        self.definition.included_conditionally(self.config, A, [B, C])

        self.assertIs(False, self.is_proper(A))
        self.assertIs(True, self.is_proper(A, C))
        self.assertIs(True, self.is_proper(B))

    def test_must_be_taken_together(self):
        self.definition.must_be_taken_together(self.config, [A, B])

        self.assertIs(False, self.is_proper(A))
        self.assertIs(True, self.is_proper(A, B))
        self.assertIs(True, self.is_proper())

    def test_removed_option_still_bound_by_rules(self):
        self.definition.must_be_taken(self.config, A)
        self.definition.included_conditionally(self.config, B, [C])
        self.definition.remove_option(self.config, A)
        self.definition.remove_option(self.config, C)

        self.assertIs(False, self.is_proper())
        self.assertIs(True, self.is_proper(A))
        self.assertIs(False, self.is_proper(A, B))
        self.assertIs(True, self.is_proper(A, B, C))

    def test_no_rules(self):
        self.assertIs(True, self.is_proper())
        self.assertIs(True, self.is_proper(A, B, C))

    def test_plain_options_accepted(self):
        self.definition.cant_be_taken_together(self.config, [A, B])

        self.assertIs(False, self.validation.is_proper(self.config, A, 2))

    def test_read_only(self):
        self.definition.cant_be_taken_together(self.config, [A, B])
        before = (self.store.load(self.config),
                  self.store.load_rules(self.config))

        self.is_proper(A, B)
        self.is_proper(C)

        self.assertEqual(before, (self.store.load(self.config),
                                  self.store.load_rules(self.config)))


if __name__ == '__main__':
    unittest.main()
