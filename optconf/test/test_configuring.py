"""
Tests for interactive configuration processes.
"""

import unittest
from unittest import TestCase

from optconf.configuring import ConfigurationProcessService
from optconf.definition import ConfigurationDefinitionService
from optconf.errors import BlockedOptionPick
from optconf.errors import UnknownOptionPick
from optconf.errors import UnknownProcess
from optconf.errors import UnsatisfiablePick
from optconf.model import ConfigId
from optconf.model import ConfigProcessId
from optconf.model import Option
from optconf.model import PickedOption
from optconf.rules import OneOfPresence
from optconf.store import InMemoryOptionStore
from optconf.store import InMemoryProcessStore


SUNROOF = Option(1)
LEATHER_SEATS = Option(2)
BLUETOOTH = Option(3)
PARKING_SENSORS = Option(4)


class ConfiguringTestCaseBase(TestCase):

    def setUp(self):
        store = InMemoryOptionStore()
        self.processes = InMemoryProcessStore()
        self.definition = ConfigurationDefinitionService(store)
        self.configuring = ConfigurationProcessService(store, self.processes)
        self.config = ConfigId.random()

    def started(self):
        process_id = ConfigProcessId.random()
        self.configuring.start(process_id, self.config)
        return process_id

    def pick(self, process_id, option):
        self.configuring.pick_option(process_id, PickedOption(option))


class PickTestCase(ConfiguringTestCaseBase):

    def test_pick_without_start(self):
        self.definition.cant_be_taken_together(self.config,
                                               [SUNROOF, BLUETOOTH])

        with self.assertRaises(UnknownProcess):
            self.pick(ConfigProcessId.random(), SUNROOF)

    def test_excluded_conditionally(self):
        self.definition.excluded_conditionally(self.config, PARKING_SENSORS,
                                               [LEATHER_SEATS])
        process_id = self.started()

        self.pick(process_id, PARKING_SENSORS)

        with self.assertRaises(UnsatisfiablePick) as cm:
            self.pick(process_id, LEATHER_SEATS)

        self.assertEqual(LEATHER_SEATS, cm.exception.option)
        self.assertEqual(process_id, cm.exception.process_id)
        self.assertEqual({LEATHER_SEATS},
                         self.configuring.available_options(process_id))

    def test_cant_be_taken_together(self):
        self.definition.cant_be_taken_together(self.config,
                                               [PARKING_SENSORS, LEATHER_SEATS])
        process_id = self.started()

        self.pick(process_id, PARKING_SENSORS)

        with self.assertRaises(UnsatisfiablePick):
            self.pick(process_id, LEATHER_SEATS)

    def test_pick_requiring_more_is_accepted(self):
        self.definition.included_conditionally(self.config, SUNROOF,
                                               [LEATHER_SEATS])
        process_id = self.started()

        self.pick(process_id, SUNROOF)

        self.assertEqual({LEATHER_SEATS},
                         self.configuring.available_options(process_id))
        self.assertIs(False, self.configuring.is_complete(process_id))

    def test_pick_blocked(self):
        self.definition.add_options(self.config, [SUNROOF, BLUETOOTH])
        process_id = self.started()
        self.processes.load(process_id).blocked_options.add(BLUETOOTH)

        with self.assertRaises(BlockedOptionPick):
            self.pick(process_id, BLUETOOTH)

        self.assertEqual({SUNROOF, BLUETOOTH},
                         self.configuring.available_options(process_id))

    def test_plain_option_accepted(self):
        self.definition.add_options(self.config, [SUNROOF, BLUETOOTH])
        process_id = self.started()

        self.configuring.pick_option(process_id, SUNROOF)

        self.assertEqual({BLUETOOTH},
                         self.configuring.available_options(process_id))

    def test_process_captures_definition(self):
        self.definition.add_options(self.config, [SUNROOF, BLUETOOTH])
        process_id = self.started()

        self.definition.cant_be_taken_together(self.config,
                                               [SUNROOF, BLUETOOTH])

        self.pick(process_id, SUNROOF)
        self.pick(process_id, BLUETOOTH)
        self.assertIs(True, self.configuring.is_complete(process_id))

    def test_finish(self):
        process_id = self.started()
        self.configuring.finish(process_id)

        with self.assertRaises(UnknownProcess):
            self.configuring.available_options(process_id)
        with self.assertRaises(UnknownProcess):
            self.configuring.finish(process_id)

    def test_finished_processes_leave_no_locks(self):
        self.definition.add_options(self.config, [SUNROOF, BLUETOOTH])

        for _ in range(10):
            process_id = self.started()
            self.pick(process_id, SUNROOF)
            self.configuring.finish(process_id)

        with self.assertRaises(UnknownProcess):
            self.pick(ConfigProcessId.random(), SUNROOF)

        self.assertEqual(0, len(self.configuring._locks))

    def test_pick_outside_possible_options(self):
        self.definition.add_options(self.config, [SUNROOF, BLUETOOTH])
        process_id = self.started()

        with self.assertRaises(UnknownOptionPick) as cm:
            self.pick(process_id, PARKING_SENSORS)

        self.assertEqual(PARKING_SENSORS, cm.exception.option)
        self.assertEqual(set(), self.processes.load(process_id).picked_options)
        self.assertEqual({SUNROOF, BLUETOOTH},
                         self.configuring.available_options(process_id))


class MissingTestCase(ConfiguringTestCaseBase):

    def test_mandatory_option_not_picked(self):
        self.definition.must_be_taken(self.config, SUNROOF)
        process_id = self.started()

        self.assertEqual({SUNROOF},
                         self.configuring.missing_options(process_id))
        self.assertEqual([OneOfPresence([SUNROOF])],
                         self.configuring.unsatisfied_rules(process_id))
        self.assertIs(False, self.configuring.is_complete(process_id))

    def test_mandatory_option_picked(self):
        self.definition.must_be_taken(self.config, SUNROOF)
        process_id = self.started()

        self.pick(process_id, SUNROOF)

        self.assertEqual(set(), self.configuring.missing_options(process_id))
        self.assertEqual([], self.configuring.unsatisfied_rules(process_id))
        self.assertIs(True, self.configuring.is_complete(process_id))

    def test_conditionally_included(self):
        self.definition.included_conditionally(self.config, SUNROOF,
                                               [LEATHER_SEATS, BLUETOOTH])
        self.definition.cant_be_taken_together(self.config,
                                               [SUNROOF, PARKING_SENSORS])
        process_id = self.started()

        self.assertEqual(set(), self.configuring.missing_options(process_id))
        self.assertIs(True, self.configuring.is_complete(process_id))

        self.pick(process_id, SUNROOF)

        self.assertEqual({LEATHER_SEATS, BLUETOOTH},
                         self.configuring.missing_options(process_id))
        self.assertEqual(1, len(self.configuring.unsatisfied_rules(process_id)))

        self.pick(process_id, BLUETOOTH)

        self.assertEqual(set(), self.configuring.missing_options(process_id))
        self.assertIs(True, self.configuring.is_complete(process_id))


if __name__ == '__main__':
    unittest.main()
