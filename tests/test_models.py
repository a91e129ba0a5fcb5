"""
Tests for core.models -- DeviceDescriptor, Outcome and the error hierarchy.
"""

import unittest
from dataclasses import FrozenInstanceError

from sdbright.constants import STUDIO_DISPLAY
from sdbright.core.models import (
    BrightnessError,
    Command,
    DeviceDescriptor,
    DeviceNotFound,
    DeviceUnavailable,
    Outcome,
    ReadFailed,
    UsageError,
    WriteFailed,
)


class TestDeviceDescriptor(unittest.TestCase):

    def test_studio_display_constants(self):
        self.assertEqual(STUDIO_DISPLAY.vendor_id, 0x05AC)
        self.assertEqual(STUDIO_DISPLAY.product_id, 0x1114)
        self.assertEqual(STUDIO_DISPLAY.min_brightness, 400)
        self.assertEqual(STUDIO_DISPLAY.max_brightness, 60000)

    def test_vid_pid(self):
        self.assertEqual(STUDIO_DISPLAY.vid_pid, "05ac:1114")

    def test_in_range(self):
        self.assertTrue(STUDIO_DISPLAY.in_range(400))
        self.assertTrue(STUDIO_DISPLAY.in_range(60000))
        self.assertFalse(STUDIO_DISPLAY.in_range(399))
        self.assertFalse(STUDIO_DISPLAY.in_range(60001))

    def test_frozen(self):
        with self.assertRaises(FrozenInstanceError):
            STUDIO_DISPLAY.min_brightness = 0

    def test_min_not_below_max_rejected(self):
        with self.assertRaises(ValueError):
            DeviceDescriptor(1, 2, 500, 500)

    def test_over_16_bit_rejected(self):
        with self.assertRaises(ValueError):
            DeviceDescriptor(0x10000, 2, 0, 1)


class TestOutcome(unittest.TestCase):

    def test_report_never_at_boundary(self):
        self.assertFalse(Outcome(Command.REPORT, 400).at_boundary)

    def test_step_without_target_is_boundary(self):
        self.assertTrue(Outcome(Command.DECREASE, 400).at_boundary)

    def test_step_with_target(self):
        outcome = Outcome(Command.INCREASE, 8733, target=11152, written=True)
        self.assertFalse(outcome.at_boundary)


class TestErrors(unittest.TestCase):

    def test_all_are_brightness_errors(self):
        for cls in (DeviceNotFound, DeviceUnavailable, ReadFailed, WriteFailed, UsageError):
            self.assertTrue(issubclass(cls, BrightnessError))
            self.assertTrue(issubclass(cls, RuntimeError))

    def test_default_messages(self):
        self.assertEqual(str(DeviceNotFound()), "Could not find matching device/interface.")
        self.assertEqual(str(DeviceUnavailable()), "Could not open device.")
        self.assertEqual(str(ReadFailed()), "Could not read current brightness.")
        self.assertEqual(str(WriteFailed()), "Could not set brightness.")

    def test_custom_message(self):
        self.assertEqual(str(ReadFailed("Short report")), "Short report")
