"""
Tests for conf -- config persistence and HID interface resolution.
"""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from sdbright import conf
from sdbright.constants import default_interface


class _TempConfigMixin:
    """Point conf at a temporary config directory."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        config_dir = os.path.join(self._tmp.name, 'sdbright')
        self._patches = [
            patch.object(conf, 'CONFIG_DIR', config_dir),
            patch.object(conf, 'CONFIG_PATH', os.path.join(config_dir, 'config.json')),
        ]
        for p in self._patches:
            p.start()

    def tearDown(self):
        for p in self._patches:
            p.stop()
        self._tmp.cleanup()

    def _write_raw(self, text):
        os.makedirs(conf.CONFIG_DIR, exist_ok=True)
        with open(conf.CONFIG_PATH, 'w') as f:
            f.write(text)


class TestLoadSave(_TempConfigMixin, unittest.TestCase):

    def test_missing_file(self):
        self.assertEqual(conf.load_config(), {})

    def test_round_trip(self):
        conf.save_config({'interface': 12})
        self.assertEqual(conf.load_config(), {'interface': 12})

    def test_corrupt_file(self):
        self._write_raw('{not json')
        with self.assertLogs('sdbright.conf', level='WARNING'):
            self.assertEqual(conf.load_config(), {})

    def test_non_dict_json(self):
        self._write_raw('[1, 2]')
        self.assertEqual(conf.load_config(), {})

    def test_save_is_indented_json(self):
        conf.save_config({'interface': 7})
        with open(conf.CONFIG_PATH) as f:
            self.assertEqual(json.load(f), {'interface': 7})


class TestInterface(_TempConfigMixin, unittest.TestCase):

    def test_unset(self):
        self.assertIsNone(conf.get_saved_interface())

    def test_save_preserves_other_keys(self):
        conf.save_config({'other': 'x'})
        conf.save_interface(12)
        self.assertEqual(conf.load_config(), {'other': 'x', 'interface': 12})
        self.assertEqual(conf.get_saved_interface(), 12)

    def test_invalid_value_ignored(self):
        conf.save_config({'interface': 'seven'})
        with self.assertLogs('sdbright.conf', level='WARNING'):
            self.assertIsNone(conf.get_saved_interface())

    def test_bool_ignored(self):
        conf.save_config({'interface': True})
        self.assertIsNone(conf.get_saved_interface())

    def test_resolve_override_wins(self):
        conf.save_interface(3)
        self.assertEqual(conf.resolve_interface(12), 12)

    def test_resolve_config_over_default(self):
        conf.save_interface(3)
        self.assertEqual(conf.resolve_interface(), 3)

    def test_resolve_platform_default(self):
        self.assertEqual(conf.resolve_interface(), default_interface())


class TestDefaultInterface(unittest.TestCase):

    def test_linux(self):
        self.assertEqual(default_interface('linux'), 7)

    def test_windows(self):
        self.assertEqual(default_interface('win32'), 7)

    def test_macos(self):
        self.assertEqual(default_interface('darwin'), 12)

    def test_unknown_falls_back_to_linux_numbering(self):
        self.assertEqual(default_interface('freebsd13'), 7)
