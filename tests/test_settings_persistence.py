"""Unit tests for settings persistence."""

import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path

from paraspace.settings_persistence import (
    SettingsKeys,
    SettingsPersistence,
    get_persistence,
    spacing_from_settings,
)
from paraspace.units import DEFAULT_SPACING, em, sp


class TestSettingsPersistence(unittest.TestCase):

    def setUp(self):
        self.temp_dir = os.path.realpath(tempfile.mkdtemp())
        self.persistence = SettingsPersistence(config_dir=Path(self.temp_dir) / "config")
        self.test_doc_path = os.path.join(self.temp_dir, "test_document.txt")

    def tearDown(self):
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_save_and_load_settings(self):
        settings = {SettingsKeys.SPACING: "12sp", SettingsKeys.LINE_LENGTH: 65}
        self.assertTrue(self.persistence.save_settings(self.test_doc_path, settings))
        self.assertEqual(self.persistence.load_settings(self.test_doc_path), settings)

    def test_settings_survive_a_new_instance(self):
        self.persistence.save_settings(self.test_doc_path, {SettingsKeys.SPACING: "2em"})
        fresh = SettingsPersistence(config_dir=Path(self.temp_dir) / "config")
        self.assertEqual(fresh.load_settings(self.test_doc_path), {SettingsKeys.SPACING: "2em"})

    def test_load_nonexistent_document(self):
        self.assertEqual(self.persistence.load_settings("/nonexistent/document.txt"), {})

    def test_none_document_path(self):
        self.assertFalse(self.persistence.save_settings(None, {SettingsKeys.SPACING: "10sp"}))
        self.assertEqual(self.persistence.load_settings(None), {})

    def test_relative_and_absolute_paths_match(self):
        cwd = os.getcwd()
        try:
            os.chdir(self.temp_dir)
            self.persistence.save_settings("test_document.txt", {SettingsKeys.LINE_LENGTH: 80})
        finally:
            os.chdir(cwd)
        loaded = self.persistence.load_settings(self.test_doc_path)
        self.assertEqual(loaded, {SettingsKeys.LINE_LENGTH: 80})

    def test_multiple_documents(self):
        doc1 = os.path.join(self.temp_dir, "doc1.txt")
        doc2 = os.path.join(self.temp_dir, "doc2.txt")
        self.persistence.save_settings(doc1, {SettingsKeys.SPACING: "10sp"})
        self.persistence.save_settings(doc2, {SettingsKeys.SPACING: "1em"})
        self.assertEqual(self.persistence.load_settings(doc1), {SettingsKeys.SPACING: "10sp"})
        self.assertEqual(self.persistence.load_settings(doc2), {SettingsKeys.SPACING: "1em"})

    def test_corrupted_settings_file(self):
        self.persistence.settings_file.parent.mkdir(parents=True)
        self.persistence.settings_file.write_text("not json {", encoding="utf-8")
        with self.assertLogs("paraspace.settings_persistence", level="WARNING"):
            self.assertEqual(self.persistence.load_settings(self.test_doc_path), {})

    def test_settings_file_not_a_dict(self):
        self.persistence.settings_file.parent.mkdir(parents=True)
        self.persistence.settings_file.write_text(json.dumps([1, 2]), encoding="utf-8")
        with self.assertLogs("paraspace.settings_persistence", level="WARNING"):
            self.assertEqual(self.persistence.load_settings(self.test_doc_path), {})

    def test_invalid_entries_are_dropped(self):
        self.persistence.save_settings(self.test_doc_path, {
            SettingsKeys.SPACING: "huge",
            SettingsKeys.LINE_LENGTH: 70,
        })
        with self.assertLogs("paraspace.settings_persistence", level="WARNING"):
            loaded = self.persistence.load_settings(self.test_doc_path)
        self.assertEqual(loaded, {SettingsKeys.LINE_LENGTH: 70})

    def test_atomic_save_leaves_no_temp_file(self):
        self.persistence.save_settings(self.test_doc_path, {SettingsKeys.SPACING: "10sp"})
        self.assertTrue(self.persistence.settings_file.exists())
        self.assertFalse(self.persistence.settings_file.with_suffix('.tmp').exists())

    def test_validate_spacing(self):
        validate = self.persistence.validate_setting
        self.assertTrue(validate(SettingsKeys.SPACING, "10sp"))
        self.assertTrue(validate(SettingsKeys.SPACING, "1.5em"))
        self.assertTrue(validate(SettingsKeys.SPACING, None))
        self.assertFalse(validate(SettingsKeys.SPACING, 10))
        self.assertFalse(validate(SettingsKeys.SPACING, "10px"))
        self.assertFalse(validate(SettingsKeys.SPACING, "500sp"))

    def test_validate_line_length(self):
        validate = self.persistence.validate_setting
        self.assertTrue(validate(SettingsKeys.LINE_LENGTH, 65))
        self.assertFalse(validate(SettingsKeys.LINE_LENGTH, 5))
        self.assertFalse(validate(SettingsKeys.LINE_LENGTH, 1000))
        self.assertFalse(validate(SettingsKeys.LINE_LENGTH, "65"))
        self.assertFalse(validate(SettingsKeys.LINE_LENGTH, True))

    def test_unknown_settings_are_kept(self):
        self.assertTrue(self.persistence.validate_setting("future_option", [1, 2, 3]))

    def test_clear_cache_rereads_disk(self):
        self.persistence.save_settings(self.test_doc_path, {SettingsKeys.LINE_LENGTH: 60})
        other = SettingsPersistence(config_dir=Path(self.temp_dir) / "config")
        other.save_settings(self.test_doc_path, {SettingsKeys.LINE_LENGTH: 90})
        self.assertEqual(self.persistence.load_settings(self.test_doc_path)[SettingsKeys.LINE_LENGTH], 60)
        self.persistence.clear_cache()
        self.assertEqual(self.persistence.load_settings(self.test_doc_path)[SettingsKeys.LINE_LENGTH], 90)


def test_spacing_from_settings():
    assert spacing_from_settings({}, DEFAULT_SPACING) == DEFAULT_SPACING
    assert spacing_from_settings({SettingsKeys.SPACING: "2em"}, sp(10)) == em(2)
    assert spacing_from_settings({SettingsKeys.SPACING: None}, sp(4)) == sp(4)


def test_get_persistence_is_singleton():
    assert get_persistence() is get_persistence()
