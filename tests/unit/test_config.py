"""Tests for config persistence and rule sanitization.

Validates rule round-tripping and that malformed config data is safely
normalized on load.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from vaultbook import config
from vaultbook.rules import ORDER_FOLDERS_FIRST, SORT_CREATION_TIME, RuleSet


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_default_rules(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("vaultbook.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_rules(), RuleSet())

    def test_rules_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            rules = RuleSet(
                folders_to_ignore=("Archive",),
                files_to_ignore=("README.md",),
                extensions_to_ignore=(".pdf",),
                tags_to_ignore=("draft",),
                include_empty_folders=True,
                sorting_strategy=SORT_CREATION_TIME,
                sibling_order=ORDER_FOLDERS_FIRST,
                generate_tocs=False,
                legacy_toc_scoping=True,
            )
            with mock.patch("vaultbook.config.CONFIG_PATH", config_path):
                config.save_rules(rules)
                self.assertEqual(config.load_rules(), rules)

    def test_save_rules_keeps_unrelated_keys_and_cleans_patterns(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("vaultbook.config.CONFIG_PATH", config_path):
                config.save_config({"other": 1})
                config.save_rules(RuleSet(files_to_ignore=(" a.md ", "  ")))

                saved = config.load_config()

            self.assertEqual(saved["other"], 1)
            self.assertEqual(saved["files_to_ignore"], ["a.md"])

    def test_load_rules_sanitizes_invalid_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("vaultbook.config.CONFIG_PATH", config_path):
                config.save_config(
                    {
                        "folders_to_ignore": ["Archive", 3, None, "  "],
                        "files_to_ignore": "README.md",
                        "tags_to_ignore": [" draft "],
                        "include_empty_folders": "yes",
                        "generate_tocs": 0,
                        "sorting_strategy": "random",
                        "sibling_order": ORDER_FOLDERS_FIRST,
                    }
                )

                rules = config.load_rules()

            self.assertEqual(rules.folders_to_ignore, ("Archive",))
            self.assertEqual(rules.files_to_ignore, ())
            self.assertEqual(rules.tags_to_ignore, ("draft",))
            self.assertFalse(rules.include_empty_folders)
            self.assertTrue(rules.generate_tocs)
            self.assertEqual(rules.sorting_strategy, RuleSet().sorting_strategy)
            self.assertEqual(rules.sibling_order, ORDER_FOLDERS_FIRST)

    def test_malformed_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("vaultbook.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_non_object_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2]\n", encoding="utf-8")
            with mock.patch("vaultbook.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
