"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pathtree.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("pathtree.runtime.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_panel_config(), config.PanelConfig())

    def test_panel_config_round_trip_keeps_unrelated_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("pathtree.runtime.config.CONFIG_PATH", config_path):
                config.save_config({"other": 1})
                expected = config.PanelConfig(auto_expand_top_level=True, show_status_badges=False)
                config.save_panel_config(expected)
                self.assertEqual(config.load_panel_config(), expected)
                self.assertEqual(config.load_config().get("other"), 1)

    def test_malformed_values_fall_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("pathtree.runtime.config.CONFIG_PATH", config_path):
                config.save_config({"auto_expand_top_level": "yes", "show_status_badges": 0})
                self.assertEqual(config.load_panel_config(), config.PanelConfig())

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
