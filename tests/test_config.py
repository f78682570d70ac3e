from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from activity_posts.config import config_sha256, load_config
from activity_posts.config_schema import AppConfig, ReportConfig
from activity_posts.errors import ConfigError


_VALID_YAML = """\
feed:
  text_field: text
  time_field: created_at

batch:
  max_workers: 4

report:
  top_n: 5
  percent_decimals: 1

export:
  excel: false
  filename: posts.xlsx
"""


class TestConfig(unittest.TestCase):
    def _write(self, td: str, text: str) -> Path:
        path = Path(td) / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_load_config_ok(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg = load_config(self._write(td, _VALID_YAML))
            self.assertEqual(cfg.batch.max_workers, 4)
            self.assertEqual(cfg.report.top_n, 5)
            self.assertEqual(cfg.report.percent_decimals, 1)
            self.assertFalse(cfg.export.excel)
            self.assertEqual(cfg.export.filename, "posts.xlsx")

    def test_defaults(self) -> None:
        self.assertEqual(load_config(None), AppConfig())
        with tempfile.TemporaryDirectory() as td:
            cfg = load_config(self._write(td, ""))
            self.assertEqual(cfg.report.top_n, 3)
            self.assertEqual(cfg.feed.time_field, "created_at")

    def test_rejects_bad_values(self) -> None:
        bad = [
            _VALID_YAML.replace("max_workers: 4", "max_workers: 0"),
            _VALID_YAML.replace("filename: posts.xlsx", "filename: posts.csv"),
            _VALID_YAML.replace("text_field: text", "text_field: '  '"),
            _VALID_YAML + "unknown_section: {}\n",
            "- just\n- a list\n",
            "feed: [unclosed\n",
        ]
        with tempfile.TemporaryDirectory() as td:
            for text in bad:
                with self.assertRaises(ConfigError, msg=text):
                    load_config(self._write(td, text))

    def test_error_message_names_field(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = self._write(td, "report:\n  top_n: 0\n")
            with self.assertRaises(ConfigError) as ctx:
                load_config(path)
            self.assertIn("report.top_n", str(ctx.exception))

    def test_example_config_matches_defaults(self) -> None:
        example = Path(__file__).resolve().parents[1] / "config.example.yaml"
        self.assertEqual(load_config(example), AppConfig())

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(ConfigError):
                load_config(Path(td) / "missing.yaml")

    def test_config_hash_is_stable(self) -> None:
        self.assertEqual(config_sha256(AppConfig()), config_sha256(AppConfig()))
        self.assertNotEqual(
            config_sha256(AppConfig()),
            config_sha256(AppConfig(report=ReportConfig(top_n=7))),
        )


if __name__ == "__main__":
    unittest.main()
