from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from activity_posts.config_schema import AppConfig
from activity_posts.errors import ExportError
from activity_posts.engine import classify_posts
from activity_posts.export_excel import export_classified_workbook
from activity_posts.feed import posts_from_items
from activity_posts.sample_feed import SAMPLE_ITEMS
from activity_posts.summary import summarize


class TestExportExcel(unittest.TestCase):
    def test_exports_required_sheets(self) -> None:
        try:
            from openpyxl import load_workbook  # type: ignore[import-not-found]
        except Exception as e:  # pragma: no cover
            raise AssertionError("openpyxl is required for this test") from e

        items = list(SAMPLE_ITEMS) + [{"text": "=SUM(A1:A2) is my pace", "created_at": "nope"}]
        records = classify_posts(posts_from_items(items).posts)
        summary = summarize(records)

        with tempfile.TemporaryDirectory() as td:
            out_path = Path(td) / "nested" / "classified.xlsx"
            written = export_classified_workbook(
                records, summary, out_path, config=AppConfig(), source="sample"
            )
            self.assertEqual(written, out_path)
            self.assertTrue(out_path.exists())

            wb = load_workbook(out_path)
            for name in ("posts", "category_summary", "activity_summary", "run_metadata"):
                self.assertIn(name, wb.sheetnames)

            rows = list(wb["posts"].iter_rows(values_only=True))
            self.assertEqual(len(rows), len(records) + 1)

            header = [str(v) for v in rows[0]]
            self.assertIn("category", header)
            cat_idx = header.index("category")
            self.assertEqual(rows[1][cat_idx], "completed_event")

            text_idx = header.index("text")
            self.assertEqual(rows[-1][text_idx], "'=SUM(A1:A2) is my pace")

            cats = list(wb["category_summary"].iter_rows(values_only=True))
            self.assertEqual(cats[0], ("category", "count", "pct"))
            self.assertEqual(len(cats), 5)

    def test_exports_empty_feed(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out_path = Path(td) / "empty.xlsx"
            export_classified_workbook([], summarize([]), out_path)
            self.assertTrue(out_path.exists())

    def test_unwritable_parent_raises_export_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            blocker = Path(td) / "blocker"
            blocker.write_text("not a directory", encoding="utf-8")
            with self.assertRaises(ExportError):
                export_classified_workbook([], summarize([]), blocker / "out.xlsx")


if __name__ == "__main__":
    unittest.main()
