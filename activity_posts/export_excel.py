from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

import pandas as pd

from .config import config_sha256
from .config_schema import AppConfig
from .errors import ExportError
from .normalize import first_link
from .post import CATEGORIES, ClassifiedPost
from .summary import FeedSummary

_EXCEL_FORMULA_PREFIXES = ("=", "+", "-", "@")

_POST_COLUMNS = (
    "row",
    "created_at",
    "time_utc",
    "category",
    "is_user_written",
    "written_text",
    "activity_type",
    "distance_miles",
    "link",
    "text",
)

_SHEETS = ("posts", "category_summary", "activity_summary", "run_metadata")


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _safe_excel_text(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        return str(value)
    s = value
    if not s:
        return s
    if s.startswith(_EXCEL_FORMULA_PREFIXES):
        return "'" + s
    return s


def _post_row(index: int, record: ClassifiedPost) -> dict[str, Any]:
    post = record.post
    return {
        "row": index + 1,
        "created_at": _safe_excel_text(post.created_at),
        # openpyxl cannot store tz-aware datetimes.
        "time_utc": post.time.replace(tzinfo=None) if post.time is not None else None,
        "category": record.category,
        "is_user_written": bool(record.is_user_written),
        "written_text": _safe_excel_text(record.written_text),
        "activity_type": _safe_excel_text(record.activity_type),
        "distance_miles": float(record.distance_miles),
        "link": _safe_excel_text(first_link(post.text)),
        "text": _safe_excel_text(post.text),
    }


def export_classified_workbook(
    records: Sequence[ClassifiedPost],
    summary: FeedSummary,
    out_path: str | Path,
    *,
    config: AppConfig | None = None,
    source: str | None = None,
) -> Path:
    cfg = config or AppConfig()
    out = Path(out_path)

    post_rows = [_post_row(i, r) for i, r in enumerate(records)]

    category_rows = [
        {
            "category": c,
            "count": int(summary.category_counts.get(c, 0)),
            "pct": round(float(summary.category_pct.get(c, 0.0)), cfg.report.percent_decimals),
        }
        for c in CATEGORIES
    ]

    activity_rows = [
        {"activity_type": _safe_excel_text(t), "count": int(n)}
        for t, n in summary.activity_counts
    ]

    meta_rows: list[dict[str, Any]] = [
        {"key": "exported_at_utc", "value": _safe_excel_text(_utc_now_iso())},
        {"key": "source", "value": _safe_excel_text(source)},
        {"key": "config_hash", "value": config_sha256(cfg)},
        {"key": "counts.posts", "value": summary.total},
        {"key": "counts.invalid_timestamps", "value": summary.invalid_time_count},
        {"key": "counts.completed", "value": summary.completed_count},
        {"key": "counts.written_completed", "value": summary.written_completed_count},
        {"key": "activities.distinct", "value": summary.distinct_activity_count},
        {"key": "activities.top", "value": _safe_excel_text(", ".join(summary.top_activities))},
        {"key": "activities.longest", "value": _safe_excel_text(summary.longest_activity)},
        {"key": "activities.shortest", "value": _safe_excel_text(summary.shortest_activity)},
        {"key": "distance.longer_on", "value": summary.longer_on},
        {"key": "output_path", "value": _safe_excel_text(str(out))},
    ]

    df_posts = pd.DataFrame(post_rows, columns=list(_POST_COLUMNS))
    df_categories = pd.DataFrame(category_rows)
    df_activities = pd.DataFrame(activity_rows, columns=["activity_type", "count"])
    df_meta = pd.DataFrame(meta_rows)

    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df_posts.to_excel(writer, sheet_name="posts", index=False)
            df_categories.to_excel(writer, sheet_name="category_summary", index=False)
            df_activities.to_excel(writer, sheet_name="activity_summary", index=False)
            df_meta.to_excel(writer, sheet_name="run_metadata", index=False)

            wb = writer.book
            for name in _SHEETS:
                if name in wb.sheetnames:
                    wb[name].freeze_panes = "A2"
    except Exception as e:
        raise ExportError(f"Failed to write workbook: {out}: {e}") from e

    return out
