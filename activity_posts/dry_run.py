from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .config_schema import AppConfig
from .engine import classify_posts
from .feed import posts_from_items
from .post import COMPLETED_EVENT, ClassifiedPost
from .sample_feed import SAMPLE_ITEMS


@dataclass(frozen=True)
class DryRunResult:
    post_count: int
    category_counts: dict[str, int]
    written_count: int
    example_record: dict[str, Any]


def record_for_print(record: ClassifiedPost) -> dict[str, Any]:
    return {
        "text": record.post.text,
        "created_at": record.post.created_at,
        "category": record.category,
        "is_user_written": record.is_user_written,
        "written_text": record.written_text,
        "activity_type": record.activity_type,
        "distance_miles": round(record.distance_miles, 3),
    }


def run_dry_run(
    config: AppConfig,
    *,
    items: Iterable[Any] | None = None,
) -> DryRunResult:
    """Classify a small feed (the built-in sample by default) as a smoke check."""
    loaded = posts_from_items(SAMPLE_ITEMS if items is None else items, feed=config.feed)
    records = classify_posts(loaded.posts, max_workers=config.batch.max_workers)

    if not records:
        raise RuntimeError("Dry-run feed did not contain any posts")

    counts: dict[str, int] = {}
    for r in records:
        counts[r.category] = counts.get(r.category, 0) + 1

    example = next((r for r in records if r.category == COMPLETED_EVENT), records[0])

    return DryRunResult(
        post_count=len(records),
        category_counts=counts,
        written_count=sum(1 for r in records if r.is_user_written),
        example_record=record_for_print(example),
    )
