from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence

from .post import CATEGORIES, COMPLETED_EVENT, UNKNOWN_ACTIVITY, ClassifiedPost

_WEEKEND_DAYS = (5, 6)


@dataclass(frozen=True)
class FeedSummary:
    total: int
    first_time: datetime | None
    last_time: datetime | None
    invalid_time_count: int

    category_counts: dict[str, int]
    category_pct: dict[str, float]

    completed_count: int
    written_completed_count: int
    written_completed_pct: float

    activity_counts: tuple[tuple[str, int], ...]
    top_activities: tuple[str, ...]
    longest_activity: str | None
    shortest_activity: str | None
    longer_on: str

    @property
    def distinct_activity_count(self) -> int:
        return len(self.activity_counts)


def _pct(value: int, total: int) -> float:
    return (value / total) * 100.0 if total else 0.0


def measured_activities(records: Iterable[ClassifiedPost]) -> list[ClassifiedPost]:
    """Completed posts with a recognised activity type and a positive distance."""
    return [
        r
        for r in records
        if r.category == COMPLETED_EVENT
        and r.activity_type
        and r.activity_type != UNKNOWN_ACTIVITY
        and r.distance_miles > 0
    ]


def activity_type_counts(
    records: Iterable[ClassifiedPost], *, require_distance: bool = False
) -> Counter[str]:
    """Frequency of each activity type among completed posts, ignoring "unknown"."""
    if require_distance:
        pool = measured_activities(records)
    else:
        pool = [
            r
            for r in records
            if r.category == COMPLETED_EVENT and r.activity_type != UNKNOWN_ACTIVITY
        ]

    counts: Counter[str] = Counter()
    for r in pool:
        counts[r.activity_type] += 1
    return counts


def _mean_distance_by_type(rows: Sequence[ClassifiedPost]) -> list[tuple[str, float]]:
    totals: dict[str, float] = {}
    counts: dict[str, int] = {}
    for r in rows:
        totals[r.activity_type] = totals.get(r.activity_type, 0.0) + r.distance_miles
        counts[r.activity_type] = counts.get(r.activity_type, 0) + 1

    means = [(t, totals[t] / counts[t]) for t in totals]
    means.sort(key=lambda item: item[1], reverse=True)
    return means


def _longer_on(rows: Sequence[ClassifiedPost]) -> str:
    wk_sum = we_sum = 0.0
    wk_n = we_n = 0
    for r in rows:
        if r.post.time is None:
            continue
        if r.post.time.weekday() in _WEEKEND_DAYS:
            we_sum += r.distance_miles
            we_n += 1
        else:
            wk_sum += r.distance_miles
            wk_n += 1

    wk_avg = wk_sum / wk_n if wk_n else 0.0
    we_avg = we_sum / we_n if we_n else 0.0
    return "weekends" if we_avg > wk_avg else "weekdays"


def summarize(records: Sequence[ClassifiedPost], *, top_n: int = 3) -> FeedSummary:
    total = len(records)

    times = [r.post.time for r in records if r.post.time is not None]

    category_counts = {c: 0 for c in CATEGORIES}
    for r in records:
        category_counts[r.category] = category_counts.get(r.category, 0) + 1

    completed = [r for r in records if r.category == COMPLETED_EVENT]
    written_completed = sum(1 for r in completed if r.is_user_written)

    measured = measured_activities(records)
    counts = activity_type_counts(measured)
    ranked = tuple(counts.most_common())
    means = _mean_distance_by_type(measured)

    return FeedSummary(
        total=total,
        first_time=min(times) if times else None,
        last_time=max(times) if times else None,
        invalid_time_count=total - len(times),
        category_counts=category_counts,
        category_pct={c: _pct(n, total) for c, n in category_counts.items()},
        completed_count=len(completed),
        written_completed_count=written_completed,
        written_completed_pct=_pct(written_completed, len(completed)),
        activity_counts=ranked,
        top_activities=tuple(t for t, _ in ranked[: max(0, top_n)]),
        longest_activity=means[0][0] if means else None,
        shortest_activity=means[-1][0] if means else None,
        longer_on=_longer_on(measured),
    )


def _fmt_time(value: datetime | None) -> str:
    if value is None:
        return "(n/a)"
    return value.strftime("%A, %B %d, %Y").replace(" 0", " ")


def format_summary(summary: FeedSummary, *, percent_decimals: int = 2) -> str:
    def pct(value: float) -> str:
        return f"{value:.{percent_decimals}f}%"

    lines: list[str] = [
        f"total_posts={summary.total}",
        f"first_date={_fmt_time(summary.first_time)}",
        f"last_date={_fmt_time(summary.last_time)}",
    ]
    if summary.invalid_time_count:
        lines.append(f"invalid_timestamps={summary.invalid_time_count}")

    for category in CATEGORIES:
        n = summary.category_counts.get(category, 0)
        lines.append(f"{category}={n} ({pct(summary.category_pct.get(category, 0.0))})")

    lines.append(
        f"written_completed={summary.written_completed_count}"
        f" ({pct(summary.written_completed_pct)})"
    )
    lines.append(f"distinct_activities={summary.distinct_activity_count}")

    top = list(summary.top_activities)
    lines.append("top_activities=" + (", ".join(top) if top else "(n/a)"))
    lines.append(f"longest_activity={summary.longest_activity or '(n/a)'}")
    lines.append(f"shortest_activity={summary.shortest_activity or '(n/a)'}")
    lines.append(f"longer_on={summary.longer_on}")
    return "\n".join(lines)
