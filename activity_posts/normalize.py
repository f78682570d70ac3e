from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Mapping

import pandas as pd

from .post import Post

URL_RE = re.compile(r"https?://\S+")

_SERVICE_TAG_RE = re.compile(r"#runkeeper", re.IGNORECASE)
_ATTRIBUTION_RE = re.compile(r"via\s+@?runkeeper", re.IGNORECASE)
_WS_RE = re.compile(r"\s+")

# Relative words the date parser would resolve against the wall clock.
_RELATIVE_TIME_WORDS = frozenset({"now", "today", "tomorrow", "yesterday"})
# "GMT-0700 (Pacific Daylight Time)" as produced by Date.toString().
_ZONE_NAME_RE = re.compile(r"\s*\([^()]*\)\s*$")
_GMT_OFFSET_RE = re.compile(r"\bGMT([+-]\d{2}:?\d{2})\b")

_ALT_TIME_FIELDS = ("createdAt", "created", "timestamp")


def normalize_text(text: str) -> str:
    """
    Strip the service's boilerplate from a post.

    Removes the service hashtag, URLs and the "via @service" attribution, then
    collapses whitespace and drops one pair of surrounding double quotes.
    """
    s = _SERVICE_TAG_RE.sub("", text or "")
    s = URL_RE.sub("", s)
    s = _ATTRIBUTION_RE.sub("", s).strip()

    s = _WS_RE.sub(" ", s)
    if s.startswith('"'):
        s = s[1:]
    if s.endswith('"'):
        s = s[:-1]
    return s.strip()


def first_link(text: str) -> str | None:
    m = URL_RE.search(text or "")
    return m.group(0) if m else None


def parse_created_at(value: str) -> datetime | None:
    """Parse a feed timestamp into an aware UTC datetime, or None if unparseable."""
    raw = (value or "").strip()
    if not raw or raw.lower() in _RELATIVE_TIME_WORDS:
        return None

    raw = _GMT_OFFSET_RE.sub(r"\1", _ZONE_NAME_RE.sub("", raw))
    ts = pd.to_datetime(raw, errors="coerce", utc=True)
    if pd.isna(ts):
        return None
    return ts.to_pydatetime()


def make_post(text: str, created_at: str = "") -> Post:
    return Post(
        text=(text or "").strip(),
        created_at=created_at or "",
        time=parse_created_at(created_at),
    )


def _coerce_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    return None


def post_from_item(
    item: Any,
    *,
    text_field: str = "text",
    time_field: str = "created_at",
) -> Post | None:
    """
    Build a Post from one feed record.

    Returns None for records that are not objects. Missing or non-string text
    degrades to an empty post rather than being dropped.
    """
    if not isinstance(item, Mapping):
        return None

    text = _coerce_str(item.get(text_field)) or ""

    created_at = _coerce_str(item.get(time_field))
    if created_at is None:
        for name in _ALT_TIME_FIELDS:
            created_at = _coerce_str(item.get(name))
            if created_at is not None:
                break

    return make_post(text, created_at or "")
