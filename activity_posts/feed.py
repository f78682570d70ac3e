from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from .config_schema import FeedConfig
from .errors import FeedError
from .normalize import post_from_item
from .post import Post


@dataclass(frozen=True)
class LoadedFeed:
    posts: tuple[Post, ...]
    skipped: int


def posts_from_items(items: Iterable[Any], *, feed: FeedConfig | None = None) -> LoadedFeed:
    cfg = feed or FeedConfig()
    posts: list[Post] = []
    skipped = 0

    for item in items:
        post = post_from_item(item, text_field=cfg.text_field, time_field=cfg.time_field)
        if post is None:
            skipped += 1
            continue
        posts.append(post)

    return LoadedFeed(posts=tuple(posts), skipped=skipped)


def _read_json_lines(raw: str, path: Path) -> list[Any]:
    items: list[Any] = []
    for lineno, line in enumerate(raw.splitlines(), start=1):
        s = line.strip()
        if not s:
            continue
        try:
            items.append(json.loads(s))
        except json.JSONDecodeError as e:
            raise FeedError(f"Invalid JSON on line {lineno} of {path}: {e}") from e
    return items


def _read_json_document(raw: str, path: Path) -> list[Any]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise FeedError(f"Failed to parse JSON in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("posts")
    if not isinstance(data, list):
        raise FeedError(f"Feed {path} must be a JSON array or an object with a 'posts' array")
    return data


def load_posts(path: str | Path, *, feed: FeedConfig | None = None) -> LoadedFeed:
    """
    Read a feed file of {text, created_at} records.

    Accepts a JSON array, an object holding a "posts" array, or JSON Lines
    (by the .jsonl extension).
    """
    p = Path(path)
    if not p.exists():
        raise FeedError(f"Feed file not found: {p}")

    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise FeedError(f"Failed to read feed file: {p}") from e

    if p.suffix.lower() == ".jsonl":
        items = _read_json_lines(raw, p)
    else:
        items = _read_json_document(raw, p)

    return posts_from_items(items, feed=feed)
