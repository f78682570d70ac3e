from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from .activity import extract_activity
from .classify import classify_category
from .normalize import normalize_text
from .post import ClassifiedPost, Post
from .written import detect_written


def classify_post(post: Post) -> ClassifiedPost:
    category = classify_category(post.text)
    written = detect_written(post.text)
    activity = extract_activity(post.text, category)

    return ClassifiedPost(
        post=post,
        category=category,
        is_user_written=written.is_user_written,
        written_text=written.written_text,
        activity_type=activity.activity_type,
        distance_miles=activity.distance_miles,
        normalized_text=normalize_text(post.text),
    )


def classify_posts(posts: Iterable[Post], *, max_workers: int = 1) -> list[ClassifiedPost]:
    """
    Classify a batch of posts, preserving input order.

    Posts are independent, so with max_workers > 1 they are spread over a thread pool.
    """
    items = list(posts)
    if max_workers <= 1 or len(items) <= 1:
        return [classify_post(p) for p in items]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(classify_post, items))
