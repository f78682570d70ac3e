from __future__ import annotations

import re
from typing import Callable

from .post import ACHIEVEMENT, COMPLETED_EVENT, LIVE_EVENT, MISCELLANEOUS, Category

_LIVE_VERB_RE = re.compile(r"\bis (running|biking|walking|skiing|swimming)\b")

_ACHIEVEMENT_PHRASES = (
    "new personal record",
    "pr!",
    "achieved",
    "set a goal",
    "achievement",
)


def _looks_completed(t: str) -> bool:
    return (
        t.startswith("just completed")
        or t.startswith("i just ")
        or " completed a " in t
        or " completed an " in t
    )


def _looks_live(t: str) -> bool:
    return t.startswith("just posted") or _LIVE_VERB_RE.search(t) is not None


def _looks_achievement(t: str) -> bool:
    return any(phrase in t for phrase in _ACHIEVEMENT_PHRASES)


# Order is significant: the predicates overlap and the first match wins.
CATEGORY_RULES: tuple[tuple[Category, Callable[[str], bool]], ...] = (
    (COMPLETED_EVENT, _looks_completed),
    (LIVE_EVENT, _looks_live),
    (ACHIEVEMENT, _looks_achievement),
)


def classify_category(text: str) -> Category:
    """
    Map raw post text to a category.

    Works on the raw text rather than the normalized one so that template
    phrases like "just completed" are still visible.
    """
    t = (text or "").strip().lower()
    for category, matches in CATEGORY_RULES:
        if matches(t):
            return category
    return MISCELLANEOUS
