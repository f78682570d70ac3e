from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

Category = Literal["completed_event", "live_event", "achievement", "miscellaneous"]

COMPLETED_EVENT: Category = "completed_event"
LIVE_EVENT: Category = "live_event"
ACHIEVEMENT: Category = "achievement"
MISCELLANEOUS: Category = "miscellaneous"

CATEGORIES: tuple[Category, ...] = (
    COMPLETED_EVENT,
    LIVE_EVENT,
    ACHIEVEMENT,
    MISCELLANEOUS,
)

UNKNOWN_ACTIVITY = "unknown"


@dataclass(frozen=True)
class Post:
    """A raw post as delivered by the feed, with its timestamp parsed once."""

    text: str
    created_at: str = ""
    # None when created_at could not be parsed.
    time: datetime | None = None


@dataclass(frozen=True)
class ClassifiedPost:
    """Everything derived from a single Post."""

    post: Post
    category: Category
    is_user_written: bool
    written_text: str
    activity_type: str
    distance_miles: float
    normalized_text: str = ""
