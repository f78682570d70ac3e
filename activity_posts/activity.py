from __future__ import annotations

import re
from dataclasses import dataclass

from .post import COMPLETED_EVENT, UNKNOWN_ACTIVITY

# Table order is the tie-break priority when a post names several activities.
ACTIVITY_ALIASES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("running", ("run", "jog", "jogging")),
    ("walking", ("walk", "hike", "hiking")),
    ("cycling", ("bike", "biked", "biking", "ride", "rode", "cycling")),
    ("swimming", ("swim", "swam", "swimming")),
    ("elliptical", ("elliptical",)),
    ("rowing", ("row", "rowing")),
    ("yoga", ("yoga",)),
)

KM_PER_MILE = 1.609

_ALIAS_RES: tuple[tuple[str, tuple[re.Pattern[str], ...]], ...] = tuple(
    (label, tuple(re.compile(r"\b" + re.escape(alias) + r"\b") for alias in aliases))
    for label, aliases in ACTIVITY_ALIASES
)
_COMPLETED_WORD_RE = re.compile(r"completed (?:a|an) (\w+)")
_MILES_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(mi|mile|miles)\b")
_KM_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(km|kilometer|kilometers)\b")


@dataclass(frozen=True)
class ActivityInfo:
    activity_type: str
    distance_miles: float


def activity_type_from_text(t: str) -> str:
    for label, patterns in _ALIAS_RES:
        for pattern in patterns:
            if pattern.search(t):
                return label

    m = _COMPLETED_WORD_RE.search(t)
    if m:
        return m.group(1)
    return UNKNOWN_ACTIVITY


def distance_miles_from_text(t: str) -> float:
    m = _MILES_RE.search(t)
    if m:
        return float(m.group(1))

    m = _KM_RE.search(t)
    if m:
        return float(m.group(1)) / KM_PER_MILE

    return 0.0


def extract_activity(text: str, category: str) -> ActivityInfo:
    """
    Derive the activity label and distance (in miles) of a completed workout.

    Anything that is not a completed event yields ("unknown", 0).
    """
    if category != COMPLETED_EVENT:
        return ActivityInfo(activity_type=UNKNOWN_ACTIVITY, distance_miles=0.0)

    t = (text or "").strip().lower()
    return ActivityInfo(
        activity_type=activity_type_from_text(t),
        distance_miles=distance_miles_from_text(t),
    )
