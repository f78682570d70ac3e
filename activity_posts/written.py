from __future__ import annotations

import re
from dataclasses import dataclass

from .normalize import normalize_text

# Boilerplate the service injects into auto-generated posts.
TEMPLATE_VOCABULARY: tuple[str, ...] = (
    "just completed",
    "just posted",
    "activity",
    "workout",
    "with runkeeper",
    "check it out",
    "distance",
    "time",
    "pace",
    "completed a",
    "completed an",
    "posted a",
    "posted an",
    "run",
    "walk",
    "bike",
    "ride",
    "swim",
    "hike",
    "elliptical",
)

MIN_WRITTEN_CHARS = 3

_TEMPLATE_RES = tuple(
    re.compile(r"\b" + re.escape(token) + r"\b") for token in TEMPLATE_VOCABULARY
)
_WS_RE = re.compile(r"\s+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


@dataclass(frozen=True)
class WrittenContent:
    is_user_written: bool
    written_text: str


def template_residue(text: str) -> str:
    """Return what is left of the normalized, lower-cased text once template words are gone."""
    s = normalize_text(text).lower()
    for pattern in _TEMPLATE_RES:
        s = pattern.sub(" ", s)
    return _WS_RE.sub(" ", s).strip()


def detect_written(text: str) -> WrittenContent:
    residue = template_residue(text)
    authored = _NON_ALNUM_RE.sub("", residue)

    if len(authored) < MIN_WRITTEN_CHARS:
        return WrittenContent(is_user_written=False, written_text="")
    return WrittenContent(is_user_written=True, written_text=normalize_text(text))
