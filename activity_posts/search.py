from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .post import ClassifiedPost
from .render import render_row


@dataclass(frozen=True)
class SearchResult:
    query: str
    matches: tuple[ClassifiedPost, ...]
    rows: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.matches)


def search_written(records: Iterable[ClassifiedPost], query: str | None) -> SearchResult:
    """
    Case-insensitive substring search over user-written posts.

    A blank query matches nothing. Rows are numbered within the match list.
    """
    q = (query or "").strip()
    if not q:
        return SearchResult(query="", matches=(), rows=())

    needle = q.lower()
    matches = tuple(
        r for r in records if r.is_user_written and needle in r.written_text.lower()
    )
    rows = tuple(render_row(r, i) for i, r in enumerate(matches))
    return SearchResult(query=q, matches=matches, rows=rows)
