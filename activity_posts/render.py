from __future__ import annotations

from html import escape

from .normalize import first_link
from .post import ClassifiedPost


def row_snippet(record: ClassifiedPost) -> str:
    return record.written_text if record.is_user_written else record.normalized_text


def render_row(record: ClassifiedPost, row_index: int) -> str:
    """
    Render one record as an HTML table row.

    `row_index` is 0-based; the displayed row number is 1-based. The link is
    taken from the raw text because normalization removes URLs.
    """
    num = row_index + 1
    snippet = escape(row_snippet(record), quote=False)

    link = first_link(record.post.text)
    if link:
        snippet = f'{snippet} <a href="{escape(link)}" target="_blank" rel="noopener">link</a>'

    return (
        "<tr>"
        f"<td>{num}</td>"
        f"<td>{escape(record.activity_type, quote=False)}</td>"
        f"<td>{snippet}</td>"
        "</tr>"
    )
