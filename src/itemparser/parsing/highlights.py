"""Bookkeeping for role-tagged highlight collections.

Every function here returns new collections; inputs are never modified.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from itemparser.models import Highlight, Role, Span

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)


def overlap_amount(a: Span, b: Span) -> int:
    """``0`` when touching, interior overlap length when overlapping, else ``-1``."""
    return a.overlap(b)


def remove_conflicting(
    new_span: Span,
    title_spans: Sequence[Span],
    body_spans: Sequence[Span],
) -> tuple[list[Span], list[Span]]:
    """Drop every highlight that truly overlaps *new_span*.

    Touching highlights are kept.
    """
    titles = [s for s in title_spans if s.overlap(new_span) <= 0]
    bodies = [s for s in body_spans if s.overlap(new_span) <= 0]
    removed = len(title_spans) - len(titles) + len(body_spans) - len(bodies)
    if removed:
        logger.debug("Removed %d highlight(s) overlapping %s", removed, new_span)
    return titles, bodies


def add_highlight(
    role: Role,
    span: Span,
    title_spans: Sequence[Span],
    body_spans: Sequence[Span],
) -> tuple[list[Span], list[Span]]:
    """Insert *span* under *role* after removing conflicting highlights.

    A zero-length span is not a highlight: the collections come back
    unchanged (as copies).
    """
    if span.is_empty:
        return list(title_spans), list(body_spans)

    titles, bodies = remove_conflicting(span, title_spans, body_spans)
    if role is Role.TITLE:
        titles.append(span)
    else:
        bodies.append(span)
    return titles, bodies


def span_at_cursor(spans: Sequence[Span], cursor: int) -> int | None:
    """Index of the highlight under *cursor*, or ``None``.

    Both edges count as inside. When several highlights qualify (two
    touching highlights share an edge) the last one wins.
    """
    found: int | None = None
    for index, span in enumerate(spans):
        if span.contains_cursor(cursor):
            found = index
    return found


def _adjust_one(span: Span, edited: Span, delta: int) -> tuple[int, int]:
    """New ``(location, length)`` of *span* after an edit; length may be <= 0."""
    location, length = span.location, span.length
    deleted = delta < 0

    if span.location >= edited.location:
        offset = span.location - edited.location
        overlap = edited.length - offset
        if overlap > 0 and deleted:
            # The deleted selection ate the front of the highlight.
            return edited.location, length - overlap
        return location + delta, length

    offset = edited.location - span.location
    overlap = span.end - edited.location
    if deleted and edited.end >= span.end and overlap > 0:
        # The deleted selection ate the tail of the highlight.
        return location, length - overlap
    if offset <= length:
        return location, length + delta
    return location, length


def adjust_for_edit(spans: Iterable[Span], edited: Span, delta: int) -> list[Span]:
    """Move and resize highlights after the text was edited.

    Args:
        spans: Highlights before the edit.
        edited: The selection (or caret, with length 0) before the edit.
        delta: New text length minus old text length.

    Returns:
        Adjusted highlights; those left with no characters are removed.
    """
    result: list[Span] = []
    for span in spans:
        location, length = _adjust_one(span, edited, delta)
        if length <= 0 or location < 0:
            logger.debug("Highlight %s removed by edit at %s", span, edited)
            continue
        result.append(Span(location, length))
    return result


def prune_out_of_bounds(spans: Iterable[Span], text_length: int) -> list[Span]:
    """Drop empty highlights and highlights running past the end of the text."""
    return [s for s in spans if not s.is_empty and s.end <= text_length]


def merge_highlights(
    title_spans: Iterable[Span], body_spans: Iterable[Span]
) -> list[Highlight]:
    """Position-sorted merge of both role collections.

    Ties are broken by length, then titles before bodies.
    """
    combined = [Highlight(s, Role.TITLE) for s in title_spans]
    combined.extend(Highlight(s, Role.BODY) for s in body_spans)
    combined.sort(key=lambda h: (h.span, h.role is Role.BODY))
    return combined


def split_by_role(highlights: Iterable[Highlight]) -> tuple[list[Span], list[Span]]:
    """Redistribute highlights into sorted title and body collections."""
    titles: list[Span] = []
    bodies: list[Span] = []
    for highlight in highlights:
        if highlight.role is Role.TITLE:
            titles.append(highlight.span)
        else:
            bodies.append(highlight.span)
    titles.sort()
    bodies.sort()
    return titles, bodies
