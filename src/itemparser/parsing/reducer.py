"""Fold a sorted highlight partition into title/body item records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from itemparser.models import ItemRecord, Role
from itemparser.parsing.highlights import merge_highlights

if TYPE_CHECKING:
    from collections.abc import Iterable

    from itemparser.models import Span

logger = logging.getLogger(__name__)


def reduce_to_items(
    text: str,
    title_spans: Iterable[Span],
    body_spans: Iterable[Span],
) -> list[ItemRecord]:
    """Group highlights into items in reading order.

    Highlights are visited by position (titles first on a tie). A highlight
    whose role is already filled in the current item closes that item and
    starts a new one, so ``title, body, title, title`` yields three items:
    ``(t1, b1)``, ``(t2, None)``, ``(t3, None)``.

    Args:
        text: The buffer the spans index into.
        title_spans: Title highlights.
        body_spans: Body highlights.

    Returns:
        Item records in text order.
    """
    items: list[ItemRecord] = []
    current = ItemRecord()

    for highlight in merge_highlights(title_spans, body_spans):
        section = highlight.span.extract(text)
        if section is None:
            logger.warning(
                "Skipping %s highlight %s outside text of length %d",
                highlight.role.value,
                highlight.span,
                len(text),
            )
            continue

        if highlight.role is Role.BODY:
            if current.body is not None:
                items.append(current)
                current = ItemRecord()
            current = ItemRecord(title=current.title, body=section)
        else:
            if current.title is not None:
                items.append(current)
                current = ItemRecord()
            current = ItemRecord(title=section, body=current.body)

    if not current.is_empty:
        items.append(current)

    logger.debug("Reduced highlights to %d item(s)", len(items))
    return items
