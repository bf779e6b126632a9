"""Derive delimiter patterns from example highlights and re-apply them.

The user marks a few consecutive examples, e.g. a title, its body and the
next title. The text between each consecutive pair of examples becomes a
delimiter pattern; one more "wrap-around" pattern covers the transition
from the last example back to the first. The buffer is then re-scanned from
the start: each step emits text up to the next match of the current
delimiter as a highlight with the current example's role, and both cycle.

Example with examples ``[title "Apple", body "a fruit"]`` over
``"Apple: a fruit\\nCarrot: a vegetable"``::

    delimiters  = [": " (title->body), "\\n" (body->title, wrap)]
    highlights  = title "Apple", body "a fruit",
                  title "Carrot", body "a vegetable"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from itemparser.config import get_settings
from itemparser.errors import AmbiguousWrapError, DegenerateParseError
from itemparser.models import Category, Highlight, Span
from itemparser.parsing.categories import classify
from itemparser.parsing.delimiters import DelimiterMatcher, DelimiterPattern
from itemparser.parsing.highlights import merge_highlights, split_by_role

if TYPE_CHECKING:
    from collections.abc import Iterable

    from itemparser.config import WrapFallback

logger = logging.getLogger(__name__)

_GAP_CATEGORIES = frozenset((Category.WHITESPACE, Category.NEWLINE))


class HighlightSequencer:
    """Turns a handful of example highlights into a full partition of a text.

    Attributes:
        text: The buffer being partitioned.
        title_spans: Title highlights, sorted by position.
        body_spans: Body highlights, sorted by position.
        ordered_highlights: Position-sorted merge of both collections.
        delimiters: One pattern per consecutive example pair plus the
            wrap-around pattern. Empty for a single example.
        wrap_fallback: Name of the fallback used for the wrap-around
            pattern, or ``None`` when a matching transition existed.
        wrap_fallback_count: Number of fallbacks taken by this instance.
    """

    def __init__(
        self,
        text: str,
        title_spans: Iterable[Span],
        body_spans: Iterable[Span],
        *,
        wrap_fallback: WrapFallback | None = None,
    ) -> None:
        self.text = text
        # Zero-length spans are not examples.
        self.title_spans = sorted(s for s in title_spans if not s.is_empty)
        self.body_spans = sorted(s for s in body_spans if not s.is_empty)
        self.ordered_highlights: list[Highlight] = []
        self.delimiters: list[DelimiterPattern] = []
        self.wrap_fallback: str | None = None
        self.wrap_fallback_count = 0
        self._strategy: WrapFallback = (
            wrap_fallback
            if wrap_fallback is not None
            else get_settings().parser.wrap_fallback
        )

        self._sort_highlights()
        self.delimiters = self._make_delimiters()

    # ------------------------------------------------------------------
    # Pattern derivation
    # ------------------------------------------------------------------

    def _sort_highlights(self) -> None:
        self.ordered_highlights = merge_highlights(self.title_spans, self.body_spans)

    def _separator_between(self, first: Highlight, second: Highlight) -> str:
        """Literal text strictly between two highlights ("" if they touch)."""
        start = min(first.end, len(self.text))
        end = min(second.location, len(self.text))
        if end <= start:
            return ""
        return self.text[start:end]

    def _make_delimiters(self) -> list[DelimiterPattern]:
        highlights = self.ordered_highlights
        if len(highlights) < 2:
            return []

        delimiters = [
            DelimiterPattern.from_separator(self._separator_between(a, b))
            for a, b in zip(highlights, highlights[1:], strict=False)
        ]
        delimiters.append(self._make_wrap_delimiter(delimiters))

        for index, delimiter in enumerate(delimiters):
            logger.debug(
                "Delimiter %d %r -> %s",
                index,
                delimiter.separator,
                [c.value for c in delimiter.category_order],
            )
        return delimiters

    def _make_wrap_delimiter(
        self, delimiters: list[DelimiterPattern]
    ) -> DelimiterPattern:
        """Pattern for the transition from the last example back to the first."""
        highlights = self.ordered_highlights
        wanted = (highlights[-1].role, highlights[0].role)

        for index, (a, b) in enumerate(zip(highlights, highlights[1:], strict=False)):
            if (a.role, b.role) == wanted:
                return DelimiterPattern.from_separator(delimiters[index].separator)

        transition = f"{wanted[0].value}->{wanted[1].value}"
        if self._strategy == "fail":
            msg = f"No example pair shows the {transition} transition"
            raise AmbiguousWrapError(msg)

        if self._strategy == "trailing_gap":
            gap = self._trailing_gap(highlights[-1])
            if gap:
                return self._fallback("trailing_gap", transition, gap)

        if delimiters:
            first = delimiters[0].separator
            return self._fallback("first_delimiter", transition, first)
        return self._fallback("empty", transition, "")

    def _trailing_gap(self, last: Highlight) -> str:
        """Whitespace and newlines immediately after the last example."""
        end = last.end
        while end < len(self.text) and classify(self.text[end]) in _GAP_CATEGORIES:
            end += 1
        return self.text[last.end : end]

    def _fallback(self, name: str, transition: str, separator: str) -> DelimiterPattern:
        self.wrap_fallback = name
        self.wrap_fallback_count += 1
        logger.warning(
            "No example pair shows the %s transition; wrap-around delimiter "
            "falls back to %s (%r)",
            transition,
            name,
            separator,
        )
        return DelimiterPattern.from_separator(separator)

    # ------------------------------------------------------------------
    # Re-scan
    # ------------------------------------------------------------------

    def make_highlights(self) -> None:
        """Replace the example highlights with a partition of the whole text.

        Raises:
            DegenerateParseError: There are no examples, or the re-scan
                produced no highlights (empty text).
        """
        if not self.ordered_highlights:
            raise DegenerateParseError("No highlights to learn delimiters from")

        if not self.delimiters:
            emitted = self._single_highlight()
        else:
            emitted = self._rescan()

        if not emitted:
            raise DegenerateParseError("Auto-fill produced no highlights")

        emitted.sort(key=lambda h: h.span)
        self.ordered_highlights = emitted
        self.title_spans, self.body_spans = split_by_role(emitted)
        logger.debug(
            "Re-scan emitted %d title and %d body highlight(s)",
            len(self.title_spans),
            len(self.body_spans),
        )

    def _single_highlight(self) -> list[Highlight]:
        """One example: the whole text becomes a highlight of its role."""
        role = self.ordered_highlights[0].role
        if not self.text:
            return []
        return [Highlight(Span(0, len(self.text)), role)]

    def _rescan(self) -> list[Highlight]:
        matcher = DelimiterMatcher(self.text)
        size = len(self.text)
        emitted: list[Highlight] = []

        pos = 0
        h_index = 0
        d_index = 0
        stalled = 0

        while pos < size:
            role = self.ordered_highlights[h_index].role
            match = matcher.find(pos, self.delimiters[d_index])

            if match is None:
                emitted.append(Highlight(Span.between(pos, size), role))
                pos = size
            elif stalled >= len(self.delimiters):
                # A whole cycle of zero-width matches: nothing can split the rest.
                emitted.append(Highlight(Span.between(pos, size), role))
                pos = size
            else:
                if match.location > pos:
                    emitted.append(Highlight(Span.between(pos, match.location), role))
                stalled = stalled + 1 if match.end == pos else 0
                pos = match.end

            h_index = (h_index + 1) % len(self.ordered_highlights)
            d_index = (d_index + 1) % len(self.delimiters)

        return emitted
