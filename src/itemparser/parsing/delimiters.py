"""Delimiter patterns and the matcher that finds them in a buffer.

A delimiter pattern is the category sequence of the literal text found
between two example highlights, with trailing whitespace/punctuation folded
into the run before it (see ``absorbs``). The matcher scans a buffer for the
next substring with the same category sequence under the same folding rules,
so a pattern built from an example separator re-matches that separator.

Worked example: the separator ``": "`` between ``Apple`` and ``a fruit``
becomes ``(PUNCTUATION,)`` because the space is absorbed by the colon. In
``"Carrot: a vegetable"`` the matcher then finds ``": "`` at offset 6.
"""

from __future__ import annotations

from dataclasses import dataclass

from itemparser.models import Category, Span
from itemparser.parsing.categories import absorbs, classify, classify_text

# Categories that may be missing at the very end of the buffer.
_OPTIONAL_AT_END = frozenset((Category.WHITESPACE, Category.NEWLINE))


@dataclass(frozen=True)
class DelimiterPattern:
    """Category order derived from a literal separator.

    Attributes:
        separator: The literal text the pattern was built from.
        category_order: Category runs of the separator after absorption;
            no two adjacent entries are equal.
    """

    separator: str
    category_order: tuple[Category, ...]

    @classmethod
    def from_separator(cls, separator: str) -> DelimiterPattern:
        order: list[Category] = []
        for char in separator:
            category = classify(char)
            if not order:
                order.append(category)
                continue
            last = order[-1]
            if category is last or absorbs(last, category):
                continue
            order.append(category)
        return cls(separator=separator, category_order=tuple(order))

    @property
    def is_empty(self) -> bool:
        return not self.category_order


def build_pattern(separator: str) -> DelimiterPattern:
    """Build the delimiter pattern for a literal separator string."""
    return DelimiterPattern.from_separator(separator)


class DelimiterMatcher:
    """Finds delimiter matches in one buffer.

    The buffer is classified once on construction so that repeated searches
    during a re-scan stay linear in the probe length.
    """

    def __init__(self, buffer: str) -> None:
        self.buffer = buffer
        self.categories = classify_text(buffer)

    def __len__(self) -> int:
        return len(self.categories)

    def find(self, start: int, pattern: DelimiterPattern) -> Span | None:
        """Return the next match of *pattern* at or after *start*.

        An empty pattern matches zero-width at *start*. Returns ``None``
        when no candidate position up to the end of the buffer matches.
        """
        order = pattern.category_order
        if not order:
            return Span(start, 0)

        for candidate in range(start, len(self.categories)):
            end = self._probe(candidate, order)
            if end is not None:
                return Span.between(candidate, end)
        return None

    def _probe(self, candidate: int, order: tuple[Category, ...]) -> int | None:
        """Try to match *order* starting exactly at *candidate*.

        Returns the end offset of the match or ``None``.
        """
        cats = self.categories
        size = len(cats)
        pos = candidate
        matched = 0

        while matched < len(order) and pos < size:
            needed = order[matched]
            # Characters absorbed by the previous run were consumed with it.
            if cats[pos] is not needed:
                return None
            pos = self._consume_run(pos + 1, needed)
            matched += 1

        if matched == len(order):
            return pos
        # Ran off the end of the buffer: trailing whitespace/newlines are
        # optional there.
        if all(category in _OPTIONAL_AT_END for category in order[matched:]):
            return pos
        return None

    def _consume_run(self, pos: int, category: Category) -> int:
        """Advance past a run of *category* plus any absorbed characters."""
        cats = self.categories
        size = len(cats)
        while pos < size:
            current = cats[pos]
            if current is category or absorbs(category, current):
                pos += 1
            else:
                break
        return pos


def find_delimiter_match(
    buffer: str, start: int, pattern: DelimiterPattern
) -> Span | None:
    """Find the next match of *pattern* in *buffer* at or after *start*."""
    return DelimiterMatcher(buffer).find(start, pattern)
