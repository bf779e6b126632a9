"""Value types for highlighted text ranges.

Spans are half-open character-offset intervals over a text buffer. They are
frozen: every operation that changes a span's bounds builds a new one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Role(StrEnum):
    """The two kinds of example highlight a user can mark."""

    TITLE = "title"  # orange
    BODY = "body"  # blue


class Category(StrEnum):
    """Coarse character classes used by delimiter patterns."""

    LETTER_OR_DIGIT = "letter_or_digit"
    WHITESPACE = "whitespace"
    PUNCTUATION = "punctuation"
    SYMBOL = "symbol"
    NEWLINE = "newline"
    OTHER = "other"


@dataclass(frozen=True, order=True)
class Span:
    """Half-open interval ``[location, location + length)``.

    Attributes:
        location: Offset of the first character.
        length: Number of characters covered.
    """

    location: int
    length: int

    def __post_init__(self) -> None:
        if self.location < 0:
            msg = f"Span location must be non-negative, got {self.location}"
            raise ValueError(msg)
        if self.length < 0:
            msg = f"Span length must be non-negative, got {self.length}"
            raise ValueError(msg)

    @classmethod
    def between(cls, start: int, end: int) -> Span:
        """Build a span from start/end offsets."""
        return cls(start, end - start)

    @property
    def end(self) -> int:
        return self.location + self.length

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    def overlap(self, other: Span) -> int:
        """Three-way overlap comparison with *other*.

        Returns:
            ``0`` if the spans touch (one ends where the other starts),
            the length of the shared interior if they overlap, and ``-1``
            if they are disjoint.
        """
        if self.end == other.location or other.end == self.location:
            return 0
        amount = max(0, min(self.end, other.end) - max(self.location, other.location))
        return amount if amount > 0 else -1

    def intersection(self, other: Span) -> Span | None:
        """Shared interior of both spans, or ``None`` when there is none."""
        start = max(self.location, other.location)
        end = min(self.end, other.end)
        if end <= start:
            return None
        return Span.between(start, end)

    def contains_cursor(self, cursor: int) -> bool:
        """True if *cursor* sits inside the span or on either edge."""
        return self.location <= cursor <= self.end

    def extract(self, text: str) -> str | None:
        """Return the covered substring, or ``None`` if out of bounds."""
        if self.end > len(text):
            return None
        return text[self.location : self.end]


@dataclass(frozen=True)
class Highlight:
    """A span tagged with the role it plays in an item."""

    span: Span
    role: Role

    @property
    def location(self) -> int:
        return self.span.location

    @property
    def end(self) -> int:
        return self.span.end
