"""Per-line whitespace trimming with highlight remapping.

Pasted text often carries indentation and trailing blanks that would
otherwise end up inside highlights and delimiter patterns. ``trim_text``
strips spaces and tabs from both ends of every line, keeps the newlines,
and moves each highlight into the trimmed coordinates. A highlight that
crosses a newline comes back as one highlight per line piece.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from itemparser.models import Span

if TYPE_CHECKING:
    from collections.abc import Iterable

_TRIM_CHARS = " \t"


@dataclass(frozen=True)
class _LineInfo:
    """Where a line sat before trimming and where its content went."""

    old: Span
    leading: int
    trailing: int
    new_location: int

    @property
    def content_start(self) -> int:
        return self.old.location + self.leading

    @property
    def content_end(self) -> int:
        return self.old.end - self.trailing


@dataclass(frozen=True)
class TrimResult:
    """Trimmed text and the highlights mapped into it."""

    text: str
    title_spans: list[Span]
    body_spans: list[Span]


def _line_infos(text: str) -> tuple[str, list[_LineInfo]]:
    infos: list[_LineInfo] = []
    pieces: list[str] = []
    old_location = 0
    new_location = 0

    for line in text.split("\n"):
        stripped_left = line.lstrip(_TRIM_CHARS)
        leading = len(line) - len(stripped_left)
        trimmed = stripped_left.rstrip(_TRIM_CHARS)
        trailing = len(stripped_left) - len(trimmed)

        infos.append(
            _LineInfo(
                old=Span(old_location, len(line)),
                leading=leading,
                trailing=trailing,
                new_location=new_location,
            )
        )
        pieces.append(trimmed)
        old_location += len(line) + 1
        new_location += len(trimmed) + 1

    return "\n".join(pieces), infos


def _map_span(span: Span, infos: Iterable[_LineInfo]) -> list[Span]:
    mapped: list[Span] = []
    for info in infos:
        if span.intersection(info.old) is None:
            continue
        start = max(span.location, info.content_start)
        end = min(span.end, info.content_end)
        if end <= start:
            # Only trimmed-away whitespace of this line was highlighted.
            continue
        shift = info.new_location - info.content_start
        mapped.append(Span.between(start + shift, end + shift))
    return mapped


def trim_text(
    text: str,
    title_spans: Iterable[Span],
    body_spans: Iterable[Span],
) -> TrimResult:
    """Trim every line of *text* and remap both highlight collections.

    Args:
        text: Raw buffer as pasted.
        title_spans: Title highlights in raw coordinates.
        body_spans: Body highlights in raw coordinates.

    Returns:
        The trimmed text with highlights in its coordinates. Spans that
        covered only stripped whitespace or newlines disappear.
    """
    new_text, infos = _line_infos(text)
    titles = [piece for span in title_spans for piece in _map_span(span, infos)]
    bodies = [piece for span in body_spans for piece in _map_span(span, infos)]
    return TrimResult(text=new_text, title_spans=titles, body_spans=bodies)
