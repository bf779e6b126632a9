"""Auto-fill entry point: trim the text, then sequence the highlights."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from itemparser.config import get_settings
from itemparser.errors import DegenerateParseError
from itemparser.parsing.sequencer import HighlightSequencer
from itemparser.parsing.trimming import trim_text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from itemparser.config import WrapFallback
    from itemparser.models import Span

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutoFillResult:
    """Text and highlights to swap in after a successful auto-fill.

    Attributes:
        text: The (trimmed) text the spans index into.
        title_spans: Title highlights, sorted by position.
        body_spans: Body highlights, sorted by position.
        wrap_fallback: Fallback used for the wrap-around delimiter, if any.
    """

    text: str
    title_spans: list[Span]
    body_spans: list[Span]
    wrap_fallback: str | None = None


def run_autofill(
    text: str,
    title_spans: Sequence[Span],
    body_spans: Sequence[Span],
    *,
    trim: bool | None = None,
    wrap_fallback: WrapFallback | None = None,
) -> AutoFillResult:
    """Extend example highlights across the whole text.

    The inputs are not modified; on failure the caller keeps its state.

    Args:
        text: The raw buffer.
        title_spans: Example title highlights.
        body_spans: Example body highlights.
        trim: Trim line whitespace first. Defaults to ``parser.trim_lines``.
        wrap_fallback: Overrides ``parser.wrap_fallback``.

    Returns:
        The new text and highlight partition.

    Raises:
        DegenerateParseError: No highlights were given, or none survived.
        AmbiguousWrapError: Under the ``"fail"`` wrap strategy, when the
            examples never show the last-to-first transition.
    """
    if not title_spans and not body_spans:
        raise DegenerateParseError("Auto-fill needs at least one example highlight")

    if trim is None:
        trim = get_settings().parser.trim_lines

    if trim:
        trimmed = trim_text(text, title_spans, body_spans)
        text, titles, bodies = trimmed.text, trimmed.title_spans, trimmed.body_spans
    else:
        titles, bodies = list(title_spans), list(body_spans)

    sequencer = HighlightSequencer(text, titles, bodies, wrap_fallback=wrap_fallback)
    sequencer.make_highlights()

    logger.info(
        "Auto-fill produced %d title and %d body highlight(s) from %d example(s)",
        len(sequencer.title_spans),
        len(sequencer.body_spans),
        len(title_spans) + len(body_spans),
    )
    return AutoFillResult(
        text=sequencer.text,
        title_spans=sequencer.title_spans,
        body_spans=sequencer.body_spans,
        wrap_fallback=sequencer.wrap_fallback,
    )
