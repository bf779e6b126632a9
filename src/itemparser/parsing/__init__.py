"""Delimiter-pattern parsing of pasted text into title/body items."""

from itemparser.parsing.autofill import AutoFillResult, run_autofill
from itemparser.parsing.categories import classify
from itemparser.parsing.delimiters import (
    DelimiterMatcher,
    DelimiterPattern,
    build_pattern,
    find_delimiter_match,
)
from itemparser.parsing.highlights import (
    add_highlight,
    adjust_for_edit,
    overlap_amount,
    prune_out_of_bounds,
    remove_conflicting,
    span_at_cursor,
)
from itemparser.parsing.reducer import reduce_to_items
from itemparser.parsing.sequencer import HighlightSequencer
from itemparser.parsing.trimming import TrimResult, trim_text

__all__ = [
    "AutoFillResult",
    "DelimiterMatcher",
    "DelimiterPattern",
    "HighlightSequencer",
    "TrimResult",
    "add_highlight",
    "adjust_for_edit",
    "build_pattern",
    "classify",
    "find_delimiter_match",
    "overlap_amount",
    "prune_out_of_bounds",
    "reduce_to_items",
    "remove_conflicting",
    "run_autofill",
    "span_at_cursor",
    "trim_text",
]
