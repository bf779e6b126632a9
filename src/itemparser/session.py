"""Editing state for one paste-and-highlight session.

Holds the text, both highlight collections and the current selection the
way the parser screen does, and owns the auto-fill toggle: turning
auto-fill on swaps in the generated partition and keeps a snapshot,
turning it off restores that snapshot exactly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from itemparser.errors import AutoFillError
from itemparser.models import ItemRecord, Role, Span
from itemparser.parsing.autofill import run_autofill
from itemparser.parsing.highlights import (
    add_highlight,
    adjust_for_edit,
    prune_out_of_bounds,
    span_at_cursor,
)
from itemparser.parsing.reducer import reduce_to_items

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Snapshot:
    text: str
    title_spans: tuple[Span, ...]
    body_spans: tuple[Span, ...]


@dataclass
class EditSession:
    """Mutable editing state; every span value inside it is immutable."""

    text: str = ""
    title_spans: list[Span] = field(default_factory=list)
    body_spans: list[Span] = field(default_factory=list)
    selection: Span = field(default_factory=lambda: Span(0, 0))
    _snapshot: _Snapshot | None = field(default=None, init=False, repr=False)

    @property
    def autofilled(self) -> bool:
        return self._snapshot is not None

    def spans_for(self, role: Role) -> list[Span]:
        return self.title_spans if role is Role.TITLE else self.body_spans

    # ------------------------------------------------------------------
    # Selection and highlights
    # ------------------------------------------------------------------

    def select(self, selection: Span) -> None:
        """Move the selection; selections past the end of the text are ignored."""
        if selection.end <= len(self.text):
            self.selection = selection

    def highlight_selection(self, role: Role) -> bool:
        """Highlight the selected text. Returns False when nothing is selected."""
        if self.selection.is_empty:
            logger.debug("No text selected")
            return False
        self.title_spans, self.body_spans = add_highlight(
            role, self.selection, self.title_spans, self.body_spans
        )
        return True

    def highlight_at_cursor(self, role: Role) -> int | None:
        """Index of the *role* highlight under the selection start, if any."""
        return span_at_cursor(self.spans_for(role), self.selection.location)

    def remove_highlight(self, role: Role, index: int) -> Span:
        spans = list(self.spans_for(role))
        removed = spans.pop(index)
        if role is Role.TITLE:
            self.title_spans = spans
        else:
            self.body_spans = spans
        return removed

    def toggle_highlight(self, role: Role) -> bool:
        """Remove the highlight under the cursor, or highlight the selection.

        Returns True if a highlight was added.
        """
        index = self.highlight_at_cursor(role)
        if index is not None:
            self.remove_highlight(role, index)
            return False
        return self.highlight_selection(role)

    # ------------------------------------------------------------------
    # Text edits
    # ------------------------------------------------------------------

    def apply_edit(self, new_text: str, edited: Span) -> None:
        """Replace the text and carry highlights across the edit.

        Args:
            new_text: Text after the edit.
            edited: The selection (or caret) at the time of the edit.
        """
        delta = len(new_text) - len(self.text)
        self.text = new_text
        self.title_spans = prune_out_of_bounds(
            adjust_for_edit(self.title_spans, edited, delta), len(new_text)
        )
        self.body_spans = prune_out_of_bounds(
            adjust_for_edit(self.body_spans, edited, delta), len(new_text)
        )

    # ------------------------------------------------------------------
    # Auto-fill
    # ------------------------------------------------------------------

    def toggle_autofill(self) -> bool:
        """Apply or remove auto-filled highlights.

        Returns:
            True if the state changed. False when auto-fill was not
            applicable, in which case nothing was touched.
        """
        if self._snapshot is not None:
            snapshot = self._snapshot
            self.text = snapshot.text
            self.title_spans = list(snapshot.title_spans)
            self.body_spans = list(snapshot.body_spans)
            self._snapshot = None
            self.selection = Span(0, 0)
            logger.info("Auto-filled highlights removed")
            return True

        try:
            result = run_autofill(self.text, self.title_spans, self.body_spans)
        except AutoFillError as exc:
            logger.info("Auto-fill not applicable: %s", exc)
            return False

        self._snapshot = _Snapshot(
            text=self.text,
            title_spans=tuple(self.title_spans),
            body_spans=tuple(self.body_spans),
        )
        self.text = result.text
        self.title_spans = result.title_spans
        self.body_spans = result.body_spans
        self.selection = Span(0, 0)
        return True

    def items(self) -> list[ItemRecord]:
        """Item records for the current highlights."""
        return reduce_to_items(self.text, self.title_spans, self.body_spans)
