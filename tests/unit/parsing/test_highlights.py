"""Tests for highlight collection bookkeeping."""

from __future__ import annotations

import pytest

from itemparser.models import Highlight, Role, Span
from itemparser.parsing.highlights import (
    add_highlight,
    adjust_for_edit,
    merge_highlights,
    overlap_amount,
    prune_out_of_bounds,
    remove_conflicting,
    span_at_cursor,
    split_by_role,
)


class TestOverlapAmount:
    """The three-way overlap contract."""

    def test_touching_is_zero(self) -> None:
        assert overlap_amount(Span(0, 5), Span(5, 3)) == 0
        assert overlap_amount(Span(5, 3), Span(0, 5)) == 0

    def test_overlapping_is_interior_length(self) -> None:
        assert overlap_amount(Span(0, 5), Span(3, 5)) == 2

    def test_disjoint_is_negative(self) -> None:
        assert overlap_amount(Span(0, 5), Span(10, 2)) == -1

    def test_containment(self) -> None:
        assert overlap_amount(Span(0, 10), Span(2, 3)) == 3


class TestRemoveConflicting:
    """Tests for dropping overlapped highlights."""

    def test_removes_overlaps_from_both_roles(self) -> None:
        titles = [Span(0, 5), Span(20, 5)]
        bodies = [Span(6, 4), Span(12, 3)]
        new_titles, new_bodies = remove_conflicting(Span(4, 4), titles, bodies)
        assert new_titles == [Span(20, 5)]
        assert new_bodies == [Span(12, 3)]

    def test_touching_spans_survive(self) -> None:
        titles = [Span(0, 5)]
        bodies = [Span(10, 2)]
        new_titles, new_bodies = remove_conflicting(Span(5, 5), titles, bodies)
        assert new_titles == titles
        assert new_bodies == bodies

    def test_inputs_not_modified(self) -> None:
        titles = [Span(0, 5)]
        bodies = [Span(3, 5)]
        remove_conflicting(Span(0, 10), titles, bodies)
        assert titles == [Span(0, 5)]
        assert bodies == [Span(3, 5)]


class TestAddHighlight:
    """Tests for inserting a highlight with conflict removal."""

    def test_adds_to_role_collection(self) -> None:
        titles, bodies = add_highlight(Role.BODY, Span(7, 7), [Span(0, 5)], [])
        assert titles == [Span(0, 5)]
        assert bodies == [Span(7, 7)]

    def test_replaces_overlapping_highlight_of_other_role(self) -> None:
        titles, bodies = add_highlight(Role.TITLE, Span(2, 4), [], [Span(0, 5)])
        assert titles == [Span(2, 4)]
        assert bodies == []

    def test_zero_length_span_ignored(self) -> None:
        titles, bodies = add_highlight(Role.TITLE, Span(3, 0), [Span(0, 5)], [])
        assert titles == [Span(0, 5)]
        assert bodies == []


class TestSpanAtCursor:
    """Tests for cursor lookup."""

    def test_inside(self) -> None:
        assert span_at_cursor([Span(0, 5), Span(8, 2)], 9) == 1

    def test_edges_count(self) -> None:
        assert span_at_cursor([Span(3, 2)], 3) == 0
        assert span_at_cursor([Span(3, 2)], 5) == 0

    def test_shared_edge_last_wins(self) -> None:
        assert span_at_cursor([Span(0, 5), Span(5, 3)], 5) == 1

    def test_outside(self) -> None:
        assert span_at_cursor([Span(0, 5)], 7) is None
        assert span_at_cursor([], 0) is None


class TestAdjustForEdit:
    """Tests for carrying highlights across text edits."""

    @pytest.mark.parametrize(
        ("edited", "delta", "expected"),
        [
            # Insertion before the highlight shifts it.
            (Span(2, 0), 3, [Span(13, 5)]),
            # Typing inside the highlight grows it.
            (Span(12, 0), 1, [Span(10, 6)]),
            # Typing at the highlight's end grows it.
            (Span(15, 0), 2, [Span(10, 7)]),
            # Edits after the highlight leave it alone.
            (Span(20, 0), 4, [Span(10, 5)]),
            # Deleting a selection covering the front.
            (Span(8, 4), -4, [Span(8, 3)]),
            # Deleting a selection covering the tail.
            (Span(13, 4), -4, [Span(10, 3)]),
            # Deleting inside the highlight shrinks it.
            (Span(11, 2), -2, [Span(10, 3)]),
            # Backspace before the highlight shifts it left.
            (Span(5, 0), -1, [Span(9, 5)]),
            # Deleting the whole highlight removes it.
            (Span(8, 10), -10, []),
        ],
    )
    def test_single_highlight(
        self, edited: Span, delta: int, expected: list[Span]
    ) -> None:
        assert adjust_for_edit([Span(10, 5)], edited, delta) == expected

    def test_only_affected_highlights_change(self) -> None:
        spans = [Span(0, 4), Span(10, 5)]
        assert adjust_for_edit(spans, Span(6, 0), 2) == [Span(0, 4), Span(12, 5)]


class TestPruneAndMerge:
    """Tests for bounds pruning, merging and role redistribution."""

    def test_prune_out_of_bounds(self) -> None:
        spans = [Span(0, 3), Span(2, 0), Span(4, 5)]
        assert prune_out_of_bounds(spans, 8) == [Span(0, 3)]

    def test_merge_orders_by_position(self) -> None:
        merged = merge_highlights([Span(10, 2), Span(0, 3)], [Span(5, 2)])
        assert merged == [
            Highlight(Span(0, 3), Role.TITLE),
            Highlight(Span(5, 2), Role.BODY),
            Highlight(Span(10, 2), Role.TITLE),
        ]

    def test_merge_tie_puts_title_first(self) -> None:
        merged = merge_highlights([Span(4, 2)], [Span(4, 2)])
        assert [h.role for h in merged] == [Role.TITLE, Role.BODY]

    def test_split_by_role_sorts(self) -> None:
        titles, bodies = split_by_role(
            [
                Highlight(Span(9, 1), Role.TITLE),
                Highlight(Span(5, 2), Role.BODY),
                Highlight(Span(0, 3), Role.TITLE),
            ]
        )
        assert titles == [Span(0, 3), Span(9, 1)]
        assert bodies == [Span(5, 2)]
