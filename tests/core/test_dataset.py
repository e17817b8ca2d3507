"""
Dataset Builder Tests
=====================

Verifies the RenderPayload shape:
1. Row labels mirror the group list
2. One series per event, one value slot per row
3. Only the event's own row carries a bar
4. Stack key = group + "_" + lane id
"""

from swimlane.core.allocation import allocate
from swimlane.core.dataset import build, compute_payload, format_range
from tests.fixtures import OVERLAP_CHAIN, at, event


class TestRowsAndSeries:

    def test_empty_events_keep_row_labels(self):
        payload = compute_payload(["G", "H"], [])

        assert payload.row_labels == ("G", "H")
        assert payload.series == ()
        assert payload.palette == ()

    def test_one_series_per_event_in_assignment_order(self):
        payload = compute_payload(["G"], OVERLAP_CHAIN)

        assert [s.event_name for s in payload.series] == ["A", "B", "C"]

    def test_label_and_range_text(self):
        payload = compute_payload(["G"], [event("Deploy", "G", 0, 10)])
        series = payload.series[0]

        assert series.label == "Deploy (2026-01-01 00:00 - 2026-01-01 10:00)"
        assert series.values[0].text == "2026-01-01 00:00 - 2026-01-01 10:00"

    def test_only_own_row_has_a_bar(self):
        payload = compute_payload(["G", "H", "K"], [event("e", "H", 1, 2)])
        values = payload.series[0].values

        assert len(values) == 3
        assert values[0] is None
        assert values[2] is None
        assert values[1].start == at(1)
        assert values[1].end == at(2)

    def test_unknown_group_gets_no_bar(self):
        payload = compute_payload(["G"], [event("e", "X", 1, 2)])
        series = payload.series[0]

        assert series.values == (None,)
        assert series.bar is None
        assert series.stack == "X_Stack0"

    def test_empty_groups(self):
        payload = compute_payload([], [event("e", "G", 1, 2)])

        assert payload.row_labels == ()
        assert payload.series[0].values == ()

    def test_stack_keys(self):
        payload = compute_payload(["G"], OVERLAP_CHAIN)

        assert [s.stack for s in payload.series] == ["G_Stack0", "G_Stack1", "G_Stack0"]


class TestColors:

    def test_same_name_same_color_across_groups(self):
        events = [event("Review", "G", 0, 1), event("Review", "H", 5, 6)]
        payload = compute_payload(["G", "H"], events)

        assert payload.series[0].color == payload.series[1].color
        assert len(payload.palette) == 1

    def test_palette_follows_sorted_first_seen_order(self):
        events = [event("late", "G", 8, 9), event("early", "G", 1, 2)]
        payload = compute_payload(["G"], events)

        assert [p.name for p in payload.palette] == ["early", "late"]
        assert payload.color_of("early") == "hsl(0, 100%, 50%, 1)"
        assert payload.color_of("late") == "hsl(180, 100%, 50%, 1)"
        assert payload.color_of("missing") is None


class TestDeterminism:

    def test_repeated_builds_are_identical(self):
        groups = ["G", "H"]
        events = list(OVERLAP_CHAIN) + [event("A", "H", 2, 4)]

        assert compute_payload(groups, events) == compute_payload(groups, events)

    def test_build_accepts_precomputed_assignments(self):
        assignments = allocate(["G"], OVERLAP_CHAIN)

        assert build(["G"], assignments) == compute_payload(["G"], OVERLAP_CHAIN)

    def test_custom_time_format(self):
        payload = compute_payload(["G"], [event("e", "G", 0, 1)], time_format="%H:%M")

        assert payload.series[0].label == "e (00:00 - 01:00)"


def test_format_range():
    assert format_range(at(0), at(1.5)) == "2026-01-01 00:00 - 2026-01-01 01:30"
