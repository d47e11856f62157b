"""Tests for RenamePlanner.

Date: 2026-10-18
"""

from datetime import datetime

import pytest

from dateprefix.core.rename.data_classes import PlanEntry, RenamePlan
from dateprefix.core.rename.planner import RenamePlanner, format_date_prefix, target_name_for
from dateprefix.models.file_entry import FileEntry

MARCH_1 = datetime(2022, 3, 1, 12, 0, 0)
NOV_5 = datetime(2021, 11, 5, 10, 0, 0)


@pytest.fixture
def planner():
    return RenamePlanner()


class TestTargetNames:
    """Single-name target computation."""

    @pytest.mark.unit
    def test_prefix_format(self):
        assert format_date_prefix(datetime(2022, 3, 1, 23, 59)) == "20220301"
        assert format_date_prefix(datetime(1999, 12, 31)) == "19991231"

    @pytest.mark.unit
    def test_adds_prefix(self):
        assert target_name_for("IMG_01.jpg", MARCH_1) == "20220301-IMG_01.jpg"

    @pytest.mark.unit
    def test_already_prefixed_is_unchanged(self):
        assert target_name_for("20220301-IMG_01.jpg", MARCH_1) == "20220301-IMG_01.jpg"

    @pytest.mark.unit
    def test_prefix_without_separator_counts_as_prefixed(self):
        assert target_name_for("20220301_IMG_01.jpg", MARCH_1) == "20220301_IMG_01.jpg"

    @pytest.mark.unit
    def test_other_date_prefix_is_prefixed_again(self):
        assert target_name_for("20211105-IMG_01.jpg", MARCH_1) == "20220301-20211105-IMG_01.jpg"

    @pytest.mark.unit
    def test_unresolved_has_no_target(self):
        assert target_name_for("IMG_01.jpg", None) is None


class TestPlan:
    """Whole-listing plans."""

    @pytest.mark.unit
    def test_example_listing(self, planner):
        dates = {"IMG_01.jpg": MARCH_1, "IMG_02.jpg": NOV_5}

        plan = planner.plan(["IMG_01.jpg", "IMG_02.jpg"], dates.get)

        assert plan.name_pairs == [
            ("IMG_01.jpg", "20220301-IMG_01.jpg"),
            ("IMG_02.jpg", "20211105-IMG_02.jpg"),
        ]
        assert plan.rename_count == 2

    @pytest.mark.unit
    def test_keeps_input_order(self, planner):
        names = ["c.jpg", "a.jpg", "b.jpg"]
        plan = planner.plan(names, lambda name: MARCH_1)
        assert [entry.original_name for entry in plan] == names

    @pytest.mark.unit
    def test_unresolved_entries_are_kept(self, planner):
        plan = planner.plan(["a.jpg", "b.jpg"], {"a.jpg": MARCH_1}.get)

        assert plan.name_pairs == [("a.jpg", "20220301-a.jpg"), ("b.jpg", None)]
        assert plan.unresolved_count == 1
        assert not plan.get("b.jpg").needs_rename

    @pytest.mark.unit
    def test_counters(self, planner):
        dates = {"20220301-a.jpg": MARCH_1, "b.jpg": MARCH_1}

        plan = planner.plan(["20220301-a.jpg", "b.jpg", "c.jpg"], dates.get)

        assert (plan.rename_count, plan.unchanged_count, plan.unresolved_count) == (1, 1, 1)
        assert plan.has_changes

    @pytest.mark.unit
    def test_empty_listing(self, planner):
        plan = planner.plan([], lambda name: MARCH_1)
        assert len(plan) == 0
        assert not plan.has_changes


class TestIdempotence:
    """Planning twice never changes correctly prefixed names."""

    @pytest.mark.unit
    def test_replanning_is_identical(self, planner):
        names = ["IMG_01.jpg", "IMG_02.jpg", "notes.txt"]
        dates = {"IMG_01.jpg": MARCH_1, "IMG_02.jpg": NOV_5}

        assert planner.plan(names, dates.get) == planner.plan(names, dates.get)

    @pytest.mark.unit
    def test_planning_own_output_is_noop(self, planner):
        dates = {"IMG_01.jpg": MARCH_1, "IMG_02.jpg": NOV_5}
        first = planner.plan(["IMG_01.jpg", "IMG_02.jpg"], dates.get)

        renamed_dates = {entry.target_name: entry.resolved_date for entry in first}
        second = planner.plan(sorted(renamed_dates), renamed_dates.get)

        assert all(entry.is_unchanged for entry in second)
        assert second.rename_count == 0


class TestConflicts:
    """Renames that would land on another entry's name are flagged."""

    @pytest.mark.unit
    def test_rename_onto_already_named_file(self, planner):
        dates = {"20220301-a.jpg": MARCH_1, "a.jpg": MARCH_1}

        plan = planner.plan(["20220301-a.jpg", "a.jpg"], dates.get)

        kept, renamed = plan.entries
        assert kept.is_unchanged and not kept.is_conflict
        assert renamed.target_name == "20220301-a.jpg"
        assert renamed.is_conflict
        assert not renamed.needs_rename
        assert plan.conflict_count == 1
        assert plan.rename_count == 0

    @pytest.mark.unit
    def test_rename_onto_unresolved_file(self, planner):
        plan = planner.plan(["20220301-a.jpg", "a.jpg"], {"a.jpg": MARCH_1}.get)

        assert plan.get("a.jpg").is_conflict
        assert not plan.get("20220301-a.jpg").is_conflict

    @pytest.mark.unit
    def test_no_conflict_for_distinct_targets(self, planner):
        plan = planner.plan(["a.jpg", "b.jpg"], lambda name: MARCH_1)
        assert plan.conflict_count == 0


class TestPlanEntries:
    """FileEntry based planning."""

    @pytest.mark.unit
    def test_fills_planned_names(self, planner):
        entries = FileEntry.from_listing("/photos", ["b.jpg", "a.jpg"])
        entries[0].resolved_date = MARCH_1

        plan = planner.plan_entries(entries)

        assert [entry.name for entry in entries] == ["a.jpg", "b.jpg"]
        assert entries[0].planned_name == "20220301-a.jpg"
        assert entries[0].needs_rename
        assert entries[1].planned_name is None
        assert plan.name_pairs == [("a.jpg", "20220301-a.jpg"), ("b.jpg", None)]


@pytest.mark.unit
def test_plan_entry_final_name():
    assert PlanEntry("a.jpg", None).final_name == "a.jpg"
    assert PlanEntry("a.jpg", "20220301-a.jpg").final_name == "20220301-a.jpg"


@pytest.mark.unit
def test_plan_equality_ignores_counters():
    entries = [PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1)]
    assert RenamePlan(list(entries)) == RenamePlan(list(entries))
