"""Tests for BatchRenamer.

Date: 2026-10-18
"""

import errno
import os
from datetime import datetime
from unittest.mock import patch

import pytest

from dateprefix.core.rename.data_classes import ExecutionResult, PlanEntry, RenamePlan
from dateprefix.core.rename.execution_manager import BatchRenamer

MARCH_1 = datetime(2022, 3, 1, 12, 0, 0)
MODULE = "dateprefix.core.rename.execution_manager"

posix_only = pytest.mark.skipif(os.name == "nt", reason="hard link based move")


def touch(directory, *names):
    for name in names:
        (directory / name).write_text(name)


@pytest.fixture
def renamer():
    return BatchRenamer()


@pytest.mark.integration
def test_renames_resolved_entries(tmp_path, renamer):
    touch(tmp_path, "a.jpg", "b.jpg")
    plan = RenamePlan(
        [
            PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1),
            PlanEntry("b.jpg", "20220301-b.jpg", MARCH_1),
        ]
    )

    result = renamer.apply(plan, str(tmp_path))

    assert result.success_count == 2
    assert sorted(os.listdir(tmp_path)) == ["20220301-a.jpg", "20220301-b.jpg"]
    assert (tmp_path / "20220301-a.jpg").read_text() == "a.jpg"


@pytest.mark.integration
def test_skips_unresolved_unchanged_and_conflicts(tmp_path, renamer):
    touch(tmp_path, "20220301-a.jpg", "a.jpg", "notes.txt")
    plan = RenamePlan(
        [
            PlanEntry("20220301-a.jpg", "20220301-a.jpg", MARCH_1),
            PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1, is_conflict=True),
            PlanEntry("notes.txt", None),
        ]
    )

    with patch.object(BatchRenamer, "_rename") as mock_rename:
        result = renamer.apply(plan, str(tmp_path))

    mock_rename.assert_not_called()
    assert [item.skip_reason for item in result.items] == ["unchanged", "conflict", "unresolved"]
    assert result.skipped_count == 3
    assert result.success_count == 0
    assert result.error_count == 0


@pytest.mark.integration
def test_existing_target_is_not_overwritten(tmp_path, renamer):
    touch(tmp_path, "a.jpg", "20220301-a.jpg", "b.jpg")
    plan = RenamePlan(
        [
            PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1),
            PlanEntry("b.jpg", "20220301-b.jpg", MARCH_1),
        ]
    )

    result = renamer.apply(plan, str(tmp_path))

    failed, renamed = result.items
    assert failed.failed and not failed.success
    assert (tmp_path / "a.jpg").exists()
    assert (tmp_path / "20220301-a.jpg").read_text() == "20220301-a.jpg"
    assert renamed.success
    assert result.success_count == 1
    assert result.error_count == 1


@pytest.mark.integration
def test_vanished_source_does_not_abort_batch(tmp_path, renamer):
    touch(tmp_path, "b.jpg")
    plan = RenamePlan(
        [
            PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1),
            PlanEntry("b.jpg", "20220301-b.jpg", MARCH_1),
        ]
    )

    result = renamer.apply(plan, str(tmp_path))

    assert [item.success for item in result.items] == [False, True]
    assert result.failed_items[0].original_name == "a.jpg"
    assert result.failed_items[0].error_message


@posix_only
@pytest.mark.integration
def test_permission_error_recorded(tmp_path, renamer):
    touch(tmp_path, "a.jpg")
    plan = RenamePlan([PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1)])

    with patch(
        f"{MODULE}.os.link",
        side_effect=PermissionError(errno.EACCES, "Permission denied"),
    ):
        result = renamer.apply(plan, str(tmp_path))

    assert result.items[0].error_message == "Permission denied"
    assert result.error_count == 1


@pytest.mark.unit
def test_progress_counts_every_entry(tmp_path, renamer):
    touch(tmp_path, "a.jpg")
    plan = RenamePlan(
        [
            PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1),
            PlanEntry("missing.jpg", None),
            PlanEntry("20220301-c.jpg", "20220301-c.jpg", MARCH_1),
        ]
    )
    events = []

    renamer.apply(plan, str(tmp_path), lambda *args: events.append(args))

    assert events == [
        (1, 3, "a.jpg"),
        (2, 3, "missing.jpg"),
        (3, 3, "20220301-c.jpg"),
    ]


@pytest.mark.unit
def test_renames_in_plan_order(tmp_path, renamer):
    touch(tmp_path, "b.jpg", "a.jpg")
    plan = RenamePlan(
        [
            PlanEntry("b.jpg", "20220301-b.jpg", MARCH_1),
            PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1),
        ]
    )

    with patch.object(BatchRenamer, "_rename") as mock_rename:
        renamer.apply(plan, str(tmp_path))

    sources = [os.path.basename(call.args[0]) for call in mock_rename.call_args_list]
    assert sources == ["b.jpg", "a.jpg"]


@pytest.mark.unit
def test_empty_plan(tmp_path, renamer):
    result = renamer.apply(RenamePlan(), str(tmp_path))

    assert isinstance(result, ExecutionResult)
    assert result.processed_count == 0


class TestNoOverwriteMove:
    """The move itself refuses existing targets."""

    @posix_only
    @pytest.mark.integration
    def test_target_created_after_planning_survives(self, tmp_path, renamer):
        touch(tmp_path, "a.jpg")
        plan = RenamePlan([PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1)])
        real_link = os.link

        def link_after_target_appears(src, dst):
            (tmp_path / "20220301-a.jpg").write_text("newcomer")
            real_link(src, dst)

        with patch(f"{MODULE}.os.link", side_effect=link_after_target_appears):
            result = renamer.apply(plan, str(tmp_path))

        assert result.error_count == 1
        assert (tmp_path / "20220301-a.jpg").read_text() == "newcomer"
        assert (tmp_path / "a.jpg").read_text() == "a.jpg"

    @posix_only
    @pytest.mark.integration
    def test_falls_back_to_rename_without_hard_links(self, tmp_path, renamer):
        touch(tmp_path, "a.jpg")
        plan = RenamePlan([PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1)])

        with patch(
            f"{MODULE}.os.link",
            side_effect=OSError(errno.EPERM, "Operation not permitted"),
        ):
            result = renamer.apply(plan, str(tmp_path))

        assert result.success_count == 1
        assert sorted(os.listdir(tmp_path)) == ["20220301-a.jpg"]

    @posix_only
    @pytest.mark.integration
    def test_fallback_still_refuses_existing_target(self, tmp_path, renamer):
        touch(tmp_path, "a.jpg", "20220301-a.jpg")
        plan = RenamePlan([PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1)])

        with patch(
            f"{MODULE}.os.link",
            side_effect=OSError(errno.EPERM, "Operation not permitted"),
        ):
            result = renamer.apply(plan, str(tmp_path))

        assert result.error_count == 1
        assert (tmp_path / "20220301-a.jpg").read_text() == "20220301-a.jpg"

    @posix_only
    @pytest.mark.integration
    def test_failed_unlink_removes_new_name(self, tmp_path, renamer):
        touch(tmp_path, "a.jpg")
        plan = RenamePlan([PlanEntry("a.jpg", "20220301-a.jpg", MARCH_1)])
        real_unlink = os.unlink

        def unlink(path):
            if os.path.basename(path) == "a.jpg":
                raise PermissionError(errno.EACCES, "Permission denied", path)
            real_unlink(path)

        with patch(f"{MODULE}.os.unlink", side_effect=unlink):
            result = renamer.apply(plan, str(tmp_path))

        assert result.items[0].error_message == "Permission denied"
        assert sorted(os.listdir(tmp_path)) == ["a.jpg"]
