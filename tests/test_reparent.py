"""Tests for the reparent engine -- detach/attach, promotion, rejections.

Covers the engine function directly and the OrgChart.move facade that
records history entries.
"""

from __future__ import annotations

import pytest

from orgchart import (
    EmployeeNotFoundError,
    HistoryKind,
    InvalidOperationError,
    MoveResult,
    OrgChart,
    default_seed,
    move,
)
from tests.conftest import all_ids, report_ids, supervisor_id


# ==================================================================
# Plain moves
# ==================================================================

class TestMove:
    def test_employee_becomes_last_report_of_supervisor(self, chart):
        chart.move(6, 3)
        assert report_ids(chart, 3) == [7, 8, 9, 6]

    def test_reports_are_promoted_to_former_supervisor(self, chart):
        chart.move(6, 3)
        assert report_ids(chart, 2) == [11, 12]
        assert report_ids(chart, 6) == []

    def test_promoted_reports_keep_their_subtrees(self, chart):
        chart.move(6, 3)
        assert report_ids(chart, 12) == [13]
        assert report_ids(chart, 13) == [14]

    def test_promoted_reports_follow_remaining_siblings(self, chart):
        # Georgina's team is Sophie; move Georgina under Bruce.
        chart.move(5, 4)
        assert report_ids(chart, 1) == [2, 3, 4, 10]
        assert report_ids(chart, 4) == [5]

    def test_node_is_relinked_not_cloned(self, chart):
        cassandra = chart.get(6)
        chart.move(6, 3)
        assert chart.get(6) is cassandra

    def test_returns_root(self, chart):
        assert chart.move(6, 3) is chart.root

    def test_move_under_current_supervisor_promotes_team(self, chart):
        chart.move(6, 2)
        assert report_ids(chart, 2) == [11, 12, 6]
        assert report_ids(chart, 6) == []

    def test_move_under_former_peer_subordinate(self, chart):
        chart.move(4, 14)
        assert supervisor_id(chart, 4) == 14
        assert report_ids(chart, 1) == [2, 3, 5]

    def test_ids_stay_unique(self, chart):
        before = sorted(all_ids(chart))
        chart.move(6, 3)
        chart.move(12, 10)
        chart.move(2, 4)
        assert sorted(all_ids(chart)) == before

    def test_records_move_entry(self, chart):
        chart.move(6, 3)
        (entry,) = chart.history
        assert entry.kind is HistoryKind.MOVE
        assert entry.sequence == 1
        assert entry.employee.id == 6
        assert entry.old_supervisor.id == 2
        assert entry.new_supervisor.id == 3
        assert entry.previous_reports == (11, 12)

    def test_entry_snapshot_does_not_track_later_renames(self, chart):
        chart.move(6, 3)
        chart.get(6).name = "Cass R."
        assert chart.history[0].employee.name == "Cassandra Reynolds"


# ==================================================================
# Rejections
# ==================================================================

class TestMoveRejections:
    def test_missing_employee(self, chart):
        with pytest.raises(EmployeeNotFoundError) as exc_info:
            chart.move(999999, 1)
        assert exc_info.value.employee_id == 999999

    def test_missing_supervisor(self, chart):
        with pytest.raises(EmployeeNotFoundError):
            chart.move(6, 999999)

    def test_self_move(self, chart):
        with pytest.raises(InvalidOperationError):
            chart.move(3, 3)

    def test_root_move(self, chart):
        with pytest.raises(InvalidOperationError, match="Root"):
            chart.move(1, 3)

    def test_move_under_direct_report(self, chart):
        with pytest.raises(InvalidOperationError):
            chart.move(6, 11)

    def test_move_under_indirect_report(self, chart):
        with pytest.raises(InvalidOperationError):
            chart.move(2, 14)

    @pytest.mark.parametrize(
        "employee_id, supervisor_id_",
        [(999999, 1), (3, 3), (1, 3), (2, 14), (6, 999999)],
    )
    def test_failed_move_leaves_tree_and_history_untouched(self, chart, employee_id, supervisor_id_):
        before = chart.to_dict()
        with pytest.raises((EmployeeNotFoundError, InvalidOperationError)):
            chart.move(employee_id, supervisor_id_)
        assert chart.to_dict() == before
        assert chart.history == ()


# ==================================================================
# Explicit reports (engine level)
# ==================================================================

class TestExplicitChildren:
    def test_adopts_reports_from_elsewhere(self):
        root = default_seed()
        result = move(root, 4, 5, explicit_children=[10])
        assert isinstance(result, MoveResult)
        assert result.adopted_reports == (10,)
        georgina = root.children[2]
        assert georgina.id == 5
        assert georgina.report_ids() == [4]
        assert georgina.children[0].report_ids() == [10]

    def test_adopted_report_keeps_subtree(self):
        root = default_seed()
        move(root, 4, 3, explicit_children=[12])
        chart = OrgChart(root)
        assert report_ids(chart, 4) == [12]
        assert report_ids(chart, 12) == [13]
        assert report_ids(chart, 6) == [11]

    def test_can_keep_one_of_own_reports(self):
        root = default_seed()
        move(root, 6, 3, explicit_children=[11])
        chart = OrgChart(root)
        assert report_ids(chart, 6) == [11]
        assert report_ids(chart, 2) == [12]

    def test_result_describes_relink(self):
        root = default_seed()
        result = move(root, 6, 3)
        assert result.employee.id == 6
        assert result.old_supervisor.id == 2
        assert result.new_supervisor.id == 3
        assert result.previous_reports == (11, 12)
        assert result.adopted_reports == ()

    @pytest.mark.parametrize(
        "employee_id, supervisor_id_, children",
        [
            (4, 5, [10, 10]),  # listed twice
            (4, 5, [4]),  # the moved employee itself
            (4, 5, [1]),  # the root
            (4, 5, [5]),  # the new supervisor
            (4, 13, [12]),  # new supervisor sits under the adopted report
        ],
    )
    def test_invalid_explicit_children(self, employee_id, supervisor_id_, children):
        root = default_seed()
        before = root.model_dump()
        with pytest.raises(InvalidOperationError):
            move(root, employee_id, supervisor_id_, explicit_children=children)
        assert root.model_dump() == before

    def test_unknown_explicit_child(self):
        root = default_seed()
        with pytest.raises(EmployeeNotFoundError):
            move(root, 4, 5, explicit_children=[404])

    def test_facade_records_requested_kind(self, chart):
        chart.move(4, 5, [10], kind=HistoryKind.REDO)
        assert chart.history[-1].kind is HistoryKind.REDO
        assert report_ids(chart, 4) == [10]
