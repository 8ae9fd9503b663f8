"""Unit tests for task status state machine transitions."""

import pytest

from tasktracking.workflow import (
    TERMINAL_STATUSES,
    VALID_TRANSITIONS,
    InvalidStatusError,
    Status,
    get_valid_next_statuses,
    is_terminal,
    is_valid_transition,
    should_auto_transition,
)


class TestIsValidTransition:
    def test_awaiting_approval_to_in_progress(self):
        assert is_valid_transition(Status.awaiting_approval, Status.in_progress) is True

    def test_awaiting_approval_to_approved_invalid(self):
        """The common path skips the approved state."""
        assert is_valid_transition(Status.awaiting_approval, Status.approved) is False

    def test_approved_to_in_progress(self):
        assert is_valid_transition(Status.approved, Status.in_progress) is True

    def test_in_progress_to_pending_review(self):
        assert is_valid_transition(Status.in_progress, Status.pending_review) is True

    def test_in_progress_to_done_invalid(self):
        assert is_valid_transition(Status.in_progress, Status.done) is False

    def test_pending_review_to_rework(self):
        assert is_valid_transition(Status.pending_review, Status.rework) is True

    def test_rework_to_in_progress(self):
        assert is_valid_transition(Status.rework, Status.in_progress) is True

    def test_blocked_and_on_hold_resume(self):
        assert is_valid_transition(Status.blocked, Status.in_progress) is True
        assert is_valid_transition(Status.on_hold, Status.in_progress) is True

    def test_any_non_terminal_to_cancelled(self):
        for status in Status:
            if status in TERMINAL_STATUSES:
                continue
            assert is_valid_transition(status, Status.cancelled) is True

    def test_accepts_string_values(self):
        assert is_valid_transition("pending_review", "done") is True
        assert is_valid_transition("done", "pending_review") is False

    def test_no_self_transitions(self):
        for status in Status:
            assert is_valid_transition(status, status) is False

    def test_unknown_status_raises(self):
        with pytest.raises(InvalidStatusError, match="Unknown task status"):
            is_valid_transition("archived", "done")

    def test_unknown_target_raises(self):
        with pytest.raises(InvalidStatusError) as exc_info:
            is_valid_transition(Status.in_progress, "finished")
        assert exc_info.value.value == "finished"
        assert exc_info.value.error_type == "invalid_status"

    def test_invalid_status_is_value_error(self):
        with pytest.raises(ValueError):
            is_valid_transition(None, Status.done)


class TestTerminalStates:
    def test_done_is_terminal(self):
        for target in Status:
            assert is_valid_transition(Status.done, target) is False

    def test_cancelled_is_terminal(self):
        for target in Status:
            assert is_valid_transition(Status.cancelled, target) is False

    def test_terminal_set(self):
        assert TERMINAL_STATUSES == {Status.done, Status.cancelled}
        assert is_terminal("done") is True
        assert is_terminal(Status.rework) is False


class TestGetValidNextStatuses:
    def test_table_is_total(self):
        assert set(VALID_TRANSITIONS) == set(Status)
        for status in Status:
            assert isinstance(get_valid_next_statuses(status), list)

    def test_declaration_order(self):
        assert get_valid_next_statuses(Status.in_progress) == [
            Status.pending_review,
            Status.blocked,
            Status.on_hold,
            Status.cancelled,
        ]
        assert get_valid_next_statuses("pending_review") == [
            Status.done,
            Status.rework,
            Status.cancelled,
        ]

    def test_terminal_states_empty(self):
        assert get_valid_next_statuses(Status.done) == []
        assert get_valid_next_statuses(Status.cancelled) == []

    def test_returned_list_is_a_copy(self):
        statuses = get_valid_next_statuses(Status.rework)
        statuses.clear()
        assert get_valid_next_statuses(Status.rework) == [Status.in_progress, Status.cancelled]

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            VALID_TRANSITIONS[Status.done] = (Status.in_progress,)


class TestTransitionCoverage:
    def test_all_transitions_defined(self):
        for current, targets in VALID_TRANSITIONS.items():
            for target in targets:
                assert is_valid_transition(current, target), (
                    f"Transition {current.value} → {target.value} should be valid"
                )

    def test_happy_path(self):
        path = [
            Status.awaiting_approval,
            Status.in_progress,
            Status.pending_review,
            Status.rework,
            Status.in_progress,
            Status.pending_review,
            Status.done,
        ]
        for current, target in zip(path, path[1:]):
            assert is_valid_transition(current, target) is True


class TestShouldAutoTransition:
    def test_overdue_in_progress_is_blocked(self):
        assert should_auto_transition(Status.in_progress, is_overdue=True) is Status.blocked

    def test_overdue_elsewhere_unchanged(self):
        assert should_auto_transition(Status.pending_review, is_overdue=True) is None

    def test_subtasks_complete_under_review_is_done(self):
        assert should_auto_transition("pending_review", all_subtasks_complete=True) is Status.done

    def test_subtasks_complete_in_progress_unchanged(self):
        assert should_auto_transition(Status.in_progress, all_subtasks_complete=True) is None

    def test_blocking_issues_alone_do_nothing(self):
        assert should_auto_transition(Status.in_progress, has_blocking_issues=True) is None

    def test_no_flags(self):
        assert should_auto_transition(Status.in_progress) is None
