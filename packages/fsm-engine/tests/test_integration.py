"""Integration tests: longer scenarios and logging."""
import logging

import pytest

from fsm_engine import FSM, EmptyHistoryError

WORKFLOW = {
    "initial": "draft",
    "states": {
        "draft": {"transitions": {"submit": "review"}},
        "review": {"transitions": {"approve": "published", "reject": "draft"}},
        "published": {"transitions": {"archive": "archived", "retract": "draft"}},
        "archived": {},
    },
}


class TestWorkflowScenario:
    """A review workflow exercised end to end."""

    def test_full_cycle_with_undo_redo(self):
        """Forward, undo to the start, redo back to the end."""
        # Arrange
        fsm = FSM(WORKFLOW, strict=True)
        seen = []
        fsm.on_transition(lambda old, new: seen.append(new))

        # Act
        for event in ["submit", "approve", "archive"]:
            fsm.trigger(event)
        undo_results = [fsm.undo(), fsm.undo(), fsm.undo(), fsm.undo()]
        redone = fsm.redo()

        # Assert
        assert undo_results == ["published", "review", True, False]
        assert redone is True
        assert fsm.get_state() == "archived"
        assert seen == [
            "review", "published", "archived",
            "published", "review", "draft",
            "archived",
        ]

    def test_reject_loop_and_reset(self):
        fsm = FSM(WORKFLOW)
        for _ in range(3):
            fsm.trigger("submit")
            fsm.trigger("reject")
        fsm.trigger("submit")
        assert fsm.get_state() == "review"
        assert len(fsm.undo_history) == 8
        fsm.reset()
        assert fsm.get_state() == "draft"
        assert fsm.undo() is True

    def test_get_states_by_event(self):
        fsm = FSM(WORKFLOW)
        assert fsm.get_states("retract") == ["published"]
        assert fsm.get_states("submit") == ["draft"]
        assert fsm.get_states() == ["draft", "review", "published", "archived"]

    def test_terminal_state_accepts_nothing(self):
        fsm = FSM(WORKFLOW)
        fsm.change_state("archived")
        assert fsm.available_events() == []

    def test_clear_then_continue(self):
        fsm = FSM(WORKFLOW)
        fsm.trigger("submit")
        fsm.trigger("approve")
        fsm.clear_history()
        with pytest.raises(EmptyHistoryError):
            fsm.undo()
        fsm.trigger("retract")
        assert fsm.undo() == "published"
        assert fsm.get_state() == "published"


class TestLogging:
    """Debug and warning records emitted by the engine."""

    def test_transition_logged_at_debug(self, caplog):
        fsm = FSM(WORKFLOW)
        with caplog.at_level(logging.DEBUG, logger="fsm_engine"):
            fsm.trigger("submit")
        assert any(
            "'draft' --submit--> 'review'" in r.getMessage() for r in caplog.records
        )

    def test_dangling_state_warns(self, caplog):
        fsm = FSM({"initial": "A", "states": {"A": {"transitions": {"go": "Z"}}}})
        with caplog.at_level(logging.WARNING, logger="fsm_engine"):
            fsm.trigger("go")
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "'Z'" in warnings[0].getMessage()

    def test_clear_history_logged(self, caplog):
        fsm = FSM(WORKFLOW)
        with caplog.at_level(logging.DEBUG, logger="fsm_engine"):
            fsm.clear_history()
        assert any("history cleared" in r.getMessage() for r in caplog.records)
