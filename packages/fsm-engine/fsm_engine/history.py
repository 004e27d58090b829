"""History - linear undo/redo stacks for the FSM engine."""
from __future__ import annotations

import logging

from fsm_engine.types import EmptyHistoryError, StateId

logger = logging.getLogger(__name__)


class History:
    """Undo stack, redo stack and a counter of undos since the last redo.

    The undo stack holds every state visited, oldest first, starting with
    the state occupied when recording began. The redo stack holds only the
    states reached through triggered transitions and is replayed in full
    by ``step_forward()``.
    """

    def __init__(self) -> None:
        self._undo: list[StateId] = []
        self._redo: list[StateId] = []
        self._redo_counter: int = 0

    @property
    def undo_history(self) -> tuple[StateId, ...]:
        return tuple(self._undo)

    @property
    def redo_history(self) -> tuple[StateId, ...]:
        return tuple(self._redo)

    @property
    def redo_counter(self) -> int:
        return self._redo_counter

    def record_jump(self, current: StateId, target: StateId) -> None:
        """Record a direct state change. Undo-able, never replayed by redo."""
        if not self._undo:
            self._undo.append(current)
        self._undo.append(target)

    def record_transition(self, current: StateId, target: StateId) -> None:
        """Record a triggered transition on both stacks.

        Ends any pending undo run, so a following redo is a no-op.
        """
        if not self._undo:
            self._undo.append(current)
            self._redo.append(current)
        self._undo.append(target)
        self._redo.append(target)
        self._redo_counter = 0

    def can_step_back(self) -> bool:
        return len(self._undo) > 1

    def can_step_forward(self) -> bool:
        return self._redo_counter > 0 and bool(self._redo)

    def step_back(self) -> StateId | None:
        """Drop the newest entry and return the one below it.

        Returns None when only the oldest entry is left. Raises
        EmptyHistoryError when nothing has been recorded.
        """
        if not self._undo:
            raise EmptyHistoryError("no history to undo")
        if len(self._undo) == 1:
            logger.debug("undo exhausted at %r", self._undo[0])
            return None
        self._undo.pop()
        self._redo_counter += 1
        return self._undo[-1]

    def step_forward(self) -> StateId | None:
        """Restore the full redo stack as the undo stack and return its top.

        Returns None if no undo happened since the last redo or transition,
        or if no triggered transition was ever recorded.
        """
        if self._redo_counter == 0:
            return None
        if not self._redo:
            logger.debug(
                "redo requested after %d undo(s) but no transitions recorded",
                self._redo_counter,
            )
            self._redo_counter = 0
            return None
        self._undo = list(self._redo)
        self._redo_counter = 0
        return self._undo[-1]

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
        self._redo_counter = 0

    def __len__(self) -> int:
        return len(self._undo)
