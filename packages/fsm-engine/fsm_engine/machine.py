"""FSM - state container with event transitions and undo/redo."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fsm_engine.config import FSMConfig
from fsm_engine.history import History
from fsm_engine.types import (
    EventId,
    InvalidStateError,
    InvalidTransitionError,
    StateId,
    TransitionCallback,
)

logger = logging.getLogger(__name__)


class FSM:
    """Finite state machine driven by a declarative configuration.

    ``config`` is an :class:`FSMConfig` or the equivalent plain mapping
    ``{"initial": ..., "states": {name: {"transitions": {event: target}}}}``.
    Dangling transition targets are accepted unless ``strict`` is set.

    Direct jumps (``change_state``) are recorded for undo only; triggered
    transitions are recorded for both undo and redo.
    """

    def __init__(
        self,
        config: FSMConfig | Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> None:
        if not isinstance(config, FSMConfig):
            config = FSMConfig.from_dict(config)
        if strict:
            config.validate()
        self._config = config
        self._status: StateId = config.initial
        self._history = History()
        self._listeners: list[TransitionCallback] = []

    @property
    def config(self) -> FSMConfig:
        return self._config

    @property
    def state(self) -> StateId:
        return self._status

    @property
    def undo_history(self) -> tuple[StateId, ...]:
        return self._history.undo_history

    @property
    def redo_history(self) -> tuple[StateId, ...]:
        return self._history.redo_history

    def get_state(self) -> StateId:
        return self._status

    def change_state(self, state: StateId) -> StateId:
        """Jump straight to ``state``. Raises InvalidStateError if unknown."""
        if state not in self._config.states:
            raise InvalidStateError(state)
        old = self._status
        self._history.record_jump(old, state)
        self._status = state
        logger.debug("jump %r -> %r", old, state)
        self._notify(old, state)
        return state

    def trigger(self, event: EventId) -> StateId:
        """Follow the current state's transition for ``event``.

        Raises InvalidTransitionError if there is none.
        """
        sdef = self._config.states.get(self._status)
        if sdef is None or event not in sdef.transitions:
            raise InvalidTransitionError(self._status, event)
        old = self._status
        target = sdef.transitions[event]
        self._history.record_transition(old, target)
        self._status = target
        logger.debug("%r --%s--> %r", old, event, target)
        if target not in self._config.states:
            logger.warning(
                "entered unconfigured state %r via %r from %r", target, event, old
            )
        self._notify(old, target)
        return target

    def reset(self) -> StateId:
        """Return to the initial state. History is kept."""
        old = self._status
        self._status = self._config.initial
        logger.debug("reset %r -> %r", old, self._status)
        self._notify(old, self._status)
        return self._status

    def get_states(self, event: EventId | None = None) -> list[StateId]:
        """All states, or only those with a transition on ``event``."""
        if event is None:
            return self._config.state_ids()
        return [
            name
            for name, sdef in self._config.states.items()
            if event in sdef.transitions
        ]

    def available_events(self) -> list[EventId]:
        sdef = self._config.states.get(self._status)
        return list(sdef.transitions) if sdef is not None else []

    def undo(self) -> bool | StateId:
        """Step back one entry in the history.

        Returns True when the step lands on the initial state, the new state
        otherwise, and False if only the oldest entry is left (nothing
        changes). Raises EmptyHistoryError if no history was recorded.
        """
        previous = self._history.step_back()
        if previous is None:
            return False
        old = self._status
        self._status = previous
        logger.debug("undo %r -> %r", old, previous)
        self._notify(old, previous)
        if previous == self._config.initial:
            return True
        return previous

    def redo(self) -> bool:
        """Replay the recorded transitions after one or more undos.

        Returns False without changing state if there is nothing to redo.
        """
        restored = self._history.step_forward()
        if restored is None:
            return False
        old = self._status
        self._status = restored
        logger.debug("redo %r -> %r", old, restored)
        self._notify(old, restored)
        return True

    def can_undo(self) -> bool:
        return self._history.can_step_back()

    def can_redo(self) -> bool:
        return self._history.can_step_forward()

    def clear_history(self) -> None:
        self._history.clear()
        logger.debug("history cleared at %r", self._status)

    # -- Listeners --

    def on_transition(self, callback: TransitionCallback) -> None:
        """Register ``callback(old_state, new_state)``.

        Called only when an operation leaves the engine in a different state.
        """
        self._listeners.append(callback)

    def off_transition(self, callback: TransitionCallback) -> None:
        try:
            self._listeners.remove(callback)
        except ValueError:
            pass

    def _notify(self, old: StateId, new: StateId) -> None:
        if old == new:
            return
        for cb in list(self._listeners):
            cb(old, new)

    def __repr__(self) -> str:
        return (
            f"FSM(state={self._status!r}, undo={len(self._history)}, "
            f"redo={len(self._history.redo_history)})"
        )
