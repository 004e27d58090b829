"""fsm-engine - Finite state machine with event transitions and undo/redo."""
from __future__ import annotations

from fsm_engine.config import FSMConfig, StateDef
from fsm_engine.history import History
from fsm_engine.machine import FSM
from fsm_engine.types import (
    EmptyHistoryError,
    EventId,
    FSMError,
    InvalidConfigError,
    InvalidStateError,
    InvalidTransitionError,
    StateId,
    TransitionCallback,
)

__all__ = [
    "FSM",
    "FSMConfig",
    "StateDef",
    "History",
    "StateId",
    "EventId",
    "TransitionCallback",
    "FSMError",
    "InvalidStateError",
    "InvalidTransitionError",
    "InvalidConfigError",
    "EmptyHistoryError",
]
