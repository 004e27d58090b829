"""Shared type aliases and errors for the FSM engine."""
from __future__ import annotations

from collections.abc import Hashable
from typing import Callable

StateId = Hashable
"""Any hashable key: usually a string, or an Enum member."""
EventId = Hashable

TransitionCallback = Callable[[StateId, StateId], None]
"""Listener called as ``callback(old_state, new_state)``."""


class FSMError(Exception):
    """Base class for every error raised by the engine."""


class InvalidStateError(FSMError, KeyError):
    """Raised when jumping to a state that is not configured."""

    def __init__(self, state: StateId, message: str | None = None) -> None:
        self.state = state
        super().__init__(message or f"unknown state {state!r}")


class InvalidTransitionError(FSMError, KeyError):
    """Raised when the current state has no transition for an event."""

    def __init__(self, state: StateId, event: EventId) -> None:
        self.state = state
        self.event = event
        super().__init__(
            f"no such transition from current state {state!r} on event {event!r}"
        )


class InvalidConfigError(FSMError, ValueError):
    """Raised on malformed or inconsistent configuration."""


class EmptyHistoryError(FSMError, LookupError):
    """Raised by undo() when nothing has been recorded."""
