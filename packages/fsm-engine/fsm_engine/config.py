"""Configuration types: StateDef and FSMConfig."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fsm_engine.types import EventId, InvalidConfigError, StateId


@dataclass
class StateDef:
    """One state's transition table, mapping event to target state."""

    transitions: dict[EventId, StateId] = field(default_factory=dict)


@dataclass
class FSMConfig:
    """Declarative machine definition.

    Transition targets are not required to name configured states; use
    ``dangling_targets()`` or ``validate()`` to check them.
    """

    initial: StateId
    states: dict[StateId, StateDef]

    def __post_init__(self) -> None:
        for name, sdef in self.states.items():
            if not isinstance(sdef, StateDef):
                raise InvalidConfigError(
                    f"state {name!r} must be a StateDef, got {type(sdef).__name__}"
                )
        if self.initial not in self.states:
            raise InvalidConfigError(
                f"initial state {self.initial!r} is not a configured state"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FSMConfig:
        """Build a config from ``{"initial": ..., "states": {...}}``.

        Nested mappings are copied. A state without a ``"transitions"`` key
        has no outgoing transitions.
        """
        if not isinstance(data, Mapping):
            raise InvalidConfigError(
                f"config must be a mapping, got {type(data).__name__}"
            )
        for key in ("initial", "states"):
            if key not in data:
                raise InvalidConfigError(f"config is missing {key!r}")
        raw_states = data["states"]
        if not isinstance(raw_states, Mapping):
            raise InvalidConfigError("'states' must be a mapping")

        states: dict[StateId, StateDef] = {}
        for name, raw in raw_states.items():
            if not isinstance(raw, Mapping):
                raise InvalidConfigError(
                    f"state {name!r} must be a mapping, got {type(raw).__name__}"
                )
            transitions = raw.get("transitions", {})
            if not isinstance(transitions, Mapping):
                raise InvalidConfigError(
                    f"transitions of state {name!r} must be a mapping"
                )
            states[name] = StateDef(transitions=dict(transitions))
        return cls(initial=data["initial"], states=states)

    def to_dict(self) -> dict[str, Any]:
        return {
            "initial": self.initial,
            "states": {
                name: {"transitions": dict(sdef.transitions)}
                for name, sdef in self.states.items()
            },
        }

    def state_ids(self) -> list[StateId]:
        """Return all state identifiers in definition order."""
        return list(self.states)

    def dangling_targets(self) -> list[tuple[StateId, EventId, StateId]]:
        """Return ``(state, event, target)`` for every unconfigured target."""
        return [
            (name, event, target)
            for name, sdef in self.states.items()
            for event, target in sdef.transitions.items()
            if target not in self.states
        ]

    def validate(self) -> None:
        """Raise InvalidConfigError if any transition target is unknown."""
        dangling = self.dangling_targets()
        if dangling:
            state, event, target = dangling[0]
            raise InvalidConfigError(
                f"transition {state!r} --{event}--> {target!r} targets an "
                f"unknown state ({len(dangling)} dangling target(s) total)"
            )
