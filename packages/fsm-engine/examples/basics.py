"""Hello FSM -- a traffic light driven by events.

Demonstrates:
- Defining a machine as a plain dict
- Triggering events and reading the current state
- Listing states, and the states that react to a given event
- Handling an event the current state does not accept

Run: python -m examples.basics
"""

from fsm_engine import FSM, InvalidTransitionError

LIGHT = {
    "initial": "red",
    "states": {
        "red": {"transitions": {"timer": "green", "fault": "blinking"}},
        "green": {"transitions": {"timer": "yellow", "fault": "blinking"}},
        "yellow": {"transitions": {"timer": "red", "fault": "blinking"}},
        "blinking": {"transitions": {"repair": "red"}},
    },
}


def main() -> None:
    print("=== Traffic light ===\n")

    fsm = FSM(LIGHT, strict=True)
    print(f"  states: {fsm.get_states()}")
    print(f"  react to 'fault': {fsm.get_states('fault')}\n")

    for event in ["timer", "timer", "timer", "fault"]:
        old = fsm.get_state()
        fsm.trigger(event)
        print(f"  {old:>8} --{event}--> {fsm.get_state()}")

    try:
        fsm.trigger("timer")
    except InvalidTransitionError as exc:
        print(f"\n  rejected: {exc.event!r} while {exc.state!r}")

    fsm.reset()
    print(f"\nAfter reset: {fsm.get_state()}")


if __name__ == "__main__":
    main()
