"""Undo and redo -- stepping through a document review workflow.

Demonstrates:
- Undo stepping back through triggered transitions
- Redo replaying the recorded transitions
- Direct jumps with change_state (undoable, not replayed by redo)
- Listening to every move with on_transition
- Clearing history

Run: python -m examples.undo_redo
"""

from fsm_engine import FSM, EmptyHistoryError

REVIEW = {
    "initial": "draft",
    "states": {
        "draft": {"transitions": {"submit": "review"}},
        "review": {"transitions": {"approve": "published", "reject": "draft"}},
        "published": {"transitions": {"archive": "archived"}},
        "archived": {},
    },
}


def show(old: str, new: str) -> None:
    print(f"    moved {old} -> {new}")


def main() -> None:
    print("=== Review workflow ===\n")

    fsm = FSM(REVIEW)
    fsm.on_transition(show)

    print("  forward:")
    for event in ["submit", "approve", "archive"]:
        fsm.trigger(event)
    print(f"  history: {list(fsm.undo_history)}\n")

    print("  undo x3:")
    while fsm.can_undo():
        result = fsm.undo()
        print(f"    undo() -> {result!r}")

    print("\n  redo:")
    print(f"    redo() -> {fsm.redo()!r}, now {fsm.get_state()}")
    print(f"    redo() -> {fsm.redo()!r} (nothing undone since)\n")

    print("  jump back to draft:")
    fsm.change_state("draft")
    print(f"    undo() -> {fsm.undo()!r}\n")

    fsm.clear_history()
    try:
        fsm.undo()
    except EmptyHistoryError as exc:
        print(f"  after clear_history: {exc}")
    print(f"  state is still {fsm.get_state()}")


if __name__ == "__main__":
    main()
