#!/usr/bin/env python3
"""
Composition Demo for turing_algebra.

This example demonstrates:
1. Building small machines from the movement combinators
2. Gluing them together with concat, union and repeat
3. Tracing a run step by step
4. Writing the result out in the text format and reading it back
"""

from turing_algebra import (
    Automaton,
    Direction,
    RepeatMode,
    RunConfig,
    TapeReaction,
    TapeState,
    concat,
    decode,
    encode,
    multiconcat,
    multiunion,
    repeat,
)
from turing_algebra.combinators import DEFAULT_ALPHABET, find_left, find_right, move_right


def demo_concat():
    """Two short moves behave like one long move."""
    print("=" * 60)
    print("Concatenation")
    print("=" * 60)

    alphabet = {"x"}
    joined = concat(move_right(2, alphabet=alphabet), move_right(2, alphabet=alphabet), alphabet)
    single = move_right(4, alphabet=alphabet)

    for name, machine in [("concat(2, 2)", joined), ("move_right(4)", single)]:
        result = machine.load_input("xxxxx").run()
        print(f"{name:>14}: {result.status.value}, head={result.head_index}, steps={result.steps}")


def expect(symbol: str) -> Automaton:
    tm = Automaton(initial="start", title=f"expect_{symbol}")
    tm.add_transition(
        TapeState("start", symbol),
        TapeReaction(TapeState(tm.accept_state, symbol), Direction.RIGHT),
    )
    return tm


def demo_union():
    """Alternatives sharing the entry state 'start'."""
    print("\n" + "=" * 60)
    print("Union")
    print("=" * 60)

    digit = multiunion([expect(d) for d in "1234"], "digit")
    for text in ["3", ":"]:
        print(f"digit on {text!r}: {digit.load_input(text).run().status.value}")


def demo_repeat():
    """Walk over a block, then come back."""
    print("\n" + "=" * 60)
    print("Repeat")
    print("=" * 60)

    machine = multiconcat(
        [
            find_right(":", "to_colon"),
            repeat(move_right(1, "step"), RepeatMode.DO_WHILE, "#", DEFAULT_ALPHABET, "scan"),
            find_left("_", "back"),
        ],
        DEFAULT_ALPHABET,
        "walk",
    )
    print(f"{machine!r}")

    session = machine.load_input("12:34#")
    print(session.head())
    print(session.tape())
    result = session.run(
        RunConfig(max_steps=100),
        on_step=lambda s, status: print(f"{s.head()}\n{s.tape()}"),
    )
    print(result.status.message)
    return machine


def demo_round_trip(machine: Automaton):
    print("\n" + "=" * 60)
    print("Text format")
    print("=" * 60)

    text = encode(machine)
    print("\n".join(text.splitlines()[:8]))
    print("...")

    restored = decode(text, title=machine.title)
    print(f"Round trip equal: {restored == machine}")


def main():
    demo_concat()
    demo_union()
    machine = demo_repeat()
    demo_round_trip(machine)


if __name__ == "__main__":
    main()
