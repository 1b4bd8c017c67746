"""
Tests for the automaton data model.
"""

import pytest

from turing_algebra.core.automaton import Automaton, ConflictPolicy
from turing_algebra.core.errors import TransitionConflictError
from turing_algebra.core.types import (
    HALT_STATE,
    Direction,
    Status,
    TapeReaction,
    TapeState,
)


def reaction(state, symbol, direction=Direction.HOLD):
    return TapeReaction(TapeState(state, symbol), direction)


class TestTypes:
    """Tests for Direction, Status and the transition tuples."""

    def test_direction_offsets(self):
        assert Direction.LEFT.offset == -1
        assert Direction.RIGHT.offset == 1
        assert Direction.HOLD.offset == 0

    def test_direction_specifiers(self):
        assert Direction.from_specifier("<") is Direction.LEFT
        assert Direction.from_specifier("> ") is Direction.RIGHT
        assert Direction.from_specifier("-") is Direction.HOLD
        with pytest.raises(ValueError):
            Direction.from_specifier("^")

    def test_status_messages(self):
        assert Status.ACCEPT.message == "Machine accepted."
        assert Status.REJECT.message == "Machine rejected."
        assert Status.HALT.message == "Machine halted."
        with pytest.raises(ValueError):
            Status.RUNNING.message

    def test_only_running_is_non_terminal(self):
        assert not Status.RUNNING.is_terminal
        assert all(s.is_terminal for s in (Status.ACCEPT, Status.REJECT, Status.HALT))

    def test_tape_state_structural_equality(self):
        assert TapeState("q0", "a") == TapeState("q0", "a")
        assert hash(TapeState("q0", "a")) == hash(("q0", "a"))
        table = {TapeState("q0", "a"): 1}
        assert ("q0", "a") in table


class TestAutomaton:
    """Tests for Automaton construction and accessors."""

    def test_defaults(self):
        tm = Automaton()
        assert tm.initial_state == "qStart"
        assert tm.accept_state == "Y"
        assert tm.halt_state == HALT_STATE == "H"
        assert tm.title == "MyMachine"
        assert len(tm) == 0

    def test_add_transition_upserts(self):
        tm = Automaton()
        tm.add_transition(TapeState("q0", "a"), reaction("q1", "a"))
        tm.add_transition(TapeState("q0", "a"), reaction("q2", "b", Direction.LEFT))

        assert len(tm) == 1
        assert tm.lookup("q0", "a") == reaction("q2", "b", Direction.LEFT)

    def test_add_transition_accepts_plain_tuples(self):
        tm = Automaton()
        tm.add_transition(("q0", "a"), (("q1", "b"), Direction.RIGHT))
        assert tm.lookup("q0", "a") == reaction("q1", "b", Direction.RIGHT)

    def test_add_transitions_last_entry_wins(self):
        tm = Automaton()
        tm.add_transitions([
            (TapeState("q0", "a"), reaction("q1", "a")),
            (TapeState("q0", "b"), reaction("q1", "b")),
            (TapeState("q0", "a"), reaction("q3", "a")),
        ])
        assert len(tm) == 2
        assert tm.lookup("q0", "a").state == "q3"

    def test_add_transitions_from_mapping(self):
        tm = Automaton({TapeState("q0", "a"): reaction("q1", "a")}, initial="q0", accept="q1")
        assert tm.lookup("q0", "a") is not None
        assert tm.lookup("q0", "b") is None

    def test_conflict_policy_raise(self):
        tm = Automaton()
        tm.add_transition(TapeState("q0", "a"), reaction("q1", "a"))

        # Identical reaction is not a conflict
        tm.add_transition(TapeState("q0", "a"), reaction("q1", "a"), ConflictPolicy.RAISE)

        with pytest.raises(TransitionConflictError) as info:
            tm.add_transition(TapeState("q0", "a"), reaction("q2", "a"), ConflictPolicy.RAISE)
        assert info.value.key == TapeState("q0", "a")
        assert tm.lookup("q0", "a").state == "q1"

    def test_conflict_error_is_key_error(self):
        tm = Automaton()
        tm.add_transition(TapeState("q0", "a"), reaction("q1", "a"))
        with pytest.raises(KeyError):
            tm.add_transitions(
                [(TapeState("q0", "a"), reaction("q9", "a"))],
                policy=ConflictPolicy.RAISE,
            )

    def test_redirect_state(self):
        tm = Automaton()
        tm.redirect_state("from", "to", {"a", "b"})

        assert len(tm) == 2
        for symbol in "ab":
            assert tm.lookup("from", symbol) == reaction("to", symbol, Direction.HOLD)
        assert tm.lookup("from", "c") is None

    def test_setters(self):
        tm = Automaton()
        tm.set_initial_state("start")
        tm.set_accept_state("done")
        tm.set_title("demo")
        assert (tm.initial_state, tm.accept_state, tm.title) == ("start", "done", "demo")

    def test_states_and_symbols(self):
        tm = Automaton(initial="q0", accept="q2")
        tm.add_transition(TapeState("q0", "a"), reaction("q1", "b"))
        assert tm.states() == {"q0", "q1", "q2"}
        assert tm.symbols() == {"a", "b"}

    def test_copy_is_independent(self):
        tm = Automaton(initial="q0")
        tm.add_transition(TapeState("q0", "a"), reaction("q1", "a"))

        clone = tm.copy(title="clone")
        clone.add_transition(TapeState("q1", "a"), reaction("q2", "a"))

        assert clone.title == "clone"
        assert len(tm) == 1
        assert len(clone) == 2

    def test_transitions_view_is_read_only(self):
        tm = Automaton()
        tm.add_transition(TapeState("q0", "a"), reaction("q1", "a"))
        with pytest.raises(TypeError):
            tm.transitions[TapeState("q0", "b")] = reaction("q1", "b")

    def test_determinism_after_many_writes(self):
        tm = Automaton()
        for i in range(20):
            tm.add_transition(TapeState("q0", "ab"[i % 2]), reaction(f"q{i}", "a"))
        keys = [key for key, _ in tm]
        assert len(keys) == len(set(keys)) == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
