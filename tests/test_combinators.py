"""
Tests for the movement building blocks.
"""

import pytest

from turing_algebra.combinators import (
    DEFAULT_ALPHABET,
    consume_right,
    find_left,
    find_right,
    move_left,
    move_right,
)
from turing_algebra.core.types import Direction, Status


class TestMove:
    """Tests for move_right / move_left."""

    def test_move_right_structure(self):
        tm = move_right(3, "mr")
        assert tm.title == "mr"
        assert tm.initial_state == "0"
        assert len(tm) == 3 * len(DEFAULT_ALPHABET)
        assert tm.lookup("2", "4").state == tm.accept_state
        assert tm.lookup("0", "4").direction is Direction.RIGHT

    def test_move_left_into_blank_cells(self):
        result = move_left(2, "ml").load_input("1").run()
        assert result.status is Status.ACCEPT
        assert result.head_index == -2
        assert result.tape == "__1"

    def test_move_zero_holds_once(self):
        result = move_right(0, "stay").load_input("12").run()
        assert result.status is Status.ACCEPT
        assert result.steps == 1
        assert result.head_index == 0

    def test_negative_amount(self):
        with pytest.raises(ValueError):
            move_right(-1)

    def test_symbols_outside_alphabet_reject(self):
        assert move_right(1, alphabet={"x"}).load_input("y").step() is Status.REJECT

    def test_tape_is_left_unchanged(self):
        result = move_right(4, "mr").load_input("1:2#").run()
        assert result.tape == "1:2#_"


class TestFind:
    """Tests for find_right / find_left."""

    def test_find_right(self):
        result = find_right("#").load_input("12#4").run()
        assert result.status is Status.ACCEPT
        assert result.head_index == 2
        assert result.steps == 3

    def test_find_right_already_there(self):
        result = find_right("1").load_input("12").run()
        assert result.head_index == 0
        assert result.steps == 1

    def test_find_left_to_blank(self):
        result = find_left("_").load_input("123").run()
        assert result.status is Status.ACCEPT
        assert result.head_index == -1
        assert result.tape == "_123"


class TestConsume:
    """Tests for consume_right."""

    def test_consume_matching_symbol(self):
        result = consume_right(":").load_input(":1").run()
        assert result.status is Status.ACCEPT
        assert result.head_index == 1

    def test_consume_other_symbol_rejects(self):
        result = consume_right(":").load_input("1:").run()
        assert result.status is Status.REJECT
        assert result.head_index == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
