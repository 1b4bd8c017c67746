"""Reusable building-block machines."""

from turing_algebra.combinators.movement import (
    DEFAULT_ALPHABET,
    consume_right,
    find,
    find_left,
    find_right,
    move,
    move_left,
    move_right,
)

__all__ = [
    "DEFAULT_ALPHABET",
    "consume_right",
    "find",
    "find_left",
    "find_right",
    "move",
    "move_left",
    "move_right",
]
