"""Composition algebra: renaming, concatenation, union and loops."""

from turing_algebra.algebra.hygiene import prefix, transform_states, tag_label
from turing_algebra.algebra.composition import (
    check_alphabet,
    concat,
    multiconcat,
    multiunion,
    union,
)
from turing_algebra.algebra.loops import BREAK_STATE, CHECK_STATE, RepeatMode, repeat

__all__ = [
    "prefix",
    "transform_states",
    "tag_label",
    "check_alphabet",
    "concat",
    "multiconcat",
    "multiunion",
    "union",
    "BREAK_STATE",
    "CHECK_STATE",
    "RepeatMode",
    "repeat",
]
