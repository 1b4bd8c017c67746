"""Core data model for turing_algebra."""

from turing_algebra.core.types import (
    BLANK_SYMBOL,
    HALT_STATE,
    Direction,
    State,
    Status,
    Symbol,
    TapeReaction,
    TapeState,
)
from turing_algebra.core.automaton import Automaton, ConflictPolicy
from turing_algebra.core.errors import (
    AlphabetError,
    FormatError,
    TransitionConflictError,
    TuringMachineError,
)

__all__ = [
    "BLANK_SYMBOL",
    "HALT_STATE",
    "Direction",
    "State",
    "Status",
    "Symbol",
    "TapeReaction",
    "TapeState",
    "Automaton",
    "ConflictPolicy",
    "AlphabetError",
    "FormatError",
    "TransitionConflictError",
    "TuringMachineError",
]
