"""
turing_algebra: composable deterministic Turing machines

This package provides:
- Automaton: a partial transition table δ: (State, Symbol) ⇀ (State, Symbol, Direction)
- ExecutionSession: a stepping interpreter over a two-way growable tape
- A composition algebra: prefix (renaming), concat, union and repeat
- A line-oriented text format for machine descriptions
- DenseTable / run_batch: tensor encoding for running many inputs at once
"""

from turing_algebra.core.types import (
    BLANK_SYMBOL,
    HALT_STATE,
    Direction,
    Status,
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
from turing_algebra.engine.session import ExecutionSession, RunConfig, RunResult
from turing_algebra.algebra import (
    RepeatMode,
    concat,
    multiconcat,
    multiunion,
    prefix,
    repeat,
    transform_states,
    union,
)
from turing_algebra.serialization import decode, encode

__version__ = "0.1.0"

__all__ = [
    "BLANK_SYMBOL",
    "HALT_STATE",
    "Direction",
    "Status",
    "TapeReaction",
    "TapeState",
    "Automaton",
    "ConflictPolicy",
    "AlphabetError",
    "FormatError",
    "TransitionConflictError",
    "TuringMachineError",
    "ExecutionSession",
    "RunConfig",
    "RunResult",
    "RepeatMode",
    "concat",
    "multiconcat",
    "multiunion",
    "prefix",
    "repeat",
    "transform_states",
    "union",
    "decode",
    "encode",
]
