"""
Value types shared by the automaton, the engine and the algebra.

A transition maps a TapeState (state, symbol under the head) to a
TapeReaction (target TapeState, head Direction). The symbol of the
target TapeState is the one written before the head moves.
"""

from enum import Enum
from typing import NamedTuple

from typing_extensions import TypeAlias

State: TypeAlias = str
Symbol: TypeAlias = str

BLANK_SYMBOL: Symbol = "_"
HALT_STATE: State = "H"

DEFAULT_INITIAL_STATE: State = "qStart"
DEFAULT_ACCEPT_STATE: State = "Y"
DEFAULT_TITLE = "MyMachine"


class Direction(Enum):
    """Tape head movement caused by a transition."""
    LEFT = "<"
    RIGHT = ">"
    HOLD = "-"

    @property
    def offset(self) -> int:
        return _OFFSETS[self]

    @property
    def specifier(self) -> str:
        """Text form used by the description format."""
        return self.value

    @classmethod
    def from_specifier(cls, specifier: str) -> "Direction":
        return cls(specifier.strip())


_OFFSETS = {
    Direction.LEFT: -1,
    Direction.RIGHT: 1,
    Direction.HOLD: 0,
}


class Status(Enum):
    """Outcome of a single step."""
    RUNNING = "running"
    ACCEPT = "accept"
    REJECT = "reject"
    HALT = "halt"

    @property
    def is_terminal(self) -> bool:
        return self is not Status.RUNNING

    @property
    def message(self) -> str:
        if self is Status.RUNNING:
            raise ValueError("A running machine has no final message")
        return _MESSAGES[self]


_MESSAGES = {
    Status.ACCEPT: "Machine accepted.",
    Status.REJECT: "Machine rejected.",
    Status.HALT: "Machine halted.",
}


class TapeState(NamedTuple):
    """Left-hand key of a transition: control state plus symbol under the head."""

    state: State
    symbol: Symbol

    def __str__(self) -> str:
        return f"({self.state}, {self.symbol!r})"


class TapeReaction(NamedTuple):
    """Right-hand side of a transition: what to write, where to go, how to move."""

    target: TapeState
    direction: Direction

    @property
    def state(self) -> State:
        return self.target.state

    @property
    def symbol(self) -> Symbol:
        return self.target.symbol

    def __str__(self) -> str:
        return f"({self.target.state}, {self.target.symbol!r}, {self.direction.specifier})"
