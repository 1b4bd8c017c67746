"""
Automaton: the transition-table data model.

δ: (State, Symbol) ⇀ (State, Symbol, Direction)

The table is deliberately partial. A missing (state, symbol) key is the
machine's way of rejecting, so no totality check is ever performed.
Automata are built through the mutators below and then treated as
values: the composition operators copy their operands and never mutate
them.
"""

from enum import Enum
from types import MappingProxyType
from typing import (
    Callable,
    Dict,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Set,
    Tuple,
    Union,
)

from turing_algebra.core.errors import TransitionConflictError
from turing_algebra.core.types import (
    DEFAULT_ACCEPT_STATE,
    DEFAULT_INITIAL_STATE,
    DEFAULT_TITLE,
    HALT_STATE,
    Direction,
    State,
    Symbol,
    TapeReaction,
    TapeState,
)

TransitionEntry = Tuple[TapeState, TapeReaction]
TransitionTable = Dict[TapeState, TapeReaction]


class ConflictPolicy(Enum):
    """What to do when a transition key is written twice."""
    OVERWRITE = "overwrite"  # last write wins
    RAISE = "raise"          # fail on a differing reaction


def _as_key(state) -> TapeState:
    if isinstance(state, TapeState):
        return state
    return TapeState(*state)


def _as_reaction(reaction) -> TapeReaction:
    if isinstance(reaction, TapeReaction) and isinstance(reaction.target, TapeState):
        return reaction
    target, direction = reaction
    return TapeReaction(_as_key(target), Direction(direction))


class Automaton:
    """
    Deterministic single-tape Turing machine description.

    Attributes:
        initial_state: State a fresh session starts in
        accept_state: State whose arrival reports ACCEPT
        halt_state: Reserved label whose arrival reports HALT
        title: Human-readable name, also used as the renaming tag
    """

    def __init__(
        self,
        transitions: Optional[Union[Mapping, Iterable]] = None,
        initial: State = DEFAULT_INITIAL_STATE,
        accept: State = DEFAULT_ACCEPT_STATE,
        title: str = DEFAULT_TITLE,
    ):
        self._transitions: TransitionTable = {}
        self._initial = initial
        self._accept = accept
        self._title = title

        if transitions is not None:
            self.add_transitions(transitions)

    # Construction

    def add_transition(
        self,
        state: TapeState,
        reaction: TapeReaction,
        policy: ConflictPolicy = ConflictPolicy.OVERWRITE,
    ) -> None:
        """Install δ(state) = reaction, replacing any earlier entry for the key."""
        key = _as_key(state)
        value = _as_reaction(reaction)

        if policy is ConflictPolicy.RAISE:
            existing = self._transitions.get(key)
            if existing is not None and existing != value:
                raise TransitionConflictError(key, existing, value)

        self._transitions[key] = value

    def add_transitions(
        self,
        entries: Union[Mapping, Iterable],
        policy: ConflictPolicy = ConflictPolicy.OVERWRITE,
    ) -> None:
        """
        Bulk upsert. Entries are applied in iteration order, so the last
        entry for a repeated key wins under OVERWRITE.

        Args:
            entries: A mapping or an iterable of (TapeState, TapeReaction) pairs
            policy: Conflict policy applied to each entry
        """
        items = entries.items() if isinstance(entries, Mapping) else entries
        for state, reaction in items:
            self.add_transition(state, reaction, policy)

    def redirect_state(
        self,
        state_from: State,
        state_to: State,
        alphabet: Iterable[Symbol],
    ) -> None:
        """
        Jump from state_from to state_to on every symbol of the alphabet,
        leaving the symbol and head position untouched.
        """
        for symbol in alphabet:
            self.add_transition(
                TapeState(state_from, symbol),
                TapeReaction(TapeState(state_to, symbol), Direction.HOLD),
            )

    def set_initial_state(self, name: State) -> None:
        self._initial = name

    def set_accept_state(self, name: State) -> None:
        self._accept = name

    def set_title(self, title: str) -> None:
        self._title = title

    # Accessors

    @property
    def initial_state(self) -> State:
        return self._initial

    @property
    def accept_state(self) -> State:
        return self._accept

    @property
    def halt_state(self) -> State:
        return HALT_STATE

    @property
    def title(self) -> str:
        return self._title

    @property
    def transitions(self) -> Mapping[TapeState, TapeReaction]:
        """Read-only view of the transition table."""
        return MappingProxyType(self._transitions)

    def lookup(self, state: State, symbol: Symbol) -> Optional[TapeReaction]:
        """Return δ(state, symbol), or None where the table has no rule."""
        return self._transitions.get(TapeState(state, symbol))

    def states(self) -> Set[State]:
        """Every state label mentioned by the table or the metadata."""
        labels = {self._initial, self._accept}
        for key, reaction in self._transitions.items():
            labels.add(key.state)
            labels.add(reaction.state)
        return labels

    def symbols(self) -> Set[Symbol]:
        """Every symbol the table reads or writes."""
        result: Set[Symbol] = set()
        for key, reaction in self._transitions.items():
            result.add(key.symbol)
            result.add(reaction.symbol)
        return result

    def copy(self, title: Optional[str] = None) -> "Automaton":
        """Independent copy; the table is duplicated, entries are immutable tuples."""
        result = Automaton(
            initial=self._initial,
            accept=self._accept,
            title=self._title if title is None else title,
        )
        result._transitions = dict(self._transitions)
        return result

    # Algebra shortcuts

    def transform_states(self, callback: Callable[[State], State]) -> "Automaton":
        from turing_algebra.algebra.hygiene import transform_states
        return transform_states(self, callback)

    def prefix(self, tag: str) -> "Automaton":
        from turing_algebra.algebra.hygiene import prefix
        return prefix(self, tag)

    # Execution

    def load_input(self, text: str):
        """Start a fresh ExecutionSession over this machine with `text` on the tape."""
        from turing_algebra.engine.session import ExecutionSession
        return ExecutionSession(self, text)

    # Container protocol

    def __iter__(self) -> Iterator[TransitionEntry]:
        return iter(self._transitions.items())

    def __len__(self) -> int:
        return len(self._transitions)

    def __contains__(self, state: object) -> bool:
        return state in self._transitions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Automaton):
            return NotImplemented
        return (
            self._transitions == other._transitions
            and self._initial == other._initial
            and self._accept == other._accept
        )

    __hash__ = None  # mutable during construction

    def __repr__(self) -> str:
        return (
            f"Automaton(title={self._title!r}, initial={self._initial!r}, "
            f"accept={self._accept!r}, transitions={len(self._transitions)})"
        )
