"""
Composition operators: sequential concatenation and alternation.

All operators are pure. Operands are renamed or copied before their
tables are merged, so an automaton passed in is never modified.

Splice contract: the alphabet handed to concat/multiconcat must contain
every symbol that can be under the head when the left operand accepts.
A symbol outside it has no splice transition and the composite rejects
at that point. Pass strict=True to check coverage up front.
"""

import logging
from typing import AbstractSet, Iterable, Optional, Sequence

from turing_algebra.algebra.hygiene import operand_tag, prefix
from turing_algebra.core.automaton import Automaton, ConflictPolicy
from turing_algebra.core.errors import AlphabetError
from turing_algebra.core.types import Symbol

logger = logging.getLogger(__name__)


def check_alphabet(automaton: Automaton, alphabet: AbstractSet[Symbol]) -> None:
    """Raise AlphabetError if `automaton` reads or writes a symbol outside `alphabet`."""
    missing = automaton.symbols() - set(alphabet)
    if missing:
        raise AlphabetError(automaton.title, missing)


def _splice(
    result: Automaton,
    following: Automaton,
    alphabet: Iterable[Symbol],
) -> None:
    """Hand control from result's accept state to `following` (already renamed)."""
    result.redirect_state(result.accept_state, following.initial_state, alphabet)
    result.add_transitions(following)
    result.set_accept_state(following.accept_state)


def concat(
    first: Automaton,
    second: Automaton,
    alphabet: Iterable[Symbol],
    title: Optional[str] = None,
    strict: bool = False,
) -> Automaton:
    """
    Run `first`; once it accepts, continue with `second` from the same
    tape position without consuming a symbol.

    Args:
        first: Machine run first
        second: Machine run after `first` accepts
        alphabet: Symbols to splice on at the junction
        title: Title of the result (defaults to first.title)
        strict: Check that the alphabet covers every symbol of both operands

    Returns:
        New automaton accepting where `second` accepts
    """
    title = first.title if title is None else title
    return multiconcat([first, second], alphabet, title, strict=strict)


def multiconcat(
    machines: Sequence[Automaton],
    alphabet: Iterable[Symbol],
    title: str,
    strict: bool = False,
) -> Automaton:
    """
    Left fold of concat over `machines`, in list order.

    Each operand is tagged with its title and its position, so operands
    sharing a title stay apart.
    """
    machines = list(machines)
    if not machines:
        raise ValueError("multiconcat needs at least one machine")

    alphabet = frozenset(alphabet)
    if strict:
        for machine in machines:
            check_alphabet(machine, alphabet)

    result = prefix(machines[0], operand_tag(machines[0], 0))
    for position, machine in enumerate(machines[1:], start=1):
        _splice(result, prefix(machine, operand_tag(machine, position)), alphabet)

    result.set_title(title)
    logger.debug(
        f"multiconcat '{title}' of {[m.title for m in machines]}: "
        f"{len(result)} transitions"
    )
    return result


def union(
    first: Automaton,
    second: Automaton,
    title: Optional[str] = None,
    policy: ConflictPolicy = ConflictPolicy.OVERWRITE,
) -> Automaton:
    """
    Superimpose the tables of two machines without renaming.

    The caller arranges for the operands to share an entry state or to
    have disjoint keys. The first machine's initial and accept labels
    are kept.
    """
    title = first.title if title is None else title
    return multiunion([first, second], title, policy=policy)


def multiunion(
    machines: Sequence[Automaton],
    title: str,
    policy: ConflictPolicy = ConflictPolicy.OVERWRITE,
) -> Automaton:
    """
    Merge the tables of all `machines` in order.

    Under ConflictPolicy.OVERWRITE a later machine's entry replaces an
    earlier one for the same key. ConflictPolicy.RAISE turns such a
    collision into TransitionConflictError.
    """
    machines = list(machines)
    if not machines:
        raise ValueError("multiunion needs at least one machine")

    result = machines[0].copy(title=title)
    for machine in machines[1:]:
        result.add_transitions(machine, policy=policy)

    logger.debug(
        f"multiunion '{title}' of {len(machines)} machines: {len(result)} transitions"
    )
    return result
