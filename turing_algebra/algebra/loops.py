"""
Loop construction.

    body ──accept──▶ check ──default──▶ body.initial  (DO_WHILE)
                           └─sentinel─▶ break

The blanket redirect out of "check" is installed first and the single
sentinel transition second, so the override is not clobbered.
"""

import logging
from enum import Enum
from typing import Iterable

from turing_algebra.algebra.composition import check_alphabet
from turing_algebra.algebra.hygiene import operand_tag, prefix
from turing_algebra.core.automaton import Automaton
from turing_algebra.core.types import Direction, Symbol, TapeReaction, TapeState

logger = logging.getLogger(__name__)

CHECK_STATE = "check"
BREAK_STATE = "break"


class RepeatMode(Enum):
    """How the check junction treats the sentinel symbol."""
    DO_WHILE = "do_while"  # loop again unless the sentinel is under the head
    DO_UNTIL = "do_until"  # leave the loop unless the sentinel is under the head


def repeat(
    body: Automaton,
    mode: RepeatMode,
    sentinel: Symbol,
    alphabet: Iterable[Symbol],
    title: str,
    strict: bool = False,
) -> Automaton:
    """
    Build a loop around `body`.

    The body runs once, then the symbol under the head decides whether
    to run it again or leave through the "break" state, which is the
    accept state of the result.

    Args:
        body: Loop body
        mode: DO_WHILE or DO_UNTIL
        sentinel: Symbol tested at the check junction
        alphabet: Every symbol that may be under the head at the junction
        title: Title of the result
        strict: Check that the alphabet covers every symbol of the body

    Returns:
        New automaton accepting in "break"
    """
    alphabet = frozenset(alphabet)
    if strict:
        check_alphabet(body, alphabet)

    loop = prefix(body, operand_tag(body, 0))
    loop.set_title(title)

    if mode is RepeatMode.DO_WHILE:
        default_target, sentinel_target = loop.initial_state, BREAK_STATE
    else:
        default_target, sentinel_target = BREAK_STATE, loop.initial_state

    loop.redirect_state(loop.accept_state, CHECK_STATE, alphabet)
    loop.redirect_state(CHECK_STATE, default_target, alphabet)
    loop.add_transition(
        TapeState(CHECK_STATE, sentinel),
        TapeReaction(TapeState(sentinel_target, sentinel), Direction.HOLD),
    )
    loop.set_accept_state(BREAK_STATE)

    logger.debug(
        f"repeat '{title}' ({mode.value} on {sentinel!r}) around '{body.title}': "
        f"{len(loop)} transitions"
    )
    return loop
