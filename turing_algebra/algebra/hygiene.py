"""
Renaming ("hygiene") for composed automata.

Independently written machines reuse the same labels ("0", "1",
"search", ...). Before tables are merged every operand is relabelled
with a tag so that its states cannot meet another operand's states.
"""

from typing import Callable

from turing_algebra.core.automaton import Automaton
from turing_algebra.core.types import HALT_STATE, State, TapeReaction, TapeState


def escape_tag(tag: str) -> str:
    """Backslash-escape the characters that delimit a tag."""
    return tag.replace("\\", "\\\\").replace("]", "\\]")


def tag_label(tag: str, label: State) -> State:
    """
    Embed `tag` in `label` as "[tag]label".

    The first unescaped "]" closes the tag, so equal results imply equal
    tags and equal labels. The halt label is reserved and passes through.
    """
    if label == HALT_STATE:
        return label
    return f"[{escape_tag(tag)}]{label}"


def transform_states(automaton: Automaton, callback: Callable[[State], State]) -> Automaton:
    """
    Relabel every state of `automaton` with `callback`.

    Sources, targets, initial and accept labels are all rewritten;
    symbols, directions and the title are kept. The operand is not
    modified.
    """
    result = Automaton(
        initial=callback(automaton.initial_state),
        accept=callback(automaton.accept_state),
        title=automaton.title,
    )
    for key, reaction in automaton:
        result.add_transition(
            TapeState(callback(key.state), key.symbol),
            TapeReaction(
                TapeState(callback(reaction.state), reaction.symbol),
                reaction.direction,
            ),
        )
    return result


def prefix(automaton: Automaton, tag: str) -> Automaton:
    """Return a copy of `automaton` with every label tagged by `tag`."""
    return transform_states(automaton, lambda label: tag_label(tag, label))


def operand_tag(automaton: Automaton, position: int) -> str:
    """Tag given to the operand at `position` of a composition."""
    return f"{automaton.title}#{position}"
