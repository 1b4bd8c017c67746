"""
Text description format.

    init: <state>
    accept: <state>

    <state_from>,<symbol_from>
    <state_to>,<symbol_to>,<direction>

Direction is one of "<", ">", "-". Blank lines and lines starting with
"//" are ignored, except that a transition's two lines must be
adjacent. Decoding is all-or-nothing: any malformed line raises
FormatError and no automaton is returned.
"""

import logging
from typing import IO, Iterator, List, Tuple

from turing_algebra.core.automaton import Automaton
from turing_algebra.core.errors import FormatError
from turing_algebra.core.types import DEFAULT_TITLE, Direction, TapeReaction, TapeState

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "//"


def _check_label(label: str) -> None:
    if (
        not label
        or label != label.strip()
        or label.startswith(COMMENT_PREFIX)
        or any(ch in label for ch in ",\r\n")
    ):
        raise FormatError(f"State label {label!r} cannot be written in the text format")


def _check_symbol(symbol: str) -> None:
    if len(symbol) != 1 or symbol in ",\r\n":
        raise FormatError(f"Symbol {symbol!r} cannot be written in the text format")


def encode(automaton: Automaton) -> str:
    """Render `automaton` as description text."""
    _check_label(automaton.initial_state)
    _check_label(automaton.accept_state)

    parts = [
        f"init: {automaton.initial_state}\n",
        f"accept: {automaton.accept_state}\n\n",
    ]
    for key, reaction in automaton:
        _check_label(key.state)
        _check_label(reaction.state)
        _check_symbol(key.symbol)
        _check_symbol(reaction.symbol)
        parts.append(f"{key.state},{key.symbol}\n")
        parts.append(
            f"{reaction.state},{reaction.symbol},{reaction.direction.specifier}\n\n"
        )
    return "".join(parts)


def _split_lines(text: str) -> List[str]:
    """Split on newline characters only; other Unicode line breaks are ordinary characters."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def _significant(lines: List[str]) -> Iterator[Tuple[int, str]]:
    for number, line in enumerate(lines, start=1):
        if not line.strip() or line.startswith(COMMENT_PREFIX):
            continue
        yield number, line


def _header(entry, key: str) -> str:
    if entry is None:
        raise FormatError(f"Missing '{key}:' header")
    number, line = entry
    name, sep, value = line.partition(":")
    if not sep or name.strip() != key or not value.strip():
        raise FormatError(f"Expected '{key}: <state>'", number)
    return value.strip()


def _fields(line: str, count: int, number: int) -> List[str]:
    fields = line.split(",")
    if len(fields) != count:
        raise FormatError(f"Expected {count} comma-separated fields, got {len(fields)}", number)
    state, symbol = fields[0], fields[1]
    if not state:
        raise FormatError("Empty state label", number)
    if len(symbol) != 1:
        raise FormatError(f"Symbol must be a single character, got {symbol!r}", number)
    return fields


def decode(text: str, title: str = DEFAULT_TITLE) -> Automaton:
    """
    Parse description text into a new Automaton.

    Raises:
        FormatError: on any malformed header or transition line
    """
    entries = list(_significant(_split_lines(text)))
    entries.extend([None] * max(0, 2 - len(entries)))

    initial = _header(entries[0], "init")
    accept = _header(entries[1], "accept")
    body = entries[2:]
    tm = Automaton(initial=initial, accept=accept, title=title)

    for idx in range(0, len(body), 2):
        number, line = body[idx]
        state_from, symbol_from = _fields(line, 2, number)

        if idx + 1 >= len(body):
            raise FormatError("Transition is missing its target line", number)
        target_number, target_line = body[idx + 1]
        if target_number != number + 1:
            raise FormatError("Target line must directly follow its source line", target_number)

        state_to, symbol_to, specifier = _fields(target_line, 3, target_number)
        try:
            direction = Direction.from_specifier(specifier)
        except ValueError:
            raise FormatError(f"Unknown direction {specifier!r}", target_number) from None

        tm.add_transition(
            TapeState(state_from, symbol_from),
            TapeReaction(TapeState(state_to, symbol_to), direction),
        )

    logger.debug(f"Decoded '{title}': {len(tm)} transitions")
    return tm


def dump(automaton: Automaton, fp: IO[str]) -> None:
    fp.write(encode(automaton))


def load(fp: IO[str], title: str = DEFAULT_TITLE) -> Automaton:
    return decode(fp.read(), title)
