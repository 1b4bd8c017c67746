"""
Exceptions raised by the turing_algebra package.

Run outcomes (accept, reject, halt) are never exceptions; see Status.
"""

from typing import Optional


class TuringMachineError(Exception):
    """Base class for all errors raised by this package."""


class FormatError(TuringMachineError, ValueError):
    """Malformed machine description text, or a machine the text format cannot hold."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class TransitionConflictError(TuringMachineError, KeyError):
    """A transition key already maps to a different reaction."""

    def __init__(self, key, existing, incoming):
        self.key = key
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"Conflicting transitions for {key}: {existing} vs {incoming}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class AlphabetError(TuringMachineError, ValueError):
    """Symbols used by a machine are missing from the alphabet given to a splice."""

    def __init__(self, title: str, missing):
        self.title = title
        self.missing = frozenset(missing)
        super().__init__(
            f"Alphabet does not cover symbols {sorted(self.missing)} used by '{title}'"
        )
