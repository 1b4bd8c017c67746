"""
Execution engine.

An ExecutionSession owns the tape, head and current state of one run of
an Automaton. The automaton itself is only read, so any number of
sessions may run the same machine side by side.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from tqdm import tqdm

from turing_algebra.core.automaton import Automaton
from turing_algebra.core.types import State, Status
from turing_algebra.engine.tape import Tape

logger = logging.getLogger(__name__)


@dataclass
class RunConfig:
    """Configuration for ExecutionSession.run."""

    # Stop after this many steps even if still running (None = unbounded)
    max_steps: Optional[int] = None

    # Show a tqdm progress bar while stepping
    progress: bool = False

    # Log every step at DEBUG level
    trace: bool = False


@dataclass
class RunResult:
    """Result of driving a session to completion (or to the step ceiling)."""

    status: Status
    steps: int
    tape: str
    head_index: int
    final_state: State

    # True when max_steps cut the run short; status is then RUNNING
    limit_reached: bool = False


class ExecutionSession:
    """
    Tape, head and state of a single run.

    Usage:
        session = ExecutionSession(machine)
        session.load_input("1234")
        while not (status := session.step()).is_terminal:
            ...

    Calling step() after a terminal status is not forbidden, but what
    happens then depends on whether the terminal state has outgoing
    transitions.
    """

    def __init__(self, automaton: Automaton, text: str = ""):
        """A new session starts as if load_input(text) had been called."""
        self.automaton = automaton
        self.current_state: State = automaton.initial_state
        self.head_index = 0
        self._tape = Tape()
        self.steps = 0
        self.load_input(text)

    def load_input(self, text: str) -> None:
        """Reset the session: initial state, head at 0, tape holding `text`."""
        self.current_state = self.automaton.initial_state
        self.head_index = 0
        self._tape = Tape(text)
        self.steps = 0

    def step(self) -> Status:
        """Apply one transition and report the resulting status."""
        symbol = self._tape.read(self.head_index)
        reaction = self.automaton.lookup(self.current_state, symbol)
        if reaction is None:
            return Status.REJECT

        self._tape.write(self.head_index, reaction.symbol)
        self.current_state = reaction.state
        self.head_index += reaction.direction.offset
        self._tape.extend_to(self.head_index)
        self.steps += 1

        if self.current_state == self.automaton.halt_state:
            return Status.HALT
        if self.current_state == self.automaton.accept_state:
            return Status.ACCEPT
        return Status.RUNNING

    def run(
        self,
        config: Optional[RunConfig] = None,
        on_step: Optional[Callable[["ExecutionSession", Status], None]] = None,
    ) -> RunResult:
        """
        Step until a terminal status or until config.max_steps steps.

        Args:
            config: Run configuration (step ceiling, progress bar)
            on_step: Called with (session, status) after every step

        Returns:
            RunResult describing where the run stopped
        """
        config = config or RunConfig()
        logger.info(f"Running '{self.automaton.title}' from state {self.current_state}")

        status = Status.RUNNING
        taken = 0
        with tqdm(
            total=config.max_steps,
            desc=self.automaton.title,
            unit="step",
            disable=not config.progress,
        ) as progress:
            while config.max_steps is None or taken < config.max_steps:
                status = self.step()
                taken += 1
                progress.update(1)

                if config.trace:
                    logger.debug(f"{self.head()} {self.tape()}")
                if on_step is not None:
                    on_step(self, status)
                if status.is_terminal:
                    break

        limit_reached = not status.is_terminal
        if limit_reached:
            logger.warning(
                f"'{self.automaton.title}' still running after {taken} steps"
            )
        else:
            logger.info(f"'{self.automaton.title}' finished: {status.value} after {taken} steps")

        return RunResult(
            status=status,
            steps=self.steps,
            tape=self.tape(),
            head_index=self.head_index,
            final_state=self.current_state,
            limit_reached=limit_reached,
        )

    def tape(self) -> str:
        """Snapshot of the whole tape, leftmost cell first."""
        return self._tape.render()

    def head(self) -> str:
        """Marker line: 'v' under the head position within tape(), then the state."""
        before = self.head_index - self._tape.lowest_index
        after = len(self._tape) - before - 1
        return "_" * before + "v" + "_" * after + f" ({self.current_state})"

    @property
    def symbol(self) -> str:
        """Symbol currently under the head."""
        return self._tape.read(self.head_index)
