"""
Dense tensor encoding of a transition table, and batched execution.

    δ: (State, Symbol) ⇀ (State, Symbol, Direction)
       ↦ defined[s, k], next_state[s, k], write_symbol[s, k], move[s, k]

The dict-based ExecutionSession runs one input at a time. run_batch
runs one machine over many inputs in lockstep, all reading the same
read-only tensors, and reproduces exactly what a session would report
for each input under the same step ceiling.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

import torch

from turing_algebra.core.automaton import Automaton
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

_STATUS_CODES = [Status.RUNNING, Status.ACCEPT, Status.REJECT, Status.HALT]
RUNNING, ACCEPT, REJECT, HALT = range(4)

_DIRECTION_BY_OFFSET = {d.offset: d for d in Direction}


@dataclass
class DenseTable:
    """
    Transition table as [num_states, num_symbols] tensors.

    Attributes:
        states: State label for each row index
        symbols: Symbol for each column index
        defined: True where δ has a rule
        next_state: Target state index (0 where undefined)
        write_symbol: Written symbol index (0 where undefined)
        move: Head offset -1/0/+1 (0 where undefined)
    """

    states: List[State]
    symbols: List[Symbol]
    defined: torch.Tensor
    next_state: torch.Tensor
    write_symbol: torch.Tensor
    move: torch.Tensor
    initial: int
    accept: int
    halt: int
    blank: int
    state_index: Dict[State, int] = field(default_factory=dict)
    symbol_index: Dict[Symbol, int] = field(default_factory=dict)

    @classmethod
    def from_automaton(
        cls,
        automaton: Automaton,
        alphabet: Optional[Iterable[Symbol]] = None,
        device: str = "cpu",
    ) -> "DenseTable":
        """
        Encode `automaton`.

        Args:
            automaton: Machine to encode
            alphabet: Extra symbols to give columns to (the table's own
                symbols and the blank always get one)
            device: Torch device for the tensors
        """
        symbols = automaton.symbols() | {BLANK_SYMBOL}
        if alphabet is not None:
            symbols |= set(alphabet)
        symbols = sorted(symbols)
        states = sorted(automaton.states() | {HALT_STATE})

        state_index = {s: i for i, s in enumerate(states)}
        symbol_index = {s: i for i, s in enumerate(symbols)}
        shape = (len(states), len(symbols))

        defined = torch.zeros(shape, dtype=torch.bool)
        next_state = torch.zeros(shape, dtype=torch.long)
        write_symbol = torch.zeros(shape, dtype=torch.long)
        move = torch.zeros(shape, dtype=torch.long)

        for key, reaction in automaton:
            s, k = state_index[key.state], symbol_index[key.symbol]
            defined[s, k] = True
            next_state[s, k] = state_index[reaction.state]
            write_symbol[s, k] = symbol_index[reaction.symbol]
            move[s, k] = reaction.direction.offset

        return cls(
            states=states,
            symbols=symbols,
            defined=defined.to(device),
            next_state=next_state.to(device),
            write_symbol=write_symbol.to(device),
            move=move.to(device),
            initial=state_index[automaton.initial_state],
            accept=state_index[automaton.accept_state],
            halt=state_index[HALT_STATE],
            blank=symbol_index[BLANK_SYMBOL],
            state_index=state_index,
            symbol_index=symbol_index,
        )

    @property
    def device(self) -> torch.device:
        return self.defined.device

    def lookup(self, state: State, symbol: Symbol) -> Optional[TapeReaction]:
        """Decode δ(state, symbol) back into a TapeReaction, or None."""
        s = self.state_index.get(state)
        k = self.symbol_index.get(symbol)
        if s is None or k is None or not bool(self.defined[s, k]):
            return None
        return TapeReaction(
            TapeState(
                self.states[int(self.next_state[s, k])],
                self.symbols[int(self.write_symbol[s, k])],
            ),
            _DIRECTION_BY_OFFSET[int(self.move[s, k])],
        )

    def with_symbols(self, extra: Sequence[Symbol]) -> "DenseTable":
        """Copy with columns appended for `extra` symbols; the new columns are undefined."""
        extra = [s for s in extra if s not in self.symbol_index]
        if not extra:
            return self

        pad = (len(self.states), len(extra))

        def widen(tensor: torch.Tensor) -> torch.Tensor:
            return torch.cat(
                [tensor, torch.zeros(pad, dtype=tensor.dtype, device=tensor.device)],
                dim=1,
            )

        symbols = self.symbols + list(extra)
        return DenseTable(
            states=self.states,
            symbols=symbols,
            defined=widen(self.defined),
            next_state=widen(self.next_state),
            write_symbol=widen(self.write_symbol),
            move=widen(self.move),
            initial=self.initial,
            accept=self.accept,
            halt=self.halt,
            blank=self.blank,
            state_index=self.state_index,
            symbol_index={s: i for i, s in enumerate(symbols)},
        )


@dataclass
class BatchResult:
    """Per-input outcome of run_batch, in input order."""

    statuses: List[Status]
    steps: List[int]
    head_indices: List[int]
    tapes: List[str]
    final_states: List[State]

    def __len__(self) -> int:
        return len(self.statuses)


@torch.no_grad()
def run_batch(
    table: DenseTable,
    inputs: Sequence[str],
    max_steps: int,
) -> BatchResult:
    """
    Run the encoded machine over every input for at most `max_steps` steps.

    Each input gets its own tape row, wide enough that the head cannot
    leave it within `max_steps` moves. Rows stop advancing as soon as
    they reach a terminal status; rows still RUNNING at the end hit the
    ceiling.
    """
    if max_steps < 0:
        raise ValueError(f"max_steps must be non-negative, got {max_steps}")

    inputs = list(inputs)
    extra = sorted({ch for text in inputs for ch in text} - set(table.symbol_index))
    table = table.with_symbols(extra)
    device = table.device

    batch = len(inputs)
    lengths = [max(len(text), 1) for text in inputs]
    origin = max_steps
    width = max(lengths, default=1) + 2 * max_steps + 1

    tapes = torch.full((batch, width), table.blank, dtype=torch.long, device=device)
    for row, text in enumerate(inputs):
        if text:
            codes = [table.symbol_index[ch] for ch in text]
            tapes[row, origin:origin + len(codes)] = torch.tensor(codes, device=device)

    heads = torch.zeros(batch, dtype=torch.long, device=device)
    states = torch.full((batch,), table.initial, dtype=torch.long, device=device)
    status = torch.full((batch,), RUNNING, dtype=torch.long, device=device)
    steps = torch.zeros(batch, dtype=torch.long, device=device)
    min_head = torch.zeros(batch, dtype=torch.long, device=device)
    max_head = torch.tensor(lengths, dtype=torch.long, device=device) - 1

    for _ in range(max_steps):
        rows = (status == RUNNING).nonzero(as_tuple=True)[0]
        if rows.numel() == 0:
            break

        pos = heads[rows] + origin
        sym = tapes[rows, pos]
        st = states[rows]
        ok = table.defined[st, sym]

        status[rows[~ok]] = REJECT

        go, sym, st, pos = rows[ok], sym[ok], st[ok], pos[ok]
        tapes[go, pos] = table.write_symbol[st, sym]
        target = table.next_state[st, sym]
        states[go] = target
        heads[go] = heads[go] + table.move[st, sym]
        steps[go] = steps[go] + 1
        min_head[go] = torch.minimum(min_head[go], heads[go])
        max_head[go] = torch.maximum(max_head[go], heads[go])

        code = torch.full_like(target, RUNNING)
        code[target == table.accept] = ACCEPT
        code[target == table.halt] = HALT
        status[go] = code

    rendered = []
    for row in range(batch):
        lo = origin + int(min_head[row])
        hi = origin + int(max_head[row])
        rendered.append("".join(table.symbols[k] for k in tapes[row, lo:hi + 1].tolist()))

    return BatchResult(
        statuses=[_STATUS_CODES[c] for c in status.tolist()],
        steps=steps.tolist(),
        head_indices=heads.tolist(),
        tapes=rendered,
        final_states=[table.states[s] for s in states.tolist()],
    )
