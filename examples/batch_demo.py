#!/usr/bin/env python3
"""
Batched execution demo.

Encodes a composed machine as dense tensors and runs it over many
inputs at once, then checks the answers against one-at-a-time sessions.
"""

import time

from turing_algebra import RunConfig
from turing_algebra.cli import build_demo_machine
from turing_algebra.encoder import DenseTable, run_batch


def main():
    machine = build_demo_machine()
    table = DenseTable.from_automaton(machine)
    print(f"Encoded '{machine.title}': {len(table.states)} states x {len(table.symbols)} symbols")

    inputs = [f"{'1' * (i % 5)}:{'2' * (i % 7)}#" for i in range(200)] + ["9", ":1"]
    max_steps = 500

    start = time.perf_counter()
    batch = run_batch(table, inputs, max_steps)
    batch_time = time.perf_counter() - start

    start = time.perf_counter()
    sequential = [machine.load_input(text).run(RunConfig(max_steps=max_steps)) for text in inputs]
    sequential_time = time.perf_counter() - start

    mismatches = sum(
        1 for i, result in enumerate(sequential)
        if (result.status, result.steps, result.tape)
        != (batch.statuses[i], batch.steps[i], batch.tapes[i])
    )

    counts = {}
    for status in batch.statuses:
        counts[status.value] = counts.get(status.value, 0) + 1

    print(f"Outcomes: {counts}")
    print(f"Mismatches against sequential runs: {mismatches}")
    print(f"Batch: {batch_time * 1000:.1f} ms, sequential: {sequential_time * 1000:.1f} ms")


if __name__ == "__main__":
    main()
