"""Tensor encoding of automata for batched execution."""

from turing_algebra.encoder.dense_table import BatchResult, DenseTable, run_batch

__all__ = ["BatchResult", "DenseTable", "run_batch"]
