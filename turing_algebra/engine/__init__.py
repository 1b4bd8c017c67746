"""Execution engine for turing_algebra."""

from turing_algebra.engine.tape import Tape
from turing_algebra.engine.session import ExecutionSession, RunConfig, RunResult

__all__ = [
    "Tape",
    "ExecutionSession",
    "RunConfig",
    "RunResult",
]
