"""Command-line interface for turing_algebra."""

from turing_algebra.cli.main import build_demo_machine, main

__all__ = ["build_demo_machine", "main"]
