"""Text encoding and decoding of automata."""

from turing_algebra.serialization.text_format import decode, dump, encode, load

__all__ = ["decode", "dump", "encode", "load"]
