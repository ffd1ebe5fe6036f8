"""Run two commands joined by a pipe between an input file and an output file,
with the text, character, byte, output and linked-list helpers behind it."""

__version__ = "0.1.0"
__all__ = ["chars", "linkedlist", "memory", "output", "paths", "pipeline", "text"]