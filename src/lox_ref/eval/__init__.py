"""Evaluator helper modules for the Lox runtime."""

__all__ = [
    "blocks",
    "common",
    "expr",
    "helpers",
    "loops",
]
