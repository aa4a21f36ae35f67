# errors.py
# Exceptions raised by the simulation core.

from __future__ import annotations


class TypeArgumentError(TypeError):
    """An argument does not have the Vector/Actor type an operation requires."""

    def __init__(self, expected: str, value: object):
        self.expected = expected
        self.received = type(value).__name__
        super().__init__(f"Expected a {expected}, got {self.received}.")
