"""Exceptions raised by pixel-shapes."""


class UnreachableError(RuntimeError):
    """A case analysis reached a branch that no valid input can reach."""


class IterationLimitError(RuntimeError):
    """A bounded search ran past its step limit."""
