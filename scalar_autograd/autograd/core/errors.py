# scalar_autograd/autograd/core/errors.py
"""
Exceptions raised by the autograd engine and the nn modules.

All of them are contract violations detected before any node is allocated
or any gradient is touched, so the caller can fix its inputs and retry.
"""


class AutogradError(Exception):
    """Base class for errors raised by scalar_autograd."""


class UnsupportedOperation(AutogradError, ValueError):
    """An operation has no derivative rule for the given arguments (e.g. x ** 0)."""


class ShapeMismatch(AutogradError, ValueError):
    """A feature vector does not have the length a neuron (or loss) expects."""

    def __init__(self, expected: int, got: int, what: str = "inputs"):
        self.expected = expected
        self.got = got
        super().__init__(f"expected {expected} {what}, got {got}")
