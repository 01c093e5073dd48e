"""Translation errors.

Both errors abort the whole translation; no partial diagram is produced.
"""

from __future__ import annotations


class TranslationError(Exception):
    """Base class for failures while turning a blueprint into a diagram."""


class UnsupportedFunction(TranslationError):
    """A phase invokes a function kind that has no registry entry."""

    def __init__(self, function: str) -> None:
        self.function = function
        super().__init__(f"support for function {function} not implemented yet")


class InvalidArgument(TranslationError):
    """A function argument is missing or holds a value of the wrong type."""

    def __init__(self, phase: str, function: str, key: str, reason: str = "") -> None:
        self.phase = phase
        self.function = function
        self.key = key
        self.reason = reason
        message = f"phase {phase}: function {function} has invalid argument {key!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
