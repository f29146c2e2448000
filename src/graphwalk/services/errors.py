"""Exception types raised by graphwalk.

Only caller-contract violations raise; every traversal is total over a
well-formed graph.
"""

from __future__ import annotations


class GraphwalkError(Exception):
    """Base class for all graphwalk errors."""


class InvalidArgumentError(GraphwalkError, ValueError):
    """A required argument was absent or unusable.

    Attributes:
        argument: Name of the offending parameter.
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' must not be None")
