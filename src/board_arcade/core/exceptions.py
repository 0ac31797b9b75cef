"""
Exceptions raised by the arcade.

Illegal moves are not exceptions: they come back as a rejected MoveResult.
"""


class ArcadeError(Exception):
    """Base class for arcade errors."""


class InvalidStateError(ArcadeError, RuntimeError):
    """An operation was requested in a state that does not allow it."""
