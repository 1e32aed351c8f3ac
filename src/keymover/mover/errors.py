"""Exceptions raised when moving mapping keys."""

from typing import Any


class KeyMoverError(Exception):
    """
    Base exception for all key move failures.

    Subclasses keep their own constructor arguments in ``args`` so copies and
    pickles rebuild the same error.
    """

    def __init__(self, message: str, key: Any = None):
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        return self.message


class NullMappingError(KeyMoverError, TypeError):
    """The mapping passed in was None."""

    def __init__(self, argument: str = "mapping"):
        super().__init__(f"{argument} must not be None")
        self.argument = argument
        self.args = (argument,)


class KeyConflictError(KeyMoverError, ValueError):
    """The destination key already exists in the mapping."""

    def __init__(self, key: Any):
        super().__init__(f"The new key to move value to is not available: {key!r}", key)
        self.args = (key,)


class KeyNotFoundError(KeyMoverError, KeyError):
    """The source key does not exist in the mapping."""

    def __init__(self, key: Any):
        super().__init__(f"Key to move value from not found: {key!r}", key)
        self.args = (key,)
