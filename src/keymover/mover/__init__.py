"""Mover module for relocating mapping values between keys."""

from .errors import KeyConflictError, KeyMoverError, KeyNotFoundError, NullMappingError
from .mover import KeyMover, TryMoveResult, move_key, try_move_key

__all__ = [
    "KeyMover",
    "TryMoveResult",
    "move_key",
    "try_move_key",
    # Errors
    "KeyMoverError",
    "NullMappingError",
    "KeyConflictError",
    "KeyNotFoundError",
]
