"""
KeyMover - move a mapping's value from one key to another, in place.

Works on any mutable mapping and hands back the same instance, so calls
can be chained.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .config import get_config
from .utils.logging import get_logger, setup_logging

from .mover import (
    KeyConflictError,
    KeyMover,
    KeyMoverError,
    KeyNotFoundError,
    NullMappingError,
    TryMoveResult,
    move_key,
    try_move_key,
)

__all__ = [
    "get_config",
    "get_logger",
    "setup_logging",
    # Mover
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
