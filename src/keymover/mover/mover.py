"""Mover component for relocating mapping values from one key to another."""

from collections.abc import Hashable, MutableMapping
from typing import Any, NamedTuple, TypeVar

from ..config import MoverSettings, get_config
from ..utils.logging import get_logger, setup_logging
from .errors import KeyConflictError, KeyNotFoundError, NullMappingError

logger = get_logger(__name__)

M = TypeVar("M", bound=MutableMapping)


class TryMoveResult(NamedTuple):
    """Outcome of a try-move: whether the new key was taken, and the reported value."""

    conflict: bool
    conflicting_value: Any = None


class KeyMover:
    """
    Moves values between keys of a caller-owned mapping.

    The mapping is mutated in place and never copied. Any
    ``collections.abc.MutableMapping`` works; only membership, item lookup,
    item assignment and item deletion are used.
    """

    def __init__(self, settings: MoverSettings | None = None):
        """
        Initialize the key mover.

        Args:
            settings: Mover settings. Defaults to ``MoverSettings()``.
        """
        self.settings = settings or MoverSettings()

    @classmethod
    def from_config(cls, configure_logging: bool = True) -> "KeyMover":
        """
        Build a mover from the loaded package configuration.

        Args:
            configure_logging: Also apply the config's logging settings

        Returns:
            KeyMover using the configured mover settings
        """
        config = get_config()

        if configure_logging:
            setup_logging(
                level=config.logging.level,
                log_dir=config.logging.log_dir,
                max_bytes=config.logging.max_bytes,
                backup_count=config.logging.backup_count,
                console_enabled=config.logging.console_enabled,
                file_enabled=config.logging.file_enabled,
            )

        return cls(config.mover)

    @staticmethod
    def _require(mapping: MutableMapping, key: Hashable) -> None:
        # Membership, not a KeyError from lookup: defaultdict and Counter never raise one
        if key not in mapping:
            raise KeyNotFoundError(key)

    def move(self, mapping: M, existing_key: Hashable, new_key: Hashable) -> M:
        """
        Move the value of an existing key to a new key that is not in use yet.

        Args:
            mapping: Mapping to mutate in place
            existing_key: Key of the value to move from
            new_key: Key of the value to move to

        Returns:
            The same mapping instance, for chaining

        Raises:
            NullMappingError: If mapping is None
            KeyConflictError: If new_key already exists; the mapping is left untouched
            KeyNotFoundError: If existing_key does not exist; the mapping is left untouched
        """
        if mapping is None:
            raise NullMappingError("mapping")

        if new_key in mapping:
            raise KeyConflictError(new_key)

        self._require(mapping, existing_key)
        value = mapping[existing_key]
        del mapping[existing_key]
        mapping[new_key] = value

        if self.settings.log_moves:
            logger.debug(f"Moved key {existing_key!r} -> {new_key!r}")

        return mapping

    def try_move(
        self,
        mapping: MutableMapping,
        existing_key: Hashable,
        new_key: Hashable,
        default: Any = None,
    ) -> TryMoveResult:
        """
        Move the value of an existing key to a new key, overwriting any value there.

        The conflict flag only reports whether new_key was already present; the
        move happens either way. Which value is reported on conflict depends on
        ``settings.conflict_value_source``: with the default ``"existing_key"``
        it is the value being moved, with ``"new_key"`` it is the value that
        gets overwritten.

        Args:
            mapping: Mapping to mutate in place
            existing_key: Key of the value to move from
            new_key: Key of the value to move to
            default: Value reported when there is no conflict

        Returns:
            TryMoveResult(conflict, conflicting_value)

        Raises:
            NullMappingError: If mapping is None
            KeyNotFoundError: If existing_key does not exist; the mapping is left untouched
        """
        if mapping is None:
            raise NullMappingError("mapping")

        conflicting_value = default
        has_conflict = new_key in mapping
        self._require(mapping, existing_key)

        if has_conflict:
            if self.settings.conflict_value_source == "new_key":
                conflicting_value = mapping[new_key]
            else:
                conflicting_value = mapping[existing_key]

        value = mapping[existing_key]
        del mapping[existing_key]
        mapping[new_key] = value

        if self.settings.log_moves:
            if has_conflict:
                logger.debug(f"Moved key {existing_key!r} -> {new_key!r}, overwrote existing entry")
            else:
                logger.debug(f"Moved key {existing_key!r} -> {new_key!r}")

        return TryMoveResult(has_conflict, conflicting_value)


_default_mover = KeyMover()


def move_key(mapping: M, existing_key: Hashable, new_key: Hashable) -> M:
    """
    Move the value under existing_key to new_key and return the same mapping.

    Raises KeyConflictError if new_key is already present and KeyNotFoundError
    if existing_key is missing. Neither failure mutates the mapping.
    """
    return _default_mover.move(mapping, existing_key, new_key)


def try_move_key(
    mapping: MutableMapping,
    existing_key: Hashable,
    new_key: Hashable,
    default: Any = None,
) -> TryMoveResult:
    """
    Move the value under existing_key to new_key, overwriting new_key if present.

    Returns a ``(conflict, conflicting_value)`` pair. On conflict the reported
    value is the one read from existing_key; otherwise it is ``default``.
    """
    return _default_mover.try_move(mapping, existing_key, new_key, default)
