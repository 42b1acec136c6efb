"""
Error taxonomy for snapshot splitting.

- InvalidArgument: a required input is missing; raised immediately.
- WriteFailure: the filesystem rejected a write; carries the path.
- ConfigurationReadFailure: the split-mode flag could not be read.
  Callers in the scaffolding layer coerce this to "split mode disabled".
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union


class SnapshotError(Exception):
    """Base exception for all snapshot splitting errors."""


class InvalidArgument(SnapshotError, ValueError):
    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(message or f"{argument} is required")
        self.argument = argument


class IdentifierCollision(InvalidArgument):
    """Two distinct entities derive the same snapshot identifier."""

    def __init__(self, identifier: str, names: Sequence[str]):
        super().__init__(
            "entity",
            f"snapshot identifier {identifier!r} is derived from more than one entity: "
            + ", ".join(repr(n) for n in names),
        )
        self.identifier = identifier
        self.names = tuple(names)


class WriteFailure(SnapshotError, OSError):
    def __init__(self, path: Union[str, Path], reason: str = ""):
        msg = f"Failed to write {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.path = str(path)


class ConfigurationReadFailure(SnapshotError):
    def __init__(self, message: str, source: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.source = None if source is None else str(source)


def require(value, argument: str):
    """Raise InvalidArgument when value is None, otherwise return it."""
    if value is None:
        raise InvalidArgument(argument)
    return value
