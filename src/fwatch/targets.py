"""Observable targets that a watcher can sample."""
from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Union

from .state import WatchState

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class Watchable(ABC):
    """Anything that can report its current state and an identifying key.

    Implementations must not raise from ``current_state``; sampling failures
    are reported as ``WatchState.error()``.
    """

    @property
    @abstractmethod
    def key(self) -> Any:
        """Stable identifier used for caller-facing lookups."""

    @abstractmethod
    def current_state(self) -> WatchState:
        """Sample the target now."""


class BasicTarget(Watchable):
    """Watches a single filesystem path using its modification time."""

    def __init__(self, path: PathLike):
        self._path = Path(path)

    @property
    def key(self) -> Path:
        return self._path

    @property
    def path(self) -> Path:
        return self._path

    def current_state(self) -> WatchState:
        try:
            stat = os.stat(self._path)
        except (FileNotFoundError, NotADirectoryError):
            return WatchState.does_not_exist()
        except OSError as exc:
            logger.debug("Unable to read metadata for %s: %s", self._path, exc)
            return WatchState.error()
        return WatchState.exists(stat.st_mtime_ns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicTarget):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def __repr__(self) -> str:
        return f"BasicTarget({str(self._path)!r})"
