"""State and transition models shared across watcher components."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class StateKind(str, Enum):
    """What was observed about a target at sampling time."""

    ERROR = "error"
    DOES_NOT_EXIST = "does_not_exist"
    EXISTS = "exists"


class Transition(str, Enum):
    """Change detected between two consecutive samples of one target."""

    CREATED = "created"
    MODIFIED = "modified"
    DELETED = "deleted"
    NONE = "none"


@dataclass(frozen=True)
class WatchState:
    """A single observation of a target.

    ``fingerprint`` is only meaningful for ``StateKind.EXISTS`` and may be
    ``None`` when the target does not track a finer attribute.
    """

    kind: StateKind
    fingerprint: Optional[Any] = None

    @classmethod
    def error(cls) -> "WatchState":
        return cls(StateKind.ERROR)

    @classmethod
    def does_not_exist(cls) -> "WatchState":
        return cls(StateKind.DOES_NOT_EXIST)

    @classmethod
    def exists(cls, fingerprint: Optional[Any] = None) -> "WatchState":
        return cls(StateKind.EXISTS, fingerprint)

    @property
    def is_present(self) -> bool:
        return self.kind is StateKind.EXISTS

    def __str__(self) -> str:
        if self.kind is StateKind.EXISTS and self.fingerprint is not None:
            return f"{self.kind.value}({self.fingerprint})"
        return self.kind.value


def classify(previous: WatchState, current: WatchState) -> Transition:
    """Classify the change between two samples of the same target."""

    if not previous.is_present:
        # Error and absence both count as "not there"
        return Transition.CREATED if current.is_present else Transition.NONE

    if not current.is_present:
        return Transition.DELETED

    if previous.fingerprint is None or current.fingerprint is None:
        return Transition.NONE
    if previous.fingerprint != current.fingerprint:
        return Transition.MODIFIED
    return Transition.NONE
