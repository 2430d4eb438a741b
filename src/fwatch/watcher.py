"""Watcher collection that tracks targets and reports state transitions."""
from __future__ import annotations

import logging
from typing import Any, Generic, List, TypeVar

from .config import WatchConfig
from .state import Transition, WatchState, classify
from .targets import BasicTarget, Watchable

logger = logging.getLogger(__name__)

W = TypeVar("W", bound=Watchable)


class TargetIndexError(IndexError):
    """Raised when a lookup index does not refer to a registered target."""


class Watcher(Generic[W]):
    """Keeps an ordered list of targets and the last state seen for each.

    The index returned by ``add_target`` is the caller's handle for
    ``get_path`` and ``get_state``, and matches the position of the
    target's entry in the list returned by ``watch``. Not thread-safe.
    """

    def __init__(self) -> None:
        self._targets: List[W] = []
        self._states: List[WatchState] = []

    @classmethod
    def from_config(cls, config: WatchConfig) -> "Watcher[BasicTarget]":
        """Build a watcher of path targets from a loaded configuration."""

        watcher: Watcher[BasicTarget] = Watcher()
        for path in config.targets:
            watcher.add_target(BasicTarget(path))
        return watcher

    def __len__(self) -> int:
        return len(self._targets)

    def add_target(self, target: W) -> int:
        """Register a target, sampling its initial state immediately."""

        state = target.current_state()
        self._targets.append(target)
        self._states.append(state)
        index = len(self._targets) - 1
        logger.debug("Watching %s at index %s (initial state %s)", target.key, index, state)
        return index

    def remove_target(self, index: int) -> bool:
        """Stop watching the target at ``index``; later indices shift down."""

        if not 0 <= index < len(self._targets):
            return False
        target = self._targets.pop(index)
        self._states.pop(index)
        logger.debug("Stopped watching %s", target.key)
        return True

    def get_path(self, index: int) -> Any:
        return self._targets[self._check_index(index)].key

    def get_state(self, index: int) -> WatchState:
        """Return the last observed state; does not sample the target."""

        return self._states[self._check_index(index)]

    def watch(self) -> List[Transition]:
        """Sample every target and return its transition in registration order."""

        transitions: List[Transition] = []
        for index, target in enumerate(self._targets):
            current = target.current_state()
            transition = classify(self._states[index], current)
            self._states[index] = current
            if transition is not Transition.NONE:
                logger.info("%s %s", target.key, transition.value)
            transitions.append(transition)
        return transitions

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._targets):
            raise TargetIndexError(
                f"No target at index {index} (watching {len(self._targets)} targets)"
            )
        return index
