"""Test utilities for watcher tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from fwatch import Watchable, WatchState


class ScriptedTarget(Watchable):
    """Target that replays a fixed sequence of states, repeating the last."""

    def __init__(self, name: str, states: List[WatchState]) -> None:
        self._name = name
        self._states = list(states)
        self.samples = 0

    @property
    def key(self) -> str:
        return self._name

    def current_state(self) -> WatchState:
        index = min(self.samples, len(self._states) - 1)
        self.samples += 1
        return self._states[index]


def set_mtime(path: Path, mtime_ns: int) -> None:
    os.utime(path, ns=(mtime_ns, mtime_ns))
