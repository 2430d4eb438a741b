"""Polling file-state-change detection."""
from __future__ import annotations

from .config import ConfigError, WatchConfig, load_config
from .state import StateKind, Transition, WatchState, classify
from .targets import BasicTarget, Watchable
from .watcher import TargetIndexError, Watcher

__all__ = [
    "BasicTarget",
    "ConfigError",
    "StateKind",
    "TargetIndexError",
    "Transition",
    "WatchConfig",
    "WatchState",
    "Watchable",
    "Watcher",
    "classify",
    "load_config",
]
