"""Configuration loading utilities for watcher target lists."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

import yaml # type: ignore


logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""


@dataclass
class WatchConfig:
    """Top-level configuration structure."""

    targets: List[Path] = field(default_factory=list)


def load_config(path: Path) -> WatchConfig:
    """Load and validate the YAML configuration file."""

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML configuration: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping")

    targets = _parse_targets(data.get("targets", []), config_path=path)
    return WatchConfig(targets=targets)


def _parse_targets(raw: Any, *, config_path: Path) -> List[Path]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigError("'targets' section must be a list")

    targets: List[Path] = []
    for index, item in enumerate(raw):
        if isinstance(item, dict):
            item = item.get("path")
        if not isinstance(item, str) or not item:
            raise ConfigError(f"targets[{index}] must be a path string or a mapping with a 'path' string")

        target_path = Path(item).expanduser()
        if not target_path.is_absolute():
            target_path = (config_path.parent / target_path).resolve()

        logger.info("Loaded target %s", target_path)
        targets.append(target_path)

    return targets
