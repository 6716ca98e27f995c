# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_FILE = Path(__file__).parent / "config" / "puzzles.yaml"


class ConfigError(ValueError):
    pass


@dataclass
class PuzzleConfig:
    day: int
    title: str
    parameters: dict[str, Any] = field(default_factory=dict)


def _parse_entry(entry: Any) -> PuzzleConfig:
    if not isinstance(entry, dict):
        raise ConfigError(f"Puzzle entry must be a mapping, got {entry!r}")

    day = entry.get("day")
    if not isinstance(day, int) or not 1 <= day <= 25:
        raise ConfigError(f"Puzzle entry has an invalid day: {day!r}")

    parameters = entry.get("parameters") or {}
    if not isinstance(parameters, dict):
        raise ConfigError(f"Parameters for day {day} must be a mapping")

    return PuzzleConfig(day=day, title=str(entry.get("title", f"Day {day}")), parameters=parameters)


def load_config(config_file: str | Path | None = None) -> dict[int, PuzzleConfig]:
    """
    Load per-puzzle settings from a YAML file.

    Args:
        config_file: Path to the YAML file. If None, uses the puzzles.yaml shipped with the package.

    Returns:
        Mapping from day number to its configuration
    """
    config_file = DEFAULT_CONFIG_FILE if config_file is None else Path(config_file)

    with open(config_file) as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, list):
        raise ConfigError(f"{config_file} must contain a list of puzzle entries")

    configs: dict[int, PuzzleConfig] = {}
    for entry in data:
        config = _parse_entry(entry)
        if config.day in configs:
            raise ConfigError(f"Day {config.day} is configured twice in {config_file}")
        configs[config.day] = config
    return configs


def puzzle_parameters(day: int, config_file: str | Path | None = None) -> dict[str, Any]:
    config = load_config(config_file).get(day)
    return dict(config.parameters) if config is not None else {}
