#!/usr/bin/env python3
"""
Configuration loading for member ordering checks.

Handles discovery and parsing of .sort-comp.json files.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from ..rules.resolver import ConfigurationError


CONFIG_FILE_NAME = ".sort-comp.json"
ROOT_MARKERS = {'package.json', '.git', 'pnpm-lock.yaml'}


@dataclass
class SortCompConfig:
    """User ordering configuration: ``order`` tokens and custom ``groups``."""
    order: List[str] = field(default_factory=list)
    groups: Dict[str, List[str]] = field(default_factory=dict)
    source_file: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict, source_file: Optional[Path] = None) -> "SortCompConfig":
        """Build a config from parsed JSON, validating value types."""
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration must be a JSON object (in {source_file})")

        order = data.get("order") or []
        groups = data.get("groups") or {}

        if not isinstance(order, list) or not all(isinstance(token, str) for token in order):
            raise ConfigurationError(f"'order' must be a list of strings (in {source_file})")
        if not isinstance(groups, dict):
            raise ConfigurationError(f"'groups' must be an object (in {source_file})")
        for name, entries in groups.items():
            if not isinstance(entries, list) or not all(isinstance(entry, str) for entry in entries):
                raise ConfigurationError(f"Group '{name}' must be a list of strings (in {source_file})")

        unknown_keys = set(data) - {"order", "groups"}
        if unknown_keys:
            print(f"Warning: Ignoring unknown configuration keys {sorted(unknown_keys)} (in {source_file})")

        return cls(order=list(order), groups=dict(groups), source_file=source_file)


def load_config(config_file: Path) -> SortCompConfig:
    """Load and validate a configuration file."""
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_file}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Could not read {config_file}: {e}") from e

    return SortCompConfig.from_dict(data, source_file=config_file)


def find_config_file(target_path: Path, project_root: Optional[Path] = None) -> Optional[Path]:
    """
    Find the closest configuration file.

    Walks up from the target directory to the project root (inclusive) and
    returns the first .sort-comp.json found.
    """
    current_path = target_path.resolve()
    if current_path.is_file():
        current_path = current_path.parent
    project_root = (project_root or find_project_root(current_path)).resolve()

    while True:
        config_file = current_path / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        if current_path == project_root or current_path == current_path.parent:
            return None
        current_path = current_path.parent


def find_project_root(target_path: Path) -> Path:
    """Find project root by looking for common markers."""
    current = target_path.resolve()
    max_depth = 10

    for _ in range(max_depth):
        if any((current / marker).exists() for marker in ROOT_MARKERS):
            return current
        if current == current.parent:
            break
        current = current.parent

    return target_path.resolve()


def load_config_for(target_path: Path, config_file: Optional[Path] = None) -> SortCompConfig:
    """Load an explicit config file, or the closest one, or the default config."""
    if config_file is not None:
        return load_config(config_file)

    found = find_config_file(target_path)
    if found is None:
        return SortCompConfig()
    return load_config(found)
