#!/usr/bin/env python3
"""Merger settings and their YAML loader.

Settings file example::

    default_properties_on_classpath: myapp/defaults.properties
    properties_on_config_path: myapp.properties
    locations:
      - /etc/myapp/site.properties
      - classpath:myapp/extra.properties
    config_search_paths: [./config, /etc/myapp]
    logging:
      level: INFO

If the settings file does not exist, default settings are returned so that
callers can still merge with whatever sources are available.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from ..utils.logger import setup_logging
from .runtime_variables import CONFIG_PROPERTIES_VAR

logger = logging.getLogger(__name__)


@dataclass
class MergerSettings:
    """Options recognized by ``ConfigMerger.from_settings``."""

    default_properties_on_classpath: Optional[str] = None
    properties_on_config_path: Optional[str] = None

    # Registered locations
    locations: List[str] = field(default_factory=list)
    local_properties: Dict[str, str] = field(default_factory=dict)
    ignore_resource_not_found: bool = True
    file_encoding: str = "utf-8"

    # Resolution
    config_search_paths: List[str] = field(default_factory=list)
    classpath: Optional[List[str]] = None
    runtime_variable: str = CONFIG_PROPERTIES_VAR
    dotenv_path: Optional[str] = None

    logging: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MergerSettings":
        """
        Build settings from a mapping, dropping unknown or wrong-typed entries with a warning.

        Args:
            data: Raw settings, e.g. parsed YAML

        Returns:
            Settings with defaults for every dropped entry
        """
        unknown = sorted(str(k) for k in data if k not in _FIELD_KINDS)
        if unknown:
            logger.warning(f"Ignoring unknown settings keys: {unknown}")

        values = {}
        for key, kind in _FIELD_KINDS.items():
            if data.get(key) is None:
                continue
            value = _coerce(kind, data[key])
            if value is None:
                logger.warning(f"Ignoring settings key '{key}': expected {kind}, got {data[key]!r}")
                continue
            values[key] = value
        return cls(**values)


_FIELD_KINDS = {
    "default_properties_on_classpath": "string",
    "properties_on_config_path": "string",
    "locations": "list of strings",
    "local_properties": "mapping of scalars",
    "ignore_resource_not_found": "boolean",
    "file_encoding": "string",
    "config_search_paths": "list of strings",
    "classpath": "list of strings",
    "runtime_variable": "string",
    "dotenv_path": "string",
    "logging": "mapping",
}

_SCALARS = (str, int, float, bool)


def _coerce(kind: str, value: Any) -> Any:
    """Return ``value`` converted to ``kind``, or None if it does not fit."""
    if kind == "string":
        return value if isinstance(value, str) else None
    if kind == "boolean":
        return value if isinstance(value, bool) else None
    if kind == "list of strings":
        if isinstance(value, str):
            return [value]
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return list(value)
        return None
    if kind == "mapping of scalars":
        if isinstance(value, dict) and all(isinstance(v, _SCALARS) for v in value.values()):
            return {str(k): str(v) for k, v in value.items()}
        return None
    if kind == "mapping":
        return dict(value) if isinstance(value, dict) else None
    raise ValueError(f"Unknown settings kind: {kind}")


def load_settings(path: str | os.PathLike[str], configure_logging: bool = False) -> MergerSettings:
    """
    Load merger settings from a YAML file.

    Args:
        path: Settings file path
        configure_logging: Pass the ``logging`` section to ``setup_logging``

    Returns:
        Parsed settings, or defaults if the file is missing or unusable
    """
    settings = _read_settings(Path(path))
    if configure_logging:
        setup_logging(settings.logging)
    return settings


def _read_settings(settings_path: Path) -> MergerSettings:
    if not settings_path.exists():
        logger.debug(f"Settings file {settings_path} not found, using defaults")
        return MergerSettings()

    try:
        with settings_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load settings from {settings_path}: {e}. Using defaults")
        return MergerSettings()

    if not isinstance(data, dict):
        logger.warning(f"Settings file {settings_path} does not contain a mapping. Using defaults")
        return MergerSettings()

    return MergerSettings.from_mapping(data)
