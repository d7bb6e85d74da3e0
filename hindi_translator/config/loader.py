"""
Configuration management and loading.

Handles quota, history, network and storage settings.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_DAILY_LIMIT = 900
DEFAULT_HISTORY_ITEMS = 50
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_DB_PATH = "hindi_translator.db"


@dataclass(frozen=True)
class QuotaConfig:
    """Daily cap on the rate-limited provider."""
    daily_limit: int = DEFAULT_DAILY_LIMIT

    def __post_init__(self):
        """Validate the limit is positive."""
        if self.daily_limit <= 0:
            raise ValueError("daily_limit must be > 0")


@dataclass(frozen=True)
class HistoryConfig:
    """Bounds for the lookup history."""
    max_items: int = DEFAULT_HISTORY_ITEMS

    def __post_init__(self):
        """Validate the cap is positive."""
        if self.max_items <= 0:
            raise ValueError("max_items must be > 0")


@dataclass(frozen=True)
class NetworkConfig:
    """HTTP settings for remote providers."""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self):
        """Validate the timeout is positive."""
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")


@dataclass(frozen=True)
class StorageConfig:
    """Location of the key-value database."""
    db_path: str = DEFAULT_DB_PATH

    def __post_init__(self):
        """Validate the path is not blank."""
        if not self.db_path or not self.db_path.strip():
            raise ValueError("db_path cannot be empty")


@dataclass(frozen=True)
class TranslatorConfig:
    """Complete translator configuration."""
    quota: QuotaConfig = field(default_factory=QuotaConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


# Allowed keys and their accepted types, per section
_SCHEMA: Dict[str, Dict[str, tuple]] = {
    'quota': {'daily_limit': (int,)},
    'history': {'max_items': (int,)},
    'network': {'timeout_seconds': (int, float)},
    'storage': {'db_path': (str,)},
}


def load_translator_config(path: Optional[str] = None) -> TranslatorConfig:
    """Load and validate translator configuration from YAML file.

    Every section is optional; omitted values fall back to defaults.
    Unknown keys are rejected rather than ignored.

    Args:
        path: Path to YAML configuration file, or None for defaults

    Returns:
        Validated TranslatorConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If configuration is invalid
    """
    if path is None:
        return TranslatorConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Translator config file not found: {path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in config file {path}: {e}")

    if raw_config is None:
        return TranslatorConfig()
    if not isinstance(raw_config, dict):
        raise ValueError("Configuration must be a dictionary")

    unknown_keys = set(raw_config.keys()) - set(_SCHEMA)
    if unknown_keys:
        raise ValueError(f"Unknown configuration keys: {unknown_keys}")

    sections = {
        name: _parse_section(raw_config.get(name) or {}, name)
        for name in _SCHEMA
    }

    return TranslatorConfig(
        quota=QuotaConfig(**sections['quota']),
        history=HistoryConfig(**sections['history']),
        network=NetworkConfig(**sections['network']),
        storage=StorageConfig(**sections['storage']),
    )


def _parse_section(data: Any, path: str) -> Dict[str, Any]:
    """Validate keys and value types of one configuration section.

    Args:
        data: Section data from YAML
        path: Section name for error messages

    Returns:
        Keyword arguments for the section dataclass

    Raises:
        ValueError: If the section is malformed
    """
    if not isinstance(data, dict):
        raise ValueError(f"'{path}' must be a dictionary")

    allowed = _SCHEMA[path]
    unknown_keys = set(data.keys()) - set(allowed)
    if unknown_keys:
        raise ValueError(f"Unknown keys in {path}: {unknown_keys}")

    parsed = {}
    for key, value in data.items():
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, allowed[key]):
            raise ValueError(f"'{key}' in {path} has invalid type {type(value).__name__}")
        parsed[key] = float(value) if float in allowed[key] else value
    return parsed
