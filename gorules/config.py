"""
Configuration management for the Go rules engine interface.

Loads configuration from config.yaml and provides typed access.
Every setting has a default, so a missing config file is not an error
unless a path was given explicitly.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class BoardConfig:
    """Board configuration."""
    size: int = 9


@dataclass
class RulesConfig:
    """Rules configuration."""
    enforce_ko: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "WARNING"

    def numeric_level(self) -> int:
        return getattr(logging, self.level)


@dataclass
class AppConfig:
    """Main application configuration."""
    board: BoardConfig = field(default_factory=BoardConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def _find_config() -> Optional[Path]:
    search_paths = [
        Path.cwd() / "config.yaml",
        get_project_root() / "config.yaml",
    ]
    for path in search_paths:
        if path.exists():
            return path
    return None


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' section must be a mapping")
    return section


def parse_config(data: Optional[Dict[str, Any]]) -> AppConfig:
    """
    Build an AppConfig from parsed YAML data.

    Args:
        data: Mapping loaded from YAML (None is treated as empty)

    Returns:
        AppConfig instance

    Raises:
        ValueError: If a value is invalid
    """
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")

    board_data = _section(data, "board")
    size = board_data.get("size", 9)
    if not isinstance(size, int) or isinstance(size, bool) or size < 1:
        raise ValueError(f"Board size must be a positive integer, got {size!r}")

    rules_data = _section(data, "rules")
    enforce_ko = rules_data.get("enforce_ko", True)
    if not isinstance(enforce_ko, bool):
        raise ValueError(f"rules.enforce_ko must be true or false, got {enforce_ko!r}")

    logging_data = _section(data, "logging")
    level = str(logging_data.get("level", "WARNING")).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}', expected one of {LOG_LEVELS}")

    return AppConfig(
        board=BoardConfig(size=size),
        rules=RulesConfig(enforce_ko=enforce_ko),
        logging=LoggingConfig(level=level),
    )


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml. If None, searches in:
                     1. Current directory
                     2. Project root (relative to this file)
                     and falls back to defaults when neither exists.

    Returns:
        AppConfig instance

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ValueError: If config file is invalid
    """
    if config_path is None:
        found = _find_config()
        if found is None:
            return AppConfig()
        path = found
    else:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return parse_config(data)
