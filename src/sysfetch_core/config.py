"""
Configuration management for Sysfetch Core.

Supports configuration via YAML files, environment variables, and programmatic access.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATHS = [
    Path("/etc/sysfetch-core/config.yaml"),
    Path.home() / ".config" / "sysfetch-core" / "config.yaml",
    Path("sysfetch-config.yaml"),
]

# Nested YAML sections and the flat field names their keys map to
SECTION_FIELDS = {
    "sources": {
        "os_release": "os_release_path",
        "meminfo": "meminfo_path",
        "uptime": "uptime_path",
    },
    "user": {
        "shell": "shell_path",
    },
    "logging": {
        "level": "log_level",
        "file": "log_file",
    },
}


@dataclass
class Config:
    """
    Configuration container for Sysfetch Core.

    Priority (highest to lowest):
    1. Programmatic values passed to __init__
    2. Environment variables (prefixed with SYSFETCH_, then SHELL)
    3. Config file values
    4. Default values
    """

    # OS sources
    os_release_path: str = "/etc/os-release"
    meminfo_path: str = "/proc/meminfo"
    uptime_path: str = "/proc/uptime"

    # Path of the active shell executable, usually taken from $SHELL
    shell_path: str | None = None

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from a dictionary."""
        # Flatten nested structure if present
        flat = {}
        for key, value in data.items():
            if isinstance(value, dict):
                mapping = SECTION_FIELDS.get(key, {})
                for subkey, subvalue in value.items():
                    flat[mapping.get(subkey, subkey)] = subvalue
            else:
                flat[key] = value

        # Filter to only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in flat.items() if k in known_fields}

        return cls(**filtered)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> Config:
        """
        Load configuration with full resolution order.

        Args:
            config_path: Explicit path to config file. If None, searches
                        default locations.

        Returns:
            Fully resolved Config instance.
        """
        base_config: dict[str, Any] = {}

        if config_path:
            path = Path(config_path)
            if path.exists():
                with open(path) as f:
                    base_config = yaml.safe_load(f) or {}
        else:
            for path in DEFAULT_CONFIG_PATHS:
                if path.exists():
                    with open(path) as f:
                        base_config = yaml.safe_load(f) or {}
                    break

        config = cls.from_dict(base_config) if base_config else cls()

        config._apply_env_overrides()

        return config

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        env_mappings = {
            "SYSFETCH_OS_RELEASE": "os_release_path",
            "SYSFETCH_MEMINFO": "meminfo_path",
            "SYSFETCH_UPTIME": "uptime_path",
            "SYSFETCH_SHELL": "shell_path",
            "SYSFETCH_LOG_LEVEL": "log_level",
            "SYSFETCH_LOG_FILE": "log_file",
        }

        for env_var, attr in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                setattr(self, attr, value)

        # The login shell is the usual source when nothing else names one
        if not self.shell_path:
            self.shell_path = os.environ.get("SHELL")

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "sources": {
                "os_release": self.os_release_path,
                "meminfo": self.meminfo_path,
                "uptime": self.uptime_path,
            },
            "user": {
                "shell": self.shell_path,
            },
            "logging": {
                "level": self.log_level,
                "file": self.log_file,
            },
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
