# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for qsge.

This module defines dataclasses representing the configurable aspects of qsge:
environment variables, presentation settings, date formats, and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.

The SGE commands, the directive prefix, the decoding of SGE status codes and
the layout of the `qstat` listing are fixed and not configurable.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by qsge."""

    # Enables qsge debug mode.
    debug_mode: str = "QSGE_DEBUG"
    # Explicit path to the qsge config file.
    config: str = "QSGE_CONFIG"


@dataclass
class StatPresenterSettings:
    """Settings for StatPresenter."""

    # Style used for table headers.
    headers_style: str = "default bold"
    # Style used for job IDs.
    main_style: str = "white"
    # Style used for the summary line.
    secondary_style: str = "grey70"
    # Code used to signify "total jobs".
    sum_jobs_code: str = "Σ"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by qsge.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of qsge commands.
    default: int = 91
    # Returned when the output of qsub cannot be parsed.
    invalid_submit_response: int = 92
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class StateColors:
    """Color scheme for QueueStatus display."""

    # Style used for running jobs.
    running: str = "bright_blue"
    # Style used for pending jobs.
    pending: str = "bright_magenta"
    # Style used for held or suspended jobs.
    hold: str = "bright_black"
    # Style used for jobs in an error state.
    error: str = "bright_red"
    # Style used for jobs with an unrecognized state code.
    unknown: str = "grey70"


@dataclass
class Config:
    """Main configuration for qsge."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    stat_presenter: StatPresenterSettings = field(
        default_factory=StatPresenterSettings
    )
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)
    state_colors: StateColors = field(default_factory=StateColors)

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.

        Raises:
            ValueError: If the config file exists but cannot be read or parsed.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read qsge config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables.config))
            else None,
            # 2. Current working directory
            Path.cwd() / "qsge_config.toml",
            # 3. XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "qsge"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Unknown keys are ignored.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        name = field_info.name
        if name not in data:
            continue

        value = data[name]
        if is_dataclass(field_info.type) and isinstance(value, dict):
            field_values[name] = _dict_to_dataclass(field_info.type, value)
        else:
            field_values[name] = value

    return cls(**field_values)


# Global configuration for qsge.
CFG = Config.load()
