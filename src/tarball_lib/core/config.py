# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for tarball.

This module defines dataclasses representing all configurable aspects of tarball:
the auxiliary files bundled into every archive, the naming convention of
cross-compiled binaries, archive output settings, environment variables,
and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance. All settings are frozen
after loading.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass(frozen=True)
class AuxiliarySettings:
    """Files automatically bundled alongside every archive target."""

    # Recognized base names, compared case-insensitively.
    names: tuple[str, ...] = ("readme", "license")
    # Allowed extensions; the empty string allows files without an extension.
    extensions: tuple[str, ...] = ("", ".txt", ".md")


@dataclass(frozen=True)
class NamingSettings:
    """Naming convention of cross-compiled build artifacts ({project}_{os}_{arch})."""

    # Delimiter separating the project, os and arch segments.
    delimiter: str = "_"
    # Recognized operating system tokens.
    os_tokens: tuple[str, ...] = (
        "darwin",
        "freebsd",
        "linux",
        "netbsd",
        "openbsd",
        "windows",
    )
    # Recognized architecture tokens, including Windows executables.
    arch_tokens: tuple[str, ...] = ("386", "386.exe", "amd64", "amd64.exe", "arm")


@dataclass(frozen=True)
class ArchiveSettings:
    """Settings for the produced archives."""

    # Suffix appended to the target to form the archive name.
    suffix: str = ".tar.gz"
    # Gzip compression level (0-9).
    compress_level: int = 6
    # Remove source files of normalized entries once their archive is complete.
    remove_normalized: bool = False


@dataclass(frozen=True)
class EnvironmentVariables:
    """Environment variable names used by tarball."""

    # Enables tarball debug mode.
    debug_mode: str = "TARBALL_DEBUG"
    # Explicit path to the tarball config file.
    config: str = "TARBALL_CONFIG"


@dataclass(frozen=True)
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by tarball.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class ExitCodes:
    """Exit codes used for various errors."""

    # Returned when click rejects the command line.
    usage: int = 2
    # Default error code for failures of tarball.
    default: int = 91
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass(frozen=True)
class Config:
    """Main configuration for tarball."""

    auxiliary: AuxiliarySettings = field(default_factory=AuxiliarySettings)
    naming: NamingSettings = field(default_factory=NamingSettings)
    archive: ArchiveSettings = field(default_factory=ArchiveSettings)
    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the tarball binary.
    binary_name: str = "tarball"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read tarball config '{config_path}': {e}.")

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
            # 2. Current working directory (for development/override)
            Path.cwd() / "tarball_config.toml",
            # 3. XDG config home (standard user config location)
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "tarball"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly. Lists are stored as tuples.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            elif isinstance(value, list):
                field_values[field_name] = tuple(value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for tarball.
CFG = Config.load()
