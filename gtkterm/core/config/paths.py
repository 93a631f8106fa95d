"""Config path helpers.

The configuration file historically lived in the home directory. It now lives
in the XDG config directory, next to a ``.v1`` backup that is refreshed on
every startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


CONFIGURATION_FILENAME = ".gtktermrc"
CONFIGURATION_FILENAME_V1 = ".gtktermrc.v1"


@dataclass(frozen=True)
class ConfigPaths:
    current: Path
    legacy: Path
    backup: Path


def home_dir() -> Path:
    home = os.environ.get("HOME")
    if home:
        return Path(home)
    return Path.home()


def config_dir() -> Path:
    """Return the directory used for the configuration file.

    Priority:
    - XDG_CONFIG_HOME
    - ~/.config
    """

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)

    return home_dir() / ".config"


def config_file_path() -> Path:
    """Return the current configuration file path.

    Priority:
    - GTKTERM_CONFIG_PATH (explicit file override)
    - config_dir()/.gtktermrc
    """

    p = os.environ.get("GTKTERM_CONFIG_PATH")
    if p:
        return Path(p)
    return config_dir() / CONFIGURATION_FILENAME


def legacy_config_file_path() -> Path:
    return home_dir() / CONFIGURATION_FILENAME


def resolve_config_paths() -> ConfigPaths:
    # Recomputed on every call so test harnesses can set env vars late.
    current = config_file_path()
    return ConfigPaths(
        current=current,
        legacy=legacy_config_file_path(),
        backup=current.parent / CONFIGURATION_FILENAME_V1,
    )
