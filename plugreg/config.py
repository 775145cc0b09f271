"""Locations and constants for the plugin registry configuration.

The plugins directory defaults to ``~/terminus/plugins`` and can be
overridden with ``TERMINUS_PLUGINS_DIR``. Registries live in
``registries.yml`` inside it.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path, PurePath, PureWindowsPath
from typing import Mapping, Optional

PLUGINS_DIR_ENV = "TERMINUS_PLUGINS_DIR"
REGISTRIES_FILE = "registries.yml"

REGISTRIES_HEADER = (
    "# Terminus plugin registries\n"
    "#\n"
    "# List of well-known or custom plugin Git registries\n"
    "---\n"
)

DEFAULT_HOST = "https://github.com"
DEFAULT_PATHS = [
    "pantheon-systems",
    "derimagia",
    "pi-ron",
    "sean-e-dietrich",
    "uberhacker",
]


def is_windows(platform: Optional[str] = None) -> bool:
    return (platform or sys.platform).startswith("win")


def plugins_dir(
    env: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> PurePath:
    """Resolve the plugins directory without touching the filesystem."""
    env = os.environ if env is None else env
    windows = is_windows(platform)

    override = env.get(PLUGINS_DIR_ENV, "")
    if override:
        override = os.path.expanduser(override)
        return PureWindowsPath(override) if windows else Path(override)

    if windows:
        # MinGW shells (Git Bash) export a usable HOME; plain Windows does not.
        system = env.get("MSYSTEM", "")[:4].upper()
        home = env.get("HOME", "") if system == "MING" else env.get("HOMEPATH", "")
        return PureWindowsPath(home) / "terminus" / "plugins"

    home = env.get("HOME") or str(Path.home())
    return Path(home) / "terminus" / "plugins"


def ensure_plugins_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """Return the plugins directory, creating it if it does not exist."""
    path = Path(plugins_dir(env))
    path.mkdir(mode=0o755, parents=True, exist_ok=True)
    return path


def registries_path(env: Optional[Mapping[str, str]] = None) -> Path:
    return ensure_plugins_dir(env) / REGISTRIES_FILE
