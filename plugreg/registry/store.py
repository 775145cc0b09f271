"""File-backed registry store.

Keeps the configured registries in a single YAML document under the
plugins directory. Every mutation is a full read-modify-write of that file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml

from plugreg import config
from plugreg.errors import RegistryConfigError, RegistrySaveError
from plugreg.registry.models import Registry, RegistryChange, normalize_host, parse_registry_url

logger = logging.getLogger(__name__)

RegistryMap = dict[str, list[str]]


class RegistryStore:
    """Registries grouped by host, persisted to ``registries.yml``."""

    def __init__(self, path: Optional[str | Path] = None) -> None:
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path:
        """Location of ``registries.yml``; resolved on first access."""
        if self._path is None:
            self._path = config.registries_path()
        return self._path

    # ------------------------------------------------------------------
    # Bootstrap
    # ------------------------------------------------------------------

    def ensure_config(self) -> bool:
        """Write the default seed list if the registries file is missing.

        Returns True when the file was created.
        """
        if self.path.exists():
            return False
        self.path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        seed = {config.DEFAULT_HOST: list(config.DEFAULT_PATHS)}
        self._write(seed, op="add")
        logger.debug("Seeded %s with %d default registries", self.path, len(config.DEFAULT_PATHS))
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_registries(self) -> RegistryMap:
        """Load the host -> paths mapping, seeding defaults on first use."""
        self.ensure_config()
        text = self.path.read_text(encoding="utf-8")
        return parse_registries(text)

    def list_registries(self) -> list[str]:
        """Fully qualified registry URLs in file order."""
        return [reg.url for reg in self.registries()]

    def registries(self) -> list[Registry]:
        return [
            Registry(host=host, path=path)
            for host, paths in self.get_registries().items()
            for path in paths
        ]

    def __contains__(self, url: str) -> bool:
        try:
            reg = parse_registry_url(url)
        except ValueError:
            return False
        return reg.path in self.get_registries().get(reg.host, [])

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, url: str) -> RegistryChange:
        """Add a registry URL.

        Raises:
            InvalidRegistryURL: If ``url`` is not a valid http(s) URL.
            RegistrySaveError: If the registries file cannot be written.
        """
        reg = parse_registry_url(url)
        registries = self.get_registries()
        if reg.path in registries.get(reg.host, []):
            return RegistryChange.ALREADY_ADDED
        if reg.is_root:
            logger.debug("Rejected %s: no organization path", url)
            return RegistryChange.ROOT_PATH
        registries.setdefault(reg.host, []).append(reg.path)
        self.save(registries, op="add")
        return RegistryChange.ADDED

    def remove(self, url: str) -> RegistryChange:
        """Remove a registry URL.

        Raises:
            RegistrySaveError: If the registries file cannot be written.
        """
        try:
            reg = parse_registry_url(url)
        except ValueError:
            return RegistryChange.NOT_FOUND
        registries = self.get_registries()
        paths = registries.get(reg.host, [])
        if reg.path not in paths:
            return RegistryChange.NOT_FOUND
        paths.remove(reg.path)
        self.save(registries, op="remove")
        return RegistryChange.REMOVED

    def save(self, registries: RegistryMap, op: str = "add") -> None:
        """Overwrite the registries file with ``registries``."""
        self._write(registries, op=op)
        logger.debug("Saved %s after %s", self.path, op)

    def _write(self, registries: RegistryMap, op: str) -> None:
        try:
            self.path.write_text(dump_registries(registries), encoding="utf-8")
        except OSError as e:
            raise RegistrySaveError(op, e) from e


def dump_registries(registries: RegistryMap) -> str:
    """Serialize ``registries`` below the fixed header.

    Hosts without paths are dropped; an empty mapping is the header alone.
    """
    data = {host: list(paths) for host, paths in registries.items() if paths}
    if not data:
        return config.REGISTRIES_HEADER
    body = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    return config.REGISTRIES_HEADER + body


def parse_registries(text: str) -> RegistryMap:
    """Parse registries.yml content into an ordered host -> paths mapping."""
    if text.strip() == config.REGISTRIES_HEADER.strip():
        return {}
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RegistryConfigError(f"Invalid registries file: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RegistryConfigError("Registries file must map hosts to lists of paths")

    registries: RegistryMap = {}
    for host, paths in data.items():
        if paths is None:
            continue
        if not isinstance(paths, list):
            raise RegistryConfigError(f"Registry host {host} must list its paths")
        # Hand-edited files may spell one host two ways; merge the groups.
        unique = registries.setdefault(normalize_host(str(host)), [])
        for path in paths:
            path = str(path).strip("/")
            if path and path not in unique:
                unique.append(path)
    return registries
