"""Registry — the Git hosting locations searched for plugins.

Registries are stored in ``registries.yml`` grouped by host::

    https://github.com:
    - pantheon-systems
    - derimagia
"""

from plugreg.registry.models import Registry, RegistryChange, parse_registry_url
from plugreg.registry.store import RegistryStore

__all__ = ["Registry", "RegistryChange", "RegistryStore", "parse_registry_url"]
