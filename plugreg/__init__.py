"""plugreg — discover Terminus plugins hosted in Git registries."""

__version__ = "0.1.0"
