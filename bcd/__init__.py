"""Extract flat feature records from browser-compat-data documents."""

from ._version import __version__

__all__ = ["__version__"]
