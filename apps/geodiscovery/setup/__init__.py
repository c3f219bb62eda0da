"""Service setup: configuration, logging, database and dependency wiring."""

from geodiscovery.setup.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
