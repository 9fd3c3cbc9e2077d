"""Core services for the unpkgify command line."""

from unpkgify.core.config_manager import ConfigManager
from unpkgify.core.converter_service import ConversionService

__all__ = ["ConfigManager", "ConversionService"]
