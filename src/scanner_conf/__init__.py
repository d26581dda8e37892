"""Configuration resolution for the project-analysis scanner."""

from .exceptions import (
    BaseDirectoryError,
    ConfigurationError,
    CyclicModuleError,
    ModuleConfigFileError,
    PlaceholderCycleError,
    PropertiesLoadError,
)
from .infrastructure.config import ScannerConfiguration

__version__ = "0.1.0"

__all__ = [
    "ScannerConfiguration",
    "ConfigurationError",
    "PropertiesLoadError",
    "BaseDirectoryError",
    "ModuleConfigFileError",
    "CyclicModuleError",
    "PlaceholderCycleError",
]
