"""Configuration loading, module tree expansion and source merging."""

from .environment import load_environment_properties
from .loader import ScannerConfiguration
from .modules import (
    expand_modules,
    extract_module_properties,
    load_module_config,
)

__all__ = [
    "ScannerConfiguration",
    "load_environment_properties",
    "expand_modules",
    "extract_module_properties",
    "load_module_config",
]
