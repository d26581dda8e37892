"""Filesystem path management for settings discovery."""

from .resolve import (
    locate_global_settings_file,
    locate_settings_file,
    resolve_absolute,
    resolve_root_base_dir,
)
from .validation import (
    is_same_directory,
    require_directory,
)

__all__ = [
    # Resolve
    "resolve_absolute",
    "resolve_root_base_dir",
    "locate_settings_file",
    "locate_global_settings_file",
    # Validation
    "require_directory",
    "is_same_directory",
]
