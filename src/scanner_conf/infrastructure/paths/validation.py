"""Filesystem checks for resolved base directories."""

import os
from pathlib import Path

from scanner_conf.exceptions import BaseDirectoryError


def require_directory(path: Path, module_id: str) -> Path:
    """
    Ensure a module base directory exists.

    Args:
        path: Computed base directory.
        module_id: Module the directory belongs to, for the error message.

    Returns:
        The unchanged path.

    Raises:
        BaseDirectoryError: If ``path`` is missing or not a directory.
    """
    if not path.is_dir():
        raise BaseDirectoryError(
            f"The base directory of the module '{module_id}' does not exist: {path}"
        )
    return path


def is_same_directory(first: Path, second: Path) -> bool:
    """
    Compare two directories by filesystem identity rather than spelling.

    Returns False if either path does not exist.
    """
    try:
        return os.path.samefile(first, second)
    except OSError:
        return False
