"""
@meta
name: paths_resolve
type: utility
domain: paths
responsibility:
  - Absolutize and normalize paths against a base directory
  - Compute the root project base directory
  - Locate global and project settings files
inputs:
  - Raw path strings
  - Property bags carrying control keys
outputs:
  - Absolute, normalized paths
tags:
  - utility
  - paths
  - filesystem
lifecycle:
  status: active
"""

"""Resolve base directories and settings file locations.

Paths are normalized lexically. Symbolic links are never resolved, so a base
directory keeps the spelling the user gave it.
"""

import os
from pathlib import Path
from typing import Mapping, Optional, Union

from scanner_conf.constants import (
    GLOBAL_SETTINGS_RELATIVE_PATH,
    PROJECT_HOME,
    PROPERTY_PROJECT_BASEDIR,
    SCANNER_HOME,
    SCANNER_SETTINGS,
)


def _normalize(path: Path) -> Path:
    """Collapse ``.`` and ``..`` segments without touching the filesystem."""
    return Path(os.path.normpath(path))


def resolve_absolute(raw_path: str, base_dir: Union[str, Path]) -> Path:
    """
    Return the path denoted by ``raw_path``, relative to ``base_dir`` or absolute.

    Args:
        raw_path: Path as written in a settings file (surrounding whitespace is ignored).
        base_dir: Directory relative paths are resolved against.

    Returns:
        Normalized path.

    Examples:
        resolve_absolute("../external", "/work/project")
        # -> /work/external

        resolve_absolute(" /opt/src/./lib ", "/work/project")
        # -> /opt/src/lib
    """
    path = Path(raw_path.strip())
    if not path.is_absolute():
        path = Path(base_dir) / path
    return _normalize(path)


def resolve_root_base_dir(
    properties: Mapping[str, str],
    cwd: Optional[Path] = None,
) -> Path:
    """
    Compute the root project base directory.

    ``project.home`` (made absolute against the current directory) is the
    starting point, falling back to the current directory itself. An explicit
    ``sonar.projectBaseDir`` is then resolved against that starting point.

    Args:
        properties: Properties known at this point.
        cwd: Current directory, defaults to the process working directory.

    Returns:
        Absolute path of the root base directory.
    """
    current_dir = Path(cwd) if cwd is not None else Path.cwd()

    if PROJECT_HOME in properties:
        project_home = Path(properties[PROJECT_HOME])
        if not project_home.is_absolute():
            project_home = current_dir / project_home
    else:
        project_home = current_dir

    if PROPERTY_PROJECT_BASEDIR not in properties:
        return project_home

    return resolve_absolute(properties[PROPERTY_PROJECT_BASEDIR], project_home)


def locate_settings_file(
    properties: Mapping[str, str],
    settings_key: str,
    default_path: Optional[Path] = None,
) -> Optional[Path]:
    """
    Locate a settings file from an explicit override key or a default location.

    Args:
        properties: Properties known at this point.
        settings_key: Key whose non-empty value overrides ``default_path``.
        default_path: Conventional location, if any.

    Returns:
        Absolute path of the settings file, or None when neither is given.
        The file is not required to exist.
    """
    settings_path = properties.get(settings_key, "")
    settings_file = Path(settings_path) if settings_path else default_path

    if settings_file is None:
        return None
    return settings_file if settings_file.is_absolute() else Path.cwd() / settings_file


def locate_global_settings_file(properties: Mapping[str, str]) -> Optional[Path]:
    """Locate ``<scanner.home>/conf/sonar-scanner.properties``, overridable by ``scanner.settings``."""
    scanner_home = properties.get(SCANNER_HOME, "")
    default_path = Path(scanner_home) / GLOBAL_SETTINGS_RELATIVE_PATH if scanner_home else None
    return locate_settings_file(properties, SCANNER_SETTINGS, default_path)
