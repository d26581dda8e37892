"""Shared constants module.

This module provides the property keys and filenames used across the
configuration layer and the CLI.
"""

from .properties import (
    SCANNER_HOME,
    SCANNER_SETTINGS,
    PROJECT_HOME,
    PROJECT_SETTINGS,
    PROPERTY_MODULES,
    PROPERTY_PROJECT_BASEDIR,
    PROPERTY_PROJECT_CONFIG_FILE,
    BOOTSTRAP_START_TIME,
    SONAR_PROJECT_PROPERTIES_FILENAME,
    GLOBAL_SETTINGS_RELATIVE_PATH,
    SETTINGS_FILE_ENCODING,
    MAX_MODULE_DEPTH,
)

__all__ = [
    "SCANNER_HOME",
    "SCANNER_SETTINGS",
    "PROJECT_HOME",
    "PROJECT_SETTINGS",
    "PROPERTY_MODULES",
    "PROPERTY_PROJECT_BASEDIR",
    "PROPERTY_PROJECT_CONFIG_FILE",
    "BOOTSTRAP_START_TIME",
    "SONAR_PROJECT_PROPERTIES_FILENAME",
    "GLOBAL_SETTINGS_RELATIVE_PATH",
    "SETTINGS_FILE_ENCODING",
    "MAX_MODULE_DEPTH",
]
