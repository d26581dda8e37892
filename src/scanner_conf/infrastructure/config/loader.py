from __future__ import annotations

"""
@meta
name: config_loader
type: utility
domain: config
responsibility:
  - Load the global scanner settings file
  - Load the project settings file and expand its module tree
  - Merge all configuration sources with fixed precedence
  - Inject the root base directory and bootstrap start time
inputs:
  - CLI, environment and system properties
  - sonar-scanner.properties and sonar-project.properties files
outputs:
  - Flattened property dictionary
tags:
  - utility
  - config
  - loading
lifecycle:
  status: active
"""
import logging
import os
import time
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional

from scanner_conf.common.shared.properties_utils import load_properties_if_present
from scanner_conf.config.merging import merge_with_precedence
from scanner_conf.constants import (
    BOOTSTRAP_START_TIME,
    PROJECT_HOME,
    PROJECT_SETTINGS,
    PROPERTY_PROJECT_BASEDIR,
    SONAR_PROJECT_PROPERTIES_FILENAME,
)
from scanner_conf.core.placeholders import resolve_placeholders
from scanner_conf.infrastructure.paths import (
    locate_global_settings_file,
    locate_settings_file,
    resolve_root_base_dir,
)

from .environment import load_environment_properties
from .modules import expand_modules

logger = logging.getLogger(__name__)

PropertyResolver = Callable[[Mapping[str, str], Mapping[str, str]], Dict[str, str]]
EnvironmentLoader = Callable[[Mapping[str, str]], Dict[str, str]]


class ScannerConfiguration:
    """
    Resolve the scanner configuration from every source.

    Sources, lowest to highest precedence: global settings file, project
    settings file with its flattened module tree, system properties,
    environment properties, CLI properties. The result is passed through a
    placeholder resolver, then ``sonar.projectBaseDir`` is forced to the
    absolute root base directory, ``project.home`` is dropped and
    ``sonar.scanner.bootstrapStartTime`` is set to the construction time.
    """

    def __init__(
        self,
        cli_properties: Optional[Mapping[str, str]] = None,
        env: Optional[Mapping[str, str]] = None,
        system_properties: Optional[Mapping[str, str]] = None,
        environment_loader: EnvironmentLoader = load_environment_properties,
        resolver: PropertyResolver = resolve_placeholders,
    ):
        self.cli_properties = dict(cli_properties or {})
        self.env = dict(os.environ if env is None else env)
        self.system_properties = dict(system_properties or {})
        self._environment_loader = environment_loader
        self._resolver = resolver
        self.start_time_ms = int(time.time() * 1000)

    def properties(self) -> Dict[str, str]:
        """
        Build the final, flattened property bag.

        Raises:
            ConfigurationError: If any settings file or base directory is invalid.
        """
        environment_properties = self._environment_loader(self.env)
        known = merge_with_precedence(
            self.system_properties, environment_properties, self.cli_properties
        )

        result = merge_with_precedence(
            self._load_global_properties(known),
            self._load_project_properties(known),
            self.system_properties,
            environment_properties,
            self.cli_properties,
        )
        result = self._resolver(result, self.env)

        # root project base directory must be present and be absolute
        result[PROPERTY_PROJECT_BASEDIR] = str(resolve_root_base_dir(result))
        result.pop(PROJECT_HOME, None)

        result[BOOTSTRAP_START_TIME] = str(self.start_time_ms)
        return result

    def _load_global_properties(self, known: Mapping[str, str]) -> Dict[str, str]:
        settings_file = locate_global_settings_file(known)
        global_props = load_properties_if_present(settings_file) if settings_file else None
        if global_props is None:
            logger.info("Scanner configuration file: NONE")
            return {}
        logger.info(f"Scanner configuration file: {settings_file}")
        return global_props

    def _load_project_properties(self, known: Mapping[str, str]) -> Dict[str, str]:
        default_settings_file = resolve_root_base_dir(known) / SONAR_PROJECT_PROPERTIES_FILENAME
        settings_file = locate_settings_file(known, PROJECT_SETTINGS, default_settings_file)
        root_file_props = load_properties_if_present(settings_file)

        loaded_files = []
        if root_file_props is None:
            logger.info("Project root configuration file: NONE")
            root_file_props = {}
        else:
            logger.info(f"Project root configuration file: {settings_file}")
            loaded_files.append(Path(settings_file).resolve())

        # overridden by any properties found in module settings files
        project_props = dict(root_file_props)

        root_props = merge_with_precedence(root_file_props, known)
        root_props[PROPERTY_PROJECT_BASEDIR] = str(resolve_root_base_dir(root_props))

        expand_modules(root_props, project_props, "", loaded_files)
        return project_props
