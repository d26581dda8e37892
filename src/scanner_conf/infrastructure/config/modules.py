from __future__ import annotations

"""
@meta
name: module_tree_builder
type: utility
domain: config
responsibility:
  - Expand the sonar.modules list into a tree of module configurations
  - Resolve each module base directory and settings file
  - Flatten module properties into prefixed keys
inputs:
  - Root property bag with an absolute sonar.projectBaseDir
  - Module settings files (sonar-project.properties)
outputs:
  - Flattened, prefixed properties written into an accumulator
tags:
  - utility
  - config
  - modules
lifecycle:
  status: active
"""
import logging
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional, Sequence, Tuple

from scanner_conf.common.shared.properties_utils import (
    load_properties,
    parse_list_property,
)
from scanner_conf.constants import (
    MAX_MODULE_DEPTH,
    PROPERTY_MODULES,
    PROPERTY_PROJECT_BASEDIR,
    PROPERTY_PROJECT_CONFIG_FILE,
    SONAR_PROJECT_PROPERTIES_FILENAME,
)
from scanner_conf.exceptions import CyclicModuleError, ModuleConfigFileError
from scanner_conf.infrastructure.paths import (
    is_same_directory,
    require_directory,
    resolve_absolute,
)

logger = logging.getLogger(__name__)


def extract_module_properties(module_id: str, properties: Mapping[str, str]) -> Dict[str, str]:
    """
    Collect the properties addressed to one module.

    Args:
        module_id: Module identifier.
        properties: Parent property bag.

    Returns:
        New bag holding every ``<module_id>.<key>`` entry as ``<key>``.
    """
    property_prefix = f"{module_id}."
    return {
        key[len(property_prefix):]: value
        for key, value in properties.items()
        if key.startswith(property_prefix)
    }


def _set_module_base_dir(base_dir: Path, module_props: Dict[str, str], module_id: str) -> None:
    require_directory(base_dir, module_id)
    module_props[PROPERTY_PROJECT_BASEDIR] = str(base_dir)


def _check_not_cyclic(
    settings_file: Path,
    module_props: Mapping[str, str],
    module_id: str,
    loaded_files: Tuple[Path, ...],
) -> Path:
    """
    Return the canonical path of ``settings_file`` once merged into ``module_props``.

    Reloading an ancestor's file is only a cycle when the merged bag declares
    modules again; a file without modules ends the recursion.
    """
    canonical = settings_file.resolve()
    if canonical in loaded_files and parse_list_property(module_props, PROPERTY_MODULES):
        chain = " -> ".join(str(path) for path in loaded_files + (canonical,))
        raise CyclicModuleError(
            f"Cyclic module reference detected for module '{module_id}': {chain}"
        )
    return canonical


def _try_to_find_and_load(
    base_dir: Path,
    module_props: Dict[str, str],
    module_id: str,
    loaded_files: Tuple[Path, ...],
) -> Optional[Path]:
    settings_file = base_dir / SONAR_PROJECT_PROPERTIES_FILENAME
    if not settings_file.is_file():
        return None

    logger.debug(f"Module '{module_id}' configuration file: {settings_file}")
    # Properties from the module's own file win over inherited ones
    module_props.update(load_properties(settings_file))
    canonical = _check_not_cyclic(settings_file, module_props, module_id, loaded_files)
    if PROPERTY_PROJECT_BASEDIR in module_props:
        overridden = resolve_absolute(module_props[PROPERTY_PROJECT_BASEDIR], settings_file.parent)
        _set_module_base_dir(overridden, module_props, module_id)
    return canonical


def _load_module_config_file(
    parent_base_dir: Path,
    module_props: Dict[str, str],
    module_id: str,
    loaded_files: Tuple[Path, ...],
) -> Path:
    settings_file = resolve_absolute(module_props[PROPERTY_PROJECT_CONFIG_FILE], parent_base_dir)
    if not settings_file.is_file():
        raise ModuleConfigFileError(
            f"The properties file of the module '{module_id}' does not exist: {settings_file}"
        )

    logger.debug(f"Module '{module_id}' configuration file: {settings_file}")
    module_props.update(load_properties(settings_file))
    canonical = _check_not_cyclic(settings_file, module_props, module_id, loaded_files)

    if PROPERTY_PROJECT_BASEDIR in module_props:
        base_dir = resolve_absolute(module_props[PROPERTY_PROJECT_BASEDIR], settings_file.parent)
    else:
        base_dir = settings_file.parent
    _set_module_base_dir(base_dir, module_props, module_id)
    return canonical


def load_module_config(
    parent_base_dir: Path,
    module_props: Dict[str, str],
    module_id: str,
    loaded_files: Tuple[Path, ...] = (),
) -> Optional[Path]:
    """
    Resolve a module base directory and merge its settings file into ``module_props``.

    Exactly one rule applies, in this order:

    1. ``sonar.projectBaseDir`` set for the module: resolved against the
       parent base directory. A ``sonar-project.properties`` found there is
       merged unless the directory is the parent's own base directory.
    2. ``sonar.projectConfigFile`` set for the module: that file must exist
       and is merged. The base directory is the file's own
       ``sonar.projectBaseDir`` or else the file's directory. The config file
       key is removed afterwards.
    3. Otherwise the base directory is ``<parent base dir>/<module_id>`` and a
       ``sonar-project.properties`` found there is merged.

    Args:
        parent_base_dir: Absolute base directory of the parent module.
        module_props: Module property bag, updated in place.
        module_id: Module identifier, for error messages.
        loaded_files: Canonical settings files loaded by the module's ancestors.

    Returns:
        Canonical path of the settings file that was loaded, if any.

    Raises:
        BaseDirectoryError: If the resulting base directory does not exist.
        ModuleConfigFileError: If an explicit config file does not exist.
        CyclicModuleError: If an ancestor's settings file is loaded again and
            declares modules.
        PropertiesLoadError: If a settings file cannot be parsed.
    """
    if PROPERTY_PROJECT_BASEDIR in module_props:
        base_dir = resolve_absolute(module_props[PROPERTY_PROJECT_BASEDIR], parent_base_dir)
        _set_module_base_dir(base_dir, module_props, module_id)
        if is_same_directory(parent_base_dir, base_dir):
            return None
        return _try_to_find_and_load(base_dir, module_props, module_id, loaded_files)

    if PROPERTY_PROJECT_CONFIG_FILE in module_props:
        loaded = _load_module_config_file(parent_base_dir, module_props, module_id, loaded_files)
        del module_props[PROPERTY_PROJECT_CONFIG_FILE]
        return loaded

    base_dir = parent_base_dir / module_id
    _set_module_base_dir(base_dir, module_props, module_id)
    return _try_to_find_and_load(base_dir, module_props, module_id, loaded_files)


def expand_modules(
    parent_props: MutableMapping[str, str],
    accumulator: MutableMapping[str, str],
    prefix: str = "",
    loaded_files: Sequence[Path] = (),
    depth: int = 0,
) -> None:
    """
    Recursively expand ``sonar.modules`` and flatten the module tree.

    For every declared module, its properties are extracted from the parent,
    its base directory and settings file are resolved, its own children are
    expanded, and finally its properties are written to ``accumulator`` under
    ``<prefix><module_id>.``. Children are always written before their
    parent's direct properties.

    Args:
        parent_props: Parent property bag; must carry an absolute
            ``sonar.projectBaseDir`` when it declares modules.
        accumulator: Flattened output, updated in place.
        prefix: Key prefix of the parent module (empty for the root project).
        loaded_files: Settings files already loaded along the ancestor chain.
        depth: Nesting level of the parent module (0 for the root project).

    Raises:
        ConfigurationError: On the first invalid module; nothing is recovered.
    """
    modules = parse_list_property(parent_props, PROPERTY_MODULES)
    if not modules:
        return

    if depth >= MAX_MODULE_DEPTH:
        raise CyclicModuleError(
            f"Cyclic module reference detected under '{prefix[:-1]}': "
            f"module tree deeper than {MAX_MODULE_DEPTH} levels"
        )

    parent_base_dir = Path(parent_props[PROPERTY_PROJECT_BASEDIR])
    ancestors = tuple(Path(path).resolve() for path in loaded_files)

    for module_id in modules:
        module_props = extract_module_properties(module_id, parent_props)
        loaded = load_module_config(parent_base_dir, module_props, module_id, ancestors)
        logger.debug(
            f"Module '{prefix}{module_id}' base directory: {module_props[PROPERTY_PROJECT_BASEDIR]}"
        )

        child_files = ancestors + (loaded,) if loaded is not None else ancestors
        expand_modules(
            module_props, accumulator, f"{prefix}{module_id}.", child_files, depth + 1
        )

        for key, value in module_props.items():
            accumulator[f"{prefix}{module_id}.{key}"] = value
