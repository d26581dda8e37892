from __future__ import annotations

"""
@meta
name: properties_utils
type: utility
domain: shared
responsibility:
  - Load key/value settings files into property bags
  - Trim values after parsing
  - Split comma-separated list properties
inputs:
  - .properties files
outputs:
  - Ordered string-to-string dictionaries
tags:
  - utility
  - shared
  - loading
lifecycle:
  status: active
"""
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from jproperties import Properties, PropertyError

from scanner_conf.constants import SETTINGS_FILE_ENCODING
from scanner_conf.exceptions import PropertiesLoadError

logger = logging.getLogger(__name__)


def load_properties(path: Path) -> Dict[str, str]:
    """
    Load a ``.properties`` file from disk.

    Parsing follows Java property-file rules (``#``/``!`` comments, ``=``,
    ``:`` or whitespace separators, backslash line continuation and
    ``\\uXXXX`` escapes). The file is decoded as UTF-8 and every value is
    stripped of surrounding whitespace.

    Args:
        path: Path to a settings file.

    Returns:
        Parsed properties, in file order.

    Raises:
        PropertiesLoadError: If the file is not a regular file, cannot be
            read, or cannot be parsed.
    """
    path = Path(path)
    if not path.is_file():
        raise PropertiesLoadError(f"Fail to load file: {path}")

    parser = Properties()
    try:
        with path.open("rb") as handle:
            parser.load(handle, SETTINGS_FILE_ENCODING)
    except (OSError, UnicodeDecodeError, PropertyError) as e:
        raise PropertiesLoadError(f"Fail to load file: {path}") from e

    properties = {key: value.strip() for key, value in parser.properties.items()}
    logger.debug(f"Loaded {len(properties)} properties from {path}")
    return properties


def load_properties_if_present(path: Path) -> Optional[Dict[str, str]]:
    """Load ``path`` like :func:`load_properties`, or return None if it is not a file."""
    path = Path(path)
    if not path.is_file():
        return None
    return load_properties(path)


def parse_list_property(properties: Mapping[str, str], key: str) -> List[str]:
    """
    Transform a comma-separated list property into a list of trimmed strings.

    Empty entries are dropped and declared order is kept, so ``" a , ,b "``
    gives ``["a", "b"]``.

    Args:
        properties: Property bag to read from.
        key: Key holding the list.

    Returns:
        List of entries, empty if the key is absent or blank.
    """
    value = (properties.get(key) or "").strip()
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def dump_properties(properties: Mapping[str, str]) -> str:
    """Render a flat property bag as ``key=value`` lines."""
    return "".join(f"{key}={value}\n" for key, value in properties.items())
