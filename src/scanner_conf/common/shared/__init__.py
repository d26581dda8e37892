"""Shared helpers: logging, settings file loading, output rendering."""

from .logging_utils import get_logger, get_script_logger
from .properties_utils import (
    dump_properties,
    load_properties,
    load_properties_if_present,
    parse_list_property,
)
from .yaml_utils import dump_yaml

__all__ = [
    "get_logger",
    "get_script_logger",
    "load_properties",
    "load_properties_if_present",
    "parse_list_property",
    "dump_properties",
    "dump_yaml",
]
