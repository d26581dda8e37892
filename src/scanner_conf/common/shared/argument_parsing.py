"""Shared argument parsing utilities for the scanner CLI."""

import argparse
from typing import Dict, List, Optional


def add_define_argument(parser: argparse.ArgumentParser) -> None:
    """Add repeatable -D/--define argument to parser."""
    parser.add_argument(
        "-D",
        "--define",
        dest="defines",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Define a property (may be repeated)",
    )


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Add output and verbosity arguments to parser."""
    parser.add_argument(
        "-X",
        "--debug",
        action="store_true",
        help="Produce execution debug output",
    )
    parser.add_argument(
        "--format",
        type=str,
        default="properties",
        choices=["properties", "yaml"],
        help="Output format of the resolved configuration (default: properties)",
    )


def parse_defines(defines: Optional[List[str]]) -> Dict[str, str]:
    """
    Convert ``-D`` values into a property bag.

    A definition without ``=`` sets the key to ``"true"``. Keys and values
    are stripped; later definitions of a key win.

    Args:
        defines: Raw ``KEY=VALUE`` strings in command-line order.

    Returns:
        Property bag.

    Raises:
        ValueError: If a definition has an empty key.
    """
    properties: Dict[str, str] = {}
    for definition in defines or []:
        key, separator, value = definition.partition("=")
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid property definition: '{definition}'")
        properties[key] = value.strip() if separator else "true"
    return properties
