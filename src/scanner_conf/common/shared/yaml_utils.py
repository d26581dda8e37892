from __future__ import annotations

from typing import Mapping

import yaml


def dump_yaml(properties: Mapping[str, str]) -> str:
    """
    Render a flat property bag as a YAML mapping.

    Keys are emitted in the order given; values are always quoted strings so
    that numbers and booleans keep their textual form.

    Args:
        properties: Flat string-to-string mapping.

    Returns:
        YAML document as a string.
    """
    return yaml.safe_dump(
        {str(key): str(value) for key, value in properties.items()},
        sort_keys=False,
        default_flow_style=False,
        default_style='"',
        allow_unicode=True,
    )
