"""Shared property bag merging utilities."""

from typing import Dict, Mapping, Optional


def merge_with_precedence(*sources: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Merge flat property bags, later sources taking precedence.

    The sources are applied in the order given; on a key collision the value
    from the later source wins. Inputs are never modified and the first
    insertion position of a key is kept, so the result is deterministic for a
    given sequence of sources.

    The configuration facade uses the fixed order, lowest to highest:
    global settings file, project settings (including the flattened module
    tree), system properties, environment properties, CLI properties.

    Args:
        *sources: Property bags in increasing order of precedence. ``None``
            entries are skipped.

    Returns:
        New merged property bag.
    """
    result: Dict[str, str] = {}

    for source in sources:
        if not source:
            continue
        for key, value in source.items():
            result[key] = value

    return result
