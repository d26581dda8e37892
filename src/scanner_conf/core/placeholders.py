"""Placeholder substitution for ``${name}`` patterns in property values."""

import re
from typing import Dict, List, Mapping, Optional, Set

from scanner_conf.exceptions import PlaceholderCycleError


_PLACEHOLDER_RE = re.compile(r"\$\{([\w.]+)\}")
ENV_PREFIX = "env."


def extract_placeholders(value: str) -> Set[str]:
    """
    Extract placeholder names from a property value.

    Args:
        value: Property value containing placeholders like '${sonar.host}'

    Returns:
        Set of placeholder names found in the value

    Examples:
        >>> extract_placeholders("${sonar.projectKey}-${env.BRANCH}")
        {'sonar.projectKey', 'env.BRANCH'}
    """
    return set(_PLACEHOLDER_RE.findall(value))


class _Resolver:
    def __init__(self, properties: Mapping[str, str], env: Mapping[str, str]):
        self._properties = properties
        self._env = env
        self._resolved: Dict[str, str] = {}

    def resolve_key(self, key: str, chain: List[str]) -> str:
        if key in self._resolved:
            return self._resolved[key]

        value = self._properties.get(key, "")
        if not _PLACEHOLDER_RE.search(value):
            return value

        def substitute(match: "re.Match[str]") -> str:
            name = match.group(1)
            if name.startswith(ENV_PREFIX):
                return self._env.get(name[len(ENV_PREFIX):], "")
            if name in chain:
                cycle = " -> ".join(chain + [name])
                raise PlaceholderCycleError(
                    f"Found a cycle resolving key '{chain[0]}': {cycle}"
                )
            return self.resolve_key(name, chain + [name])

        resolved = _PLACEHOLDER_RE.sub(substitute, value)
        self._resolved[key] = resolved
        return resolved


def resolve_placeholders(
    properties: Mapping[str, str],
    env: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Substitute ``${...}`` references in every value of a property bag.

    ``${env.NAME}`` is replaced by the environment variable ``NAME`` and
    ``${key}`` by the (recursively resolved) value of ``key`` in the bag.
    Unknown references become empty strings.

    Args:
        properties: Merged property bag.
        env: Environment mapping used for ``env.`` references.

    Returns:
        New property bag with the same keys, in the same order.

    Raises:
        PlaceholderCycleError: If a value refers back to itself, directly or
            through other keys.
    """
    resolver = _Resolver(properties, env or {})
    return {key: resolver.resolve_key(key, [key]) for key in properties}
