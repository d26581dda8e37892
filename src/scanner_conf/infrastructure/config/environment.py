from __future__ import annotations

"""
@meta
name: environment_properties
type: utility
domain: config
responsibility:
  - Harvest scanner properties from the process environment
  - Decode SONAR_SCANNER_JSON_PARAMS
inputs:
  - Process environment
outputs:
  - Property bag with recognized keys
tags:
  - utility
  - config
  - environment
lifecycle:
  status: active
"""
import json
import logging
import os
from typing import Dict, Mapping, Optional

from scanner_conf.constants import SCANNER_HOME
from scanner_conf.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

JSON_PARAMS_VARIABLE = "SONAR_SCANNER_JSON_PARAMS"

# Individual variables win over the same key in the JSON params.
ENVIRONMENT_VARIABLE_KEYS: Dict[str, str] = {
    "SONAR_HOST_URL": "sonar.host.url",
    "SONAR_TOKEN": "sonar.token",
    "SONAR_USER_HOME": "sonar.userHome",
    "SONAR_REGION": "sonar.region",
    "SONAR_SCANNER_HOME": SCANNER_HOME,
}


def _load_json_params(raw: str) -> Dict[str, str]:
    try:
        params = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Failed to parse JSON properties from environment variable '{JSON_PARAMS_VARIABLE}'"
        ) from e
    if not isinstance(params, dict):
        raise ConfigurationError(
            f"Environment variable '{JSON_PARAMS_VARIABLE}' must hold a JSON object"
        )
    return {str(key): value for key, value in params.items() if isinstance(value, str)}


def load_environment_properties(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Build the environment property layer.

    Args:
        environ: Environment mapping (default: ``os.environ``).

    Returns:
        Properties derived from recognized environment variables.

    Raises:
        ConfigurationError: If ``SONAR_SCANNER_JSON_PARAMS`` is not a JSON object.
    """
    environ = os.environ if environ is None else environ
    properties: Dict[str, str] = {}

    raw_params = environ.get(JSON_PARAMS_VARIABLE, "")
    if raw_params:
        properties.update(_load_json_params(raw_params))

    for variable, key in ENVIRONMENT_VARIABLE_KEYS.items():
        value = environ.get(variable, "")
        if value:
            properties[key] = value

    if properties:
        logger.debug(f"Loaded {len(properties)} properties from the environment")
    return properties
