"""
@meta
name: scanner_conf_cli
type: script
domain: config
responsibility:
  - Parse command-line property definitions
  - Resolve and print the scanner configuration
inputs:
  - Command-line arguments
  - Settings files and environment
outputs:
  - Flattened configuration on stdout
tags:
  - cli
  - config
lifecycle:
  status: active
"""

"""Command-line entry point printing the resolved scanner configuration."""

import argparse
import logging
import sys
from typing import List, Optional

from scanner_conf.common.shared.argument_parsing import (
    add_define_argument,
    add_output_arguments,
    parse_defines,
)
from scanner_conf.common.shared.logging_utils import (
    PACKAGE_LOGGER_NAME,
    get_logger,
    get_script_logger,
)
from scanner_conf.common.shared.properties_utils import dump_properties
from scanner_conf.common.shared.yaml_utils import dump_yaml
from scanner_conf.exceptions import ConfigurationError
from scanner_conf.infrastructure.config import ScannerConfiguration

SCRIPT_NAME = "scanner-conf"


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the scanner configuration dump.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog=SCRIPT_NAME,
        description="Resolve the scanner configuration and print it",
    )
    add_define_argument(parser)
    add_output_arguments(parser)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    level = logging.DEBUG if args.debug else logging.INFO
    get_logger(PACKAGE_LOGGER_NAME, level)
    logger = get_script_logger(SCRIPT_NAME)

    try:
        cli_properties = parse_defines(args.defines)
        properties = ScannerConfiguration(cli_properties=cli_properties).properties()
    except (ConfigurationError, ValueError) as e:
        logger.error(str(e))
        if args.debug:
            logger.exception("Configuration resolution failed")
        return 1

    ordered = dict(sorted(properties.items()))
    output = dump_yaml(ordered) if args.format == "yaml" else dump_properties(ordered)
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
