"""
@meta
name: shared_logging_utils
type: utility
domain: shared
responsibility:
  - Attach the stderr handler library loggers propagate to
  - Provide the CLI's prefixed message logger
inputs:
  - Logger names
outputs:
  - Configured logger instances
tags:
  - utility
  - shared
  - logging
lifecycle:
  status: active
"""
import logging
from typing import Optional

PACKAGE_LOGGER_NAME = "scanner_conf"
PACKAGE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _with_stream_handler(logger: logging.Logger, log_format: str) -> logging.Logger:
    # Repeated calls keep a single handler
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(handler)
        if logger.level == logging.NOTSET:
            logger.setLevel(logging.INFO)
    return logger


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Return ``name``'s logger writing timestamped records to stderr.

    Library modules log through ``logging.getLogger(__name__)``; calling this
    with :data:`PACKAGE_LOGGER_NAME` gives them the handler they propagate to.

    Args:
        name: Logger name.
        level: Level to set; INFO when the logger has none yet.
    """
    logger = _with_stream_handler(logging.getLogger(name), PACKAGE_LOG_FORMAT)
    if level is not None:
        logger.setLevel(level)
    return logger


def get_script_logger(script_name: str) -> logging.Logger:
    """Return the ``script.<script_name>`` logger, prefixing messages with the script name."""
    return _with_stream_handler(
        logging.getLogger(f"script.{script_name}"),
        f"[{script_name}] %(levelname)s %(message)s",
    )
