"""Core value processing applied to the merged configuration."""

from .placeholders import (
    extract_placeholders,
    resolve_placeholders,
)

__all__ = [
    "extract_placeholders",
    "resolve_placeholders",
]
