"""Property bag merging with explicit precedence."""

from .merging import merge_with_precedence

__all__ = [
    "merge_with_precedence",
]
