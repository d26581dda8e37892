"""Shared utilities used by the configuration layer and the CLI."""
