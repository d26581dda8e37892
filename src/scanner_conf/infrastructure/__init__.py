"""Filesystem paths and configuration assembly."""
