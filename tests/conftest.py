"""Shared pytest fixtures for all tests."""

import logging
import tempfile
from pathlib import Path
from typing import Dict, Optional

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_properties():
    """Return a helper writing a ``.properties`` file from a dict or raw text."""

    def _write(path: Path, content, encoding: str = "utf-8") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, dict):
            content = "".join(f"{key}={value}\n" for key, value in content.items())
        path.write_text(content, encoding=encoding)
        return path

    return _write


@pytest.fixture
def project_dir(tmp_path, write_properties):
    """
    Return a helper creating a project directory, optionally with its settings file.

    ``project_dir("mod-a", {"sonar.language": "java"})`` creates
    ``<tmp>/mod-a/sonar-project.properties``.
    """

    def _make(relative: str = "project", properties: Optional[Dict[str, str]] = None) -> Path:
        directory = tmp_path / relative
        directory.mkdir(parents=True, exist_ok=True)
        if properties is not None:
            write_properties(directory / "sonar-project.properties", properties)
        return directory

    return _make


@pytest.fixture
def clean_sonar_env(monkeypatch):
    """Remove scanner-related variables from the process environment."""
    for name in (
        "SONAR_SCANNER_JSON_PARAMS",
        "SONAR_HOST_URL",
        "SONAR_TOKEN",
        "SONAR_USER_HOME",
        "SONAR_REGION",
        "SONAR_SCANNER_HOME",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reset_cli_loggers():
    """Detach handlers the CLI adds so they never outlive a captured stream."""
    yield
    for name in ("scanner_conf", "script.scanner-conf"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
