"""
Shared fixtures for hexforge tests.

Provides:
- Default and customised configurations
- A project directory with an optional config file
- An in-memory committer
"""

import json

import pytest

from hexforge.core.committer import MemoryCommitter
from hexforge.core.config import CONFIG_FILE_NAME, ScaffoldConfig, merge_config


@pytest.fixture
def default_config() -> ScaffoldConfig:
    return ScaffoldConfig()


@pytest.fixture
def make_config():
    """Build a configuration from a partial overlay over the defaults."""

    def _make(**overlay) -> ScaffoldConfig:
        return merge_config(ScaffoldConfig(), overlay)

    return _make


@pytest.fixture
def project_dir(tmp_path):
    """An empty project root."""
    return tmp_path


@pytest.fixture
def write_config(project_dir):
    """Write a configuration file into the project root."""

    def _write(data) -> str:
        path = project_dir / CONFIG_FILE_NAME
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def memory_committer() -> MemoryCommitter:
    return MemoryCommitter()
