"""Shared pytest fixtures for simplelist tests."""

import os
import tempfile

# Keep config and log files out of the real home directory. Must run before
# simplelist.config.constants is imported.
os.environ.setdefault("SIMPLELIST_CONFIG_DIR", tempfile.mkdtemp(prefix="simplelist-test-"))

import pytest  # noqa: E402

from simplelist.models.person import Person, PersonList, sample_people  # noqa: E402


@pytest.fixture
def ui_config_path(tmp_path, monkeypatch):
    """Point the UI config at a fresh file under tmp_path."""
    config_path = tmp_path / "ui_config.json"
    monkeypatch.setattr(
        "simplelist.config.ui_config.get_ui_config_path",
        lambda: config_path,
    )
    return config_path


@pytest.fixture
def ten_people() -> PersonList:
    return sample_people(10)


@pytest.fixture
def empty_people() -> PersonList:
    return PersonList()


@pytest.fixture
def andrew() -> Person:
    return Person("Andrew", 18, "")
