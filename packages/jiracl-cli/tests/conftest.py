"""Shared fixtures for jiracl-cli tests."""

import json

import pytest
from typer.testing import CliRunner

from jiracl_cli.config.settings import get_settings


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Point the CLI at an empty home directory."""
    monkeypatch.setenv("JIRACL_HOME_DIR", str(tmp_path))
    monkeypatch.delenv("JIRACL_CONFIG_FILE_NAME", raising=False)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def config_file(config_home):
    """Write a config file and return its path."""
    path = config_home / ".jira-cl.json"
    path.write_text(
        json.dumps({
            "protocol": "https",
            "host": "a.atlassian.net",
            "username": "u",
            "password": "p",
            "apiVersion": "2",
            "strictSSL": True,
        }, indent=2),
        encoding="utf-8",
    )
    return path
