"""
Test fixtures for Jira unit tests.

The atlassian ``Jira`` client is replaced by a MagicMock whose ``get``
returns fake ``requests.Response`` objects built by ``make_response``.
"""

import json
import os
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from mcp_jira_legacy.jira import JiraClient, JiraConfig, JiraFetcher
from tests.fixtures.jira_mocks import MOCK_JIRA_BASE_URL


def make_response(
    body: Any = None,
    status_code: int = 200,
    text: str | None = None,
) -> MagicMock:
    """
    Build a fake ``requests.Response``.

    Args:
        body: JSON-serializable payload; ignored when ``text`` is given
        status_code: HTTP status code
        text: Raw response body

    Returns:
        MagicMock with ``ok``, ``status_code``, ``text`` and ``json()``
    """
    if text is None:
        text = "" if body is None else json.dumps(body)

    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    response.json.side_effect = lambda: json.loads(text)
    return response


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Example:
        def test_config(jira_config_factory):
            config = jira_config_factory(url="https://other.example.com/")
            assert config.url == "https://other.example.com"
    """

    def _create_config(**overrides):
        defaults = {
            "url": MOCK_JIRA_BASE_URL,
            "username": "test_username",
            "password": "test_password",
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def mock_config(jira_config_factory):
    """Standard JiraConfig for tests that need no customization."""
    return jira_config_factory()


@pytest.fixture
def jira_auth_environment():
    """Environment variables for a complete basic auth configuration."""
    jira_env = {
        "JIRA_BASE_URL": f"{MOCK_JIRA_BASE_URL}/",
        "JIRA_USERNAME": "env_user",
        "JIRA_PASSWORD": "env_password",
    }
    with patch.dict(os.environ, jira_env, clear=False):
        yield jira_env


# ============================================================================
# Client Instance Fixtures
# ============================================================================


@pytest.fixture
def mock_atlassian_jira():
    """Mock of the atlassian Jira client; tests set ``get`` responses."""
    mock_jira = MagicMock()
    mock_jira.get.return_value = make_response({})
    return mock_jira


@pytest.fixture
def jira_client(mock_config, mock_atlassian_jira):
    """JiraClient with the atlassian client replaced by a mock."""
    client = JiraClient(config=mock_config)
    client.jira = mock_atlassian_jira
    return client


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """JiraFetcher with the atlassian client replaced by a mock."""
    fetcher = JiraFetcher(config=mock_config)
    fetcher.jira = mock_atlassian_jira
    return fetcher
