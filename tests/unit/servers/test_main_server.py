"""Tests for the main MCP server implementation."""

import logging
import os
from unittest.mock import MagicMock, patch

import httpx
import pytest
from fastmcp import Client
from fastmcp.client import FastMCPTransport
from starlette.requests import Request

from mcp_jira_legacy.jira.config import JiraConfig
from mcp_jira_legacy.servers.context import MainAppContext
from mcp_jira_legacy.servers.main import health_check, main_lifespan, main_mcp


@pytest.mark.anyio
async def test_run_server_invalid_transport():
    """Test that run_async raises ValueError for invalid transport."""
    with pytest.raises(ValueError) as excinfo:
        await main_mcp.run_async(transport="invalid")  # type: ignore

    assert "Unknown transport" in str(excinfo.value)


@pytest.mark.anyio
async def test_health_check_handler():
    response = await health_check(MagicMock(spec=Request))
    assert response.status_code == 200
    assert response.body == b'{"status":"ok"}'


@pytest.mark.anyio
@pytest.mark.parametrize("transport", ["sse", "streamable-http"])
async def test_health_check_endpoint(transport):
    """Test the /healthz endpoint returns 200 and correct JSON response."""
    app = main_mcp.http_app(transport=transport)
    http_transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=http_transport, base_url="http://test"
    ) as client:
        response = await client.get("/healthz")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_mounted_tools_keep_their_names():
    """The Jira sub-server is mounted without a prefix."""
    with patch.dict(os.environ, {}, clear=True):
        async with Client(transport=FastMCPTransport(main_mcp)) as client:
            tools = await client.list_tools()

    assert sorted(tool.name for tool in tools) == [
        "get_jira_issue",
        "get_jira_project",
        "list_jira_projects",
        "search_jira_issues",
    ]


@pytest.mark.anyio
async def test_lifespan_loads_config_from_env(caplog):
    env = {
        "JIRA_BASE_URL": "https://jira.example.com/",
        "JIRA_USERNAME": "user",
        "JIRA_PASSWORD": "supersecretpassword",
        "JIRA_SSL_VERIFY": "false",
    }
    with (
        patch.dict(os.environ, env, clear=True),
        caplog.at_level(logging.INFO, logger="mcp-jira-legacy.server.main"),
    ):
        async with main_lifespan(main_mcp) as lifespan_context:
            app_context = lifespan_context["app_lifespan_context"]

    assert isinstance(app_context, MainAppContext)
    assert app_context.jira_config == JiraConfig(
        url="https://jira.example.com",
        username="user",
        password="supersecretpassword",
        ssl_verify=False,
    )
    assert "supersecretpassword" not in caplog.text
    assert "supe***********word" in caplog.text


@pytest.mark.anyio
async def test_lifespan_warns_on_missing_config(caplog):
    with (
        patch.dict(os.environ, {}, clear=True),
        caplog.at_level(logging.WARNING, logger="mcp-jira-legacy.server.main"),
    ):
        async with main_lifespan(main_mcp) as lifespan_context:
            assert lifespan_context["app_lifespan_context"].jira_config.url == ""

    assert "JIRA_BASE_URL is not set" in caplog.text
    assert "JIRA_USERNAME or JIRA_PASSWORD is not set" in caplog.text
