"""Main FastMCP server setup for the legacy Jira integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_jira_legacy.jira.config import JiraConfig
from mcp_jira_legacy.utils.logging import mask_sensitive

from .context import MainAppContext
from .jira import jira_mcp

logger = logging.getLogger("mcp-jira-legacy.server.main")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Main Jira legacy MCP server lifespan starting...")

    jira_config = JiraConfig.from_env()
    if not jira_config.url:
        logger.warning(
            "JIRA_BASE_URL is not set; every tool call will fail to connect."
        )
    if not jira_config.has_credentials:
        logger.warning(
            "JIRA_USERNAME or JIRA_PASSWORD is not set; Jira will reject requests."
        )
    logger.info(
        f"Jira configuration loaded: url={jira_config.url or 'Not Provided'}, "
        f"username={jira_config.username or 'Not Provided'}, "
        f"password={mask_sensitive(jira_config.password)}, "
        f"ssl_verify={jira_config.ssl_verify}"
    )

    app_context = MainAppContext(jira_config=jira_config)
    try:
        yield {"app_lifespan_context": app_context}
    finally:
        logger.info("Main Jira legacy MCP server lifespan shutdown complete.")


main_mcp = FastMCP(name="Jira Legacy MCP", lifespan=main_lifespan)
main_mcp.mount(jira_mcp)


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)
