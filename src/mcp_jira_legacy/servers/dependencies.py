"""Dependency provider for JiraFetcher.

Provides get_jira_fetcher for use in tool functions.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from mcp_jira_legacy.jira import JiraConfig, JiraFetcher
from mcp_jira_legacy.servers.context import MainAppContext

logger = logging.getLogger("mcp-jira-legacy.servers.dependencies")


def _get_app_context(ctx: Context) -> MainAppContext | None:
    lifespan_ctx_dict = ctx.request_context.lifespan_context
    if isinstance(lifespan_ctx_dict, dict):
        app_ctx = lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(app_ctx, MainAppContext):
            return app_ctx
    return None


async def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Returns a JiraFetcher built from the configuration held by the lifespan context.

    Falls back to the environment when the server runs without the main lifespan.
    """
    app_ctx = _get_app_context(ctx)
    config = app_ctx.jira_config if app_ctx and app_ctx.jira_config else None
    if config is None:
        logger.debug("get_jira_fetcher: no lifespan config, loading from environment.")
        config = JiraConfig.from_env()
    return JiraFetcher(config=config)
