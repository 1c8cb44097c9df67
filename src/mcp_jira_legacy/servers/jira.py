"""Jira FastMCP server instance and tool definitions."""

import json
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira_legacy.models.constants import JIRA_DEFAULT_MAX_RESULTS
from mcp_jira_legacy.servers.dependencies import get_jira_fetcher
from mcp_jira_legacy.utils.decorators import handle_tool_errors

jira_mcp = FastMCP(
    name="Jira Legacy MCP Service",
    instructions="Provides read-only tools for a legacy (4.x) Jira server.",
)


def _render(preamble: str, data: dict[str, Any]) -> str:
    """Join a human-readable preamble and the JSON payload into the tool text."""
    return f"{preamble}\n\n{json.dumps(data, indent=2, ensure_ascii=False)}"


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Search Jira Issues", "readOnlyHint": True},
)
@handle_tool_errors
async def search_jira_issues(
    ctx: Context,
    jql: Annotated[
        str,
        Field(
            description=(
                "Jira Query Language (JQL) query. Dates must be string literals, "
                'e.g. created >= "2025-09-30"'
            )
        ),
    ],
    maxResults: Annotated[  # noqa: N803
        int,
        Field(
            description=f"Maximum number of results (default: {JIRA_DEFAULT_MAX_RESULTS})",
            default=JIRA_DEFAULT_MAX_RESULTS,
            ge=1,
        ),
    ] = JIRA_DEFAULT_MAX_RESULTS,
) -> str:
    """Search Jira issues using JQL, e.g. 'project = PROJ AND status = Open'.

    Important: the server runs Jira 4.x, which does not support newer JQL
    functions such as startOfDay(), endOfDay() or now(). Date conditions must
    use string literals such as 'created >= "2025-09-30"' or
    'created >= "2025/09/30"'.

    Args:
        ctx: The FastMCP context.
        jql: JQL query string.
        maxResults: Maximum number of results.

    Returns:
        Text with the Jira base URL followed by the JSON search result.
    """
    jira = await get_jira_fetcher(ctx)
    result = jira.search_issues(jql=jql, max_results=maxResults)

    data = result.to_simplified_dict()
    data["total"] = result.total or len(result.issues)
    data["maxResults"] = result.max_results or maxResults

    preamble = (
        "Jira issue search results.\n"
        "Use the 'link' field of each issue for its exact URL.\n"
        f"Jira Base URL: {jira.base_url}"
    )
    return _render(preamble, data)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Jira Issue", "readOnlyHint": True},
)
@handle_tool_errors
async def get_jira_issue(
    ctx: Context,
    issueKey: Annotated[  # noqa: N803
        str,
        Field(description="Issue key (e.g. PROJ-123)", min_length=1),
    ],
) -> str:
    """Get the details of a specific Jira issue.

    Args:
        ctx: The FastMCP context.
        issueKey: Jira issue key.

    Returns:
        Text with the exact issue link followed by the JSON issue.
    """
    jira = await get_jira_fetcher(ctx)
    issue = jira.get_issue(issueKey)

    preamble = f"Jira issue details.\nExact link: {issue.link}"
    return _render(preamble, issue.to_simplified_dict())


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Jira Projects", "readOnlyHint": True},
)
@handle_tool_errors
async def list_jira_projects(ctx: Context) -> str:
    """List all Jira projects the configured user can access.

    Args:
        ctx: The FastMCP context.

    Returns:
        Text with the Jira base URL followed by the JSON project list.
    """
    jira = await get_jira_fetcher(ctx)
    projects = jira.get_all_projects()

    preamble = f"Jira project list.\nJira Base URL: {jira.base_url}"
    return _render(preamble, projects.to_simplified_dict())


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Jira Project", "readOnlyHint": True},
)
@handle_tool_errors
async def get_jira_project(
    ctx: Context,
    projectKey: Annotated[  # noqa: N803
        str,
        Field(description="Project key (e.g. PROJ)", min_length=1),
    ],
) -> str:
    """Get the details of a specific Jira project, including versions and components.

    Args:
        ctx: The FastMCP context.
        projectKey: Jira project key.

    Returns:
        Text with the exact project link followed by the JSON project.
    """
    jira = await get_jira_fetcher(ctx)
    project = jira.get_project(projectKey)

    preamble = f"Jira project details.\nExact link: {project.link}"
    return _render(preamble, project.to_simplified_dict())
