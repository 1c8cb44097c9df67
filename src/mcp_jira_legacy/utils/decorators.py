import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from fastmcp.exceptions import ToolError

from mcp_jira_legacy.exceptions import MCPJiraError
from mcp_jira_legacy.logging_config import log_operation

logger = logging.getLogger("mcp-jira-legacy.tools")


F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_tool_errors(func: F) -> F:
    """
    Decorator for FastMCP tools that scopes logging to the call and turns
    any failure into a tool error.

    The exception message is returned to the caller as an error-flagged
    text result (``Error: <message>``) instead of a protocol-level fault.
    The failure itself is logged by the operation context; unexpected
    exceptions are logged with their traceback as well.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        tool_name = func.__name__
        with log_operation(logger, tool_name):
            try:
                return await func(*args, **kwargs)
            except ToolError:
                raise
            except MCPJiraError as e:
                raise ToolError(f"Error: {e}") from e
            except Exception as e:
                logger.exception(f"Unexpected error in tool '{tool_name}':")
                raise ToolError(f"Error: {e}") from e

    return wrapper  # type: ignore
