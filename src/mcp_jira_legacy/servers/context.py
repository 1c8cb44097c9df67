from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_jira_legacy.jira.config import JiraConfig


@dataclass(frozen=True)
class MainAppContext:
    """Context holding the configuration built once at startup (no fetchers)."""

    jira_config: JiraConfig | None = None
