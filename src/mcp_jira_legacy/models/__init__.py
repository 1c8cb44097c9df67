"""
Pydantic models for the MCP Jira legacy integration.
"""

from .base import ApiModel
from .jira import (
    JiraIssue,
    JiraProject,
    JiraProjectDetail,
    JiraProjectList,
    JiraProjectVersion,
    JiraSearchIssue,
    JiraSearchResult,
)

__all__ = [
    "ApiModel",
    "JiraIssue",
    "JiraProject",
    "JiraProjectDetail",
    "JiraProjectList",
    "JiraProjectVersion",
    "JiraSearchIssue",
    "JiraSearchResult",
]
