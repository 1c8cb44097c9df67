"""
Jira data models for the MCP Jira legacy integration.

This package provides Pydantic models that normalize legacy Jira payloads
(the RSS search feed and the REST issue/project JSON) into a fixed shape.
"""

from .issue import JiraIssue
from .project import (
    JiraProject,
    JiraProjectDetail,
    JiraProjectList,
    JiraProjectVersion,
)
from .search import JiraSearchIssue, JiraSearchResult, parse_search_feed

__all__ = [
    "JiraIssue",
    "JiraProject",
    "JiraProjectDetail",
    "JiraProjectList",
    "JiraProjectVersion",
    "JiraSearchIssue",
    "JiraSearchResult",
    "parse_search_feed",
]
