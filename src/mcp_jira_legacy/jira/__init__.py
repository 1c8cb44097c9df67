"""Jira API module for MCP Jira legacy.

This module provides the fetch layer for legacy Jira servers: one outbound
call per operation, followed by normalization into the models package.
"""

from .client import JiraClient
from .config import JiraConfig
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import SearchMixin


class JiraFetcher(
    SearchMixin,
    IssuesMixin,
    ProjectsMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - SearchMixin: JQL search through the XML feed
    - IssuesMixin: Single issue details
    - ProjectsMixin: Project list and project details
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
