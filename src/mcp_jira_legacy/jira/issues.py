"""Module for Jira issue operations."""

from urllib.parse import quote

from ..models.jira import JiraIssue
from .client import JiraClient


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str) -> JiraIssue:
        """
        Get a Jira issue by key.

        Args:
            issue_key: The issue key (e.g., PROJECT-123)

        Returns:
            JiraIssue model with all fields resolved to their display values

        Raises:
            JiraConnectionError: If Jira cannot be reached
            JiraApiError: If Jira answers with an error status
        """
        issue = self._get_json(f"/issue/{quote(issue_key, safe='')}")
        return JiraIssue.from_api_response(issue, base_url=self.base_url)
