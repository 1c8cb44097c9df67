"""Module for Jira search operations.

Legacy Jira (4.x) has no JSON search endpoint. Searches go through the
issue navigator's XML view, which returns an RSS feed:

    GET {base}/sr/jira.issueviews:searchrequest-xml/temp/SearchRequest.xml
        ?jqlQuery=<url-encoded JQL>&tempMax=<n>

The number of returned items is bounded by ``tempMax``; there is no paging.
"""

import logging
from xml.parsers.expat import ExpatError

from ..exceptions import MCPJiraError
from ..models.constants import JIRA_DEFAULT_MAX_RESULTS
from ..models.jira import JiraSearchResult
from ..utils.urls import encode_uri_component
from .client import JiraClient

logger = logging.getLogger("mcp-jira-legacy.jira")

SEARCH_REQUEST_XML_PATH = "sr/jira.issueviews:searchrequest-xml/temp/SearchRequest.xml"

XML_HEADERS = {"Accept": "application/xml"}


class SearchMixin(JiraClient):
    """Mixin providing JQL search through the legacy XML feed."""

    def search_issues(
        self, jql: str, max_results: int = JIRA_DEFAULT_MAX_RESULTS
    ) -> JiraSearchResult:
        """
        Search for issues using JQL.

        Args:
            jql: JQL query string
            max_results: Maximum number of issues the server should return

        Returns:
            JiraSearchResult with the declared total and the returned issues

        Raises:
            JiraConnectionError: If Jira cannot be reached
            JiraApiError: If Jira answers with an error status
            MCPJiraError: If the feed is not well-formed XML
        """
        path = (
            f"{SEARCH_REQUEST_XML_PATH}"
            f"?jqlQuery={encode_uri_component(jql)}&tempMax={max_results}"
        )
        response = self._request(
            path, headers=XML_HEADERS, error_label="Jira XML search error"
        )

        try:
            result = JiraSearchResult.from_xml(response.text, base_url=self.base_url)
        except ExpatError as e:
            raise MCPJiraError(f"Jira XML search failed: {e}") from e

        logger.debug(
            f"Search returned {len(result.issues)} of {result.total} issues for JQL: {jql}"
        )
        return result
