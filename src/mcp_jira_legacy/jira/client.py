"""Base client module for Jira API interactions."""

import logging
from typing import Any

import requests
from atlassian import Jira
from requests.auth import HTTPBasicAuth

from ..exceptions import (
    JiraApiError,
    JiraConnectionError,
    MCPJiraAuthenticationError,
    MCPJiraError,
)
from .config import JiraConfig

# Legacy servers (4.x) only expose the unversioned REST root.
REST_API_PREFIX = "rest/api/latest"

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# Configure logging
logger = logging.getLogger("mcp-jira-legacy.jira")


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.
        """
        if config is None:
            self.config = JiraConfig.from_env()
        else:
            self.config = config

        self.jira = Jira(
            url=self.config.url,
            username=self.config.username,
            password=self.config.password,
            cloud=False,
            verify_ssl=self.config.ssl_verify,
        )
        # Basic header on every request, also when a credential is empty
        self.jira._session.auth = HTTPBasicAuth(
            self.config.username, self.config.password
        )

    @property
    def base_url(self) -> str:
        return self.config.url

    def _request(
        self,
        path: str,
        headers: dict[str, str],
        error_label: str = "Jira API error",
    ) -> requests.Response:
        """Perform a GET request and translate transport and status failures.

        Args:
            path: Path relative to the base URL, query string included
            headers: Request headers
            error_label: Prefix for the message of a non-success status

        Returns:
            The successful response

        Raises:
            JiraConnectionError: If the request did not reach the server
            MCPJiraAuthenticationError: If the server answered 401 or 403
            JiraApiError: If the server answered with any other non-success status
        """
        logger.debug(f"GET {path}")
        try:
            response = self.jira.get(path, headers=headers, advanced_mode=True)
        except requests.RequestException as e:
            logger.warning(f"Jira request to {path} failed: {e}")
            raise JiraConnectionError(f"Jira connection failed: {e}") from e

        if not response.ok:
            body = response.text
            error_msg = f"{error_label} ({response.status_code}): {body}"
            logger.warning(error_msg)
            if response.status_code in (401, 403):
                raise MCPJiraAuthenticationError(error_msg, response.status_code, body)
            raise JiraApiError(error_msg, response.status_code, body)

        return response

    def _get_json(self, endpoint: str) -> Any:
        """Fetch a REST endpoint and decode its JSON body.

        Args:
            endpoint: Endpoint below the REST root, e.g. ``/project``

        Returns:
            The decoded JSON, or an empty dict for an empty body

        Raises:
            MCPJiraError: If the body is not valid JSON
        """
        response = self._request(f"{REST_API_PREFIX}{endpoint}", headers=JSON_HEADERS)
        if not response.text:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise MCPJiraError(f"Invalid JSON from Jira: {e}") from e
