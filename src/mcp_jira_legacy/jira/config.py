"""Configuration module for Jira API interactions."""

import os
from dataclasses import dataclass

from ..utils.env import is_env_ssl_verify
from ..utils.urls import normalize_base_url


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Legacy Jira (4.x) servers only accept basic authentication, so the
    configuration is a base URL plus a username/password pair. Missing
    values are kept as empty strings and still sent as a Basic header, so
    the server rejects requests with a predictable authentication error.
    """

    url: str = ""  # Base URL for Jira, without trailing slash
    username: str = ""
    password: str = ""
    ssl_verify: bool = True  # Whether to verify SSL certificates

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", normalize_base_url(self.url))

    @property
    def has_credentials(self) -> bool:
        """Check whether both username and password are configured."""
        return bool(self.username and self.password)

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Reads ``JIRA_BASE_URL``, ``JIRA_USERNAME``, ``JIRA_PASSWORD`` and
        ``JIRA_SSL_VERIFY``. Never raises for missing values.

        Returns:
            JiraConfig with values from environment variables
        """
        return cls(
            url=os.getenv("JIRA_BASE_URL", ""),
            username=os.getenv("JIRA_USERNAME", ""),
            password=os.getenv("JIRA_PASSWORD", ""),
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
        )
