class MCPJiraError(Exception):
    """Base exception for MCP Jira legacy errors."""

    pass


class JiraConnectionError(MCPJiraError):
    """Raised when the Jira server cannot be reached (network, DNS, TLS)."""

    pass


class JiraApiError(MCPJiraError):
    """Raised when Jira answers with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MCPJiraAuthenticationError(JiraApiError):
    """Raised when Jira authentication fails (401/403)."""

    pass
