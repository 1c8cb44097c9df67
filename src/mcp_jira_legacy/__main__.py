"""Entry point for running the MCP Jira legacy server."""

from mcp_jira_legacy import main

if __name__ == "__main__":
    main()
