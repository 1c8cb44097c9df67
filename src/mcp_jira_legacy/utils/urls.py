"""URL-related utility functions for MCP Jira legacy."""

from urllib.parse import quote

# Characters encodeURIComponent leaves untouched; Jira 4.x expects the same form.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def normalize_base_url(url: str | None) -> str:
    """Strip surrounding whitespace and trailing slashes from a base URL.

    Args:
        url: The configured base URL, possibly None

    Returns:
        The normalized URL, or an empty string
    """
    if not url:
        return ""
    return url.strip().rstrip("/")


def browse_link(base_url: str, key: str) -> str:
    """Build the human-facing browse link for an issue or project key."""
    return f"{base_url}/browse/{key}"


def encode_uri_component(value: str) -> str:
    """Percent-encode a query value the way browsers encode URI components."""
    return quote(value, safe=_URI_COMPONENT_SAFE)
