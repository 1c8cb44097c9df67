"""
Utility functions for the MCP Jira legacy integration.
"""

from .env import is_env_ssl_verify
from .logging import mask_sensitive
from .urls import browse_link, encode_uri_component, normalize_base_url

__all__ = [
    "browse_link",
    "encode_uri_component",
    "is_env_ssl_verify",
    "mask_sensitive",
    "normalize_base_url",
]
