"""Shared pytest configuration."""

import pytest


@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio, the backend FastMCP requires."""
    return "asyncio"
