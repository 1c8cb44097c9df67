"""
Jira project models.

This module provides Pydantic models for ``/rest/api/latest/project`` (the
project list) and ``/rest/api/latest/project/{key}`` (a single project).
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import EMPTY_STRING, UNKNOWN
from ..extract import as_text, name_list, resolve_user, safe_get
from ...utils.urls import browse_link

logger = logging.getLogger(__name__)


class JiraProject(ApiModel):
    """
    Model representing a Jira project as it appears in the project list.
    """

    key: str = EMPTY_STRING
    name: str = EMPTY_STRING
    link: str = EMPTY_STRING
    lead: str = UNKNOWN
    description: str = EMPTY_STRING

    @classmethod
    def _common_fields(cls, data: Mapping[str, Any], base_url: str) -> dict[str, Any]:
        key = as_text(data.get("key"))
        return {
            "key": key,
            "name": as_text(data.get("name")),
            "link": browse_link(base_url, key),
            "lead": resolve_user(data, "lead", UNKNOWN),
            "description": as_text(data.get("description")),
        }

    @classmethod
    def from_api_response(cls, data: Any, **kwargs: Any) -> "JiraProject":
        """
        Create a JiraProject from a Jira API response.

        Args:
            data: The project data from the Jira API
            **kwargs: ``base_url`` is used to build the browse link

        Returns:
            A JiraProject instance
        """
        if not isinstance(data, Mapping):
            logger.debug("Received non-dictionary data, returning default instance")
            data = {}
        return cls(**cls._common_fields(data, kwargs.get("base_url", EMPTY_STRING)))

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "key": self.key,
            "name": self.name,
            "link": self.link,
            "lead": self.lead,
            "description": self.description,
        }


class JiraProjectVersion(ApiModel):
    """
    Model representing a project version.
    """

    name: str = EMPTY_STRING
    released: bool = False

    @classmethod
    def from_api_response(cls, data: Any, **kwargs: Any) -> "JiraProjectVersion":
        """Create a JiraProjectVersion from a version object."""
        released = safe_get(data, "released", False)
        return cls(
            name=as_text(safe_get(data, "name")),
            released=released is True,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {"name": self.name, "released": self.released}


class JiraProjectDetail(JiraProject):
    """
    Model representing a single Jira project with versions and components.
    """

    url: str = EMPTY_STRING
    versions: list[JiraProjectVersion] = Field(default_factory=list)
    components: list[str] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: Any, **kwargs: Any) -> "JiraProjectDetail":
        """
        Create a JiraProjectDetail from a Jira API response.

        Args:
            data: The project data from the Jira API
            **kwargs: ``base_url`` is used to build the browse link

        Returns:
            A JiraProjectDetail instance
        """
        if not isinstance(data, Mapping):
            logger.debug("Received non-dictionary data, returning default instance")
            data = {}

        versions_data = data.get("versions")
        versions = []
        if isinstance(versions_data, list):
            versions = [
                JiraProjectVersion.from_api_response(version)
                for version in versions_data
            ]

        return cls(
            **cls._common_fields(data, kwargs.get("base_url", EMPTY_STRING)),
            url=as_text(data.get("url")),
            versions=versions,
            components=name_list(data.get("components")),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "key": self.key,
            "name": self.name,
            "link": self.link,
            "description": self.description,
            "lead": self.lead,
            "url": self.url,
            "versions": [version.to_simplified_dict() for version in self.versions],
            "components": list(self.components),
        }


class JiraProjectList(ApiModel):
    """
    Model representing the list of projects visible to the user.
    """

    projects: list[JiraProject] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.projects)

    @classmethod
    def from_api_response(cls, data: Any, **kwargs: Any) -> "JiraProjectList":
        """
        Create a JiraProjectList from a Jira API response.

        Args:
            data: The JSON array returned by the project endpoint
            **kwargs: ``base_url`` is used to build browse links

        Returns:
            A JiraProjectList instance, empty if ``data`` is not a list
        """
        if not isinstance(data, list):
            logger.debug("Project list payload is not an array, returning empty list")
            return cls()

        base_url = kwargs.get("base_url", EMPTY_STRING)
        return cls(
            projects=[
                JiraProject.from_api_response(project, base_url=base_url)
                for project in data
            ]
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "total": self.total,
            "projects": [project.to_simplified_dict() for project in self.projects],
        }
