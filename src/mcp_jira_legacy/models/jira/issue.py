"""
Jira issue models.

This module provides the Pydantic model for a single issue as returned by
``/rest/api/latest/issue/{key}`` on legacy Jira servers.

Depending on server configuration every entry of ``fields`` is either the
plain value or the value wrapped as ``{"value": ...}``, and compound objects
(status, priority, users, project) are nested under that wrapper. Each field
is therefore resolved through a precedence chain that tries the wrapped form
first and the direct form second before falling back to a default.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import (
    EMPTY_STRING,
    NONE_VALUE,
    UNASSIGNED,
    UNKNOWN,
)
from ..extract import (
    as_text,
    first_non_empty,
    name_list,
    resolve_user,
    safe_get,
    string_list,
    unwrap_value,
)
from ...utils.urls import browse_link

logger = logging.getLogger(__name__)


def _plain_field(fields: Mapping[str, Any], name: str) -> str:
    """Resolve a scalar field that may be value-wrapped."""
    return as_text(
        first_non_empty(
            unwrap_value(fields.get(name)),
            safe_get(fields, f"{name}.value"),
        )
    )


def _named_field(fields: Mapping[str, Any], name: str, default: str) -> str:
    """Resolve the ``name`` of a compound field such as status or priority."""
    return as_text(
        first_non_empty(
            safe_get(fields, f"{name}.value.name"),
            safe_get(fields, f"{name}.name"),
        ),
        default,
    )


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue with all fields flattened to strings.
    """

    key: str = EMPTY_STRING
    link: str = EMPTY_STRING
    summary: str = EMPTY_STRING
    description: str = EMPTY_STRING
    status: str = UNKNOWN
    priority: str = NONE_VALUE
    assignee: str = UNASSIGNED
    reporter: str = UNKNOWN
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    labels: list[str] = Field(default_factory=list)
    components: list[str] = Field(default_factory=list)
    issue_type: str = UNKNOWN
    project_key: str = UNKNOWN
    project_name: str = UNKNOWN

    @classmethod
    def from_api_response(cls, data: Any, **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: ``base_url`` is used to build the browse link

        Returns:
            A JiraIssue instance
        """
        base_url = kwargs.get("base_url", EMPTY_STRING)

        if not isinstance(data, Mapping):
            logger.debug("Received non-dictionary data, returning default instance")
            data = {}

        fields = data.get("fields")
        if not isinstance(fields, Mapping):
            fields = {}

        key = as_text(data.get("key"))

        return cls(
            key=key,
            link=browse_link(base_url, key),
            summary=_plain_field(fields, "summary"),
            description=_plain_field(fields, "description"),
            status=_named_field(fields, "status", UNKNOWN),
            priority=_named_field(fields, "priority", NONE_VALUE),
            assignee=resolve_user(fields, "assignee", UNASSIGNED),
            reporter=resolve_user(fields, "reporter", UNKNOWN),
            created=_plain_field(fields, "created"),
            updated=_plain_field(fields, "updated"),
            labels=string_list(unwrap_value(fields.get("labels"))),
            components=name_list(unwrap_value(fields.get("components"))),
            issue_type=_named_field(fields, "issuetype", UNKNOWN),
            project_key=as_text(
                first_non_empty(
                    safe_get(fields, "project.value.key"),
                    safe_get(fields, "project.key"),
                ),
                UNKNOWN,
            ),
            project_name=_named_field(fields, "project", UNKNOWN),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "key": self.key,
            "link": self.link,
            "summary": self.summary,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "assignee": self.assignee,
            "reporter": self.reporter,
            "created": self.created,
            "updated": self.updated,
            "labels": list(self.labels),
            "components": list(self.components),
            "issueType": self.issue_type,
            "project": self.project_key,
            "projectName": self.project_name,
        }
