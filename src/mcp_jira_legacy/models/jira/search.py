"""
Jira search result models.

This module provides Pydantic models for the legacy RSS/XML search feed
returned by ``SearchRequest.xml``. The feed is parsed into a plain tree with
``xmltodict`` and then normalized into a fixed set of string fields.
"""

import logging
import re
from collections.abc import Mapping
from html.entities import name2codepoint
from typing import Any

import xmltodict
from pydantic import Field

from ..base import ApiModel
from ..constants import (
    EMPTY_STRING,
    NONE_VALUE,
    UNASSIGNED,
    UNKNOWN,
    XML_ATTRIBUTE_PREFIX,
    XML_TEXT_KEY,
)
from ..extract import as_text, safe_get, text_of
from ...utils.urls import browse_link

logger = logging.getLogger(__name__)

# XML itself only predefines amp, lt, gt, quot and apos
_XML_ENTITIES = frozenset({"amp", "lt", "gt", "quot", "apos"})
_NAMED_ENTITY_RE = re.compile(r"&([A-Za-z][A-Za-z0-9]*);")


def _replace_html_entities(xml_text: str) -> str:
    """Rewrite HTML named entities such as ``&nbsp;`` as numeric references."""

    def _to_numeric(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in _XML_ENTITIES or name not in name2codepoint:
            return match.group(0)
        return f"&#{name2codepoint[name]};"

    return _NAMED_ENTITY_RE.sub(_to_numeric, xml_text)


def parse_search_feed(xml_text: str) -> dict[str, Any]:
    """
    Parse the raw XML of a search feed into a generic tree.

    Attributes are stored under ``@_``-prefixed keys and element text under
    ``#text``. Values are kept as strings and surrounding whitespace is
    stripped. A repeated element that occurs once is returned as a single
    value, not a list; callers must normalize with ``ensure_list``. HTML
    named entities (``&nbsp;``, ``&eacute;``) are decoded like the XML ones.

    Args:
        xml_text: The raw XML document

    Returns:
        The parsed tree

    Raises:
        xml.parsers.expat.ExpatError: If the document is not well-formed XML
    """
    return xmltodict.parse(
        _replace_html_entities(xml_text),
        attr_prefix=XML_ATTRIBUTE_PREFIX,
        cdata_key=XML_TEXT_KEY,
        strip_whitespace=True,
    )


class JiraSearchIssue(ApiModel):
    """
    Model representing one ``<item>`` of the search feed.

    Fields that carry both text and attributes in the feed (assignee,
    reporter, project) expose the attribute as a companion field.
    """

    key: str = EMPTY_STRING
    link: str = EMPTY_STRING
    summary: str = EMPTY_STRING
    title: str = EMPTY_STRING
    status: str = UNKNOWN
    assignee: str = UNASSIGNED
    assignee_username: str = EMPTY_STRING
    reporter: str = UNKNOWN
    reporter_username: str = EMPTY_STRING
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    description: str = EMPTY_STRING
    priority: str = NONE_VALUE
    issue_type: str = UNKNOWN
    resolution: str = EMPTY_STRING
    project: str = EMPTY_STRING
    project_key: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: Any, **kwargs: Any) -> "JiraSearchIssue":
        """
        Create a JiraSearchIssue from a parsed feed item.

        Args:
            data: The ``<item>`` node of the parsed feed
            **kwargs: ``base_url`` is used to build the browse link

        Returns:
            A JiraSearchIssue instance
        """
        base_url = kwargs.get("base_url", EMPTY_STRING)
        item = data if isinstance(data, Mapping) else {}

        key = text_of(item.get("key"))
        return cls(
            key=key,
            link=browse_link(base_url, key),
            summary=text_of(item.get("summary")),
            title=text_of(item.get("title")),
            status=text_of(item.get("status"), UNKNOWN),
            assignee=text_of(item.get("assignee"), UNASSIGNED),
            assignee_username=as_text(safe_get(item, "assignee.@_username")),
            reporter=text_of(item.get("reporter"), UNKNOWN),
            reporter_username=as_text(safe_get(item, "reporter.@_username")),
            created=text_of(item.get("created")),
            updated=text_of(item.get("updated")),
            priority=text_of(item.get("priority"), NONE_VALUE),
            issue_type=text_of(item.get("type"), UNKNOWN),
            resolution=text_of(item.get("resolution")),
            project=text_of(item.get("project")),
            project_key=as_text(safe_get(item, "project.@_key")),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "key": self.key,
            "link": self.link,
            "summary": self.summary,
            "title": self.title,
            "status": self.status,
            "assignee": self.assignee,
            "assigneeUsername": self.assignee_username,
            "reporter": self.reporter,
            "reporterUsername": self.reporter_username,
            "created": self.created,
            "updated": self.updated,
            "description": self.description,
            "priority": self.priority,
            "issueType": self.issue_type,
            "resolution": self.resolution,
            "project": self.project,
            "projectKey": self.project_key,
        }


class JiraSearchResult(ApiModel):
    """
    Model representing the normalized search feed.

    ``total`` is the count the server declares for the whole query;
    ``max_results`` is the number of issues actually present in the feed.
    """

    total: int = 0
    max_results: int = 0
    issues: list[JiraSearchIssue] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: Any, **kwargs: Any) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a parsed feed tree.

        Args:
            data: The tree returned by ``parse_search_feed``
            **kwargs: ``base_url`` is used to build browse links

        Returns:
            A JiraSearchResult instance, empty when the feed has no channel
        """
        base_url = kwargs.get("base_url", EMPTY_STRING)

        channel = safe_get(data, "rss.channel", None)
        if not isinstance(channel, Mapping):
            logger.debug("Search feed has no channel, returning empty result")
            return cls()

        raw_total = safe_get(channel, f"issue.{XML_ATTRIBUTE_PREFIX}total", None)
        try:
            total = int(raw_total) if raw_total is not None else 0
        except (ValueError, TypeError):
            logger.debug(f"Ignoring non-numeric search total: {raw_total!r}")
            total = 0

        if "item" not in channel:
            return cls(total=total)

        # A lone empty <item/> parses to None and still counts as one issue
        items = channel["item"]
        if not isinstance(items, list):
            items = [items]
        issues = [
            JiraSearchIssue.from_api_response(item, base_url=base_url)
            for item in items
        ]
        return cls(total=total, max_results=len(issues), issues=issues)

    @classmethod
    def from_xml(cls, xml_text: str, **kwargs: Any) -> "JiraSearchResult":
        """
        Parse and normalize a raw search feed document.

        Args:
            xml_text: The raw XML returned by the search endpoint
            **kwargs: Passed through to ``from_api_response``

        Returns:
            A JiraSearchResult instance
        """
        return cls.from_api_response(parse_search_feed(xml_text), **kwargs)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "total": self.total,
            "maxResults": self.max_results,
            "issues": [issue.to_simplified_dict() for issue in self.issues],
        }
