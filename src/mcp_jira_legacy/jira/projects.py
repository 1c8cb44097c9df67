"""Module for Jira project operations."""

import logging
from urllib.parse import quote

from ..models.jira import JiraProjectDetail, JiraProjectList
from .client import JiraClient

logger = logging.getLogger("mcp-jira-legacy.jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    def get_all_projects(self) -> JiraProjectList:
        """
        Get all projects visible to the configured user.

        Returns:
            JiraProjectList, empty if the server returned anything but an array
        """
        projects = self._get_json("/project")
        project_list = JiraProjectList.from_api_response(
            projects, base_url=self.base_url
        )
        logger.debug(f"Retrieved {project_list.total} projects")
        return project_list

    def get_project(self, project_key: str) -> JiraProjectDetail:
        """
        Get a single project with its versions and components.

        Args:
            project_key: The project key (e.g., PROJ)

        Returns:
            JiraProjectDetail model
        """
        project = self._get_json(f"/project/{quote(project_key, safe='')}")
        return JiraProjectDetail.from_api_response(project, base_url=self.base_url)
