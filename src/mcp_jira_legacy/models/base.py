"""
Base models and utility classes for the MCP Jira legacy models.

This module provides the base class every normalized Jira model derives from.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all normalized API models.

    Subclasses build themselves from loosely-typed payloads through
    ``from_api_response`` and render the outward JSON shape through
    ``to_simplified_dict``.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_api_response(cls: type[T], data: Any, **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The response data from the API
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary for API responses.

        Returns:
            A dictionary with only the essential fields for API responses
        """
        return self.model_dump()
