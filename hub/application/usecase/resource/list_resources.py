"""List resources use cases."""

import logfire
from pydantic import BaseModel

from hub.domain.repository import ResourceFilter
from hub.domain.service import ResourceService
from hub.domain.value import AuthorId, LearningLevel, ResourceCategory, ResourceType

from .common import ResourceListResponse


class ListResourcesRequest(BaseModel):
    """List resources request.

    All fields are optional; supplied fields are combined with AND.
    """

    category: ResourceCategory | None = None
    type: ResourceType | None = None
    level: LearningLevel | None = None
    language: str | None = None
    featured: bool | None = None
    published: bool | None = None
    search: str | None = None


class ListResourcesUseCase:
    """Use case for listing resources with filtering."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize list resources use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: ListResourcesRequest) -> ResourceListResponse:
        """Execute list resources flow.

        Args:
            request: Filter criteria

        Returns:
            Matching resources, newest first
        """
        resource_filter = ResourceFilter(**request.model_dump())
        resources = await self.resource_service.list_resources(resource_filter)
        return ResourceListResponse.from_resources(resources)


class ListFeaturedResourcesUseCase:
    """Use case for listing featured, published resources."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize list featured resources use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self) -> ResourceListResponse:
        """Execute list featured resources flow."""
        resources = await self.resource_service.list_featured()
        return ResourceListResponse.from_resources(resources)


class ListAuthorResourcesRequest(BaseModel):
    """List author resources request."""

    author_id: str


class ListAuthorResourcesUseCase:
    """Use case for listing everything an author has written."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize list author resources use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: ListAuthorResourcesRequest) -> ResourceListResponse:
        """Execute list author resources flow.

        Args:
            request: Request with author ID

        Returns:
            The author's resources, newest first, published or not
        """
        with logfire.span("list_author_resources.execute", author_id=request.author_id):
            resources = await self.resource_service.list_by_author(
                AuthorId(request.author_id)
            )
            return ResourceListResponse.from_resources(resources)
