"""Create resource use case."""

import logfire
from pydantic import BaseModel, Field

from hub.domain.service import ResourceService
from hub.domain.value import AuthorId, LearningLevel, ResourceCategory, ResourceType

from .common import ResourceResponse


class CreateResourceRequest(BaseModel):
    """Create resource request."""

    title: str
    description: str
    content: str
    category: ResourceCategory
    type: ResourceType
    level: LearningLevel
    tags: list[str] = Field(default_factory=list)
    language: str
    published: bool = False
    featured: bool = False
    file_url: str | None = None
    thumbnail_url: str | None = None
    duration: int | None = None
    author_id: str  # Supplied by the caller
    author_name: str


class CreateResourceUseCase:
    """Use case for creating a new resource."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize create resource use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: CreateResourceRequest) -> ResourceResponse:
        """Execute create resource flow.

        Args:
            request: Create resource request

        Returns:
            The stored resource

        Raises:
            pydantic.ValidationError: If the resource fails model validation
        """
        with logfire.span(
            "create_resource.execute",
            title=request.title,
            author_id=request.author_id,
        ):
            resource = await self.resource_service.create_resource(
                title=request.title,
                description=request.description,
                content=request.content,
                category=request.category,
                type=request.type,
                level=request.level,
                tags=request.tags,
                language=request.language,
                author_id=AuthorId(request.author_id),
                author_name=request.author_name,
                published=request.published,
                featured=request.featured,
                file_url=request.file_url,
                thumbnail_url=request.thumbnail_url,
                duration=request.duration,
            )

            logfire.info("Resource created successfully", resource_id=resource.id)
            return ResourceResponse.from_resource(resource)
