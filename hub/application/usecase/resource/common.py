"""Response models shared by the resource use cases."""

from datetime import datetime

from pydantic import BaseModel

from hub.domain.model.resource import Resource
from hub.domain.value import LearningLevel, ResourceCategory, ResourceType


class ResourceResponse(BaseModel):
    """Full resource details."""

    resource_id: str
    title: str
    description: str
    content: str
    category: ResourceCategory
    type: ResourceType
    level: LearningLevel
    tags: list[str]
    author_id: str
    author_name: str
    created_at: datetime
    updated_at: datetime
    published: bool
    featured: bool
    views: int
    likes: int
    language: str
    downloads: int | None = None
    file_url: str | None = None
    thumbnail_url: str | None = None
    duration: int | None = None

    @classmethod
    def from_resource(cls, resource: Resource) -> "ResourceResponse":
        """Build a response from a domain resource."""
        data = resource.model_dump(exclude={"id"})
        return cls(resource_id=str(resource.id), **data)


class ResourceListResponse(BaseModel):
    """A list of resources, newest first."""

    resources: list[ResourceResponse]
    total: int

    @classmethod
    def from_resources(cls, resources: list[Resource]) -> "ResourceListResponse":
        """Build a list response from domain resources."""
        return cls(
            resources=[ResourceResponse.from_resource(r) for r in resources],
            total=len(resources),
        )
