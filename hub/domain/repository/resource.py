"""Resource repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, field_validator

from hub.domain.model.resource import Resource
from hub.domain.value import (
    AuthorId,
    LearningLevel,
    ResourceCategory,
    ResourceId,
    ResourceType,
)


class ResourceFilter(BaseModel):
    """Criteria for listing resources.

    Every supplied field must match (AND). ``search`` is a case-insensitive
    substring match against title, description or any tag.
    """

    category: Optional[ResourceCategory] = None
    type: Optional[ResourceType] = None
    level: Optional[LearningLevel] = None
    language: Optional[str] = None
    featured: Optional[bool] = None
    published: Optional[bool] = None
    search: Optional[str] = None
    author_id: Optional[AuthorId] = None

    def matches(self, resource: Resource) -> bool:
        """Check whether a resource satisfies every supplied criterion."""
        if self.category is not None and resource.category != self.category:
            return False
        if self.type is not None and resource.type != self.type:
            return False
        if self.level is not None and resource.level != self.level:
            return False
        if self.language and resource.language != self.language:
            return False
        if self.featured is not None and resource.featured != self.featured:
            return False
        if self.published is not None and resource.published != self.published:
            return False
        if self.author_id is not None and resource.author_id != self.author_id:
            return False
        if self.search and not resource.matches_search(self.search):
            return False
        return True


class ResourcePatch(BaseModel):
    """Partial update of a resource.

    Only fields explicitly set on the patch are applied; everything else on the
    stored record is preserved.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    category: Optional[ResourceCategory] = None
    type: Optional[ResourceType] = None
    level: Optional[LearningLevel] = None
    tags: Optional[list[str]] = None
    language: Optional[str] = None
    published: Optional[bool] = None
    featured: Optional[bool] = None
    views: Optional[int] = None
    likes: Optional[int] = None
    downloads: Optional[int] = None
    file_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    duration: Optional[int] = None

    @field_validator(
        "title",
        "description",
        "content",
        "category",
        "type",
        "level",
        "tags",
        "language",
        "published",
        "featured",
        "views",
        "likes",
    )
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        """Required fields may be omitted from a patch but never cleared."""
        if value is None:
            raise ValueError("field cannot be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Fields the caller actually supplied."""
        return self.model_dump(exclude_unset=True)


class ResourceRepository(ABC):
    """Repository for Resource entities.

    Defines the contract for resource storage. Records handed out are copies;
    mutating them never affects stored state.
    """

    @abstractmethod
    async def find_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Find a resource by ID without side effects.

        Args:
            resource_id: The resource's unique identifier

        Returns:
            The resource if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, resource_filter: Optional[ResourceFilter] = None
    ) -> list[Resource]:
        """Find resources matching a filter, newest first.

        Args:
            resource_filter: Criteria to match (None for all resources)

        Returns:
            Matching resources ordered by created_at descending
        """
        pass

    @abstractmethod
    async def add(self, resource: Resource) -> Resource:
        """Store a new resource.

        Args:
            resource: The resource to add

        Returns:
            The stored resource

        Raises:
            ValidationError: If a resource with the same ID already exists
        """
        pass

    @abstractmethod
    async def update(
        self, resource_id: ResourceId, patch: ResourcePatch
    ) -> Optional[Resource]:
        """Merge a patch over a stored resource and refresh updated_at.

        Args:
            resource_id: ID of the resource to update
            patch: Fields to change

        Returns:
            The merged resource, or None if the resource doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, resource_id: ResourceId) -> bool:
        """Delete a resource (hard delete).

        Args:
            resource_id: The resource ID to delete

        Returns:
            True if a resource was removed, False if none existed
        """
        pass

    @abstractmethod
    async def record_view(self, resource_id: ResourceId) -> Optional[Resource]:
        """Increment the view count by 1.

        Args:
            resource_id: The resource ID

        Returns:
            The resource after the increment, or None if not found
        """
        pass

    @abstractmethod
    async def increment_likes(self, resource_id: ResourceId) -> Optional[Resource]:
        """Increment the like count by 1.

        Args:
            resource_id: The resource ID

        Returns:
            The resource after the increment, or None if not found
        """
        pass
