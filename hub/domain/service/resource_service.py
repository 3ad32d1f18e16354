"""Resource domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from hub.domain.model.resource import Resource
from hub.domain.repository import ResourceFilter, ResourcePatch, ResourceRepository
from hub.domain.value import (
    AuthorId,
    LearningLevel,
    ResourceCategory,
    ResourceId,
    ResourceType,
)

from .base import Service


class ResourceService(Service):
    """Domain service for the resource catalog.

    Lookups that can miss return None (or False for deletes) rather than
    raising; callers decide whether that is an error.
    """

    def __init__(self, resource_repository: ResourceRepository) -> None:
        """Initialize resource service.

        Args:
            resource_repository: Resource repository
        """
        self.resource_repository = resource_repository

    async def list_resources(
        self, resource_filter: Optional[ResourceFilter] = None
    ) -> list[Resource]:
        """List resources matching a filter, newest first.

        Args:
            resource_filter: Criteria to match (None for all resources)

        Returns:
            Matching resources ordered by created_at descending
        """
        criteria = (
            resource_filter.model_dump(mode="json", exclude_none=True)
            if resource_filter
            else {}
        )
        with logfire.span("resource_service.list_resources", **criteria):
            resources = await self.resource_repository.find_all(resource_filter)
            logfire.info("Resources listed", count=len(resources))
            return resources

    async def list_featured(self) -> list[Resource]:
        """List featured resources that are also published."""
        return await self.list_resources(
            ResourceFilter(featured=True, published=True)
        )

    async def list_by_author(self, author_id: AuthorId) -> list[Resource]:
        """List every resource written by an author, published or not."""
        return await self.list_resources(ResourceFilter(author_id=author_id))

    async def get_resource(self, resource_id: ResourceId) -> Optional[Resource]:
        """Get a resource by ID without counting a view.

        Args:
            resource_id: Resource ID

        Returns:
            Resource if found, None otherwise
        """
        with logfire.span(
            "resource_service.get_resource", resource_id=str(resource_id)
        ):
            resource = await self.resource_repository.find_by_id(resource_id)
            if not resource:
                logfire.warn("Resource not found", resource_id=str(resource_id))
            return resource

    async def view_resource(self, resource_id: ResourceId) -> Optional[Resource]:
        """Open a resource for reading, counting one view.

        This is not idempotent: every call increments the view count.

        Args:
            resource_id: Resource ID

        Returns:
            Resource with its post-increment view count, None if not found
        """
        with logfire.span(
            "resource_service.view_resource", resource_id=str(resource_id)
        ):
            resource = await self.resource_repository.record_view(resource_id)

            if resource:
                logfire.info(
                    "Resource viewed",
                    resource_id=str(resource_id),
                    views=resource.views,
                )
            else:
                logfire.warn(
                    "View on non-existent resource", resource_id=str(resource_id)
                )

            return resource

    async def create_resource(
        self,
        *,
        title: str,
        description: str,
        content: str,
        category: ResourceCategory,
        type: ResourceType,
        level: LearningLevel,
        tags: list[str],
        language: str,
        author_id: AuthorId,
        author_name: str,
        published: bool = False,
        featured: bool = False,
        file_url: str | None = None,
        thumbnail_url: str | None = None,
        duration: int | None = None,
    ) -> Resource:
        """Create and store a new resource.

        Assigns a fresh ID, sets both timestamps to now and starts counters at
        zero. Duplicate titles are allowed.

        Returns:
            The stored resource
        """
        with logfire.span(
            "resource_service.create_resource", title=title, author_id=author_id
        ):
            now = datetime.now()
            resource = Resource(
                id=ResourceId(str(uuid4())),
                title=title,
                description=description,
                content=content,
                category=category,
                type=type,
                level=level,
                tags=tags,
                author_id=author_id,
                author_name=author_name,
                created_at=now,
                updated_at=now,
                published=published,
                featured=featured,
                views=0,
                likes=0,
                language=language,
                file_url=file_url,
                thumbnail_url=thumbnail_url,
                duration=duration,
            )

            saved = await self.resource_repository.add(resource)
            logfire.info("Resource created", resource_id=saved.id, title=saved.title)
            return saved

    async def update_resource(
        self, resource_id: ResourceId, patch: ResourcePatch
    ) -> Optional[Resource]:
        """Apply a partial update to a resource.

        Args:
            resource_id: Resource ID
            patch: Fields to change; omitted fields are preserved

        Returns:
            Updated resource, None if not found

        Raises:
            ValidationError: If the patch would lower a counter
        """
        with logfire.span(
            "resource_service.update_resource",
            resource_id=str(resource_id),
            fields=sorted(patch.changes()),
        ):
            updated = await self.resource_repository.update(resource_id, patch)

            if updated:
                logfire.info(
                    "Resource updated", resource_id=str(resource_id), title=updated.title
                )
            else:
                logfire.warn(
                    "Resource not found for update", resource_id=str(resource_id)
                )

            return updated

    async def delete_resource(self, resource_id: ResourceId) -> bool:
        """Delete a resource.

        Args:
            resource_id: Resource ID

        Returns:
            True if the resource was removed, False if it didn't exist
        """
        with logfire.span(
            "resource_service.delete_resource", resource_id=str(resource_id)
        ):
            deleted = await self.resource_repository.delete(resource_id)

            if deleted:
                logfire.info("Resource deleted", resource_id=str(resource_id))
            else:
                logfire.info("No resource to delete", resource_id=str(resource_id))

            return deleted

    async def like_resource(self, resource_id: ResourceId) -> Optional[Resource]:
        """Add a like to a resource.

        Likes only ever go up; there is no per-member like state to undo.

        Args:
            resource_id: Resource ID

        Returns:
            Resource with its new like count, None if not found
        """
        with logfire.span(
            "resource_service.like_resource", resource_id=str(resource_id)
        ):
            resource = await self.resource_repository.increment_likes(resource_id)

            if resource:
                logfire.info(
                    "Resource liked", resource_id=str(resource_id), likes=resource.likes
                )
            else:
                logfire.warn(
                    "Like on non-existent resource", resource_id=str(resource_id)
                )

            return resource
