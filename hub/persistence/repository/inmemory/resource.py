"""In-memory resource repository.

The catalog has no backing database, so this is the production store as well
as the one used in tests. All find-then-mutate operations run under a single
lock so they cannot interleave if an awaiting backend is swapped in later.
"""

import asyncio
from datetime import datetime
from typing import Optional

from hub.domain.error import ValidationError
from hub.domain.model.resource import Resource
from hub.domain.repository.resource import (
    ResourceFilter,
    ResourcePatch,
    ResourceRepository,
)
from hub.domain.value import ResourceId


class InMemoryResourceRepository(ResourceRepository):
    """In-memory implementation of ResourceRepository."""

    def __init__(self) -> None:
        self._resources: dict[ResourceId, Resource] = {}
        self._lock = asyncio.Lock()

    async def find_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Find a resource by ID."""
        resource = self._resources.get(resource_id)
        return resource.model_copy(deep=True) if resource else None

    async def find_all(
        self, resource_filter: Optional[ResourceFilter] = None
    ) -> list[Resource]:
        """Find resources matching a filter, newest first."""
        resources = list(self._resources.values())

        if resource_filter is not None:
            resources = [r for r in resources if resource_filter.matches(r)]

        resources.sort(key=lambda r: r.created_at, reverse=True)
        return [r.model_copy(deep=True) for r in resources]

    async def add(self, resource: Resource) -> Resource:
        """Store a new resource."""
        async with self._lock:
            if resource.id in self._resources:
                raise ValidationError(f"Resource already exists: {resource.id}")
            self._resources[resource.id] = resource.model_copy(deep=True)
            return resource

    async def update(
        self, resource_id: ResourceId, patch: ResourcePatch
    ) -> Optional[Resource]:
        """Merge a patch over a stored resource."""
        async with self._lock:
            resource = self._resources.get(resource_id)
            if resource is None:
                return None

            updated = resource.with_changes(patch.changes(), updated_at=datetime.now())
            self._resources[resource_id] = updated
            return updated.model_copy(deep=True)

    async def delete(self, resource_id: ResourceId) -> bool:
        """Delete a resource."""
        async with self._lock:
            return self._resources.pop(resource_id, None) is not None

    async def record_view(self, resource_id: ResourceId) -> Optional[Resource]:
        """Increment the view count by 1."""
        async with self._lock:
            resource = self._resources.get(resource_id)
            if resource is None:
                return None

            # Counter bumps don't touch updated_at
            updated = resource.model_copy(update={"views": resource.views + 1})
            self._resources[resource_id] = updated
            return updated.model_copy(deep=True)

    async def increment_likes(self, resource_id: ResourceId) -> Optional[Resource]:
        """Increment the like count by 1."""
        async with self._lock:
            resource = self._resources.get(resource_id)
            if resource is None:
                return None

            updated = resource.model_copy(update={"likes": resource.likes + 1})
            self._resources[resource_id] = updated
            return updated.model_copy(deep=True)
