"""Update resource use case."""

from pydantic import BaseModel

from hub.domain.error import NotFoundError
from hub.domain.repository import ResourcePatch
from hub.domain.service import ResourceService
from hub.domain.value import ResourceId

from .common import ResourceResponse


class UpdateResourceRequest(BaseModel):
    """Update resource request.

    Only the fields set on ``patch`` are changed.
    """

    resource_id: str
    patch: ResourcePatch


class UpdateResourceUseCase:
    """Use case for partially updating a resource."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize update resource use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: UpdateResourceRequest) -> ResourceResponse:
        """Execute update resource flow.

        Args:
            request: Update resource request

        Returns:
            Updated resource details

        Raises:
            NotFoundError: If the resource doesn't exist
            ValidationError: If the patch would lower a counter
        """
        updated = await self.resource_service.update_resource(
            ResourceId(request.resource_id), request.patch
        )
        if updated is None:
            raise NotFoundError("Resource", request.resource_id)

        return ResourceResponse.from_resource(updated)
