"""Delete resource use case."""

from pydantic import BaseModel

from hub.domain.error import NotFoundError
from hub.domain.service import ResourceService
from hub.domain.value import ResourceId


class DeleteResourceRequest(BaseModel):
    """Delete resource request."""

    resource_id: str


class DeleteResourceResponse(BaseModel):
    """Delete resource response."""

    resource_id: str
    deleted: bool


class DeleteResourceUseCase:
    """Use case for deleting a resource."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize delete resource use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: DeleteResourceRequest) -> DeleteResourceResponse:
        """Execute delete resource flow.

        Args:
            request: Delete resource request

        Returns:
            Confirmation of the removal

        Raises:
            NotFoundError: If the resource doesn't exist
        """
        deleted = await self.resource_service.delete_resource(
            ResourceId(request.resource_id)
        )
        if not deleted:
            raise NotFoundError("Resource", request.resource_id)

        return DeleteResourceResponse(resource_id=request.resource_id, deleted=deleted)
