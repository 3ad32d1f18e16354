"""Get resource use case."""

from pydantic import BaseModel

from hub.domain.error import NotFoundError
from hub.domain.service import ResourceService
from hub.domain.value import ResourceId

from .common import ResourceResponse


class GetResourceRequest(BaseModel):
    """Get resource request.

    ``record_view`` defaults to True: opening a resource counts as a view.
    Set it to False for previews and admin tooling.
    """

    resource_id: str
    record_view: bool = True


class GetResourceUseCase:
    """Use case for retrieving a resource by ID."""

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize get resource use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: GetResourceRequest) -> ResourceResponse:
        """Execute get resource flow.

        Args:
            request: Get resource request

        Returns:
            Resource details

        Raises:
            NotFoundError: If the resource doesn't exist
        """
        resource_id = ResourceId(request.resource_id)

        if request.record_view:
            resource = await self.resource_service.view_resource(resource_id)
        else:
            resource = await self.resource_service.get_resource(resource_id)

        if resource is None:
            raise NotFoundError("Resource", request.resource_id)

        return ResourceResponse.from_resource(resource)
