"""Like resource use case."""

from pydantic import BaseModel

from hub.domain.error import NotFoundError
from hub.domain.service import ResourceService
from hub.domain.value import ResourceId

from .common import ResourceResponse


class LikeResourceRequest(BaseModel):
    """Like resource request."""

    resource_id: str


class LikeResourceUseCase:
    """Use case for liking a resource.

    Every call adds one like.
    """

    def __init__(self, resource_service: ResourceService) -> None:
        """Initialize like resource use case.

        Args:
            resource_service: Resource domain service
        """
        self.resource_service = resource_service

    async def execute(self, request: LikeResourceRequest) -> ResourceResponse:
        """Execute like resource flow.

        Args:
            request: Like resource request

        Returns:
            Resource with its new like count

        Raises:
            NotFoundError: If the resource doesn't exist
        """
        resource = await self.resource_service.like_resource(
            ResourceId(request.resource_id)
        )
        if resource is None:
            raise NotFoundError("Resource", request.resource_id)

        return ResourceResponse.from_resource(resource)
