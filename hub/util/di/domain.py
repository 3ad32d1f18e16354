"""Domain layer DI providers."""

from dishka import Scope, provide

from hub.domain.repository import ResourceRepository
from hub.domain.service import ResourceService
from hub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; the repository they wrap may live
    longer.
    """

    scope = Scope.REQUEST

    @provide
    def get_resource_service(
        self, resource_repository: ResourceRepository
    ) -> ResourceService:
        """Provide resource domain service."""
        return ResourceService(resource_repository=resource_repository)
