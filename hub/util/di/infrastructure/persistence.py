"""Persistence infrastructure providers."""

from dishka import Scope, provide

from hub.config import CatalogSettings
from hub.domain.repository import ResourceRepository
from hub.persistence.repository import InMemoryResourceRepository
from hub.persistence.seed import seed_resources
from hub.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    One catalog store lives for the whole process (APP scope), optionally
    pre-filled with the sample resources.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_resource_repository(
        self, catalog_settings: CatalogSettings
    ) -> ResourceRepository:
        """Provide the process-wide resource repository."""
        repository = InMemoryResourceRepository()
        if catalog_settings.seed_sample_resources:
            await seed_resources(repository)
        return repository
