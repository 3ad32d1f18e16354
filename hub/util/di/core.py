"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from hub.config import CatalogSettings, Settings
from hub.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_catalog_settings(self, settings: Settings) -> CatalogSettings:
        """Provide catalog settings."""
        return settings.catalog
