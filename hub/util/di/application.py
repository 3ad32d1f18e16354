"""Application layer DI providers."""

from dishka import Scope, provide

from hub.application.usecase.resource import (
    CreateResourceUseCase,
    DeleteResourceUseCase,
    GetResourceUseCase,
    LikeResourceUseCase,
    ListAuthorResourcesUseCase,
    ListFeaturedResourcesUseCase,
    ListResourcesUseCase,
    UpdateResourceUseCase,
)
from hub.domain.service import ResourceService
from hub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_list_resources_use_case(
        self, resource_service: ResourceService
    ) -> ListResourcesUseCase:
        """Provide list resources use case."""
        return ListResourcesUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_list_featured_resources_use_case(
        self, resource_service: ResourceService
    ) -> ListFeaturedResourcesUseCase:
        """Provide list featured resources use case."""
        return ListFeaturedResourcesUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_list_author_resources_use_case(
        self, resource_service: ResourceService
    ) -> ListAuthorResourcesUseCase:
        """Provide list author resources use case."""
        return ListAuthorResourcesUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_get_resource_use_case(
        self, resource_service: ResourceService
    ) -> GetResourceUseCase:
        """Provide get resource use case."""
        return GetResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_create_resource_use_case(
        self, resource_service: ResourceService
    ) -> CreateResourceUseCase:
        """Provide create resource use case."""
        return CreateResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_update_resource_use_case(
        self, resource_service: ResourceService
    ) -> UpdateResourceUseCase:
        """Provide update resource use case."""
        return UpdateResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_resource_use_case(
        self, resource_service: ResourceService
    ) -> DeleteResourceUseCase:
        """Provide delete resource use case."""
        return DeleteResourceUseCase(resource_service=resource_service)

    @provide(scope=Scope.REQUEST)
    def get_like_resource_use_case(
        self, resource_service: ResourceService
    ) -> LikeResourceUseCase:
        """Provide like resource use case."""
        return LikeResourceUseCase(resource_service=resource_service)
