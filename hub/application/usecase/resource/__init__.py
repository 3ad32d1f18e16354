"""Resource use cases."""

from .common import ResourceListResponse, ResourceResponse
from .create_resource import CreateResourceRequest, CreateResourceUseCase
from .delete_resource import (
    DeleteResourceRequest,
    DeleteResourceResponse,
    DeleteResourceUseCase,
)
from .get_resource import GetResourceRequest, GetResourceUseCase
from .like_resource import LikeResourceRequest, LikeResourceUseCase
from .list_resources import (
    ListAuthorResourcesRequest,
    ListAuthorResourcesUseCase,
    ListFeaturedResourcesUseCase,
    ListResourcesRequest,
    ListResourcesUseCase,
)
from .update_resource import UpdateResourceRequest, UpdateResourceUseCase

__all__ = [
    "CreateResourceRequest",
    "CreateResourceUseCase",
    "DeleteResourceRequest",
    "DeleteResourceResponse",
    "DeleteResourceUseCase",
    "GetResourceRequest",
    "GetResourceUseCase",
    "LikeResourceRequest",
    "LikeResourceUseCase",
    "ListAuthorResourcesRequest",
    "ListAuthorResourcesUseCase",
    "ListFeaturedResourcesUseCase",
    "ListResourcesRequest",
    "ListResourcesUseCase",
    "ResourceListResponse",
    "ResourceResponse",
    "UpdateResourceRequest",
    "UpdateResourceUseCase",
]
