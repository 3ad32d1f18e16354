"""Resource routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel, Field

from hub.application.usecase.resource import (
    CreateResourceRequest,
    CreateResourceUseCase,
    DeleteResourceRequest,
    DeleteResourceUseCase,
    GetResourceRequest,
    GetResourceUseCase,
    LikeResourceRequest,
    LikeResourceUseCase,
    ListAuthorResourcesRequest,
    ListAuthorResourcesUseCase,
    ListFeaturedResourcesUseCase,
    ListResourcesRequest,
    ListResourcesUseCase,
    ResourceListResponse,
    ResourceResponse,
    UpdateResourceRequest,
    UpdateResourceUseCase,
)
from hub.config import CatalogSettings
from hub.domain.error import DomainError, NotFoundError
from hub.domain.repository import ResourcePatch
from hub.domain.value import LearningLevel, ResourceCategory, ResourceType

router = APIRouter(prefix="/resources", tags=["resources"], route_class=DishkaRoute)


def _not_found(error: NotFoundError) -> HTTPException:
    logfire.warn("Resource not found", resource_id=error.identifier)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))


def _internal_error(action: str, error: Exception) -> HTTPException:
    logfire.error(f"Unexpected error {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed {action}",
    )


@router.get("", response_model=ResourceListResponse)
async def list_resources(
    list_resources_use_case: FromDishka[ListResourcesUseCase],
    catalog_settings: FromDishka[CatalogSettings],
    category: ResourceCategory | None = None,
    type: ResourceType | None = None,
    level: LearningLevel | None = None,
    language: str | None = None,
    featured: bool | None = None,
    published: bool | None = None,
    search: str | None = None,
) -> ResourceListResponse:
    """List resources, newest first.

    Every supplied query parameter must match. ``search`` looks for a
    case-insensitive substring in the title, description or tags.

    Returns:
        Matching resources
    """
    if search and len(search) > catalog_settings.max_search_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Search must be at most {catalog_settings.max_search_length} characters",
        )

    request = ListResourcesRequest(
        category=category,
        type=type,
        level=level,
        language=language,
        featured=featured,
        published=published,
        search=search,
    )

    try:
        return await list_resources_use_case.execute(request)
    except Exception as e:
        raise _internal_error("listing resources", e)


@router.get("/featured", response_model=ResourceListResponse)
async def list_featured_resources(
    list_featured_use_case: FromDishka[ListFeaturedResourcesUseCase],
) -> ResourceListResponse:
    """List featured resources that are published."""
    try:
        return await list_featured_use_case.execute()
    except Exception as e:
        raise _internal_error("listing featured resources", e)


@router.get("/by-author/{author_id}", response_model=ResourceListResponse)
async def list_author_resources(
    author_id: str,
    list_author_resources_use_case: FromDishka[ListAuthorResourcesUseCase],
) -> ResourceListResponse:
    """List every resource by an author, including unpublished ones."""
    try:
        return await list_author_resources_use_case.execute(
            ListAuthorResourcesRequest(author_id=author_id)
        )
    except Exception as e:
        raise _internal_error("listing author resources", e)


@router.get("/{resource_id}", response_model=ResourceResponse)
async def get_resource(
    resource_id: str,
    get_resource_use_case: FromDishka[GetResourceUseCase],
    record_view: bool = True,
) -> ResourceResponse:
    """Get a resource by ID.

    Counts a view unless ``record_view=false`` is passed.

    Raises:
        HTTPException: If resource not found
    """
    try:
        return await get_resource_use_case.execute(
            GetResourceRequest(resource_id=resource_id, record_view=record_view)
        )
    except NotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        raise _internal_error("getting resource", e)


class CreateResourceAPIRequest(BaseModel):
    """API request for creating a resource."""

    title: str = Field(min_length=1, max_length=300)
    description: str
    content: str
    category: ResourceCategory
    type: ResourceType
    level: LearningLevel
    tags: list[str] = Field(default_factory=list)
    language: str = Field(min_length=2, max_length=10)
    published: bool = False
    featured: bool = False
    file_url: str | None = None
    thumbnail_url: str | None = None
    duration: int | None = Field(default=None, ge=0)
    author_id: str = Field(min_length=1)
    author_name: str = Field(min_length=1)


@router.post("", response_model=ResourceResponse, status_code=status.HTTP_201_CREATED)
async def create_resource(
    request: CreateResourceAPIRequest,
    create_resource_use_case: FromDishka[CreateResourceUseCase],
) -> ResourceResponse:
    """Create a new resource.

    Raises:
        HTTPException: If validation fails
    """
    try:
        return await create_resource_use_case.execute(
            CreateResourceRequest(**request.model_dump())
        )
    except (DomainError, ValueError) as e:
        logfire.warn("Resource creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        raise _internal_error("creating resource", e)


@router.patch("/{resource_id}", response_model=ResourceResponse)
async def update_resource(
    resource_id: str,
    patch: ResourcePatch,
    update_resource_use_case: FromDishka[UpdateResourceUseCase],
) -> ResourceResponse:
    """Partially update a resource.

    Only the fields present in the body are changed. Required fields can be
    omitted but not set to null.

    Raises:
        HTTPException: If resource not found or the patch is invalid
    """
    try:
        return await update_resource_use_case.execute(
            UpdateResourceRequest(resource_id=resource_id, patch=patch)
        )
    except NotFoundError as e:
        raise _not_found(e)
    except (DomainError, ValueError) as e:
        logfire.warn("Resource update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        raise _internal_error("updating resource", e)


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resource(
    resource_id: str,
    delete_resource_use_case: FromDishka[DeleteResourceUseCase],
) -> Response:
    """Delete a resource.

    Raises:
        HTTPException: If resource not found
    """
    try:
        await delete_resource_use_case.execute(
            DeleteResourceRequest(resource_id=resource_id)
        )
    except NotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        raise _internal_error("deleting resource", e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{resource_id}/like", response_model=ResourceResponse)
async def like_resource(
    resource_id: str,
    like_resource_use_case: FromDishka[LikeResourceUseCase],
) -> ResourceResponse:
    """Add a like to a resource.

    Raises:
        HTTPException: If resource not found
    """
    try:
        return await like_resource_use_case.execute(
            LikeResourceRequest(resource_id=resource_id)
        )
    except NotFoundError as e:
        raise _not_found(e)
    except Exception as e:
        raise _internal_error("liking resource", e)
