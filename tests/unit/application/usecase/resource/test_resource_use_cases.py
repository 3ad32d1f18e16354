"""Unit tests for the resource use cases."""

import pytest

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
    UpdateResourceRequest,
    UpdateResourceUseCase,
)
from hub.domain.error import NotFoundError
from hub.domain.repository import ResourcePatch, ResourceRepository
from hub.domain.value import ResourceCategory
from tests.conftest import make_resource
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _create_request(**overrides) -> CreateResourceRequest:
    fields = {
        "title": "Travel Phrases",
        "description": "Phrases for getting around",
        "content": "# Phrases",
        "category": "travel",
        "type": "worksheet",
        "level": "beginner",
        "tags": ["travel", "phrases"],
        "language": "en",
        "author_id": "member-7",
        "author_name": "Member Seven",
    }
    fields.update(overrides)
    return CreateResourceRequest(**fields)


class TestCreateResourceUseCase:
    """Tests for CreateResourceUseCase."""

    @pytest.mark.asyncio
    async def test_create_returns_stored_resource(self, unit_env):
        use_case = await unit_env.get(CreateResourceUseCase)
        repo = await unit_env.get(ResourceRepository)

        response = await use_case.execute(_create_request(duration=15))

        stored = await repo.find_by_id(response.resource_id)
        assert stored is not None
        assert stored.title == "Travel Phrases"
        assert stored.category == ResourceCategory.TRAVEL
        assert stored.duration == 15
        assert response.views == 0
        assert response.published is False


class TestGetResourceUseCase:
    """Tests for GetResourceUseCase."""

    @pytest.mark.asyncio
    async def test_get_records_a_view_by_default(self, unit_env):
        use_case = await unit_env.get(GetResourceUseCase)
        repo = await unit_env.get(ResourceRepository)
        resource = make_resource(views=1)
        await repo.add(resource)

        response = await use_case.execute(GetResourceRequest(resource_id=resource.id))

        assert response.resource_id == resource.id
        assert response.views == 2

    @pytest.mark.asyncio
    async def test_get_without_recording_a_view(self, unit_env):
        use_case = await unit_env.get(GetResourceUseCase)
        repo = await unit_env.get(ResourceRepository)
        resource = make_resource(views=1)
        await repo.add(resource)

        response = await use_case.execute(
            GetResourceRequest(resource_id=resource.id, record_view=False)
        )

        assert response.views == 1

    @pytest.mark.asyncio
    async def test_get_unknown_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetResourceUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(GetResourceRequest(resource_id="nope"))

        assert exc_info.value.identifier == "nope"


class TestListUseCases:
    """Tests for the listing use cases."""

    @pytest.mark.asyncio
    async def test_list_applies_filter(self, unit_env):
        use_case = await unit_env.get(ListResourcesUseCase)
        repo = await unit_env.get(ResourceRepository)
        await repo.add(make_resource("English", language="en"))
        await repo.add(make_resource("Japanese", language="ja"))

        response = await use_case.execute(ListResourcesRequest(language="ja"))

        assert response.total == 1
        assert response.resources[0].title == "Japanese"

    @pytest.mark.asyncio
    async def test_featured_and_author_listings(self, unit_env):
        featured_use_case = await unit_env.get(ListFeaturedResourcesUseCase)
        author_use_case = await unit_env.get(ListAuthorResourcesUseCase)
        repo = await unit_env.get(ResourceRepository)
        await repo.add(make_resource("Star", featured=True, author_id="a"))
        await repo.add(make_resource("Hidden", featured=True, published=False, author_id="a"))

        featured = await featured_use_case.execute()
        by_author = await author_use_case.execute(
            ListAuthorResourcesRequest(author_id="a")
        )

        assert [r.title for r in featured.resources] == ["Star"]
        assert by_author.total == 2


class TestMutationUseCases:
    """Tests for update, like and delete use cases."""

    @pytest.mark.asyncio
    async def test_update_keeps_omitted_fields(self, unit_env):
        use_case = await unit_env.get(UpdateResourceUseCase)
        repo = await unit_env.get(ResourceRepository)
        resource = make_resource("Draft", days_ago=1, published=False, tags=["x"])
        await repo.add(resource)

        response = await use_case.execute(
            UpdateResourceRequest(
                resource_id=resource.id, patch=ResourcePatch(published=True)
            )
        )

        assert response.published is True
        assert response.title == "Draft"
        assert response.tags == ["x"]

    @pytest.mark.asyncio
    async def test_update_unknown_raises_not_found(self, unit_env):
        use_case = await unit_env.get(UpdateResourceUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateResourceRequest(resource_id="nope", patch=ResourcePatch(title="T"))
            )

    @pytest.mark.asyncio
    async def test_like_and_delete(self, unit_env):
        like_use_case = await unit_env.get(LikeResourceUseCase)
        delete_use_case = await unit_env.get(DeleteResourceUseCase)
        repo = await unit_env.get(ResourceRepository)
        resource = make_resource(likes=7)
        await repo.add(resource)

        liked = await like_use_case.execute(LikeResourceRequest(resource_id=resource.id))
        deleted = await delete_use_case.execute(
            DeleteResourceRequest(resource_id=resource.id)
        )
        assert liked.likes == 8
        assert deleted.deleted is True

        with pytest.raises(NotFoundError):
            await like_use_case.execute(LikeResourceRequest(resource_id=resource.id))
        with pytest.raises(NotFoundError):
            await delete_use_case.execute(DeleteResourceRequest(resource_id=resource.id))
