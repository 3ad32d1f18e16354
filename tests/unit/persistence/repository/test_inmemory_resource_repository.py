"""Unit tests for the in-memory resource repository."""

import pytest

from hub.domain.error import ValidationError
from hub.domain.repository import ResourceFilter, ResourcePatch
from hub.domain.value import LearningLevel, ResourceCategory, ResourceId, ResourceType
from hub.persistence.repository.inmemory.resource import InMemoryResourceRepository
from tests.conftest import make_resource


class TestFindAll:
    """Tests for filtering and ordering."""

    @pytest.mark.asyncio
    async def test_results_are_newest_first(self):
        """Listing is ordered by created_at descending regardless of insert order."""
        repo = InMemoryResourceRepository()
        middle = make_resource("Middle", days_ago=5)
        oldest = make_resource("Oldest", days_ago=7)
        newest = make_resource("Newest", days_ago=3)
        for resource in (middle, oldest, newest):
            await repo.add(resource)

        resources = await repo.find_all()

        assert [r.title for r in resources] == ["Newest", "Middle", "Oldest"]

    @pytest.mark.asyncio
    async def test_empty_filter_returns_everything(self):
        repo = InMemoryResourceRepository()
        await repo.add(make_resource("One"))
        await repo.add(make_resource("Two"))

        assert len(await repo.find_all(ResourceFilter())) == 2

    @pytest.mark.asyncio
    async def test_fields_combine_with_and(self):
        """Every supplied field has to match."""
        repo = InMemoryResourceRepository()
        match = make_resource(
            "Match",
            category=ResourceCategory.TECHNOLOGY,
            type=ResourceType.COURSE,
            level=LearningLevel.BEGINNER,
            language="ja",
        )
        wrong_level = make_resource(
            "Wrong level",
            category=ResourceCategory.TECHNOLOGY,
            type=ResourceType.COURSE,
            level=LearningLevel.ADVANCED,
            language="ja",
        )
        wrong_language = make_resource(
            "Wrong language",
            category=ResourceCategory.TECHNOLOGY,
            type=ResourceType.COURSE,
            level=LearningLevel.BEGINNER,
            language="en",
        )
        for resource in (match, wrong_level, wrong_language):
            await repo.add(resource)

        resources = await repo.find_all(
            ResourceFilter(
                category=ResourceCategory.TECHNOLOGY,
                type=ResourceType.COURSE,
                level=LearningLevel.BEGINNER,
                language="ja",
            )
        )

        assert [r.id for r in resources] == [match.id]

    @pytest.mark.asyncio
    async def test_featured_and_published_filter(self):
        """Two featured+published out of three featured resources are returned."""
        repo = InMemoryResourceRepository()
        await repo.add(make_resource("A", featured=True, published=True))
        await repo.add(make_resource("B", featured=True, published=True))
        await repo.add(make_resource("C", featured=True, published=False))

        resources = await repo.find_all(ResourceFilter(featured=True, published=True))

        assert sorted(r.title for r in resources) == ["A", "B"]

    @pytest.mark.asyncio
    async def test_featured_false_is_a_filter(self):
        """featured=False selects non-featured resources rather than being ignored."""
        repo = InMemoryResourceRepository()
        await repo.add(make_resource("Plain", featured=False))
        await repo.add(make_resource("Star", featured=True))

        resources = await repo.find_all(ResourceFilter(featured=False))

        assert [r.title for r in resources] == ["Plain"]

    @pytest.mark.asyncio
    async def test_search_covers_title_description_and_tags(self):
        repo = InMemoryResourceRepository()
        await repo.add(make_resource("Business Etiquette", days_ago=3))
        await repo.add(make_resource("Other", description="about BUSINESS cards", days_ago=2))
        await repo.add(make_resource("Tagged", tags=["small-business"], days_ago=1))
        await repo.add(make_resource("Unrelated", tags=["travel"]))

        resources = await repo.find_all(ResourceFilter(search="business"))

        assert [r.title for r in resources] == ["Tagged", "Other", "Business Etiquette"]


class TestMutations:
    """Tests for add, update, delete and counters."""

    @pytest.mark.asyncio
    async def test_add_rejects_duplicate_id(self):
        repo = InMemoryResourceRepository()
        resource = make_resource()
        await repo.add(resource)

        with pytest.raises(ValidationError, match="already exists"):
            await repo.add(make_resource("Other", id=resource.id))

    @pytest.mark.asyncio
    async def test_update_unknown_id_returns_none(self):
        repo = InMemoryResourceRepository()

        result = await repo.update(ResourceId("missing"), ResourcePatch(title="New"))

        assert result is None

    @pytest.mark.asyncio
    async def test_update_merges_patch_and_refreshes_updated_at(self):
        repo = InMemoryResourceRepository()
        resource = make_resource("Old title", days_ago=1)
        await repo.add(resource)

        updated = await repo.update(resource.id, ResourcePatch(title="New title"))

        assert updated.title == "New title"
        assert updated.description == resource.description
        assert updated.updated_at > resource.updated_at
        assert (await repo.find_by_id(resource.id)).title == "New title"

    @pytest.mark.asyncio
    async def test_rejected_patch_leaves_record_unchanged(self):
        repo = InMemoryResourceRepository()
        resource = make_resource(days_ago=1, likes=4)
        await repo.add(resource)

        with pytest.raises(ValidationError):
            await repo.update(resource.id, ResourcePatch(title="X", likes=3))

        assert await repo.find_by_id(resource.id) == resource

    @pytest.mark.asyncio
    async def test_delete_reports_whether_anything_was_removed(self):
        repo = InMemoryResourceRepository()
        resource = make_resource()
        await repo.add(resource)

        assert await repo.delete(resource.id) is True
        assert await repo.delete(resource.id) is False
        assert await repo.find_by_id(resource.id) is None

    @pytest.mark.asyncio
    async def test_counters_increment_without_touching_updated_at(self):
        repo = InMemoryResourceRepository()
        resource = make_resource(days_ago=1, views=2, likes=1)
        await repo.add(resource)

        viewed = await repo.record_view(resource.id)
        liked = await repo.increment_likes(resource.id)

        assert viewed.views == 3
        assert liked.likes == 2
        assert liked.views == 3
        assert liked.updated_at == resource.updated_at

    @pytest.mark.asyncio
    async def test_counters_on_unknown_id_return_none(self):
        repo = InMemoryResourceRepository()

        assert await repo.record_view(ResourceId("missing")) is None
        assert await repo.increment_likes(ResourceId("missing")) is None


class TestIsolation:
    """Returned records never alias stored state."""

    @pytest.mark.asyncio
    async def test_mutating_returned_tags_does_not_change_store(self):
        repo = InMemoryResourceRepository()
        resource = make_resource(tags=["original"])
        await repo.add(resource)

        fetched = await repo.find_by_id(resource.id)
        fetched.tags.append("injected")
        listed = await repo.find_all()
        listed[0].tags.clear()

        assert (await repo.find_by_id(resource.id)).tags == ["original"]

    @pytest.mark.asyncio
    async def test_mutating_added_record_does_not_change_store(self):
        repo = InMemoryResourceRepository()
        resource = make_resource(tags=["original"])
        await repo.add(resource)

        resource.tags.append("injected")

        assert (await repo.find_by_id(resource.id)).tags == ["original"]
