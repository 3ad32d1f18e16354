"""Unit tests for the sample resource seed."""

from datetime import datetime, timedelta

import pytest

from hub.domain.repository import ResourceFilter, ResourceRepository
from hub.persistence.repository.inmemory import InMemoryResourceRepository
from hub.persistence.seed import sample_resources, seed_resources
from tests.harness import create_env_fixture

# Production persistence: process-wide store, seeded on first use
seeded_env = create_env_fixture(unmock={"persistence"})


class TestSampleResources:
    """Tests for sample_resources."""

    def test_sample_timestamps_are_relative_to_now(self):
        now = datetime(2025, 6, 1, 9, 0, 0)

        resources = sample_resources(now)

        assert [r.created_at for r in resources] == [
            now - timedelta(days=7),
            now - timedelta(days=5),
            now - timedelta(days=3),
        ]
        assert all(r.updated_at == r.created_at for r in resources)

    def test_samples_are_published_with_original_counters(self):
        resources = {r.id: r for r in sample_resources()}

        assert all(r.published for r in resources.values())
        assert (resources["1"].views, resources["1"].likes) == (245, 18)
        assert (resources["2"].views, resources["2"].likes) == (156, 12)
        assert (resources["3"].views, resources["3"].likes) == (89, 7)


class TestSeedResources:
    """Tests for seed_resources."""

    @pytest.mark.asyncio
    async def test_seed_lists_newest_first(self):
        repo = InMemoryResourceRepository()

        count = await seed_resources(repo)

        assert count == 3
        assert [r.id for r in await repo.find_all()] == ["3", "2", "1"]

    @pytest.mark.asyncio
    async def test_production_store_is_seeded(self, seeded_env):
        repo = await seeded_env.get(ResourceRepository)

        featured = await repo.find_all(ResourceFilter(featured=True, published=True))

        assert [r.id for r in featured] == ["3", "1"]
