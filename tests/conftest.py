"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from hub.config import Settings
from hub.domain.model.resource import Resource
from hub.domain.value import (
    AuthorId,
    LearningLevel,
    ResourceCategory,
    ResourceId,
    ResourceType,
)
from hub.util.observability import configure_logfire

# Keep logfire local and quiet for the whole test run
configure_logfire(Settings(environment="test"))


def make_resource(
    title: str = "Test Resource",
    *,
    days_ago: float = 0,
    **overrides,
) -> Resource:
    """Helper function to build resources for tests.

    Args:
        title: Resource title
        days_ago: How long before now the resource was created
        **overrides: Any other Resource field

    Returns:
        Valid Resource entity
    """
    created_at = datetime.now() - timedelta(days=days_ago)
    fields = {
        "id": ResourceId(str(uuid4())),
        "title": title,
        "description": "A resource used in tests",
        "content": "# Heading\n\nBody text",
        "category": ResourceCategory.EDUCATION,
        "type": ResourceType.ARTICLE,
        "level": LearningLevel.BEGINNER,
        "tags": ["testing"],
        "author_id": AuthorId("author-1"),
        "author_name": "Test Author",
        "created_at": created_at,
        "updated_at": created_at,
        "published": True,
        "featured": False,
        "views": 0,
        "likes": 0,
        "language": "en",
    }
    fields.update(overrides)
    return Resource(**fields)
