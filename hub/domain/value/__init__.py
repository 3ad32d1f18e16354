"""Domain value objects for the community hub."""

from hub.domain.value.identifiers import AuthorId, ResourceId
from hub.domain.value.types import LearningLevel, ResourceCategory, ResourceType

__all__ = [
    # Identifiers
    "AuthorId",
    "ResourceId",
    # Types
    "LearningLevel",
    "ResourceCategory",
    "ResourceType",
]
