"""Resource entity.

Resources are the learning content of the hub: articles, courses, videos and
the like, written by members and browsed by everyone.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, model_validator

from hub.domain.error import ValidationError
from hub.domain.model.common import DomainModel
from hub.domain.value import (
    AuthorId,
    LearningLevel,
    ResourceCategory,
    ResourceId,
    ResourceType,
)


class Resource(DomainModel):
    """A piece of learning content.

    ``published`` and ``featured`` are independent flags, so a resource may be
    featured while still unpublished.
    """

    id: ResourceId
    title: str
    description: str
    content: str
    category: ResourceCategory
    type: ResourceType
    level: LearningLevel
    tags: list[str] = Field(default_factory=list)
    author_id: AuthorId
    author_name: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    published: bool = False
    featured: bool = False
    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    language: str

    # Media attachments
    downloads: Optional[int] = Field(default=None, ge=0)
    file_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    duration: Optional[int] = Field(default=None, ge=0)  # minutes, for video/audio

    @model_validator(mode="after")
    def validate_timestamps(self) -> "Resource":
        """Ensure the record was not updated before it was created."""
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self

    def with_changes(self, changes: dict[str, Any], updated_at: datetime) -> "Resource":
        """Return a copy with ``changes`` merged in and ``updated_at`` refreshed.

        Args:
            changes: Field values to overwrite; omitted fields are kept
            updated_at: New modification timestamp

        Returns:
            New, fully validated resource

        Raises:
            ValidationError: If the change would lower the view or like count
            pydantic.ValidationError: If the merged record is invalid
        """
        for counter in ("views", "likes"):
            if counter in changes and changes[counter] < getattr(self, counter):
                raise ValidationError(
                    f"{counter} cannot decrease ({getattr(self, counter)} -> {changes[counter]})"
                )

        merged = {**self.model_dump(), **changes, "updated_at": updated_at}
        return Resource.model_validate(merged)

    def matches_search(self, query: str) -> bool:
        """Case-insensitive substring match on title, description or any tag."""
        needle = query.lower()
        return (
            needle in self.title.lower()
            or needle in self.description.lower()
            or any(needle in tag.lower() for tag in self.tags)
        )
