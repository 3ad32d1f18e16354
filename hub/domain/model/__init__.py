"""Domain model entities for the community hub."""

from hub.domain.model.resource import Resource

__all__ = [
    "Resource",
]
