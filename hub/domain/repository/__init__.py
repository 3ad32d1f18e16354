"""Repository interfaces for the community hub domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from hub.domain.repository.resource import (
    ResourceFilter,
    ResourcePatch,
    ResourceRepository,
)

__all__ = [
    "ResourceFilter",
    "ResourcePatch",
    "ResourceRepository",
]
