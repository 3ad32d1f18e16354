"""In-memory repository implementations."""

from .resource import InMemoryResourceRepository

__all__ = [
    "InMemoryResourceRepository",
]
