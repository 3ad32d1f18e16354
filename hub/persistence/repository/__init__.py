"""Repository implementations."""

from hub.persistence.repository.inmemory import InMemoryResourceRepository

__all__ = [
    "InMemoryResourceRepository",
]
