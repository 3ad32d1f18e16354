"""Domain services."""

from .base import Service
from .resource_service import ResourceService

__all__ = [
    "ResourceService",
    "Service",
]
