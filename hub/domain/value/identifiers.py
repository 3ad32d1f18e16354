"""Strongly typed identifiers for community hub domain entities."""

from typing import NewType

# Resource identifiers are opaque strings; seeded records use short numeric ids
ResourceId = NewType("ResourceId", str)

# Author identifiers come from the auth provider and are not validated here
AuthorId = NewType("AuthorId", str)
