"""Domain value objects for the resource catalog.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum


class ResourceCategory(str, Enum):
    """Subject area a resource belongs to."""

    LANGUAGE_LEARNING = "language_learning"
    CULTURE = "culture"
    BUSINESS = "business"
    TECHNOLOGY = "technology"
    LIFESTYLE = "lifestyle"
    TRAVEL = "travel"
    EDUCATION = "education"
    CAREER = "career"


class ResourceType(str, Enum):
    """Format of a resource."""

    ARTICLE = "article"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    LINK = "link"
    COURSE = "course"
    QUIZ = "quiz"
    WORKSHEET = "worksheet"


class LearningLevel(str, Enum):
    """Intended audience level."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ALL_LEVELS = "all_levels"
