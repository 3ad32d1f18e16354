"""Sample resources loaded into a fresh catalog."""

from datetime import datetime, timedelta
from typing import Optional

import logfire

from hub.domain.model.resource import Resource
from hub.domain.repository import ResourceRepository
from hub.domain.value import (
    AuthorId,
    LearningLevel,
    ResourceCategory,
    ResourceId,
    ResourceType,
)

GREETINGS_CONTENT = """# 日本語の基本的な挨拶

## おはよう系の挨拶
- おはよう (カジュアル)
- おはようございます (丁寧)

## こんにちは系の挨拶
- こんにちは
- こんばんは

## 初対面の挨拶
- はじめまして
- よろしくお願いします"""

ETIQUETTE_CONTENT = """# Japanese Business Etiquette

## Business Cards (Meishi)
- Always receive with both hands
- Read the card carefully
- Place it respectfully on the table

## Bowing
- Slight bow for greetings
- Deeper bow for apologies
- Practice proper posture"""

JAVASCRIPT_CONTENT = """# JavaScript基礎

## 変数の宣言
```javascript
let name = "太郎";
const age = 25;
var city = "東京";
```

## 関数の定義
```javascript
function greet(name) {
  return "こんにちは、" + name + "さん！";
}
```"""


def sample_resources(now: Optional[datetime] = None) -> list[Resource]:
    """Build the sample resources relative to ``now``.

    Args:
        now: Reference time (defaults to the current time)

    Returns:
        Three published resources created 7, 5 and 3 days before ``now``
    """
    now = now or datetime.now()

    # (id, days_ago, title, description, content, category, type, level,
    #  tags, author_id, author_name, featured, views, likes, language)
    rows = [
        (
            "1",
            7,
            "日本語の基本的な挨拶",
            "日本語での基本的な挨拶表現を学びましょう",
            GREETINGS_CONTENT,
            ResourceCategory.LANGUAGE_LEARNING,
            ResourceType.ARTICLE,
            LearningLevel.BEGINNER,
            ["挨拶", "基本", "日本語"],
            "admin-1",
            "管理者 一郎",
            True,
            245,
            18,
            "ja",
        ),
        (
            "2",
            5,
            "Japanese Business Etiquette",
            "Learn essential business etiquette in Japanese culture",
            ETIQUETTE_CONTENT,
            ResourceCategory.BUSINESS,
            ResourceType.ARTICLE,
            LearningLevel.INTERMEDIATE,
            ["business", "etiquette", "culture"],
            "admin-1",
            "管理者 一郎",
            False,
            156,
            12,
            "en",
        ),
        (
            "3",
            3,
            "プログラミング入門：JavaScript基礎",
            "JavaScriptの基本的な概念と文法を学習します",
            JAVASCRIPT_CONTENT,
            ResourceCategory.TECHNOLOGY,
            ResourceType.COURSE,
            LearningLevel.BEGINNER,
            ["プログラミング", "JavaScript", "入門"],
            "dev-1",
            "Developer User",
            True,
            89,
            7,
            "ja",
        ),
    ]

    resources = []
    for (
        resource_id,
        days_ago,
        title,
        description,
        content,
        category,
        resource_type,
        level,
        tags,
        author_id,
        author_name,
        featured,
        views,
        likes,
        language,
    ) in rows:
        created_at = now - timedelta(days=days_ago)
        resources.append(
            Resource(
                id=ResourceId(resource_id),
                title=title,
                description=description,
                content=content,
                category=category,
                type=resource_type,
                level=level,
                tags=tags,
                author_id=AuthorId(author_id),
                author_name=author_name,
                created_at=created_at,
                updated_at=created_at,
                published=True,
                featured=featured,
                views=views,
                likes=likes,
                language=language,
            )
        )
    return resources


async def seed_resources(
    repository: ResourceRepository, now: Optional[datetime] = None
) -> int:
    """Insert the sample resources into a repository.

    Args:
        repository: Repository to fill
        now: Reference time for the sample timestamps

    Returns:
        Number of resources inserted
    """
    with logfire.span("seed_resources"):
        resources = sample_resources(now)
        for resource in resources:
            await repository.add(resource)

        logfire.info("Sample resources seeded", count=len(resources))
        return len(resources)
