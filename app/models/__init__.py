"""Models module - domain types shared by the services and the API layer."""

from app.models.content import (
    CATEGORY_ACCESSORS,
    Category,
    CategoryAccessor,
    CategoryDefinition,
    ContentRecord,
    PatternInsights,
    Recommendation,
    RecommendationResult,
    SimilarityResult,
    get_category_value,
    set_category_value,
)

__all__ = [
    "CATEGORY_ACCESSORS",
    "Category",
    "CategoryAccessor",
    "CategoryDefinition",
    "ContentRecord",
    "PatternInsights",
    "Recommendation",
    "RecommendationResult",
    "SimilarityResult",
    "get_category_value",
    "set_category_value",
]
