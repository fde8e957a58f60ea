"""Domain types for content records, categories and recommendation results."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple


class Category(str, Enum):
    """Single-valued classification dimensions of a content record."""

    DISTRIBUTION_CHANNEL = "distributionChannel"
    ACCESS_LEVEL = "accessLevel"
    CONTENT_TYPE = "contentType"
    WRITTEN_FORMAT = "writtenFormat"
    FILE_TYPE = "fileType"
    VISUAL_FORMAT = "visualFormat"
    INTERACTIVE_FORMAT = "interactiveFormat"

    @property
    def key(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Human label, e.g. "distributionChannel" -> "Distribution Channel"."""
        spaced = re.sub(r"([A-Z])", r" \1", self.value).strip()
        return spaced[:1].upper() + spaced[1:]


@dataclass(frozen=True)
class CategoryDefinition:
    """Allowed options (in display order) and a short description for a category."""

    options: Tuple[str, ...]
    description: str = ""


@dataclass
class ContentRecord:
    """A classified piece of content; used for corpus entries and the live form."""

    title: str = ""
    description: str = ""
    distribution_channel: str = ""
    access_level: str = ""
    content_type: str = ""
    written_format: str = ""
    file_type: str = ""
    visual_format: str = ""
    interactive_format: str = ""
    tags: List[str] = field(default_factory=list)

    @property
    def combined_text(self) -> str:
        return f"{self.title} {self.description}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContentRecord":
        """Build a record from a camelCase mapping (catalog files, API payloads)."""
        return cls(
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            distribution_channel=str(data.get(Category.DISTRIBUTION_CHANNEL.key) or ""),
            access_level=str(data.get(Category.ACCESS_LEVEL.key) or ""),
            content_type=str(data.get(Category.CONTENT_TYPE.key) or ""),
            written_format=str(data.get(Category.WRITTEN_FORMAT.key) or ""),
            file_type=str(data.get(Category.FILE_TYPE.key) or ""),
            visual_format=str(data.get(Category.VISUAL_FORMAT.key) or ""),
            interactive_format=str(data.get(Category.INTERACTIVE_FORMAT.key) or ""),
            tags=list(data.get("tags") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"title": self.title, "description": self.description}
        for category in Category:
            data[category.key] = get_category_value(self, category)
        data["tags"] = list(self.tags)
        return data


class CategoryAccessor(NamedTuple):
    """Reads a category field, or returns a copy of the record with it replaced."""

    get: Callable[[ContentRecord], str]
    set: Callable[[ContentRecord, str], ContentRecord]


CATEGORY_ACCESSORS: Dict[Category, CategoryAccessor] = {
    Category.DISTRIBUTION_CHANNEL: CategoryAccessor(
        lambda r: r.distribution_channel,
        lambda r, v: replace(r, distribution_channel=v),
    ),
    Category.ACCESS_LEVEL: CategoryAccessor(
        lambda r: r.access_level,
        lambda r, v: replace(r, access_level=v),
    ),
    Category.CONTENT_TYPE: CategoryAccessor(
        lambda r: r.content_type,
        lambda r, v: replace(r, content_type=v),
    ),
    Category.WRITTEN_FORMAT: CategoryAccessor(
        lambda r: r.written_format,
        lambda r, v: replace(r, written_format=v),
    ),
    Category.FILE_TYPE: CategoryAccessor(
        lambda r: r.file_type,
        lambda r, v: replace(r, file_type=v),
    ),
    Category.VISUAL_FORMAT: CategoryAccessor(
        lambda r: r.visual_format,
        lambda r, v: replace(r, visual_format=v),
    ),
    Category.INTERACTIVE_FORMAT: CategoryAccessor(
        lambda r: r.interactive_format,
        lambda r, v: replace(r, interactive_format=v),
    ),
}


def get_category_value(record: ContentRecord, category: Category) -> str:
    return CATEGORY_ACCESSORS[category].get(record)


def set_category_value(record: ContentRecord, category: Category, value: str) -> ContentRecord:
    """Return a copy of `record` with the category field set to `value`."""
    return CATEGORY_ACCESSORS[category].set(record, value)


@dataclass(frozen=True)
class SimilarityResult:
    record: ContentRecord
    similarity: float


@dataclass(frozen=True)
class Recommendation:
    """A suggested category value with its aggregate confidence and support count."""

    value: str
    confidence: int
    similar: int


@dataclass(frozen=True)
class PatternInsights:
    similar_content: List[SimilarityResult]
    top_matches: int


@dataclass
class RecommendationResult:
    """Per-category recommendations plus every corpus match that produced them."""

    recommendations: Dict[Category, List[Recommendation]] = field(default_factory=dict)
    similar_content: List[SimilarityResult] = field(default_factory=list)
    insights_limit: int = 3

    @property
    def insights(self) -> Optional[PatternInsights]:
        """Top matches for display, or None when nothing matched."""
        if not self.similar_content:
            return None
        return PatternInsights(
            similar_content=self.similar_content[: self.insights_limit],
            top_matches=len(self.similar_content),
        )

    def top(self, category: Category) -> Optional[Recommendation]:
        recs = self.recommendations.get(category) or []
        return recs[0] if recs else None
