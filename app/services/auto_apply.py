"""
Auto-apply policy and form analysis.

The form layer calls `analyze_form` whenever the title or description changes
and stores the returned record itself; nothing here keeps state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional

from app.config.logger import app_logger
from app.config.settings import settings
from app.models.content import (
    Category,
    ContentRecord,
    PatternInsights,
    Recommendation,
    get_category_value,
    set_category_value,
)
from app.services.category_recommender import recommend
from app.services.content_canon import ContentCatalog, get_catalog
from app.services.corpus_matcher import combine_text


class FormState(str, Enum):
    IDLE = "idle"  # no meaningful text yet
    SCORING = "scoring"  # transient inside analyze_form, never returned
    SCORED = "scored"


@dataclass
class FormAnalysis:
    """Everything the form layer needs after a title/description change."""

    state: FormState
    record: ContentRecord
    recommendations: Dict[Category, List[Recommendation]] = field(default_factory=dict)
    insights: Optional[PatternInsights] = None
    applied: Dict[Category, str] = field(default_factory=dict)


def resolve_auto_apply(
    record: ContentRecord,
    recommendations: Mapping[Category, List[Recommendation]],
    threshold: Optional[int] = None,
) -> Dict[Category, str]:
    """
    Field updates for categories whose top recommendation is strong enough.

    Only the best suggestion per category is considered, it must score
    strictly above `threshold`, and categories already holding that value
    are left out.
    """
    limit = settings.AUTO_APPLY_THRESHOLD if threshold is None else threshold

    updates: Dict[Category, str] = {}
    for category, recs in recommendations.items():
        if not recs:
            continue
        top = recs[0]
        if top.confidence > limit and get_category_value(record, category) != top.value:
            updates[category] = top.value
    return updates


def apply_updates(record: ContentRecord, updates: Mapping[Category, str]) -> ContentRecord:
    """Return `record` with `updates` applied; the same object when there is nothing to apply."""
    if not updates:
        return record
    updated = record
    for category, value in updates.items():
        updated = set_category_value(updated, category, value)
    return updated


def analyze_form(
    record: ContentRecord,
    catalog: Optional[ContentCatalog] = None,
    similarity_floor: Optional[float] = None,
    threshold: Optional[int] = None,
    insights_limit: Optional[int] = None,
) -> FormAnalysis:
    """Recompute recommendations for the live form and resolve auto-apply."""
    if not combine_text(record.title, record.description):
        return FormAnalysis(state=FormState.IDLE, record=record)

    catalog = catalog or get_catalog()
    result = recommend(
        record.title,
        record.description,
        catalog.corpus,
        catalog.definitions,
        similarity_floor=similarity_floor,
        insights_limit=insights_limit,
    )
    updates = resolve_auto_apply(record, result.recommendations, threshold=threshold)
    if updates:
        app_logger.info(
            "Auto-applied " + ", ".join(f"{category.key}={value}" for category, value in updates.items())
        )

    return FormAnalysis(
        state=FormState.SCORED,
        record=apply_updates(record, updates),
        recommendations=result.recommendations,
        insights=result.insights,
        applied=updates,
    )
