"""
Category recommendations aggregated from similar historical content.

Each matched corpus record votes for its own value in every category with a
weight of `similarity * 100`. Votes are summed, not averaged, so a value backed
by several moderately similar records can outrank one backed by a single close
match.
"""

from __future__ import annotations

import math
import time
from typing import Dict, Iterable, List, Mapping, Optional

from app.config.logger import app_logger, log_performance
from app.config.settings import settings
from app.models.content import (
    Category,
    CategoryDefinition,
    ContentRecord,
    Recommendation,
    RecommendationResult,
    SimilarityResult,
    get_category_value,
)
from app.services.corpus_matcher import combine_text, match_corpus


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _recommend_category(
    category: Category,
    definition: CategoryDefinition,
    matches: Iterable[SimilarityResult],
) -> List[Recommendation]:
    # dicts keep insertion order, so accumulators follow the declared options
    confidence: Dict[str, float] = {option: 0.0 for option in definition.options}
    counts: Dict[str, int] = {option: 0 for option in definition.options}

    for match in matches:
        value = get_category_value(match.record, category)
        if value in confidence:
            confidence[value] += match.similarity * 100
            counts[value] += 1

    recommendations = [
        Recommendation(value=option, confidence=_round_half_up(score), similar=counts[option])
        for option, score in confidence.items()
    ]
    recommendations = [rec for rec in recommendations if rec.confidence > 0]
    return sorted(recommendations, key=lambda rec: rec.confidence, reverse=True)


def aggregate_recommendations(
    matches: List[SimilarityResult],
    definitions: Mapping[Category, CategoryDefinition],
) -> Dict[Category, List[Recommendation]]:
    """Ranked recommendations for every defined category."""
    return {
        category: _recommend_category(category, definition, matches)
        for category, definition in definitions.items()
    }


def recommend(
    title: str,
    description: str,
    corpus: Iterable[ContentRecord],
    definitions: Mapping[Category, CategoryDefinition],
    similarity_floor: Optional[float] = None,
    insights_limit: Optional[int] = None,
) -> RecommendationResult:
    """
    Match the live title/description against the corpus and aggregate the
    matches into per-category recommendations.

    Blank text returns an empty result (no categories, no matches).
    """
    limit = settings.INSIGHTS_LIMIT if insights_limit is None else insights_limit
    if not combine_text(title, description):
        return RecommendationResult(insights_limit=limit)

    start = time.perf_counter()
    matches = match_corpus(title, description, corpus, similarity_floor=similarity_floor)
    recommendations = aggregate_recommendations(matches, definitions)
    log_performance("recommend", time.perf_counter() - start, matches=len(matches))

    app_logger.debug(
        f"Recommendations for {len(recommendations)} categories from {len(matches)} similar records"
    )
    return RecommendationResult(
        recommendations=recommendations,
        similar_content=matches,
        insights_limit=limit,
    )
