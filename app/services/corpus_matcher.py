"""Score live content against the historical corpus."""

from __future__ import annotations

from typing import Iterable, List, Optional

from app.config.logger import app_logger
from app.config.settings import settings
from app.models.content import ContentRecord, SimilarityResult
from app.services.text_similarity import compute_similarity


def combine_text(title: str, description: str) -> str:
    return f"{title or ''} {description or ''}".strip()


def match_corpus(
    title: str,
    description: str,
    corpus: Iterable[ContentRecord],
    similarity_floor: Optional[float] = None,
) -> List[SimilarityResult]:
    """
    Corpus records similar to the live title/description, most similar first.

    Only records scoring strictly above `similarity_floor` are kept; equal
    scores keep corpus order. Blank live text yields no matches.
    """
    combined = combine_text(title, description)
    if not combined:
        return []

    floor = settings.SIMILARITY_FLOOR if similarity_floor is None else similarity_floor

    scored = [
        SimilarityResult(record=record, similarity=compute_similarity(combined, record.combined_text))
        for record in corpus
    ]
    matches = [result for result in scored if result.similarity > floor]
    # sorted() is stable, so ties keep corpus declaration order
    matches = sorted(matches, key=lambda result: result.similarity, reverse=True)

    app_logger.debug(f"Corpus match: {len(matches)} of {len(scored)} records above floor {floor}")
    return matches
