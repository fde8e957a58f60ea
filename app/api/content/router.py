"""Content categorization endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException, status

from app.config.logger import app_logger
from app.api.content.schemas import (
    AnalyzeFormRequest,
    AnalyzeFormResponse,
    CategorySchema,
    ContentRecordSchema,
    ContentTextRequest,
    MatchesResponse,
    PatternInsightsSchema,
    RecommendationsResponse,
    SimilarContentSchema,
    SimilarityRequest,
    SimilarityResponse,
    recommendations_to_schema,
)
from app.models.content import get_category_value
from app.services.auto_apply import analyze_form
from app.services.category_recommender import recommend
from app.services.content_canon import get_catalog
from app.services.corpus_matcher import match_corpus
from app.services.text_similarity import compute_similarity
from app.utils.responses import SuccessResponse, success_response

router = APIRouter(prefix="/v1/content", tags=["content"])

RECOMMENDATION_ERROR = "An error occurred while updating recommendations."


def _internal_error(action: str, exc: Exception) -> HTTPException:
    app_logger.exception(f"Error {action}: {exc}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=RECOMMENDATION_ERROR,
    )


@router.get(
    "/categories",
    response_model=SuccessResponse[List[CategorySchema]],
    summary="List classification categories and their options",
)
async def list_categories() -> SuccessResponse[List[CategorySchema]]:
    try:
        catalog = get_catalog()
    except Exception as exc:
        raise _internal_error("loading categories", exc)

    categories = [
        CategorySchema(
            key=category.key,
            label=category.label,
            description=definition.description,
            options=list(definition.options),
        )
        for category, definition in catalog.definitions.items()
    ]
    return success_response(data=categories, message="Categories retrieved successfully")


@router.get(
    "/corpus",
    response_model=SuccessResponse[List[ContentRecordSchema]],
    summary="List the historical content used for recommendations",
)
async def list_corpus() -> SuccessResponse[List[ContentRecordSchema]]:
    try:
        catalog = get_catalog()
    except Exception as exc:
        raise _internal_error("loading corpus", exc)

    records = [ContentRecordSchema.from_record(record) for record in catalog.corpus]
    return success_response(data=records, message="Historical content retrieved successfully")


@router.post(
    "/similarity",
    response_model=SuccessResponse[SimilarityResponse],
    summary="Cosine similarity between two texts",
)
async def similarity(request: SimilarityRequest) -> SuccessResponse[SimilarityResponse]:
    score = compute_similarity(request.text_a, request.text_b)
    return success_response(data=SimilarityResponse(similarity=score))


@router.post(
    "/matches",
    response_model=SuccessResponse[MatchesResponse],
    summary="Historical content similar to a title and description",
)
async def matches(request: ContentTextRequest) -> SuccessResponse[MatchesResponse]:
    try:
        catalog = get_catalog()
        results = match_corpus(request.title, request.description, catalog.corpus)
    except Exception as exc:
        raise _internal_error("matching corpus", exc)

    return success_response(
        data=MatchesResponse(
            matches=[SimilarContentSchema.from_result(result) for result in results],
            total=len(results),
        )
    )


@router.post(
    "/recommendations",
    response_model=SuccessResponse[RecommendationsResponse],
    summary="Recommend category values for a title and description",
)
async def recommendations(request: ContentTextRequest) -> SuccessResponse[RecommendationsResponse]:
    try:
        catalog = get_catalog()
        result = recommend(request.title, request.description, catalog.corpus, catalog.definitions)
    except Exception as exc:
        raise _internal_error("generating recommendations", exc)

    return success_response(
        data=RecommendationsResponse(
            recommendations=recommendations_to_schema(result.recommendations),
            insights=PatternInsightsSchema.from_insights(result.insights),
        )
    )


@router.post(
    "/analyze",
    response_model=SuccessResponse[AnalyzeFormResponse],
    summary="Recompute recommendations for a form and auto-apply confident values",
)
async def analyze(request: AnalyzeFormRequest) -> SuccessResponse[AnalyzeFormResponse]:
    """Score the live form against the corpus.

    Top recommendations above the auto-apply threshold are written into the
    returned form; `applied` lists exactly the fields that changed.
    """
    try:
        catalog = get_catalog()
    except Exception as exc:
        raise _internal_error("loading catalog", exc)

    record = request.form.to_record()
    invalid = [
        f"{category.key}={get_category_value(record, category)!r}"
        for category in catalog.definitions
        if get_category_value(record, category)
        and not catalog.is_valid_option(category, get_category_value(record, category))
    ]
    if invalid:
        raise HTTPException(
            status_code=422,
            detail=f"Unknown category values: {', '.join(invalid)}",
        )

    try:
        analysis = analyze_form(record, catalog=catalog)
    except Exception as exc:
        raise _internal_error("updating recommendations", exc)

    return success_response(
        data=AnalyzeFormResponse(
            state=analysis.state.value,
            form=ContentRecordSchema.from_record(analysis.record),
            applied={category.key: value for category, value in analysis.applied.items()},
            recommendations=recommendations_to_schema(analysis.recommendations),
            insights=PatternInsightsSchema.from_insights(analysis.insights),
        )
    )
