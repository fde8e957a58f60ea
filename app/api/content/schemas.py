"""Request and response schemas for content categorization endpoints."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from app.models.content import (
    Category,
    ContentRecord,
    PatternInsights,
    Recommendation,
    SimilarityResult,
)


class ContentRecordSchema(BaseModel):
    """A content record as exchanged over the API (category keys in camelCase)."""

    title: str = Field(default="", description="Content title")
    description: str = Field(default="", description="Content description")
    distributionChannel: str = Field(default="", description="Where the content will be primarily distributed")
    accessLevel: str = Field(default="", description="Who can access this content")
    contentType: str = Field(default="", description="The primary format of the content")
    writtenFormat: str = Field(default="", description="Specific written content structure")
    fileType: str = Field(default="", description="Final delivery format")
    visualFormat: str = Field(default="", description="Visual elements included")
    interactiveFormat: str = Field(default="", description="Interactive elements included")
    tags: List[str] = Field(default_factory=list, description="Free-form hashtags")

    model_config = {"json_schema_extra": {"example": {
        "title": "Advanced AI Implementation Guide",
        "description": "Comprehensive guide for implementing AI systems with focus on human-centered design",
        "distributionChannel": "",
        "accessLevel": "",
        "contentType": "",
        "writtenFormat": "",
        "fileType": "",
        "visualFormat": "",
        "interactiveFormat": "",
        "tags": [],
    }}}

    def to_record(self) -> ContentRecord:
        return ContentRecord.from_dict(self.model_dump())

    @classmethod
    def from_record(cls, record: ContentRecord) -> "ContentRecordSchema":
        return cls(**record.to_dict())


class CategorySchema(BaseModel):
    key: str = Field(description="Category key (e.g., 'distributionChannel')")
    label: str = Field(description="Human readable label")
    description: str = Field(default="", description="What the category classifies")
    options: List[str] = Field(default_factory=list, description="Allowed values in display order")


class SimilarityRequest(BaseModel):
    """Request schema for POST /v1/content/similarity."""

    text_a: str = Field(default="", description="First text")
    text_b: str = Field(default="", description="Second text")


class SimilarityResponse(BaseModel):
    similarity: float = Field(ge=0.0, le=1.0, description="Cosine similarity (0-1)")


class ContentTextRequest(BaseModel):
    """Request schema for POST /v1/content/matches and /v1/content/recommendations."""

    title: str = Field(default="", description="Live content title")
    description: str = Field(default="", description="Live content description")

    model_config = {"json_schema_extra": {"example": {
        "title": "Advanced AI Implementation Guide",
        "description": "Comprehensive guide for implementing AI systems with focus on human-centered design",
    }}}


class SimilarContentSchema(BaseModel):
    record: ContentRecordSchema
    similarity: float = Field(description="Similarity score (0-1)")

    @classmethod
    def from_result(cls, result: SimilarityResult) -> "SimilarContentSchema":
        return cls(record=ContentRecordSchema.from_record(result.record), similarity=result.similarity)


class MatchesResponse(BaseModel):
    matches: List[SimilarContentSchema] = Field(default_factory=list)
    total: int = Field(default=0, description="Number of records above the similarity floor")


class RecommendationSchema(BaseModel):
    value: str = Field(description="Recommended category value")
    confidence: int = Field(ge=0, description="Summed similarity percentage of supporting records")
    similar: int = Field(ge=0, description="Number of supporting records")

    @classmethod
    def from_recommendation(cls, rec: Recommendation) -> "RecommendationSchema":
        return cls(value=rec.value, confidence=rec.confidence, similar=rec.similar)


class PatternInsightsSchema(BaseModel):
    similar_content: List[SimilarContentSchema] = Field(default_factory=list)
    top_matches: int = Field(default=0, description="Total number of similar records")

    @classmethod
    def from_insights(cls, insights: Optional[PatternInsights]) -> Optional["PatternInsightsSchema"]:
        if insights is None:
            return None
        return cls(
            similar_content=[SimilarContentSchema.from_result(r) for r in insights.similar_content],
            top_matches=insights.top_matches,
        )


def recommendations_to_schema(
    recommendations: Dict[Category, List[Recommendation]],
) -> Dict[str, List[RecommendationSchema]]:
    return {
        category.key: [RecommendationSchema.from_recommendation(rec) for rec in recs]
        for category, recs in recommendations.items()
    }


class RecommendationsResponse(BaseModel):
    recommendations: Dict[str, List[RecommendationSchema]] = Field(
        default_factory=dict, description="Ranked recommendations keyed by category"
    )
    insights: Optional[PatternInsightsSchema] = Field(
        default=None, description="Most similar records, absent when nothing matched"
    )


class AnalyzeFormRequest(BaseModel):
    """Request schema for POST /v1/content/analyze."""

    form: ContentRecordSchema


class AnalyzeFormResponse(BaseModel):
    state: str = Field(description="'idle' when there is no text to score, otherwise 'scored'")
    form: ContentRecordSchema = Field(description="Form with auto-applied values")
    applied: Dict[str, str] = Field(default_factory=dict, description="Fields changed by auto-apply")
    recommendations: Dict[str, List[RecommendationSchema]] = Field(default_factory=dict)
    insights: Optional[PatternInsightsSchema] = None
