"""
Tests for the auto-apply policy and form analysis.

Covers:
- Strict confidence threshold
- Only the top suggestion is applied, and only when it differs
- Idle / scored form states
"""

from app.models.content import Category, ContentRecord, Recommendation
from app.services.auto_apply import (
    FormState,
    analyze_form,
    apply_updates,
    resolve_auto_apply,
)
from app.services.content_canon import default_catalog


GUIDE_TITLE = "Advanced AI Implementation Guide"
GUIDE_DESCRIPTION = "Comprehensive guide for implementing AI systems with focus on human-centered design"


class TestResolveAutoApply:
    """Test which fields the policy overwrites."""

    def test_confidence_at_threshold_is_not_applied(self):
        record = ContentRecord(title="x")
        recs = {Category.FILE_TYPE: [Recommendation(value="PDF", confidence=30, similar=1)]}
        assert resolve_auto_apply(record, recs, threshold=30) == {}

    def test_confidence_above_threshold_is_applied(self):
        record = ContentRecord(title="x", file_type="Web")
        recs = {Category.FILE_TYPE: [Recommendation(value="PDF", confidence=31, similar=1)]}
        assert resolve_auto_apply(record, recs, threshold=30) == {Category.FILE_TYPE: "PDF"}

    def test_matching_value_produces_no_update(self):
        record = ContentRecord(title="x", file_type="PDF")
        recs = {Category.FILE_TYPE: [Recommendation(value="PDF", confidence=31, similar=1)]}
        assert resolve_auto_apply(record, recs, threshold=30) == {}

    def test_only_top_recommendation_is_considered(self):
        record = ContentRecord(title="x", access_level="Premium")
        recs = {
            Category.ACCESS_LEVEL: [
                Recommendation(value="Premium", confidence=80, similar=2),
                Recommendation(value="Public", confidence=70, similar=2),
            ],
            Category.CONTENT_TYPE: [],
        }
        assert resolve_auto_apply(record, recs, threshold=30) == {}

    def test_default_threshold_from_settings(self):
        record = ContentRecord(title="x")
        recs = {
            Category.VISUAL_FORMAT: [Recommendation(value="Video", confidence=30, similar=1)],
            Category.INTERACTIVE_FORMAT: [Recommendation(value="Poll", confidence=31, similar=1)],
        }
        assert resolve_auto_apply(record, recs) == {Category.INTERACTIVE_FORMAT: "Poll"}


class TestApplyUpdates:
    """Test applying field updates."""

    def test_no_updates_returns_same_record(self):
        record = ContentRecord(title="x")
        assert apply_updates(record, {}) is record

    def test_updates_leave_original_and_tags_untouched(self):
        record = ContentRecord(title="x", tags=["#AINews"])
        updated = apply_updates(record, {Category.FILE_TYPE: "PDF", Category.ACCESS_LEVEL: "Public"})
        assert updated.file_type == "PDF"
        assert updated.access_level == "Public"
        assert updated.tags == ["#AINews"]
        assert record.file_type == ""


class TestAnalyzeForm:
    """Test the full form analysis."""

    def test_blank_form_stays_idle(self):
        record = ContentRecord(file_type="Excel")
        analysis = analyze_form(record, catalog=default_catalog())
        assert analysis.state == FormState.IDLE
        assert analysis.record is record
        assert analysis.recommendations == {}
        assert analysis.applied == {}
        assert analysis.insights is None

    def test_matching_guide_fills_form(self):
        record = ContentRecord(title=GUIDE_TITLE, description=GUIDE_DESCRIPTION, tags=["#Mine"])
        analysis = analyze_form(record, catalog=default_catalog())

        assert analysis.state == FormState.SCORED
        assert analysis.record.content_type == "LONG FORM"
        assert analysis.record.distribution_channel == "Premium Content"
        assert analysis.record.interactive_format == "Framework"
        assert analysis.record.tags == ["#Mine"]
        assert analysis.applied[Category.CONTENT_TYPE] == "LONG FORM"
        assert len(analysis.applied) == 7

        assert analysis.insights.top_matches == 1
        assert analysis.insights.similar_content[0].similarity == 1.0

    def test_already_filled_fields_are_not_reapplied(self):
        record = ContentRecord(
            title=GUIDE_TITLE,
            description=GUIDE_DESCRIPTION,
            content_type="LONG FORM",
            file_type="Excel",
        )
        analysis = analyze_form(record, catalog=default_catalog())
        assert Category.CONTENT_TYPE not in analysis.applied
        assert analysis.applied[Category.FILE_TYPE] == "PDF"
        assert analysis.record.file_type == "PDF"

    def test_threshold_override_blocks_auto_apply(self):
        record = ContentRecord(title=GUIDE_TITLE, description=GUIDE_DESCRIPTION)
        analysis = analyze_form(record, catalog=default_catalog(), threshold=100)
        assert analysis.state == FormState.SCORED
        assert analysis.applied == {}
        assert analysis.record is record
        assert analysis.recommendations[Category.CONTENT_TYPE][0].confidence == 100

    def test_unmatched_text_scores_without_insights(self):
        record = ContentRecord(title="Gardening", description="Spring planting calendar")
        analysis = analyze_form(record, catalog=default_catalog())
        assert analysis.state == FormState.SCORED
        assert analysis.insights is None
        assert analysis.applied == {}

    def test_scoring_state_is_never_returned(self):
        catalog = default_catalog()
        records = [
            ContentRecord(),
            ContentRecord(title=GUIDE_TITLE),
            ContentRecord(title="Gardening", description="Spring planting calendar"),
        ]
        states = [analyze_form(record, catalog=catalog).state for record in records]
        assert states == [FormState.IDLE, FormState.SCORED, FormState.SCORED]
