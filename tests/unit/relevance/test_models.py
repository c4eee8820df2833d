"""Tests for relevance data models."""

from __future__ import annotations

import pytest


class TestInterestProfile:
    """Test InterestProfile model."""

    def test_defaults_are_empty(self):
        """A profile with no fields is valid and empty."""
        from src.relevance.models import InterestProfile

        profile = InterestProfile()

        assert profile.condition == ""
        assert profile.field_of_research == ""
        assert profile.user_type is None
        assert profile.is_empty is True

    def test_accepts_product_field_names(self):
        """Onboarding-form and camelCase text aliases should populate the fields."""
        from src.relevance.models import InterestProfile, UserType

        profile = InterestProfile.from_dict(
            {
                "primaryCondition": "Cancer",
                "fieldOfResearch": "Oncology",
                "type": "Researcher",
            }
        )
        camel_case = InterestProfile.from_dict(
            {"conditionText": "Cancer", "fieldText": "Oncology"}
        )

        assert profile.condition == "Cancer"
        assert profile.field_of_research == "Oncology"
        assert profile.user_type == UserType.RESEARCHER
        assert camel_case.condition == "Cancer"
        assert camel_case.field_of_research == "Oncology"

    def test_null_text_becomes_empty(self):
        """Null condition/field should degrade to empty strings."""
        from src.relevance.models import InterestProfile

        profile = InterestProfile.from_dict(
            {"condition": None, "field_of_research": None, "user_type": ""}
        )

        assert profile.condition == ""
        assert profile.field_of_research == ""
        assert profile.user_type is None

    def test_whitespace_only_profile_is_empty(self):
        """Whitespace-only text counts as empty."""
        from src.relevance.models import InterestProfile

        assert InterestProfile(condition="   ").is_empty is True

    def test_invalid_user_type_raises(self):
        """Unknown user types fail validation."""
        from pydantic import ValidationError

        from src.relevance.models import InterestProfile

        with pytest.raises(ValidationError):
            InterestProfile(condition="cancer", user_type="doctor")

    def test_profile_is_immutable(self):
        """Profiles are frozen."""
        from pydantic import ValidationError

        from src.relevance.models import InterestProfile

        profile = InterestProfile(condition="cancer")

        with pytest.raises(ValidationError):
            profile.condition = "diabetes"  # type: ignore[misc]

    def test_to_dict_uses_field_names(self):
        """to_dict should emit snake_case field names."""
        from src.relevance.models import InterestProfile

        data = InterestProfile(condition="cancer", user_type="patient").to_dict()

        assert data == {
            "condition": "cancer",
            "field_of_research": "",
            "user_type": "patient",
        }


class TestCandidates:
    """Test Expert, Trial and Publication models."""

    def test_expert_scoring_fields(self, oncology_expert):
        """Experts expose specialization but no title."""
        from src.relevance.models import CandidateKind

        assert oncology_expert.candidate_kind == CandidateKind.EXPERT
        assert oncology_expert.specialization_text == "Oncology & Immunotherapy"
        assert oncology_expert.title_text is None

    def test_publication_scoring_fields(self, immunotherapy_publication):
        """Publications expose title but no specialization."""
        assert immunotherapy_publication.specialization_text is None
        assert immunotherapy_publication.title_text.startswith("Immunotherapy")

    def test_numeric_ids_are_coerced_to_strings(self):
        """Ids loaded as numbers become strings."""
        from src.relevance.models import Expert

        expert = Expert(id=7, name="Prof. Ahmed Hassan")  # type: ignore[arg-type]

        assert expert.id == "7"

    def test_null_tags_become_empty(self):
        """Missing tag lists degrade to empty lists."""
        from src.relevance.models import Trial

        trial = Trial(id="t", title="Trial", tags=None)  # type: ignore[arg-type]

        assert trial.tags == []

    def test_empty_id_raises(self):
        """Candidates require a non-empty id."""
        from pydantic import ValidationError

        from src.relevance.models import Expert

        with pytest.raises(ValidationError):
            Expert(id="", name="Dr. X")

    def test_describe_lines(self, oncology_expert, immunotherapy_publication):
        """describe() renders the one-line summary for each kind."""
        from src.relevance.models import Trial

        trial = Trial(
            id="trial-1",
            title="Phase III Study of Novel Immunotherapy for Advanced Melanoma",
            phase="Phase III",
            status="Recruiting",
        )

        assert oncology_expert.describe() == (
            "Expert: Dr. Sarah Chen, Oncology & Immunotherapy at "
            "Memorial Sloan Kettering Cancer Center"
        )
        assert trial.describe() == (
            "Clinical Trial: Phase III Study of Novel Immunotherapy for Advanced "
            "Melanoma, Phase: Phase III, Status: Recruiting"
        )
        assert immunotherapy_publication.describe().endswith(
            "by Chen, D.S., Mellman, I., Wolchok, J.D. (2024)"
        )


class TestResultModels:
    """Test ScoreResult, MatchLabel and RankedRecommendation invariants."""

    def test_score_result_rejects_out_of_range(self):
        """Scores outside [0, 100] are rejected."""
        from src.relevance.models import MatchLabel, MatchTier, ScoreResult

        label = MatchLabel(text="Excellent Match", tier=MatchTier.EXCELLENT)

        with pytest.raises(ValueError):
            ScoreResult(score=101, label=label)
        with pytest.raises(ValueError):
            ScoreResult(score=-1, label=MatchLabel("Low Match", MatchTier.LOW))

    def test_score_result_rejects_non_integer(self):
        """Scores must be integers."""
        from src.relevance.models import MatchLabel, MatchTier, ScoreResult

        label = MatchLabel(text="Moderate Match", tier=MatchTier.MODERATE)

        with pytest.raises(ValueError):
            ScoreResult(score=50.5, label=label)  # type: ignore[arg-type]

    def test_match_label_text_must_match_tier(self):
        """Label text and tier must agree."""
        from src.relevance.models import MatchLabel, MatchTier

        with pytest.raises(ValueError):
            MatchLabel(text="Good Match", tier=MatchTier.LOW)

    def test_breakdown_raw_total(self):
        """raw_total sums every signal's points."""
        from src.relevance.models import ScoreBreakdown

        breakdown = ScoreBreakdown(
            tag_points=60, specialization_points=30, title_points=20, keyword_points=9
        )

        assert breakdown.raw_total == 119

    def test_recommendation_kind_must_match_candidate(
        self, scoring_service, oncology_expert
    ):
        """A recommendation's kind must be the candidate's kind."""
        from src.relevance.models import (
            CandidateKind,
            InterestProfile,
            RankedRecommendation,
        )

        result = scoring_service.score(InterestProfile(), oncology_expert)

        with pytest.raises(ValueError):
            RankedRecommendation(
                kind=CandidateKind.TRIAL,
                candidate=oncology_expert,
                reason="Mismatch",
                score=result,
            )

    def test_recommendation_to_dict(self, scoring_service, oncology_expert):
        """to_dict flattens the score next to kind, candidate and reason."""
        from src.relevance.models import (
            CandidateKind,
            InterestProfile,
            RankedRecommendation,
        )

        result = scoring_service.score(
            InterestProfile(condition="cancer"), oncology_expert
        )
        data = RankedRecommendation(
            kind=CandidateKind.EXPERT,
            candidate=oncology_expert,
            reason="Because",
            score=result,
        ).to_dict()

        assert data["kind"] == "expert"
        assert data["candidate"]["id"] == "1"
        assert data["reason"] == "Because"
        assert data["score"] == 33
        assert data["label"] == "Low Match"
        assert data["tier"] == "low"
        assert data["breakdown"]["matched_keywords"] == ["cancer"]
