"""Relevance scoring service implementation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from src.relevance.config import RelevanceConfig, get_relevance_config
from src.relevance.matchers import (
    any_tag_overlaps,
    contains,
    extract_keywords,
    find_keyword_hits,
    normalize_tags,
    normalize_text,
)
from src.relevance.models import (
    CONDITION_SPECIALIZATION,
    CONDITION_TAG,
    CONDITION_TITLE,
    FIELD_SPECIALIZATION,
    FIELD_TAG,
    FIELD_TITLE,
    MATCH_LABEL_TEXT,
    Expert,
    InterestProfile,
    MatchLabel,
    MatchTier,
    Publication,
    RankedRecommendation,
    ScoreBreakdown,
    ScoredCandidate,
    ScoreResult,
    Trial,
    UserType,
)
from src.relevance.policies import RecommendationPolicy, get_policy
from src.utils.logging import get_logger

logger = get_logger(__name__)

AnyCandidate = Expert | Trial | Publication


class RelevanceScoringService:
    """Service for scoring candidates against an interest profile.

    Scoring is pure: the same profile and candidate always produce the
    same result, and no input is ever rejected. Empty inputs score 0.
    """

    def __init__(self, config: RelevanceConfig | None = None) -> None:
        self.config = config or get_relevance_config()

    def score_breakdown(
        self, profile: InterestProfile, candidate: AnyCandidate
    ) -> ScoreBreakdown:
        """Compute the unclamped points awarded by each signal."""
        condition = normalize_text(profile.condition)
        field = normalize_text(profile.field_of_research)
        specialization = normalize_text(candidate.specialization_text)
        title = normalize_text(candidate.title_text)
        tags = normalize_tags(candidate.tags)

        signals: list[str] = []
        tag_points = 0
        specialization_points = 0
        title_points = 0

        if any_tag_overlaps(condition, tags):
            tag_points += self.config.tag_match_points
            signals.append(CONDITION_TAG)
        if any_tag_overlaps(field, tags):
            tag_points += self.config.tag_match_points
            signals.append(FIELD_TAG)

        if contains(specialization, condition):
            specialization_points += self.config.specialization_points
            signals.append(CONDITION_SPECIALIZATION)
        if contains(specialization, field):
            specialization_points += self.config.specialization_points
            signals.append(FIELD_SPECIALIZATION)

        if contains(title, condition):
            title_points += self.config.title_points
            signals.append(CONDITION_TITLE)
        if contains(title, field):
            title_points += self.config.title_points
            signals.append(FIELD_TITLE)

        keywords = extract_keywords(
            condition, field, min_length=self.config.min_keyword_length
        )
        hits = find_keyword_hits(keywords, tags)

        return ScoreBreakdown(
            tag_points=tag_points,
            specialization_points=specialization_points,
            title_points=title_points,
            keyword_points=len(hits) * self.config.keyword_points,
            matched_signals=tuple(signals),
            matched_keywords=tuple(hits),
        )

    def score(self, profile: InterestProfile, candidate: AnyCandidate) -> ScoreResult:
        """Score a candidate and attach its match label.

        The summed points are clamped to [0, max_score] here and nowhere else.
        """
        breakdown = self.score_breakdown(profile, candidate)
        total = max(0, min(breakdown.raw_total, self.config.max_score))
        return ScoreResult(score=total, label=self.classify(total), breakdown=breakdown)

    def classify(self, score: int) -> MatchLabel:
        """Map a score onto its match label (inclusive lower bounds)."""
        if score >= self.config.excellent_threshold:
            tier = MatchTier.EXCELLENT
        elif score >= self.config.good_threshold:
            tier = MatchTier.GOOD
        elif score >= self.config.moderate_threshold:
            tier = MatchTier.MODERATE
        else:
            tier = MatchTier.LOW
        return MatchLabel(text=MATCH_LABEL_TEXT[tier], tier=tier)

    def score_all(
        self, profile: InterestProfile, candidates: Iterable[AnyCandidate]
    ) -> list[ScoredCandidate]:
        """Score every candidate, preserving input order."""
        return [
            ScoredCandidate(candidate=candidate, result=self.score(profile, candidate))
            for candidate in candidates
        ]

    def recommend(
        self,
        profile: InterestProfile,
        user_type: UserType | str,
        candidates: Iterable[AnyCandidate],
        policy: RecommendationPolicy | None = None,
        limit: int | None = None,
    ) -> list[RankedRecommendation]:
        """Score the pool and let ``policy`` choose what to surface.

        Falls back to the configured default policy and limit.
        """
        policy = policy or get_policy(self.config.default_policy)
        if limit is None:
            limit = self.config.recommendation_limit

        scored = self.score_all(profile, candidates)
        recommendations = policy.select(profile, user_type, scored)
        if limit is not None:
            recommendations = recommendations[: max(0, limit)]

        logger.debug(
            "Recommended %d of %d candidates (policy=%s, user_type=%s)",
            len(recommendations),
            len(scored),
            policy.name,
            getattr(user_type, "value", user_type),
        )
        return recommendations

    def format_result(self, candidate: AnyCandidate, result: ScoreResult) -> str:
        """Format a ScoreResult for CLI output."""
        breakdown = result.breakdown
        lines: list[str] = []
        lines.append(f"[{candidate.kind}] {candidate.id}: {candidate.display_name}")
        lines.append(f"Match: {result.label.text} (score={result.score})")
        lines.append(
            "Points: "
            f"tags={breakdown.tag_points} "
            f"specialization={breakdown.specialization_points} "
            f"title={breakdown.title_points} "
            f"keywords={breakdown.keyword_points}"
        )
        if breakdown.raw_total != result.score:
            lines.append(f"Raw total: {breakdown.raw_total} (clamped)")
        if breakdown.matched_keywords:
            lines.append(f"Keywords: {', '.join(breakdown.matched_keywords)}")
        return "\n".join(lines)

    def format_recommendations(
        self, recommendations: Sequence[RankedRecommendation]
    ) -> str:
        """Format recommendations for CLI output."""
        if not recommendations:
            return "No recommendations."

        lines: list[str] = []
        for position, rec in enumerate(recommendations, start=1):
            lines.append(
                f"{position}. {rec.candidate.describe()} "
                f"[{rec.score.label.text}, score={rec.score.score}]"
            )
            lines.append(f"   Reason: {rec.reason}")
        return "\n".join(lines)
