"""Recommendation selection policies.

A policy receives every candidate already scored against the user's
profile and decides which of them to surface, in what order, and with
what reason text. Scoring never depends on the policy.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from src.relevance.models import (
    CONDITION_SPECIALIZATION,
    CONDITION_TAG,
    CONDITION_TITLE,
    FIELD_SPECIALIZATION,
    FIELD_TAG,
    FIELD_TITLE,
    CandidateKind,
    InterestProfile,
    RankedRecommendation,
    ScoredCandidate,
    UserType,
)
from src.utils.logging import get_logger

logger = get_logger(__name__)

_CONDITION_SIGNALS = {CONDITION_TAG, CONDITION_SPECIALIZATION, CONDITION_TITLE}
_FIELD_SIGNALS = {FIELD_TAG, FIELD_SPECIALIZATION, FIELD_TITLE}


@runtime_checkable
class RecommendationPolicy(Protocol):
    """Strategy that turns a scored pool into recommendations."""

    name: str

    def select(
        self,
        profile: InterestProfile,
        user_type: UserType | str,
        scored: Sequence[ScoredCandidate],
    ) -> list[RankedRecommendation]:
        """Return recommendations in display order."""
        ...


def rank_key(item: ScoredCandidate) -> tuple[int, str]:
    """Sort key: highest score first, then candidate id."""
    return (-item.result.score, item.candidate.id)


def explain_match(profile: InterestProfile, item: ScoredCandidate) -> str:
    """Build a reason string from the signals that fired."""
    breakdown = item.result.breakdown
    signals = set(breakdown.matched_signals)

    if signals & _CONDITION_SIGNALS:
        return f"Matches your condition: {profile.condition.strip()}"
    if signals & _FIELD_SIGNALS:
        return f"Aligned with your field of research: {profile.field_of_research.strip()}"
    if breakdown.matched_keywords:
        keywords = ", ".join(dict.fromkeys(breakdown.matched_keywords))
        return f"Shares keywords with your interests: {keywords}"
    return "No direct overlap with your interests"


class RankedPolicy:
    """Surface the whole pool ordered by score, ties broken by id."""

    name = "ranked"

    def select(
        self,
        profile: InterestProfile,
        user_type: UserType | str,
        scored: Sequence[ScoredCandidate],
    ) -> list[RankedRecommendation]:
        return [
            RankedRecommendation(
                kind=item.kind,
                candidate=item.candidate,
                reason=explain_match(profile, item),
                score=item.result,
            )
            for item in sorted(scored, key=rank_key)
        ]


@dataclass(frozen=True)
class CurationRule:
    """Surface the best candidate of ``kind`` with a fixed reason."""

    kind: CandidateKind
    reason: str


DEFAULT_CURATION: dict[UserType, tuple[CurationRule, ...]] = {
    UserType.PATIENT: (
        CurationRule(
            CandidateKind.EXPERT,
            "Top-rated oncology specialist with expertise in your condition",
        ),
        CurationRule(
            CandidateKind.TRIAL,
            "Currently recruiting for a trial matching your profile",
        ),
        CurationRule(
            CandidateKind.PUBLICATION,
            "Latest research relevant to your condition",
        ),
    ),
    UserType.RESEARCHER: (
        CurationRule(
            CandidateKind.PUBLICATION,
            "Highly cited paper in your field of research",
        ),
        CurationRule(
            CandidateKind.EXPERT,
            "Potential collaborator with complementary expertise",
        ),
        CurationRule(
            CandidateKind.TRIAL,
            "Trial seeking researchers with your background",
        ),
    ),
}


def _user_type_key(user_type: UserType | str) -> str:
    return str(getattr(user_type, "value", user_type)).strip().lower()


class CuratedPolicy:
    """Surface one candidate per curation rule for the user's type.

    Each rule picks the highest-scoring candidate of its kind. Kinds with
    no candidates in the pool are skipped, and user types without rules
    get no recommendations.
    """

    name = "curated"

    def __init__(
        self, rules: Mapping[UserType | str, Sequence[CurationRule]] | None = None
    ) -> None:
        source = rules if rules is not None else DEFAULT_CURATION
        self.rules = {_user_type_key(kind): tuple(seq) for kind, seq in source.items()}

    def select(
        self,
        profile: InterestProfile,
        user_type: UserType | str,
        scored: Sequence[ScoredCandidate],
    ) -> list[RankedRecommendation]:
        rules = self.rules.get(_user_type_key(user_type))
        if rules is None:
            logger.warning("No curation rules for user type %r", user_type)
            return []

        recommendations: list[RankedRecommendation] = []
        for rule in rules:
            pool = [item for item in scored if item.kind == rule.kind]
            if not pool:
                continue
            best = min(pool, key=rank_key)
            recommendations.append(
                RankedRecommendation(
                    kind=best.kind,
                    candidate=best.candidate,
                    reason=rule.reason,
                    score=best.result,
                )
            )
        return recommendations


_POLICIES: dict[str, type[RankedPolicy] | type[CuratedPolicy]] = {
    RankedPolicy.name: RankedPolicy,
    CuratedPolicy.name: CuratedPolicy,
}


def available_policies() -> list[str]:
    return sorted(_POLICIES)


def get_policy(name: str) -> RecommendationPolicy:
    """Build a policy by name ('ranked' or 'curated')."""
    key = name.lower().strip()
    if key not in _POLICIES:
        raise ValueError(
            f"Unknown recommendation policy: {name}. "
            f"Must be one of: {', '.join(available_policies())}"
        )
    return _POLICIES[key]()
