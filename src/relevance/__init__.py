"""Relevance scoring and recommendation ranking.

This module scores experts, clinical trials and publications against a
user's interest profile and orders them into recommendations.

Public API:
    - RelevanceScoringService: score, classify and recommend
    - ProfileService: Load and validate interest profiles
    - CatalogService: Load candidate pools
    - InterestProfile, Expert, Trial, Publication: Input models
    - ScoreResult, MatchLabel, RankedRecommendation: Output models
    - RankedPolicy, CuratedPolicy, get_policy: Recommendation policies
    - RelevanceConfig: Configuration settings
"""

from src.relevance.catalog import CatalogService, get_candidate
from src.relevance.config import (
    RelevanceConfig,
    get_relevance_config,
    reset_relevance_config,
)
from src.relevance.models import (
    CandidateKind,
    Expert,
    InterestProfile,
    MatchLabel,
    MatchTier,
    Publication,
    RankedRecommendation,
    ScoreBreakdown,
    ScoreResult,
    Trial,
    UserType,
)
from src.relevance.policies import (
    CuratedPolicy,
    CurationRule,
    RankedPolicy,
    RecommendationPolicy,
    get_policy,
)
from src.relevance.profile import ProfileService
from src.relevance.service import RelevanceScoringService

__all__ = [
    "RelevanceScoringService",
    "ProfileService",
    "CatalogService",
    "get_candidate",
    "InterestProfile",
    "Expert",
    "Trial",
    "Publication",
    "CandidateKind",
    "UserType",
    "ScoreResult",
    "ScoreBreakdown",
    "MatchLabel",
    "MatchTier",
    "RankedRecommendation",
    "RecommendationPolicy",
    "RankedPolicy",
    "CuratedPolicy",
    "CurationRule",
    "get_policy",
    "RelevanceConfig",
    "get_relevance_config",
    "reset_relevance_config",
]
