"""Data models for the relevance scoring engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class UserType(str, Enum):
    """Kind of user a recommendation is produced for."""

    PATIENT = "patient"
    RESEARCHER = "researcher"


class CandidateKind(str, Enum):
    """Kinds of records that can be recommended."""

    EXPERT = "expert"
    TRIAL = "trial"
    PUBLICATION = "publication"


class MatchTier(str, Enum):
    """Presentation tier of a match label."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    LOW = "low"


MATCH_LABEL_TEXT: dict[MatchTier, str] = {
    MatchTier.EXCELLENT: "Excellent Match",
    MatchTier.GOOD: "Good Match",
    MatchTier.MODERATE: "Moderate Match",
    MatchTier.LOW: "Low Match",
}

# Signal names recorded in ScoreBreakdown.matched_signals
CONDITION_TAG = "condition_tag"
FIELD_TAG = "field_tag"
CONDITION_SPECIALIZATION = "condition_specialization"
FIELD_SPECIALIZATION = "field_specialization"
CONDITION_TITLE = "condition_title"
FIELD_TITLE = "field_title"


class InterestProfile(BaseModel):
    """A user's free-text interests used for scoring.

    Accepts the product's field names (``primaryCondition``,
    ``fieldOfResearch``) as well as the snake_case ones.
    """

    model_config = ConfigDict(frozen=True)

    condition: str = Field(
        default="",
        validation_alias=AliasChoices(
            "condition", "condition_text", "conditionText", "primaryCondition"
        ),
        description="Patient condition / disease of interest",
    )
    field_of_research: str = Field(
        default="",
        validation_alias=AliasChoices(
            "field_of_research", "field_text", "fieldText", "fieldOfResearch"
        ),
        description="Researcher field of research",
    )
    user_type: UserType | None = Field(
        default=None,
        validation_alias=AliasChoices("user_type", "userType", "type"),
        description="Optional hint for which recommendation curation to apply",
    )

    @field_validator("condition", "field_of_research", mode="before")
    @classmethod
    def _none_to_empty(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("user_type", mode="before")
    @classmethod
    def _normalize_user_type(cls, v: object) -> object:
        if isinstance(v, str):
            value = v.lower().strip()
            return value or None
        return v

    @property
    def is_empty(self) -> bool:
        return not self.condition.strip() and not self.field_of_research.strip()

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> InterestProfile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class _CandidateBase(BaseModel):
    """Fields shared by every recommendable record."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1, description="Unique identifier")
    tags: list[str] = Field(default_factory=list, description="Descriptive tags")

    @field_validator("tags", mode="before")
    @classmethod
    def _none_to_empty_tags(cls, v: object) -> object:
        return [] if v is None else v

    @property
    def candidate_kind(self) -> CandidateKind:
        return CandidateKind(getattr(self, "kind"))

    @property
    def specialization_text(self) -> str | None:
        """Specialization-like text used for scoring, if any."""
        return None

    @property
    def title_text(self) -> str | None:
        """Title-like text used for scoring, if any."""
        return None

    @property
    def display_name(self) -> str:
        return self.title_text or self.id

    def describe(self) -> str:
        return self.display_name

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")


class Expert(_CandidateBase):
    """A medical expert / potential collaborator."""

    kind: Literal["expert"] = "expert"
    name: str = Field(..., description="Full name")
    specialization: str | None = Field(default=None, description="Specialization")
    institution: str = Field(default="", description="Affiliated institution")
    country: str = Field(default="", description="Country")

    @property
    def specialization_text(self) -> str | None:
        return self.specialization

    @property
    def display_name(self) -> str:
        return self.name

    def describe(self) -> str:
        return f"Expert: {self.name}, {self.specialization or ''} at {self.institution}"


class Trial(_CandidateBase):
    """A clinical trial."""

    kind: Literal["trial"] = "trial"
    title: str = Field(..., description="Trial title")
    phase: str = Field(default="", description="Trial phase, e.g. 'Phase III'")
    status: str = Field(default="", description="Recruitment status")
    description: str = Field(default="", description="Full description")
    location: str = Field(default="", description="Sites")
    summary: str = Field(default="", description="Plain-language summary")

    @property
    def title_text(self) -> str | None:
        return self.title

    def describe(self) -> str:
        return f"Clinical Trial: {self.title}, Phase: {self.phase}, Status: {self.status}"


class Publication(_CandidateBase):
    """A research publication."""

    kind: Literal["publication"] = "publication"
    title: str = Field(..., description="Publication title")
    authors: list[str] = Field(default_factory=list, description="Author list")
    abstract: str = Field(default="", description="Abstract")
    summary: str = Field(default="", description="Plain-language summary")
    year: int | None = Field(default=None, description="Publication year")

    @property
    def title_text(self) -> str | None:
        return self.title

    def describe(self) -> str:
        authors = ", ".join(self.authors)
        return f"Publication: {self.title} by {authors} ({self.year})"


Candidate = Annotated[Union[Expert, Trial, Publication], Field(discriminator="kind")]


@dataclass(frozen=True)
class MatchLabel:
    """Human-readable classification of a score."""

    text: str
    tier: MatchTier

    def __post_init__(self) -> None:
        expected = MATCH_LABEL_TEXT.get(self.tier)
        if expected != self.text:
            raise ValueError(
                f"Label text {self.text!r} does not match tier {self.tier.value!r}"
            )


@dataclass(frozen=True)
class ScoreBreakdown:
    """Points awarded by each signal before clamping."""

    tag_points: int = 0
    specialization_points: int = 0
    title_points: int = 0
    keyword_points: int = 0
    matched_signals: tuple[str, ...] = ()
    matched_keywords: tuple[str, ...] = ()

    @property
    def raw_total(self) -> int:
        return (
            self.tag_points
            + self.specialization_points
            + self.title_points
            + self.keyword_points
        )


@dataclass(frozen=True)
class ScoreResult:
    """Bounded relevance score with its label."""

    score: int
    label: MatchLabel
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)

    def __post_init__(self) -> None:
        if not isinstance(self.score, int) or isinstance(self.score, bool):
            raise ValueError(f"score must be an integer (got {self.score!r})")
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "label": self.label.text,
            "tier": self.label.tier.value,
            "breakdown": {
                "tag_points": self.breakdown.tag_points,
                "specialization_points": self.breakdown.specialization_points,
                "title_points": self.breakdown.title_points,
                "keyword_points": self.breakdown.keyword_points,
                "matched_signals": list(self.breakdown.matched_signals),
                "matched_keywords": list(self.breakdown.matched_keywords),
            },
        }


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate paired with its score for one profile."""

    candidate: Expert | Trial | Publication
    result: ScoreResult

    @property
    def kind(self) -> CandidateKind:
        return self.candidate.candidate_kind


@dataclass(frozen=True)
class RankedRecommendation:
    """A candidate surfaced to a user, with the reason it was chosen."""

    kind: CandidateKind
    candidate: Expert | Trial | Publication
    reason: str
    score: ScoreResult

    def __post_init__(self) -> None:
        if self.kind != self.candidate.candidate_kind:
            raise ValueError(
                f"kind {self.kind.value!r} does not match candidate "
                f"{self.candidate.id!r} ({self.candidate.candidate_kind.value!r})"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "candidate": self.candidate.to_dict(),
            "reason": self.reason,
            **self.score.to_dict(),
        }
