"""Configuration settings for the relevance scoring engine."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RelevanceConfig(BaseSettings):
    """Relevance scoring configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `RELEVANCE_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="RELEVANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input locations
    profile_path: Path = Field(
        default=Path("profiles/patient.example.yaml"),
        description="Path to the interest profile file (YAML/JSON)",
    )
    catalog_path: Path | None = Field(
        default=None,
        description="Candidate catalog file (YAML/JSON); bundled sample if unset",
    )

    # Signal points
    tag_match_points: Annotated[int, Field(ge=0)] = Field(
        default=30,
        description="Points when condition or field overlaps a tag",
    )
    specialization_points: Annotated[int, Field(ge=0)] = Field(
        default=15,
        description="Points when the specialization contains condition or field",
    )
    title_points: Annotated[int, Field(ge=0)] = Field(
        default=10,
        description="Points when the title contains condition or field",
    )
    keyword_points: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Points per profile keyword found inside a tag",
    )
    min_keyword_length: Annotated[int, Field(ge=1)] = Field(
        default=4,
        description="Shortest token counted as a keyword",
    )
    max_score: Annotated[int, Field(ge=1, le=100)] = Field(
        default=100,
        description="Upper clamp applied to the summed points",
    )

    # Label thresholds (inclusive lower bounds)
    excellent_threshold: Annotated[int, Field(ge=0, le=100)] = Field(
        default=85,
        description="Minimum score for 'Excellent Match'",
    )
    good_threshold: Annotated[int, Field(ge=0, le=100)] = Field(
        default=70,
        description="Minimum score for 'Good Match'",
    )
    moderate_threshold: Annotated[int, Field(ge=0, le=100)] = Field(
        default=50,
        description="Minimum score for 'Moderate Match'",
    )

    # Recommendation settings
    default_policy: Literal["ranked", "curated"] = Field(
        default="ranked",
        description="Recommendation policy used when the caller supplies none",
    )
    recommendation_limit: Annotated[int, Field(gt=0)] | None = Field(
        default=None,
        description="Maximum recommendations returned (None = no limit)",
    )

    @model_validator(mode="after")
    def validate_thresholds(self) -> RelevanceConfig:
        """Ensure label bands are ordered and reachable."""
        if not (
            self.excellent_threshold > self.good_threshold > self.moderate_threshold
        ):
            raise ValueError(
                "Label thresholds must be strictly descending. "
                f"Got excellent={self.excellent_threshold}, "
                f"good={self.good_threshold}, moderate={self.moderate_threshold}."
            )
        if self.excellent_threshold > self.max_score:
            raise ValueError(
                f"excellent_threshold ({self.excellent_threshold}) exceeds "
                f"max_score ({self.max_score})."
            )
        return self


# Singleton instance for easy import
_relevance_config: RelevanceConfig | None = None


def get_relevance_config() -> RelevanceConfig:
    """Get the relevance configuration singleton."""
    global _relevance_config
    if _relevance_config is None:
        _relevance_config = RelevanceConfig()
    return _relevance_config


def reset_relevance_config() -> None:
    """Reset the relevance configuration singleton (useful for testing)."""
    global _relevance_config
    _relevance_config = None
