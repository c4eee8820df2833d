"""Interest profile loading and validation utilities."""

from __future__ import annotations

from pathlib import Path

from src.relevance.config import RelevanceConfig, get_relevance_config
from src.relevance.documents import load_document
from src.relevance.models import InterestProfile
from src.utils.logging import get_logger

logger = get_logger(__name__)


class ProfileService:
    """Service for loading and validating interest profiles."""

    def __init__(self, config: RelevanceConfig | None = None) -> None:
        self.config = config or get_relevance_config()

    def load_profile(self, path: Path | str | None = None) -> InterestProfile:
        """Load and validate a profile from YAML or JSON.

        Raises:
            FileNotFoundError: If the profile file does not exist.
            ValueError: If the file is not a valid YAML/JSON mapping.
            pydantic.ValidationError: If the profile fields are invalid.
        """
        profile_path = Path(path) if path is not None else self.config.profile_path
        data = load_document(profile_path, label="profile")
        profile = InterestProfile.model_validate(data)
        logger.debug("Loaded interest profile from %s", profile_path)
        return profile

    def validate_profile(self, profile: InterestProfile) -> list[str]:
        """Return warnings for profiles that will score poorly."""
        warnings: list[str] = []

        if not profile.condition.strip():
            warnings.append("Condition is empty")
        if not profile.field_of_research.strip():
            warnings.append("Field of research is empty")
        if profile.is_empty:
            warnings.append("Profile has no interests; every candidate will score 0")
        if profile.user_type is None:
            warnings.append("User type is not set")

        return warnings
