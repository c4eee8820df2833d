"""Candidate catalog loading.

A catalog file is a YAML/JSON mapping in one of two shapes::

    experts: [...]         # kind implied by the key
    trials: [...]
    publications: [...]

or::

    candidates:
      - {kind: expert, ...}
      - {kind: trial, ...}
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter

from src.relevance.config import RelevanceConfig, get_relevance_config
from src.relevance.documents import load_document
from src.relevance.models import Candidate, CandidateKind, Expert, Publication, Trial
from src.relevance.sample_data import (
    SAMPLE_EXPERTS,
    SAMPLE_PUBLICATIONS,
    SAMPLE_TRIALS,
)
from src.utils.logging import get_logger

logger = get_logger(__name__)

_CANDIDATE_ADAPTER: TypeAdapter[Expert | Trial | Publication] = TypeAdapter(Candidate)

_GROUP_KEYS: dict[str, CandidateKind] = {
    "experts": CandidateKind.EXPERT,
    "trials": CandidateKind.TRIAL,
    "publications": CandidateKind.PUBLICATION,
}


def parse_candidate(data: dict) -> Expert | Trial | Publication:
    """Validate one kind-tagged record into its candidate model."""
    return _CANDIDATE_ADAPTER.validate_python(data)


def get_candidate(
    candidates: Iterable[Expert | Trial | Publication], candidate_id: str
) -> Expert | Trial | Publication:
    """Look up a candidate by id.

    Raises:
        KeyError: If no candidate has that id.
    """
    for candidate in candidates:
        if candidate.id == candidate_id:
            return candidate
    raise KeyError(candidate_id)


class CatalogService:
    """Service for loading candidate pools."""

    def __init__(self, config: RelevanceConfig | None = None) -> None:
        self.config = config or get_relevance_config()

    def load_catalog(
        self, path: Path | str | None = None
    ) -> list[Expert | Trial | Publication]:
        """Load candidates from ``path``, the configured catalog, or the sample.

        Raises:
            FileNotFoundError: If the catalog file does not exist.
            ValueError: On unparseable files, bad shapes or duplicate ids.
            pydantic.ValidationError: If a record is invalid.
        """
        catalog_path = Path(path) if path is not None else self.config.catalog_path
        if catalog_path is None:
            return self.sample_catalog()

        data = load_document(catalog_path, label="catalog")
        candidates = self.parse_catalog(data)
        logger.info("Loaded %d candidates from %s", len(candidates), catalog_path)
        return candidates

    def parse_catalog(self, data: dict) -> list[Expert | Trial | Publication]:
        """Validate a catalog mapping into candidate models."""
        records: list[dict] = []

        if "candidates" in data:
            items = data["candidates"] or []
            if not isinstance(items, list):
                raise ValueError("Catalog 'candidates' must be a list")
            records.extend(_as_record(item) for item in items)

        for key, kind in _GROUP_KEYS.items():
            items = data.get(key) or []
            if not isinstance(items, list):
                raise ValueError(f"Catalog '{key}' must be a list")
            for item in items:
                record = _as_record(item)
                declared = record.get("kind")
                if declared is not None and declared != kind.value:
                    raise ValueError(
                        f"Record {record.get('id')!r} under '{key}' has kind {declared!r}"
                    )
                records.append({**record, "kind": kind.value})

        candidates = [parse_candidate(record) for record in records]
        _check_unique_ids(candidates)
        return candidates

    def sample_catalog(self) -> list[Expert | Trial | Publication]:
        """Return the bundled sample pool (experts, trials, publications)."""
        return self.parse_catalog(
            {
                "experts": SAMPLE_EXPERTS,
                "trials": SAMPLE_TRIALS,
                "publications": SAMPLE_PUBLICATIONS,
            }
        )


def _as_record(item: object) -> dict:
    if not isinstance(item, dict):
        raise ValueError(f"Catalog entries must be mappings (got {type(item).__name__})")
    return item


def _check_unique_ids(candidates: list[Expert | Trial | Publication]) -> None:
    seen: set[str] = set()
    for candidate in candidates:
        if candidate.id in seen:
            raise ValueError(f"Duplicate candidate id in catalog: {candidate.id}")
        seen.add(candidate.id)
