"""Main entry point for the CuraLink relevance engine."""

import argparse
import json
import sys
from pathlib import Path

from src import __version__
from src.config.settings import Settings
from src.utils.logging import configure_logging


def _limit(value: str) -> int:
    limit = int(value)
    if limit <= 0:
        raise argparse.ArgumentTypeError("--limit must be a positive integer")
    return limit


def _print_json(payload: object) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        return str(value)

    print(json.dumps(payload, indent=2, default=_default, ensure_ascii=False))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="curalink",
        description="CuraLink: match patients and researchers with experts, "
        "clinical trials and publications",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src score --profile profiles/patient.example.yaml
  python -m src recommend --profile profiles/researcher.example.yaml --policy curated
  python -m src catalog --kind trial
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available commands",
    )

    score_parser = subparsers.add_parser(
        "score",
        help="Score catalog candidates against an interest profile",
    )
    score_parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="Path to profile (YAML or JSON); defaults to RELEVANCE_PROFILE_PATH",
    )
    score_parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to candidate catalog (YAML or JSON); defaults to "
        "RELEVANCE_CATALOG_PATH, then the bundled sample",
    )
    score_parser.add_argument(
        "--id",
        dest="candidate_id",
        default=None,
        help="Score a single candidate by id",
    )
    score_parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of text",
    )

    recommend_parser = subparsers.add_parser(
        "recommend",
        help="Rank candidates into recommendations",
    )
    recommend_parser.add_argument(
        "--profile",
        type=Path,
        default=None,
        help="Path to profile (YAML or JSON); defaults to RELEVANCE_PROFILE_PATH",
    )
    recommend_parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to candidate catalog (YAML or JSON); defaults to "
        "RELEVANCE_CATALOG_PATH, then the bundled sample",
    )
    recommend_parser.add_argument(
        "--user-type",
        choices=["patient", "researcher"],
        default=None,
        help="User type (defaults to the profile's, then DEFAULT_USER_TYPE)",
    )
    recommend_parser.add_argument(
        "--policy",
        choices=["ranked", "curated"],
        default=None,
        help="Recommendation policy (defaults to RELEVANCE_DEFAULT_POLICY)",
    )
    recommend_parser.add_argument(
        "--limit",
        type=_limit,
        default=None,
        help="Maximum number of recommendations",
    )
    recommend_parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of text",
    )

    catalog_parser = subparsers.add_parser(
        "catalog",
        help="List catalog candidates",
    )
    catalog_parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to candidate catalog (YAML or JSON); defaults to "
        "RELEVANCE_CATALOG_PATH, then the bundled sample",
    )
    catalog_parser.add_argument(
        "--kind",
        choices=["expert", "trial", "publication"],
        default=None,
        help="Only list candidates of this kind",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"CuraLink v{__version__} running {parsed.mode}")

    from src.relevance.catalog import CatalogService, get_candidate
    from src.relevance.profile import ProfileService
    from src.relevance.service import RelevanceScoringService

    try:
        candidates = CatalogService().load_catalog(parsed.catalog)

        if parsed.mode == "catalog":
            for candidate in candidates:
                if parsed.kind and candidate.kind != parsed.kind:
                    continue
                print(f"{candidate.id}\t{candidate.describe()}")
            return 0

        profile_service = ProfileService()
        profile = profile_service.load_profile(parsed.profile)
        for warning in profile_service.validate_profile(profile):
            logger.warning(f"Profile: {warning}")

        scoring_service = RelevanceScoringService()

        if parsed.mode == "score":
            if parsed.candidate_id is not None:
                candidates = [get_candidate(candidates, parsed.candidate_id)]

            scored = scoring_service.score_all(profile, candidates)
            if parsed.json:
                _print_json(
                    [
                        {"id": item.candidate.id, "kind": item.kind.value}
                        | item.result.to_dict()
                        for item in scored
                    ]
                )
            else:
                print(
                    "\n\n".join(
                        scoring_service.format_result(item.candidate, item.result)
                        for item in scored
                    )
                )
            return 0

        if parsed.mode == "recommend":
            from src.relevance.policies import get_policy

            user_type = (
                parsed.user_type or profile.user_type or settings.default_user_type
            )
            policy = get_policy(parsed.policy) if parsed.policy else None
            recommendations = scoring_service.recommend(
                profile,
                user_type,
                candidates,
                policy=policy,
                limit=parsed.limit,
            )
            if parsed.json:
                _print_json(recommendations)
            else:
                print(scoring_service.format_recommendations(recommendations))
            return 0
    except KeyError as e:
        print(f"Error: candidate not found: {e.args[0]}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
