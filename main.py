"""CLI entry point for the LinkedIn job search URL tools."""

import argparse
import logging
import sys
from collections.abc import Mapping

from src.core.config import Settings
from src.core.durations import TIME_UNITS, format_seconds, format_time_posted, to_seconds
from src.core.schemas import FilterOption, JobFilters
from src.platforms.linkedin.catalogs import (
    EXPERIENCE_LEVELS,
    JOB_TYPES,
    SORT_OPTIONS,
    TIME_PRESETS,
    WORK_MODES,
    get_time_preset,
    resolve_option,
)
from src.platforms.linkedin.url_builder import (
    build_linkedin_job_url,
    get_filter_summary,
    validate_filters,
)
from src.platforms.linkedin.url_modifier import (
    clamp_seconds,
    modify_linkedin_job_search_url,
    validate_linkedin_url,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "config/settings.yaml"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build LinkedIn job search URLs or change their 'posted within' filter",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- build subcommand ---
    build_parser = subparsers.add_parser("build", help="Build a job search URL from filters")
    build_parser.add_argument("--keywords", "-k", help="Job designation or keywords")
    build_parser.add_argument("--location", "-l", help="Location, e.g. 'New York'")
    build_parser.add_argument(
        "--time-posted",
        help="Posted within: seconds (3600) or a preset label (1h, 24h, 7d)",
    )
    build_parser.add_argument(
        "--job-type",
        action="append",
        default=[],
        help="Job type name or code, repeatable (full-time, contract, 3)",
    )
    build_parser.add_argument(
        "--work-mode",
        action="append",
        default=[],
        help="Work mode name or code, repeatable (remote, on-site, hybrid)",
    )
    build_parser.add_argument(
        "--experience",
        action="append",
        default=[],
        help="Experience level name or code, repeatable (entry-level, mid-senior)",
    )
    build_parser.add_argument(
        "--sort-by",
        help="Sort order: recent, relevance, or a raw sortBy code (DD, R)",
    )
    build_parser.add_argument(
        "--config",
        help=f"Build every saved search from a settings YAML file (e.g. {DEFAULT_CONFIG})",
    )

    # --- modify subcommand ---
    modify_parser = subparsers.add_parser(
        "modify",
        help="Set the 'posted within' filter on an existing LinkedIn URL",
    )
    modify_parser.add_argument("url", help="LinkedIn URL to rewrite")
    duration = modify_parser.add_mutually_exclusive_group()
    duration.add_argument("--seconds", "-s", help="Posted within, in seconds")
    duration.add_argument("--preset", "-p", help="Preset label (15m, 1h, 24h, 7d, ...)")
    duration.add_argument("--value", type=float, help="Custom amount, used with --unit")
    modify_parser.add_argument(
        "--unit",
        default="hours",
        choices=sorted(TIME_UNITS),
        help="Unit for --value (default: hours)",
    )
    modify_parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help=f"Settings YAML for the default duration (default: {DEFAULT_CONFIG})",
    )

    # --- validate subcommand ---
    validate_parser = subparsers.add_parser("validate", help="Check a LinkedIn URL")
    validate_parser.add_argument("url", help="URL to check")

    # --- presets subcommand ---
    subparsers.add_parser("presets", help="List time presets and filter codes")

    for sub in subparsers.choices.values():
        sub.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose (DEBUG) logging",
        )

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def filters_from_args(args: argparse.Namespace) -> JobFilters:
    """Translate build flags into JobFilters, resolving catalog names to codes."""
    time_posted = None
    if args.time_posted:
        if args.time_posted.isdigit():
            time_posted = int(args.time_posted)
        else:
            time_posted = get_time_preset(args.time_posted).seconds

    sort_by = args.sort_by or None
    if sort_by and sort_by.strip().upper() in SORT_OPTIONS:
        sort_by = SORT_OPTIONS[sort_by.strip().upper()].value
    elif sort_by:
        logger.debug("Passing sortBy '%s' through verbatim", sort_by)

    return JobFilters(
        keywords=args.keywords or "",
        location=args.location,
        time_posted=time_posted,
        job_type=_resolve_codes(JOB_TYPES, args.job_type),
        work_mode=_resolve_codes(WORK_MODES, args.work_mode),
        experience_level=_resolve_codes(EXPERIENCE_LEVELS, args.experience),
        sort_by=sort_by,
    )


def _resolve_codes(catalog: Mapping[str, FilterOption], names: list[str]) -> list[int] | None:
    codes = [code for code in (resolve_option(catalog, n) for n in names) if code is not None]
    return codes or None  # type: ignore[return-value]


def cmd_build(args: argparse.Namespace) -> int:
    """Handle build subcommand."""
    if args.config:
        settings = Settings.from_yaml(args.config)
        if not settings.searches:
            print(f"No saved searches in {args.config}", file=sys.stderr)
            return 1
        status = 0
        for search in settings.searches:
            filters = settings.resolve_filters(search)
            label = search.name or get_filter_summary(filters)
            validation = validate_filters(filters)
            if not validation.is_valid:
                print(f"{label}: {validation.error}", file=sys.stderr)
                status = 1
                continue
            print(f"{label}\n  {build_linkedin_job_url(filters)}")
        return status

    filters = filters_from_args(args)
    validation = validate_filters(filters)
    if not validation.is_valid:
        print(f"Error: {validation.error}", file=sys.stderr)
        return 1

    print(build_linkedin_job_url(filters))
    if filters.time_posted:
        print(f"  {get_filter_summary(filters)}, posted within: {format_time_posted(filters.time_posted)}")
    else:
        print(f"  {get_filter_summary(filters)}")
    return 0


def cmd_modify(args: argparse.Namespace) -> int:
    """Handle modify subcommand."""
    validation = validate_linkedin_url(args.url)
    if not validation.is_valid:
        print(f"Error: {validation.error}", file=sys.stderr)
        return 1
    if validation.warning:
        print(f"Warning: {validation.warning}", file=sys.stderr)

    if args.seconds is not None:
        seconds: object = args.seconds
    elif args.preset:
        seconds = get_time_preset(args.preset).seconds
    elif args.value is not None:
        seconds = to_seconds(args.value, args.unit)
    else:
        seconds = _default_seconds(args.config)

    print(modify_linkedin_job_search_url(args.url, seconds))
    print(f"  Posted within: {format_seconds(clamp_seconds(seconds))}")
    return 0


def _default_seconds(config_path: str) -> int:
    try:
        settings = Settings.from_yaml(config_path)
    except FileNotFoundError:
        logger.debug("No config at %s, using built-in default duration", config_path)
        settings = Settings()
    return settings.modifier.default_seconds


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle validate subcommand."""
    result = validate_linkedin_url(args.url)
    if not result.is_valid:
        print(f"Invalid: {result.error}")
        return 1
    print("Valid LinkedIn URL")
    if result.warning:
        print(f"Warning: {result.warning}")
    return 0


def cmd_presets(args: argparse.Namespace) -> int:
    """Handle presets subcommand."""
    print("Time presets:")
    for preset in TIME_PRESETS:
        print(f"  {preset.label:>4}  r{preset.seconds:<7} {format_seconds(preset.seconds)}")

    for title, catalog in (
        ("Job types (f_WT)", JOB_TYPES),
        ("Work modes (f_WRA)", WORK_MODES),
        ("Experience levels (f_E)", EXPERIENCE_LEVELS),
        ("Sort options (sortBy)", SORT_OPTIONS),
    ):
        print(f"\n{title}:")
        for name, option in catalog.items():
            print(f"  {str(option.value):>2}  {name.lower():<12} {option.label}")
    return 0


COMMANDS = {
    "build": cmd_build,
    "modify": cmd_modify,
    "validate": cmd_validate,
    "presets": cmd_presets,
}


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        status = COMMANDS[args.command](args)
    except (FileNotFoundError, ValueError) as e:
        # ValueError covers LinkedInURLError and pydantic's ValidationError
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
