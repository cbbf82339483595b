"""
Main entry point for the resume builder profile tools.

Example usage:
    python main.py --profile profile.json
    python main.py --profile resume.json --year 2025 --output report.json
    python main.py --serve --port 8000
"""

import argparse
import json
import sys
import logging

from completeness.engine import calculate_profile_completeness
from completeness.health import (
    get_profile_health_status, find_priority_section, sections_needing_attention,
)
from models.schemas import ProfileCompleteness
from profiles.parser import JSONProfileParser


def setup_logging(debug: bool = False, log_level: str = "INFO") -> None:
    """
    Configure logging for the application.

    Args:
        debug: Enable debug mode
        log_level: Logging level
    """
    level = logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def parse_arguments(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Resume Builder - profile completeness report"
    )

    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Path to a JSON profile (native shape or JSON Resume)"
    )

    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Reference year for recent experience (default: current year)"
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the full report as JSON to this file"
    )

    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the HTTP API instead of printing a report"
    )

    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="API host (default: 127.0.0.1)"
    )

    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="API port (default: 8000)"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode"
    )

    args = parser.parse_args(argv)
    if not args.serve and not args.profile:
        parser.error("--profile is required unless --serve is given")
    return args


def print_report(completeness: ProfileCompleteness) -> None:
    overall = completeness.overall
    health = get_profile_health_status(overall.percentage)

    print(f"\nProfile strength: {overall.percentage}% ({health.status})")
    print(f"  {health.message}")
    for section in completeness.sections:
        print(
            f"  - {section.name:<22} {section.score:>3}/{section.max_score} "
            f"[{section.status.value}]"
        )

    print(f"\nJob search unlocked:  {'yes' if completeness.ready_for_jobs else 'no'}")
    print(f"Templates unlocked:   {'yes' if completeness.ready_for_templates else 'no'}")

    priority = find_priority_section(completeness)
    if priority:
        print(f"\nStart with: {priority.name} ({priority.estimated_time})")

    attention = sections_needing_attention(completeness)
    if attention:
        print("\nNeeds attention:")
        for section in attention:
            print(f"  - {section.name}: {section.issues[0]}")

    if completeness.next_steps:
        print("\nNext steps:")
        for i, step in enumerate(completeness.next_steps, 1):
            print(f"  {i}. {step}")


def serve(host: str, port: int) -> None:
    import uvicorn
    from api.app import create_app

    uvicorn.run(create_app(), host=host, port=port)


def main(argv=None) -> int:
    """
    Main application entry point.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        args = parse_arguments(argv)

        setup_logging(debug=args.debug)
        logger = logging.getLogger(__name__)

        if args.serve:
            logger.info(f"Starting API on {args.host}:{args.port}")
            serve(args.host, args.port)
            return 0

        logger.info(f"Loading profile from {args.profile}...")
        profile = JSONProfileParser().parse(args.profile)

        completeness = calculate_profile_completeness(profile, current_year=args.year)
        print_report(completeness)

        if args.output:
            logger.info(f"Saving report to {args.output}...")
            with open(args.output, "w", encoding="utf-8") as f:
                json.dump(completeness.to_dict(), f, indent=2)
            print(f"\nFull report saved to: {args.output}")

        return 0

    except FileNotFoundError as e:
        logging.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logging.error(f"Invalid profile: {e}")
        return 1
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return 130
    except Exception as e:
        logging.error(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
