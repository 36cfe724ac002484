#!/usr/bin/env python3
"""CLI interface for manifest history."""

import argparse
from pathlib import Path

from common.env import env
from common.logger import error, setup_logging

from .main import analyze
from .related import load_related_projects
from .reporters import TimelineReporter


def cmd_timeline(args):
    """Print the dependency change timeline of a repository's manifest.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, including repositories without enough history)
    """
    if not args.repo_path.is_dir():
        error(f"Error: {args.repo_path} is not a directory")
        return 1

    manifest = args.manifest or env.manifest_file()

    try:
        history = analyze(args.repo_path, manifest)
    except Exception as e:
        error(f"Unexpected error: {e}")
        return 1

    if args.json:
        print(TimelineReporter().report_json(history))
        return 0

    related = load_related_projects(env.related_projects_path())
    TimelineReporter(related=related).report_console(history, manifest)
    return 0


def main(argv: list[str] | None = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Show when each dependency in a manifest was added, removed or updated"
    )
    parser.add_argument(
        "repo_path",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Git repository directory (default: current directory)",
    )
    parser.add_argument(
        "--manifest",
        default=None,
        help="Manifest path relative to the repository root (default: MANIFEST_FILE or Gemfile)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the timeline as JSON instead of a formatted table",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO, overridden by LOG_LEVEL)",
    )

    args = parser.parse_args(argv)
    setup_logging(level=args.log_level)
    return cmd_timeline(args)


if __name__ == "__main__":
    exit(main())
