"""CLI argument parser configuration.

This module provides the argument parser for the diskkit CLI.
"""

import argparse

from diskkit import __version__

__all__ = ["create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        An ArgumentParser configured with all CLI options.

    """
    parser = argparse.ArgumentParser(
        prog="diskkit",
        description="Sanitize names for safe use as file or folder names.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sanitize a single name
  diskkit "Report: Q3/Q4 \\"final\\".pdf"

  # Sanitize every line of a file
  diskkit < titles.txt

  # Also replace control characters, and add rules from a YAML file
  diskkit --strict --table rules.yaml "alpha#bravo"

  # Machine readable output
  diskkit --json "alpha.bravo" "charlie_delta"

  # Inspect the rules in effect
  diskkit --strict --table rules.yaml --show-table
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help="Names to sanitize (default: read one name per line from stdin)",
    )

    parser.add_argument(
        "--table",
        type=str,
        metavar="FILE",
        help="YAML file with extra disposition rules",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Also replace control characters with a space",
    )

    parser.add_argument(
        "--show-table",
        action="store_true",
        help="Print the effective disposition table as JSON and exit",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON instead of one name per line",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser
