"""CLI main entry point.

This module provides the main entry point for the diskkit CLI.
"""

import argparse
import sys
from pathlib import Path

from diskkit.cli.formatters import format_results, format_table
from diskkit.cli.parser import create_parser
from diskkit.config.loader import build_sanitizer
from diskkit.config.settings import Settings, get_settings
from diskkit.exceptions import DiskKitError
from diskkit.logging_config import configure_logging, get_logger
from diskkit.sanitizer import BasenameSanitizer

__all__ = ["main"]

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI application.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, 1 for errors, 130 when interrupted).

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Until settings load, errors are still logged to stderr.
    configure_logging(verbose=args.verbose)

    try:
        settings = get_settings()
        configure_logging(settings.logging, verbose=args.verbose)

        sanitizer = _create_sanitizer(args, settings)
        if args.show_table:
            print(format_table(sanitizer.table))
            return 0

        names = args.names or [line.rstrip("\r\n") for line in sys.stdin]
        results = [(name, sanitizer(name)) for name in names]

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130

    except (DiskKitError, FileNotFoundError) as e:
        logger.error("sanitize_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except UnicodeDecodeError as e:
        logger.error("stdin_decode_failed", encoding=e.encoding, position=e.start)
        print(f"Error: could not decode standard input: {e}", file=sys.stderr)
        return 1

    except Exception as e:
        logger.exception("fatal_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("names_sanitized", count=len(results))
    print(format_results(results, json_output=args.json_output))
    return 0


def _create_sanitizer(args: argparse.Namespace, settings: Settings) -> BasenameSanitizer:
    """Apply CLI overrides to the sanitizer settings and build the sanitizer.

    Args:
        args: Parsed command-line arguments.
        settings: Settings loaded from the environment.

    Returns:
        The configured BasenameSanitizer.

    """
    overrides: dict[str, object] = {}
    if args.strict:
        overrides["replace_control_characters"] = True
    if args.table:
        overrides["table_file"] = Path(args.table)

    if overrides:
        sanitizer_settings = settings.sanitizer.model_copy(update=overrides)
        settings = settings.model_copy(update={"sanitizer": sanitizer_settings})

    return build_sanitizer(settings)


if __name__ == "__main__":
    sys.exit(main())
