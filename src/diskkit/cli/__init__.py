"""CLI package for diskkit.

This package provides the command-line interface for sanitizing names.
"""

from diskkit.cli.formatters import format_results, format_table
from diskkit.cli.main import main
from diskkit.cli.parser import create_parser

__all__ = ["create_parser", "format_results", "format_table", "main"]
