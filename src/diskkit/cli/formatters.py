"""Output formatting for the CLI."""

import json

from diskkit.sanitizer import DispositionTable

__all__ = ["format_results", "format_table"]


def format_results(results: list[tuple[str, str]], json_output: bool = False) -> str:
    """Format sanitization results for printing.

    Args:
        results: Pairs of (input, output).
        json_output: If True, emit a JSON list of {"input", "output"} objects.

    Returns:
        The formatted text, without a trailing newline.

    """
    if json_output:
        return json.dumps(
            [{"input": source, "output": output} for source, output in results],
            ensure_ascii=False,
            indent=2,
        )
    return "\n".join(output for _, output in results)


def format_table(table: DispositionTable) -> str:
    """Render the effective disposition table as JSON."""
    return json.dumps(table.to_dict(), ensure_ascii=False, indent=2)
