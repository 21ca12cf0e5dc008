"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Plain text (raw output of the pattern examples)
- Rich tables for pattern listings and run summaries
- List formatting for detailed views
- JSON and YAML dumps of the handler result
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str, show_headers: bool = True, width: int = 100) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data, width)
    elif format_type == "list":
        return format_list_output(data)
    elif format_type == "text":
        return format_text_output(data, show_headers)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def format_text_output(data: Any, show_headers: bool = True) -> str:
    """Format data as plain text; runs print exactly what each pattern example printed."""
    if isinstance(data, dict) and "runs" in data:
        return format_runs_text(data["runs"], show_headers)
    elif isinstance(data, dict) and "patterns" in data:
        return "\n".join(
            f"{p['key']:<12} {p['name']} ({p['category']})" for p in data["patterns"]
        ) or "No patterns found."
    else:
        return format_list_output(data)


def format_runs_text(runs: List[Dict], show_headers: bool = True) -> str:
    """Join example output; a '== Name ==' header separates several runs."""
    with_headers = show_headers and len(runs) > 1
    blocks = []
    for run in runs:
        lines = list(run["output"])
        if with_headers:
            lines.insert(0, f"== {run['name']} ==")
        blocks.append("\n".join(lines))
    return ("\n\n" if with_headers else "\n").join(blocks)


def format_table_output(data: Any, width: int = 100) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"], width)
    elif isinstance(data, dict) and "runs" in data:
        return format_runs_table(data["runs"], width)
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_list([data["pattern"]])
    elif isinstance(data, dict) and "runs" in data:
        return format_runs_list(data["runs"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def _render_table(table: Table, width: int) -> str:
    console = Console(width=width, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_patterns_table(patterns: List[Dict], width: int = 100) -> str:
    """Format pattern summaries as a Rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Description")

    for pattern in patterns:
        table.add_row(
            pattern.get("key", "N/A"),
            pattern.get("name", "N/A"),
            pattern.get("category", "N/A"),
            pattern.get("description", ""),
        )

    return _render_table(table, width)


def format_runs_table(runs: List[Dict], width: int = 100) -> str:
    """Format run results as a Rich table."""
    if not runs:
        return "No runs."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Lines", justify="right", style="yellow")
    table.add_column("Matches sample", justify="center")

    for run in runs:
        table.add_row(
            run["key"],
            run["name"],
            str(len(run["output"])),
            "yes" if run["matches_sample"] else "NO",
        )

    return _render_table(table, width)


def format_patterns_list(patterns: List[Dict]) -> str:
    """Format patterns as a detailed list."""
    if not patterns:
        return "No patterns found."

    lines = []

    for i, pattern in enumerate(patterns):
        if i > 0:
            lines.append("")  # Blank line between patterns

        lines.append(f"Pattern: {pattern.get('name', 'N/A')} [{pattern.get('key', 'N/A')}]")
        lines.append(f"  Category: {pattern.get('category', 'N/A')}")
        lines.append(f"  Description: {pattern.get('description', '')}")

        if pattern.get("advantages"):
            lines.append("  Advantages:")
            lines.extend(f"    + {item}" for item in pattern["advantages"])
        if pattern.get("disadvantages"):
            lines.append("  Disadvantages:")
            lines.extend(f"    - {item}" for item in pattern["disadvantages"])
        if pattern.get("sample_output"):
            lines.append("  Sample output:")
            lines.extend(f"    {item}" for item in pattern["sample_output"])

    return "\n".join(lines)


def format_runs_list(runs: List[Dict]) -> str:
    """Format run results with their output and conformance status."""
    if not runs:
        return "No runs."

    lines = []
    for i, run in enumerate(runs):
        if i > 0:
            lines.append("")
        status = "matches sample" if run["matches_sample"] else "DIFFERS from sample"
        lines.append(f"Run: {run['name']} [{run['key']}] - {status}")
        lines.extend(f"  {line}" for line in run["output"])

    return "\n".join(lines)
