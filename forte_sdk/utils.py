"""
Utility functions for the Forte CLI.
"""

import json
import logging
import sys
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import click


class OutputFormat(Enum):
    """Output format options."""
    TABLE = "table"
    JSON = "json"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging for CLI commands."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )
    # urllib3 is noisy at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))


def print_success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def print_error(message: str, details: Optional[str] = None) -> None:
    click.secho(f"✗ Error: {message}", fg="red", err=True)
    if details:
        click.echo(f"  {details}", err=True)


def print_warning(message: str) -> None:
    click.secho(f"! {message}", fg="yellow")


def print_info(message: str) -> None:
    click.echo(message)


def print_json(data: Any, indent: int = 2) -> None:
    click.echo(json.dumps(data, indent=indent, default=str))


def print_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """Print rows as a left-aligned text table."""
    widths = [len(str(h)) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(click.unstyle(str(cell))))

    def format_row(cells: Sequence[Any]) -> str:
        return "  ".join(
            str(cell) + " " * (widths[i] - len(click.unstyle(str(cell))))
            for i, cell in enumerate(cells)
        ).rstrip()

    click.echo(format_row(headers))
    click.echo("  ".join("-" * w for w in widths))
    for row in rows:
        click.echo(format_row(row))


def parse_typed_value(raw: str) -> Any:
    """
    Parse a CLI value into a JSON-like Python value.

    Quoted text stays a string; ``true``/``false``/``null`` and numbers are
    converted; anything else is returned as stripped text.
    """
    value = raw.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]

    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return None

    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


def parse_filters(items: Sequence[str]) -> Dict[str, Any]:
    """
    Parse ``key=value`` pairs into a filter mapping.

    Raises:
        ValueError: If an item has no ``=`` or an empty key
    """
    filters: Dict[str, Any] = {}
    for item in items:
        if "=" not in item:
            raise ValueError(f"Invalid filter format: '{item}'. Use key=value")
        key, raw = item.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid filter format: '{item}'. Key is empty")
        filters[key] = parse_typed_value(raw)
    return filters


def load_json_argument(raw: Optional[str]) -> Optional[Dict[str, Any]]:
    """Decode a JSON object passed on the command line."""
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}")
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object")
    return data


def extract_items(data: Any) -> List[Dict[str, Any]]:
    """Pull the list of records out of a response body."""
    if isinstance(data, dict):
        data = data.get("data", data)
        if isinstance(data, dict):
            data = data.get("items", [data])
    if isinstance(data, list):
        return [item for item in data if isinstance(item, dict)]
    return []
