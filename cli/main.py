"""resize CLI — entry-point for catalog operations.

Usage:
    python cli/main.py --help

Commands:
    instance-types   → scrape the EC2 instance-type matrix
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from resize.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
import logging
from typing import Optional

import typer

from resize.config import settings
from resize.scraper import ScraperError, fetch_catalog, parse_catalog

app = typer.Typer(
    name="resize",
    help="EC2 instance-type catalog CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("instance-types")
def instance_types(
    file: Optional[Path] = typer.Option(
        None, "--file", help="Scrape a saved copy of the page instead of fetching it."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the catalog as JSON."),
) -> None:
    """Scrape the EC2 instance-type matrix and print one line per type."""
    if file is not None and not file.is_file():
        typer.echo(f"[instance-types] Error: no such file {str(file)!r}", err=True)
        raise typer.Exit(code=1)

    try:
        if file is not None:
            types = parse_catalog(file.read_text(encoding="utf-8"))
        else:
            typer.echo(f"[instance-types] Fetching {settings.instance_types_url!r} …", err=True)
            types = fetch_catalog()
    except (ScraperError, OSError) as exc:
        typer.echo(f"[instance-types] Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps([t.to_dict() for t in types], indent=2))
        return

    for t in types:
        typer.echo(
            f"  {t.name:<14} {t.cpus:>3} vCPU  {t.memory:>7g} GiB  "
            f"{t.clock_speed:g} GHz  {t.storage}"
        )


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
