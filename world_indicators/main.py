from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from world_indicators.analyzer import summarize
from world_indicators.config import get_settings
from world_indicators.loader import load_records
from world_indicators.reporter import print_report
from world_indicators.utils.logging import configure_logging, get_logger

app = typer.Typer(help="World Indicators 2000 birth rate analysis.", add_completion=False)
log = get_logger(__name__)


@app.command()
def report(
    path: Optional[Path] = typer.Argument(
        None,
        help="Indicators CSV to analyze (default from settings: WorldIndicators2000.csv).",
        show_default=False,
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-n",
        min=0,
        help="Number of countries in the birth rate ranking (default from settings).",
    ),
) -> None:
    """
    Load the indicators CSV and print the birth rate report.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    data_file = path or Path(settings.data_file)
    top_n = settings.top_n if top is None else top

    log.info("Analyzing %s", data_file, extra={"path": str(data_file), "top_n": top_n})
    records = load_records(data_file)
    print_report(summarize(records, top_n))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
