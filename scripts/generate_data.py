"""
Sample data generator for the World Indicators analysis.

Writes a deterministic pseudo-random indicators CSV shaped like
WorldIndicators2000.csv: a header row, then several yearly rows per country
with the birth rate in column 2 and female life expectancy in column 15.
Some indicator cells are left blank, as in the real export.
"""

from __future__ import annotations

import csv
import random
import sys
import time
from pathlib import Path

import typer

app = typer.Typer(help="Generate a synthetic World Indicators CSV.")

HEADER = [
    "Country",
    "Year",
    "Birth Rate",
    "Business Tax Rate",
    "CO2 Emissions",
    "Days to Start Business",
    "Energy Usage",
    "GDP",
    "Health Exp % GDP",
    "Health Exp/Capita",
    "Hours to do Tax",
    "Infant Mortality Rate",
    "Internet Usage",
    "Lending Interest",
    "Life Expectancy Male",
    "Life Expectancy Female",
    "Mobile Phone Usage",
    "Population 0-14",
    "Population 15-64",
    "Population 65+",
    "Population Total",
    "Population Urban",
    "Region",
]

FIRST_YEAR = 2000


def _generate_rows_csv(
    csv_path: Path,
    countries: int,
    years: int,
    seed: int,
    blank_ratio: float = 0.05,
) -> None:
    rng = random.Random(seed)
    regions = ["Africa", "Asia", "Europe", "The Americas", "Oceania", "Middle East"]

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)

        for c in range(countries):
            name = f"Country {c + 1:03d}"
            region = rng.choice(regions)
            base_birth = rng.uniform(0.007, 0.05)
            base_life = rng.uniform(45.0, 86.0)
            for y in range(years):
                row = [f"{rng.uniform(0, 100):.2f}" for _ in HEADER]
                row[0] = name
                row[1] = str(FIRST_YEAR + y)
                row[2] = f"{base_birth - 0.0004 * y:.3f}"
                row[14] = f"{base_life - 4 + 0.2 * y:.0f}"
                row[15] = f"{base_life + 0.2 * y:.0f}"
                row[-1] = region
                for col in (2, 15):
                    if rng.random() < blank_ratio:
                        row[col] = ""
                writer.writerow(row)


@app.command()
def main(
    countries: int = typer.Option(
        200,
        "--countries",
        "-c",
        help="Number of distinct countries.",
    ),
    years: int = typer.Option(
        3,
        "--years",
        "-y",
        help="Rows per country, one per year starting at 2000.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("WorldIndicators2000.csv"),
        "--output",
        "-o",
        help="CSV output path.",
    ),
) -> None:
    """
    Generate a synthetic indicators CSV for local runs and tests.
    """
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)

    typer.echo(f"Generating {countries} countries x {years} years -> {output} (seed={seed})")
    _generate_rows_csv(output, countries=countries, years=years, seed=seed)
    typer.echo(f"CSV generation completed in {time.perf_counter() - start:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
