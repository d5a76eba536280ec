"""
Pytest configuration for the World Indicators analysis.

Provides fixtures for:
- Writing small indicators CSV files into a temporary directory
- Resetting the cached settings between tests
- A CLI runner for the typer application
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest
from typer.testing import CliRunner

from world_indicators.config import get_settings

HEADER_LINE = ",".join(f"col{i}" for i in range(16))


def _make_row(
    country: str,
    birth_rate: str,
    life_expectancy: str,
    fields: int = 16,
) -> str:
    """Build one comma-joined data row with the indicator columns in place."""
    parts = ["x"] * fields
    parts[0] = country
    if fields > 2:
        parts[2] = birth_rate
    if fields > 15:
        parts[15] = life_expectancy
    return ",".join(parts)


@pytest.fixture
def make_row() -> Callable[..., str]:
    return _make_row


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """
    Write a CSV with a header followed by the given data lines.

    Returns the path of the written file.
    """

    def _write(
        lines: Iterable[str],
        name: str = "indicators.csv",
        header: Optional[str] = HEADER_LINE,
    ) -> Path:
        path = tmp_path / name
        body = list(lines)
        if header is not None:
            body.insert(0, header)
        path.write_text("\n".join(body) + ("\n" if body else ""), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def two_country_csv(write_csv) -> Path:
    return write_csv(
        [
            _make_row("CountryA", "0.010", "60.0"),
            _make_row("CountryB", "0.030", "80.0"),
        ]
    )


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Isolate every test from the caller's environment and `.env` file.
    """
    for var in ("WI_DATA_FILE", "WI_TOP_N", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
