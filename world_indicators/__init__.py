"""
World Indicators - birth rate analysis of the World Indicators 2000 dataset.

Loads country rows from the indicators CSV, keeps the first valid row per
country, and reports:

- Average birth rate
- Count and share of countries above that average
- Top-N countries ranked by birth rate
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from world_indicators.analyzer import (
    BirthRateSummary,
    average_birth_rate,
    count_above_average,
    percentage_above_average,
    summarize,
    top_n_by_birth_rate,
)
from world_indicators.config import Settings, get_settings
from world_indicators.domain import Record, RecordStore
from world_indicators.loader import load_records, parse_row
from world_indicators.reporter import print_report, render_report
from world_indicators.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "RecordStore",
    # Loading
    "load_records",
    "parse_row",
    # Analysis
    "BirthRateSummary",
    "average_birth_rate",
    "count_above_average",
    "percentage_above_average",
    "summarize",
    "top_n_by_birth_rate",
    # Reporting
    "print_report",
    "render_report",
    # Logging
    "configure_logging",
    "get_logger",
]
