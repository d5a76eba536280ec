from __future__ import annotations

import io
from typing import List, Optional, TextIO

from rich.console import Console

from world_indicators.analyzer import BirthRateSummary

REPORT_TITLE = "=== World Indicators 2000 Birth Rate Analysis ==="
GUIDING_TITLE = "=== Answer to Guiding Question ==="
GUIDING_QUESTION = "Question: What is the correlation between countries and birth rate?"


def _report_lines(summary: BirthRateSummary) -> List[str]:
    total = summary["total"]
    average = summary["average_birth_rate"]
    above = summary["above_average_count"]
    percent = summary["above_average_percent"]

    lines = [
        REPORT_TITLE,
        "",
        f"Total countries loaded: {total}",
        "",
        f"Average Birth Rate: {average:.4f}",
        "",
        f"Countries with above-average birth rates: {above} ({percent:.1f}%)",
        "",
        f"Top {summary['top_n']} Countries by Birth Rate:",
    ]
    for rank, record in enumerate(summary["top_countries"], start=1):
        lines.append(f"{rank}. {record.country} (Birth Rate: {record.birth_rate:.4f})")

    lines += [
        "",
        GUIDING_TITLE,
        GUIDING_QUESTION,
        "",
        "Findings:",
        "- Birth rates vary significantly across countries, ranging from very low",
        "  (developed nations) to quite high (developing nations).",
        f"- The data set shows an average birth rate of {average:.4f} across {total} countries.",
        f"- {above} countries ({percent:.1f}%) have birth rates above the average.",
        "- Higher birth rates are generally associated with developing nations,",
        "  while developed nations tend to have lower birth rates.",
    ]
    return lines


def print_report(summary: BirthRateSummary, file: Optional[TextIO] = None) -> None:
    """
    Write the birth-rate report to `file` (stdout when omitted).

    Lines are written to the console's stream as-is, bypassing rich
    rendering, so country names keep tabs and control characters.
    """
    console = Console(file=file)
    out = console.file
    for line in _report_lines(summary):
        out.write(line + "\n")
    out.flush()


def render_report(summary: BirthRateSummary) -> str:
    """Return the report as a string."""
    buffer = io.StringIO()
    print_report(summary, file=buffer)
    return buffer.getvalue()


__all__ = ["print_report", "render_report"]
