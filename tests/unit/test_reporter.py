from __future__ import annotations

import io

from world_indicators.analyzer import summarize
from world_indicators.domain import Record
from world_indicators.reporter import print_report, render_report

TWO_COUNTRY_REPORT = """\
=== World Indicators 2000 Birth Rate Analysis ===

Total countries loaded: 2

Average Birth Rate: 0.0200

Countries with above-average birth rates: 1 (50.0%)

Top 5 Countries by Birth Rate:
1. CountryB (Birth Rate: 0.0300)
2. CountryA (Birth Rate: 0.0100)

=== Answer to Guiding Question ===
Question: What is the correlation between countries and birth rate?

Findings:
- Birth rates vary significantly across countries, ranging from very low
  (developed nations) to quite high (developing nations).
- The data set shows an average birth rate of 0.0200 across 2 countries.
- 1 countries (50.0%) have birth rates above the average.
- Higher birth rates are generally associated with developing nations,
  while developed nations tend to have lower birth rates.
"""


def _two_countries() -> list[Record]:
    return [
        Record(country="CountryA", birth_rate=0.010, life_expectancy=60.0),
        Record(country="CountryB", birth_rate=0.030, life_expectancy=80.0),
    ]


def test_render_report_matches_fixed_layout():
    assert render_report(summarize(_two_countries(), top_n=5)) == TWO_COUNTRY_REPORT


def test_print_report_writes_to_given_stream():
    buffer = io.StringIO()

    print_report(summarize(_two_countries(), top_n=1), file=buffer)

    text = buffer.getvalue()
    assert "Top 1 Countries by Birth Rate:\n1. CountryB (Birth Rate: 0.0300)\n\n" in text
    assert "CountryA (Birth Rate" not in text


def test_empty_report_uses_zero_percent():
    text = render_report(summarize([], top_n=5))

    assert "Total countries loaded: 0\n" in text
    assert "Average Birth Rate: 0.0000\n" in text
    assert "Countries with above-average birth rates: 0 (0.0%)\n" in text
    assert "- 0 countries (0.0%) have birth rates above the average.\n" in text


def test_country_names_are_printed_verbatim():
    records = [Record(country="[bold]Odd[/bold] :smile: 1e-5", birth_rate=0.00001, life_expectancy=70.0)]

    text = render_report(summarize(records, top_n=1))

    assert "1. [bold]Odd[/bold] :smile: 1e-5 (Birth Rate: 0.0000)\n" in text


def test_tabs_and_control_characters_in_names_are_kept():
    records = [Record(country="A\tB\x0bC", birth_rate=0.02, life_expectancy=70.0)]

    text = render_report(summarize(records, top_n=1))

    assert "1. A\tB\x0bC (Birth Rate: 0.0200)\n" in text


def test_long_lines_are_not_wrapped():
    name = "A" * 300
    records = [Record(country=name, birth_rate=0.02, life_expectancy=70.0)]

    text = render_report(summarize(records, top_n=1))

    assert f"1. {name} (Birth Rate: 0.0200)\n" in text
