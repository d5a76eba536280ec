"""
Descriptive statistics over loaded country records.

All functions are pure: they read the records they are given and never
mutate them. `summarize` bundles the figures the reporter prints.
"""

from __future__ import annotations

from typing import List, Sequence, TypedDict

from world_indicators.domain.models import Record


class BirthRateSummary(TypedDict):
    """Figures rendered by the report, computed once per run."""

    total: int
    average_birth_rate: float
    above_average_count: int
    above_average_percent: float
    top_n: int
    top_countries: List[Record]


def average_birth_rate(records: Sequence[Record]) -> float:
    """Arithmetic mean of the birth rates, 0.0 for no records."""
    if not records:
        return 0.0
    return sum(r.birth_rate for r in records) / len(records)


def count_above_average(records: Sequence[Record], average: float) -> int:
    """Count records whose birth rate is strictly greater than `average`."""
    return sum(1 for r in records if r.birth_rate > average)


def percentage_above_average(count: int, total: int) -> float:
    """Share of `total` that `count` represents, in percent; 0.0 when total is 0."""
    if total == 0:
        return 0.0
    return count * 100.0 / total


def top_n_by_birth_rate(records: Sequence[Record], n: int) -> List[Record]:
    """
    Return the `n` records with the highest birth rate, highest first.

    Ties keep their input order (``sorted`` is stable under ``reverse=True``).
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    ranked = sorted(records, key=lambda r: r.birth_rate, reverse=True)
    return ranked[:n]


def summarize(records: Sequence[Record], top_n: int) -> BirthRateSummary:
    average = average_birth_rate(records)
    above = count_above_average(records, average)
    return BirthRateSummary(
        total=len(records),
        average_birth_rate=average,
        above_average_count=above,
        above_average_percent=percentage_above_average(above, len(records)),
        top_n=top_n,
        top_countries=top_n_by_birth_rate(records, top_n),
    )


__all__ = [
    "BirthRateSummary",
    "average_birth_rate",
    "count_above_average",
    "percentage_above_average",
    "summarize",
    "top_n_by_birth_rate",
]
