"""
Ordered, deduplicated collection of country records.

The dataset lists several years per country; only the first row seen for a
country is kept and insertion order is preserved for the stable ranking.
"""
from __future__ import annotations

from typing import Dict, Iterator, Tuple

from world_indicators.domain.models import Record


class RecordStore:
    """Records keyed by country name, first occurrence wins."""

    def __init__(self) -> None:
        self._by_country: Dict[str, Record] = {}

    def add(self, record: Record) -> bool:
        """
        Append `record` unless its country is already present.

        Returns True when the record was stored.
        """
        if record.country in self._by_country:
            return False
        self._by_country[record.country] = record
        return True

    @property
    def records(self) -> Tuple[Record, ...]:
        return tuple(self._by_country.values())

    def __iter__(self) -> Iterator[Record]:
        return iter(self._by_country.values())

    def __len__(self) -> int:
        return len(self._by_country)


__all__ = ["RecordStore"]
