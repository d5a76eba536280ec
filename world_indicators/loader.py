"""
CSV loader for the World Indicators 2000 dataset.

Rows are split on a literal comma with no quoting support: a country name that
contains a comma shifts every later column, and such rows usually fail to
parse and are dropped. Every rejection is silent; the only diagnostic this
module emits is the file-not-found line on stderr.

Usage:
    from world_indicators.loader import load_records

    records = load_records("WorldIndicators2000.csv")
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from world_indicators.domain.models import Record
from world_indicators.domain.store import RecordStore
from world_indicators.utils.logging import get_logger

log = get_logger(__name__)

MIN_FIELDS = 16
COUNTRY_COLUMN = 0
BIRTH_RATE_COLUMN = 2
LIFE_EXPECTANCY_COLUMN = 15


def _parse_number(raw: str) -> float:
    """Blank means 0.0; anything else must parse or ValueError propagates."""
    text = raw.strip()
    if not text:
        return 0.0
    # float() accepts digit separators ("1_0"); dataset numbers never carry them.
    if "_" in text:
        raise ValueError(f"invalid number: {text!r}")
    return float(text)


def parse_row(line: str) -> Optional[Record]:
    """
    Parse one data line into a Record, or None when the row is rejected.

    Rejected rows: fewer than 16 fields, an unparsable numeric column, or a
    non-positive birth rate or life expectancy.
    """
    parts = line.rstrip("\r\n").split(",")
    if len(parts) < MIN_FIELDS:
        return None

    try:
        birth_rate = _parse_number(parts[BIRTH_RATE_COLUMN])
        life_expectancy = _parse_number(parts[LIFE_EXPECTANCY_COLUMN])
    except ValueError:
        return None

    if not birth_rate > 0 or not life_expectancy > 0:
        return None

    try:
        return Record(
            country=parts[COUNTRY_COLUMN].strip(),
            birth_rate=birth_rate,
            life_expectancy=life_expectancy,
        )
    except ValidationError:
        return None


def load_records(path: Path | str) -> List[Record]:
    """
    Read the CSV at `path` and return unique, valid records in file order.

    The first line is a header and is always discarded. A file that cannot be
    opened (missing, a directory, unreadable) is reported on stderr and yields
    an empty list.
    """
    store = RecordStore()
    skipped = 0
    duplicates = 0

    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as exc:
        typer.echo(f"Error: File not found - {exc.filename} ({exc.strerror})", err=True)
        log.debug("Input file not readable", extra={"path": str(path), "error": exc.strerror})
        return []

    with f:
        next(f, None)
        for line in f:
            record = parse_row(line)
            if record is None:
                skipped += 1
            elif not store.add(record):
                duplicates += 1

    log.debug(
        "Loaded %d records from %s",
        len(store),
        path,
        extra={"accepted": len(store), "skipped": skipped, "duplicates": duplicates},
    )
    return list(store.records)


__all__ = ["MIN_FIELDS", "load_records", "parse_row"]
