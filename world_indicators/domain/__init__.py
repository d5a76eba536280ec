"""
Domain package for the World Indicators analysis.

Exports the record model and the deduplicating store used by the loader and
analyzer. Keep this package focused on data definitions and validation concerns.
"""

from world_indicators.domain.models import Record
from world_indicators.domain.store import RecordStore

__all__ = [
    "Record",
    "RecordStore",
]
