"""
Domain models for the World Indicators analysis.

Defines the per-country record built from one row of the indicators CSV. The
model is frozen and validates its own invariants, so any Record that exists
has a non-blank country and strictly positive indicators.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    One country's birth rate and life expectancy.
    """

    country: str = Field(..., min_length=1, description="Country name, unique within a store.")
    birth_rate: float = Field(..., gt=0, description="Birth rate as a decimal (0.021 = 2.1%).")
    life_expectancy: float = Field(..., gt=0, description="Life expectancy in years.")

    model_config = {
        "frozen": True,
        "str_strip_whitespace": True,
        "arbitrary_types_allowed": False,
    }

    def __str__(self) -> str:
        return (
            f"{self.country} - Birth Rate: {self.birth_rate:.3f}, "
            f"Life Expectancy: {self.life_expectancy:.1f} years"
        )


__all__ = ["Record"]
