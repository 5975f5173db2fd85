"""Kernel configuration."""

from datetime import date
from typing import List

from pydantic import BaseModel, Field


def _bundled_holidays() -> List[date]:
    from pathway_kernel.config import bundled_holidays
    return bundled_holidays()


class KernelConfig(BaseModel):
    """
    Environment-like settings the engine depends on.

    The bank-holiday list is the only piece that must change over time; it
    defaults to the calendar shipped in pathway_kernel/data and can be
    replaced from YAML without code changes (see pathway_kernel.config).
    """

    bank_holidays: List[date] = Field(default_factory=_bundled_holidays)
    holiday_division: str = "england-and-wales"
    urgent_threshold_days: int = Field(ge=0, default=30)
