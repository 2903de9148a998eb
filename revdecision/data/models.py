"""
Canonical revenue record model.

RevenueRecord is the only shape the calculation core consumes. Records are
immutable and carry a strictly positive revenue amount; rows that cannot
satisfy this are dropped before they reach the core.
"""

from dataclasses import dataclass, field
from datetime import datetime

from ..utils.time import ensure_utc


@dataclass(frozen=True)
class RevenueRecord:
    """Single revenue entry with UTC timestamp and derived calendar fields."""
    timestamp: datetime     # UTC timestamp
    revenue: float          # Strictly positive amount
    year: int               # Calendar year of timestamp
    month: int              # Calendar month 1-12

    @classmethod
    def from_timestamp(cls, timestamp: datetime, revenue: float) -> "RevenueRecord":
        """Build a record deriving year and month from the UTC timestamp."""
        ts = ensure_utc(timestamp)
        return cls(timestamp=ts, revenue=float(revenue), year=ts.year, month=ts.month)


@dataclass(frozen=True)
class DroppedRow:
    """A source row that could not be mapped to a record."""
    index: int
    reason: str


@dataclass(frozen=True)
class NormalizationResult:
    """Result of mapping a batch of tabular rows."""
    records: tuple[RevenueRecord, ...] = ()
    dropped: tuple[DroppedRow, ...] = field(default_factory=tuple)

    @property
    def success(self) -> bool:
        """True when at least one record was produced."""
        return len(self.records) > 0

    @property
    def dropped_count(self) -> int:
        return len(self.dropped)
