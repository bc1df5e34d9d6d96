"""
Tenor value type ("6M", "10Y", ...) used for anchor and query maturities.
"""

from dataclasses import dataclass
from typing import Union

import QuantLib as ql

from zerocurve.conventions.types import TimeUnit


@dataclass(frozen=True)
class Tenor:
    """A calendar offset such as 6 months or 30 years."""

    length: int
    unit: TimeUnit

    def __post_init__(self):
        if self.length < 0:
            raise ValueError(f"Tenor length must be non-negative: {self.length}")

    @classmethod
    def parse(cls, tenor: Union[str, "Tenor"]) -> "Tenor":
        """Parse a tenor string (e.g., '3M', '2Y', '1W', '5D')."""
        if isinstance(tenor, Tenor):
            return tenor

        t = str(tenor).upper().strip()
        if len(t) < 2:
            raise ValueError(f"Unsupported tenor: {tenor}")

        try:
            unit = TimeUnit(t[-1])
            length = int(t[:-1])
        except ValueError as exc:
            raise ValueError(f"Unsupported tenor: {tenor}") from exc
        return cls(length, unit)

    def to_ql_period(self) -> ql.Period:
        return ql.Period(self.length, self.unit.to_ql())

    def __str__(self) -> str:
        return f"{self.length}{self.unit.value}"
