"""
Run settings, read from environment variables with command line overrides.

Environment variables:
    ZEROCURVE_EVALUATION_DATE  YYYY-MM-DD or YYYYMMDD (default 2025-08-24)
    ZEROCURVE_CALENDAR         TARGET, WEEKEND or NULL (default TARGET)
    ZEROCURVE_DAY_COUNT        ACT/365F, ACT/360, ACT/ACT, 30/360 (default ACT/365F)
    ZEROCURVE_QUERY_TENORS     comma separated tenors (default 3M,7Y,40Y)
    ZEROCURVE_LOG_LEVEL        logging level name (default WARNING)
"""

import logging
import os
from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Optional

from zerocurve import market_data
from zerocurve.conventions.tenor import Tenor
from zerocurve.dates import DateService, to_date

ENV_PREFIX = "ZEROCURVE_"


def parse_tenor_list(value: str) -> List[Tenor]:
    """Parse '3M, 7Y,40Y' into tenors."""
    tenors = [Tenor.parse(item) for item in value.split(",") if item.strip()]
    if not tenors:
        raise ValueError(f"No tenors in {value!r}")
    return tenors


def _parse_log_level(value: str) -> str:
    level = value.upper().strip()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level


@dataclass(frozen=True)
class Settings:
    """Inputs of one comparison run."""

    evaluation_date: date = market_data.EVALUATION_DATE
    calendar: str = market_data.CALENDAR
    day_count: str = market_data.DAY_COUNT
    query_tenors: List[Tenor] = field(
        default_factory=lambda: [Tenor.parse(t) for t in market_data.QUERY_TENORS]
    )
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Settings":
        """Load settings from ``environ`` (``os.environ`` if None)."""
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str) -> Optional[str]:
            value = env.get(ENV_PREFIX + name)
            return value if value and value.strip() else None

        evaluation_date = get("EVALUATION_DATE")
        tenors = get("QUERY_TENORS")
        log_level = get("LOG_LEVEL")
        return cls(
            evaluation_date=to_date(evaluation_date) if evaluation_date else defaults.evaluation_date,
            calendar=get("CALENDAR") or defaults.calendar,
            day_count=get("DAY_COUNT") or defaults.day_count,
            query_tenors=parse_tenor_list(tenors) if tenors else defaults.query_tenors,
            log_level=_parse_log_level(log_level) if log_level else defaults.log_level,
        )

    def with_overrides(self, **overrides) -> "Settings":
        """Copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        if "evaluation_date" in changes:
            changes["evaluation_date"] = to_date(changes["evaluation_date"])
        if isinstance(changes.get("query_tenors"), str):
            changes["query_tenors"] = parse_tenor_list(changes["query_tenors"])
        if "log_level" in changes:
            changes["log_level"] = _parse_log_level(changes["log_level"])
        return replace(self, **changes)

    def date_service(self) -> DateService:
        return DateService(calendar=self.calendar, day_count=self.day_count)
