"""
Console rendering of the interpolation comparison.
"""

from datetime import date
from typing import Sequence

import pandas as pd

from zerocurve.analysis.compare import ComparisonRow

SEPARATOR = "-" * 52
COLUMNS = ["Maturity", "Linear Rate", "Cubic Spline Rate"]


def comparison_frame(rows: Sequence[ComparisonRow]) -> pd.DataFrame:
    """Comparison rows as a DataFrame, failed queries as NaN."""
    records = [
        {
            "Maturity": row.label,
            "Linear Rate": row.linear_rate if row.ok else float("nan"),
            "Cubic Spline Rate": row.cubic_rate if row.ok else float("nan"),
        }
        for row in rows
    ]
    return pd.DataFrame.from_records(records, columns=COLUMNS)


def render_comparison(
    rows: Sequence[ComparisonRow], evaluation_date: date, precision: int = 5
) -> str:
    """Fixed-width table of linear vs cubic spline zero rates.

    Columns are left-aligned and separated by ``" | "``; failed queries show
    ``error`` in both rate columns and their message below the table.
    """
    frame = comparison_frame(rows)
    cells = pd.DataFrame({
        "Maturity": frame["Maturity"].astype(str),
        "Linear Rate": frame["Linear Rate"].map(lambda v: _format_rate(v, precision)),
        "Cubic Spline Rate": frame["Cubic Spline Rate"].map(lambda v: _format_rate(v, precision)),
    }, columns=COLUMNS)
    widths = [max([len(col)] + cells[col].map(len).tolist()) for col in COLUMNS]

    def format_line(values) -> str:
        return " | ".join(str(v).ljust(w) for v, w in zip(values, widths)).rstrip()

    lines = [f"Evaluation Date: {evaluation_date.isoformat()}", SEPARATOR]
    lines.append(format_line(COLUMNS))
    lines.extend(format_line(values) for values in cells.itertuples(index=False))
    lines.append(SEPARATOR)

    for row in rows:
        if not row.ok:
            lines.append(f"{row.label}: {row.error}")
    return "\n".join(lines)


def _format_rate(value: float, precision: int) -> str:
    return "error" if pd.isna(value) else f"{value:.{precision}f}"
