import logging
import math
import re
from typing import Dict, Optional

import pandas as pd

from .io import metric_columns

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
RATINGS = ("good", "average", "bad")

SUMMARY_COLUMNS = ["column", "kind", "count", "average", "good", "average_rating", "bad"]


def to_number(value: object) -> Optional[float]:
    """Parse a single cell; None when it is not plain decimal notation."""
    if value is None:
        return None
    text = str(value).strip()
    if not NUMBER_RE.fullmatch(text):
        return None
    number = float(text)
    return number if math.isfinite(number) else None


def _cleaned(series: pd.Series) -> pd.Series:
    return series.fillna("").astype(str).str.strip()


def numeric_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Metric columns coerced to floats; anything unparseable becomes NaN."""
    numeric = pd.DataFrame(index=df.index)
    for col in metric_columns(df):
        cleaned = _cleaned(df[col])
        valid = cleaned.str.fullmatch(NUMBER_RE.pattern)
        values = pd.to_numeric(cleaned.where(valid), errors="coerce")
        numeric[col] = values.where(values.abs() != float("inf"))
    return numeric


def column_averages(df: pd.DataFrame) -> Dict[str, float]:
    numeric = numeric_frame(df)
    averages: Dict[str, float] = {}
    for col in numeric.columns:
        parsed = numeric[col].dropna()
        if parsed.empty:
            continue
        averages[col] = round(float(parsed.sum()) / len(parsed), 2)
    return averages


def column_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Per-column summary: mean for numeric columns, rating counts otherwise.

    A column counts as numeric as soon as one cell parses. Columns with neither
    numbers nor good/average/bad ratings are left out.
    """

    numeric = numeric_frame(df)
    rows = []
    for col in numeric.columns:
        parsed = numeric[col].dropna()
        if not parsed.empty:
            rows.append(
                {
                    "column": col,
                    "kind": "numeric",
                    "count": len(parsed),
                    "average": round(float(parsed.sum()) / len(parsed), 2),
                    "good": 0,
                    "average_rating": 0,
                    "bad": 0,
                }
            )
            continue

        ratings = _cleaned(df[col]).str.lower().value_counts()
        counts = {rating: int(ratings.get(rating, 0)) for rating in RATINGS}
        if not any(counts.values()):
            logger.debug("Column %r has no numeric or rating values; skipped", col)
            continue
        rows.append(
            {
                "column": col,
                "kind": "rating",
                "count": sum(counts.values()),
                "average": float("nan"),
                "good": counts["good"],
                "average_rating": counts["average"],
                "bad": counts["bad"],
            }
        )

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def format_summary(summary: pd.DataFrame) -> str:
    lines = []
    for _, row in summary.iterrows():
        if row["kind"] == "numeric":
            lines.append(f"{row['column']}: {row['average']:.2f}%")
        else:
            lines.append(
                f"{row['column']}: Good - {row['good']}, Average - {row['average_rating']}, Bad - {row['bad']}"
            )
    return "\n".join(lines)
