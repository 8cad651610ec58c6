from typing import Dict, List, Optional

import pandas as pd

from .io import NAME_COLUMN, metric_columns
from .stats import numeric_frame
from .tiers import unclassified_students


def check_name_column(df: pd.DataFrame) -> bool:
    return NAME_COLUMN in df.columns


def check_non_numeric_cells(df: pd.DataFrame) -> int:
    """Count filled metric cells that did not parse as numbers."""
    numeric = numeric_frame(df)
    total = 0
    for col in numeric.columns:
        filled = df[col].fillna("").astype(str).str.strip() != ""
        total += int((filled & numeric[col].isna()).sum())
    return total


def check_ragged_rows(df: pd.DataFrame) -> int:
    return int(df.attrs.get("ragged_rows", 0))


def run_invariants(df: pd.DataFrame, unclassified: Optional[List[str]] = None) -> List[Dict[str, object]]:
    """Health checks for one dataset. Pass ``unclassified`` when the caller has already listed them."""
    results = []

    results.append({"name": "non_empty", "ok": not df.empty, "detail": len(df)})

    has_name = check_name_column(df)
    results.append(
        {
            "name": "name_column",
            "ok": has_name,
            "detail": "present" if has_name else "missing; rows are labelled by position",
        }
    )

    metrics = metric_columns(df)
    results.append(
        {
            "name": "metric_columns",
            "ok": len(metrics) > 0,
            "detail": ", ".join(metrics) if metrics else "none",
        }
    )

    ragged = check_ragged_rows(df)
    results.append({"name": "ragged_rows", "ok": ragged == 0, "detail": ragged})

    non_numeric = check_non_numeric_cells(df)
    results.append({"name": "non_numeric_cells", "ok": non_numeric == 0, "detail": non_numeric})

    skipped = unclassified_students(df) if unclassified is None else unclassified
    results.append(
        {
            "name": "unclassified_students",
            "ok": not skipped,
            "detail": ", ".join(skipped) if skipped else 0,
        }
    )

    return results
