import logging
from enum import Enum
from typing import Dict, List

import pandas as pd

from .io import NAME_COLUMN
from .stats import numeric_frame

logger = logging.getLogger(__name__)

POOR_BELOW = 35.0
EXCELLENT_FROM = 75.0


class Tier(Enum):
    POOR = "Poor"
    MID = "Mid"
    EXCELLENT = "Excellent"

    @property
    def rank(self) -> int:
        return TIER_ORDER.index(self)

    def __lt__(self, other: "Tier") -> bool:
        if not isinstance(other, Tier):
            return NotImplemented
        return self.rank < other.rank


TIER_ORDER = [Tier.POOR, Tier.MID, Tier.EXCELLENT]


def classify_average(average: float) -> Tier:
    if average < POOR_BELOW:
        return Tier.POOR
    if average < EXCELLENT_FROM:
        return Tier.MID
    return Tier.EXCELLENT


def _identities(df: pd.DataFrame) -> pd.Series:
    fallback = pd.Series([f"Row {pos}" for pos in range(1, len(df) + 1)], index=df.index)
    if NAME_COLUMN not in df.columns:
        return fallback
    names = df[NAME_COLUMN].fillna("").astype(str).str.strip()
    return names.where(names != "", fallback)


def student_averages(df: pd.DataFrame) -> pd.DataFrame:
    """Row-wise mean of each student's numeric subjects.

    Students without a single numeric subject keep ``average`` as NaN and an
    empty ``tier``; they are never bucketed.
    """

    numeric = numeric_frame(df)
    subjects = numeric.notna().sum(axis=1)
    averages = numeric.mean(axis=1, skipna=True)

    tiers = [classify_average(avg).value if count else "" for avg, count in zip(averages, subjects)]
    return pd.DataFrame(
        {
            "name": _identities(df).tolist(),
            "average": averages.tolist(),
            "subjects": [int(count) for count in subjects],
            "tier": tiers,
        }
    )


def groups_from_table(table: pd.DataFrame) -> Dict[Tier, List[str]]:
    """Bucket an already computed ``student_averages`` table."""
    groups: Dict[Tier, List[str]] = {tier: [] for tier in TIER_ORDER}
    for _, row in table.iterrows():
        if not row["tier"]:
            continue
        groups[Tier(row["tier"])].append(row["name"])
    return groups


def unclassified_from_table(table: pd.DataFrame) -> List[str]:
    skipped = table.loc[table["subjects"] == 0, "name"].tolist()
    if skipped:
        logger.warning("%d student(s) have no numeric subjects and were not classified", len(skipped))
    return skipped


def performance_groups(df: pd.DataFrame) -> Dict[Tier, List[str]]:
    return groups_from_table(student_averages(df))


def unclassified_students(df: pd.DataFrame) -> List[str]:
    return unclassified_from_table(student_averages(df))
