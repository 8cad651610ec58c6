import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

import pandas as pd

from .invariants import run_invariants
from .io import metric_columns, parse_records
from .report import ReportBlock, format_report, heading_keywords
from .stats import column_averages, column_summary, format_summary
from .suggestions import SuggestionGateway
from .tiers import Tier, groups_from_table, student_averages, unclassified_from_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class AnalysisSession:
    """Everything derived from one upload. A new upload means a new session."""

    dataset: pd.DataFrame
    summary: pd.DataFrame
    averages: Dict[str, float]
    students: pd.DataFrame
    groups: Dict[Tier, List[str]]
    unclassified: List[str]
    checks: List[Dict[str, object]]
    advisory_text: Optional[str] = None
    report: List[ReportBlock] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.dataset.empty

    @property
    def summary_text(self) -> str:
        return format_summary(self.summary)


def analyze(df: pd.DataFrame) -> AnalysisSession:
    logger.info("Analyzing %d student records", len(df))
    students = student_averages(df)
    unclassified = unclassified_from_table(students)
    return AnalysisSession(
        dataset=df,
        summary=column_summary(df),
        averages=column_averages(df),
        students=students,
        groups=groups_from_table(students),
        unclassified=unclassified,
        checks=run_invariants(df, unclassified=unclassified),
    )


def analyze_text(text: str) -> AnalysisSession:
    return analyze(parse_records(text))


def attach_report(session: AnalysisSession, advisory_text: str) -> AnalysisSession:
    keywords = heading_keywords(metric_columns(session.dataset))
    return replace(session, advisory_text=advisory_text, report=format_report(advisory_text, keywords))


async def request_report(session: AnalysisSession, gateway: Optional[SuggestionGateway] = None) -> AnalysisSession:
    """Ask the advisory service once and return a session carrying the report."""
    gateway = gateway or SuggestionGateway()
    advisory_text = await gateway.suggest(session.summary_text)
    return attach_report(session, advisory_text)
