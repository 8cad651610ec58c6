import asyncio
import logging
import sys
from io import BytesIO
from pathlib import Path

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
for path in (ROOT, SRC):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from app.sample_data import load_sample_dataframe  # noqa: E402
from insightplan.config import configure_logging  # noqa: E402
from insightplan.io import load_dataset  # noqa: E402
from insightplan.plots import averages_bar, tier_bar  # noqa: E402
from insightplan.report import to_markdown  # noqa: E402
from insightplan.session import AnalysisSession, analyze, request_report  # noqa: E402
from insightplan.tiers import TIER_ORDER  # noqa: E402

logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="InsightPlan - Smart Performance Tracker",
    layout="wide",
    page_icon="📊",
)


def _render_header():
    st.title("📊 InsightPlan - Smart Performance Tracker")
    st.caption(
        "Upload a class CSV (one row per student, one column per subject) to see subject averages, "
        "performance categories and AI-generated study tips."
    )


def _get_dataset() -> pd.DataFrame | None:
    st.sidebar.subheader("Upload CSV")
    uploaded = st.sidebar.file_uploader("Student performance CSV", type=["csv"])

    if st.sidebar.button("Load sample data"):
        st.session_state["use_sample"] = True
    if uploaded:
        st.session_state["use_sample"] = False
        try:
            return load_dataset(BytesIO(uploaded.getvalue()))
        except ValueError as exc:
            logger.warning("Rejected upload %s: %s", uploaded.name, exc)
            st.error(str(exc))
            return None
    if st.session_state.get("use_sample"):
        return load_sample_dataframe()
    return None


def _render_checks(session: AnalysisSession):
    failed = [check for check in session.checks if not check["ok"]]
    for check in failed:
        st.warning(f"{check['name'].replace('_', ' ')}: {check['detail']}")


def _render_averages(session: AnalysisSession):
    st.subheader("📉 Average marks per subject")
    if session.summary.empty:
        st.info("No numeric or rating columns found.")
        return
    left, right = st.columns([1, 2])
    with left:
        st.dataframe(session.summary, use_container_width=True, hide_index=True)
        st.download_button(
            "Download subject summary",
            data=session.summary.to_csv(index=False).encode("utf-8"),
            file_name="subject_summary.csv",
            mime="text/csv",
        )
    with right:
        fig = averages_bar(session.summary)
        if fig.data:
            st.plotly_chart(fig, use_container_width=True)


def _render_tiers(session: AnalysisSession):
    st.subheader("🎯 Performance categories")
    fig = tier_bar(session.groups)
    if fig.data:
        st.plotly_chart(fig, use_container_width=True)
    else:
        st.info("No student has a numeric subject to classify.")

    cols = st.columns(len(TIER_ORDER))
    for col, tier in zip(cols, TIER_ORDER):
        names = session.groups[tier]
        with col:
            st.metric(tier.value, len(names))
            with st.expander("Students"):
                st.write(", ".join(names) if names else "-")

    if session.unclassified:
        st.caption("Not classified (no numeric subjects): " + ", ".join(session.unclassified))

    st.download_button(
        "Download student table",
        data=session.students.to_csv(index=False).encode("utf-8"),
        file_name="student_tiers.csv",
        mime="text/csv",
    )


def _render_tips(session: AnalysisSession):
    st.subheader("🧠 AI-powered learning dashboard")
    fingerprint = hash(session.dataset.to_csv(index=False))
    if st.session_state.get("report_for") != fingerprint:
        st.session_state.pop("report_markdown", None)

    if st.button("Generate study tips"):
        with st.spinner("Asking the assistant for study tips..."):
            session = asyncio.run(request_report(session))
        st.session_state["report_markdown"] = to_markdown(session.report)
        st.session_state["report_for"] = fingerprint

    report = st.session_state.get("report_markdown")
    if report:
        st.markdown(report)
    else:
        st.caption("Tips are generated on request from the subject summary above.")


def main():
    configure_logging()
    _render_header()

    df = _get_dataset()
    if df is None:
        st.session_state.pop("report_markdown", None)
        st.info("Upload a CSV or load the sample data to get started.")
        return

    session = analyze(df)
    if session.is_empty:
        st.warning("The file has no student rows.")
        return

    st.write("### Data preview")
    st.dataframe(session.dataset.head(20), use_container_width=True)

    _render_checks(session)
    _render_averages(session)
    _render_tiers(session)
    _render_tips(session)


if __name__ == "__main__":
    main()
