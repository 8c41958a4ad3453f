"""Streamlit UI for the gig matcher."""
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from gigmatch.config import REPORTS_DIR, ensure_dirs, load_settings
from gigmatch.errors import GigMatchError
from gigmatch.log import get_logger

log = get_logger(__name__)

# ── Constants ────────────────────────────────────────────────────────────

EXPERIENCE_LEVELS: list[str] = ["any", "Junior", "Mid-Level", "Senior", "Lead"]
JOB_TYPES: list[str] = ["any", "Full-time", "Part-time", "Freelance", "Contract", "Internship"]

_CSS = """
<style>
[data-testid="stMetric"] {
    background: rgba(255,255,255,0.6);
    padding: 0.75rem 1rem;
    border-radius: 12px;
    border: 1px solid rgba(255,255,255,0.4);
    box-shadow: 0 4px 16px rgba(0,0,0,0.06);
}
.reason {
    padding: 0.4rem 0.75rem; background: rgba(39,174,96,0.08);
    border-left: 3px solid #27ae60; border-radius: 6px;
    font-size: 0.9rem; color: #333;
}
</style>
"""


# ── Page: Match ──────────────────────────────────────────────────────────


def page_match() -> None:
    st.header("Find Matching Gigs")
    st.write("Describe what you need. Filters are optional and default to **any**.")

    with st.form("match_form"):
        text = st.text_area(
            "What are you looking for? *",
            placeholder="e.g. React frontend developer, full-time, under 1500000",
        )
        c1, c2 = st.columns(2)
        with c1:
            skills = st.text_input("Skills", placeholder="react, node, mongodb")
            experience = st.selectbox("Experience level", EXPERIENCE_LEVELS)
            salary = st.text_input("Salary", placeholder="between 500000 to 1500000")
        with c2:
            location = st.text_input("Location", placeholder="Remote")
            job_type = st.selectbox("Job type", JOB_TYPES)
            write_report = st.checkbox("Save Markdown report", value=False)
        submitted = st.form_submit_button("Match", type="primary", use_container_width=True)

    if submitted:
        payload = {
            "textDescription": text,
            "skills": skills,
            "experienceLevel": experience,
            "location": location,
            "jobType": job_type,
            "salaryRange": salary,
        }
        try:
            from gigmatch.matcher import run

            st.session_state["last_result"] = run(payload, write_report=write_report)
        except GigMatchError as exc:
            log.error("UI match failed: %s", exc)
            st.error(str(exc))
            return

    result = st.session_state.get("last_result")
    if not result:
        st.info("No results yet. Fill in the form and press **Match**.")
        return

    response = result["response"]
    report = result["report"]
    st.divider()
    c1, c2, c3 = st.columns(3)
    c1.metric("Gigs Scored", report.corpus_size)
    c2.metric("Matched", len(report.results))
    c3.metric("Hard Rejects", report.rejected_count)
    if result.get("report_path"):
        st.info(f"Report saved → `{result['report_path']}`")

    if not response["matchedJobs"]:
        st.warning(response["message"])
        return

    import pandas as pd

    df = pd.DataFrame(response["matchedJobs"])
    display_cols = ["title", "matchPercentage", "jobType", "location", "salary", "matchReason"]
    display_cols = [c for c in display_cols if c in df.columns]
    st.dataframe(
        df[display_cols],
        use_container_width=True,
        column_config={
            "matchPercentage": st.column_config.ProgressColumn(
                "Match", min_value=0, max_value=100, format="%d%%"
            ),
        },
        hide_index=True,
    )

    for job in response["matchedJobs"]:
        with st.expander(f"{job['matchPercentage']}% — {job['title']}"):
            st.write(job.get("description", ""))
            st.markdown(f"<div class='reason'>{job['whyGoodFit']}</div>", unsafe_allow_html=True)


# ── Page: Reports ────────────────────────────────────────────────────────


def page_reports() -> None:
    st.header("Saved Reports")
    ensure_dirs()
    reports = sorted(REPORTS_DIR.glob("match_*.md"), reverse=True)
    if not reports:
        st.info("No reports yet. Tick **Save Markdown report** when matching.")
        return
    selected = st.selectbox(
        "Select report",
        reports,
        format_func=lambda p: p.stem.replace("match_", ""),
    )
    if selected:
        st.markdown(selected.read_text(encoding="utf-8"))


def _sidebar_status() -> None:
    with st.sidebar:
        st.divider()
        st.markdown("**Job source**")
        try:
            settings = load_settings()
        except GigMatchError as exc:
            st.error(str(exc))
            return
        label = {
            "sample": "Built-in samples",
            "file": f"File: {settings.jobs_file}",
            "api": f"API: {settings.api_url}",
        }[settings.source]
        st.markdown(label)
        st.caption(f"Threshold {settings.min_percent}% · workers {settings.workers}")


def _wrap_match():
    st.markdown(_CSS, unsafe_allow_html=True)
    _sidebar_status()
    page_match()


def _wrap_reports():
    st.markdown(_CSS, unsafe_allow_html=True)
    _sidebar_status()
    page_reports()


pages = [
    st.Page(_wrap_match, title="Match", icon="🎯", url_path="match", default=True),
    st.Page(_wrap_reports, title="Reports", icon="📋", url_path="reports"),
]

nav = st.navigation(pages)
nav.run()
