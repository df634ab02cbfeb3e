"""
SEO Meta Tag Analyzer: Streamlit application
Analyzes a single page's meta tags, social tags, mobile-friendliness and load time.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from urllib.parse import urlparse

import pandas as pd
import streamlit as st

from analyzers.orchestrator import normalize_url, run_analysis, verdicts_from_result
from config import DEFAULT_REQUEST_TIMEOUT, DEFAULT_RECENT_LIMIT, USER_AGENT_PRESETS
from extractor.fetcher import FetchError
from models import AnalysisConfig, AnalysisResult, Status
from reporting.exporter import (
    category_scores_to_df,
    history_to_df,
    meta_tags_to_df,
    recommendations_to_df,
    to_csv_bytes,
    to_json_bytes,
)
from scoring.scorer import category_scores, score_breakdown, score_color, score_label
from storage import AnalysisStore
from ui.charts import category_scores_bar, history_scores_bar, mobile_signals_bar, seo_score_gauge

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# ── Page config ────────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="SEO Meta Tag Analyzer",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown("""
<style>
.block-container { padding-top: 1rem; }

.metric-card {
    background: #1A1D27;
    border-radius: 10px;
    padding: 1rem 1.2rem;
    margin-bottom: 0.5rem;
    border-left: 4px solid;
}
.metric-card.error   { border-color: #FF4B4B; }
.metric-card.warning { border-color: #FFA500; }
.metric-card.good    { border-color: #00C851; }
.metric-card.neutral { border-color: #6C63FF; }

.metric-val  { font-size: 2rem; font-weight: 700; margin: 0; }
.metric-lbl  { font-size: 0.8rem; color: #888; text-transform: uppercase; letter-spacing: 0.05em; }

.serp-title { color: #8AB4F8; font-size: 1.2rem; margin: 0; }
.serp-url   { color: #BDC1C6; font-size: 0.85rem; }
.serp-desc  { color: #BDC1C6; font-size: 0.9rem; }

.modebar { display: none !important; }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def get_store() -> AnalysisStore:
    return AnalysisStore()


# ── Session helpers ────────────────────────────────────────────────────────────

def _has_result() -> bool:
    return "analysis_result" in st.session_state


def _clear_results() -> None:
    st.session_state.pop("analysis_result", None)


# ── Sidebar ────────────────────────────────────────────────────────────────────

def render_sidebar() -> Optional[AnalysisConfig]:
    with st.sidebar:
        st.title("🔍 SEO Analyzer")

        url = st.text_input("Page URL", placeholder="https://example.com")
        force = st.toggle("Force fresh analysis", value=False,
                          help="Ignore a previously stored result for this URL.")
        timeout = st.slider("Request timeout (s)", 5, 60, DEFAULT_REQUEST_TIMEOUT, 5)

        ua_label = st.selectbox("Fetch as", options=list(USER_AGENT_PRESETS.keys()), index=0)
        user_agent = USER_AGENT_PRESETS[ua_label]
        st.caption(f"`{user_agent}`")

        st.divider()
        start = st.button("Analyze", type="primary", use_container_width=True)

    if start and url:
        return AnalysisConfig(url=url, force=force, request_timeout=timeout, user_agent=user_agent)
    return None


# ── Run analysis ───────────────────────────────────────────────────────────────

def run(config: AnalysisConfig) -> None:
    with st.status("Analyzing…", expanded=True) as status_widget:
        try:
            url = normalize_url(config.url)
            st.write(f"Fetching **{url}**…")
            result = run_analysis(config, get_store())
        except ValueError as exc:
            status_widget.update(label="Invalid URL", state="error")
            st.error(str(exc))
            return
        except FetchError as exc:
            status_widget.update(label="Fetch failed", state="error")
            st.error(str(exc))
            return

        status_widget.update(label="Analysis complete!", state="complete")

    st.session_state.analysis_result = result
    st.rerun()


# ── Dashboard: Overview ────────────────────────────────────────────────────────

def render_overview(result: AnalysisResult) -> None:
    verdicts = verdicts_from_result(result)
    scores = category_scores(verdicts, result.meta_tags)

    col_gauge, col_stats = st.columns([1, 2])
    with col_gauge:
        st.plotly_chart(seo_score_gauge(result.score), use_container_width=True)
        st.markdown(
            f'<div style="text-align:center;font-size:1.1rem;font-weight:700;'
            f'color:{score_color(result.score)}">{score_label(result.score)}</div>',
            unsafe_allow_html=True,
        )

    with col_stats:
        by_status = result.recommendations_by_status
        c1, c2, c3, c4 = st.columns(4)
        _metric_card(c1, "Meta Tags", result.tag_count, "neutral")
        _metric_card(c2, "Errors", len(by_status[Status.ERROR]), "error")
        _metric_card(c3, "Warnings", len(by_status[Status.WARNING]), "warning")
        _metric_card(c4, "Load Time", f"{result.page_speed.load_time:.0f} ms", result.page_speed.status)

        st.plotly_chart(category_scores_bar(scores), use_container_width=True)

    breakdown = score_breakdown(verdicts)
    if breakdown:
        with st.expander("Score breakdown"):
            st.dataframe(
                pd.DataFrame([{"Rule": _humanize(d.rule), "Points": -d.points} for d in breakdown]),
                use_container_width=True,
            )

    st.divider()
    st.subheader("Google Search Preview")
    parsed = urlparse(result.url)
    st.markdown(
        f'<div class="serp-url">{parsed.netloc}{parsed.path if parsed.path != "/" else ""}</div>'
        f'<p class="serp-title">{_truncate(result.title or "No title", 60)}</p>'
        f'<div class="serp-desc">{_truncate(result.description or "No description", 160)}</div>',
        unsafe_allow_html=True,
    )


# ── Dashboard: Tags ────────────────────────────────────────────────────────────

def render_tags(result: AnalysisResult) -> None:
    for label, verdict in (("Title", result.title_tag), ("Meta Description", result.description_tag)):
        icon = Status.ICONS.get(verdict.status, "•")
        st.markdown(f"{icon} **{label}:** {verdict.feedback}")

    st.divider()
    st.subheader("Meta Tags")
    st.dataframe(meta_tags_to_df(result), use_container_width=True)

    st.divider()
    col_og, col_tw = st.columns(2)
    with col_og:
        og = result.og_tags
        st.subheader(f"{Status.ICONS[og.status]} Open Graph")
        st.caption(og.feedback)
        for key in ("title", "description", "image", "url", "type"):
            st.markdown(f"**og:{key}:** {getattr(og, key) or '—'}")
    with col_tw:
        tw = result.twitter_tags
        st.subheader(f"{Status.ICONS[tw.status]} Twitter Card")
        st.caption(tw.feedback)
        for key in ("card", "title", "description", "image"):
            st.markdown(f"**twitter:{key}:** {getattr(tw, key) or '—'}")


# ── Dashboard: Mobile & Speed ──────────────────────────────────────────────────

def render_mobile_speed(result: AnalysisResult) -> None:
    col_mobile, col_speed = st.columns(2)

    with col_mobile:
        mobile = result.mobile_friendliness
        st.plotly_chart(mobile_signals_bar(mobile), use_container_width=True)
        st.markdown(f"{Status.ICONS[mobile.status]} {mobile.feedback}")

    with col_speed:
        speed = result.page_speed
        st.subheader(f"{Status.ICONS[speed.status]} Page Speed")
        st.metric("Load Time", f"{speed.load_time:.0f} ms")
        st.metric("Document Size", f"{speed.resource_size:.1f} KB" if speed.resource_size is not None else "N/A")
        st.metric("Requests", speed.request_count if speed.request_count is not None else "N/A")
        st.caption(speed.feedback)


# ── Dashboard: Recommendations ─────────────────────────────────────────────────

def render_recommendations(result: AnalysisResult) -> None:
    if not result.recommendations:
        st.success("Great job! No recommendations; this page covers all the checks.")
        return

    for rec in result.recommendations:
        icon = Status.ICONS.get(rec.status, "•")
        with st.expander(f"{icon} **{rec.title}**", expanded=False):
            st.markdown(rec.description)
            if rec.example_code:
                st.code(rec.example_code, language="html")


# ── Dashboard: History ─────────────────────────────────────────────────────────

def render_history() -> None:
    recent = get_store().recent(DEFAULT_RECENT_LIMIT)
    if not recent:
        st.info("No analyses yet.")
        return

    st.plotly_chart(history_scores_bar(recent), use_container_width=True)
    st.dataframe(history_to_df(recent), use_container_width=True)

    selected = st.selectbox("Open a previous analysis:", options=[""] + [r.url for r in recent])
    if selected and st.button("Show"):
        st.session_state.analysis_result = get_store().get(selected)
        st.rerun()


# ── Dashboard: Export ──────────────────────────────────────────────────────────

def render_export(result: AnalysisResult) -> None:
    st.subheader("Export Data")
    stamp = datetime.now().strftime("%Y%m%d_%H%M")
    host = urlparse(result.url).netloc or "page"

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.download_button(
            "Meta Tags (CSV)",
            data=to_csv_bytes(meta_tags_to_df(result)),
            file_name=f"meta_tags_{host}_{stamp}.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with col2:
        st.download_button(
            "Recommendations (CSV)",
            data=to_csv_bytes(recommendations_to_df(result)),
            file_name=f"recommendations_{host}_{stamp}.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with col3:
        scores = category_scores(verdicts_from_result(result), result.meta_tags)
        st.download_button(
            "Category Scores (CSV)",
            data=to_csv_bytes(category_scores_to_df(scores)),
            file_name=f"categories_{host}_{stamp}.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with col4:
        st.download_button(
            "Full Analysis (JSON)",
            data=to_json_bytes(result),
            file_name=f"analysis_{host}_{stamp}.json",
            mime="application/json",
            use_container_width=True,
        )


# ── Helpers ────────────────────────────────────────────────────────────────────

def _metric_card(col, label: str, value, card_class: str = "neutral") -> None:
    with col:
        st.markdown(
            f'<div class="metric-card {card_class}">'
            f'<div class="metric-lbl">{label}</div>'
            f'<div class="metric-val">{value}</div>'
            f'</div>',
            unsafe_allow_html=True,
        )


def _truncate(text: str, max_length: int) -> str:
    return text if len(text) <= max_length else text[:max_length] + "..."


def _humanize(snake: str) -> str:
    return snake.replace("_", " ").title()


def render_landing() -> None:
    st.markdown("""
    <div style="text-align:center; padding: 4rem 2rem;">
        <div style="font-size:4rem">🔍</div>
        <h1 style="font-size:2.5rem; font-weight:800; color:#6C63FF; margin:0.5rem 0">SEO Meta Tag Analyzer</h1>
        <p style="font-size:1.1rem; color:#888; max-width:600px; margin:0 auto 2rem">
            Checks a page's title, description, social tags, canonical, robots and viewport tags,
            plus quick mobile-friendliness and load time heuristics.
        </p>
    </div>
    """, unsafe_allow_html=True)


# ── Main ───────────────────────────────────────────────────────────────────────

def main():
    config = render_sidebar()

    if config is not None:
        _clear_results()
        run(config)
        return

    if not _has_result():
        render_landing()
        with st.expander("Recent analyses"):
            render_history()
        return

    result: AnalysisResult = st.session_state.analysis_result
    st.title(f"Analysis: {result.url}")
    st.caption(f"Score: **{result.score}/100** · {len(result.recommendations)} recommendation(s)")

    tabs = st.tabs(["Overview", "Tags", "Mobile & Speed", "Recommendations", "History", "Export"])
    with tabs[0]:
        render_overview(result)
    with tabs[1]:
        render_tags(result)
    with tabs[2]:
        render_mobile_speed(result)
    with tabs[3]:
        render_recommendations(result)
    with tabs[4]:
        render_history()
    with tabs[5]:
        render_export(result)


if __name__ == "__main__":
    main()
