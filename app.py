"""
Meta Tag Analyzer — Streamlit Application
Fetches a page and scores the SEO quality of its <head> metadata.
"""
from __future__ import annotations

import logging
from datetime import datetime
from html import escape
from urllib.parse import urlparse

import requests
import streamlit as st

from models import Analysis, Severity, TagStatus
from crawler.fetcher import make_session
from crawler.pipeline import analyze_url
from errors import InputError, TransportError
from reporting.exporter import (
    issues_to_df,
    tag_summary_df,
    tags_to_df,
    to_csv_bytes,
    to_json_bytes,
)
from reporting.previews import (
    canonical_status,
    canonical_tag_html,
    category_groups,
    description_status,
    description_tag_html,
    example_twitter_tags_html,
    facebook_card,
    og_tags_html,
    title_status,
    title_tag_html,
    truncate_text,
    twitter_card,
    twitter_tags_html,
)
from scoring.scorer import calculate_seo_score, score_color, score_label
from storage.cache import cache
from ui.charts import score_gauge, tag_status_bar, tag_status_donut
from config import (
    DEFAULT_USER_AGENT,
    LOG_FORMAT,
    LOG_LEVEL,
    SEARCH_DESCRIPTION_PREVIEW_CHARS,
    SEARCH_TITLE_PREVIEW_CHARS,
    TOP_RECOMMENDATIONS,
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# ── Page config ────────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="Meta Tag Analyzer",
    page_icon="🏷️",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ── Custom CSS ─────────────────────────────────────────────────────────────────
st.markdown("""
<style>
.block-container { padding-top: 1rem; }

/* Metric cards */
.metric-card {
    background: #1A1D27;
    border-radius: 10px;
    padding: 1rem 1.2rem;
    margin-bottom: 0.5rem;
    border-left: 4px solid;
}
.metric-card.optimal { border-color: #00C851; }
.metric-card.present { border-color: #4B9EFF; }
.metric-card.partial { border-color: #FFA500; }
.metric-card.missing { border-color: #FF4B4B; }
.metric-card.neutral { border-color: #6C63FF; }

.metric-val  { font-size: 1.3rem; font-weight: 700; margin: 0; }
.metric-lbl  { font-size: 0.8rem; color: #888; text-transform: uppercase; letter-spacing: 0.05em; }

/* Search preview */
.serp-title { font-size: 1.25rem; color: #8AB4F8; margin-bottom: 0.1rem; }
.serp-url   { font-size: 0.85rem; color: #34A853; margin-bottom: 0.1rem; }
.serp-desc  { font-size: 0.9rem; color: #BDC1C6; }

/* Social card */
.social-card  { background: #1A1D27; border-radius: 8px; overflow: hidden; border: 1px solid #2A2D3A; }
.social-body  { padding: 0.75rem; }
.social-domain{ font-size: 0.75rem; color: #888; text-transform: uppercase; }
.social-title { font-weight: 700; margin: 0.2rem 0; }
.social-desc  { font-size: 0.85rem; color: #BBB; }

.modebar { display: none !important; }

.sidebar-logo { font-size: 1.5rem; font-weight: 800; color: #6C63FF; margin-bottom: 0.5rem; }
</style>
""", unsafe_allow_html=True)


# ── State helpers ──────────────────────────────────────────────────────────────

def _clear_results():
    st.session_state.pop("analysis", None)


def _has_result() -> bool:
    return st.session_state.get("analysis") is not None


@st.cache_resource
def _get_session() -> requests.Session:
    return make_session(DEFAULT_USER_AGENT)


# ── Sidebar ────────────────────────────────────────────────────────────────────

def render_sidebar() -> str | None:
    with st.sidebar:
        st.markdown('<div class="sidebar-logo">🏷️ Meta Tag Analyzer</div>', unsafe_allow_html=True)
        st.caption("SEO metadata checker")
        st.divider()

        url = st.text_input(
            "Website URL",
            placeholder="https://example.com",
            help="Full URL including https://",
        )

        if _has_result():
            if st.button("🔄 New Analysis", use_container_width=True):
                _clear_results()
                st.rerun()

        start = st.button("Analyze", type="primary", use_container_width=True)

        recent = cache.recent()
        if recent:
            st.divider()
            st.subheader("Recent")
            for item in recent:
                st.caption(f"{item.score}/100 · {item.url}")

    if start and url:
        return url.strip()
    return None


# ── Run analysis ───────────────────────────────────────────────────────────────

def run_analysis(url: str) -> None:
    with st.status("Analysing meta tags…", expanded=True) as status_widget:
        st.write(f"Fetching **{url}**…")
        try:
            analysis = analyze_url(url, cache=cache, session=_get_session())
        except InputError as exc:
            status_widget.update(label="Invalid URL", state="error")
            st.error(f"Invalid URL: {exc.reason}. Please enter a full URL such as https://example.com")
            return
        except TransportError as exc:
            status_widget.update(label="Fetch failed", state="error")
            st.error(str(exc))
            return
        except Exception as exc:
            logger.exception("Unexpected failure analysing %s", url)
            status_widget.update(label="Analysis failed", state="error")
            st.error(f"An unexpected error occurred: {exc}")
            return

        status_widget.update(label="Analysis complete!", state="complete")

    st.session_state.analysis = analysis
    st.rerun()


# ── Dashboard: Overview ────────────────────────────────────────────────────────

def render_overview(analysis: Analysis) -> None:
    col_gauge, col_cards = st.columns([1, 2])

    quick = calculate_seo_score(analysis.tags)
    with col_gauge:
        st.plotly_chart(score_gauge(analysis.score, coverage=quick), use_container_width=True)
        color = score_color(analysis.score)
        st.markdown(
            f'<div style="text-align:center;font-size:1.1rem;font-weight:700;color:{color}">'
            f'{score_label(analysis.score)}</div>',
            unsafe_allow_html=True,
        )
        st.caption(f"Tag coverage score: **{quick}/100**")

    with col_cards:
        cols = st.columns(3)
        for idx, entry in enumerate(analysis.tag_summary):
            _metric_card(cols[idx % 3], entry.name, TagStatus.LABELS[entry.status], entry.status)

        st.markdown("")
        st.subheader("Top Recommendations")
        top = analysis.recommendations[:TOP_RECOMMENDATIONS]
        if top:
            for rec in top:
                st.markdown(f"- {rec}")
        else:
            st.success("Great job! Your meta tags are well optimized.")

    st.divider()
    c_left, c_right = st.columns(2)
    with c_left:
        st.plotly_chart(tag_status_bar(analysis), use_container_width=True)
    with c_right:
        st.plotly_chart(tag_status_donut(analysis), use_container_width=True)

    st.divider()
    cols = st.columns(3)
    for col, (section, items) in zip(cols, category_groups(analysis).items()):
        with col:
            st.markdown(f"**{section}**")
            for name, status in items:
                st.markdown(
                    f'<span style="color:{TagStatus.COLORS[status]}">●</span> '
                    f'{name}: {TagStatus.LABELS[status]}',
                    unsafe_allow_html=True,
                )


# ── Dashboard: Issues ──────────────────────────────────────────────────────────

def render_issues(analysis: Analysis) -> None:
    if not analysis.issues:
        st.success("No issues found!")
        return

    for issue, recommendation in zip(analysis.issues, analysis.recommendations):
        icon = Severity.ICONS.get(issue.severity, "•")
        with st.expander(f"{icon} **{issue.message}**", expanded=issue.severity == Severity.ERROR):
            st.markdown(f"**Code:** `{issue.code}`")
            st.markdown(f"**Recommendation:** {recommendation}")

    st.divider()
    st.dataframe(issues_to_df(analysis), use_container_width=True)


# ── Dashboard: Tags ────────────────────────────────────────────────────────────

def render_tags(analysis: Analysis) -> None:
    df = tags_to_df(analysis.tags)
    if df.empty:
        st.info("No meta tags found on this page.")
        return

    groups = df["Group"].unique().tolist()
    selected = st.multiselect("Filter by group", options=groups, default=groups)
    filtered = df[df["Group"].isin(selected)]
    st.caption(f"Showing {len(filtered)} of {len(df)} tags")
    st.dataframe(
        filtered,
        use_container_width=True,
        height=min(600, len(filtered) * 36 + 60),
        column_config={
            "Group": st.column_config.TextColumn("Group", width="small"),
            "Tag":   st.column_config.TextColumn("Tag",   width="medium"),
            "Value": st.column_config.TextColumn("Value", width="large"),
        },
    )


# ── Dashboard: Previews ────────────────────────────────────────────────────────

def render_previews(analysis: Analysis) -> None:
    tags = analysis.tags

    st.subheader("Google Search Preview")
    st.markdown(
        f'<div class="serp-title">{_html(truncate_text(tags.title, SEARCH_TITLE_PREVIEW_CHARS)) or "No title available"}</div>'
        f'<div class="serp-url">{_html(tags.url)}</div>'
        f'<div class="serp-desc">{_html(truncate_text(tags.description, SEARCH_DESCRIPTION_PREVIEW_CHARS)) or "No description available"}</div>',
        unsafe_allow_html=True,
    )
    c1, c2, c3 = st.columns(3)
    c1.metric("Title", title_status(tags))
    c2.metric("Description", description_status(tags))
    c3.metric("Canonical", canonical_status(tags))
    snippet = "\n".join(s for s in (title_tag_html(tags), description_tag_html(tags), canonical_tag_html(tags)) if s)
    if snippet:
        st.code(snippet, language="html")

    st.divider()
    col_fb, col_tw = st.columns(2)

    with col_fb:
        st.subheader("Facebook Preview")
        _social_card(facebook_card(tags))
        og_html = og_tags_html(tags)
        if og_html:
            st.code("\n".join(og_html), language="html")
        else:
            st.warning("No Open Graph tags found.")

    with col_tw:
        st.subheader("Twitter Preview")
        _social_card(twitter_card(tags))
        tw_html = twitter_tags_html(tags)
        if tw_html:
            st.code("\n".join(tw_html), language="html")
        else:
            st.warning("No Twitter Card tags found. Suggested markup:")
            st.code("\n".join(example_twitter_tags_html(tags)), language="html")


# ── Dashboard: Export ─────────────────────────────────────────────────────────

def render_export(analysis: Analysis) -> None:
    st.subheader("Export Data")
    stamp = datetime.now().strftime("%Y%m%d_%H%M")
    key = urlparse(analysis.url).netloc

    col1, col2, col3 = st.columns(3)
    with col1:
        st.download_button(
            "Download Issues (CSV)",
            data=to_csv_bytes(issues_to_df(analysis)),
            file_name=f"issues_{key}_{stamp}.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with col2:
        st.download_button(
            "Download Tags (CSV)",
            data=to_csv_bytes(tags_to_df(analysis.tags)),
            file_name=f"tags_{key}_{stamp}.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with col3:
        st.download_button(
            "Download Analysis (JSON)",
            data=to_json_bytes(analysis),
            file_name=f"analysis_{key}_{stamp}.json",
            mime="application/json",
            use_container_width=True,
        )

    st.divider()
    st.subheader("Tag Summary")
    st.dataframe(tag_summary_df(analysis), use_container_width=True)


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


def _social_card(card) -> None:
    if card.image:
        st.image(card.image, use_container_width=True)
    st.markdown(
        f'<div class="social-card"><div class="social-body">'
        f'<div class="social-domain">{_html(card.domain)}</div>'
        f'<div class="social-title">{_html(card.title)}</div>'
        f'<div class="social-desc">{_html(truncate_text(card.description, 200))}</div>'
        f'</div></div>',
        unsafe_allow_html=True,
    )


def _html(text: str | None) -> str:
    return escape(text or "")


# ── Landing / empty state ──────────────────────────────────────────────────────

def render_landing() -> None:
    st.markdown("""
    <div style="text-align:center; padding: 4rem 2rem;">
        <div style="font-size:4rem">🏷️</div>
        <h1 style="font-size:2.5rem; font-weight:800; color:#6C63FF; margin:0.5rem 0">Meta Tag Analyzer</h1>
        <p style="font-size:1.1rem; color:#888; max-width:600px; margin:0 auto 2rem">
            Enter a URL to check its title, description, Open Graph, Twitter Card,
            canonical and viewport tags, and get a score with concrete fixes.
        </p>
    </div>
    """, unsafe_allow_html=True)

    col1, col2, col3 = st.columns(3)
    _feature_card(col1, "🔎", "Search Preview", "See how the page appears in Google results")
    _feature_card(col2, "💬", "Social Preview", "Facebook and Twitter link cards from your tags")
    _feature_card(col3, "✅", "Recommendations", "Concrete fixes for every missing or weak tag")


def _feature_card(col, icon: str, title: str, desc: str) -> None:
    with col:
        st.markdown(
            f'<div class="metric-card neutral" style="text-align:center">'
            f'<div style="font-size:2rem">{icon}</div>'
            f'<div style="font-weight:700;margin:0.5rem 0">{title}</div>'
            f'<div style="font-size:0.85rem;color:#888">{desc}</div>'
            f'</div>',
            unsafe_allow_html=True,
        )


# ── Main ───────────────────────────────────────────────────────────────────────

def main():
    url = render_sidebar()

    if url is not None:
        _clear_results()
        run_analysis(url)
        return

    if not _has_result():
        render_landing()
        return

    analysis: Analysis = st.session_state.analysis

    n_err = len(analysis.issues_by_severity.get(Severity.ERROR, []))
    st.title(f"Analysis: {analysis.url}")
    st.caption(
        f"Score: **{analysis.score}/100** · "
        f"{len(analysis.issues)} issue(s) · {n_err} error(s)"
    )

    tabs = st.tabs(["Overview", "Issues", "Tags", "Previews", "Export"])

    with tabs[0]:
        render_overview(analysis)

    with tabs[1]:
        render_issues(analysis)

    with tabs[2]:
        render_tags(analysis)

    with tabs[3]:
        render_previews(analysis)

    with tabs[4]:
        render_export(analysis)


if __name__ == "__main__":
    main()
