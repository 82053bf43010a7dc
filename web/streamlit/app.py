"""Usage Analytics Dashboard."""

import sys
from datetime import datetime
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from app.services.analytics import PageViewTracker  # noqa: E402
from settings import DASHBOARD_LIMIT  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api import analytics  # noqa: E402
from web.api.errors import ExportError  # noqa: E402

DASHBOARD_PATH = "/analytics"


@st.cache_resource(show_spinner=False)
def _bootstrap() -> None:
    """Configure logging and the container once per server process."""
    setup_logging()
    container.init()


st.set_page_config(page_title="Usage Analytics", page_icon="📈", layout="wide")
_bootstrap()


def format_ts(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M:%S")


def top_pages_chart(pages: list) -> go.Figure:
    return go.Figure(
        go.Bar(
            x=[p["view_count"] for p in pages],
            y=[p["path"] for p in pages],
            orientation="h",
            marker_color="#2563EB",
            text=[p["view_count"] for p in pages],
            textposition="outside",
        )
    ).update_layout(
        yaxis=dict(autorange="reversed"),
        margin=dict(t=20, b=40, l=200, r=20),
        height=max(250, 40 * len(pages)),
    )


def stats_section():
    st.subheader("🔍 Search Statistics")
    stats = analytics.get_search_stats()
    cols = st.columns(4)
    cols[0].metric("Total Searches", stats.total_searches)
    cols[1].metric("Unique Queries", stats.unique_queries)
    cols[2].metric("Zero-Result Searches", stats.zero_result_count)
    cols[3].metric("Avg Results per Search", stats.average_result_count)


def top_pages_section(limit: int):
    st.subheader("📄 Top Pages")
    pages = [p.model_dump() for p in analytics.get_top_pages(limit).items]
    if not pages:
        st.info("No page views recorded yet")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.dataframe(
            [
                {"Rank": i + 1, "Page Path": p["path"], "View Count": p["view_count"], "Last Viewed": format_ts(p["last_seen_at"])}
                for i, p in enumerate(pages)
            ],
            hide_index=True,
        )
    with col2:
        st.plotly_chart(top_pages_chart(pages), width="stretch")


def recent_searches_section(limit: int):
    st.subheader("🕑 Recent Searches")
    searches = analytics.get_recent_searches(limit).items
    if not searches:
        st.info("No searches recorded yet")
        return

    st.dataframe(
        [
            {
                "Query": s.query,
                "Results": s.result_count if s.has_results else "0 (No Results)",
                "Timestamp": format_ts(s.occurred_at),
            }
            for s in searches
        ],
        hide_index=True,
    )


def zero_results_section(limit: int):
    st.subheader("🚫 Zero-Result Searches")
    st.caption("These queries returned no results. Consider adding content or improving search for these terms.")
    misses = analytics.get_zero_result_queries(limit).items
    if not misses:
        st.success("No zero-result searches recorded 🎉")
        return

    for s in misses:
        st.write(f"**{s.query}** — {format_ts(s.occurred_at)}")


def actions_sidebar():
    st.sidebar.subheader("Actions")

    if st.sidebar.button("🔄 Refresh"):
        st.rerun()

    try:
        export = analytics.export_data()
        st.sidebar.download_button(
            "📥 Export",
            data=export.content,
            file_name=export.filename,
            mime=export.mime_type,
            on_click=lambda: logger.info("Analytics export downloaded: {}", export.filename),
        )
    except ExportError as e:
        st.sidebar.error(e.message)

    if st.sidebar.button("🗑️ Clear Data"):
        st.session_state["confirm_clear"] = True

    if st.session_state.get("confirm_clear"):
        st.sidebar.warning("Clear all analytics data? This cannot be undone.")
        col1, col2 = st.sidebar.columns(2)
        if col1.button("Yes, clear"):
            analytics.clear_data()
            logger.info("Analytics data cleared from dashboard")
            st.session_state["confirm_clear"] = False
            st.rerun()
        if col2.button("Cancel"):
            st.session_state["confirm_clear"] = False
            st.rerun()


def main():
    if "page_tracker" not in st.session_state:
        st.session_state["page_tracker"] = PageViewTracker(container.tracking)
    st.session_state["page_tracker"].navigate(DASHBOARD_PATH)

    st.title("📈 Usage Analytics Dashboard")
    st.markdown("*Privacy-respecting analytics stored locally on this device*")

    limit = st.sidebar.slider("Rows per section", min_value=5, max_value=50, value=DASHBOARD_LIMIT, step=5)
    actions_sidebar()

    stats_section()
    top_pages_section(limit)

    col1, col2 = st.columns(2)
    with col1:
        recent_searches_section(limit)
    with col2:
        zero_results_section(limit)

    st.sidebar.markdown("---")
    st.sidebar.caption(f"Last updated: {datetime.now():%Y-%m-%d %H:%M:%S}")


if __name__ == "__main__":
    main()
