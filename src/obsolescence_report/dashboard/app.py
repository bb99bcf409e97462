from __future__ import annotations

import asyncio
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import streamlit as st
import sys
import os

# Add the src directory to Python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

from obsolescence_report.analysis import (
    DateWindow,
    ITComponent,
    MalformedDateError,
    ObsolescenceResult,
    compute_obsolescence,
    to_frame,
)
from obsolescence_report.catalog import FetchError, build_fetcher
from obsolescence_report.config import DEFAULT_CONFIG_PATH, load_config
from obsolescence_report.rendering import EMPTY_STATE, compose_report, render_bar_chart


@st.cache_resource
def load_resources(config_path: Path = DEFAULT_CONFIG_PATH):
    cfg = load_config(config_path)
    fetcher = build_fetcher(cfg)
    metadata = asyncio.run(fetcher.fetch_metadata())
    return cfg, fetcher, metadata


def fetch_catalog(fetcher) -> List[ITComponent]:
    # the catalog is re-read on every run; nothing is cached between windows
    return asyncio.run(fetcher.fetch())


def run_report(
    fetcher, window: DateWindow, metadata
) -> Tuple[Optional[ObsolescenceResult], Optional[str]]:
    """Fetch and filter the catalog; returns the result or a message to show instead."""
    try:
        components = fetch_catalog(fetcher)
        return compute_obsolescence(components, window, metadata), None
    except FetchError as exc:
        return None, f"Could not load IT components: {exc}"
    except MalformedDateError as exc:
        return None, f"The catalog contains an invalid date: {exc}"


def render_categories(categories: Dict) -> None:
    cols = st.columns(max(len(categories), 1))
    for idx, group in enumerate(categories.values()):
        cols[idx].metric(group.label, group.count)


def main() -> None:
    st.set_page_config(page_title="IT Component Obsolescence Report", layout="wide")

    cfg, fetcher, metadata = load_resources()
    report_cfg = cfg.get("report", {})
    chart_cfg = cfg.get("chart", {})
    title = report_cfg.get("title", "Obsolescence Report")
    empty_state = report_cfg.get("empty_state", EMPTY_STATE)

    st.title(title)

    default = DateWindow.default()
    sidebar = st.sidebar
    sidebar.header("Period")
    start_date: date = sidebar.date_input("Start date", value=default.start_date)
    end_date: date = sidebar.date_input("End date", value=default.end_date)
    if start_date > end_date:
        sidebar.error("Start date must not be after the end date.")
        st.stop()
    window = DateWindow(start_date, end_date)

    with st.spinner("Loading IT components..."):
        result, error = run_report(fetcher, window, metadata)
    if error:
        st.error(error)
        st.stop()

    start_s, end_s = window.as_strings()
    st.caption(f"{start_s} to {end_s}")

    st.subheader("Obsolescences per IT Component Category")
    chart_png = None
    if result.is_empty:
        st.info(empty_state)
    else:
        chart_png = render_bar_chart(
            result.categories,
            width=float(chart_cfg.get("width", 8.4)),
            height=float(chart_cfg.get("height", 4.0)),
            dpi=int(chart_cfg.get("dpi", 200)),
            default_color=chart_cfg.get("default_color", "#cccccc"),
        )
        st.image(chart_png)
        render_categories(result.categories)

    st.subheader("IT Component Obsolescences")
    if result.is_empty:
        st.info(empty_state)
    else:
        st.dataframe(to_frame(result.items), use_container_width=True, hide_index=True)

    st.subheader("Analysis")
    analysis = st.text_area("Analysis", value="", height=160, label_visibility="collapsed")

    pdf_bytes = compose_report(
        result.items,
        chart_png,
        analysis,
        window.start_date,
        window.end_date,
        title=title,
        empty_state=empty_state,
    )
    st.download_button(
        "Download PDF",
        data=pdf_bytes,
        file_name=f"obsolescence-report-{start_s}-{end_s}.pdf",
        mime="application/pdf",
    )


if __name__ == "__main__":
    main()
