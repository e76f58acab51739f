"""F1 Tire Strategy — Streamlit + Plotly over the Pitwall analytics backend."""

from __future__ import annotations

import datetime

import plotly.graph_objects as go
import streamlit as st

from pitwall import PitwallError

from shared import (
    PLOTLY_LAYOUT_DEFAULTS,
    SortKey,
    compound_label,
    format_consistency,
    format_degradation,
    format_lap_time,
    is_degrading,
)
from shared.fetchers import fetch_stint_analysis, fetch_strategy, get_service

SESSION_OPTIONS = ["R", "SPRINT", "Q", "FP1", "FP2", "FP3"]

SORT_LABELS = {
    "Driver": SortKey.DRIVER_CODE,
    "Stint length": SortKey.STINT_LENGTH,
    "Fastest lap": SortKey.FASTEST_LAP,
    "Consistency": SortKey.CONSISTENCY,
    "Degradation": SortKey.DEGRADATION,
}

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="F1 Tire Strategy",
    page_icon="\U0001f3ce️",
    layout="wide",
)


# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("Strategy Analysis")

current_year = datetime.date.today().year
year = st.sidebar.selectbox("Year", list(range(current_year, 2017, -1)))
event = st.sidebar.text_input("Event", value="Bahrain Grand Prix").strip()
session = st.sidebar.selectbox("Session", SESSION_OPTIONS)

if not event:
    st.info("Enter an event name in the sidebar.")
    st.stop()

service = get_service()

st.title(f"{event} {year} — {session}")

overview_tab, detail_tab = st.tabs(["Overview", "Stint Detail"])


# ── Overview: strategy bars ordered by classification ───────────────────────

with overview_tab:
    with st.spinner("Loading strategy data..."):
        try:
            strategies, results = fetch_strategy(year, event, session)
        except PitwallError as exc:
            st.error(f"Failed to load tire strategy data: {exc}")
            strategies, results = [], []

    overview = service.build_overview(strategies, results, session)

    if not overview.rows:
        st.warning("No tire strategy data found for this session.")
    else:
        fig = go.Figure()
        labels = [
            f"{row.driver_code} {row.position_label}".strip() for row in overview.rows
        ]
        for label, row in zip(labels, overview.rows):
            for bar in row.bars:
                laps = bar.end_lap - bar.start_lap + 1
                fig.add_trace(go.Bar(
                    x=[laps],
                    y=[label],
                    base=[bar.start_lap - 1],
                    orientation="h",
                    marker_color=bar.color,
                    marker_line=dict(color="#333333", width=1),
                    showlegend=False,
                    hovertemplate=(
                        f"{row.driver_code}<br>{compound_label(bar.compound)}<br>"
                        f"Laps {bar.start_lap}–{bar.end_lap} ({laps})"
                        "<extra></extra>"
                    ),
                ))

        fig.update_layout(
            **PLOTLY_LAYOUT_DEFAULTS,
            barmode="overlay",
            xaxis_title="Lap Number",
            xaxis_range=[0, overview.max_laps],
            yaxis=dict(autorange="reversed"),
            height=max(200, 28 * len(overview.rows)),
        )
        st.plotly_chart(fig, use_container_width=True)


# ── Stint detail: sortable metrics table ─────────────────────────────────────

with detail_tab:
    sort_cols = st.columns([3, 1])
    sort_label = sort_cols[0].selectbox("Sort by", ["(driver, stint)", *SORT_LABELS])
    descending = sort_cols[1].toggle("Descending", value=False)

    with st.spinner("Loading stint analysis..."):
        try:
            stints = fetch_stint_analysis(year, event, session)
        except PitwallError as exc:
            st.error(f"Failed to load stint analysis data: {exc}")
            stints = []

    table = service.build_stint_table(
        stints,
        session,
        sort_key=SORT_LABELS.get(sort_label),
        descending=descending,
    )

    if not table.rows:
        st.warning("No stint analysis data available for this session.")
    else:
        table_rows = []
        for rec in table.rows:
            row = {
                "Driver": rec.driver_code,
                "Stint": rec.stint_number,
                "Compound": compound_label(rec.compound),
                "Length": f"{rec.stint_length} laps ({rec.start_lap}–{rec.end_lap})",
                "Fastest": format_lap_time(rec.fastest_lap),
                "Average": format_lap_time(rec.avg_lap_time),
            }
            if table.show_race_metrics:
                trend = "▲" if is_degrading(rec.degradation) else "▼"
                row["Consistency (σ)"] = format_consistency(rec.consistency)
                row["Degradation"] = (
                    f"{format_degradation(rec.degradation)} {trend}"
                    if rec.degradation is not None
                    else format_degradation(None)
                )
            table_rows.append(row)

        st.dataframe(table_rows, use_container_width=True, hide_index=True)

        if table.show_race_metrics:
            st.caption(
                "**Consistency (σ):** standard deviation of lap times, first and "
                "last lap of each stint excluded. Lower is more consistent.  \n"
                "**Degradation:** change in lap time per lap over the same laps. "
                "Positive means getting slower."
            )
