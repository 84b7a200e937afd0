"""
Renders the Data pipeline scope section.

Source chips and the automation coverage slider write to the Scenario State;
the plan is recomputed from scratch on every rerun.
"""
from __future__ import annotations

import html

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from app.branding import render_bar, render_card, render_html
from app.utils import _safe_number, toggle_item
from config.constants import COVERAGE_MAX_PCT, COVERAGE_MIN_PCT, COVERAGE_STEP_PCT
from core.planner import (
    SOURCE_CATALOG,
    PlanEntry,
    compute_plan,
    coverage_bar_pct,
    plan_totals,
)

CHART_LAYOUT = dict(
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
    font=dict(family="Spline Sans, sans-serif", size=11, color="#F5F7FB"),
    margin=dict(t=20, b=10, l=0, r=0),
    height=280,
    yaxis=dict(gridcolor="rgba(255,255,255,.08)", zerolinecolor="rgba(255,255,255,.15)"),
    xaxis=dict(tickfont=dict(size=10)),
    barmode="group",
    legend=dict(orientation="h", y=1.12),
)

EMPTY_PLAN_PROMPT = "Select at least one data source to see the automation plan."


def plan_frame(plan: list[PlanEntry]) -> pd.DataFrame:
    """Tabulate a plan for charting. Column order is the display order."""
    return pd.DataFrame(
        [
            {
                "Source": entry.name,
                "Manual hrs/wk": entry.manual_hours,
                "Hours returned": entry.hours_saved,
                "Anomaly rate (%)": entry.anomaly_rate,
                "Anomalies flagged": entry.anomaly_catch,
            }
            for entry in plan
        ],
        columns=["Source", "Manual hrs/wk", "Hours returned", "Anomaly rate (%)", "Anomalies flagged"],
    )


def _toggle_source(name: str) -> None:
    st.session_state.selected_sources = toggle_item(st.session_state.selected_sources, name)


def _render_chips() -> None:
    selected = st.session_state.selected_sources
    cols = st.columns(3)
    for i, source in enumerate(SOURCE_CATALOG):
        with cols[i % 3]:
            st.button(
                source.name,
                key=f"btn_source_{source.name}",
                type="primary" if source.name in selected else "secondary",
                on_click=_toggle_source,
                args=(source.name,),
                use_container_width=True,
            )


def _render_chart(df: pd.DataFrame) -> None:
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=df["Source"], y=df["Manual hrs/wk"], name="Manual hrs/wk",
        marker_color="rgba(255,255,255,.25)",
    ))
    fig.add_trace(go.Bar(
        x=df["Source"], y=df["Hours returned"], name="Hours returned",
        marker_color="#44C2E2",
    ))
    fig.update_layout(**CHART_LAYOUT)
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def render() -> None:
    st.markdown("## Data pipeline scope")
    _render_chips()

    st.slider(
        "Automation coverage (%)",
        min_value=COVERAGE_MIN_PCT,
        max_value=COVERAGE_MAX_PCT,
        step=COVERAGE_STEP_PCT,
        key="automation_coverage",
    )

    plan = compute_plan(
        SOURCE_CATALOG,
        st.session_state.selected_sources,
        _safe_number(st.session_state.automation_coverage),
    )
    if not plan:
        render_html(f'<div class="df-empty">{EMPTY_PLAN_PROMPT}</div>')
        return

    for entry in plan:
        with st.container():
            c_name, c_value = st.columns([3, 1])
            with c_name:
                render_html(
                    f'<strong>{html.escape(entry.name)}</strong><br>'
                    f'<span class="sec-sub">Manual hours {entry.manual_hours:g}/wk • '
                    f'Anomaly rate {entry.anomaly_rate:g}%</span>'
                )
            with c_value:
                render_html(
                    f'<div style="text-align:right;"><strong>{entry.hours_saved} hrs returned</strong><br>'
                    f'<span class="sec-sub">{entry.anomaly_catch:g} anomalies flagged</span></div>'
                )
            render_bar(coverage_bar_pct(entry))

    totals = plan_totals(plan)
    c1, c2 = st.columns(2)
    with c1:
        render_card("Weekly hours returned", f"{totals['total_hours_saved']}", "Across selected feeds", "accent-aqua")
    with c2:
        render_card("Anomalies caught upfront", f"{totals['total_anomalies']:.1f}", "Flagged before modeling", "accent-pulse")

    _render_chart(plan_frame(plan))
