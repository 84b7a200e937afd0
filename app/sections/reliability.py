"""Renders the Reliability pulse section."""
from __future__ import annotations

import streamlit as st

from app.branding import render_card
from app.utils import _safe_number, format_count, format_currency
from config.constants import (
    ANALYST_RATE_MIN_USD,
    BASELINE_ERROR_MIN_PCT,
    BASELINE_ERROR_STEP_PCT,
    RECORDS_PER_DAY_MIN,
    TARGET_ERROR_MIN_PCT,
    TARGET_ERROR_STEP_PCT,
    WORKING_DAYS_PER_MONTH,
)
from core.reliability import compute_reliability


def render() -> None:
    st.markdown("## Reliability pulse")

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.number_input("Records per day", min_value=RECORDS_PER_DAY_MIN, step=10_000, key="records_per_day")
    with c2:
        st.number_input(
            "Baseline error rate (%)",
            min_value=BASELINE_ERROR_MIN_PCT, step=BASELINE_ERROR_STEP_PCT,
            format="%.2f", key="baseline_error_rate",
        )
    with c3:
        st.number_input(
            "Target error rate (%)",
            min_value=TARGET_ERROR_MIN_PCT, step=TARGET_ERROR_STEP_PCT,
            format="%.2f", key="target_error_rate",
        )
    with c4:
        st.number_input("Avg analyst rate ($/hr)", min_value=ANALYST_RATE_MIN_USD, step=5, key="avg_analyst_rate")

    ss = st.session_state
    res = compute_reliability(
        _safe_number(ss.records_per_day),
        _safe_number(ss.baseline_error_rate),
        _safe_number(ss.target_error_rate),
        _safe_number(ss.avg_analyst_rate),
    )

    k1, k2 = st.columns(2)
    with k1:
        render_card(
            "Daily hours recovered",
            f"{res['hours_recovered_daily']:.1f} hrs",
            f"{format_count(res['avoided_corrections'])} avoided corrections",
            "accent-aqua",
        )
    with k2:
        render_card(
            "Monthly value unlocked",
            format_currency(res["monthly_savings"]),
            f"Assumes {WORKING_DAYS_PER_MONTH} analyst days/month",
            "accent-pulse",
        )

    if res["effective_target_pct"] != _safe_number(ss.target_error_rate):
        st.caption(
            f"Target held at {res['effective_target_pct']:.2f}% so it stays below the baseline."
        )
