# ═══════════════════════════════════════════════════════════════════════════════
# DataFit Lab — Session State Management
# © 2026 DataFit Lab. All rights reserved.
#
# Single responsibility: own the complete st.session_state initialisation
# contract (the Scenario State) for the landing page.
#
# Rules:
#   • init_session() is idempotent — call it every run, it never overwrites
#     existing values (uses setdefault exclusively).
#   • No module outside this file may write a NEW top-level session key
#     without first registering it here.
#   • Reading st.session_state keys from any module is unrestricted.
#   • _get_setting() is the sole configuration access point.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import os
from datetime import date

import streamlit as st

from config.constants import (
    DEFAULT_ANALYST_RATE_USD,
    DEFAULT_BASELINE_ERROR_PCT,
    DEFAULT_COVERAGE_PCT,
    DEFAULT_DATA_GOAL,
    DEFAULT_DELIVERABLES,
    DEFAULT_PRIORITY_SOURCE,
    DEFAULT_PROFILE,
    DEFAULT_RECORDS_PER_DAY,
    DEFAULT_SELECTED_SOURCES,
    DEFAULT_SPRINT_LENGTH,
    DEFAULT_TARGET_ERROR_PCT,
)


# ─────────────────────────────────────────────────────────────────────────────
# CONFIGURATION ACCESS POINT
# The ONLY function in the application permitted to read st.secrets or
# os.getenv.  All callers use _get_setting() — never st.secrets directly.
# ─────────────────────────────────────────────────────────────────────────────

def _get_setting(key: str, default: str = "") -> str:
    """Read a setting from Streamlit Secrets, falling back to environment variable.

    Priority: st.secrets[key]  →  os.getenv(key, default)

    Never raises; returns ``default`` if the key is absent from both sources.
    """
    try:
        return st.secrets[key]
    except (KeyError, AttributeError, FileNotFoundError):
        return os.getenv(key, default)


# ─────────────────────────────────────────────────────────────────────────────
# SESSION STATE INITIALISATION
# ─────────────────────────────────────────────────────────────────────────────

def init_session() -> None:
    """Idempotently initialise all Scenario State keys.

    Uses ``st.session_state.setdefault()`` throughout — existing values are
    never overwritten.  Call this right after ``st.set_page_config()`` and
    ``inject_branding()``.

    Session key registry (authoritative):

    Profile
    ───────
    profile                  str          Active analyst profile label

    Pipeline scope
    ──────────────
    selected_sources         list[str]    Selected source names, in click order
    automation_coverage      int          Automation coverage (%), 30–95

    Reliability pulse
    ─────────────────
    records_per_day          int          Records processed per day
    baseline_error_rate      float        Current error rate (%)
    target_error_rate        float        Target error rate (%)
    avg_analyst_rate         int          Analyst hourly rate ($)

    Sprint builder
    ──────────────
    kickoff                  date         Sprint kickoff date (today)
    sprint_length            str          One of SPRINT_LENGTHS
    deliverables             list[str]    Selected deliverables, in click order

    Intake
    ──────
    lead_name                str          Visitor name (optional)
    lead_email               str          Work email (required on submit)
    priority_source          str          Source to configure first
    data_goal                str          Definition of done
    success_script           str | None   Last generated follow-up reply
    """
    ss = st.session_state

    # ── Profile ───────────────────────────────────────────────────────────────
    ss.setdefault("profile", DEFAULT_PROFILE)

    # ── Pipeline scope ────────────────────────────────────────────────────────
    ss.setdefault("selected_sources",    list(DEFAULT_SELECTED_SOURCES))
    ss.setdefault("automation_coverage", DEFAULT_COVERAGE_PCT)

    # ── Reliability pulse ─────────────────────────────────────────────────────
    ss.setdefault("records_per_day",     DEFAULT_RECORDS_PER_DAY)
    ss.setdefault("baseline_error_rate", DEFAULT_BASELINE_ERROR_PCT)
    ss.setdefault("target_error_rate",   DEFAULT_TARGET_ERROR_PCT)
    ss.setdefault("avg_analyst_rate",    DEFAULT_ANALYST_RATE_USD)

    # ── Sprint builder ────────────────────────────────────────────────────────
    ss.setdefault("kickoff",       date.today())
    ss.setdefault("sprint_length", DEFAULT_SPRINT_LENGTH)
    ss.setdefault("deliverables",  list(DEFAULT_DELIVERABLES))

    # ── Intake ────────────────────────────────────────────────────────────────
    ss.setdefault("lead_name",       "")
    ss.setdefault("lead_email",      "")
    ss.setdefault("priority_source", DEFAULT_PRIORITY_SOURCE)
    ss.setdefault("data_goal",       DEFAULT_DATA_GOAL)
    ss.setdefault("success_script",  None)
