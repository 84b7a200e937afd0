# ═══════════════════════════════════════════════════════════════════════════════
# DataFit Lab — Canonical Constants Registry
# © 2026 DataFit Lab. All rights reserved.
#
# Single source of truth for every numeric assumption behind the value
# proposition calculator, plus the default Scenario State.
# All modules MUST import from here — never redefine constants locally.
#
# This file has ZERO Streamlit, ZERO network, and ZERO side-effect imports.
# It is safe to import in any context, including unit tests without a
# running Streamlit server.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

# ─────────────────────────────────────────────────────────────────────────────
# RELIABILITY ASSUMPTIONS
# Used by: core/reliability.py
# ─────────────────────────────────────────────────────────────────────────────

# Analyst time spent correcting one bad record by hand
MINUTES_PER_CORRECTION: float = 3.0  # minutes / correction

# Flat month used for the dollar estimate (not a calendar computation)
WORKING_DAYS_PER_MONTH: int = 20  # analyst days / month

# Target error rate must sit at least this far below the baseline
TARGET_ERROR_MARGIN_PCT: float = 0.1  # percentage points

# Absolute floor for the target error rate
TARGET_ERROR_FLOOR_PCT: float = 0.05  # %


# ─────────────────────────────────────────────────────────────────────────────
# CAPACITY PLANNER ASSUMPTIONS
# Used by: core/planner.py, app/sections/pipeline.py
# ─────────────────────────────────────────────────────────────────────────────

COVERAGE_MIN_PCT: int  = 30
COVERAGE_MAX_PCT: int  = 95
COVERAGE_STEP_PCT: int = 5

# Minimum visible width of a per-source progress bar
MIN_BAR_WIDTH_PCT: float = 8.0


# ─────────────────────────────────────────────────────────────────────────────
# INPUT WIDGET BOUNDS — Reliability pulse
# Used by: app/sections/reliability.py
# ─────────────────────────────────────────────────────────────────────────────

RECORDS_PER_DAY_MIN: int       = 10_000
BASELINE_ERROR_MIN_PCT: float  = 0.1
BASELINE_ERROR_STEP_PCT: float = 0.1
TARGET_ERROR_MIN_PCT: float    = 0.05
TARGET_ERROR_STEP_PCT: float   = 0.05
ANALYST_RATE_MIN_USD: int      = 50


# ─────────────────────────────────────────────────────────────────────────────
# DEFAULT SCENARIO STATE
# Used by: app/session.py
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_PROFILE: str = "Sector Analyst"

DEFAULT_SELECTED_SOURCES: tuple[str, ...] = (
    "Market data (Bloomberg)",
    "Alt data (card, satellite)",
    "Broker research PDFs",
)

DEFAULT_COVERAGE_PCT: int         = 65
DEFAULT_RECORDS_PER_DAY: int      = 180_000
DEFAULT_BASELINE_ERROR_PCT: float = 2.1
DEFAULT_TARGET_ERROR_PCT: float   = 0.4
DEFAULT_ANALYST_RATE_USD: int     = 175  # $ / hour

DEFAULT_SPRINT_LENGTH: str = "2 weeks"

DEFAULT_DELIVERABLES: tuple[str, ...] = (
    "Schema reconciliation playbook",
    "Automated anomaly detection run",
    "Analyst-ready research bundle",
)

DEFAULT_PRIORITY_SOURCE: str = "Market data (Bloomberg)"
DEFAULT_DATA_GOAL: str = "Hit <1% error rate before distributing models to PMs"
