# ═══════════════════════════════════════════════════════════════════════════════
# DataFit Lab — Reliability Estimator
# © 2026 DataFit Lab. All rights reserved.
#
# Converts an error-rate improvement into analyst hours and dollars.
#   avoided corrections = records/day × (baseline − effective target) / 100
#   hours/day           = avoided corrections × 3 min / 60
#   $/month             = hours/day × 20 days × analyst rate
#
# DISCLAIMER: Illustrative estimate for a marketing calculator. The 20-day
# month is a stated approximation, not a calendar computation.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging

from config.constants import (
    MINUTES_PER_CORRECTION,
    TARGET_ERROR_FLOOR_PCT,
    TARGET_ERROR_MARGIN_PCT,
    WORKING_DAYS_PER_MONTH,
)

logger = logging.getLogger(__name__)


def _non_negative(name: str, value: float) -> float:
    value = float(value)
    if value < 0:
        logger.debug("Clamping %s=%s to 0", name, value)
        return 0.0
    return value


def effective_target_pct(baseline_error_pct: float, target_error_pct: float) -> float:
    """Target error rate actually used in the estimate.

    Held at least ``TARGET_ERROR_MARGIN_PCT`` below the baseline and never
    below ``TARGET_ERROR_FLOOR_PCT``. The floor wins when the baseline is too
    small to leave room for both.
    """
    capped = min(float(target_error_pct), float(baseline_error_pct) - TARGET_ERROR_MARGIN_PCT)
    return max(capped, TARGET_ERROR_FLOOR_PCT)


def compute_reliability(
    records_per_day: float,
    baseline_error_pct: float,
    target_error_pct: float,
    analyst_hourly_rate: float,
) -> dict:
    """
    Estimate daily hours recovered and monthly value unlocked.

    Negative volumes, rates and error percentages are treated as zero, so the
    outputs are never negative. Values are returned unrounded; rounding is a
    display concern.
    """
    records = _non_negative("records_per_day", records_per_day)
    baseline = _non_negative("baseline_error_pct", baseline_error_pct)
    target = _non_negative("target_error_pct", target_error_pct)
    rate = _non_negative("analyst_hourly_rate", analyst_hourly_rate)

    effective = effective_target_pct(baseline, target)
    errors_baseline = records * (baseline / 100.0)
    errors_projected = records * (effective / 100.0)
    avoided = max(errors_baseline - errors_projected, 0.0)

    hours_daily = (avoided * MINUTES_PER_CORRECTION) / 60.0
    monthly = hours_daily * WORKING_DAYS_PER_MONTH * rate

    return {
        "effective_target_pct":  effective,
        "errors_baseline":       errors_baseline,
        "errors_projected":      errors_projected,
        "avoided_corrections":   avoided,
        "hours_recovered_daily": hours_daily,
        "monthly_savings":       monthly,
    }
