# ═══════════════════════════════════════════════════════════════════════════════
# DataFit Lab — Capacity Planner
# © 2026 DataFit Lab. All rights reserved.
#
# Hours returned and anomalies caught per data source for a given automation
# coverage. Quick-estimate arithmetic: per-source figures are rounded first and
# the totals add up the rounded figures.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, Sequence

from config.catalogs import SOURCE_MATRIX
from config.constants import MIN_BAR_WIDTH_PCT


@dataclass(frozen=True)
class SourceStat:
    """One catalog data feed."""

    name: str
    manual_hours: float  # analyst hours / week
    anomaly_rate: float  # % of records


@dataclass(frozen=True)
class PlanEntry:
    """Derived savings for one selected source. Computed, never stored."""

    name: str
    manual_hours: float
    anomaly_rate: float
    hours_saved: int
    anomaly_catch: float


SOURCE_CATALOG: tuple[SourceStat, ...] = tuple(SourceStat(**row) for row in SOURCE_MATRIX)


def _round_half_up(value: float, places: int = 0) -> float:
    """Round on the exact binary value with halves going up.

    ``round()`` would send 2.5 to 2; a visitor expects 3.
    """
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-places)
    # quantize needs enough digits for the whole result, however large
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + places + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def _clamp(value: float, low: float, high: float | None = None) -> float:
    value = max(float(value), low)
    return min(value, high) if high is not None else value


def compute_plan(
    sources: Sequence[SourceStat],
    selected: Iterable[str],
    coverage_pct: float,
) -> list[PlanEntry]:
    """
    Build the per-source plan for the selected feeds.

    Output follows catalog order, not selection order. Sources that are
    selected but absent from the catalog are ignored. ``coverage_pct`` is
    clamped to [0, 100]; negative catalog figures count as zero.

    hours_saved   = round(manual_hours × coverage)
    anomaly_catch = round1(anomaly_rate × coverage)
    """
    chosen = set(selected)
    if not chosen:
        return []

    coverage = _clamp(coverage_pct, 0.0, 100.0) / 100.0
    plan = []
    for source in sources:
        if source.name not in chosen:
            continue
        manual_hours = _clamp(source.manual_hours, 0.0)
        anomaly_rate = _clamp(source.anomaly_rate, 0.0)
        plan.append(PlanEntry(
            name=source.name,
            manual_hours=source.manual_hours,
            anomaly_rate=source.anomaly_rate,
            hours_saved=int(_round_half_up(manual_hours * coverage)),
            anomaly_catch=_round_half_up(anomaly_rate * coverage, 1),
        ))
    return plan


def plan_totals(plan: Sequence[PlanEntry]) -> dict:
    """Aggregate hours and anomalies. Sums the already-rounded entries."""
    return {
        "total_hours_saved": sum(entry.hours_saved for entry in plan),
        "total_anomalies":   sum((entry.anomaly_catch for entry in plan), 0.0),
    }


def coverage_bar_pct(entry: PlanEntry) -> float:
    """Width of the per-source progress bar, as a percentage."""
    ratio = entry.hours_saved / (entry.manual_hours or 1) * 100.0
    return min(max(ratio, MIN_BAR_WIDTH_PCT), 100.0)
