# ═══════════════════════════════════════════════════════════════════════════════
# DataFit Lab — Catalog Registry
# © 2026 DataFit Lab. All rights reserved.
#
# Single source of truth for:
#   • SOURCE_MATRIX       — data feeds with manual effort and anomaly figures
#   • ANALYST_PROFILES    — persona copy for the profile calibrator
#   • DELIVERABLE_OPTIONS — sprint deliverables offered as chips
#   • SPRINT_LENGTHS      — sprint cadence enum
#   • BLUEPRINT           — validation blueprint sections
#   • PRICING_TIERS       — pricing cards
#   • API_LIFECYCLE       — request lifecycle illustration
#
# Every table is built once at import and treated as read-only.
# This file has ZERO Streamlit and ZERO network imports.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

# ─────────────────────────────────────────────────────────────────────────────
# SOURCE CATALOG
# manual_hours  — weekly analyst hours spent cleaning the feed by hand
# anomaly_rate  — share of records flagged as anomalous (%)
# Order is the display order and the order of every derived plan.
# ─────────────────────────────────────────────────────────────────────────────

SOURCE_MATRIX: tuple[dict, ...] = (
    {"name": "Market data (Bloomberg)",    "manual_hours": 6, "anomaly_rate": 0.8},
    {"name": "Alt data (card, satellite)", "manual_hours": 8, "anomaly_rate": 1.1},
    {"name": "Broker research PDFs",       "manual_hours": 5, "anomaly_rate": 0.6},
    {"name": "Internal factor models",     "manual_hours": 4, "anomaly_rate": 0.5},
    {"name": "Vendor ESG feeds",           "manual_hours": 7, "anomaly_rate": 1.0},
    {"name": "Survey + channel checks",    "manual_hours": 3, "anomaly_rate": 0.4},
)

SOURCE_NAMES: tuple[str, ...] = tuple(row["name"] for row in SOURCE_MATRIX)


# ─────────────────────────────────────────────────────────────────────────────
# ANALYST PROFILES
# Keys are the profile labels shown to visitors and substituted into the
# follow-up script and sprint brief.
# ─────────────────────────────────────────────────────────────────────────────

ANALYST_PROFILES: dict[str, dict] = {
    "Sector Analyst": {
        "pain":   "Drowning in inconsistent broker and vendor files before modeling.",
        "hook":   "Automate schema conformance so you can focus on thesis work.",
        "levers": ("Canonical views", "Variant screens", "Traceable fixes"),
    },
    "Data Ops Lead": {
        "pain":   "Manual QC across Excel, SQL, and Python every morning.",
        "hook":   "Centralize validation rules and surface anomalies in minutes.",
        "levers": ("Rules engine", "Lineage audit", "Provider scoring"),
    },
    "Portfolio Strategist": {
        "pain":   "Silent errors undermine confidence heading into IC meetings.",
        "hook":   "Pair anomaly detection with explainable corrections.",
        "levers": ("Anomaly radar", "Impact sims", "Research-ready exports"),
    },
}


# ─────────────────────────────────────────────────────────────────────────────
# SPRINT BUILDER
# ─────────────────────────────────────────────────────────────────────────────

DELIVERABLE_OPTIONS: tuple[str, ...] = (
    "Schema reconciliation playbook",
    "Provider scoring dashboard",
    "Automated anomaly detection run",
    "Data lineage + audit brief",
    "Analyst-ready research bundle",
    "Receipt-ready validation log",
)

SPRINT_LENGTHS: tuple[str, ...] = ("1 week", "2 weeks", "3 weeks", "4 weeks")


# ─────────────────────────────────────────────────────────────────────────────
# LANDING PAGE COPY
# ─────────────────────────────────────────────────────────────────────────────

HERO_CHIPS: tuple[str, ...] = (
    "Schema guardrails",
    "Anomaly radar",
    "Provider receipts",
    "Lineage notes",
    "Analyst handoff",
)

COPILOT_IDEAS: tuple[str, ...] = (
    "Surface silent errors",
    "Translate provider quirks",
    "Auto-generate IC memos",
)

BLUEPRINT: tuple[dict, ...] = (
    {
        "title": "Ingestion & standardization",
        "bullets": (
            "Normalize schemas across Excel, SQL, and Python outputs with reusable mappings.",
            "Tag fields with business definitions so analysts trust column-level lineage.",
        ),
    },
    {
        "title": "Validation & monitoring",
        "bullets": (
            "Layer rulebooks (nulls, drift, outliers) plus adaptive anomaly detection.",
            "Stream corrections back to providers with embedded context and receipts.",
        ),
    },
    {
        "title": "Analyst experience",
        "bullets": (
            "Surface QA alerts inside research notebooks and collaboration tools.",
            "Capture before/after evidence for IC decks and regulatory reviews.",
        ),
    },
)

PRICING_TIERS: tuple[dict, ...] = (
    {"tier": "Pilot",      "desc": "Single pod • 3 feeds • validation receipts", "price": "$4k / mo"},
    {"tier": "Studio",     "desc": "Up to 5 pods • unlimited rulebooks",         "price": "$9k / mo"},
    {"tier": "Enterprise", "desc": "Custom SLAs • lineage export",               "price": "Talk to us"},
)

# Each step widens the illustrative progress bar by 30 percentage points.
API_LIFECYCLE: tuple[dict, ...] = (
    {"endpoint": "/ingest",   "method": "POST", "width_pct": 30},
    {"endpoint": "/validate", "method": "PUT",  "width_pct": 60},
    {"endpoint": "/receipts", "method": "GET",  "width_pct": 90},
)
