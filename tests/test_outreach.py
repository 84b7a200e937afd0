# © 2026 DataFit Lab. All rights reserved.
# DataFit Lab — Automated Testing Suite for follow-up and sprint brief text

import sys
import os
from datetime import date

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from core.outreach import build_sprint_brief, generate_script


# ─────────────────────────────────────────────────────────────────────────────
# 1. Follow-up script
# ─────────────────────────────────────────────────────────────────────────────
def test_empty_fields_fall_back_to_defaults():
    script = generate_script("", "", "Sector Analyst")
    assert script == (
        "Hi team,\n\n"
        "Thanks for previewing DataFit. We'll configure the selected pipeline, "
        "align on the Sector Analyst workflow, and capture before/after validation "
        "receipts for your diligence package.\n\n"
        "Talk soon,\nDataFit Lab"
    )


def test_values_are_substituted():
    script = generate_script("Priya", "Vendor ESG feeds", "Data Ops Lead")
    assert script.startswith("Hi Priya,\n")
    assert "configure the Vendor ESG feeds pipeline" in script
    assert "align on the Data Ops Lead workflow" in script
    assert "team" not in script


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_blank_name_counts_as_empty(blank):
    assert generate_script(blank, "Broker research PDFs", "Portfolio Strategist").startswith("Hi team,")


def test_script_is_idempotent():
    args = ("Sam", "Alt data (card, satellite)", "Portfolio Strategist")
    assert generate_script(*args) == generate_script(*args)


# ─────────────────────────────────────────────────────────────────────────────
# 2. Sprint brief
# ─────────────────────────────────────────────────────────────────────────────
def test_sprint_brief_lines():
    brief = build_sprint_brief(
        date(2026, 10, 19),
        "2 weeks",
        ["Schema reconciliation playbook", "Automated anomaly detection run"],
        "Sector Analyst",
    )
    assert brief.splitlines() == [
        "Kickoff: 2026-10-19",
        "Cadence: 2 weeks",
        "Deliverables: Schema reconciliation playbook, Automated anomaly detection run",
        "Owner: Sector Analyst",
    ]


def test_sprint_brief_without_deliverables_reads_tbd():
    brief = build_sprint_brief("2026-11-02", "1 week", [], "Data Ops Lead")
    assert "Deliverables: TBD" in brief
    assert "Kickoff: 2026-11-02" in brief
