# ═══════════════════════════════════════════════════════════════════════════════
# DataFit Lab — Outreach Text
# © 2026 DataFit Lab. All rights reserved.
#
# Local text generation only: the follow-up reply shown after the intake form
# is submitted, and the sprint brief preview. Nothing is sent anywhere.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from datetime import date
from typing import Iterable

SCRIPT_TEMPLATE = (
    "Hi {lead_name},\n"
    "\n"
    "Thanks for previewing DataFit. We'll configure the {priority_source} pipeline, "
    "align on the {profile_label} workflow, and capture before/after validation "
    "receipts for your diligence package.\n"
    "\n"
    "Talk soon,\n"
    "DataFit Lab"
)

SPRINT_BRIEF_TEMPLATE = (
    "Kickoff: {kickoff}\n"
    "Cadence: {sprint_length}\n"
    "Deliverables: {deliverables}\n"
    "Owner: {profile_label}"
)


def _or_default(value: str | None, default: str) -> str:
    value = (value or "").strip()
    return value or default


def generate_script(lead_name: str, priority_source: str, profile_label: str) -> str:
    """Render the follow-up reply.

    An empty name becomes "team"; an empty source becomes "selected".
    """
    return SCRIPT_TEMPLATE.format(
        lead_name=_or_default(lead_name, "team"),
        priority_source=_or_default(priority_source, "selected"),
        profile_label=profile_label,
    )


def build_sprint_brief(
    kickoff: date | str,
    sprint_length: str,
    deliverables: Iterable[str],
    profile_label: str,
) -> str:
    """Render the four-line sprint brief. No deliverables reads as "TBD"."""
    kickoff_text = kickoff.isoformat() if isinstance(kickoff, date) else str(kickoff)
    return SPRINT_BRIEF_TEMPLATE.format(
        kickoff=kickoff_text,
        sprint_length=sprint_length,
        deliverables=", ".join(deliverables) or "TBD",
        profile_label=profile_label,
    )
