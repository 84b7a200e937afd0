"""Utility helpers used across the DataFit Lab page.

Keeping non-Streamlit logic in a separate module makes it easier to test
without spinning up a full Streamlit runtime.
"""

from __future__ import annotations

import math
import re
from typing import Any, Sequence

# Shape check only: one "@", a dot in the domain, no whitespace.
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


# ─────────────────────────────────────────────────────────────────────────────
# NUMERIC SAFETY HELPERS
# ─────────────────────────────────────────────────────────────────────────────

def _safe_number(value: Any, default: float = 0.0) -> float:
    """Coerce a potentially-missing or malformed value to float.

    Returns ``default`` for ``None``, non-numeric strings, and any value that
    cannot be converted by ``float()``.  Never raises.
    """
    try:
        if value is None:
            return default
        return float(value)
    except (TypeError, ValueError):
        return default


# ─────────────────────────────────────────────────────────────────────────────
# SELECTION CHIPS
# ─────────────────────────────────────────────────────────────────────────────

def toggle_item(items: Sequence[str], item: str) -> list[str]:
    """Return a new list with ``item`` removed if present, else appended.

    Selection order is preserved for display; the input is not mutated.
    """
    if item in items:
        return [entry for entry in items if entry != item]
    return [*items, item]


# ─────────────────────────────────────────────────────────────────────────────
# NUMBER FORMATTING
# ─────────────────────────────────────────────────────────────────────────────

def format_count(value: float) -> str:
    """Whole number with thousands separators, e.g. ``3,060``."""
    return f"{math.floor(_safe_number(value) + 0.5):,}"


def format_currency(value: float) -> str:
    """Whole dollars with thousands separators, e.g. ``$535,500``."""
    return f"${format_count(value)}"


# ─────────────────────────────────────────────────────────────────────────────
# LEAD CAPTURE VALIDATION
# ─────────────────────────────────────────────────────────────────────────────

def validate_work_email(email: str) -> tuple[bool, str]:
    """Check the required work email field.

    Returns ``(is_valid, message)``; ``message`` is empty when valid.
    """
    email = (email or "").strip()
    if not email:
        return False, "Work email is required."
    if "\n" in email or "\r" in email:
        return False, "Work email contains invalid line-break characters."
    if not _EMAIL_RE.match(email):
        return False, "Enter a valid work email address."
    return True, ""
