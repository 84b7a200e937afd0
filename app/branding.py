"""
Handles all visual branding, including CSS, the logo asset, page
configuration, KPI cards, and the footer rendered at the bottom of the page.

Palette: night #030814 background, pulse #F65A83, aqua #44C2E2, sun #FFAF7B.
Display font Space Grotesk, body font Spline Sans.
"""
from __future__ import annotations

import base64
import html
import logging
from pathlib import Path

import streamlit as st

# ─────────────────────────────────────────────────────────────────────────────
# LANDING PAGE CSS
# ─────────────────────────────────────────────────────────────────────────────
DATAFIT_CSS = """
@import url('https://fonts.googleapis.com/css2?family=Space+Grotesk:wght@400;500;600;700&family=Spline+Sans:wght@400;500;600&display=swap');

/* ── Global Typography ─────────────────────────────────────────────────── */
html, body, [class*="css"] {
  font-family: 'Spline Sans', sans-serif !important;
  font-size: 16px;
  line-height: 1.5;
}
h1, h2, h3, h4 {
  font-family: 'Space Grotesk', sans-serif !important;
  letter-spacing: 0.2px;
}

/* ── App Background ────────────────────────────────────────────────────── */
[data-testid="stAppViewContainer"] { background: #030814; color: #F5F7FB; }
[data-testid="stAppViewContainer"] p,
[data-testid="stAppViewContainer"] label,
[data-testid="stAppViewContainer"] li { color: rgba(255,255,255,.82); }

/* Content must start below Streamlit's sticky header or the header swallows clicks. */
.block-container {
  padding-top: 1.5rem !important;
  max-width: 1152px !important;
  margin: 0 auto !important;
}
header[data-testid="stHeader"] {
  background: transparent !important;
  pointer-events: none !important;
}
header[data-testid="stHeader"] > * { pointer-events: auto !important; }

/* ── Top Bar ───────────────────────────────────────────────────────────── */
.df-topbar {
  display: flex; flex-wrap: wrap; align-items: center; justify-content: space-between; gap: 16px;
  padding: 14px 4px 10px;
  background: linear-gradient(90deg, rgba(3,8,20,.95), rgba(3,8,20,.6));
}
.df-brand { font-family: 'Space Grotesk', sans-serif; font-size: 1.1rem; color: #fff; }
.df-brand-sub { font-size: .7rem; letter-spacing: .3em; text-transform: uppercase; color: rgba(255,255,255,.6); }
.df-nav a { color: rgba(255,255,255,.8); margin-right: 16px; text-decoration: none; font-size: .9rem; }
.df-nav a:hover { color: #FFAF7B; }
.df-cta {
  border: 1px solid rgba(255,255,255,.3); border-radius: 999px; padding: 6px 14px;
  font-size: .7rem; font-weight: 600; letter-spacing: .3em; text-transform: uppercase;
  color: rgba(255,255,255,.8) !important; text-decoration: none;
}
.df-rule { height: 4px; border-radius: 999px; margin-bottom: 28px;
  background: linear-gradient(90deg, #F65A83, #44C2E2, #FFAF7B); }

/* ── Hero ──────────────────────────────────────────────────────────────── */
.df-hero {
  border-radius: 32px; border: 1px solid rgba(255,255,255,.15); padding: 32px;
  background: linear-gradient(135deg, rgba(8,18,37,.9), rgba(30,50,100,.8), rgba(63,127,237,.75));
  box-shadow: 0 25px 80px rgba(3,8,20,.55); margin-bottom: 32px;
}
.df-hero h1 { color: #fff; font-size: 2.6rem !important; margin: 12px 0; }
.df-hero p  { color: rgba(255,255,255,.9); font-size: 1.1rem; }

/* ── Chips & Badges ────────────────────────────────────────────────────── */
.badge-chip {
  display: inline-block; border-radius: 999px; padding: 4px 12px;
  border: 1px solid rgba(255,255,255,.2); font-size: .7rem;
  letter-spacing: .25em; text-transform: uppercase; color: rgba(255,255,255,.75);
}
.channel-chip {
  display: inline-block; border-radius: 999px; padding: 4px 12px; margin: 0 8px 8px 0;
  background: rgba(255,255,255,.2); color: #fff; font-size: .85rem;
}

/* ── Section Cards ─────────────────────────────────────────────────────── */
.section-card {
  border-radius: 24px; border: 1px solid rgba(255,255,255,.1);
  background: rgba(255,255,255,.05); padding: 20px 24px; margin-bottom: 16px;
}
.sec-hdr {
  font-family: 'Space Grotesk', sans-serif; font-size: 1.5rem; color: #fff;
  margin: 28px 0 10px;
}
.sec-sub { font-size: .85rem; color: rgba(255,255,255,.7); }

/* ── KPI Cards ─────────────────────────────────────────────────────────── */
.kpi-card {
  border-radius: 24px; padding: 18px 20px 14px; height: 100%;
  border: 1px solid rgba(255,255,255,.1); background: rgba(255,255,255,.05);
}
.kpi-card.accent-aqua  { border-top: 3px solid #44C2E2; }
.kpi-card.accent-pulse { border-top: 3px solid #F65A83; }
.kpi-card.accent-sun   { border-top: 3px solid #FFAF7B; }
.kpi-label   { font-size: .85rem; color: rgba(255,255,255,.7); margin-bottom: 6px; }
.kpi-value   { font-family: 'Space Grotesk', sans-serif; font-size: 2rem; color: #fff; line-height: 1.1; }
.kpi-subtext { font-size: .75rem; color: #44C2E2; margin-top: 4px; }
.accent-pulse .kpi-subtext { color: #F65A83; }

/* ── Progress Bars ─────────────────────────────────────────────────────── */
.df-bar-track { height: 8px; border-radius: 999px; background: rgba(255,255,255,.1); margin-top: 8px; }
.df-bar-fill  { height: 8px; border-radius: 999px; background: linear-gradient(90deg, #44C2E2, #F65A83); }
.df-bar-sun   { background: #FFAF7B; }

/* ── Empty State & Script ──────────────────────────────────────────────── */
.df-empty {
  border-radius: 16px; border: 1px dashed rgba(255,255,255,.2); padding: 16px;
  font-size: .9rem; color: rgba(255,255,255,.7);
}
.df-pre {
  white-space: pre-wrap; font-family: 'Spline Sans', sans-serif; font-size: .9rem;
  border-radius: 16px; border: 1px solid rgba(255,255,255,.1); padding: 16px;
  background: rgba(255,255,255,.04); color: rgba(255,255,255,.8);
}

/* ── Footer ────────────────────────────────────────────────────────────── */
.df-footer {
  margin-top: 40px; padding: 24px; text-align: center; border-top: 1px solid rgba(255,255,255,.1);
  font-size: .85rem; color: rgba(255,255,255,.6);
}
"""

logger = logging.getLogger(__name__)


# ── Asset helpers ────────────────────────────────────────────────────────────

def _load_asset_uri(filename: str) -> str:
    """Resolves an asset path and returns a base64-encoded data URI."""
    candidate_paths = [
        Path(__file__).resolve().parent.parent / "assets" / filename,
        Path("assets") / filename,
        Path(".") / filename,
    ]
    for path in candidate_paths:
        if path.is_file():
            with open(path, "rb") as f:
                data = f.read()
            b64 = base64.b64encode(data).decode("utf-8")
            return f"data:image/svg+xml;base64,{b64}"
    logger.warning(
        "Asset not found: %s. Searched: %s", filename, [str(p) for p in candidate_paths]
    )
    return ""


@st.cache_resource
def get_logo_uri() -> str:
    """Returns the base64 data URI for the DataFit Lab logo."""
    return _load_asset_uri("datafit_logo.svg")


# ── Injection helpers ────────────────────────────────────────────────────────

def inject_branding() -> None:
    """Injects the full DataFit CSS into the current Streamlit page.
    Safe to call multiple times — Streamlit deduplicates identical markdown."""
    st.markdown(f"<style>{DATAFIT_CSS}</style>", unsafe_allow_html=True)


def render_html(html_content: str) -> None:
    """Central gateway for raw HTML rendering.

    All unsafe_allow_html=True calls outside branding.py must route through
    here. Callers must html.escape() any visitor-supplied values first.
    """
    st.markdown(html_content, unsafe_allow_html=True)


# ── UI component helpers ─────────────────────────────────────────────────────

def render_card(label: str, value: str, subtext: str, accent_class: str = "") -> None:
    """Renders a compact KPI metric card."""
    st.markdown(
        f"""
        <div class="kpi-card {accent_class}"
             role="group"
             aria-label="{html.escape(label)}: {html.escape(value)}">
            <div class="kpi-label"   aria-hidden="true">{html.escape(label)}</div>
            <div class="kpi-value"   aria-hidden="true">{html.escape(value)}</div>
            <div class="kpi-subtext" aria-hidden="true">{html.escape(subtext)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_bar(width_pct: float, extra_class: str = "") -> None:
    """Renders a horizontal progress bar filled to ``width_pct`` percent."""
    st.markdown(
        f'<div class="df-bar-track">'
        f'<div class="df-bar-fill {extra_class}" style="width:{width_pct:.1f}%"></div>'
        f'</div>',
        unsafe_allow_html=True,
    )


def render_footer() -> None:
    """Renders the footer. Must be the final call on the page."""
    logo_uri = get_logo_uri()
    logo_img = (
        f'<img src="{logo_uri}" '
        f'style="height:28px; margin-bottom:12px; opacity:0.85;" '
        f'alt="DataFit Lab">'
        if logo_uri
        else '<div style="font-family:\'Space Grotesk\',sans-serif; color:#fff;">DataFit Lab</div>'
    )
    st.markdown(
        f"""
        <div class="df-footer" role="contentinfo">
            {logo_img}
            <p>
                Push the repo to GitHub, deploy the page, grab hero + reliability
                screenshots, and attach them with your value proposition slide deck.
            </p>
            <p style="font-size:0.75rem;">
                Illustrative estimates only. DataFit is a hypothetical product;
                no data is ingested, validated, or stored.
                &nbsp;·&nbsp; © 2026 DataFit Lab. All rights reserved.
            </p>
        </div>
        """,
        unsafe_allow_html=True,
    )


# ── Streamlit page configuration ─────────────────────────────────────────────
# Imported by main.py and passed directly to st.set_page_config().
PAGE_CONFIG = {
    "page_title": "DataFit Lab | Validation Control Room",
    "page_icon": "🧪",
    "layout": "wide",
    "initial_sidebar_state": "collapsed",
    "menu_items": {
        "About": (
            "**DataFit Lab — Buy-side data validation lab**\n\n"
            "Interactive value proposition calculator. Results are illustrative "
            "estimates for a hypothetical product."
        ),
    },
}
