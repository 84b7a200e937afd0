"""
Renders the top bar, the hero banner, and the Research Copilot placeholder.
Static copy only; nothing here reads the Scenario State.
"""
from __future__ import annotations

import streamlit as st

from app.branding import get_logo_uri, render_html
from config.catalogs import COPILOT_IDEAS, HERO_CHIPS


def render_topbar() -> None:
    render_html(
        '<div class="df-topbar" role="navigation">'
        '<div><div class="df-brand">DataFit Lab</div>'
        '<div class="df-brand-sub">Experimental nav</div></div>'
        '<div class="df-nav">'
        '<a href="#research-copilot">Chatbot</a>'
        '<a href="#pricing">Pricing</a>'
        '<a href="#api-docs">API Docs</a>'
        '</div>'
        '<a class="df-cta" href="#intake-follow-up">Early access</a>'
        '</div>'
        '<div class="df-rule"></div>'
    )


def render_hero() -> None:
    chips = "".join(f'<span class="channel-chip">{label}</span>' for label in HERO_CHIPS)
    c_copy, c_logo = st.columns([1.1, 0.9])
    with c_copy:
        render_html(
            '<div class="df-hero">'
            '<span class="badge-chip">Buy-side data validation lab</span>'
            '<h1>DataFit Control Room</h1>'
            '<p>Clean, normalize, and explain multi-provider datasets so research analysts '
            'spend time on insight, not reconciliation. Stitch value prop canvases into a '
            'single workspace that catches silent errors before models ship to PMs.</p>'
            f'<div>{chips}</div>'
            '<p style="font-size:0.85rem;">Purpose-built for buy-side research pods</p>'
            '</div>'
        )
    with c_logo:
        logo_uri = get_logo_uri()
        logo = (
            f'<img src="{logo_uri}" alt="DataFit logo" '
            f'style="width:100%; border-radius:16px; background:rgba(255,255,255,.8); padding:16px;">'
            if logo_uri
            else ""
        )
        render_html(
            '<div class="section-card">'
            '<span class="badge-chip">Value DNA ✨</span>'
            f'<div style="margin-top:16px;">{logo}</div>'
            '<p style="margin-top:20px; font-size:0.85rem;">Map value props to customer '
            'pains/gains (see canvas) and capture screenshots for your submission packet.</p>'
            '</div>'
        )


def render_copilot() -> None:
    st.markdown("## Research Copilot")
    render_html('<span class="badge-chip">Coming soon</span>')
    st.write(
        "Embed a schema-aware chatbot that summarizes validation receipts, flags anomalies, "
        "and pushes short-hand notes to analysts inside Slack/Teams before they run a model. "
        "Use this placeholder section while you wire the dedicated page."
    )
    for col, idea in zip(st.columns(len(COPILOT_IDEAS)), COPILOT_IDEAS):
        with col:
            render_html(f'<div class="section-card">{idea}</div>')
