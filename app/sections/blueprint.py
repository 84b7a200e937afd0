"""Renders the Validation blueprint, Pricing, and API Docs sections."""
from __future__ import annotations

import streamlit as st

from app.branding import render_bar, render_html
from config.catalogs import API_LIFECYCLE, BLUEPRINT, PRICING_TIERS


def render_blueprint() -> None:
    st.markdown("## Validation blueprint")
    for section in BLUEPRINT:
        with st.expander(section["title"]):
            for bullet in section["bullets"]:
                st.markdown(f"- {bullet}")


def render_pricing() -> None:
    st.markdown("## Pricing")
    for col, plan in zip(st.columns(len(PRICING_TIERS)), PRICING_TIERS):
        with col:
            render_html(
                '<div class="section-card">'
                f'<span class="badge-chip">{plan["tier"]}</span>'
                f'<h3 style="margin:12px 0 4px;">{plan["price"]}</h3>'
                f'<p class="sec-sub">{plan["desc"]}</p>'
                '</div>'
            )


def render_api_docs() -> None:
    st.markdown("## API Docs")
    st.write(
        "Describe how your validation API will be consumed. Below is a starter linear bar "
        "to illustrate the request lifecycle."
    )
    for step in API_LIFECYCLE:
        c_path, c_method = st.columns([4, 1])
        with c_path:
            st.markdown(f"`{step['endpoint']}`")
        with c_method:
            st.markdown(f"**{step['method']}**")
        render_bar(step["width_pct"], "df-bar-sun")


def render() -> None:
    render_blueprint()
    render_pricing()
    render_api_docs()
