"""Renders the analyst profile calibrator."""
from __future__ import annotations

import streamlit as st

from app.branding import render_html
from config.catalogs import ANALYST_PROFILES


def _select_profile(label: str) -> None:
    st.session_state.profile = label


def render() -> None:
    st.markdown("## Analyst profile calibrator")

    active = st.session_state.profile
    cols = st.columns(len(ANALYST_PROFILES))
    for col, (label, meta) in zip(cols, ANALYST_PROFILES.items()):
        with col:
            st.button(
                label,
                key=f"btn_profile_{label}",
                type="primary" if label == active else "secondary",
                on_click=_select_profile,
                args=(label,),
                use_container_width=True,
            )
            st.caption(meta["pain"])

    meta = ANALYST_PROFILES[st.session_state.profile]
    render_html(
        '<div class="section-card">'
        '<p class="sec-sub">Workflow promise</p>'
        f'<h3 style="margin:0;">{meta["hook"]}</h3>'
        f'<p class="sec-sub">Focus levers: {", ".join(meta["levers"])}</p>'
        '</div>'
    )
