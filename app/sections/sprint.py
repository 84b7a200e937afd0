"""Renders the Validation sprint builder."""
from __future__ import annotations

import html

import streamlit as st

from app.branding import render_html
from app.utils import toggle_item
from config.catalogs import DELIVERABLE_OPTIONS, SPRINT_LENGTHS
from core.outreach import build_sprint_brief


def _toggle_deliverable(item: str) -> None:
    st.session_state.deliverables = toggle_item(st.session_state.deliverables, item)


def render() -> None:
    st.markdown("## Validation sprint builder")

    c_form, c_brief = st.columns([3, 2])
    with c_form:
        c1, c2 = st.columns(2)
        with c1:
            st.date_input("Sprint kickoff", key="kickoff")
        with c2:
            st.selectbox("Sprint length", SPRINT_LENGTHS, key="sprint_length")

        st.markdown("**Deliverables**")
        cols = st.columns(2)
        for i, item in enumerate(DELIVERABLE_OPTIONS):
            with cols[i % 2]:
                st.button(
                    item,
                    key=f"btn_deliverable_{item}",
                    type="primary" if item in st.session_state.deliverables else "secondary",
                    on_click=_toggle_deliverable,
                    args=(item,),
                    use_container_width=True,
                )

    with c_brief:
        ss = st.session_state
        brief = build_sprint_brief(ss.kickoff, ss.sprint_length, ss.deliverables, ss.profile)
        render_html(f'<div class="df-pre">{html.escape(brief)}</div>')
        st.caption("Capture logs + receipts to prove the value proposition fit.")
