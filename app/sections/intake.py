"""
Renders the Intake + follow-up form.

Submitting generates the follow-up reply locally and stores it in the
Scenario State; nothing is sent anywhere. The work email is required.
"""
from __future__ import annotations

import html
import logging

import streamlit as st

from app.branding import render_html
from app.utils import validate_work_email
from config.catalogs import SOURCE_NAMES
from core.outreach import generate_script

logger = logging.getLogger(__name__)


def handle_submit() -> bool:
    """Validate the form values and store the generated reply.

    Returns True when a script was generated.
    """
    ss = st.session_state
    ok, message = validate_work_email(ss.lead_email)
    if not ok:
        logger.info("Lead form rejected: %s", message)
        st.error(message)
        return False

    ss.success_script = generate_script(ss.lead_name, ss.priority_source, ss.profile)
    logger.info(
        "Follow-up script generated (profile=%s, source=%s)", ss.profile, ss.priority_source
    )
    return True


def render() -> None:
    st.markdown("## Intake + follow-up")
    st.caption("Record GitHub URL, screenshots, and analyst goals.")

    with st.form(key="lead_form"):
        c1, c2 = st.columns(2)
        with c1:
            st.text_input("Name", key="lead_name")
            st.selectbox("Priority data source", SOURCE_NAMES, key="priority_source")
        with c2:
            st.text_input("Work email", key="lead_email", placeholder="you@fund.com")
            st.text_area("Definition of done", key="data_goal")
        submitted = st.form_submit_button("Generate follow-up script")

    if submitted:
        handle_submit()

    if st.session_state.success_script:
        st.markdown("**Autogenerated reply**")
        render_html(f'<div class="df-pre">{html.escape(st.session_state.success_script)}</div>')
