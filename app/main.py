# ═══════════════════════════════════════════════════════════════════════════════
# DataFit Lab — Value Proposition Calculator
# © 2026 DataFit Lab. All rights reserved.
#
# Landing page for a hypothetical buy-side data validation product.
# Every derived figure is recomputed from the Scenario State on each
# Streamlit rerun; nothing is cached or persisted.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

# Load .env from project root (parent directory of app/)
_env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")
load_dotenv(_env_path)

import streamlit as st

# ─────────────────────────────────────────────────────────────────────────────
# PATH SETUP — Ensure core and config modules are accessible
# ─────────────────────────────────────────────────────────────────────────────
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from app.branding import PAGE_CONFIG, inject_branding, render_footer
from app.session import _get_setting, init_session
from app.sections import blueprint, hero, intake, pipeline, profile, reliability, sprint

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_name = str(_get_setting("DATAFIT_LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run() -> None:
    st.set_page_config(**PAGE_CONFIG)
    _configure_logging()
    inject_branding()
    init_session()

    hero.render_topbar()
    hero.render_hero()
    hero.render_copilot()
    profile.render()
    pipeline.render()
    reliability.render()
    sprint.render()
    intake.render()
    blueprint.render()
    render_footer()


run()
