import logging
import os
import sys
from contextlib import nullcontext
from types import SimpleNamespace

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.sections import intake, pipeline, reliability
from core.planner import SOURCE_CATALOG, compute_plan


def _fake_st(monkeypatch, **state):
    errors = []
    values = {
        "lead_name": "",
        "lead_email": "",
        "priority_source": "Market data (Bloomberg)",
        "profile": "Sector Analyst",
        "success_script": None,
    }
    values.update(state)
    fake = SimpleNamespace(session_state=SimpleNamespace(**values), error=errors.append)
    monkeypatch.setattr(intake, "st", fake)
    return fake, errors


# ─────────────────────────────────────────────────────────────────────────────
# Intake form
# ─────────────────────────────────────────────────────────────────────────────
def test_submit_generates_script(monkeypatch):
    fake, errors = _fake_st(monkeypatch, lead_email="pm@fund.com")
    assert intake.handle_submit() is True
    assert errors == []
    script = fake.session_state.success_script
    assert script.startswith("Hi team,")
    assert "Market data (Bloomberg) pipeline" in script
    assert "Sector Analyst workflow" in script


def test_submit_without_email_shows_error(monkeypatch):
    fake, errors = _fake_st(monkeypatch)
    assert intake.handle_submit() is False
    assert errors == ["Work email is required."]
    assert fake.session_state.success_script is None


def test_submit_log_omits_email(monkeypatch, caplog):
    _fake_st(monkeypatch, lead_email="pm@fund.com")
    with caplog.at_level(logging.INFO, logger=intake.__name__):
        intake.handle_submit()
    assert "Follow-up script generated" in caplog.text
    assert "pm@fund.com" not in caplog.text


# ─────────────────────────────────────────────────────────────────────────────
# Pipeline chart data
# ─────────────────────────────────────────────────────────────────────────────
def test_plan_frame_matches_plan():
    plan = compute_plan(SOURCE_CATALOG, ["Alt data (card, satellite)", "Market data (Bloomberg)"], 65)
    df = pipeline.plan_frame(plan)
    assert list(df["Source"]) == ["Market data (Bloomberg)", "Alt data (card, satellite)"]
    assert list(df["Hours returned"]) == [4, 5]
    assert list(df["Anomalies flagged"]) == [0.5, 0.7]


def test_plan_frame_empty_keeps_columns():
    df = pipeline.plan_frame([])
    assert df.empty
    assert "Hours returned" in df.columns


# ─────────────────────────────────────────────────────────────────────────────
# Page rendering with a stand-in Streamlit
# ─────────────────────────────────────────────────────────────────────────────
def _page_st(**state):
    captions = []
    fake = SimpleNamespace(
        session_state=SimpleNamespace(**state),
        markdown=lambda *args, **kwargs: None,
        slider=lambda *args, **kwargs: None,
        number_input=lambda *args, **kwargs: None,
        columns=lambda spec: [nullcontext() for _ in range(spec if isinstance(spec, int) else len(spec))],
        container=nullcontext,
        caption=captions.append,
    )
    return fake, captions


def _patch_pipeline(monkeypatch, **state):
    fake, _ = _page_st(**state)
    calls = {"html": [], "card": [], "chart": []}
    monkeypatch.setattr(pipeline, "st", fake)
    monkeypatch.setattr(pipeline, "_render_chips", lambda: None)
    monkeypatch.setattr(pipeline, "render_html", calls["html"].append)
    monkeypatch.setattr(pipeline, "render_bar", lambda *args, **kwargs: None)
    monkeypatch.setattr(pipeline, "render_card", lambda *args, **kwargs: calls["card"].append(args))
    monkeypatch.setattr(pipeline, "_render_chart", calls["chart"].append)
    return calls


def test_empty_selection_shows_prompt_instead_of_figures(monkeypatch):
    calls = _patch_pipeline(monkeypatch, selected_sources=[], automation_coverage=65)
    pipeline.render()

    assert any(pipeline.EMPTY_PLAN_PROMPT in h for h in calls["html"]), "Prompt was not rendered"
    assert calls["card"] == [], "No totals may be shown for an empty selection"
    assert calls["chart"] == [], "No chart may be shown for an empty selection"


def test_selection_shows_totals_and_chart(monkeypatch):
    calls = _patch_pipeline(
        monkeypatch,
        selected_sources=["Market data (Bloomberg)", "Alt data (card, satellite)"],
        automation_coverage=65,
    )
    pipeline.render()

    assert not any(pipeline.EMPTY_PLAN_PROMPT in h for h in calls["html"])
    assert [args[:2] for args in calls["card"]] == [
        ("Weekly hours returned", "9"),
        ("Anomalies caught upfront", "1.2"),
    ]
    assert len(calls["chart"]) == 1


def _render_reliability(monkeypatch, baseline, target):
    fake, captions = _page_st(
        records_per_day=180_000,
        baseline_error_rate=baseline,
        target_error_rate=target,
        avg_analyst_rate=175,
    )
    cards = []
    monkeypatch.setattr(reliability, "st", fake)
    monkeypatch.setattr(reliability, "render_card", lambda *args, **kwargs: cards.append(args))
    reliability.render()
    return cards, captions


def test_reliability_cards_show_reference_figures(monkeypatch):
    cards, captions = _render_reliability(monkeypatch, 2.1, 0.4)
    assert cards[0][1:3] == ("153.0 hrs", "3,060 avoided corrections")
    assert cards[1][1:3] == ("$535,500", "Assumes 20 analyst days/month")
    assert captions == [], "Target inside the bounds needs no explanation"


def test_target_above_baseline_explains_held_target(monkeypatch):
    _, captions = _render_reliability(monkeypatch, 2.1, 3.0)
    assert captions == ["Target held at 2.00% so it stays below the baseline."]
