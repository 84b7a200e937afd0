import os
import sys

# ensure the package root is discoverable when pytest adjusts sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app import branding


def test_footer_renders_disclaimer_and_logo(monkeypatch):
    """Capture the footer markdown and check its class, disclaimer and logo.

    The footer should use the ``df-footer`` class and render either an <img>
    (when the logo asset is found) or the text wordmark.
    """
    captured = []

    def fake_markdown(html, unsafe_allow_html=False):
        captured.append(html)

    monkeypatch.setattr(branding.st, "markdown", fake_markdown)
    monkeypatch.setattr(branding, "get_logo_uri", lambda: "data:image/svg+xml;base64,AAAA")

    branding.render_footer()

    footer_call = next((c for c in captured if "All rights reserved" in c), None)
    assert footer_call is not None, "Footer markup was not emitted"
    assert "class=\"df-footer\"" in footer_call or "class='df-footer'" in footer_call
    assert "Illustrative estimates only" in footer_call
    assert "<img" in footer_call, "Expected <img> logo in footer when a logo URI is set"


def test_footer_falls_back_to_wordmark(monkeypatch):
    captured = []
    monkeypatch.setattr(branding.st, "markdown", lambda html, unsafe_allow_html=False: captured.append(html))
    monkeypatch.setattr(branding, "get_logo_uri", lambda: "")

    branding.render_footer()

    assert "<img" not in captured[-1]
    assert "DataFit Lab" in captured[-1]


def test_logo_asset_loads_from_repository():
    uri = branding._load_asset_uri("datafit_logo.svg")
    assert uri.startswith("data:image/svg+xml;base64,"), "Logo asset missing from assets/"


def test_missing_asset_logs_warning(caplog):
    with caplog.at_level("WARNING", logger=branding.__name__):
        assert branding._load_asset_uri("does_not_exist.svg") == ""
    assert "Asset not found" in caplog.text


def test_card_escapes_values(monkeypatch):
    captured = []
    monkeypatch.setattr(branding.st, "markdown", lambda html, unsafe_allow_html=False: captured.append(html))
    branding.render_card("Label <b>", "$1,000", "sub & text")
    assert "Label &lt;b&gt;" in captured[0]
    assert "sub &amp; text" in captured[0]
