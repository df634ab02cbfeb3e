from __future__ import annotations

from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = Path(__file__).resolve().parent.parent / "app.py"


def test_force_toggle_defaults_to_cached_analysis():
    at = AppTest.from_file(str(APP), default_timeout=30).run()

    assert not at.exception
    force = at.sidebar.toggle[0]
    assert force.label == "Force fresh analysis"
    assert force.value is False
