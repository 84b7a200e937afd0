import os
import subprocess
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_core_no_streamlit():
    """Ensure the calculation engine imports without streamlit installed."""
    result = subprocess.run(
        [sys.executable, "-c",
         "import sys; sys.modules['streamlit']=None; "
         "import core.planner, core.reliability, core.outreach, config.catalogs"],
        capture_output=True,
        cwd=ROOT,
    )
    assert result.returncode == 0, f"Core import failed: {result.stderr.decode()}"
