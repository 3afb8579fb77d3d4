#!/usr/bin/env python3
"""Launcher for the Spending Dashboard.

Runs Streamlit on ``spending_dashboard/dashboard.py`` with the project root
importable.
"""

import os
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()

if __name__ == "__main__":
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(project_root), env.get("PYTHONPATH")]))
    subprocess.run(
        [sys.executable, "-m", "streamlit", "run", str(project_root / "spending_dashboard" / "dashboard.py")],
        env=env,
    )
