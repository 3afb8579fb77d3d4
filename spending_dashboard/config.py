"""Configuration management for the spending dashboard.

This module centralizes all configuration values including paths,
defaults, and environment variable overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base project root - assumes this file is in spending_dashboard/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Data directories
DATA_DIR = Path(os.getenv("SPENDING_DATA_DIR", _PROJECT_ROOT / "data"))

# Persisted dashboard state (transactions + monthly income)
STATE_PATH = Path(
    os.getenv("SPENDING_STATE_PATH", DATA_DIR / "state.json")
).resolve()

# Monthly income shown before the user enters their own
DEFAULT_INCOME = float(os.getenv("SPENDING_DEFAULT_INCOME", "5000"))

# Essential spending should stay at or below this share of total spending
ESSENTIAL_TARGET_RATIO = float(os.getenv("SPENDING_ESSENTIAL_TARGET", "0.70"))

CURRENCY_SYMBOL = os.getenv("SPENDING_CURRENCY_SYMBOL", "R$")


def ensure_data_directories() -> None:
    """Create all required data directories if they don't exist."""
    for directory in [DATA_DIR, STATE_PATH.parent]:
        directory.mkdir(parents=True, exist_ok=True)
