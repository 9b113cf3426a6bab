from __future__ import annotations

import os
import sys
from pathlib import Path


def app_dir() -> Path:
    override = os.getenv("ROOZH_HOME", "").strip()
    if override:
        return Path(override).expanduser().resolve()
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[2]
