# infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_NAME = "ResourceScheduling"
COMPANY_NAME = "TECHASH"


def user_data_dir() -> Path:
    """
    Per-user data directory holding the database, logs and exported reports:

    Windows:  %APPDATA%\\TECHASH\\ResourceScheduling
    macOS:    ~/Library/Application Support/TECHASH/ResourceScheduling
    Linux:    $XDG_DATA_HOME/TECHASH/ResourceScheduling (~/.local/share by default)
    """
    if sys.platform.startswith("win"):
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))

    path = base / COMPANY_NAME / APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError:
        # read-only profile: fall back to a dot-folder in home
        path = Path.home() / f".{APP_NAME}"
        path.mkdir(parents=True, exist_ok=True)
    return path


def default_db_path() -> Path:
    return user_data_dir() / "resource_scheduling.db"


def default_reports_dir() -> Path:
    path = user_data_dir() / "reports"
    path.mkdir(parents=True, exist_ok=True)
    return path
