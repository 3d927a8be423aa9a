from pathlib import Path
import logging
import sys

from alembic import command
from alembic.config import Config

from infra.db.base import default_db_url

logger = logging.getLogger(__name__)


def _app_dir() -> Path:
    """
    Directory the app runs from: the PyInstaller extraction dir or exe folder
    when frozen, the project root (infra -> root) in development.
    """
    if getattr(sys, "frozen", False):
        meipass = getattr(sys, "_MEIPASS", None)
        if meipass:
            return Path(meipass).resolve()
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


def _script_location() -> Path:
    app_dir = _app_dir()
    candidates = [app_dir / "migration", app_dir / "_internal" / "migration"]
    for c in candidates:
        if c.exists():
            return c
    raise RuntimeError(
        "Alembic script_location missing. Tried: " + ", ".join(str(p) for p in candidates)
    )


def run_migrations(db_url: str | None = None) -> None:
    """Upgrade the schema at ``db_url`` (default: RSE_DB_URL or the per-user SQLite file) to head."""
    db_url = db_url or default_db_url()
    script_location = _script_location()
    alembic_ini = script_location / "alembic.ini"
    if not alembic_ini.exists():
        raise RuntimeError(f"Alembic config missing: {alembic_ini}")

    cfg = Config(str(alembic_ini))
    cfg.set_main_option("script_location", str(script_location))
    cfg.set_main_option("sqlalchemy.url", db_url)

    logger.info(f"Running migrations against {db_url}")
    command.upgrade(cfg, "head")
