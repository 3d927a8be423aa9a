# infra/db/base.py
from __future__ import annotations
import logging
import os
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infra.path import default_db_path

logger = logging.getLogger(__name__)

Base = declarative_base()


def default_db_url() -> str:
    override = (os.getenv("RSE_DB_URL") or "").strip()
    if override:
        return override
    # absolute path in the per-user data dir
    return f"sqlite:///{default_db_path().as_posix()}"


def build_engine(db_url: str | None = None) -> Engine:
    url = db_url or default_db_url()
    logger.info("Using database at: %s", url)
    return create_engine(url, echo=False, future=True)


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker:
    return sessionmaker(bind=build_engine(), autoflush=False, autocommit=False, future=True)


def SessionLocal():
    return get_session_factory()()
