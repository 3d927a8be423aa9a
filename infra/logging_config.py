# infra/logging_config.py
from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from infra.path import user_data_dir
from infra.tracing import TraceIdLogFilter

LOG_FORMAT = "%(asctime)s [%(levelname)s] trace=%(trace_id)s %(name)s - %(message)s"


def setup_logging(log_dir: Path | None = None, level: int = logging.INFO) -> Path:
    """Root logger -> rotating ``scheduling.log`` plus console, both carrying the bound trace id."""
    log_dir = log_dir or (user_data_dir() / "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "scheduling.log"

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    stamp = TraceIdLogFilter()
    handlers: list[logging.Handler] = [
        RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=5, encoding="utf-8"),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.addFilter(stamp)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    root.info("Logging to %s", log_file)
    return log_file
