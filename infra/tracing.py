"""Per-request trace ids stamped onto every log record."""
from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterator

_TRACE_ID: ContextVar[str | None] = ContextVar("rse_trace_id", default=None)


def new_trace_id() -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    return f"rse-{stamp}-{uuid.uuid4().hex[:8]}"


def current_trace_id() -> str | None:
    return (_TRACE_ID.get() or "").strip() or None


@contextmanager
def bind_trace_id(trace_id: str | None = None) -> Iterator[str]:
    """Tag every log line written inside the block with one id; a fresh one when none is given."""
    token = _TRACE_ID.set((trace_id or "").strip() or new_trace_id())
    try:
        yield _TRACE_ID.get()
    finally:
        _TRACE_ID.reset(token)


class TraceIdLogFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = current_trace_id() or "-"
        return True


__all__ = ["TraceIdLogFilter", "bind_trace_id", "current_trace_id", "new_trace_id"]
