from __future__ import annotations

import logging
from datetime import date

import pytest

from core.services.calendar import UniformDayPolicy, WorkingCalendarPolicy
from infra import logging_config
from infra.services import bootstrap
from infra.tracing import TraceIdLogFilter, bind_trace_id, current_trace_id


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _flush(root: logging.Logger) -> None:
    for handler in root.handlers:
        handler.flush()


def test_bind_trace_id_scopes_and_generates():
    assert current_trace_id() is None
    with bind_trace_id() as generated:
        assert generated.startswith("rse-")
        assert current_trace_id() == generated
        with bind_trace_id("inner") as inner:
            assert current_trace_id() == inner == "inner"
        assert current_trace_id() == generated
    assert current_trace_id() is None


def test_trace_filter_stamps_records():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    TraceIdLogFilter().filter(record)
    assert record.trace_id == "-"
    with bind_trace_id("abc"):
        TraceIdLogFilter().filter(record)
    assert record.trace_id == "abc"


def test_setup_logging_writes_trace_ids_to_rotating_file(tmp_path, root_logger):
    log_file = logging_config.setup_logging(log_dir=tmp_path / "logs")
    with bind_trace_id("trace-42"):
        logging.getLogger("core.services.availability").warning("conflicts found")
    _flush(root_logger)

    assert log_file.name == "scheduling.log"
    assert "trace=trace-42 core.services.availability - conflicts found" in log_file.read_text(encoding="utf-8")


def test_bootstrap_migrates_logs_and_serves(tmp_path, root_logger):
    db_url = f"sqlite:///{(tmp_path / 'rse.db').as_posix()}"
    graph = bootstrap(db_url, log_dir=tmp_path / "logs")
    try:
        assert isinstance(graph.policy, UniformDayPolicy)
        r = graph.resource_service.create_resource("Started up", "engineering")
        with bind_trace_id("boot-1"):
            graph.availability_service.set_unavailability(r.id, date(2025, 1, 1), date(2025, 1, 1), "leave")
        _flush(root_logger)
        text = (tmp_path / "logs" / "scheduling.log").read_text(encoding="utf-8")
        assert "Services ready" in text
        assert "trace=boot-1 core.services.availability.service" in text
    finally:
        graph.session.close()

    stored = bootstrap(db_url, log_dir=tmp_path / "logs", use_stored_calendar=True)
    try:
        assert isinstance(stored.policy, WorkingCalendarPolicy)
        assert [x.name for x in stored.resource_service.list_resources()] == ["Started up"]
    finally:
        stored.session.close()
