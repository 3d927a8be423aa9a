import weakref
from datetime import date

from core.events.domain_events import domain_events
from core.events.signal import Signal


def test_signal_connect_emit_disconnect():
    signal = Signal()
    seen: list[str] = []

    def _handler(resource_id: str) -> None:
        seen.append(resource_id)

    signal.connect(_handler)
    signal.connect(_handler)
    assert signal.subscriber_count == 1

    signal.emit("r-1")
    signal.disconnect(_handler)
    signal.emit("r-2")

    assert seen == ["r-1"]


def test_signal_scoped_subscriber_only_hears_its_resource():
    signal = Signal()
    everything: list[str] = []
    only_r2: list[str] = []

    signal.connect(everything.append)
    signal.connect(only_r2.append, resource_id="r-2")

    assert signal.emit("r-1") == 1
    assert signal.emit("r-2") == 2
    assert everything == ["r-1", "r-2"]
    assert only_r2 == ["r-2"]


def test_signal_prunes_dead_weak_proxies():
    signal = Signal()
    seen: list[str] = []

    class _View:
        def refresh(self, payload: str) -> None:
            seen.append(payload)

        def __call__(self, payload: str) -> None:
            self.refresh(payload)

    view = _View()
    proxy = weakref.proxy(view)
    signal.connect(proxy)
    signal.emit("r-1")
    del view

    signal.emit("r-2")

    assert seen == ["r-1"]
    assert signal.subscriber_count == 0


def test_signal_keeps_handler_errors_visible():
    signal = Signal()

    def _boom(_payload: str) -> None:
        raise RuntimeError("boom")

    signal.connect(_boom)

    try:
        signal.emit("x")
        assert False, "Expected RuntimeError to propagate"
    except RuntimeError as exc:
        assert str(exc) == "boom"


def test_services_emit_change_events(services):
    seen: list[tuple[str, str]] = []

    def _on_resource(rid: str) -> None:
        seen.append(("resource", rid))

    def _on_assignment(rid: str) -> None:
        seen.append(("assignment", rid))

    domain_events.resources_changed.connect(_on_resource)
    domain_events.assignments_changed.connect(_on_assignment)
    try:
        r = services["resource_service"].create_resource("Piping lead", "engineering")
        services["assignment_service"].create_assignment(r.id, "Iso checks", date(2025, 1, 1), date(2025, 1, 3))
    finally:
        domain_events.resources_changed.disconnect(_on_resource)
        domain_events.assignments_changed.disconnect(_on_assignment)

    assert seen == [("resource", r.id), ("assignment", r.id)]
