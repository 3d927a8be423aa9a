"""Change notifications for calendar views and report screens; every payload is a resource id."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.resources_changed = Signal()
        self.assignments_changed = Signal()
        self.availability_changed = Signal()


# SINGLE global instance
domain_events = DomainEvents()
