"""
Lending Core Notifications - Human-Readable Event Stream.

Provides the append-only event log that records every catalog construction
and every action attempted on a book:
- EventLog: in-memory log bridged to stdlib logging and subscribers
- LendingEvent: a single notification
"""
from core.notifications.event_log import (
    EventKind,
    EventLog,
    EventSubscriber,
    LendingEvent,
)

__all__ = [
    "EventKind",
    "EventLog",
    "EventSubscriber",
    "LendingEvent",
]
