"""
Lending Event Log - Append-Only Notification Stream.

Every action attempted on a book, including denied ones, produces exactly one
human-readable event. Events are:
- Appended to an in-memory log (never removed)
- Written as a single line to a stdlib logger
- Fanned out to registered subscribers
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field

from patterns.book_states import BookTransition
from patterns.domain_config import LendingConfig

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    CATALOG_OPENED = "catalog.opened"
    BOOK_ACTION = "book.action"


class LendingEvent(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    kind: EventKind
    message: str
    title: Optional[str] = None
    action: Optional[str] = None
    outcome: Optional[str] = None
    changed: bool = False
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


EventSubscriber = Callable[[LendingEvent], None]


class EventLog:
    """Append-only log of lending notifications."""

    def __init__(self, logger_name: str = "lending.events", level: int = logging.INFO):
        self._logger = logging.getLogger(logger_name)
        self._level = level
        self._events: list[LendingEvent] = []
        self._subscribers: list[EventSubscriber] = []

    @classmethod
    def from_config(cls, config: LendingConfig) -> "EventLog":
        level = getattr(logging, config.event_log_level.upper(), None)
        if not isinstance(level, int):
            logger.warning(
                "Unknown event log level %r, falling back to INFO", config.event_log_level
            )
            level = logging.INFO
        return cls(logger_name=config.event_logger_name, level=level)

    # --- Recording ---

    def record_transition(self, transition: BookTransition) -> LendingEvent:
        """Record the outcome of an action attempted on a book."""
        return self._append(LendingEvent(
            kind=EventKind.BOOK_ACTION,
            message=transition.message,
            title=transition.title,
            action=transition.action.value,
            outcome=transition.outcome.value,
            changed=transition.changed,
        ))

    def record_opened(self, library_name: str) -> LendingEvent:
        """Record the one-time construction of a catalog."""
        return self._append(LendingEvent(
            kind=EventKind.CATALOG_OPENED,
            message=f"{library_name} initialized.",
        ))

    def _append(self, event: LendingEvent) -> LendingEvent:
        self._events.append(event)
        self._logger.log(self._level, event.message)
        for subscriber in list(self._subscribers):
            try:
                subscriber(event)
            except Exception:
                # A failing subscriber must not abort the action that was recorded.
                logger.exception("Event subscriber %r failed on %s", subscriber, event.kind.value)
        return event

    # --- Subscribers ---

    def subscribe(self, callback: EventSubscriber) -> None:
        """Register a callback invoked with every new event."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: EventSubscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    # --- Reading ---

    @property
    def events(self) -> tuple[LendingEvent, ...]:
        return tuple(self._events)

    def latest(self) -> Optional[LendingEvent]:
        return self._events[-1] if self._events else None

    def for_title(self, title: str) -> list[LendingEvent]:
        return [e for e in self._events if e.title == title]

    def __len__(self) -> int:
        return len(self._events)
