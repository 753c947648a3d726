"""Test the lending event log."""
import logging

from core.models.library import Book, User
from core.notifications import EventKind, EventLog
from patterns.book_states import BookState, borrow, return_book
from patterns.domain_config import LendingConfig
from patterns.repository import Catalog


def test_record_transition():
    log = EventLog()
    event = log.record_transition(borrow(BookState.AVAILABLE, Book.regular("Naruto"), User("Naldo")))
    assert event.kind is EventKind.BOOK_ACTION
    assert event.title == "Naruto"
    assert event.action == "borrow"
    assert event.outcome == "borrowed"
    assert event.changed
    assert event.message == "'Naruto' is now borrowed by Naldo."
    assert log.latest() is event


def test_log_is_append_only():
    log = EventLog()
    book = Book.regular("Naruto")
    log.record_opened("Library")
    log.record_transition(return_book(BookState.AVAILABLE, book))
    snapshot = log.events
    log.record_transition(return_book(BookState.AVAILABLE, book))
    assert len(snapshot) == 2
    assert len(log) == 3
    assert log.events[:2] == snapshot


def test_events_written_to_logger(caplog):
    log = EventLog(logger_name="lending.test")
    with caplog.at_level(logging.INFO, logger="lending.test"):
        log.record_opened("Library")
    assert "Library initialized." in caplog.messages


def test_from_config_level(caplog):
    log = EventLog.from_config(LendingConfig(event_log_level="WARNING", event_logger_name="lending.warn"))
    with caplog.at_level(logging.WARNING, logger="lending.warn"):
        log.record_opened("Library")
    assert caplog.records[-1].levelno == logging.WARNING


def test_from_config_unknown_level_falls_back():
    log = EventLog.from_config(LendingConfig(event_log_level="LOUD"))
    assert log._level == logging.INFO


def test_subscribers_receive_events():
    log = EventLog()
    received = []
    log.subscribe(received.append)
    log.record_opened("Library")
    log.unsubscribe(received.append)
    log.record_opened("Library")
    assert len(received) == 1
    assert received[0].kind is EventKind.CATALOG_OPENED


def test_for_title():
    log = EventLog()
    log.record_transition(return_book(BookState.AVAILABLE, Book.regular("Naruto")))
    log.record_transition(return_book(BookState.AVAILABLE, Book.regular("Bleach")))
    assert [e.title for e in log.for_title("Bleach")] == ["Bleach"]


def test_event_to_dict():
    event = EventLog().record_opened("Library")
    data = event.to_dict()
    assert data["kind"] == "catalog.opened"
    assert data["title"] is None
    assert isinstance(data["occurred_at"], str)


def test_failing_subscriber_does_not_stop_fan_out(caplog):
    log = EventLog()
    received = []

    def broken(event):
        raise RuntimeError("subscriber down")

    log.subscribe(broken)
    log.subscribe(received.append)
    with caplog.at_level(logging.ERROR, logger="core.notifications.event_log"):
        event = log.record_opened("Library")
    assert received == [event]
    assert len(log) == 1
    assert any("subscriber" in r.getMessage() for r in caplog.records if r.levelno == logging.ERROR)


def test_failing_subscriber_keeps_catalog_action_total():
    log = EventLog()
    received = []

    def broken(event):
        raise RuntimeError("subscriber down")

    log.subscribe(broken)
    log.subscribe(received.append)
    catalog = Catalog(events=log)
    book = Book.regular("Naruto")
    catalog.add_book(book)

    result = catalog.borrow_book(book, User("Naldo"))
    assert result.changed
    assert book.state is BookState.BORROWED
    assert len(received) == 1
