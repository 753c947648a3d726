"""In-memory catalog repository.

The catalog owns the ordered collection of books and is the single boundary
through which books are borrowed, returned and reserved. Each operation:
1. Computes the transition with the pure state machine
2. Applies it to the book
3. Records exactly one notification in the event log

Books are never removed, so a book's position (its index) is stable.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from core.models.library import Book, User
from core.notifications import EventLog
from patterns import book_states
from patterns.book_states import BookTransition
from patterns.domain_config import LendingConfig


# ---------------------------------------------------------------------------
# Iterator
# ---------------------------------------------------------------------------

class BookIterator:
    """Cursor over a sequence of books.

    Not restartable: once exhausted, ask the catalog for a new iterator::

        it = catalog.iterator()
        while it.has_next():
            book = it.next()
    """

    def __init__(self, books: Sequence[Book]):
        self._books = books
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._books)

    def next(self) -> Book:
        if not self.has_next():
            raise StopIteration("No more books in this iterator")
        book = self._books[self._position]
        self._position += 1
        return book

    def __iter__(self) -> "BookIterator":
        return self

    def __next__(self) -> Book:
        return self.next()


# ---------------------------------------------------------------------------
# Read-only view
# ---------------------------------------------------------------------------

class CatalogView(Sequence):
    """Live, read-only sequence over the catalog's books."""

    def __init__(self, books: list[Book]):
        self._books = books

    def __getitem__(self, index):
        return self._books[index]

    def __len__(self) -> int:
        return len(self._books)

    def __repr__(self) -> str:
        return f"CatalogView({self._books!r})"


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class Catalog:
    """Owns the books known to the library.

    Usage::

        catalog = Catalog()
        position = catalog.add_book(Book.premium("Dragon Ball Z"))
        result = catalog.borrow_book(catalog.get_book(position), User("Sam", True))
        if not result.changed:
            print(result.message)
    """

    def __init__(
        self,
        config: Optional[LendingConfig] = None,
        events: Optional[EventLog] = None,
    ):
        self.config = config or LendingConfig.default()
        self.events = events if events is not None else EventLog.from_config(self.config)
        self._books: list[Book] = []

    # -- Collection --

    def add_book(self, book: Book) -> int:
        """Append a book and return its position."""
        self._books.append(book)
        return len(self._books) - 1

    def get_book(self, position: int) -> Optional[Book]:
        """Get a book by position. Returns None if there is no such position."""
        if 0 <= position < len(self._books):
            return self._books[position]
        return None

    def list_books(self) -> CatalogView:
        """All books in insertion order.

        A read-only view of the catalog: books added later and state changes
        are visible through it, but it cannot add or remove books.
        """
        return CatalogView(self._books)

    def iterator(self) -> BookIterator:
        return BookIterator(tuple(self._books))

    def __len__(self) -> int:
        return len(self._books)

    # -- Lending --

    def borrow_book(self, book: Book, user: User) -> BookTransition:
        transition = book_states.borrow(
            book.state, book, user,
            enforce_premium=self.config.enforce_premium_access,
        )
        return self._perform(book, transition)

    def return_book(self, book: Book) -> BookTransition:
        return self._perform(book, book_states.return_book(book.state, book))

    def reserve_book(self, book: Book, user: User) -> BookTransition:
        return self._perform(book, book_states.reserve(book.state, book, user))

    def _perform(self, book: Book, transition: BookTransition) -> BookTransition:
        book.apply(transition)
        self.events.record_transition(transition)
        return transition
