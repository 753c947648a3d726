"""Access facade over the catalog.

LibraryAccess defers building its Catalog until it is first opened, either
explicitly with open() or implicitly by any forwarded call. At most one
catalog is ever built per facade, and the first build is announced on the
event log. There is no module-level instance: create one and pass it to
whatever needs it.
"""

from __future__ import annotations

from typing import Callable, Optional

from core.models.library import Book, User
from core.notifications import EventLog
from patterns.book_states import BookTransition
from patterns.domain_config import LendingConfig
from patterns.repository import BookIterator, Catalog, CatalogView

CatalogFactory = Callable[..., Catalog]


class LibraryAccess:
    """Lazily-opened handle to a single catalog."""

    def __init__(
        self,
        config: Optional[LendingConfig] = None,
        events: Optional[EventLog] = None,
        catalog_factory: CatalogFactory = Catalog,
    ):
        self.config = config or LendingConfig.default()
        self.events = events if events is not None else EventLog.from_config(self.config)
        self._catalog_factory = catalog_factory
        self._catalog: Optional[Catalog] = None

    @property
    def is_open(self) -> bool:
        return self._catalog is not None

    def open(self) -> Catalog:
        """Return the backing catalog, building it on first use."""
        if self._catalog is None:
            self._catalog = self._catalog_factory(config=self.config, events=self.events)
            self.events.record_opened(self.config.library_name)
        return self._catalog

    # -- Forwarded operations --

    def add_book(self, book: Book) -> int:
        return self.open().add_book(book)

    def get_book(self, position: int) -> Optional[Book]:
        return self.open().get_book(position)

    def list_books(self) -> CatalogView:
        return self.open().list_books()

    def iterator(self) -> BookIterator:
        return self.open().iterator()

    def borrow_book(self, book: Book, user: User) -> BookTransition:
        return self.open().borrow_book(book, user)

    def return_book(self, book: Book) -> BookTransition:
        return self.open().return_book(book)

    def reserve_book(self, book: Book, user: User) -> BookTransition:
        return self.open().reserve_book(book, user)
