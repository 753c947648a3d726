"""Console walkthrough of the lending lifecycle.

Replays the reference scenario against a LibraryAccess facade: two books,
a regular and a premium patron, borrowing, returning and reserving. Every
notification is printed as it is recorded.

Run with::

    python -m verticals.library.demo
"""

import logging
from typing import Callable, Optional

from core.models.library import Book, User
from verticals.library.config import config
from verticals.library.facade import LibraryAccess
from verticals.library.renderer import render_catalog, render_event

logger = logging.getLogger(__name__)


def run_demo(
    library: Optional[LibraryAccess] = None,
    out: Callable[[str], None] = print,
) -> LibraryAccess:
    """Run the scenario and return the facade for inspection."""
    library = library or LibraryAccess(config=config)

    def show(event):
        out(render_event(event))

    library.events.subscribe(show)
    try:
        _play_scenario(library, out)
    finally:
        library.events.unsubscribe(show)

    logger.debug("Demo finished with %d events", len(library.events))
    return library


def _play_scenario(library: LibraryAccess, out: Callable[[str], None]) -> None:
    naruto = Book.regular("Naruto")
    dragon_ball = Book.premium("Dragon Ball Z")
    library.add_book(naruto)
    library.add_book(dragon_ball)
    out(render_catalog(library.iterator(), "Initial Library Book Collection"))

    naldo = User("Naldo", is_premium=False)
    sam = User("Sam", is_premium=True)

    library.borrow_book(naruto, naldo)
    library.borrow_book(dragon_ball, naldo)
    library.borrow_book(dragon_ball, sam)
    out(render_catalog(library.iterator(), "After Borrowing Books"))

    library.return_book(naruto)
    library.return_book(dragon_ball)
    out(render_catalog(library.iterator(), "After Returning Books"))

    out("\nReserving a Book:")
    library.reserve_book(naruto, naldo)
    out(render_catalog(library.iterator(), "After Reserving the Book"))

    out("\nAttempting to Borrow a Reserved Book:")
    library.borrow_book(naruto, sam)

    library.return_book(naruto)
    out(render_catalog(library.iterator(), "After Returning the Reserved Book"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    run_demo()
