"""Plain-text rendering for the library vertical.

Turns catalog listings and notifications into the human-readable lines the
console demo prints.
"""

from typing import Iterable

from core.models.library import Book
from core.notifications import LendingEvent


def render_book(book: Book) -> str:
    return f"- {book.title} (State: {book.state.label})"


def render_catalog(books: Iterable[Book], heading: str = "Library Book Collection") -> str:
    """Render a heading followed by one line per book."""
    lines = [f"\n{heading}:\n"]
    rows = [render_book(book) for book in books]
    if not rows:
        lines.append("(no books)")
    lines.extend(rows)
    return "\n".join(lines)


def render_event(event: LendingEvent) -> str:
    return event.message
