"""Library API router - catalog listing and lending actions.

Books are addressed by their catalog position. Lending actions always
succeed at the HTTP level: a denied borrow or reserve returns 200 with
``changed: false`` and the denial message. Only unknown positions (404) and
invalid bodies (422) are errors.

The LibraryAccess instance is injected via FastAPI Depends from app.state.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from core.models.library import Book
from verticals.library.facade import LibraryAccess
from verticals.library.models.schemas import (
    BookCreate,
    BookResponse,
    PatronRequest,
    TransitionResponse,
)

router = APIRouter()


def get_library(request: Request) -> LibraryAccess:
    return request.app.state.library


def _get_book_or_404(library: LibraryAccess, position: int) -> Book:
    book = library.get_book(position)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


# ============================================================================
# Book Endpoints
# ============================================================================

@router.get("/books")
async def list_books(library: LibraryAccess = Depends(get_library)):
    """List every book in insertion order with its current state."""
    books = [
        BookResponse.from_book(position, book)
        for position, book in enumerate(library.list_books())
    ]
    return {"data": books, "count": len(books)}


@router.post("/books", status_code=201, response_model=BookResponse)
async def add_book(request: BookCreate, library: LibraryAccess = Depends(get_library)):
    """Add a new book to the catalog. New books start available."""
    book = request.to_book()
    position = library.add_book(book)
    return BookResponse.from_book(position, book)


@router.get("/books/{position}", response_model=BookResponse)
async def get_book(position: int, library: LibraryAccess = Depends(get_library)):
    book = _get_book_or_404(library, position)
    return BookResponse.from_book(position, book)


# ============================================================================
# Lending Endpoints
# ============================================================================

@router.post("/books/{position}/borrow", response_model=TransitionResponse)
async def borrow_book(
    position: int,
    request: PatronRequest,
    library: LibraryAccess = Depends(get_library),
):
    """Borrow a book. Premium books require a premium patron."""
    book = _get_book_or_404(library, position)
    transition = library.borrow_book(book, request.to_user())
    return TransitionResponse.from_transition(position, book, transition)


@router.post("/books/{position}/return", response_model=TransitionResponse)
async def return_book(position: int, library: LibraryAccess = Depends(get_library)):
    book = _get_book_or_404(library, position)
    transition = library.return_book(book)
    return TransitionResponse.from_transition(position, book, transition)


@router.post("/books/{position}/reserve", response_model=TransitionResponse)
async def reserve_book(
    position: int,
    request: PatronRequest,
    library: LibraryAccess = Depends(get_library),
):
    """Reserve an available book. No premium check applies."""
    book = _get_book_or_404(library, position)
    transition = library.reserve_book(book, request.to_user())
    return TransitionResponse.from_transition(position, book, transition)


# ============================================================================
# Event Endpoint
# ============================================================================

@router.get("/events")
async def list_events(library: LibraryAccess = Depends(get_library)):
    """The notification stream, oldest first."""
    events = [event.to_dict() for event in library.events.events]
    return {"data": events, "count": len(events)}
