"""Pydantic schemas for API request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field

from core.models.library import Book, User
from patterns.book_states import BookAction, BookState, BookTransition, Outcome


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class BookCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    is_premium: bool = False

    def to_book(self) -> Book:
        return Book(self.title, is_premium=self.is_premium)


class PatronRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    is_premium: bool = False

    def to_user(self) -> User:
        return User(self.name, is_premium=self.is_premium)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class BookResponse(BaseModel):
    position: int
    title: str
    is_premium: bool
    state: BookState
    transition_count: int = 0

    @classmethod
    def from_book(cls, position: int, book: Book) -> "BookResponse":
        return cls(
            position=position,
            title=book.title,
            is_premium=book.is_premium,
            state=book.state,
            transition_count=book.transition_count,
        )


class TransitionResponse(BaseModel):
    book: BookResponse
    action: BookAction
    from_state: BookState
    to_state: BookState
    outcome: Outcome
    changed: bool
    message: str
    denied_by: Optional[str] = None

    @classmethod
    def from_transition(
        cls, position: int, book: Book, transition: BookTransition
    ) -> "TransitionResponse":
        return cls(
            book=BookResponse.from_book(position, book),
            action=transition.action,
            from_state=transition.from_state,
            to_state=transition.to_state,
            outcome=transition.outcome,
            changed=transition.changed,
            message=transition.message,
            denied_by=transition.denied_by,
        )
