"""Enum-based book lifecycle state machine.

Defines the book states as a Python enum with a single, central transition
table. Transitions are pure: given the current state, an action and its
inputs, they return a BookTransition describing the next state and the
outcome. Applying the transition to a book and emitting a notification are
left to the caller (see patterns.repository.Catalog).

Lifecycle::

    AVAILABLE --borrow--> BORROWED --return--> AVAILABLE
    AVAILABLE --reserve--> RESERVED --return--> AVAILABLE

There is no terminal state; a book cycles indefinitely.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from patterns.rules_engine import borrow_rules, evaluate_rules

if TYPE_CHECKING:
    from core.models.library import Book, User


# ---------------------------------------------------------------------------
# State definitions
# ---------------------------------------------------------------------------

class BookState(str, Enum):
    """Mutually exclusive lifecycle states of a book."""

    AVAILABLE = "available"
    BORROWED = "borrowed"
    RESERVED = "reserved"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class BookAction(str, Enum):
    BORROW = "borrow"
    RETURN = "return"
    RESERVE = "reserve"


class Outcome(str, Enum):
    """Result of a single action, one per cell of the transition table."""

    BORROWED = "borrowed"
    PREMIUM_REQUIRED = "premium_required"
    CURRENTLY_BORROWED = "currently_borrowed"
    RESERVED_NOT_BORROWABLE = "reserved_not_borrowable"
    ALREADY_AVAILABLE = "already_available"
    RETURNED = "returned"
    RESERVATION_RELEASED = "reservation_released"
    RESERVED = "reserved"
    BORROWED_NOT_RESERVABLE = "borrowed_not_reservable"
    ALREADY_RESERVED = "already_reserved"


_MESSAGES: dict[Outcome, str] = {
    Outcome.BORROWED: "'{title}' is now borrowed by {user}.",
    Outcome.PREMIUM_REQUIRED: "'{title}' is a premium book. Only premium members can borrow it.",
    Outcome.CURRENTLY_BORROWED: "'{title}' is currently borrowed.",
    Outcome.RESERVED_NOT_BORROWABLE: "'{title}' is reserved and cannot be borrowed.",
    Outcome.ALREADY_AVAILABLE: "'{title}' is already available.",
    Outcome.RETURNED: "'{title}' has been returned and is now available.",
    Outcome.RESERVATION_RELEASED: "'{title}' is now available after being returned.",
    Outcome.RESERVED: "'{title}' is now reserved by {user}.",
    Outcome.BORROWED_NOT_RESERVABLE: "'{title}' is currently borrowed and cannot be reserved.",
    Outcome.ALREADY_RESERVED: "'{title}' is already reserved.",
}


# ---------------------------------------------------------------------------
# Transition rules
# ---------------------------------------------------------------------------

# {(current_state, action): (next_state, outcome)}
# AVAILABLE + BORROW is additionally gated by the access rules.
_BOOK_TRANSITIONS: dict[tuple[BookState, BookAction], tuple[BookState, Outcome]] = {
    (BookState.AVAILABLE, BookAction.BORROW): (BookState.BORROWED, Outcome.BORROWED),
    (BookState.AVAILABLE, BookAction.RETURN): (BookState.AVAILABLE, Outcome.ALREADY_AVAILABLE),
    (BookState.AVAILABLE, BookAction.RESERVE): (BookState.RESERVED, Outcome.RESERVED),
    (BookState.BORROWED, BookAction.BORROW): (BookState.BORROWED, Outcome.CURRENTLY_BORROWED),
    (BookState.BORROWED, BookAction.RETURN): (BookState.AVAILABLE, Outcome.RETURNED),
    (BookState.BORROWED, BookAction.RESERVE): (BookState.BORROWED, Outcome.BORROWED_NOT_RESERVABLE),
    (BookState.RESERVED, BookAction.BORROW): (BookState.RESERVED, Outcome.RESERVED_NOT_BORROWABLE),
    (BookState.RESERVED, BookAction.RETURN): (BookState.AVAILABLE, Outcome.RESERVATION_RELEASED),
    (BookState.RESERVED, BookAction.RESERVE): (BookState.RESERVED, Outcome.ALREADY_RESERVED),
}


# ---------------------------------------------------------------------------
# Transition record
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BookTransition:
    """Record of a single action attempted on a book."""

    title: str
    action: BookAction
    from_state: BookState
    to_state: BookState
    outcome: Outcome
    user_name: Optional[str] = None
    denied_by: Optional[str] = None
    # Inputs the transition was computed from, so it can be re-derived.
    book_is_premium: bool = False
    user_is_premium: bool = False
    premium_enforced: bool = True

    @property
    def changed(self) -> bool:
        """True if the action moved the book to a different state."""
        return self.from_state is not self.to_state

    @property
    def message(self) -> str:
        return _MESSAGES[self.outcome].format(title=self.title, user=self.user_name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "action": self.action.value,
            "from_state": self.from_state.value,
            "to_state": self.to_state.value,
            "outcome": self.outcome.value,
            "changed": self.changed,
            "user_name": self.user_name,
            "denied_by": self.denied_by,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Transition functions
# ---------------------------------------------------------------------------

def transition(
    state: BookState,
    action: BookAction,
    book: Book,
    user: Optional[User] = None,
    enforce_premium: bool = True,
) -> BookTransition:
    """Compute the result of applying ``action`` to a book in ``state``.

    Never raises for a valid (state, action) pair and never mutates the book.
    Denied actions come back as a transition with ``changed == False``.
    """
    next_state, outcome = _BOOK_TRANSITIONS[(state, action)]
    denied_by = None

    if state is BookState.AVAILABLE and action is BookAction.BORROW:
        gate = evaluate_rules(*borrow_rules(book, user, enforce_premium=enforce_premium))
        if not gate.all_passed:
            next_state, outcome = state, Outcome.PREMIUM_REQUIRED
            denied_by = gate.failed[0].rule_name

    return BookTransition(
        title=book.title,
        action=action,
        from_state=state,
        to_state=next_state,
        outcome=outcome,
        user_name=user.name if user is not None else None,
        denied_by=denied_by,
        book_is_premium=book.is_premium,
        user_is_premium=user.is_premium if user is not None else False,
        premium_enforced=enforce_premium,
    )


def borrow(state: BookState, book: Book, user: User, enforce_premium: bool = True) -> BookTransition:
    return transition(state, BookAction.BORROW, book, user, enforce_premium=enforce_premium)


def return_book(state: BookState, book: Book) -> BookTransition:
    return transition(state, BookAction.RETURN, book)


def reserve(state: BookState, book: Book, user: User) -> BookTransition:
    # Reservation is unconditional: no access rules apply.
    return transition(state, BookAction.RESERVE, book, user)


def allowed_actions(state: BookState) -> list[BookAction]:
    """Actions that move a book out of ``state``, ignoring access rules."""
    return [
        action
        for (from_state, action), (next_state, _) in _BOOK_TRANSITIONS.items()
        if from_state is state and next_state is not state
    ]
